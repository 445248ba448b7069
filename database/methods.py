"""
Database methods for promoter and campaign documents.
Read-only: records are created and edited outside this service.
"""
import json
import logging
from typing import List, Dict, Optional
from database.db import get_connection

logger = logging.getLogger(__name__)


def _document(row: Optional[Dict]) -> Optional[Dict]:
    """Decode JSONB payload (asyncpg returns it as text by default)"""
    if not row:
        return None
    data = row.get('data')
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except ValueError:
            logger.warning(f"Document {row.get('id')} has invalid JSON payload")
            data = {}
    return {"id": row['id'], "data": data if isinstance(data, dict) else {}}


# === Promoters ===

async def get_promoter(doc_id: str) -> Optional[Dict]:
    """Get promoter document by id"""
    async with get_connection() as db:
        return _document(await db.fetchrow("SELECT id, data FROM promoters WHERE id = $1", doc_id))


# === Campaigns ===

async def get_assigned_campaigns(promoter_id: str) -> List[Dict]:
    """Get campaigns whose promoters list contains this promoter"""
    async with get_connection() as db:
        rows = await db.fetch(
            """
            SELECT id, data FROM campaigns
            WHERE data->'promoters' @> jsonb_build_array(jsonb_build_object('promoterId', $1::text))
            ORDER BY id
            """,
            promoter_id,
        )
    return [_document(r) for r in rows]


async def get_campaign(campaign_id: str) -> Optional[Dict]:
    """Get campaign document by id"""
    async with get_connection() as db:
        return _document(await db.fetchrow("SELECT id, data FROM campaigns WHERE id = $1", campaign_id))
