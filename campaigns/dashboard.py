"""
Dashboard Service - Loads a promoter's campaigns and organizes them by status
"""
import logging
from typing import Any, Dict, Optional

from database import methods as db_methods
from models.campaign import Campaign
from models.promoter import Promoter
from campaigns.progress import DistributionProgress
from campaigns.status import aggregate, classify

logger = logging.getLogger(__name__)

# Error codes surfaced to the dashboard
NO_COOKIE = "NO_COOKIE"
NO_PROMOTER_FOUND = "NO_PROMOTER_FOUND"
NO_CAMPAIGN_ID = "NO_CAMPAIGN_ID"
CAMPAIGN_NOT_FOUND = "CAMPAIGN_NOT_FOUND"
SERVER_ERROR = "SERVER_ERROR"


async def calculate_dashboard_stats(promoter_id: Optional[str], now: Any = None) -> Dict[str, Any]:
    """Fetch campaigns assigned to a promoter and bucket them by status"""
    if not promoter_id:
        return {"error": NO_COOKIE}

    try:
        promoter_doc = await db_methods.get_promoter(promoter_id)
        if not promoter_doc:
            return {"error": NO_PROMOTER_FOUND}

        promoter = Promoter.from_document(promoter_id, promoter_doc["data"])
        docs = await db_methods.get_assigned_campaigns(promoter_id)
    except Exception as e:
        logger.exception(f"❌ Error loading dashboard for promoter {promoter_id}: {e}")
        return {"error": SERVER_ERROR}

    stats = aggregate((Campaign.from_document(d["id"], d["data"]) for d in docs), now)
    counts = stats.counts
    logger.info(
        f"🎯 Promoter {promoter.name or promoter_id}: {counts['assigned']} assigned, "
        f"{counts['active']} active, {counts['completed']} completed, {counts['upcoming']} upcoming"
    )
    if stats.unknown:
        logger.warning(f"{len(stats.unknown)} campaign(s) without valid dates for promoter {promoter_id}")

    return {
        "promoterInfo": promoter.to_dict(),
        **stats.to_dict(),
        "error": None,
    }


async def get_campaign_details(campaign_id: Optional[str], now: Any = None) -> Dict[str, Any]:
    """Fetch a single campaign with its derived status, progress and raw document"""
    if not campaign_id:
        return {"error": NO_CAMPAIGN_ID}

    try:
        doc = await db_methods.get_campaign(campaign_id)
    except Exception as e:
        logger.exception(f"❌ Error loading campaign {campaign_id}: {e}")
        return {"error": SERVER_ERROR}

    if not doc:
        return {"error": CAMPAIGN_NOT_FOUND}

    campaign = Campaign.from_document(doc["id"], doc["data"])
    campaign = campaign.with_status(classify(campaign.start_date, campaign.end_date, now))

    return {
        "campaign": {
            **campaign.to_dict(include_full_data=True),
            "progress": DistributionProgress.for_campaign(campaign).to_dict(),
        },
        "error": None,
    }
