"""
Shared fixtures: campaign factory and an in-memory document store
"""
import os
import sys
from typing import Dict, List, Optional

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from database import methods as db_methods
from models.campaign import Campaign


@pytest.fixture
def make_campaign():
    """Build a Campaign with only the fields a test cares about"""
    counter = {"n": 0}

    def _make(start=None, end=None, **kwargs) -> Campaign:
        counter["n"] += 1
        kwargs.setdefault("id", f"c{counter['n']}")
        return Campaign(start_date=start, end_date=end, **kwargs)

    return _make


class FakeStore:
    """Stands in for database.methods, holding documents in dicts"""

    def __init__(self):
        self.promoters: Dict[str, dict] = {}
        self.campaigns: Dict[str, dict] = {}
        self.fail = False

    def _check(self):
        if self.fail:
            raise RuntimeError("Database pool not initialized")

    async def get_promoter(self, doc_id: str) -> Optional[Dict]:
        self._check()
        if doc_id not in self.promoters:
            return None
        return {"id": doc_id, "data": self.promoters[doc_id]}

    async def get_assigned_campaigns(self, promoter_id: str) -> List[Dict]:
        self._check()
        return [
            {"id": cid, "data": data}
            for cid, data in sorted(self.campaigns.items())
            if any(p.get("promoterId") == promoter_id for p in data.get("promoters") or [])
        ]

    async def get_campaign(self, campaign_id: str) -> Optional[Dict]:
        self._check()
        if campaign_id not in self.campaigns:
            return None
        return {"id": campaign_id, "data": self.campaigns[campaign_id]}


@pytest.fixture
def fake_store(monkeypatch):
    store = FakeStore()
    monkeypatch.setattr(db_methods, "get_promoter", store.get_promoter)
    monkeypatch.setattr(db_methods, "get_assigned_campaigns", store.get_assigned_campaigns)
    monkeypatch.setattr(db_methods, "get_campaign", store.get_campaign)
    return store
