"""Campaigns router: promoter dashboard and campaign details"""
from fastapi import APIRouter, Depends
from typing import Optional
import logging

from campaigns import dashboard
from admin_panel.utils.responses import success, from_error_code

logger = logging.getLogger(__name__)
router = APIRouter(tags=["campaigns"])

# Will be set by setup_routes
get_promoter_id = None


def setup_routes(auth_get_promoter_id):
    """Setup routes with dependencies"""
    global get_promoter_id
    get_promoter_id = auth_get_promoter_id

    @router.get("/dashboard")
    @router.get("/api/dashboard")
    async def dashboard_stats(promoter_id: Optional[str] = Depends(get_promoter_id)):
        # Status is derived on every request, never cached
        result = await dashboard.calculate_dashboard_stats(promoter_id)
        if result.get("error"):
            logger.warning(f"Dashboard unavailable for promoter {promoter_id}: {result['error']}")
            return from_error_code(result["error"])

        result.pop("error")
        return success(result)

    @router.get("/api/campaigns/{campaign_id}")
    async def campaign_details(campaign_id: str):
        result = await dashboard.get_campaign_details(campaign_id)
        if result.get("error"):
            return from_error_code(result["error"])
        return success(result["campaign"])

    return router
