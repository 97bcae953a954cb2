"""
Dashboard API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from lineage_tracker.api.deps import get_store
from lineage_tracker.schemas import DashboardStats
from lineage_tracker.services.dashboard_service import compute_dashboard_stats
from lineage_tracker.storage import LineageStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    store: LineageStore = Depends(get_store),
) -> DashboardStats:
    """
    Get aggregate counts for the dashboard.
    """
    try:
        return compute_dashboard_stats(store)
    except Exception:
        logger.exception("Failed to compute dashboard stats")
        raise HTTPException(status_code=500, detail="Failed to fetch dashboard stats")
