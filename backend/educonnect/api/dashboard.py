"""
Dashboard API: GET /api/dashboard/stats, recomputed per request for the caller's role.
"""
from fastapi import APIRouter, Depends

from educonnect.api.deps import get_aggregator, get_current_user
from educonnect.models.user import User
from educonnect.schemas.dashboard import DashboardStats
from educonnect.services.dashboard import DashboardAggregator

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(
    current_user: User = Depends(get_current_user),
    aggregator: DashboardAggregator = Depends(get_aggregator),
):
    return aggregator.stats_for(current_user)
