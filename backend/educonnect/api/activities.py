"""
Activities API: GET /api/activities?limit=N, the caller's feed newest first.
"""
from fastapi import APIRouter, Depends, Query

from educonnect.api.deps import get_current_user, get_recorder
from educonnect.config import settings
from educonnect.models.user import User
from educonnect.schemas.activity import ActivityResponse
from educonnect.services.activity import ActivityRecorder

router = APIRouter(prefix="/api/activities", tags=["activities"])


@router.get("", response_model=list[ActivityResponse])
def list_activities(
    limit: int | None = Query(default=None, ge=1),
    current_user: User = Depends(get_current_user),
    recorder: ActivityRecorder = Depends(get_recorder),
):
    """Caller's activities, newest first. limit defaults to 10 and is capped at ACTIVITIES_MAX_LIMIT."""
    n = limit or settings.activities_default_limit
    n = min(n, settings.activities_max_limit)
    return recorder.recent(current_user.id, n)
