"""
Shared dependencies. get_current_user is the identity provider seam: it resolves the caller
from a Bearer token, and tests or other deployments override it to plug in another provider.
"""
import logging
from uuid import UUID
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from educonnect.config import settings
from educonnect.database import get_db
from educonnect.errors import AuthenticationError
from educonnect.models.user import User
from educonnect.services.activity import ActivityRecorder
from educonnect.services.auth import decode_access_token
from educonnect.services.dashboard import DashboardAggregator
from educonnect.services.store import EntityStore

security = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Require valid Bearer token; return User or 401."""
    if not credentials or not (getattr(credentials, "credentials", None) or "").strip():
        logger.debug("Auth failed: no Bearer token in request")
        raise AuthenticationError("Not authenticated. Send header: Authorization: Bearer <token>")
    payload = decode_access_token(credentials.credentials)
    if not payload or "sub" not in payload:
        logger.debug("Auth failed: invalid or expired token")
        raise AuthenticationError("Invalid or expired token")
    try:
        user_id = UUID(payload["sub"])
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid or expired token")
    user = db.get(User, user_id)
    if not user:
        raise AuthenticationError("User not found")
    return user


def get_store(db: Session = Depends(get_db)) -> EntityStore:
    return EntityStore(db)


def get_recorder(store: EntityStore = Depends(get_store)) -> ActivityRecorder:
    return ActivityRecorder(store)


def get_aggregator(db: Session = Depends(get_db)) -> DashboardAggregator:
    return DashboardAggregator(db, due_window_days=settings.assignments_due_window_days)
