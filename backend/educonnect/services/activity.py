"""
Activity recorder: appends one feed entry per state-changing action (course created,
enrollment, assignment created, submission).

Recording is best-effort. It runs after the primary write has committed, so a failure here
is logged and swallowed and never rolls back or fails the triggering operation.
"""
import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError

from educonnect.errors import EduConnectError
from educonnect.models.activity import Activity
from educonnect.models.types import ActivityType
from educonnect.services.store import EntityStore

logger = logging.getLogger(__name__)


class ActivityRecorder:
    def __init__(self, store: EntityStore):
        self.store = store

    def record(
        self,
        user_id: uuid.UUID,
        type: ActivityType,
        description: str,
        related_id: int | None = None,
    ) -> Activity | None:
        """Append an activity for user_id. Returns None if the write failed."""
        try:
            activity = self.store.add_activity(user_id, ActivityType(type).value, description, related_id)
        except (SQLAlchemyError, EduConnectError) as e:
            logger.warning(
                "Activity not recorded (user=%s type=%s related=%s): %s",
                user_id, getattr(type, "value", type), related_id, e,
            )
            try:
                self.store.db.rollback()
            except SQLAlchemyError:
                logger.debug("Rollback after failed activity write also failed", exc_info=True)
            return None
        logger.debug("Activity recorded: user=%s type=%s related=%s", user_id, activity.type, related_id)
        return activity

    def recent(self, user_id: uuid.UUID, limit: int) -> list[Activity]:
        """The user's activities, newest first."""
        return self.store.list_activities(user_id, limit)
