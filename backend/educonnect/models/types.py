"""
DB types and enums shared by the models. Work on both SQLite (local dev and tests) and PostgreSQL.
Timestamps are naive UTC everywhere; use utcnow() rather than datetime.now().
"""
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import String, TypeDecorator


class UuidType(TypeDecorator):
    """UUID that stores as string(36) so it works on SQLite and PostgreSQL."""
    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


class Role(str, enum.Enum):
    STUDENT = "student"
    TEACHER = "teacher"
    PARENT = "parent"
    PRINCIPAL = "principal"
    ADMINISTRATOR = "administrator"


class ActivityType(str, enum.Enum):
    ENROLLMENT = "enrollment"
    SUBMISSION = "submission"
    COURSE_CREATED = "course_created"
    ASSIGNMENT_CREATED = "assignment_created"
    MESSAGE = "message"


def sql_in(enum_cls: type[enum.Enum]) -> str:
    """Render enum values for a CHECK constraint, e.g. "'a', 'b'"."""
    return ", ".join(f"'{m.value}'" for m in enum_cls)


def utcnow() -> datetime:
    """Current time as naive UTC (what SQLite and the DateTime columns store)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime | None) -> datetime | None:
    """Normalize an incoming datetime: aware values are converted to UTC, then tzinfo dropped."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
