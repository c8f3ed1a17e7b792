"""
Activity feed schema.
"""
from datetime import datetime
from uuid import UUID

from educonnect.schemas.common import CamelModel


class ActivityResponse(CamelModel):
    id: int
    user_id: UUID
    type: str
    description: str
    related_id: int | None
    created_at: datetime
