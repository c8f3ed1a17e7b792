"""
Assignment request/response schemas. due_date may be sent with a UTC offset; it is stored as naive UTC.
"""
from datetime import datetime

from pydantic import Field, field_validator

from educonnect.models.types import to_naive_utc
from educonnect.schemas.common import CamelModel, strip_required


class AssignmentCreate(CamelModel):
    course_id: int
    title: str = Field(max_length=255)
    description: str | None = None
    due_date: datetime
    max_points: int = Field(default=100, ge=1)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return strip_required(v, "title")

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class AssignmentUpdate(CamelModel):
    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    due_date: datetime | None = None
    max_points: int | None = Field(default=None, ge=1)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str:
        return strip_required(v, "title")

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, v: datetime | None) -> datetime:
        if v is None:
            raise ValueError("dueDate must not be null")
        return to_naive_utc(v)


class AssignmentResponse(CamelModel):
    id: int
    course_id: int
    title: str
    description: str | None
    due_date: datetime
    max_points: int
    created_at: datetime
