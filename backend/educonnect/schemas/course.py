"""
Course request/response schemas.
"""
from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field, field_validator

from educonnect.schemas.common import CamelModel, strip_required

CourseLevel = Literal["beginner", "intermediate", "advanced"]


class CourseCreate(CamelModel):
    title: str = Field(max_length=255)
    description: str | None = None
    level: CourseLevel | None = "beginner"
    duration: str | None = Field(default=None, max_length=100)
    image_url: str | None = Field(default=None, max_length=1024)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return strip_required(v, "title")


class CourseUpdate(CamelModel):
    """Partial update; only fields present in the body are applied."""
    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    level: CourseLevel | None = None
    duration: str | None = Field(default=None, max_length=100)
    image_url: str | None = Field(default=None, max_length=1024)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str:
        # null is rejected too: a course always has a title
        return strip_required(v, "title")


class CourseResponse(CamelModel):
    id: int
    title: str
    description: str | None
    teacher_id: UUID
    level: str | None
    duration: str | None
    image_url: str | None
    is_active: bool
    enrolled_count: int
    created_at: datetime
    updated_at: datetime
