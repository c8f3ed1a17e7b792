"""
Enrollment request/response schemas.
"""
from datetime import datetime
from uuid import UUID

from pydantic import Field

from educonnect.schemas.common import CamelModel


class EnrollmentCreate(CamelModel):
    course_id: int


class ProgressUpdate(CamelModel):
    progress: int = Field(ge=0, le=100)


class EnrollmentResponse(CamelModel):
    id: int
    student_id: UUID
    course_id: int
    progress: int
    completed: bool
    enrolled_at: datetime
