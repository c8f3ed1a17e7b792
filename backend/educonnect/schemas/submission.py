"""
Submission request/response schemas.
"""
from datetime import datetime
from uuid import UUID

from pydantic import Field, model_validator

from educonnect.schemas.common import CamelModel


class SubmissionCreate(CamelModel):
    assignment_id: int
    content: str | None = None
    file_url: str | None = None

    @model_validator(mode="after")
    def content_or_file(self):
        if not (self.content or "").strip() and not (self.file_url or "").strip():
            raise ValueError("either content or fileUrl is required")
        return self


class GradeRequest(CamelModel):
    grade: float = Field(ge=0, le=100)
    feedback: str | None = None


class SubmissionResponse(CamelModel):
    id: int
    assignment_id: int
    student_id: UUID
    content: str | None
    file_url: str | None
    grade: float | None
    feedback: str | None
    submitted_at: datetime
    graded_at: datetime | None
