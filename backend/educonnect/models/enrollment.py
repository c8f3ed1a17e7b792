"""
Enrollment: one student in one course. (student_id, course_id) is unique at the storage layer.
completed is derived from progress on every assignment of progress.
"""
import uuid
from datetime import datetime
from sqlalchemy import Boolean, Integer, DateTime, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from educonnect.database import Base
from educonnect.models.types import UuidType, utcnow

PROGRESS_MIN = 0
PROGRESS_MAX = 100


class Enrollment(Base):
    __tablename__ = "enrollments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), ForeignKey("users.id"), nullable=False, index=True
    )
    course_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("courses.id"), nullable=False, index=True
    )
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    enrolled_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("student_id", "course_id", name="uq_enrollments_student_course"),
        CheckConstraint("progress >= 0 AND progress <= 100", name="enrollments_progress_range"),
    )

    student = relationship("User", back_populates="enrollments")
    course = relationship("Course", back_populates="enrollments")

    @validates("progress")
    def _derive_completed(self, key, value):
        if value is None:
            value = PROGRESS_MIN
        if value < PROGRESS_MIN or value > PROGRESS_MAX:
            raise ValueError("progress must be between 0 and 100")
        self.completed = value >= PROGRESS_MAX
        return value
