"""
Dashboard stats: one shape per role, discriminated by "role".
"""
from typing import Annotated, Literal, Union

from pydantic import Field

from educonnect.schemas.common import CamelModel


class TeacherStats(CamelModel):
    role: Literal["teacher"] = "teacher"
    active_courses: int = 0
    total_students: int = 0
    assignments_due: int = 0
    average_rating: float | None = None  # None until ratings exist


class StudentStats(CamelModel):
    role: Literal["student"] = "student"
    enrolled_courses: int = 0
    completed_courses: int = 0
    pending_assignments: int = 0
    average_grade: float | None = None  # None when nothing is graded


class OtherRoleStats(CamelModel):
    role: Literal["parent", "principal", "administrator"]


DashboardStats = Annotated[
    Union[TeacherStats, StudentStats, OtherRoleStats],
    Field(discriminator="role"),
]
