"""
SQLAlchemy models. Import here so Alembic and app can use them.
"""
from educonnect.models.user import User
from educonnect.models.course import Course
from educonnect.models.enrollment import Enrollment
from educonnect.models.assignment import Assignment
from educonnect.models.submission import Submission
from educonnect.models.activity import Activity
from educonnect.models.types import Role, ActivityType

__all__ = ["User", "Course", "Enrollment", "Assignment", "Submission", "Activity", "Role", "ActivityType"]
