"""
Authorization policy: one check per action, all in one place.
can_* return bool so the rules are testable in isolation; ensure() turns a False into AuthorizationError.
Ownership is always decided from the entity's owner column, never from the activity log.
"""
import logging

from educonnect.errors import AuthorizationError
from educonnect.models.course import Course
from educonnect.models.enrollment import Enrollment
from educonnect.models.types import Role
from educonnect.models.user import User

logger = logging.getLogger(__name__)


def has_role(user: User, role: Role) -> bool:
    return user is not None and user.role == role.value


def owns_course(user: User, course: Course) -> bool:
    return user is not None and course is not None and course.teacher_id == user.id


def can_create_course(user: User) -> bool:
    return has_role(user, Role.TEACHER)


def can_manage_course(user: User, course: Course) -> bool:
    """Update or soft-delete: the owning teacher only."""
    return owns_course(user, course)


def can_view_course_enrollments(user: User, course: Course) -> bool:
    return owns_course(user, course)


def can_enroll(user: User) -> bool:
    return has_role(user, Role.STUDENT)


def can_update_progress(user: User, enrollment: Enrollment) -> bool:
    return has_role(user, Role.STUDENT) and enrollment.student_id == user.id


def can_manage_assignments(user: User, course: Course) -> bool:
    """Create, update or delete assignments of course."""
    return has_role(user, Role.TEACHER) and owns_course(user, course)


def can_submit(user: User) -> bool:
    return has_role(user, Role.STUDENT)


def can_grade(user: User, course: Course) -> bool:
    return can_manage_assignments(user, course)


def ensure(allowed: bool, message: str, user: User | None = None) -> None:
    """Raise AuthorizationError(message) unless allowed."""
    if allowed:
        return
    logger.debug("Authorization denied for user=%s: %s", getattr(user, "id", None), message)
    raise AuthorizationError(message)
