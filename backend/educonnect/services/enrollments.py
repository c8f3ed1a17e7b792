"""
Enrollment service. Duplicate (student, course) pairs are rejected by the unique index,
which surfaces as ConstraintViolation; there is no read-then-write check.
"""
import logging

from educonnect.errors import NotFoundError, ValidationError
from educonnect.models.course import Course
from educonnect.models.enrollment import Enrollment
from educonnect.models.types import ActivityType
from educonnect.models.user import User
from educonnect.services import policies
from educonnect.services.activity import ActivityRecorder
from educonnect.services.store import EntityStore

logger = logging.getLogger(__name__)


def _referenced_course(store: EntityStore, course_id: int) -> Course:
    """Course named in a request body: absent is a validation error, not a 404."""
    try:
        return store.get_course(course_id)
    except NotFoundError:
        raise ValidationError.single("courseId", f"Course {course_id} does not exist") from None


def enroll(store: EntityStore, recorder: ActivityRecorder, user: User, course_id: int) -> Enrollment:
    policies.ensure(policies.can_enroll(user), "Only students can enroll in courses", user)
    course = _referenced_course(store, course_id)
    if not course.is_active:
        raise ValidationError.single("courseId", "Course is no longer active")
    title = course.title
    enrollment = store.create_enrollment(user.id, course_id)
    logger.info("Enrollment created: id=%s student=%s course=%s", enrollment.id, user.id, course_id)
    recorder.record(user.id, ActivityType.ENROLLMENT, f'Enrolled in "{title}"', enrollment.id)
    return enrollment


def list_for_student(store: EntityStore, user: User) -> list[Enrollment]:
    return store.list_enrollments(student_id=user.id)


def list_for_course(store: EntityStore, user: User, course_id: int) -> list[Enrollment]:
    course = store.get_course(course_id)
    policies.ensure(
        policies.can_view_course_enrollments(user, course),
        "You can only view enrollments for your own courses",
        user,
    )
    return store.list_enrollments(course_id=course_id)


def update_progress(store: EntityStore, user: User, enrollment_id: int, progress: int) -> Enrollment:
    """Set progress; completed is recomputed from it by the model."""
    enrollment = store.get_enrollment(enrollment_id)
    policies.ensure(
        policies.can_update_progress(user, enrollment),
        "You can only update progress on your own enrollments",
        user,
    )
    enrollment = store.update_enrollment_progress(enrollment, progress)
    logger.info("Enrollment progress: id=%s progress=%s completed=%s", enrollment.id, enrollment.progress, enrollment.completed)
    return enrollment
