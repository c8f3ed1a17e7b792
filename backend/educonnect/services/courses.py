"""
Course service: listing by role, teacher-only create, owner-only update and soft delete.
"""
import logging

from educonnect.models.course import Course
from educonnect.models.types import ActivityType, Role
from educonnect.models.user import User
from educonnect.schemas.course import CourseCreate, CourseUpdate
from educonnect.services import policies
from educonnect.services.activity import ActivityRecorder
from educonnect.services.store import EntityStore

logger = logging.getLogger(__name__)


def list_courses_for(store: EntityStore, user: User, include_inactive: bool = False) -> list[Course]:
    """Teachers see their own courses; everyone else sees all active courses."""
    if user.role == Role.TEACHER.value:
        return store.list_courses(teacher_id=user.id, include_inactive=include_inactive)
    return store.list_courses()


def create_course(store: EntityStore, recorder: ActivityRecorder, user: User, data: CourseCreate) -> Course:
    policies.ensure(policies.can_create_course(user), "Only teachers can create courses", user)
    course = store.create_course(user.id, data.model_dump())
    logger.info("Course created: id=%s teacher=%s", course.id, user.id)
    recorder.record(user.id, ActivityType.COURSE_CREATED, f'Created course "{course.title}"', course.id)
    return course


def update_course(store: EntityStore, user: User, course_id: int, data: CourseUpdate) -> Course:
    course = store.get_course(course_id)
    policies.ensure(policies.can_manage_course(user, course), "You can only edit your own courses", user)
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        return course
    course = store.update_course(course, changes)
    logger.info("Course updated: id=%s fields=%s", course.id, sorted(changes))
    return course


def delete_course(store: EntityStore, user: User, course_id: int) -> Course:
    """Soft delete: is_active=False; enrollments keep pointing at the course."""
    course = store.get_course(course_id)
    policies.ensure(policies.can_manage_course(user, course), "You can only delete your own courses", user)
    if course.is_active:
        course = store.soft_delete_course(course)
        logger.info("Course soft-deleted: id=%s", course.id)
    return course
