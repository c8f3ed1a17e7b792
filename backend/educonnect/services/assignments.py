"""
Assignment service: only the course's owning teacher may create, update or delete.
Listing by course is open to any authenticated caller.
"""
import logging

from educonnect.errors import NotFoundError, ValidationError
from educonnect.models.assignment import Assignment
from educonnect.models.types import ActivityType
from educonnect.models.user import User
from educonnect.schemas.assignment import AssignmentCreate, AssignmentUpdate
from educonnect.services import policies
from educonnect.services.activity import ActivityRecorder
from educonnect.services.store import EntityStore

logger = logging.getLogger(__name__)


def create_assignment(store: EntityStore, recorder: ActivityRecorder, user: User, data: AssignmentCreate) -> Assignment:
    try:
        course = store.get_course(data.course_id)
    except NotFoundError:
        raise ValidationError.single("courseId", f"Course {data.course_id} does not exist") from None
    policies.ensure(
        policies.can_manage_assignments(user, course),
        "You can only create assignments for your own courses",
        user,
    )
    if not course.is_active:
        raise ValidationError.single("courseId", "Course is no longer active")
    assignment = store.create_assignment(course.id, data.model_dump(exclude={"course_id"}))
    logger.info("Assignment created: id=%s course=%s", assignment.id, course.id)
    recorder.record(user.id, ActivityType.ASSIGNMENT_CREATED, f'Created assignment "{assignment.title}"', assignment.id)
    return assignment


def list_for_course(store: EntityStore, course_id: int) -> list[Assignment]:
    store.get_course(course_id)
    return store.list_assignments(course_id)


def update_assignment(store: EntityStore, user: User, assignment_id: int, data: AssignmentUpdate) -> Assignment:
    assignment = store.get_assignment(assignment_id)
    policies.ensure(
        policies.can_manage_assignments(user, assignment.course),
        "You can only edit assignments of your own courses",
        user,
    )
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        return assignment
    return store.update_assignment(assignment, changes)


def delete_assignment(store: EntityStore, user: User, assignment_id: int) -> None:
    assignment = store.get_assignment(assignment_id)
    policies.ensure(
        policies.can_manage_assignments(user, assignment.course),
        "You can only delete assignments of your own courses",
        user,
    )
    store.delete_assignment(assignment)
    logger.info("Assignment deleted: id=%s", assignment_id)
