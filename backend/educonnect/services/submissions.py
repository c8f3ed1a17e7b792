"""
Submission service. A student has at most one submission per assignment: submitting again
replaces the content and clears any grade. Grading is for the course's owning teacher.
"""
import logging

from educonnect.errors import ConstraintViolation, NotFoundError, ValidationError
from educonnect.models.submission import Submission
from educonnect.models.types import ActivityType
from educonnect.models.user import User
from educonnect.schemas.submission import GradeRequest, SubmissionCreate
from educonnect.services import policies
from educonnect.services.activity import ActivityRecorder
from educonnect.services.store import EntityStore

logger = logging.getLogger(__name__)


def submit(store: EntityStore, recorder: ActivityRecorder, user: User, data: SubmissionCreate) -> tuple[Submission, bool]:
    """Create or replace the caller's submission. Returns (submission, created)."""
    policies.ensure(policies.can_submit(user), "Only students can submit assignments", user)
    try:
        assignment = store.get_assignment(data.assignment_id)
    except NotFoundError:
        raise ValidationError.single("assignmentId", f"Assignment {data.assignment_id} does not exist") from None
    title = assignment.title
    fields = data.model_dump(exclude={"assignment_id"})
    created = True
    try:
        submission = store.create_submission(assignment.id, user.id, fields)
    except ConstraintViolation:
        existing = store.find_submission(assignment.id, user.id)
        if existing is None:
            raise
        submission = store.replace_submission(existing, fields)
        created = False
    logger.info(
        "Submission %s: id=%s assignment=%s student=%s",
        "created" if created else "replaced", submission.id, submission.assignment_id, user.id,
    )
    verb = "Submitted" if created else "Resubmitted"
    recorder.record(user.id, ActivityType.SUBMISSION, f'{verb} "{title}"', submission.id)
    return submission, created


def list_for_student(store: EntityStore, user: User) -> list[Submission]:
    return store.list_submissions(student_id=user.id)


def list_for_assignment(store: EntityStore, user: User, assignment_id: int) -> list[Submission]:
    assignment = store.get_assignment(assignment_id)
    policies.ensure(
        policies.can_grade(user, assignment.course),
        "You can only view submissions for your own courses",
        user,
    )
    return store.list_submissions(assignment_id=assignment_id)


def grade(store: EntityStore, user: User, submission_id: int, data: GradeRequest) -> Submission:
    submission = store.get_submission(submission_id)
    policies.ensure(
        policies.can_grade(user, submission.assignment.course),
        "You can only grade submissions for your own courses",
        user,
    )
    submission = store.grade_submission(submission, data.grade, data.feedback)
    logger.info("Submission graded: id=%s grade=%s", submission.id, submission.grade)
    return submission
