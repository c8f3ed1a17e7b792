"""
Entity store: the single persistence interface for users, courses, enrollments,
assignments, submissions and activities.

Every write is one auto-committed unit. Storage constraint failures are translated into
the error taxonomy here: a uniqueness violation becomes ConstraintViolation, a foreign-key
or check violation becomes ValidationError. Uniqueness of (student, course) enrollments and
(assignment, student) submissions is enforced by the database, not by read-then-write.
"""
import logging
import uuid
from typing import Any

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from educonnect.errors import ConstraintViolation, NotFoundError, ValidationError, FieldError
from educonnect.models.activity import Activity
from educonnect.models.assignment import Assignment
from educonnect.models.course import Course
from educonnect.models.enrollment import Enrollment
from educonnect.models.submission import Submission
from educonnect.models.types import Role, utcnow
from educonnect.models.user import User

logger = logging.getLogger(__name__)

# Profile columns refreshed by upsert_user; role and email are never changed by an upsert.
PROFILE_FIELDS = ("first_name", "last_name", "profile_image_url", "department", "bio")

# SQLSTATE for unique_violation (psycopg2 exposes it as pgcode)
UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    pgcode = getattr(orig, "pgcode", None)
    if pgcode is not None:
        return pgcode == UNIQUE_VIOLATION
    # sqlite3 carries no code, only "UNIQUE constraint failed: ..."
    msg = str(orig if orig is not None else exc).lower()
    return "unique" in msg or "duplicate" in msg


class EntityStore:
    """CRUD primitives over one request-scoped Session."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, obj=None, conflict_message: str = "Record already exists"):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                logger.info("Uniqueness constraint rejected write: %s", getattr(e, "orig", e))
                raise ConstraintViolation(conflict_message) from e
            logger.warning("Integrity error on write: %s", getattr(e, "orig", e))
            raise ValidationError(
                [FieldError("__root__", "Referenced record does not exist or value out of range")],
                message="Invalid reference or value",
            ) from e
        if obj is not None:
            self.db.refresh(obj)
        return obj

    def _get_or_404(self, model, entity: str, entity_id):
        obj = self.db.get(model, entity_id)
        if obj is None:
            raise NotFoundError(entity, entity_id)
        return obj

    # Users

    def get_user(self, user_id: uuid.UUID) -> User:
        return self._get_or_404(User, "User", user_id)

    def find_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def create_user(self, email: str, role: Role, password_hash: str | None = None, **profile: Any) -> User:
        user = User(email=email, role=role.value, password_hash=password_hash)
        for field in PROFILE_FIELDS:
            if profile.get(field) is not None:
                setattr(user, field, profile[field])
        self.db.add(user)
        return self._commit(user, conflict_message="Email already registered")

    def upsert_user(self, email: str, role: Role = Role.STUDENT, **profile: Any) -> tuple[User, bool]:
        """Refresh profile fields if email exists, else create. Returns (user, created).

        Login only refreshes existing users; first-login creation serves identity providers
        plugged in through get_current_user that have no registration step.
        """
        user = self.find_user_by_email(email)
        if user is None:
            try:
                return self.create_user(email, role, **profile), True
            except ConstraintViolation:
                # Lost a race with a concurrent first login; fall through to refresh
                user = self.find_user_by_email(email)
                if user is None:
                    raise
        changed = False
        for field in PROFILE_FIELDS:
            value = profile.get(field)
            if value is not None and getattr(user, field) != value:
                setattr(user, field, value)
                changed = True
        if changed:
            self._commit(user)
        return user, False

    # Courses

    def get_course(self, course_id: int) -> Course:
        return self._get_or_404(Course, "Course", course_id)

    def list_courses(self, teacher_id: uuid.UUID | None = None, include_inactive: bool = False) -> list[Course]:
        q = self.db.query(Course)
        if teacher_id is not None:
            q = q.filter(Course.teacher_id == teacher_id)
        if not include_inactive:
            q = q.filter(Course.is_active.is_(True))
        return q.order_by(Course.created_at.desc(), Course.id.desc()).all()

    def create_course(self, teacher_id: uuid.UUID, data: dict[str, Any]) -> Course:
        course = Course(teacher_id=teacher_id, **data)
        self.db.add(course)
        return self._commit(course)

    def update_course(self, course: Course, changes: dict[str, Any]) -> Course:
        for key, value in changes.items():
            setattr(course, key, value)
        return self._commit(course)

    def soft_delete_course(self, course: Course) -> Course:
        course.is_active = False
        return self._commit(course)

    # Enrollments

    def get_enrollment(self, enrollment_id: int) -> Enrollment:
        return self._get_or_404(Enrollment, "Enrollment", enrollment_id)

    def list_enrollments(self, student_id: uuid.UUID | None = None, course_id: int | None = None) -> list[Enrollment]:
        q = self.db.query(Enrollment)
        if student_id is not None:
            q = q.filter(Enrollment.student_id == student_id)
        if course_id is not None:
            q = q.filter(Enrollment.course_id == course_id)
        return q.order_by(Enrollment.enrolled_at.desc(), Enrollment.id.desc()).all()

    def create_enrollment(self, student_id: uuid.UUID, course_id: int) -> Enrollment:
        """Insert the enrollment and bump the course's enrolled_count in one commit."""
        enrollment = Enrollment(student_id=student_id, course_id=course_id, progress=0)
        self.db.add(enrollment)
        self.db.execute(
            update(Course)
            .where(Course.id == course_id)
            .values(enrolled_count=Course.enrolled_count + 1, updated_at=utcnow())
        )
        return self._commit(enrollment, conflict_message="Already enrolled in this course")

    def update_enrollment_progress(self, enrollment: Enrollment, progress: int) -> Enrollment:
        enrollment.progress = progress
        return self._commit(enrollment)

    # Assignments

    def get_assignment(self, assignment_id: int) -> Assignment:
        return self._get_or_404(Assignment, "Assignment", assignment_id)

    def list_assignments(self, course_id: int) -> list[Assignment]:
        return (
            self.db.query(Assignment)
            .filter(Assignment.course_id == course_id)
            .order_by(Assignment.due_date.asc(), Assignment.id.asc())
            .all()
        )

    def create_assignment(self, course_id: int, data: dict[str, Any]) -> Assignment:
        assignment = Assignment(course_id=course_id, **data)
        self.db.add(assignment)
        return self._commit(assignment)

    def update_assignment(self, assignment: Assignment, changes: dict[str, Any]) -> Assignment:
        for key, value in changes.items():
            setattr(assignment, key, value)
        return self._commit(assignment)

    def delete_assignment(self, assignment: Assignment) -> None:
        self.db.delete(assignment)
        self._commit()

    # Submissions

    def get_submission(self, submission_id: int) -> Submission:
        return self._get_or_404(Submission, "Submission", submission_id)

    def find_submission(self, assignment_id: int, student_id: uuid.UUID) -> Submission | None:
        return (
            self.db.query(Submission)
            .filter(Submission.assignment_id == assignment_id, Submission.student_id == student_id)
            .first()
        )

    def list_submissions(self, student_id: uuid.UUID | None = None, assignment_id: int | None = None) -> list[Submission]:
        q = self.db.query(Submission)
        if student_id is not None:
            q = q.filter(Submission.student_id == student_id)
        if assignment_id is not None:
            q = q.filter(Submission.assignment_id == assignment_id)
        return q.order_by(Submission.submitted_at.desc(), Submission.id.desc()).all()

    def create_submission(self, assignment_id: int, student_id: uuid.UUID, data: dict[str, Any]) -> Submission:
        submission = Submission(assignment_id=assignment_id, student_id=student_id, **data)
        self.db.add(submission)
        return self._commit(submission, conflict_message="Submission already exists for this assignment")

    def replace_submission(self, submission: Submission, data: dict[str, Any]) -> Submission:
        """Resubmission: new content and time, grade and feedback cleared."""
        submission.content = data.get("content")
        submission.file_url = data.get("file_url")
        submission.submitted_at = utcnow()
        submission.grade = None
        submission.feedback = None
        submission.graded_at = None
        return self._commit(submission)

    def grade_submission(self, submission: Submission, grade: float, feedback: str | None = None) -> Submission:
        submission.grade = grade
        submission.feedback = feedback
        submission.graded_at = utcnow()
        return self._commit(submission)

    # Activities

    def add_activity(self, user_id: uuid.UUID, type: str, description: str, related_id: int | None) -> Activity:
        activity = Activity(user_id=user_id, type=type, description=description, related_id=related_id)
        self.db.add(activity)
        return self._commit(activity)

    def list_activities(self, user_id: uuid.UUID, limit: int) -> list[Activity]:
        return (
            self.db.query(Activity)
            .filter(Activity.user_id == user_id)
            .order_by(Activity.created_at.desc(), Activity.id.desc())
            .limit(limit)
            .all()
        )
