"""
Dashboard aggregator: role-scoped statistics recomputed from the entity tables on every call.
No cache and no incremental counters.

Teacher: activeCourses, totalStudents, assignmentsDue (due in [now, now + window]), averageRating.
Student: enrolledCourses, completedCourses, pendingAssignments, averageGrade.
Other roles: role only.

completedCourses counts progress >= 100; progress is the single source of truth for completion.
averageGrade is None (not 0) when nothing has been graded.
"""
import logging
import uuid
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable

from sqlalchemy import and_, exists, func, select
from sqlalchemy.orm import Session

from educonnect.models.assignment import Assignment
from educonnect.models.course import Course
from educonnect.models.enrollment import Enrollment, PROGRESS_MAX
from educonnect.models.submission import Submission
from educonnect.models.types import Role, utcnow
from educonnect.models.user import User
from educonnect.schemas.dashboard import StudentStats, TeacherStats, OtherRoleStats

logger = logging.getLogger(__name__)

# Hook for teacher averageRating. Course ratings are not collected yet, so the default returns None.
RatingProvider = Callable[[Session, User], float | None]


def no_rating(db: Session, teacher: User) -> float | None:
    return None


def round_half_up(value: float | Decimal | None, places: int = 2) -> float | None:
    """Round with ROUND_HALF_UP (not banker's rounding). None stays None."""
    if value is None:
        return None
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


class DashboardAggregator:
    def __init__(
        self,
        db: Session,
        due_window_days: int = 7,
        rating_provider: RatingProvider = no_rating,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.due_window = timedelta(days=due_window_days)
        self.rating_provider = rating_provider
        self.clock = clock

    def stats_for(self, user: User) -> TeacherStats | StudentStats | OtherRoleStats:
        role = Role(user.role)
        if role == Role.TEACHER:
            return self.teacher_stats(user)
        if role == Role.STUDENT:
            return self.student_stats(user.id)
        return OtherRoleStats(role=role.value)

    def _count(self, stmt) -> int:
        return int(self.db.execute(stmt).scalar_one() or 0)

    def teacher_stats(self, teacher: User) -> TeacherStats:
        now = self.clock()
        course_ids = select(Course.id).where(Course.teacher_id == teacher.id, Course.is_active.is_(True))
        active_courses = self._count(
            select(func.count(Course.id)).where(Course.teacher_id == teacher.id, Course.is_active.is_(True))
        )
        total_students = self._count(
            select(func.count(Enrollment.id)).where(Enrollment.course_id.in_(course_ids))
        )
        assignments_due = self._count(
            select(func.count(Assignment.id)).where(
                Assignment.course_id.in_(course_ids),
                Assignment.due_date >= now,
                Assignment.due_date <= now + self.due_window,
            )
        )
        return TeacherStats(
            active_courses=active_courses,
            total_students=total_students,
            assignments_due=assignments_due,
            average_rating=round_half_up(self.rating_provider(self.db, teacher)),
        )

    def student_stats(self, student_id: uuid.UUID) -> StudentStats:
        enrolled_courses = self._count(
            select(func.count(Enrollment.id)).where(Enrollment.student_id == student_id)
        )
        completed_courses = self._count(
            select(func.count(Enrollment.id)).where(
                Enrollment.student_id == student_id,
                Enrollment.progress >= PROGRESS_MAX,
            )
        )
        enrolled_course_ids = select(Enrollment.course_id).where(Enrollment.student_id == student_id)
        submitted = exists().where(
            and_(Submission.assignment_id == Assignment.id, Submission.student_id == student_id)
        )
        pending_assignments = self._count(
            select(func.count(Assignment.id)).where(
                Assignment.course_id.in_(enrolled_course_ids),
                ~submitted,
            )
        )
        avg = self.db.execute(
            select(func.avg(Submission.grade)).where(
                Submission.student_id == student_id,
                Submission.grade.is_not(None),
            )
        ).scalar_one()
        return StudentStats(
            enrolled_courses=enrolled_courses,
            completed_courses=completed_courses,
            pending_assignments=pending_assignments,
            average_grade=round_half_up(avg),
        )
