"""Entity store: storage-level constraints, soft delete, upsert."""
import pytest
from sqlalchemy.exc import IntegrityError

from educonnect.errors import ConstraintViolation, NotFoundError
from educonnect.models import Enrollment, Role
from educonnect.services.store import EntityStore, is_unique_violation


def test_duplicate_enrollment_is_rejected_by_storage(db, student, teacher, make_course):
    course = make_course(teacher)
    store = EntityStore(db)
    store.create_enrollment(student.id, course.id)
    with pytest.raises(ConstraintViolation):
        store.create_enrollment(student.id, course.id)
    rows = db.query(Enrollment).filter(Enrollment.student_id == student.id, Enrollment.course_id == course.id).all()
    assert len(rows) == 1
    # the count bump rolled back with the rejected insert
    assert store.get_course(course.id).enrolled_count == 1


def test_progress_recomputes_completed(db, student, teacher, make_course):
    course = make_course(teacher)
    store = EntityStore(db)
    enrollment = store.create_enrollment(student.id, course.id)
    assert enrollment.completed is False
    enrollment = store.update_enrollment_progress(enrollment, 100)
    assert enrollment.completed is True
    enrollment = store.update_enrollment_progress(enrollment, 40)
    assert enrollment.completed is False


def test_soft_delete_keeps_row_and_enrollments(db, student, teacher, make_course, make_enrollment):
    course = make_course(teacher)
    make_enrollment(student, course)
    store = EntityStore(db)
    store.soft_delete_course(store.get_course(course.id))
    assert store.get_course(course.id).is_active is False
    assert [c.id for c in store.list_courses()] == []
    assert [c.id for c in store.list_courses(teacher_id=teacher.id, include_inactive=True)] == [course.id]
    assert len(store.list_enrollments(student_id=student.id)) == 1


def test_get_missing_raises_not_found(db):
    with pytest.raises(NotFoundError) as exc:
        EntityStore(db).get_course(999)
    assert exc.value.status_code == 404


def test_upsert_user_refreshes_profile_but_not_role(db):
    store = EntityStore(db)
    user, created = store.upsert_user("ada@tests.example.com", Role.TEACHER, first_name="Ada")
    assert created is True
    again, created = store.upsert_user("ada@tests.example.com", Role.STUDENT, first_name="Ada", last_name="Lovelace")
    assert created is False
    assert again.id == user.id
    assert again.last_name == "Lovelace"
    assert again.role == Role.TEACHER.value


def test_duplicate_submission_is_rejected_by_storage(db, student, teacher, make_course, make_assignment):
    assignment = make_assignment(make_course(teacher))
    store = EntityStore(db)
    store.create_submission(assignment.id, student.id, {"content": "v1"})
    with pytest.raises(ConstraintViolation):
        store.create_submission(assignment.id, student.id, {"content": "v2"})


class _DriverError(Exception):
    def __init__(self, message: str, pgcode: str | None = None):
        super().__init__(message)
        self.pgcode = pgcode


def test_unique_violation_detection():
    def integrity(orig):
        return IntegrityError("INSERT INTO enrollments ...", {}, orig)

    # PostgreSQL: decided by SQLSTATE regardless of message wording
    assert is_unique_violation(integrity(_DriverError("doppelter Schlüsselwert", pgcode="23505")))
    assert not is_unique_violation(integrity(_DriverError("duplicate-looking text", pgcode="23503")))
    # SQLite: no code, message only
    assert is_unique_violation(integrity(_DriverError("UNIQUE constraint failed: enrollments.student_id")))
    assert not is_unique_violation(integrity(_DriverError("FOREIGN KEY constraint failed")))
