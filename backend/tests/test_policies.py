"""Unit tests for the authorization policy (no database)."""
import uuid

import pytest

from educonnect.errors import AuthorizationError
from educonnect.models import Course, Enrollment, Role, User
from educonnect.services import policies


def _user(role: Role) -> User:
    return User(id=uuid.uuid4(), email=f"{role.value}@x.example.com", role=role.value)


def test_only_teachers_create_courses():
    assert policies.can_create_course(_user(Role.TEACHER))
    for role in (Role.STUDENT, Role.PARENT, Role.PRINCIPAL, Role.ADMINISTRATOR):
        assert not policies.can_create_course(_user(role))


def test_course_management_is_owner_only():
    owner, other_teacher = _user(Role.TEACHER), _user(Role.TEACHER)
    course = Course(teacher_id=owner.id, title="Physics")
    assert policies.can_manage_course(owner, course)
    assert not policies.can_manage_course(other_teacher, course)
    assert not policies.can_manage_course(_user(Role.ADMINISTRATOR), course)


def test_assignments_need_teacher_role_and_ownership():
    owner = _user(Role.TEACHER)
    course = Course(teacher_id=owner.id, title="Physics")
    assert policies.can_manage_assignments(owner, course)
    assert not policies.can_manage_assignments(_user(Role.TEACHER), course)
    assert policies.can_grade(owner, course)


def test_students_enroll_and_submit():
    student = _user(Role.STUDENT)
    assert policies.can_enroll(student)
    assert policies.can_submit(student)
    assert not policies.can_enroll(_user(Role.TEACHER))
    assert not policies.can_submit(_user(Role.PARENT))


def test_progress_only_on_own_enrollment():
    student, classmate = _user(Role.STUDENT), _user(Role.STUDENT)
    enrollment = Enrollment(student_id=student.id, course_id=1)
    assert policies.can_update_progress(student, enrollment)
    assert not policies.can_update_progress(classmate, enrollment)


def test_ensure_raises_authorization_error():
    policies.ensure(True, "unused")
    with pytest.raises(AuthorizationError) as exc:
        policies.ensure(False, "You can only edit your own courses")
    assert exc.value.status_code == 403
    assert "own courses" in exc.value.message
