"""
Shared fixtures. Points DATABASE_URL at a throwaway SQLite file before the app is imported,
recreates the schema for every test, and lets tests act as a chosen user by overriding
get_current_user (same approach as a real alternate identity provider).
"""
import os
import tempfile
import uuid
from datetime import timedelta

_DB_PATH = os.path.join(tempfile.gettempdir(), f"educonnect_test_{os.getpid()}.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_PATH}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient

from educonnect.api.deps import get_current_user
from educonnect.database import Base, SessionLocal, engine
from educonnect.main import app
from educonnect.models import Assignment, Course, Enrollment, Role, Submission, User
from educonnect.models.types import utcnow
from educonnect.services.store import EntityStore


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _persist(obj):
    """Insert obj in its own session and return it detached with attributes loaded."""
    with SessionLocal(expire_on_commit=False) as s:
        s.add(obj)
        s.commit()
        s.refresh(obj)
        return obj


@pytest.fixture
def make_user():
    def _make(role: Role = Role.STUDENT, email: str | None = None, **profile) -> User:
        with SessionLocal(expire_on_commit=False) as s:
            store = EntityStore(s)
            return store.create_user(email or f"{role.value}-{uuid.uuid4().hex[:8]}@tests.example.com", role, **profile)
    return _make


@pytest.fixture
def make_course():
    def _make(teacher: User, title: str = "Algebra I", is_active: bool = True) -> Course:
        return _persist(Course(teacher_id=teacher.id, title=title, level="beginner", is_active=is_active))
    return _make


@pytest.fixture
def make_assignment():
    def _make(course: Course, due_in: timedelta = timedelta(days=3), title: str = "Homework") -> Assignment:
        return _persist(Assignment(course_id=course.id, title=title, due_date=utcnow() + due_in))
    return _make


@pytest.fixture
def make_enrollment():
    def _make(student: User, course: Course, progress: int = 0) -> Enrollment:
        return _persist(Enrollment(student_id=student.id, course_id=course.id, progress=progress))
    return _make


@pytest.fixture
def make_submission():
    def _make(student: User, assignment: Assignment, grade: float | None = None) -> Submission:
        return _persist(Submission(student_id=student.id, assignment_id=assignment.id, content="my answer", grade=grade))
    return _make


@pytest.fixture
def teacher(make_user):
    return make_user(Role.TEACHER, first_name="Tina")


@pytest.fixture
def student(make_user):
    return make_user(Role.STUDENT, first_name="Sam")


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def act_as():
    """act_as(user): subsequent requests are made as user."""
    def _act_as(user: User):
        def override_get_current_user():
            with SessionLocal() as s:
                u = s.get(User, user.id)
                if not u:
                    raise RuntimeError("Test user not found")
                return u
        app.dependency_overrides[get_current_user] = override_get_current_user
    yield _act_as
    app.dependency_overrides.pop(get_current_user, None)
