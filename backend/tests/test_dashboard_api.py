"""API tests for GET /api/dashboard/stats and GET /api/activities."""
from datetime import timedelta

from educonnect.config import settings
from educonnect.database import SessionLocal
from educonnect.models import ActivityType, Role
from educonnect.services.store import EntityStore


def test_teacher_stats_payload(client, act_as, teacher, make_user, make_course, make_assignment, make_enrollment):
    course = make_course(teacher)
    make_enrollment(make_user(Role.STUDENT), course)
    make_assignment(course, due_in=timedelta(days=3))
    make_assignment(course, due_in=timedelta(days=8))
    act_as(teacher)
    r = client.get("/api/dashboard/stats")
    assert r.status_code == 200
    assert r.json() == {
        "role": "teacher",
        "activeCourses": 1,
        "totalStudents": 1,
        "assignmentsDue": 1,
        "averageRating": None,
    }


def test_student_stats_payload(client, act_as, student, teacher, make_course, make_assignment, make_enrollment):
    course = make_course(teacher)
    make_enrollment(student, course)
    make_assignment(course)
    act_as(student)
    assert client.get("/api/dashboard/stats").json() == {
        "role": "student",
        "enrolledCourses": 1,
        "completedCourses": 0,
        "pendingAssignments": 1,
        "averageGrade": None,
    }


def test_parent_gets_role_only(client, act_as, make_user):
    act_as(make_user(Role.PARENT))
    assert client.get("/api/dashboard/stats").json() == {"role": "parent"}


def test_activity_feed_newest_first(client, act_as, teacher, student):
    act_as(teacher)
    course_id = client.post("/api/courses", json={"title": "Biology"}).json()["id"]
    client.post(
        "/api/assignments",
        json={"courseId": course_id, "title": "Lab report", "dueDate": "2099-01-01T00:00:00"},
    )
    feed = client.get("/api/activities").json()
    assert [a["type"] for a in feed] == ["assignment_created", "course_created"]
    assert client.get("/api/activities", params={"limit": 1}).json()[0]["type"] == "assignment_created"
    assert client.get("/api/activities", params={"limit": 0}).status_code == 400

    act_as(student)
    client.post("/api/enrollments", json={"courseId": course_id})
    feed = client.get("/api/activities").json()
    assert [(a["type"], a["userId"]) for a in feed] == [("enrollment", str(student.id))]


def test_activity_limit_is_capped(client, act_as, teacher, monkeypatch):
    monkeypatch.setattr(settings, "activities_max_limit", 3)
    with SessionLocal() as s:
        store = EntityStore(s)
        for i in range(5):
            store.add_activity(teacher.id, ActivityType.COURSE_CREATED.value, f"Created course {i}", i + 1)
    act_as(teacher)
    feed = client.get("/api/activities", params={"limit": 50}).json()
    assert len(feed) == 3
    assert feed[0]["description"] == "Created course 4"
    assert len(client.get("/api/activities").json()) == 3

def test_health(client):
    assert client.get("/api/health").json()["status"] == "ok"
