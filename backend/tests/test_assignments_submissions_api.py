"""API tests for assignments (owner-teacher writes) and submissions (student writes, teacher grading)."""
from datetime import timedelta

from educonnect.models import Role
from educonnect.models.types import utcnow


def _due(days: int) -> str:
    return (utcnow() + timedelta(days=days)).isoformat()


def test_owner_creates_assignment(client, act_as, teacher, make_course):
    course = make_course(teacher)
    act_as(teacher)
    r = client.post("/api/assignments", json={"courseId": course.id, "title": "Essay", "dueDate": _due(3)})
    assert r.status_code == 201, r.text
    assert r.json()["courseId"] == course.id
    listed = client.get(f"/api/assignments/course/{course.id}").json()
    assert [a["title"] for a in listed] == ["Essay"]
    assert client.get("/api/activities").json()[0]["type"] == "assignment_created"


def test_assignment_requires_owning_teacher(client, act_as, teacher, student, make_user, make_course):
    course = make_course(teacher)
    body = {"courseId": course.id, "title": "Essay", "dueDate": _due(3)}
    act_as(make_user(Role.TEACHER))
    assert client.post("/api/assignments", json=body).status_code == 403
    act_as(student)
    assert client.post("/api/assignments", json=body).status_code == 403


def test_assignment_validation(client, act_as, teacher, make_course):
    act_as(teacher)
    r = client.post("/api/assignments", json={"courseId": 999, "title": "Essay", "dueDate": _due(3)})
    assert r.status_code == 400
    r = client.post("/api/assignments", json={"courseId": make_course(teacher).id})
    assert r.status_code == 400
    assert {"title", "dueDate"} <= {e["field"] for e in r.json()["errors"]}


def test_no_assignments_on_retired_course(client, act_as, teacher, make_course):
    course = make_course(teacher, is_active=False)
    act_as(teacher)
    r = client.post("/api/assignments", json={"courseId": course.id, "title": "Essay", "dueDate": _due(3)})
    assert r.status_code == 400
    assert r.json()["errors"] == [{"field": "courseId", "message": "Course is no longer active"}]
    assert client.get(f"/api/assignments/course/{course.id}").json() == []


def test_timezone_aware_due_date_is_normalized(client, act_as, teacher, make_course):
    course = make_course(teacher)
    act_as(teacher)
    r = client.post(
        "/api/assignments",
        json={"courseId": course.id, "title": "Quiz", "dueDate": "2030-01-01T12:00:00+02:00"},
    )
    assert r.status_code == 201
    assert r.json()["dueDate"].startswith("2030-01-01T10:00:00")


def test_update_and_delete_assignment(client, act_as, teacher, student, make_user, make_course, make_assignment, make_submission):
    assignment = make_assignment(make_course(teacher))
    make_submission(student, assignment)
    act_as(make_user(Role.TEACHER))
    assert client.put(f"/api/assignments/{assignment.id}", json={"title": "Mine now"}).status_code == 403
    assert client.delete(f"/api/assignments/{assignment.id}").status_code == 403

    act_as(teacher)
    r = client.put(f"/api/assignments/{assignment.id}", json={"title": "Revised", "maxPoints": 50})
    assert r.status_code == 200
    assert (r.json()["title"], r.json()["maxPoints"]) == ("Revised", 50)
    assert client.delete(f"/api/assignments/{assignment.id}").status_code == 204
    assert client.put(f"/api/assignments/{assignment.id}", json={"title": "x"}).status_code == 404

    act_as(student)
    assert client.get("/api/submissions/student").json() == []


def test_student_submits_and_resubmits(client, act_as, teacher, student, make_course, make_assignment):
    assignment = make_assignment(make_course(teacher))
    act_as(student)
    r = client.post("/api/submissions", json={"assignmentId": assignment.id, "content": "first"})
    assert r.status_code == 201, r.text
    first_id = r.json()["id"]

    r = client.post("/api/submissions", json={"assignmentId": assignment.id, "content": "second"})
    assert r.status_code == 200
    assert r.json()["id"] == first_id
    assert r.json()["content"] == "second"

    mine = client.get("/api/submissions/student").json()
    assert len(mine) == 1
    types = [a["type"] for a in client.get("/api/activities").json()]
    assert types == ["submission", "submission"]


def test_submission_rules(client, act_as, teacher, student, make_course, make_assignment):
    assignment = make_assignment(make_course(teacher))
    act_as(teacher)
    assert client.post("/api/submissions", json={"assignmentId": assignment.id, "content": "x"}).status_code == 403
    act_as(student)
    assert client.post("/api/submissions", json={"assignmentId": 999, "content": "x"}).status_code == 400
    assert client.post("/api/submissions", json={"assignmentId": assignment.id}).status_code == 400


def test_grading_drives_average_grade(client, act_as, teacher, student, make_user, make_course, make_assignment):
    course = make_course(teacher)
    first, second = make_assignment(course, title="One"), make_assignment(course, title="Two")
    act_as(student)
    s1 = client.post("/api/submissions", json={"assignmentId": first.id, "content": "a"}).json()
    s2 = client.post("/api/submissions", json={"assignmentId": second.id, "content": "b"}).json()
    assert client.get("/api/dashboard/stats").json()["averageGrade"] is None

    act_as(make_user(Role.TEACHER))
    assert client.patch(f"/api/submissions/{s1['id']}/grade", json={"grade": 85}).status_code == 403
    assert client.get(f"/api/submissions/assignment/{first.id}").status_code == 403

    act_as(teacher)
    r = client.patch(f"/api/submissions/{s1['id']}/grade", json={"grade": 85, "feedback": "Good"})
    assert r.status_code == 200
    assert r.json()["grade"] == 85
    assert r.json()["gradedAt"] is not None
    assert len(client.get(f"/api/submissions/assignment/{first.id}").json()) == 1
    assert client.patch(f"/api/submissions/{s2['id']}/grade", json={"grade": 120}).status_code == 400

    act_as(student)
    assert client.get("/api/dashboard/stats").json()["averageGrade"] == 85.0

    act_as(teacher)
    client.patch(f"/api/submissions/{s2['id']}/grade", json={"grade": 95})
    act_as(student)
    assert client.get("/api/dashboard/stats").json()["averageGrade"] == 90.0

    # resubmitting clears the grade
    client.post("/api/submissions", json={"assignmentId": second.id, "content": "b2"})
    assert client.get("/api/dashboard/stats").json()["averageGrade"] == 85.0
