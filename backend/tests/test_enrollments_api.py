"""API tests for enrollments: student-only, one per (student, course), progress updates."""
from educonnect.models import Role


def test_enroll_once(client, act_as, student, teacher, make_course):
    course = make_course(teacher)
    act_as(student)
    r = client.post("/api/enrollments", json={"courseId": course.id})
    assert r.status_code == 201, r.text
    assert r.json()["progress"] == 0
    assert r.json()["completed"] is False

    r = client.post("/api/enrollments", json={"courseId": course.id})
    assert r.status_code == 409
    assert r.json()["code"] == "conflict"

    assert len(client.get("/api/enrollments/student").json()) == 1
    assert client.get(f"/api/courses/{course.id}").json()["enrolledCount"] == 1
    activities = client.get("/api/activities").json()
    assert [a["type"] for a in activities] == ["enrollment"]


def test_teacher_cannot_enroll(client, act_as, teacher, make_course):
    course = make_course(teacher)
    act_as(teacher)
    assert client.post("/api/enrollments", json={"courseId": course.id}).status_code == 403


def test_enroll_unknown_or_inactive_course_is_validation_error(client, act_as, student, teacher, make_course):
    act_as(student)
    r = client.post("/api/enrollments", json={"courseId": 999})
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "courseId"

    retired = make_course(teacher, is_active=False)
    assert client.post("/api/enrollments", json={"courseId": retired.id}).status_code == 400


def test_course_enrollments_owner_only(client, act_as, student, teacher, make_user, make_course, make_enrollment):
    course = make_course(teacher)
    make_enrollment(student, course)
    act_as(make_user(Role.TEACHER))
    assert client.get(f"/api/enrollments/course/{course.id}").status_code == 403
    act_as(student)
    assert client.get(f"/api/enrollments/course/{course.id}").status_code == 403
    act_as(teacher)
    r = client.get(f"/api/enrollments/course/{course.id}")
    assert r.status_code == 200
    assert [e["studentId"] for e in r.json()] == [str(student.id)]
    assert client.get("/api/enrollments/course/999").status_code == 404


def test_progress_to_100_completes_and_shows_in_stats(client, act_as, student, teacher, make_user, make_course, make_enrollment):
    enrollment = make_enrollment(student, make_course(teacher), progress=99)
    act_as(student)
    assert client.get("/api/dashboard/stats").json()["completedCourses"] == 0

    r = client.patch(f"/api/enrollments/{enrollment.id}/progress", json={"progress": 100})
    assert r.status_code == 200
    assert r.json()["completed"] is True
    assert client.get("/api/dashboard/stats").json()["completedCourses"] == 1

    assert client.patch(f"/api/enrollments/{enrollment.id}/progress", json={"progress": 101}).status_code == 400

    act_as(make_user(Role.STUDENT))
    assert client.patch(f"/api/enrollments/{enrollment.id}/progress", json={"progress": 10}).status_code == 403
