"""
FastAPI application entrypoint. Run with: uvicorn educonnect.main:app --reload --port 8000

All JSON routes are mounted under /api:
  - Auth:        POST /api/auth/register, POST /api/auth/login, GET /api/auth/user
  - Dashboard:   GET /api/dashboard/stats
  - Activities:  GET /api/activities?limit=N
  - Courses:     GET/POST /api/courses, GET/PUT/DELETE /api/courses/{id}
  - Enrollments: POST /api/enrollments, GET /api/enrollments/student, GET /api/enrollments/course/{id},
                 PATCH /api/enrollments/{id}/progress
  - Assignments: POST /api/assignments, GET /api/assignments/course/{id}, PUT/DELETE /api/assignments/{id}
  - Submissions: POST /api/submissions, GET /api/submissions/student,
                 GET /api/submissions/assignment/{id}, PATCH /api/submissions/{id}/grade
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from educonnect.config import settings, DEFAULT_SECRET_KEY
from educonnect.api.errors import register_exception_handlers
from educonnect.api.auth import router as auth_router
from educonnect.api.dashboard import router as dashboard_router
from educonnect.api.activities import router as activities_router
from educonnect.api.courses import router as courses_router
from educonnect.api.enrollments import router as enrollments_router
from educonnect.api.assignments import router as assignments_router
from educonnect.api.submissions import router as submissions_router

app = FastAPI(
    title="EduConnect API",
    description="Courses, enrollments, assignments, submissions, activity feed and dashboard statistics.",
    version="0.1.0",
)

_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(activities_router)
app.include_router(courses_router)
app.include_router(enrollments_router)
app.include_router(assignments_router)
app.include_router(submissions_router)


@app.on_event("startup")
def startup():
    """Configure logging and init SQLite DB. Fail fast if production uses default SECRET_KEY."""
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    _log = logging.getLogger("educonnect.main")
    if settings.is_production and settings.secret_key.strip() == DEFAULT_SECRET_KEY:
        _log.critical("SECRET_KEY must be set in production. Set SECRET_KEY in env or .env.")
        raise RuntimeError("SECRET_KEY must be set in production. Set SECRET_KEY in env or .env.")
    from educonnect.database import init_sqlite_db
    init_sqlite_db()
    _log.info("EduConnect API started (env=%s)", settings.env or "development")


@app.get("/api/health")
def health():
    """Health check (JSON)."""
    return {"status": "ok", "message": "EduConnect API"}
