"""
Enrollments API: enroll (student), own enrollments, a course's enrollments (owning teacher),
progress update (enrolled student).
"""
from fastapi import APIRouter, Depends, status

from educonnect.api.deps import get_current_user, get_recorder, get_store
from educonnect.models.user import User
from educonnect.schemas.enrollment import EnrollmentCreate, EnrollmentResponse, ProgressUpdate
from educonnect.services import enrollments as enrollment_service
from educonnect.services.activity import ActivityRecorder
from educonnect.services.store import EntityStore

router = APIRouter(prefix="/api/enrollments", tags=["enrollments"])


@router.post("", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
def enroll(
    data: EnrollmentCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
    recorder: ActivityRecorder = Depends(get_recorder),
):
    """409 if the caller is already enrolled in the course."""
    return enrollment_service.enroll(store, recorder, current_user, data.course_id)


@router.get("/student", response_model=list[EnrollmentResponse])
def my_enrollments(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return enrollment_service.list_for_student(store, current_user)


@router.get("/course/{course_id}", response_model=list[EnrollmentResponse])
def course_enrollments(
    course_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return enrollment_service.list_for_course(store, current_user, course_id)


@router.patch("/{enrollment_id}/progress", response_model=EnrollmentResponse)
def update_progress(
    enrollment_id: int,
    data: ProgressUpdate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return enrollment_service.update_progress(store, current_user, enrollment_id, data.progress)
