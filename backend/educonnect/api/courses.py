"""
Courses API: list (own courses for teachers, all active otherwise), get, create (teacher),
update and soft delete (owning teacher).
"""
from fastapi import APIRouter, Depends, Query, Response, status

from educonnect.api.deps import get_current_user, get_recorder, get_store
from educonnect.models.user import User
from educonnect.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from educonnect.services import courses as course_service
from educonnect.services.activity import ActivityRecorder
from educonnect.services.store import EntityStore

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("", response_model=list[CourseResponse])
def list_courses(
    include_inactive: bool = Query(default=False, alias="includeInactive"),
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """Teachers: own courses (soft-deleted ones only with includeInactive=true). Others: all active courses."""
    return course_service.list_courses_for(store, current_user, include_inactive=include_inactive)


@router.get("/{course_id}", response_model=CourseResponse)
def get_course(
    course_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return store.get_course(course_id)


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(
    data: CourseCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
    recorder: ActivityRecorder = Depends(get_recorder),
):
    return course_service.create_course(store, recorder, current_user, data)


@router.put("/{course_id}", response_model=CourseResponse)
def update_course(
    course_id: int,
    data: CourseUpdate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return course_service.update_course(store, current_user, course_id, data)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(
    course_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    course_service.delete_course(store, current_user, course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
