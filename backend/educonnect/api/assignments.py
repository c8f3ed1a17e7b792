"""
Assignments API: create/update/delete (owning teacher), list by course.
"""
from fastapi import APIRouter, Depends, Response, status

from educonnect.api.deps import get_current_user, get_recorder, get_store
from educonnect.models.user import User
from educonnect.schemas.assignment import AssignmentCreate, AssignmentResponse, AssignmentUpdate
from educonnect.services import assignments as assignment_service
from educonnect.services.activity import ActivityRecorder
from educonnect.services.store import EntityStore

router = APIRouter(prefix="/api/assignments", tags=["assignments"])


@router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
def create_assignment(
    data: AssignmentCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
    recorder: ActivityRecorder = Depends(get_recorder),
):
    return assignment_service.create_assignment(store, recorder, current_user, data)


@router.get("/course/{course_id}", response_model=list[AssignmentResponse])
def course_assignments(
    course_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return assignment_service.list_for_course(store, course_id)


@router.put("/{assignment_id}", response_model=AssignmentResponse)
def update_assignment(
    assignment_id: int,
    data: AssignmentUpdate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return assignment_service.update_assignment(store, current_user, assignment_id, data)


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_assignment(
    assignment_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    assignment_service.delete_assignment(store, current_user, assignment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
