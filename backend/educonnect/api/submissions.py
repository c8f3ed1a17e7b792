"""
Submissions API: submit (student; resubmitting replaces and answers 200), own submissions,
an assignment's submissions and grading (owning teacher).
"""
from fastapi import APIRouter, Depends, Response, status

from educonnect.api.deps import get_current_user, get_recorder, get_store
from educonnect.models.user import User
from educonnect.schemas.submission import GradeRequest, SubmissionCreate, SubmissionResponse
from educonnect.services import submissions as submission_service
from educonnect.services.activity import ActivityRecorder
from educonnect.services.store import EntityStore

router = APIRouter(prefix="/api/submissions", tags=["submissions"])


@router.post("", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
def submit(
    data: SubmissionCreate,
    response: Response,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
    recorder: ActivityRecorder = Depends(get_recorder),
):
    submission, created = submission_service.submit(store, recorder, current_user, data)
    if not created:
        response.status_code = status.HTTP_200_OK
    return submission


@router.get("/student", response_model=list[SubmissionResponse])
def my_submissions(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return submission_service.list_for_student(store, current_user)


@router.get("/assignment/{assignment_id}", response_model=list[SubmissionResponse])
def assignment_submissions(
    assignment_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return submission_service.list_for_assignment(store, current_user, assignment_id)


@router.patch("/{submission_id}/grade", response_model=SubmissionResponse)
def grade_submission(
    submission_id: int,
    data: GradeRequest,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return submission_service.grade(store, current_user, submission_id, data)
