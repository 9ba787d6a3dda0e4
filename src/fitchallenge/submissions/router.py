"""Submission endpoints: record, list, react, comment."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fitchallenge.dependencies import get_store
from fitchallenge.store import EntityStore
from fitchallenge.submissions.schemas import (
    CommentRequest,
    ReactionRequest,
    SubmissionCreateRequest,
    SubmissionResponse,
)
from fitchallenge.submissions.service import (
    add_comment,
    add_reaction,
    list_group_submissions,
    list_user_submissions,
    record_submission,
)

router = APIRouter(prefix="/api", tags=["Submissions"])


@router.post("/submissions", response_model=SubmissionResponse)
async def create_submission_endpoint(
    body: SubmissionCreateRequest,
    store: EntityStore = Depends(get_store),
) -> SubmissionResponse:
    """Record a challenge attempt and update the submitter's stats."""
    submission = await record_submission(
        store,
        user_id=body.user_id,
        challenge_id=body.challenge_id,
        challenge_day=body.challenge_day,
        submission_type=body.type,
        content=body.content,
        is_success=body.is_success,
        group_id=body.group_id,
    )
    return SubmissionResponse.model_validate(submission)


@router.get("/users/{user_id}/submissions", response_model=list[SubmissionResponse])
async def list_user_submissions_endpoint(
    user_id: int,
    store: EntityStore = Depends(get_store),
) -> list[SubmissionResponse]:
    submissions = await list_user_submissions(store, user_id)
    return [SubmissionResponse.model_validate(s) for s in submissions]


@router.get("/groups/{group_id}/submissions", response_model=list[SubmissionResponse])
async def list_group_submissions_endpoint(
    group_id: int,
    store: EntityStore = Depends(get_store),
) -> list[SubmissionResponse]:
    submissions = await list_group_submissions(store, group_id)
    return [SubmissionResponse.model_validate(s) for s in submissions]


@router.post("/submissions/{submission_id}/reactions", response_model=SubmissionResponse)
async def add_reaction_endpoint(
    submission_id: int,
    body: ReactionRequest,
    store: EntityStore = Depends(get_store),
) -> SubmissionResponse:
    submission = await add_reaction(store, submission_id, body.user_id, body.type)
    return SubmissionResponse.model_validate(submission)


@router.post("/submissions/{submission_id}/comments", response_model=SubmissionResponse)
async def add_comment_endpoint(
    submission_id: int,
    body: CommentRequest,
    store: EntityStore = Depends(get_store),
) -> SubmissionResponse:
    submission = await add_comment(store, submission_id, body.user_id, body.content)
    return SubmissionResponse.model_validate(submission)
