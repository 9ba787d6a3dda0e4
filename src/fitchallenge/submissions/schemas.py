"""Pydantic schemas for submission endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from fitchallenge.schemas import ApiModel

SubmissionType = Literal["video", "photo", "text", "emoji"]
ReactionKind = Literal["heart", "fire", "clap"]


class SubmissionCreateRequest(ApiModel):
    user_id: int
    challenge_id: int
    challenge_day: int = Field(..., ge=1)
    type: SubmissionType
    content: str = Field(..., min_length=1)
    is_success: bool
    group_id: int | None = None


class ReactionRequest(ApiModel):
    user_id: int
    type: ReactionKind


class CommentRequest(ApiModel):
    user_id: int
    content: str = Field(..., min_length=1, max_length=1000)


class ReactionResponse(ApiModel):
    user_id: int
    type: str


class CommentResponse(ApiModel):
    user_id: int
    content: str
    created_at: datetime


class SubmissionResponse(ApiModel):
    id: int
    user_id: int
    challenge_id: int
    challenge_day: int
    type: str
    content: str
    is_success: bool
    points: int
    group_id: int | None = None
    reactions: list[ReactionResponse] = []
    comments: list[CommentResponse] = []
    created_at: datetime | None = None
