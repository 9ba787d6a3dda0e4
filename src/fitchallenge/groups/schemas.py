"""Pydantic schemas for group endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from fitchallenge.schemas import ApiModel


class CreateGroupRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=64)
    description: str | None = Field(None, max_length=256)
    owner_id: int
    is_public: bool = False


class JoinGroupRequest(ApiModel):
    invite_code: str = Field(..., min_length=1, max_length=16)
    user_id: int


class JoinGroupResponse(ApiModel):
    success: bool = True
    group_id: int


class GroupResponse(ApiModel):
    id: int
    name: str
    description: str | None = None
    owner_id: int
    member_ids: list[int] = []
    total_points: int
    is_public: bool
    invite_code: str
    created_at: datetime | None = None


class WeeklyRankingResponse(ApiModel):
    id: str
    user_id: int
    group_id: int
    name: str
    avatar: str | None = None
    week_start: datetime
    weekly_points: int
    rank: int
    completed_challenges: int
