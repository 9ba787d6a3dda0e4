"""Pydantic schemas for challenge endpoints."""

from __future__ import annotations

from datetime import datetime

from fitchallenge.schemas import ApiModel


class ChallengeResponse(ApiModel):
    id: int
    day: int
    title: str
    description: str
    video_url: str
    duration: str
    difficulty: int
    points: int
    is_active: bool
    created_at: datetime | None = None
