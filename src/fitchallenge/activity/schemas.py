"""Pydantic schemas for activity feed endpoints."""

from __future__ import annotations

from datetime import datetime

from fitchallenge.schemas import ApiModel


class ActivityResponse(ApiModel):
    id: int
    user_id: int
    type: str
    content: str
    related_id: str | None = None
    group_id: int | None = None
    created_at: datetime | None = None


class ActivityFeedResponse(ApiModel):
    activities: list[ActivityResponse]
    total: int
    page: int
    per_page: int
