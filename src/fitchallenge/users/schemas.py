"""Request/response schemas for user endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from fitchallenge.schemas import ApiModel


class UserCreateRequest(ApiModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=64)
    avatar: str | None = None


class UserUpdateRequest(ApiModel):
    """Partial update. Aggregate stats are not writable here."""

    name: str | None = Field(None, min_length=1, max_length=64)
    avatar: str | None = None
    current_day: int | None = Field(None, ge=1)


class UserResponse(ApiModel):
    """Full user profile with aggregate stats."""

    id: int
    email: str
    name: str
    avatar: str | None = None
    current_day: int
    current_streak: int
    longest_streak: int
    total_points: int
    total_challenges: int
    success_rate: int
    badges: list[str] = []
    group_ids: list[int] = []
    created_at: datetime | None = None
    last_login_at: datetime | None = None
