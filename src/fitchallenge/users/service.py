"""User management business logic."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog

from fitchallenge.db.models import User
from fitchallenge.errors import NotFoundError, ValidationError

if TYPE_CHECKING:
    from fitchallenge.store import EntityStore

logger = structlog.get_logger()


async def get_user(store: EntityStore, user_id: int) -> User:
    """Fetch a user or raise NotFoundError."""
    user = await store.get_user(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


async def get_user_by_email(store: EntityStore, email: str) -> User:
    """Fetch a user by email or raise NotFoundError."""
    user = await store.get_user_by_email(email)
    if user is None:
        raise NotFoundError("User", email)
    return user


async def create_user(
    store: EntityStore,
    email: str,
    name: str,
    avatar: str | None = None,
) -> User:
    """
    Create a user with fresh progress: day 1, zero counters, no badges or groups.

    Raises:
        ValidationError: If name is blank or the email is already registered.
    """
    name = name.strip()
    if not name:
        msg = "Name is required"
        raise ValidationError(msg)

    if await store.get_user_by_email(email) is not None:
        msg = "A user with this email already exists"
        raise ValidationError(msg)

    now = datetime.now(timezone.utc)
    user = await store.add_user(User(
        email=email,
        name=name,
        avatar=avatar,
        current_day=1,
        current_streak=0,
        longest_streak=0,
        total_points=0,
        total_challenges=0,
        success_rate=0,
        badges=[],
        group_ids=[],
        created_at=now,
        last_login_at=now,
    ))
    await store.commit()
    logger.info("user_created", user_id=user.id)
    return user


async def update_user(
    store: EntityStore,
    user_id: int,
    name: str | None = None,
    avatar: str | None = None,
    current_day: int | None = None,
) -> User:
    """
    Update profile/progress fields. Aggregate stats are left untouched.

    Raises:
        NotFoundError: If the user does not exist.
        ValidationError: If a blank name or a day below 1 is given.
    """
    user = await get_user(store, user_id)

    if name is not None:
        if not name.strip():
            msg = "Name must not be blank"
            raise ValidationError(msg)
        user.name = name.strip()
    if avatar is not None:
        user.avatar = avatar
    if current_day is not None:
        if current_day < 1:
            msg = "currentDay must be at least 1"
            raise ValidationError(msg)
        user.current_day = current_day

    await store.commit()
    return user


async def record_login(store: EntityStore, user_id: int) -> User:
    """Stamp last_login_at with the current time."""
    user = await get_user(store, user_id)
    user.last_login_at = datetime.now(timezone.utc)
    await store.commit()
    return user
