"""Activity feed recording and reads."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from fitchallenge.db.models import Activity

if TYPE_CHECKING:
    from fitchallenge.store import EntityStore

ACTIVITY_TYPES = frozenset({"challenge_completed", "streak_milestone", "badge_earned", "joined_group"})


async def record_activity(
    store: EntityStore,
    user_id: int,
    activity_type: str,
    content: str,
    related_id: str | None = None,
    group_id: int | None = None,
) -> Activity:
    """Record a feed entry. Part of the caller's transaction; does not commit."""
    if activity_type not in ACTIVITY_TYPES:
        raise ValueError(f"Unknown activity type: {activity_type}")
    return await store.add_activity(Activity(
        user_id=user_id,
        type=activity_type,
        content=content,
        related_id=related_id,
        group_id=group_id,
        created_at=datetime.now(timezone.utc),
    ))


async def get_user_activity(
    store: EntityStore,
    user_id: int,
    page: int = 1,
    per_page: int = 20,
) -> tuple[list[Activity], int]:
    """A user's own feed, newest first."""
    return await store.list_activities(user_id=user_id, page=page, per_page=per_page)


async def get_group_activity(
    store: EntityStore,
    group_id: int,
    page: int = 1,
    per_page: int = 20,
) -> tuple[list[Activity], int]:
    """Feed entries tagged with a group, newest first."""
    return await store.list_activities(group_id=group_id, page=page, per_page=per_page)
