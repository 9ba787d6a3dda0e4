"""Activity feed endpoints for users and groups."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from fitchallenge.activity.schemas import ActivityFeedResponse, ActivityResponse
from fitchallenge.activity.service import get_group_activity, get_user_activity
from fitchallenge.config import get_settings
from fitchallenge.dependencies import get_store
from fitchallenge.errors import NotFoundError
from fitchallenge.store import EntityStore

router = APIRouter(prefix="/api", tags=["Activity"])


def _feed(activities: list, total: int, page: int, per_page: int) -> ActivityFeedResponse:
    return ActivityFeedResponse(
        activities=[ActivityResponse.model_validate(a) for a in activities],
        total=total,
        page=page,
        per_page=per_page,
    )


@router.get("/users/{user_id}/activity", response_model=ActivityFeedResponse)
async def user_activity_endpoint(
    user_id: int,
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=1, le=100, alias="perPage"),
    store: EntityStore = Depends(get_store),
) -> ActivityFeedResponse:
    """A user's activity feed (paginated)."""
    if await store.get_user(user_id) is None:
        raise NotFoundError("User", user_id)
    size = per_page or get_settings().activity_page_size
    activities, total = await get_user_activity(store, user_id, page, size)
    return _feed(activities, total, page, size)


@router.get("/groups/{group_id}/activity", response_model=ActivityFeedResponse)
async def group_activity_endpoint(
    group_id: int,
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=1, le=100, alias="perPage"),
    store: EntityStore = Depends(get_store),
) -> ActivityFeedResponse:
    """Recent activity of a group's members (paginated)."""
    if await store.get_group(group_id) is None:
        raise NotFoundError("Group", group_id)
    size = per_page or get_settings().activity_page_size
    activities, total = await get_group_activity(store, group_id, page, size)
    return _feed(activities, total, page, size)
