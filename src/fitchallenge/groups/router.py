"""Group endpoints: create, join, membership reads, weekly ranking."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fitchallenge.dependencies import get_store
from fitchallenge.groups.ranking import compute_ranking
from fitchallenge.groups.schemas import (
    CreateGroupRequest,
    GroupResponse,
    JoinGroupRequest,
    JoinGroupResponse,
    WeeklyRankingResponse,
)
from fitchallenge.groups.service import (
    create_group,
    get_group,
    join_group,
    list_group_members,
    list_user_groups,
)
from fitchallenge.store import EntityStore
from fitchallenge.users.schemas import UserResponse

router = APIRouter(prefix="/api", tags=["Groups"])


@router.post("/groups", response_model=GroupResponse)
async def create_group_endpoint(
    body: CreateGroupRequest,
    store: EntityStore = Depends(get_store),
) -> GroupResponse:
    """Create a group; the owner is its first member."""
    group = await create_group(
        store,
        owner_id=body.owner_id,
        name=body.name,
        description=body.description,
        is_public=body.is_public,
    )
    return GroupResponse.model_validate(group)


@router.post("/groups/join", response_model=JoinGroupResponse)
async def join_group_endpoint(
    body: JoinGroupRequest,
    store: EntityStore = Depends(get_store),
) -> JoinGroupResponse:
    """Join a group via invite code. 404 on unknown code, 409 if already a member."""
    group = await join_group(store, body.invite_code, body.user_id)
    return JoinGroupResponse(group_id=group.id)


@router.get("/groups/{group_id}", response_model=GroupResponse)
async def get_group_endpoint(
    group_id: int,
    store: EntityStore = Depends(get_store),
) -> GroupResponse:
    group = await get_group(store, group_id)
    return GroupResponse.model_validate(group)


@router.get("/groups/{group_id}/members", response_model=list[UserResponse])
async def list_group_members_endpoint(
    group_id: int,
    store: EntityStore = Depends(get_store),
) -> list[UserResponse]:
    members = await list_group_members(store, group_id)
    return [UserResponse.model_validate(m) for m in members]


@router.get("/groups/{group_id}/ranking", response_model=list[WeeklyRankingResponse])
async def group_ranking_endpoint(
    group_id: int,
    store: EntityStore = Depends(get_store),
) -> list[WeeklyRankingResponse]:
    """Weekly leaderboard, recomputed on every request."""
    rows = await compute_ranking(store, group_id)
    return [WeeklyRankingResponse.model_validate(r) for r in rows]


@router.get("/users/{user_id}/groups", response_model=list[GroupResponse])
async def list_user_groups_endpoint(
    user_id: int,
    store: EntityStore = Depends(get_store),
) -> list[GroupResponse]:
    groups = await list_user_groups(store, user_id)
    return [GroupResponse.model_validate(g) for g in groups]
