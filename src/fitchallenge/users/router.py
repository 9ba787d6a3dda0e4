"""User router: /api/users/* endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fitchallenge.dependencies import get_store
from fitchallenge.store import EntityStore
from fitchallenge.users.schemas import UserCreateRequest, UserResponse, UserUpdateRequest
from fitchallenge.users.service import (
    create_user,
    get_user,
    get_user_by_email,
    record_login,
    update_user,
)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email_endpoint(
    email: str,
    store: EntityStore = Depends(get_store),
) -> UserResponse:
    """Look a user up by email."""
    user = await get_user_by_email(store, email)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_endpoint(
    user_id: int,
    store: EntityStore = Depends(get_store),
) -> UserResponse:
    user = await get_user(store, user_id)
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse)
async def create_user_endpoint(
    body: UserCreateRequest,
    store: EntityStore = Depends(get_store),
) -> UserResponse:
    """Register a user with fresh progress."""
    user = await create_user(store, body.email, body.name, body.avatar)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user_endpoint(
    user_id: int,
    body: UserUpdateRequest,
    store: EntityStore = Depends(get_store),
) -> UserResponse:
    """Partial update of name, avatar and current day."""
    user = await update_user(
        store,
        user_id,
        name=body.name,
        avatar=body.avatar,
        current_day=body.current_day,
    )
    return UserResponse.model_validate(user)


@router.post("/{user_id}/login", response_model=UserResponse)
async def record_login_endpoint(
    user_id: int,
    store: EntityStore = Depends(get_store),
) -> UserResponse:
    """Stamp the user's last login time."""
    user = await record_login(store, user_id)
    return UserResponse.model_validate(user)
