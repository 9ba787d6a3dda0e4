"""Group business logic: creation, invite-code joins, membership reads.

Rules:
- Invite codes are server-generated, 6-char A-Z0-9, unique per group
- The owner is a member from creation
- Membership is stored on both sides (group.member_ids, user.group_ids)
  and both sides are written in one transaction under row locks
- Reads skip ids that no longer resolve instead of failing
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog

from fitchallenge.activity.service import record_activity
from fitchallenge.db.models import Group, User
from fitchallenge.errors import AlreadyMemberError, NotFoundError, ValidationError
from fitchallenge.groups.invite_codes import (
    generate_unique_invite_code,
    is_valid_invite_code,
    normalize_invite_code,
)
from fitchallenge.redis_client import publish_event

if TYPE_CHECKING:
    from fitchallenge.store import EntityStore

logger = structlog.get_logger()


async def get_group(store: EntityStore, group_id: int) -> Group:
    group = await store.get_group(group_id)
    if group is None:
        raise NotFoundError("Group", group_id)
    return group


async def create_group(
    store: EntityStore,
    owner_id: int,
    name: str,
    description: str | None = None,
    is_public: bool = False,
) -> Group:
    """Create a group. The owner becomes its first member."""
    name = name.strip()
    if not name:
        msg = "Group name is required"
        raise ValidationError(msg)

    owner = await store.lock_user(owner_id)
    if owner is None:
        raise NotFoundError("User", owner_id)

    invite_code = await generate_unique_invite_code(store)
    group = await store.add_group(Group(
        name=name,
        description=description,
        owner_id=owner_id,
        member_ids=[owner_id],
        total_points=0,
        is_public=is_public,
        invite_code=invite_code,
        created_at=datetime.now(timezone.utc),
    ))

    owner.group_ids = [*(owner.group_ids or []), group.id]
    await store.commit()

    logger.info("group_created", group_id=group.id, owner_id=owner_id)
    return group


async def join_group(store: EntityStore, invite_code: str, user_id: int) -> Group:
    """
    Join a group using an invite code.

    Raises:
        NotFoundError: No group has this code, or the user does not exist.
        AlreadyMemberError: The user is already a member.
    """
    code = normalize_invite_code(invite_code)
    found = await store.get_group_by_invite_code(code) if is_valid_invite_code(code) else None
    if found is None:
        raise NotFoundError("Invite code", code)

    # Lock order: group, then user.
    group = await store.lock_group(found.id)
    if group is None:
        raise NotFoundError("Invite code", code)
    user = await store.lock_user(user_id)
    if user is None:
        raise NotFoundError("User", user_id)

    if user_id in (group.member_ids or []):
        raise AlreadyMemberError()

    group.member_ids = [*(group.member_ids or []), user_id]
    if group.id not in (user.group_ids or []):
        user.group_ids = [*(user.group_ids or []), group.id]

    await record_activity(
        store, user_id, "joined_group",
        f"{user.name} joined {group.name}",
        related_id=str(group.id), group_id=group.id,
    )
    await store.commit()

    logger.info("group_joined", group_id=group.id, user_id=user_id)
    await publish_event("pubsub:group_join", {"group_id": group.id, "user_id": user_id})
    return group


async def list_user_groups(store: EntityStore, user_id: int) -> list[Group]:
    """Groups the user belongs to, in join order."""
    user = await store.get_user(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    group_ids = user.group_ids or []
    groups = await store.get_groups(group_ids)
    return [groups[gid] for gid in group_ids if gid in groups]


async def list_group_members(store: EntityStore, group_id: int) -> list[User]:
    """Member users of a group, in join order."""
    group = await get_group(store, group_id)
    member_ids = group.member_ids or []
    users = await store.get_users(member_ids)
    return [users[uid] for uid in member_ids if uid in users]
