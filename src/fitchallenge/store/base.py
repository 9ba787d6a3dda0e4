"""Storage-agnostic entity store interface.

Services depend on this protocol only; the concrete adapter is chosen at
configuration time (see fitchallenge.store.sql).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from fitchallenge.db.models import Activity, Challenge, Group, Submission, User


class EntityStore(Protocol):
    """Get/create/update/query operations per entity, plus transaction control."""

    # --- Users ---
    async def get_user(self, user_id: int) -> User | None: ...
    async def get_user_by_email(self, email: str) -> User | None: ...
    async def lock_user(self, user_id: int) -> User | None: ...
    async def get_users(self, user_ids: Sequence[int]) -> dict[int, User]: ...
    async def add_user(self, user: User) -> User: ...

    # --- Challenges ---
    async def list_challenges(self) -> list[Challenge]: ...
    async def get_challenge(self, challenge_id: int) -> Challenge | None: ...
    async def get_challenge_by_day(self, day: int) -> Challenge | None: ...
    async def count_challenges(self) -> int: ...
    async def add_challenge(self, challenge: Challenge) -> Challenge: ...

    # --- Submissions ---
    async def add_submission(self, submission: Submission) -> Submission: ...
    async def lock_submission(self, submission_id: int) -> Submission | None: ...
    async def list_user_submissions(self, user_id: int) -> list[Submission]: ...
    async def list_group_submissions(self, group_id: int) -> list[Submission]: ...

    # --- Groups ---
    async def add_group(self, group: Group) -> Group: ...
    async def get_group(self, group_id: int) -> Group | None: ...
    async def lock_group(self, group_id: int) -> Group | None: ...
    async def get_group_by_invite_code(self, invite_code: str) -> Group | None: ...
    async def get_groups(self, group_ids: Sequence[int]) -> dict[int, Group]: ...

    # --- Activity ---
    async def add_activity(self, activity: Activity) -> Activity: ...
    async def list_activities(
        self,
        *,
        user_id: int | None = None,
        group_id: int | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[list[Activity], int]: ...

    # --- Unit of work ---
    async def flush(self) -> None: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
