"""SQLAlchemy adapter for the entity store."""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fitchallenge.db.models import Activity, Challenge, Group, Submission, User
from fitchallenge.errors import PersistenceError

logger = structlog.get_logger()

T = TypeVar("T")


def _translate_errors(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Re-raise driver/ORM failures as PersistenceError."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> T:  # noqa: ANN401
        try:
            return await fn(*args, **kwargs)
        except SQLAlchemyError as exc:
            logger.error("store_operation_failed", operation=fn.__name__, error=str(exc))
            raise PersistenceError() from exc

    return wrapper


class SqlEntityStore:
    """EntityStore backed by one AsyncSession (one unit of work per request)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # -- helpers --

    async def _add(self, obj: T) -> T:
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def _locked(self, model: type[T], pk: int) -> T | None:
        # FOR UPDATE is a no-op on SQLite; the write transaction serializes instead.
        result = await self.session.execute(
            select(model)
            .where(model.id == pk)  # type: ignore[attr-defined]
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    # --- Users ---

    @_translate_errors
    async def get_user(self, user_id: int) -> User | None:
        return await self.session.get(User, user_id)

    @_translate_errors
    async def get_user_by_email(self, email: str) -> User | None:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    @_translate_errors
    async def lock_user(self, user_id: int) -> User | None:
        return await self._locked(User, user_id)

    @_translate_errors
    async def get_users(self, user_ids: Sequence[int]) -> dict[int, User]:
        if not user_ids:
            return {}
        result = await self.session.execute(select(User).where(User.id.in_(list(user_ids))))
        return {u.id: u for u in result.scalars()}

    @_translate_errors
    async def add_user(self, user: User) -> User:
        return await self._add(user)

    # --- Challenges ---

    @_translate_errors
    async def list_challenges(self) -> list[Challenge]:
        result = await self.session.execute(select(Challenge).order_by(Challenge.day.asc()))
        return list(result.scalars().all())

    @_translate_errors
    async def get_challenge(self, challenge_id: int) -> Challenge | None:
        return await self.session.get(Challenge, challenge_id)

    @_translate_errors
    async def get_challenge_by_day(self, day: int) -> Challenge | None:
        result = await self.session.execute(select(Challenge).where(Challenge.day == day).limit(1))
        return result.scalar_one_or_none()

    @_translate_errors
    async def count_challenges(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Challenge))
        return result.scalar_one()

    @_translate_errors
    async def add_challenge(self, challenge: Challenge) -> Challenge:
        return await self._add(challenge)

    # --- Submissions ---

    @_translate_errors
    async def add_submission(self, submission: Submission) -> Submission:
        return await self._add(submission)

    @_translate_errors
    async def lock_submission(self, submission_id: int) -> Submission | None:
        return await self._locked(Submission, submission_id)

    @_translate_errors
    async def list_user_submissions(self, user_id: int) -> list[Submission]:
        result = await self.session.execute(
            select(Submission)
            .where(Submission.user_id == user_id)
            .order_by(Submission.created_at.desc(), Submission.id.desc())
        )
        return list(result.scalars().all())

    @_translate_errors
    async def list_group_submissions(self, group_id: int) -> list[Submission]:
        result = await self.session.execute(
            select(Submission)
            .where(Submission.group_id == group_id)
            .order_by(Submission.created_at.desc(), Submission.id.desc())
        )
        return list(result.scalars().all())

    # --- Groups ---

    @_translate_errors
    async def add_group(self, group: Group) -> Group:
        return await self._add(group)

    @_translate_errors
    async def get_group(self, group_id: int) -> Group | None:
        return await self.session.get(Group, group_id)

    @_translate_errors
    async def lock_group(self, group_id: int) -> Group | None:
        return await self._locked(Group, group_id)

    @_translate_errors
    async def get_group_by_invite_code(self, invite_code: str) -> Group | None:
        result = await self.session.execute(select(Group).where(Group.invite_code == invite_code))
        return result.scalar_one_or_none()

    @_translate_errors
    async def get_groups(self, group_ids: Sequence[int]) -> dict[int, Group]:
        if not group_ids:
            return {}
        result = await self.session.execute(select(Group).where(Group.id.in_(list(group_ids))))
        return {g.id: g for g in result.scalars()}

    # --- Activity ---

    @_translate_errors
    async def add_activity(self, activity: Activity) -> Activity:
        return await self._add(activity)

    @_translate_errors
    async def list_activities(
        self,
        *,
        user_id: int | None = None,
        group_id: int | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[list[Activity], int]:
        filters = []
        if user_id is not None:
            filters.append(Activity.user_id == user_id)
        if group_id is not None:
            filters.append(Activity.group_id == group_id)

        total_result = await self.session.execute(
            select(func.count()).select_from(Activity).where(*filters)
        )
        total = total_result.scalar_one()

        result = await self.session.execute(
            select(Activity)
            .where(*filters)
            .order_by(Activity.created_at.desc(), Activity.id.desc())
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        return list(result.scalars().all()), total

    # --- Unit of work ---

    @_translate_errors
    async def flush(self) -> None:
        await self.session.flush()

    @_translate_errors
    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
