"""Challenge catalogue lookups."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from fitchallenge.db.models import Challenge
from fitchallenge.errors import NotFoundError, ValidationError

if TYPE_CHECKING:
    from fitchallenge.store import EntityStore

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 3
DEFAULT_POINTS = 100


async def list_challenges(store: EntityStore) -> list[Challenge]:
    """All challenges ordered by day."""
    return await store.list_challenges()


async def get_challenge(store: EntityStore, challenge_id: int) -> Challenge:
    challenge = await store.get_challenge(challenge_id)
    if challenge is None:
        raise NotFoundError("Challenge", challenge_id)
    return challenge


async def get_challenge_by_day(store: EntityStore, day: int) -> Challenge:
    challenge = await store.get_challenge_by_day(day)
    if challenge is None:
        raise NotFoundError("Challenge", day)
    return challenge


async def create_challenge(
    store: EntityStore,
    day: int,
    title: str,
    description: str,
    video_url: str,
    duration: str,
    difficulty: int = MIN_DIFFICULTY,
    points: int = DEFAULT_POINTS,
    is_active: bool = True,
) -> Challenge:
    """Add a challenge for a day that has none yet."""
    if day < 1:
        msg = "day must be at least 1"
        raise ValidationError(msg)
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        msg = f"difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}"
        raise ValidationError(msg)
    if await store.get_challenge_by_day(day) is not None:
        msg = f"A challenge for day {day} already exists"
        raise ValidationError(msg)

    challenge = await store.add_challenge(Challenge(
        day=day,
        title=title,
        description=description,
        video_url=video_url,
        duration=duration,
        difficulty=difficulty,
        points=points,
        is_active=is_active,
        created_at=datetime.now(timezone.utc),
    ))
    await store.commit()
    return challenge
