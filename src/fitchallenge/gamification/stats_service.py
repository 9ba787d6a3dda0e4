"""Stats updater: locked read-modify-write of a user's aggregate fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from fitchallenge.activity.service import record_activity
from fitchallenge.gamification.badges import BADGE_RULES, new_badges
from fitchallenge.gamification.stats import UserStats, compute_stats

if TYPE_CHECKING:
    from fitchallenge.db.models import User
    from fitchallenge.store import EntityStore

logger = structlog.get_logger()

STREAK_MILESTONE_EVERY = 7

_BADGE_NAMES = {rule["id"]: rule["name"] for rule in BADGE_RULES}


def stats_of(user: User) -> UserStats:
    """Snapshot the aggregate fields of a user row."""
    return UserStats(
        current_streak=user.current_streak,
        longest_streak=user.longest_streak,
        total_points=user.total_points,
        total_challenges=user.total_challenges,
        success_rate=user.success_rate,
    )


async def apply_result(
    store: EntityStore,
    user_id: int,
    is_success: bool,
    points_awarded: int,
    group_id: int | None = None,
) -> UserStats | None:
    """Fold one submission result into the user's aggregates.

    The user row is read under a row lock so concurrent submissions for the
    same user serialize instead of losing an update. Runs inside the
    caller's transaction; the caller commits.

    A missing user is logged and skipped (returns None) rather than raised.
    """
    user = await store.lock_user(user_id)
    if user is None:
        logger.warning("stats_skipped_missing_user", user_id=user_id)
        return None

    updated = compute_stats(stats_of(user), is_success, points_awarded)

    user.current_streak = updated.current_streak
    user.longest_streak = updated.longest_streak
    user.total_points = updated.total_points
    user.total_challenges = updated.total_challenges
    user.success_rate = updated.success_rate

    earned = new_badges(updated, user.badges or [])
    if earned:
        user.badges = [*(user.badges or []), *earned]
        for badge in earned:
            await record_activity(
                store, user_id, "badge_earned",
                f"Earned the {_BADGE_NAMES[badge]} badge",
                related_id=badge, group_id=group_id,
            )
            logger.info("badge_awarded", user_id=user_id, badge=badge)

    if is_success and updated.current_streak % STREAK_MILESTONE_EVERY == 0:
        await record_activity(
            store, user_id, "streak_milestone",
            f"{updated.current_streak}-challenge streak",
            group_id=group_id,
        )

    await store.flush()
    logger.info(
        "stats_applied",
        user_id=user_id,
        is_success=is_success,
        points=points_awarded,
        current_streak=updated.current_streak,
        total_points=updated.total_points,
    )
    return updated
