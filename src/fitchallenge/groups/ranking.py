"""Weekly group ranking.

weeklyPoints is an approximation: a fixed 30% of each member's all-time
total, not a sum over this week's submissions. weekStart is reported but
does not filter anything. Ranks follow sort order 1..N with no sharing;
ties keep member-list order (the sort is stable).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from fitchallenge.errors import NotFoundError
from fitchallenge.groups.week_utils import get_week_start

if TYPE_CHECKING:
    from fitchallenge.db.models import User
    from fitchallenge.store import EntityStore

WEEKLY_POINTS_NUMERATOR = 3
WEEKLY_POINTS_DENOMINATOR = 10


def weekly_points(total_points: int) -> int:
    """floor(total_points * 0.3) in integer arithmetic."""
    return (total_points * WEEKLY_POINTS_NUMERATOR) // WEEKLY_POINTS_DENOMINATOR


def rank_members(
    group_id: int,
    members: list[User],
    week_start: datetime,
) -> list[dict[str, Any]]:
    """Build ranking rows for members in iteration order, then rank them.

    Output: one dict per member, sorted by weekly_points DESC, with
    rank (1-indexed), weekly_points, completed_challenges and week_start.
    """
    rows = [
        {
            "id": f"{group_id}_{member.id}",
            "user_id": member.id,
            "group_id": group_id,
            "name": member.name,
            "avatar": member.avatar,
            "week_start": week_start,
            "weekly_points": weekly_points(member.total_points),
            "completed_challenges": member.total_challenges,
            "rank": 0,
        }
        for member in members
    ]

    ranked = sorted(rows, key=lambda r: -r["weekly_points"])
    for idx, row in enumerate(ranked):
        row["rank"] = idx + 1
    return ranked


async def compute_ranking(
    store: EntityStore,
    group_id: int,
    now: datetime | None = None,
) -> list[dict[str, Any]]:
    """Recompute a group's weekly ranking from current member stats.

    Members whose user row no longer exists are skipped. Nothing is cached.
    """
    group = await store.get_group(group_id)
    if group is None:
        raise NotFoundError("Group", group_id)

    users = await store.get_users(group.member_ids or [])
    members = [users[mid] for mid in group.member_ids or [] if mid in users]
    return rank_members(group_id, members, get_week_start(now))
