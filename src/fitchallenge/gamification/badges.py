"""Badge rules evaluated against a user's aggregate stats.

Badges are only ever added to a user's set, never taken away, so a badge
earned on a streak survives the streak being reset.
"""

from __future__ import annotations

from fitchallenge.gamification.stats import UserStats

BADGE_RULES: list[dict] = [
    {"id": "on_fire", "name": "On Fire", "emoji": "🔥", "stat": "current_streak", "threshold": 3},
    {"id": "strength_king", "name": "Strength King", "emoji": "💪", "stat": "total_challenges", "threshold": 5},
    {"id": "seven_day_streak", "name": "7-Day Streak", "emoji": "📅", "stat": "current_streak", "threshold": 7},
    {"id": "star_player", "name": "Star Player", "emoji": "⭐", "stat": "total_points", "threshold": 1000},
]


def qualifying_badges(stats: UserStats) -> list[str]:
    """Badge ids whose threshold the stats meet, in rule order."""
    return [
        rule["id"]
        for rule in BADGE_RULES
        if getattr(stats, rule["stat"]) >= rule["threshold"]
    ]


def new_badges(stats: UserStats, held: list[str]) -> list[str]:
    """Qualifying badges not already in ``held``."""
    owned = set(held)
    return [badge for badge in qualifying_badges(stats) if badge not in owned]
