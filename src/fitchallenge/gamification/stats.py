"""Pure aggregate-stat arithmetic for a single submission result.

successRate is points earned over the maximum possible (100 per attempt),
so a failed attempt, which still earns 50, counts as half a success. This
is the formula the app has always shown; it is kept as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

SUCCESS_POINTS = 100
FAILURE_POINTS = 50
MAX_POINTS_PER_ATTEMPT = 100


@dataclass(frozen=True)
class UserStats:
    """Snapshot of the aggregate fields the stats updater owns."""

    current_streak: int = 0
    longest_streak: int = 0
    total_points: int = 0
    total_challenges: int = 0
    success_rate: int = 0


def points_for(is_success: bool) -> int:
    """Flat award policy: 100 on success, 50 on failure, whatever the challenge declares."""
    return SUCCESS_POINTS if is_success else FAILURE_POINTS


def round_half_up(numerator: int, denominator: int) -> int:
    """Round a non-negative fraction to the nearest integer, halves going up."""
    return (2 * numerator + denominator) // (2 * denominator)


def success_rate(total_points: int, total_challenges: int) -> int:
    """round(total_points / (total_challenges * 100) * 100); 0 before any attempt."""
    if total_challenges <= 0:
        return 0
    return round_half_up(total_points * 100, total_challenges * MAX_POINTS_PER_ATTEMPT)


def compute_stats(stats: UserStats, is_success: bool, points_awarded: int) -> UserStats:
    """Apply one submission result to a stats snapshot.

    Success extends the streak and raises the longest streak if passed;
    failure resets the current streak and leaves the longest untouched.
    """
    total_challenges = stats.total_challenges + 1
    total_points = stats.total_points + points_awarded

    if is_success:
        current_streak = stats.current_streak + 1
        longest_streak = max(stats.longest_streak, current_streak)
    else:
        current_streak = 0
        longest_streak = stats.longest_streak

    return replace(
        stats,
        current_streak=current_streak,
        longest_streak=longest_streak,
        total_points=total_points,
        total_challenges=total_challenges,
        success_rate=success_rate(total_points, total_challenges),
    )
