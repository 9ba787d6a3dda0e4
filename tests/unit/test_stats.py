"""Unit tests for aggregate stat computation."""

import random

import pytest

from fitchallenge.gamification.stats import (
    FAILURE_POINTS,
    SUCCESS_POINTS,
    UserStats,
    compute_stats,
    points_for,
    round_half_up,
    success_rate,
)


class TestPointsPolicy:
    def test_success_awards_100(self):
        assert points_for(True) == SUCCESS_POINTS == 100

    def test_failure_awards_50(self):
        assert points_for(False) == FAILURE_POINTS == 50


class TestSuccessRate:
    def test_zero_attempts_is_zero(self):
        assert success_rate(0, 0) == 0

    def test_all_successes_is_100(self):
        assert success_rate(300, 3) == 100

    def test_success_then_failure_is_75(self):
        assert success_rate(150, 2) == 75

    def test_single_failure_is_50(self):
        assert success_rate(50, 1) == 50

    def test_rounds_to_nearest(self):
        # 250 / 3 = 83.33
        assert success_rate(250, 3) == 83
        # 200 / 3 = 66.67
        assert success_rate(200, 3) == 67

    @pytest.mark.parametrize(("numerator", "denominator", "expected"), [
        (1, 2, 1),
        (3, 2, 2),
        (5, 2, 3),
        (1, 3, 0),
        (2, 3, 1),
    ])
    def test_round_half_up(self, numerator, denominator, expected):
        assert round_half_up(numerator, denominator) == expected


class TestComputeStats:
    def test_first_success_from_zero(self):
        stats = compute_stats(UserStats(), is_success=True, points_awarded=100)
        assert stats.total_points == 100
        assert stats.total_challenges == 1
        assert stats.current_streak == 1
        assert stats.longest_streak == 1
        assert stats.success_rate == 100

    def test_failure_after_success(self):
        after_success = compute_stats(UserStats(), True, 100)
        stats = compute_stats(after_success, False, 50)
        assert stats.total_points == 150
        assert stats.total_challenges == 2
        assert stats.current_streak == 0
        assert stats.longest_streak == 1
        assert stats.success_rate == 75

    def test_success_extends_streak_below_longest(self):
        before = UserStats(current_streak=2, longest_streak=5, total_points=700, total_challenges=7)
        stats = compute_stats(before, True, 100)
        assert stats.current_streak == 3
        assert stats.longest_streak == 5

    def test_success_raises_longest_when_passed(self):
        before = UserStats(current_streak=5, longest_streak=5, total_points=500, total_challenges=5)
        stats = compute_stats(before, True, 100)
        assert stats.current_streak == 6
        assert stats.longest_streak == 6

    def test_failure_keeps_longest(self):
        before = UserStats(current_streak=4, longest_streak=9, total_points=900, total_challenges=10)
        stats = compute_stats(before, False, 50)
        assert stats.current_streak == 0
        assert stats.longest_streak == 9

    def test_input_snapshot_is_not_mutated(self):
        before = UserStats(current_streak=1, longest_streak=1, total_points=100, total_challenges=1)
        compute_stats(before, True, 100)
        assert before.current_streak == 1
        assert before.total_points == 100

    def test_random_sequences_keep_invariants(self):
        rng = random.Random(42)
        for _ in range(50):
            stats = UserStats()
            for _ in range(rng.randint(1, 40)):
                is_success = rng.random() < 0.7
                previous = stats
                stats = compute_stats(stats, is_success, points_for(is_success))

                assert stats.total_challenges == previous.total_challenges + 1
                assert stats.total_points == previous.total_points + points_for(is_success)
                assert stats.longest_streak >= stats.current_streak
                assert 50 <= stats.success_rate <= 100
                if is_success:
                    assert stats.current_streak == previous.current_streak + 1
                    assert stats.longest_streak == max(previous.longest_streak, stats.current_streak)
                else:
                    assert stats.current_streak == 0
                    assert stats.longest_streak == previous.longest_streak
