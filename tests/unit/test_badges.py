"""Unit tests for badge rules."""

from fitchallenge.gamification.badges import BADGE_RULES, new_badges, qualifying_badges
from fitchallenge.gamification.stats import UserStats


class TestQualifyingBadges:
    def test_fresh_user_has_none(self):
        assert qualifying_badges(UserStats()) == []

    def test_three_streak_is_on_fire(self):
        stats = UserStats(current_streak=3, longest_streak=3, total_points=300, total_challenges=3)
        assert qualifying_badges(stats) == ["on_fire"]

    def test_five_challenges_is_strength_king(self):
        stats = UserStats(current_streak=0, longest_streak=2, total_points=350, total_challenges=5)
        assert qualifying_badges(stats) == ["strength_king"]

    def test_seven_streak_earns_both_streak_badges(self):
        stats = UserStats(current_streak=7, longest_streak=7, total_points=700, total_challenges=7)
        assert qualifying_badges(stats) == ["on_fire", "strength_king", "seven_day_streak"]

    def test_thousand_points_is_star_player(self):
        stats = UserStats(current_streak=0, longest_streak=1, total_points=1000, total_challenges=20)
        assert "star_player" in qualifying_badges(stats)

    def test_rule_ids_are_unique(self):
        ids = [rule["id"] for rule in BADGE_RULES]
        assert len(ids) == len(set(ids))


class TestNewBadges:
    def test_already_held_badges_not_repeated(self):
        stats = UserStats(current_streak=7, longest_streak=7, total_points=700, total_challenges=7)
        assert new_badges(stats, ["on_fire"]) == ["strength_king", "seven_day_streak"]

    def test_nothing_new(self):
        stats = UserStats(current_streak=3, longest_streak=3, total_points=300, total_challenges=3)
        assert new_badges(stats, ["on_fire"]) == []
