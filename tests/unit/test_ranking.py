"""Unit tests for weekly ranking computation."""

from datetime import date, datetime, timedelta, timezone

from fitchallenge.db.models import User
from fitchallenge.groups.ranking import rank_members, weekly_points
from fitchallenge.groups.week_utils import get_monday, get_week_start

WEEK_START = datetime(2026, 10, 19, tzinfo=timezone.utc)


def _user(user_id: int, total_points: int, total_challenges: int = 0) -> User:
    return User(
        id=user_id,
        email=f"u{user_id}@example.com",
        name=f"User {user_id}",
        total_points=total_points,
        total_challenges=total_challenges,
    )


class TestWeeklyPoints:
    def test_thirty_percent_floored(self):
        assert weekly_points(0) == 0
        assert weekly_points(100) == 30
        assert weekly_points(150) == 45
        assert weekly_points(55) == 16  # 16.5 floors


class TestRankMembers:
    def test_empty_group(self):
        assert rank_members(1, [], WEEK_START) == []

    def test_sorted_descending_with_dense_ranks(self):
        members = [_user(1, 100), _user(2, 500), _user(3, 250)]
        ranked = rank_members(7, members, WEEK_START)

        assert [r["user_id"] for r in ranked] == [2, 3, 1]
        assert [r["rank"] for r in ranked] == [1, 2, 3]
        points = [r["weekly_points"] for r in ranked]
        assert points == sorted(points, reverse=True)

    def test_ties_keep_member_order_and_do_not_share_rank(self):
        members = [_user(1, 100), _user(2, 300), _user(3, 100), _user(4, 100)]
        ranked = rank_members(7, members, WEEK_START)

        assert [r["user_id"] for r in ranked] == [2, 1, 3, 4]
        assert [r["rank"] for r in ranked] == [1, 2, 3, 4]

    def test_row_contents(self):
        ranked = rank_members(7, [_user(9, 1000, total_challenges=12)], WEEK_START)
        row = ranked[0]
        assert row["id"] == "7_9"
        assert row["group_id"] == 7
        assert row["weekly_points"] == 300
        assert row["completed_challenges"] == 12
        assert row["week_start"] == WEEK_START
        assert row["rank"] == 1


class TestWeekUtils:
    def test_monday_of_week(self):
        # 2026-10-22 is a Thursday
        assert get_monday(date(2026, 10, 22)) == date(2026, 10, 19)
        assert get_monday(date(2026, 10, 19)) == date(2026, 10, 19)
        assert get_monday(date(2026, 10, 25)) == date(2026, 10, 19)

    def test_week_start_is_monday_midnight_utc(self):
        now = datetime(2026, 10, 22, 15, 30, tzinfo=timezone.utc)
        assert get_week_start(now) == datetime(2026, 10, 19, 0, 0, tzinfo=timezone.utc)

    def test_week_start_uses_utc_date_for_offset_times(self):
        # Monday 01:00 at UTC+3 is still Sunday in UTC
        now = datetime(2026, 10, 19, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        assert get_week_start(now) == datetime(2026, 10, 12, tzinfo=timezone.utc)

        # Sunday 23:30 at UTC-5 is already Monday in UTC
        now = datetime(2026, 10, 25, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert get_week_start(now) == datetime(2026, 10, 26, tzinfo=timezone.utc)
