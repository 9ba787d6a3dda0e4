"""Week boundary helpers for weekly rankings."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone


def get_monday(dt: datetime | date) -> date:
    """Get the Monday of the ISO week containing dt.

    Aware datetimes are moved to UTC first, so the week follows the UTC date.
    """
    if isinstance(dt, datetime):
        d = (dt.astimezone(timezone.utc) if dt.tzinfo is not None else dt).date()
    else:
        d = dt
    return d - timedelta(days=d.weekday())


def get_week_start(now: datetime | None = None) -> datetime:
    """Monday 00:00 UTC of the ISO week containing now."""
    if now is None:
        now = datetime.now(timezone.utc)
    return datetime.combine(get_monday(now), time.min, tzinfo=timezone.utc)
