"""Clock helpers and leaderboard time windows."""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo

from .config import LEADERBOARD_TZ


class TimeFilter(str, Enum):
    """Lower bound applied to ``created_at`` when building a leaderboard."""

    ALL_TIME = "all_time"
    TODAY = "today"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"


def utcnow() -> datetime:
    """Return the current UTC datetime."""

    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values read back from storage, convert the rest."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def leaderboard_tz() -> Optional[ZoneInfo]:
    """Configured zone for window boundaries, ``None`` for the server's own."""

    return LEADERBOARD_TZ


def window_start(
    time_filter: TimeFilter,
    now: Optional[datetime] = None,
    tz: Optional[ZoneInfo] = None,
) -> Optional[datetime]:
    """Return the inclusive UTC lower bound for ``time_filter``.

    ``today`` starts at local midnight, ``this_week`` at midnight of the most
    recent Monday and ``this_month`` at midnight on the first of the month.
    ``all_time`` has no bound and yields ``None``. Without ``tz`` (or a
    configured ``LEADERBOARD_TZ``) boundaries follow the system local zone.
    """

    if time_filter is TimeFilter.ALL_TIME:
        return None

    zone = tz or leaderboard_tz()
    current = as_utc(now or utcnow())
    local_now = current.astimezone(zone) if zone else current.astimezone()
    day = local_now.date()

    if time_filter is TimeFilter.THIS_WEEK:
        # weekday() is 0 on Monday, so Sunday walks back six days.
        day = day - timedelta(days=day.weekday())
    elif time_filter is TimeFilter.THIS_MONTH:
        day = day.replace(day=1)

    midnight = datetime.combine(day, time.min)
    if zone:
        midnight = midnight.replace(tzinfo=zone)
    else:
        # Naive values are interpreted as system local time.
        midnight = midnight.astimezone()
    return midnight.astimezone(timezone.utc)


__all__ = ["TimeFilter", "as_utc", "leaderboard_tz", "utcnow", "window_start"]
