#!/usr/bin/env python3
"""
Calendar helpers for relative date resolution.

All arithmetic is wall-clock arithmetic: adding a day keeps the time of day,
adding a month keeps the day of month where it exists. Naive datetimes are
treated as host local time and only receive a UTC offset when formatted.
"""

from datetime import datetime, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

ONE_SECOND = timedelta(seconds=1)

_MIDNIGHT = dict(hour=0, minute=0, second=0, microsecond=0)


def now_local() -> datetime:
    """
    Get the current host local time.

    Returns:
        Naive datetime in host local time
    """
    return datetime.now()


def localize(dt: datetime) -> datetime:
    """
    Attach the host's local UTC offset to a naive datetime.

    Aware datetimes are returned unchanged.
    """
    if dt.tzinfo is None:
        return dt.astimezone()
    return dt


def to_iso(dt: datetime) -> str:
    """
    Format an instant as ISO 8601 with seconds and UTC offset.

    Example: 2024-03-15T00:00:00+01:00
    """
    return localize(dt).isoformat(timespec="seconds")


def from_timestamp(ts: Optional[float]) -> Optional[datetime]:
    """
    Convert Unix timestamp to a naive local datetime.

    Args:
        ts: Unix timestamp (float)

    Returns:
        datetime object or None if timestamp is None
    """
    if ts is None:
        return None
    return datetime.fromtimestamp(ts)


def start_of_day(dt: datetime) -> datetime:
    return dt.replace(**_MIDNIGHT)


def end_of_span(start: datetime, span: relativedelta) -> datetime:
    """Last second of the span beginning at start."""
    return start + span - ONE_SECOND


def start_of_week(dt: datetime, first_weekday: int = 0) -> datetime:
    """
    Midnight of the same or preceding day whose weekday() equals first_weekday.

    Uses Python's weekday numbering (Monday == 0), not the host locale.
    first_weekday=6 gives Sunday-based weeks.
    """
    days_back = (dt.weekday() - first_weekday) % 7
    return start_of_day(dt - relativedelta(days=days_back))


def start_of_month(dt: datetime, months: int = 0) -> datetime:
    """Midnight on the first day of the month `months` away from dt."""
    return dt + relativedelta(months=months, day=1, **_MIDNIGHT)


def start_of_year(dt: datetime, years: int = 0) -> datetime:
    """Midnight on January 1st of the year `years` away from dt."""
    return dt + relativedelta(years=years, month=1, day=1, **_MIDNIGHT)
