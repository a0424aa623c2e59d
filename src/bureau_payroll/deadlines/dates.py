"""Calendar-date normalization and month arithmetic.

Every public engine function passes its date arguments through
``to_calendar_date`` exactly once, so time-of-day never takes part in a
comparison.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def to_calendar_date(value: date | datetime | str) -> date:
    """Normalize a date-like value to a plain ``date``.

    Accepts:
        - ``date``: returned unchanged
        - ``datetime``: time-of-day dropped, no timezone conversion
        - ``str``: ISO-8601 ``YYYY-MM-DD``, optionally followed by a time part

    Raises:
        TypeError: For any other type
        ValueError: For a malformed date string
    """
    # datetime is a subclass of date, so it has to be checked first
    if isinstance(value, datetime):
        return date(value.year, value.month, value.day)
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        return date.fromisoformat(text[:10])
    raise TypeError(f"Expected a date, datetime or ISO date string, got {type(value).__name__}")


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def last_of_month(day: date) -> date:
    return day.replace(day=days_in_month(day.year, day.month))


def add_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Shift a (year, month) pair by a number of months."""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def clamped_day(year: int, month: int, day: int) -> date:
    """Return ``day`` in the given month, clamped to the month's last day."""
    return date(year, month, min(day, days_in_month(year, month)))


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Return the last date in the month falling on ``weekday`` (0=Monday)."""
    last = date(year, month, days_in_month(year, month))
    diff = (last.weekday() - weekday) % 7
    return last - timedelta(days=diff)


def days_until(target: date, today: date) -> int:
    """Whole days from ``today`` to ``target`` (negative when in the past)."""
    return (target - today).days
