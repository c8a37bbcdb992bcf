"""
Date helpers for range evaluation.

These are pure-Python helpers with no infrastructure dependencies.
Timestamps are compared as naive datetimes; aware values are converted
to UTC first.
"""

from __future__ import annotations

import datetime
from typing import Any

END_OF_DAY = datetime.time(23, 59, 59, 999000)


def _naive_utc(value: datetime.datetime) -> datetime.datetime | None:
    if value.tzinfo is None:
        return value
    try:
        return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    except (OverflowError, ValueError):
        # UTC equivalent falls outside datetime.min..datetime.max
        return None


def parse_timestamp(value: Any) -> datetime.datetime | None:
    """
    Parse a record value into a naive datetime.

    Accepts ``datetime``, ``date`` (midnight) and ISO-8601 strings
    (``"2024-03-15"``, ``"2024-03-15T10:30:00Z"``). Anything else,
    including unparseable strings and offset timestamps whose UTC value is
    out of range, returns ``None``.
    """
    if isinstance(value, datetime.datetime):
        return _naive_utc(value)
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return _naive_utc(parsed)


def parse_calendar_day(value: Any) -> datetime.date | None:
    """Parse a range boundary into a calendar day; any time part is dropped."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    timestamp = parse_timestamp(value)
    return timestamp.date() if timestamp is not None else None


def start_of_day(day: datetime.date) -> datetime.datetime:
    """00:00:00.000 on *day*."""
    return datetime.datetime.combine(day, datetime.time.min)


def end_of_day(day: datetime.date) -> datetime.datetime:
    """23:59:59.999 on *day*."""
    return datetime.datetime.combine(day, END_OF_DAY)
