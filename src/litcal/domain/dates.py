"""Civil-date arithmetic shared by every calculator.

Dates are plain :class:`datetime.date` values: no time of day, no timezone.
Weekdays are numbered once, here, with Sunday as day 0. Nothing in the
engine calls ``date.weekday()`` or ``isoweekday()`` directly.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import date, datetime, timedelta

SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6

WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def weekday(d: date) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday.

    Examples:
        >>> weekday(date(2025, 4, 20))
        0
        >>> weekday(date(2025, 3, 5))
        3
    """
    return d.isoweekday() % 7


def is_sunday(d: date) -> bool:
    return weekday(d) == SUNDAY


def add_days(d: date, days: int) -> date:
    """Return a new date *days* after *d* (negative goes back)."""
    return d + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Signed number of days from *start* to *end*."""
    return (end - start).days


def sunday_on_or_before(d: date) -> date:
    return add_days(d, -weekday(d))


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from *start* through *end* inclusive."""
    current = start
    while current <= end:
        yield current
        current = add_days(current, 1)


def to_calendar_date(value: date | datetime | str) -> date:
    """Coerce *value* to a civil date.

    A ``datetime`` keeps its own wall-clock date; no timezone conversion is
    applied, so an aware timestamp never shifts to a neighbouring day.
    Strings must be ISO ``YYYY-MM-DD``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # fromisoformat also takes basic and week-date forms such as 20251225
        if not _ISO_DATE.fullmatch(text):
            msg = f"Not an ISO date (YYYY-MM-DD): {value!r}"
            raise ValueError(msg)
        return date.fromisoformat(text)
    msg = f"Cannot interpret {value!r} as a calendar date"
    raise TypeError(msg)
