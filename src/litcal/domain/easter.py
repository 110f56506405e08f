"""Computus: Western (Gregorian) Easter Sunday.

Anonymous Gregorian algorithm (Meeus/Jones/Butcher). Valid for the
proleptic Gregorian years 1583-4099; anything else is a domain error.

INVARIANT: Easter is a Sunday between March 22 and April 25 inclusive.
"""

from __future__ import annotations

from datetime import date

from litcal.domain.dates import is_sunday
from litcal.domain.errors import CalendarDomainError, CalendarInvariantError
from litcal.domain.years import check_year

EARLIEST_EASTER = (3, 22)
LATEST_EASTER = (4, 25)


def calculate_easter(year: int) -> date:
    """Return Easter Sunday of calendar *year*.

    Raises:
        CalendarDomainError: *year* is outside 1583-4099.
    """
    year = check_year(year)
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    easter = date(year, month, day)
    assert_easter_window(easter)
    return easter


def assert_easter_window(easter: date) -> None:
    """Raise :class:`CalendarInvariantError` unless *easter* is a plausible Easter."""
    earliest = date(easter.year, *EARLIEST_EASTER)
    latest = date(easter.year, *LATEST_EASTER)
    if not earliest <= easter <= latest:
        raise CalendarInvariantError(
            "easter_window",
            f"Easter {easter.isoformat()} is outside March 22 - April 25",
            easter=easter.isoformat(),
        )
    if not is_sunday(easter):
        raise CalendarInvariantError(
            "easter_sunday",
            f"Easter {easter.isoformat()} is not a Sunday",
            easter=easter.isoformat(),
        )


def validate_easter_calculation(year: int) -> bool:
    """True if the computed Easter of *year* satisfies the Easter invariants.

    Domain errors still propagate: an unsupported year is bad input, not a
    failed validation.
    """
    try:
        calculate_easter(year)
    except CalendarDomainError:
        raise
    except CalendarInvariantError:
        return False
    return True
