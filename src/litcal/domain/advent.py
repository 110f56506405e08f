"""First Sunday of Advent.

Advent 1 is the fourth Sunday before Christmas Day of the same calendar
year, always between November 27 and December 3.
"""

from __future__ import annotations

from datetime import date

from litcal.domain.dates import SUNDAY, add_days, is_sunday, weekday
from litcal.domain.errors import CalendarInvariantError
from litcal.domain.years import ChurchYear, check_year

EARLIEST_ADVENT = (11, 27)
LATEST_ADVENT = (12, 3)


def calculate_advent1(year: int) -> date:
    """Return the First Sunday of Advent in calendar *year*.

    Raises:
        CalendarDomainError: *year* is outside 1583-4099.
    """
    year = check_year(year)
    christmas = date(year, 12, 25)
    christmas_weekday = weekday(christmas)
    if christmas_weekday == SUNDAY:
        # Christmas on a Sunday is not itself an Advent Sunday: Advent 4 is
        # Dec 18, so Advent 1 is four full weeks back.
        days_back = 28
    else:
        days_back = 21 + christmas_weekday
    advent1 = add_days(christmas, -days_back)

    if not is_sunday(advent1) or not (
        date(year, *EARLIEST_ADVENT) <= advent1 <= date(year, *LATEST_ADVENT)
    ):
        raise CalendarInvariantError(
            "advent_window",
            f"Advent 1 {advent1.isoformat()} is not a Sunday in Nov 27 - Dec 3",
            advent1=advent1.isoformat(),
        )
    return advent1


def church_year_for_date(d: date) -> ChurchYear:
    """Name of the liturgical year that contains *d*.

    Examples:
        >>> church_year_for_date(date(2025, 11, 30))
        ChurchYear(2026)
        >>> church_year_for_date(date(2025, 11, 29))
        ChurchYear(2025)
    """
    if d >= calculate_advent1(d.year):
        return ChurchYear(d.year + 1)
    return ChurchYear(d.year)
