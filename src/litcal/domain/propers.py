"""Ordinary Time Sundays and their Proper numbers.

The Proper number is the join key the reading lookup uses for every Sunday
after Trinity Sunday. Numbering starts at Proper 2 on the second Sunday
after Pentecost and increases by one each week until the Sunday before the
next Advent. A shifted anchor or start number would mis-serve the readings
of every later Sunday in the year, so the sequence is validated after it
is built.
"""

from __future__ import annotations

import functools
from collections.abc import Sequence
from datetime import date, datetime

from litcal.domain.advent import calculate_advent1, church_year_for_date
from litcal.domain.dates import add_days, days_between, sunday_on_or_before, to_calendar_date
from litcal.domain.easter import calculate_easter
from litcal.domain.errors import CalendarInvariantError
from litcal.domain.models import OrdinaryTimeEntry
from litcal.domain.moveable import calculate_pentecost
from litcal.domain.years import MAX_ADVENT_YEAR, MIN_ADVENT_YEAR, as_advent_year, check_year

FIRST_PROPER = 2
FIRST_PROPER_AFTER_PENTECOST_DAYS = 14


@functools.lru_cache(maxsize=512)
def _enumerate(advent_year: int) -> tuple[OrdinaryTimeEntry, ...]:
    pentecost = calculate_pentecost(calculate_easter(advent_year + 1))
    next_advent1 = calculate_advent1(advent_year + 1)

    entries: list[OrdinaryTimeEntry] = []
    current = add_days(pentecost, FIRST_PROPER_AFTER_PENTECOST_DAYS)
    proper_number = FIRST_PROPER
    while current < next_advent1:
        entries.append(OrdinaryTimeEntry(date=current, proper_number=proper_number))
        current = add_days(current, 7)
        proper_number += 1

    result = tuple(entries)
    validate_ordinary_time(result, pentecost, next_advent1)
    return result


def get_ordinary_time_sundays(year: int) -> tuple[OrdinaryTimeEntry, ...]:
    """Return the Ordinary Time Sundays of the liturgical year starting at Advent *year*.

    Raises:
        CalendarDomainError: the year is outside the supported range.
        CalendarInvariantError: the generated sequence drifted.
    """
    advent_year = as_advent_year(year)
    return _enumerate(
        check_year(int(advent_year), minimum=MIN_ADVENT_YEAR, maximum=MAX_ADVENT_YEAR)
    )


def validate_ordinary_time(
    entries: Sequence[OrdinaryTimeEntry],
    pentecost: date,
    next_advent1: date,
) -> None:
    """Raise :class:`CalendarInvariantError` unless *entries* form a clean Proper sequence."""
    if not entries:
        raise CalendarInvariantError("propers_empty", "No Ordinary Time Sundays generated")

    first_allowed = add_days(pentecost, FIRST_PROPER_AFTER_PENTECOST_DAYS)
    last_allowed = add_days(next_advent1, -1)
    if entries[0].date != first_allowed or entries[0].proper_number != FIRST_PROPER:
        raise CalendarInvariantError(
            "propers_anchor",
            f"Proper {entries[0].proper_number} on {entries[0].date.isoformat()}, "
            f"expected Proper {FIRST_PROPER} on {first_allowed.isoformat()}",
        )
    if entries[-1].date > last_allowed:
        raise CalendarInvariantError(
            "propers_bound",
            f"Proper {entries[-1].proper_number} on {entries[-1].date.isoformat()} "
            f"runs into Advent {next_advent1.isoformat()}",
        )
    if days_between(entries[-1].date, next_advent1) > 7:
        raise CalendarInvariantError(
            "propers_bound",
            f"Ordinary Time Sundays stop at {entries[-1].date.isoformat()}, "
            f"more than a week before Advent {next_advent1.isoformat()}",
        )
    for current, following in zip(entries, entries[1:], strict=False):
        if days_between(current.date, following.date) != 7:
            raise CalendarInvariantError(
                "propers_spacing",
                f"Proper {following.proper_number} is not one week after "
                f"Proper {current.proper_number}",
            )
        if following.proper_number != current.proper_number + 1:
            raise CalendarInvariantError(
                "propers_numbering",
                f"Proper {following.proper_number} follows Proper {current.proper_number}",
            )


def get_proper_number_for_date(d: date | datetime | str, year: int | None = None) -> int | None:
    """Return the Proper governing *d*, or None outside numbered Ordinary Time.

    A weekday takes the Proper of the Sunday that began its week. Trinity
    Sunday and its week have no Proper.

    Args:
        d: The civil date to look up.
        year: Advent start year to search (typed years are converted).
            Defaults to the liturgical year containing *d*.
    """
    target = to_calendar_date(d)
    advent_year = church_year_for_date(target).advent_year if year is None else year
    sunday = sunday_on_or_before(target)
    for entry in get_ordinary_time_sundays(advent_year):
        if entry.date == sunday:
            return entry.proper_number
    return None
