"""Season tiling: six contiguous windows per liturgical year.

Window bounds for the liturgical year whose Advent falls in calendar year Y:

=============  ============================  ==============================
Season         Start                         End (inclusive)
=============  ============================  ==============================
Advent         Advent 1 (Y)                  Dec 24, Y
Christmas      Dec 25, Y                     Jan 5, Y+1
Epiphany       Jan 6, Y+1                    Ash Wednesday - 1
Lent           Ash Wednesday                 Holy Saturday
Easter         Easter                        Saturday after Pentecost
Ordinary Time  Trinity Sunday                Advent 1 (Y+1) - 1
=============  ============================  ==============================

Each end is derived as the day before the next start, and the finished
tiling is checked anyway: no gap, no overlap, first day Advent 1 (Y), last
day the eve of Advent 1 (Y+1).
"""

from __future__ import annotations

import functools
from collections.abc import Sequence
from datetime import date, datetime

from litcal.domain.advent import calculate_advent1, church_year_for_date
from litcal.domain.dates import add_days, days_between, to_calendar_date
from litcal.domain.easter import calculate_easter
from litcal.domain.errors import CalendarInvariantError
from litcal.domain.models import SeasonWindow
from litcal.domain.moveable import (
    calculate_ash_wednesday,
    calculate_holy_saturday,
    calculate_pentecost,
    calculate_trinity_sunday,
)
from litcal.domain.types import SEASON_COLORS, SEASON_ORDER, SeasonName
from litcal.domain.years import MAX_ADVENT_YEAR, MIN_ADVENT_YEAR, as_advent_year, check_year


def _window(name: SeasonName, start: date, end: date) -> SeasonWindow:
    return SeasonWindow(name=name, start_date=start, end_date=end, color=SEASON_COLORS[name])


@functools.lru_cache(maxsize=512)
def _tile(advent_year: int) -> tuple[SeasonWindow, ...]:
    advent1 = calculate_advent1(advent_year)
    next_advent1 = calculate_advent1(advent_year + 1)
    easter = calculate_easter(advent_year + 1)
    ash_wednesday = calculate_ash_wednesday(easter)
    trinity_sunday = calculate_trinity_sunday(calculate_pentecost(easter))
    christmas = date(advent_year, 12, 25)
    epiphany = date(advent_year + 1, 1, 6)

    windows = (
        _window(SeasonName.ADVENT, advent1, add_days(christmas, -1)),
        _window(SeasonName.CHRISTMAS, christmas, add_days(epiphany, -1)),
        _window(SeasonName.EPIPHANY, epiphany, add_days(ash_wednesday, -1)),
        _window(SeasonName.LENT, ash_wednesday, calculate_holy_saturday(easter)),
        _window(SeasonName.EASTER, easter, add_days(trinity_sunday, -1)),
        _window(SeasonName.ORDINARY_TIME, trinity_sunday, add_days(next_advent1, -1)),
    )
    validate_season_tiling(windows, advent1, next_advent1)
    return windows


def calculate_seasons(year: int) -> tuple[SeasonWindow, ...]:
    """Return the six season windows of the liturgical year starting at Advent *year*.

    *year* is the calendar year of the opening First Sunday of Advent; a
    :class:`~litcal.domain.years.ChurchYear` is converted first.

    Raises:
        CalendarDomainError: the year is outside the supported range.
        CalendarInvariantError: the windows do not tile the year exactly.
    """
    advent_year = as_advent_year(year)
    return _tile(check_year(int(advent_year), minimum=MIN_ADVENT_YEAR, maximum=MAX_ADVENT_YEAR))


def validate_season_tiling(
    windows: Sequence[SeasonWindow],
    advent1: date,
    next_advent1: date,
) -> None:
    """Raise :class:`CalendarInvariantError` unless *windows* tile the year exactly."""
    names = tuple(w.name for w in windows)
    if names != SEASON_ORDER:
        raise CalendarInvariantError(
            "season_order",
            f"Seasons out of order: {', '.join(names)}",
        )
    if windows[0].start_date != advent1:
        raise CalendarInvariantError(
            "season_start",
            f"First season starts {windows[0].start_date.isoformat()}, "
            f"expected Advent 1 {advent1.isoformat()}",
        )
    expected_end = add_days(next_advent1, -1)
    if windows[-1].end_date != expected_end:
        raise CalendarInvariantError(
            "season_end",
            f"Last season ends {windows[-1].end_date.isoformat()}, "
            f"expected {expected_end.isoformat()}",
        )
    for current, following in zip(windows, windows[1:], strict=False):
        gap = days_between(current.end_date, following.start_date)
        if gap != 1:
            kind = "gap" if gap > 1 else "overlap"
            raise CalendarInvariantError(
                "season_tiling",
                f"{kind} between {current.name} (ends {current.end_date.isoformat()}) "
                f"and {following.name} (starts {following.start_date.isoformat()})",
                days=gap,
            )


def get_season_for_date(d: date | datetime | str, year: int | None = None) -> SeasonWindow | None:
    """Return the season window containing *d*.

    Args:
        d: The civil date to classify.
        year: Advent start year of the liturgical year to search (typed
            years are converted). When omitted, the liturgical year
            containing *d* is used, so a window is always found.

    Returns:
        The unique containing window, or None when an explicit *year* does
        not contain *d*.
    """
    target = to_calendar_date(d)
    advent_year = church_year_for_date(target).advent_year if year is None else year
    matches = [w for w in calculate_seasons(advent_year) if w.contains(target)]
    if len(matches) > 1:
        raise CalendarInvariantError(
            "season_unique",
            f"{target.isoformat()} falls in {len(matches)} seasons",
        )
    return matches[0] if matches else None


def season_containing(d: date | datetime | str) -> SeasonWindow:
    """The season window of the liturgical year that contains *d*.

    Raises:
        CalendarInvariantError: the tiling of that year leaves *d* uncovered.
    """
    target = to_calendar_date(d)
    window = get_season_for_date(target)
    if window is None:
        raise CalendarInvariantError(
            "season_unique",
            f"{target.isoformat()} falls in no season of its liturgical year",
        )
    return window


def calculate_weeks_in_season(start: date, end: date) -> int:
    """Whole weeks between *start* and *end*."""
    return days_between(start, end) // 7
