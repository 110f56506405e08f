"""LiturgicalYearBuilder: one immutable structure per liturgical year.

``generate_liturgical_year(2025)`` builds the liturgical year that *begins*
at Advent 2025 and is *named* 2026. Easter, Lent and Pentecost of that year
all fall in calendar year 2026.

INVARIANT: ``result.year == result.advent1.year + 1``.
"""

from __future__ import annotations

import functools
from datetime import date, datetime

from litcal.domain import propers, seasons
from litcal.domain.advent import calculate_advent1, church_year_for_date
from litcal.domain.cycle import get_liturgical_cycle
from litcal.domain.dates import to_calendar_date
from litcal.domain.easter import calculate_easter
from litcal.domain.feasts import feasts_in_liturgical_year
from litcal.domain.models import LiturgicalYear
from litcal.domain.moveable import (
    calculate_ash_wednesday,
    calculate_palm_sunday,
    calculate_pentecost,
)
from litcal.domain.propers import get_ordinary_time_sundays
from litcal.domain.seasons import calculate_seasons
from litcal.domain.years import (
    MAX_ADVENT_YEAR,
    MIN_ADVENT_YEAR,
    AdventYear,
    as_advent_year,
    check_year,
)


@functools.lru_cache(maxsize=512)
def _build(advent_year: int) -> LiturgicalYear:
    typed = AdventYear(advent_year)
    church_year = typed.church_year
    easter = calculate_easter(int(church_year))
    return LiturgicalYear(
        year=int(church_year),
        cycle=get_liturgical_cycle(church_year),
        advent1=calculate_advent1(advent_year),
        christmas=date(advent_year, 12, 25),
        epiphany=date(int(church_year), 1, 6),
        ash_wednesday=calculate_ash_wednesday(easter),
        palm_sunday=calculate_palm_sunday(easter),
        easter=easter,
        pentecost=calculate_pentecost(easter),
        next_advent1=calculate_advent1(int(church_year)),
        seasons=calculate_seasons(typed),
        ordinary_time=get_ordinary_time_sundays(typed),
        feasts=feasts_in_liturgical_year(typed),
    )


def generate_liturgical_year(year: int) -> LiturgicalYear:
    """Build the liturgical year that begins with Advent in calendar *year*.

    Args:
        year: Advent start year. A bare ``int`` is read that way; pass a
            :class:`~litcal.domain.years.ChurchYear` to build by the
            liturgical year's name instead.

    Raises:
        CalendarDomainError: the year is outside 1583-4098 (Advent start).
    """
    advent_year = as_advent_year(year)
    return _build(check_year(int(advent_year), minimum=MIN_ADVENT_YEAR, maximum=MAX_ADVENT_YEAR))


def liturgical_year_for_date(d: date | datetime | str) -> LiturgicalYear:
    """The liturgical year containing *d*."""
    return generate_liturgical_year(church_year_for_date(to_calendar_date(d)))


def clear_year_cache() -> None:
    """Drop memoised years, season tilings and Proper tables.

    Results never go stale; this only frees memory.
    """
    _build.cache_clear()
    seasons._tile.cache_clear()
    propers._enumerate.cache_clear()
