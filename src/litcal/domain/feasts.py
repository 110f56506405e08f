"""Feast lists for a civil year or a liturgical year.

Moveable feasts come from the Easter offsets in :mod:`litcal.domain.moveable`,
fixed feasts from the table in :mod:`litcal.domain.fixed`. Both are tagged
with the season window that actually contains them.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from litcal.domain.advent import calculate_advent1
from litcal.domain.easter import calculate_easter
from litcal.domain.fixed import FIXED_FEASTS
from litcal.domain.models import LiturgicalDate
from litcal.domain.moveable import (
    calculate_ascension,
    calculate_ash_wednesday,
    calculate_christ_the_king,
    calculate_good_friday,
    calculate_maundy_thursday,
    calculate_palm_sunday,
    calculate_pentecost,
    calculate_trinity_sunday,
)
from litcal.domain.seasons import season_containing
from litcal.domain.types import FeastRank, LiturgicalColor
from litcal.domain.years import MAX_ADVENT_YEAR, MIN_ADVENT_YEAR, as_advent_year, check_year

# Jan 1 of the first supported civil year still belongs to an unsupported
# liturgical year, so civil feast lists start one year later.
MIN_FEAST_YEAR = MIN_ADVENT_YEAR + 1
MAX_FEAST_YEAR = MAX_ADVENT_YEAR

_MOVEABLE: tuple[tuple[str, Callable[[date], date], LiturgicalColor, FeastRank], ...] = (
    ("Ash Wednesday", calculate_ash_wednesday, LiturgicalColor.PURPLE, FeastRank.FEAST),
    ("Palm Sunday", calculate_palm_sunday, LiturgicalColor.RED, FeastRank.PRINCIPAL_FEAST),
    (
        "Maundy Thursday",
        calculate_maundy_thursday,
        LiturgicalColor.WHITE,
        FeastRank.PRINCIPAL_FEAST,
    ),
    ("Good Friday", calculate_good_friday, LiturgicalColor.RED, FeastRank.PRINCIPAL_FEAST),
    ("Easter Sunday", lambda easter: easter, LiturgicalColor.WHITE, FeastRank.PRINCIPAL_FEAST),
    ("Ascension Day", calculate_ascension, LiturgicalColor.WHITE, FeastRank.PRINCIPAL_FEAST),
    ("Pentecost", calculate_pentecost, LiturgicalColor.RED, FeastRank.PRINCIPAL_FEAST),
    (
        "Trinity Sunday",
        lambda easter: calculate_trinity_sunday(calculate_pentecost(easter)),
        LiturgicalColor.WHITE,
        FeastRank.PRINCIPAL_FEAST,
    ),
)


# (date, name, color, rank, is_moveable) before a season is attached
_RawFeast = tuple[date, str, LiturgicalColor, FeastRank, bool]


def _moveable_raw(year: int) -> list[_RawFeast]:
    easter = calculate_easter(year)
    raw: list[_RawFeast] = [
        (offset(easter), name, color, rank, True) for name, offset, color, rank in _MOVEABLE
    ]
    christ_the_king = calculate_christ_the_king(calculate_advent1(year))
    raw.append((christ_the_king, "Christ the King", LiturgicalColor.WHITE, FeastRank.FEAST, True))
    return raw


def _fixed_raw(year: int) -> list[_RawFeast]:
    return [
        (date(year, feast.month, feast.day), feast.name, feast.color, feast.rank, False)
        for feast in FIXED_FEASTS
    ]


def _tag(raw: _RawFeast) -> LiturgicalDate:
    d, name, color, rank, moveable = raw
    season = season_containing(d)
    return LiturgicalDate(
        date=d,
        name=name,
        season=season.name,
        color=color,
        rank=rank,
        is_moveable=moveable,
    )


def _sorted(feasts: list[LiturgicalDate]) -> list[LiturgicalDate]:
    return sorted(feasts, key=lambda f: (f.date, not f.is_moveable))


def calculate_moveable_feasts(year: int) -> list[LiturgicalDate]:
    """Easter-dependent feasts falling in civil *year*, in date order."""
    year = check_year(year, minimum=MIN_FEAST_YEAR, maximum=MAX_FEAST_YEAR)
    return _sorted([_tag(raw) for raw in _moveable_raw(year)])


def calculate_fixed_feasts(year: int) -> list[LiturgicalDate]:
    """Calendar-fixed feasts of civil *year*, in date order."""
    year = check_year(year, minimum=MIN_FEAST_YEAR, maximum=MAX_FEAST_YEAR)
    return [_tag(raw) for raw in _fixed_raw(year)]


def calculate_feasts(year: int) -> list[LiturgicalDate]:
    """All feasts of civil *year*, moveable and fixed, sorted by date."""
    return _sorted(calculate_moveable_feasts(year) + calculate_fixed_feasts(year))


def feasts_in_liturgical_year(year: int) -> tuple[LiturgicalDate, ...]:
    """Feasts from Advent 1 of *year* through the eve of the next Advent.

    *year* is the Advent start year (typed years are converted).
    """
    advent_year = check_year(
        int(as_advent_year(year)), minimum=MIN_ADVENT_YEAR, maximum=MAX_ADVENT_YEAR
    )
    start = calculate_advent1(advent_year)
    end = calculate_advent1(advent_year + 1)
    raw: list[_RawFeast] = []
    for civil_year in (advent_year, advent_year + 1):
        raw.extend(_moveable_raw(civil_year))
        raw.extend(_fixed_raw(civil_year))
    return tuple(_sorted([_tag(r) for r in raw if start <= r[0] < end]))
