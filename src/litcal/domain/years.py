"""Typed year values and the supported year domain.

A liturgical year starts at Advent in one calendar year and is *named* by
the calendar year in which it ends. Liturgical year 2026 begins on the First
Sunday of Advent 2025. The two numbers are never interchangeable, so they
get two distinct integer types:

- :class:`AdventYear`: the calendar year the First Sunday of Advent falls in.
- :class:`ChurchYear`: the name of the liturgical year (``AdventYear + 1``).

Constructing one from the other raises ``TypeError``; use the
``church_year`` / ``advent_year`` properties instead.

INVARIANT: ``ChurchYear(n).advent_year == AdventYear(n - 1)``.
"""

from __future__ import annotations

from litcal.domain.errors import CalendarDomainError

# Anonymous Gregorian (Meeus/Jones/Butcher) validity range.
GREGORIAN_MIN_YEAR = 1583
GREGORIAN_MAX_YEAR = 4099

# A liturgical year also needs Easter and Advent of the following calendar year.
MIN_ADVENT_YEAR = GREGORIAN_MIN_YEAR
MAX_ADVENT_YEAR = GREGORIAN_MAX_YEAR - 1


def check_year(
    year: object,
    *,
    minimum: int = GREGORIAN_MIN_YEAR,
    maximum: int = GREGORIAN_MAX_YEAR,
) -> int:
    """Return *year* as a plain ``int`` or raise :class:`CalendarDomainError`."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise CalendarDomainError(year, minimum, maximum)
    if not minimum <= year <= maximum:
        raise CalendarDomainError(year, minimum, maximum)
    return int(year)


def _plain_int(value: object) -> int:
    # Range is checked where the year is used; only the type is checked here.
    if isinstance(value, bool) or not isinstance(value, int):
        raise CalendarDomainError(value, GREGORIAN_MIN_YEAR, GREGORIAN_MAX_YEAR)
    return int(value)


class AdventYear(int):
    """Calendar year in which a liturgical year's First Sunday of Advent falls."""

    __slots__ = ()

    def __new__(cls, value: int) -> AdventYear:
        if isinstance(value, ChurchYear):
            msg = f"{value!r} names a liturgical year; use .advent_year to convert"
            raise TypeError(msg)
        return super().__new__(cls, _plain_int(value))

    @property
    def church_year(self) -> ChurchYear:
        return ChurchYear(int(self) + 1)

    def __repr__(self) -> str:
        return f"AdventYear({int(self)})"


class ChurchYear(int):
    """Name of a liturgical year: the calendar year in which it ends."""

    __slots__ = ()

    def __new__(cls, value: int) -> ChurchYear:
        if isinstance(value, AdventYear):
            msg = f"{value!r} is an Advent start year; use .church_year to convert"
            raise TypeError(msg)
        return super().__new__(cls, _plain_int(value))

    @property
    def advent_year(self) -> AdventYear:
        return AdventYear(int(self) - 1)

    def __repr__(self) -> str:
        return f"ChurchYear({int(self)})"


def as_advent_year(year: int) -> AdventYear:
    """Normalise *year* to an :class:`AdventYear`.

    A bare ``int`` is read as the Advent start year, which is the convention
    of every year-keyed engine entry point.
    """
    if isinstance(year, ChurchYear):
        return year.advent_year
    if isinstance(year, AdventYear):
        return year
    return AdventYear(year)


def as_church_year(year: int) -> ChurchYear:
    """Normalise *year* to a :class:`ChurchYear`.

    A bare ``int`` is read as the liturgical year name.
    """
    if isinstance(year, AdventYear):
        return year.church_year
    if isinstance(year, ChurchYear):
        return year
    return ChurchYear(year)
