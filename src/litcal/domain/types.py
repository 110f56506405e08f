"""Liturgical classification enums.

Season names double as the persisted season keys, so their values use the
display spelling ("Ordinary Time") rather than identifiers.
"""

from __future__ import annotations

from enum import StrEnum


class LiturgicalColor(StrEnum):
    """Vestment / paraments color."""

    WHITE = "white"
    RED = "red"
    GREEN = "green"
    PURPLE = "purple"
    ROSE = "rose"
    BLACK = "black"
    GOLD = "gold"


class FeastRank(StrEnum):
    """Observance rank, highest first."""

    PRINCIPAL_FEAST = "principal_feast"
    FEAST = "feast"
    LESSER_FEAST = "lesser_feast"
    COMMEMORATION = "commemoration"
    ORDINARY = "ordinary"


class SeasonName(StrEnum):
    """The six seasons of a liturgical year, in chronological order."""

    ADVENT = "Advent"
    CHRISTMAS = "Christmas"
    EPIPHANY = "Epiphany"
    LENT = "Lent"
    EASTER = "Easter"
    ORDINARY_TIME = "Ordinary Time"


class Cycle(StrEnum):
    """Revised Common Lectionary three-year Sunday cycle."""

    A = "A"
    B = "B"
    C = "C"


SEASON_ORDER: tuple[SeasonName, ...] = tuple(SeasonName)

SEASON_COLORS: dict[SeasonName, LiturgicalColor] = {
    SeasonName.ADVENT: LiturgicalColor.PURPLE,
    SeasonName.CHRISTMAS: LiturgicalColor.WHITE,
    SeasonName.EPIPHANY: LiturgicalColor.GREEN,
    SeasonName.LENT: LiturgicalColor.PURPLE,
    SeasonName.EASTER: LiturgicalColor.WHITE,
    SeasonName.ORDINARY_TIME: LiturgicalColor.GREEN,
}
