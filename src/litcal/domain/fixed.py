"""Calendar-fixed feasts keyed by (month, day).

The table holds everything about a fixed feast except its season: a fixed
date can land in different seasons from year to year (the Annunciation is in
Lent or in Easter depending on Easter), so the season is resolved against
the actual tiling when a year is generated.
"""

from __future__ import annotations

from dataclasses import dataclass

from litcal.domain.types import FeastRank, LiturgicalColor


@dataclass(frozen=True)
class FixedFeast:
    month: int
    day: int
    name: str
    color: LiturgicalColor
    rank: FeastRank


FIXED_FEASTS: tuple[FixedFeast, ...] = (
    FixedFeast(1, 1, "Holy Name of Jesus", LiturgicalColor.WHITE, FeastRank.FEAST),
    FixedFeast(1, 6, "Epiphany", LiturgicalColor.WHITE, FeastRank.PRINCIPAL_FEAST),
    FixedFeast(2, 2, "Presentation of our Lord", LiturgicalColor.WHITE, FeastRank.FEAST),
    FixedFeast(3, 19, "Saint Joseph", LiturgicalColor.WHITE, FeastRank.LESSER_FEAST),
    FixedFeast(3, 25, "Annunciation", LiturgicalColor.WHITE, FeastRank.PRINCIPAL_FEAST),
    FixedFeast(5, 31, "Visitation", LiturgicalColor.WHITE, FeastRank.LESSER_FEAST),
    FixedFeast(6, 29, "Saints Peter and Paul", LiturgicalColor.RED, FeastRank.FEAST),
    FixedFeast(8, 6, "Transfiguration", LiturgicalColor.WHITE, FeastRank.FEAST),
    FixedFeast(8, 15, "Mary, Mother of our Lord", LiturgicalColor.WHITE, FeastRank.FEAST),
    FixedFeast(9, 14, "Holy Cross", LiturgicalColor.RED, FeastRank.LESSER_FEAST),
    FixedFeast(11, 1, "All Saints' Day", LiturgicalColor.WHITE, FeastRank.PRINCIPAL_FEAST),
    FixedFeast(11, 2, "All Souls' Day", LiturgicalColor.BLACK, FeastRank.COMMEMORATION),
    FixedFeast(12, 25, "Christmas Day", LiturgicalColor.WHITE, FeastRank.PRINCIPAL_FEAST),
)
