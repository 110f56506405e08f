"""Revised Common Lectionary A/B/C cycle.

Which remainder maps to which letter is a convention, not arithmetic, so the
table is pinned to the published RCL calendar: Year A begins at Advent 2025
(liturgical year 2026), Year C began at Advent 2024 (liturgical year 2025).
"""

from __future__ import annotations

from litcal.domain.types import Cycle
from litcal.domain.years import ChurchYear, as_church_year

# Published RCL reference pair: liturgical year 2026 (Advent 2025) is Year A.
CYCLE_REFERENCE: tuple[ChurchYear, Cycle] = (ChurchYear(2026), Cycle.A)

# advent_start_year % 3 -> cycle
CYCLE_BY_REMAINDER: dict[int, Cycle] = {
    0: Cycle.A,
    1: Cycle.B,
    2: Cycle.C,
}


def get_liturgical_cycle(year: int) -> Cycle:
    """Return the Sunday cycle of liturgical *year*.

    *year* is the liturgical year name (the calendar year it ends in). An
    :class:`~litcal.domain.years.AdventYear` is converted first.

    Examples:
        >>> get_liturgical_cycle(2026)
        <Cycle.A: 'A'>
        >>> get_liturgical_cycle(2025)
        <Cycle.C: 'C'>
    """
    advent_start_year = int(as_church_year(year).advent_year)
    return CYCLE_BY_REMAINDER[advent_start_year % 3]
