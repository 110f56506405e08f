"""Tests for the RCL A/B/C cycle."""

import pytest

from litcal.domain.cycle import CYCLE_REFERENCE, get_liturgical_cycle
from litcal.domain.types import Cycle
from litcal.domain.years import AdventYear, ChurchYear


class TestPinnedReference:
    def test_reference_holds(self) -> None:
        year, expected = CYCLE_REFERENCE
        assert get_liturgical_cycle(year) == expected

    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (2023, Cycle.A),
            (2024, Cycle.B),
            (2025, Cycle.C),
            (2026, Cycle.A),
            (2027, Cycle.B),
            (2028, Cycle.C),
        ],
    )
    def test_published_cycles(self, year: int, expected: Cycle) -> None:
        assert get_liturgical_cycle(year) == expected


class TestPeriodicity:
    @pytest.mark.parametrize("year", range(1900, 2101))
    def test_three_year_period(self, year: int) -> None:
        assert get_liturgical_cycle(year) == get_liturgical_cycle(year + 3)

    @pytest.mark.parametrize("year", range(1900, 2101, 7))
    def test_consecutive_years_differ(self, year: int) -> None:
        assert len({get_liturgical_cycle(year + i) for i in range(3)}) == 3


class TestYearTypes:
    def test_advent_year_converted(self) -> None:
        assert get_liturgical_cycle(AdventYear(2025)) == Cycle.A

    def test_church_year(self) -> None:
        assert get_liturgical_cycle(ChurchYear(2025)) == Cycle.C
