"""Tests for the liturgical year builder."""

from datetime import date, timedelta

import pytest

from litcal.domain import propers, seasons
from litcal.domain.errors import CalendarDomainError
from litcal.domain.types import Cycle, SeasonName
from litcal.domain.year import (
    clear_year_cache,
    generate_liturgical_year,
    liturgical_year_for_date,
)
from litcal.domain.years import AdventYear, ChurchYear


class TestGenerate2025:
    def test_naming(self) -> None:
        year = generate_liturgical_year(2025)
        assert year.year == 2026
        assert year.advent1.year == 2025
        assert year.church_year == ChurchYear(2026)
        assert year.advent_year == AdventYear(2025)

    def test_anchor_dates(self) -> None:
        year = generate_liturgical_year(2025)
        assert year.advent1 == date(2025, 11, 30)
        assert year.christmas == date(2025, 12, 25)
        assert year.epiphany == date(2026, 1, 6)
        assert year.ash_wednesday == date(2026, 2, 18)
        assert year.palm_sunday == date(2026, 3, 29)
        assert year.easter == date(2026, 4, 5)
        assert year.pentecost == date(2026, 5, 24)
        assert year.next_advent1 == date(2026, 11, 29)

    def test_cycle(self) -> None:
        assert generate_liturgical_year(2025).cycle == Cycle.A

    def test_contents(self) -> None:
        year = generate_liturgical_year(2025)
        assert len(year.seasons) == 6
        assert year.ordinary_time[0].proper_number == 2
        assert year.feasts

    def test_bounds(self) -> None:
        year = generate_liturgical_year(2025)
        assert year.start_date == year.advent1
        assert year.end_date == year.next_advent1 - timedelta(days=1)
        assert year.contains(date(2026, 11, 28))
        assert not year.contains(date(2026, 11, 29))

    def test_season_lookup(self) -> None:
        year = generate_liturgical_year(2025)
        assert year.season(SeasonName.LENT).start_date == date(2026, 2, 18)
        assert year.season("Ordinary Time").end_date == date(2026, 11, 28)
        with pytest.raises(KeyError):
            year.season("Pentecost")


class TestYearConventions:
    def test_church_year_selects_same_year(self) -> None:
        assert generate_liturgical_year(ChurchYear(2026)) == generate_liturgical_year(2025)

    def test_for_date(self) -> None:
        assert liturgical_year_for_date(date(2025, 11, 30)).year == 2026
        assert liturgical_year_for_date("2025-11-29").year == 2025

    @pytest.mark.parametrize("advent_year", range(1900, 2101))
    def test_naming_invariant(self, advent_year: int) -> None:
        year = generate_liturgical_year(advent_year)
        assert year.year == year.advent1.year + 1 == advent_year + 1


class TestDomain:
    def test_edges(self) -> None:
        assert generate_liturgical_year(1583).year == 1584
        assert generate_liturgical_year(4098).year == 4099

    @pytest.mark.parametrize("advent_year", [1582, 4099])
    def test_outside(self, advent_year: int) -> None:
        with pytest.raises(CalendarDomainError):
            generate_liturgical_year(advent_year)

    def test_cache_clear_rebuilds_equal_value(self) -> None:
        before = generate_liturgical_year(2030)
        clear_year_cache()
        after = generate_liturgical_year(2030)
        assert before == after
        assert before is not after

    def test_cache_clear_covers_tilings_and_propers(self) -> None:
        generate_liturgical_year(2030)
        clear_year_cache()
        assert seasons._tile.cache_info().currsize == 0
        assert propers._enumerate.cache_info().currsize == 0
