"""Tests for the First Sunday of Advent and church-year resolution."""

from datetime import date

import pytest

from litcal.domain.advent import calculate_advent1, church_year_for_date
from litcal.domain.dates import is_sunday
from litcal.domain.errors import CalendarDomainError
from litcal.domain.years import ChurchYear


class TestCalculateAdvent1:
    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (2022, date(2022, 11, 27)),  # Christmas on a Sunday
            (2023, date(2023, 12, 3)),  # Christmas on a Monday
            (2024, date(2024, 12, 1)),
            (2025, date(2025, 11, 30)),
            (2026, date(2026, 11, 29)),
        ],
    )
    def test_published_dates(self, year: int, expected: date) -> None:
        assert calculate_advent1(year) == expected

    @pytest.mark.parametrize("year", range(1900, 2101))
    def test_sunday_in_window(self, year: int) -> None:
        advent1 = calculate_advent1(year)
        assert is_sunday(advent1)
        assert date(year, 11, 27) <= advent1 <= date(year, 12, 3)

    def test_four_sundays_before_christmas(self) -> None:
        advent1 = calculate_advent1(2025)
        assert (date(2025, 12, 25) - advent1).days // 7 == 3

    def test_out_of_range(self) -> None:
        with pytest.raises(CalendarDomainError):
            calculate_advent1(1582)


class TestChurchYearForDate:
    def test_advent_starts_new_year(self) -> None:
        assert church_year_for_date(date(2025, 11, 30)) == ChurchYear(2026)

    def test_eve_of_advent(self) -> None:
        assert church_year_for_date(date(2025, 11, 29)) == ChurchYear(2025)

    def test_new_years_day(self) -> None:
        assert church_year_for_date(date(2026, 1, 1)) == ChurchYear(2026)

    def test_returns_typed_year(self) -> None:
        assert isinstance(church_year_for_date(date(2026, 6, 1)), ChurchYear)
