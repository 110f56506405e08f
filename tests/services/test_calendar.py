"""Tests for CalendarService."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from litcal.domain.errors import CalendarInvariantError
from litcal.services.calendar import CalendarService


@pytest.fixture
def svc() -> CalendarService:
    return CalendarService()


class TestEaster:
    def test_ok(self, svc: CalendarService) -> None:
        result = svc.easter(2025)
        assert result.ok
        assert result.op == "easter"
        assert result.data == {"year": 2025, "easter": "2025-04-20", "weekday": "Sunday"}

    @pytest.mark.parametrize("year", [1582, 4100])
    def test_domain_error(self, svc: CalendarService, year: int) -> None:
        result = svc.easter(year)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DOMAIN_ERROR"
        assert result.error.detail["year"] == year


class TestLiturgicalYear:
    def test_by_advent_year(self, svc: CalendarService) -> None:
        result = svc.liturgical_year(2025)
        assert result.ok
        assert result.data["year"] == 2026
        assert result.data["advent_year"] == 2025
        assert result.data["advent1"] == "2025-11-30"
        assert result.data["cycle"] == "A"
        assert len(result.data["seasons"]) == 6
        assert result.data["seasons"][0]["days"] == 25

    def test_by_liturgical_name(self, svc: CalendarService) -> None:
        by_name = svc.liturgical_year(2026, liturgical=True)
        assert by_name.data == svc.liturgical_year(2025).data

    def test_domain_error(self, svc: CalendarService) -> None:
        result = svc.liturgical_year(4099)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DOMAIN_ERROR"

    def test_liturgical_name_domain_error(self, svc: CalendarService) -> None:
        assert not svc.liturgical_year(1583, liturgical=True).ok


class TestSeasons:
    def test_rows(self, svc: CalendarService) -> None:
        result = svc.seasons(2025)
        assert result.ok
        assert result.data["liturgical_year"] == 2026
        assert result.data["advent_year"] == 2025
        assert result.data["cycle"] == "A"
        names = [s["name"] for s in result.data["seasons"]]
        assert names == ["Advent", "Christmas", "Epiphany", "Lent", "Easter", "Ordinary Time"]
        lent = result.data["seasons"][3]
        assert lent["start_date"] == "2026-02-18"
        assert lent["end_date"] == "2026-04-04"
        assert lent["color"] == "purple"

    def test_liturgical_flag(self, svc: CalendarService) -> None:
        result = svc.seasons(2025, liturgical=True)
        assert result.data["advent_year"] == 2024
        assert result.data["cycle"] == "C"

    def test_bad_year_type(self, svc: CalendarService) -> None:
        result = svc.seasons("2025")  # type: ignore[arg-type]
        assert not result.ok


class TestSeasonForDate:
    def test_string_date(self, svc: CalendarService) -> None:
        result = svc.season_for_date("2026-03-01")
        assert result.ok
        assert result.data["name"] == "Lent"
        assert result.data["date"] == "2026-03-01"
        assert result.data["liturgical_year"] == 2026

    def test_datetime(self, svc: CalendarService) -> None:
        result = svc.season_for_date(datetime(2025, 12, 24, 23, 59))
        assert result.data["name"] == "Advent"

    def test_defaults_to_today(self, svc: CalendarService) -> None:
        result = svc.season_for_date()
        assert result.ok
        assert result.data["date"] == date.today().isoformat()

    def test_invalid_date(self, svc: CalendarService) -> None:
        result = svc.season_for_date("2026-02-30")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"

    @pytest.mark.parametrize("text", ["20251225", "2025-W52-4"])
    def test_non_calendar_iso_forms(self, svc: CalendarService, text: str) -> None:
        result = svc.season_for_date(text)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"

    def test_before_supported_range(self, svc: CalendarService) -> None:
        result = svc.season_for_date("1583-06-01")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DOMAIN_ERROR"


class TestPropers:
    def test_list(self, svc: CalendarService) -> None:
        result = svc.propers(2025)
        assert result.ok
        assert result.data["count"] == 25
        assert result.data["propers"][0] == {"date": "2026-06-07", "proper_number": 2}

    def test_for_date(self, svc: CalendarService) -> None:
        result = svc.proper_for_date(date(2026, 7, 15))
        assert result.ok
        assert result.data["proper"] == 7

    def test_for_date_outside_ordinary_time(self, svc: CalendarService) -> None:
        result = svc.proper_for_date("2025-12-25")
        assert result.ok
        assert result.data["proper"] is None


class TestFeasts:
    def test_civil_year(self, svc: CalendarService) -> None:
        result = svc.feasts(2025)
        assert result.ok
        assert result.data["count"] == 22
        easter = next(f for f in result.data["feasts"] if f["name"] == "Easter Sunday")
        assert easter == {
            "date": "2025-04-20",
            "name": "Easter Sunday",
            "season": "Easter",
            "color": "white",
            "rank": "principal_feast",
            "is_moveable": True,
        }

    def test_domain_error(self, svc: CalendarService) -> None:
        assert not svc.feasts(1583).ok


class TestCycle:
    @pytest.mark.parametrize(("year", "cycle"), [(2025, "C"), (2026, "A"), (2027, "B")])
    def test_cycle(self, svc: CalendarService, year: int, cycle: str) -> None:
        result = svc.cycle(year)
        assert result.ok
        assert result.data["cycle"] == cycle
        assert result.data["liturgical_year"] == year
        assert result.data["advent_year"] == year - 1

    def test_domain_error(self, svc: CalendarService) -> None:
        result = svc.cycle(5000)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DOMAIN_ERROR"


class TestDay:
    def test_christmas(self, svc: CalendarService) -> None:
        result = svc.day("2025-12-25")
        assert result.ok
        assert result.data["weekday"] == "Thursday"
        assert result.data["liturgical_year"] == 2026
        assert result.data["cycle"] == "A"
        assert result.data["season"] == "Christmas"
        assert result.data["color"] == "white"
        assert result.data["proper"] is None
        assert [f["name"] for f in result.data["feasts"]] == ["Christmas Day"]

    def test_ordinary_sunday(self, svc: CalendarService) -> None:
        result = svc.day(date(2026, 7, 12))
        assert result.data["season"] == "Ordinary Time"
        assert result.data["color"] == "green"
        assert result.data["proper"] == 7
        assert result.data["feasts"] == []

    def test_feast_color_wins(self, svc: CalendarService) -> None:
        result = svc.day("2026-06-29")
        assert result.data["season"] == "Ordinary Time"
        assert result.data["color"] == "red"

    def test_invalid(self, svc: CalendarService) -> None:
        result = svc.day("yesterday")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"


class TestInvariantErrorsPropagate:
    def test_not_converted(self, svc: CalendarService, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(year: int) -> date:
            raise CalendarInvariantError("easter_window", "broken")

        monkeypatch.setattr("litcal.services.calendar.calculate_easter", broken)
        with pytest.raises(CalendarInvariantError):
            svc.easter(2025)

    def test_uncovered_date(self, svc: CalendarService, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("litcal.domain.seasons.get_season_for_date", lambda d: None)
        with pytest.raises(CalendarInvariantError, match="season_unique"):
            svc.season_for_date("2026-03-01")
