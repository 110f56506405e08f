"""Tests for the engine error taxonomy."""

import pytest

from litcal.domain.errors import CalendarDomainError, CalendarError, CalendarInvariantError


class TestCalendarDomainError:
    def test_is_value_error(self) -> None:
        assert issubclass(CalendarDomainError, ValueError)
        assert issubclass(CalendarDomainError, CalendarError)

    def test_attributes(self) -> None:
        exc = CalendarDomainError(1500, 1583, 4099)
        assert exc.year == 1500
        assert exc.minimum == 1583
        assert exc.maximum == 4099
        assert "1500" in str(exc)


class TestCalendarInvariantError:
    def test_not_a_value_error(self) -> None:
        assert not issubclass(CalendarInvariantError, ValueError)

    def test_invariant_and_detail(self) -> None:
        exc = CalendarInvariantError("easter_window", "out of window", easter="2025-04-27")
        assert exc.invariant == "easter_window"
        assert exc.detail == {"easter": "2025-04-27"}
        assert "[easter_window]" in str(exc)

    def test_raise(self) -> None:
        with pytest.raises(CalendarError, match="invariant failed"):
            raise CalendarInvariantError("season_tiling", "gap")
