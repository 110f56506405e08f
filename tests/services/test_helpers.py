"""Tests for shared service helpers."""

from datetime import date

from litcal.domain.errors import CalendarDomainError
from litcal.services._helpers import domain_failure, invalid_date, invalid_range, today


class TestHelpers:
    def test_today(self) -> None:
        assert today() == date.today()

    def test_domain_failure(self) -> None:
        result = domain_failure("easter", CalendarDomainError(1500, 1583, 4099))
        assert not result.ok
        assert result.op == "easter"
        assert result.error is not None
        assert result.error.code == "DOMAIN_ERROR"
        assert result.error.detail == {"year": 1500, "minimum": 1583, "maximum": 4099}

    def test_domain_failure_non_int_year(self) -> None:
        result = domain_failure("easter", CalendarDomainError("abc", 1583, 4099))
        assert result.error is not None
        assert result.error.detail["year"] == "'abc'"

    def test_invalid_date(self) -> None:
        result = invalid_date("day", "2025-13-40")
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"
        assert "2025-13-40" in result.error.message

    def test_invalid_range(self) -> None:
        result = invalid_range("check", 2010, 2000)
        assert result.error is not None
        assert result.error.code == "INVALID_RANGE"
