"""CheckService: sweep a range of years and report invariant failures.

Follows the linter pattern: every check runs, every failure becomes an
issue, and nothing is repaired. Categories mirror the engine components.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from litcal.domain.advent import calculate_advent1
from litcal.domain.cycle import CYCLE_REFERENCE, get_liturgical_cycle
from litcal.domain.easter import assert_easter_window, calculate_easter
from litcal.domain.errors import CalendarDomainError, CalendarInvariantError
from litcal.domain.moveable import calculate_ash_wednesday, calculate_pentecost
from litcal.domain.propers import get_ordinary_time_sundays, validate_ordinary_time
from litcal.domain.seasons import calculate_seasons, validate_season_tiling
from litcal.domain.year import generate_liturgical_year
from litcal.domain.years import MAX_ADVENT_YEAR, MIN_ADVENT_YEAR, AdventYear, check_year
from litcal.services._helpers import domain_failure, invalid_range
from litcal.services.base import BaseService
from litcal.services.result import ServiceResult
from litcal.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

CAT_EASTER = "easter"
CAT_ASH_WEDNESDAY = "ash_wednesday"
CAT_SEASONS = "seasons"
CAT_PROPERS = "propers"
CAT_NAMING = "year_naming"
CAT_CYCLE = "cycle"


def _issue(year: int, category: str, message: str) -> dict[str, Any]:
    return {"year": year, "category": category, "message": message}


def _check_easter(year: AdventYear) -> None:
    assert_easter_window(calculate_easter(int(year.church_year)))


def _check_ash_wednesday(year: AdventYear) -> None:
    calculate_ash_wednesday(calculate_easter(int(year.church_year)))


def _check_seasons(year: AdventYear) -> None:
    validate_season_tiling(
        calculate_seasons(year),
        calculate_advent1(int(year)),
        calculate_advent1(int(year) + 1),
    )


def _check_propers(year: AdventYear) -> None:
    pentecost = calculate_pentecost(calculate_easter(int(year.church_year)))
    validate_ordinary_time(
        get_ordinary_time_sundays(year),
        pentecost,
        calculate_advent1(int(year) + 1),
    )


def _check_naming(year: AdventYear) -> None:
    built = generate_liturgical_year(year)
    if built.year != built.advent1.year + 1 or built.advent1.year != int(year):
        raise CalendarInvariantError(
            "year_naming",
            f"Advent {int(year)} produced liturgical year {built.year}",
        )


def _check_cycle(year: AdventYear) -> None:
    church = year.church_year
    if get_liturgical_cycle(church) != get_liturgical_cycle(int(church) + 3):
        raise CalendarInvariantError(
            "cycle_period",
            f"Cycle of {int(church)} differs from {int(church) + 3}",
        )


_CHECKS: tuple[tuple[str, Callable[[AdventYear], None]], ...] = (
    (CAT_EASTER, _check_easter),
    (CAT_ASH_WEDNESDAY, _check_ash_wednesday),
    (CAT_SEASONS, _check_seasons),
    (CAT_PROPERS, _check_propers),
    (CAT_NAMING, _check_naming),
    (CAT_CYCLE, _check_cycle),
)


class CheckService(BaseService):
    """Validates engine output across a range of liturgical years."""

    @traced
    def check(self, start: int | None = None, end: int | None = None) -> ServiceResult:
        """Report invariant failures for Advent years *start* through *end*.

        Both bounds default to the ``[calendar]`` config section.
        """
        cfg = self.calendar_config
        start = cfg.check_start_year if start is None else start
        end = cfg.check_end_year if end is None else end
        try:
            start = check_year(start, minimum=MIN_ADVENT_YEAR, maximum=MAX_ADVENT_YEAR)
            end = check_year(end, minimum=MIN_ADVENT_YEAR, maximum=MAX_ADVENT_YEAR)
        except CalendarDomainError as exc:
            return domain_failure("check", exc)
        if end < start:
            return invalid_range("check", start, end)

        issues: list[dict[str, Any]] = []
        with trace_span("reference"):
            issues.extend(self._check_reference())
        with trace_span("years") as span:
            for year in range(start, end + 1):
                issues.extend(self._check_year(AdventYear(year)))
            if span is not None:
                span.annotate("years", end - start + 1)

        logger.debug("Checked %d years, %d issues", end - start + 1, len(issues))
        return ServiceResult(
            ok=True,
            op="check",
            data={
                "issues": issues,
                "count": len(issues),
                "years_checked": end - start + 1,
                "healthy": not issues,
            },
        )

    @staticmethod
    def _check_year(year: AdventYear) -> list[dict[str, Any]]:
        issues: list[dict[str, Any]] = []
        for category, run in _CHECKS:
            try:
                run(year)
            except CalendarInvariantError as exc:
                issues.append(_issue(int(year), category, str(exc)))
        return issues

    @staticmethod
    def _check_reference() -> list[dict[str, Any]]:
        reference_year, expected = CYCLE_REFERENCE
        actual = get_liturgical_cycle(reference_year)
        if actual == expected:
            return []
        return [
            _issue(
                int(reference_year.advent_year),
                CAT_CYCLE,
                f"Liturgical year {int(reference_year)} is Year {actual}, expected {expected}",
            )
        ]
