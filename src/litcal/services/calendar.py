"""CalendarService: year, season, Proper and feast lookups.

Each method wraps one engine entry point. Out-of-range years come back as
``DOMAIN_ERROR`` results; invariant failures are faults and propagate.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from litcal.domain.advent import church_year_for_date
from litcal.domain.cycle import get_liturgical_cycle
from litcal.domain.dates import WEEKDAY_NAMES, to_calendar_date, weekday
from litcal.domain.easter import calculate_easter
from litcal.domain.errors import CalendarDomainError
from litcal.domain.feasts import calculate_feasts
from litcal.domain.models import LiturgicalDate, SeasonWindow
from litcal.domain.propers import get_ordinary_time_sundays, get_proper_number_for_date
from litcal.domain.seasons import calculate_seasons, season_containing
from litcal.domain.year import generate_liturgical_year
from litcal.domain.years import (
    MAX_ADVENT_YEAR,
    MIN_ADVENT_YEAR,
    AdventYear,
    ChurchYear,
    check_year,
)
from litcal.services._helpers import domain_failure, invalid_date, today
from litcal.services.base import BaseService
from litcal.services.result import ServiceResult
from litcal.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

DateArg = date | datetime | str | None


def _typed_year(year: int, *, liturgical: bool) -> AdventYear | ChurchYear:
    """Read *year* as a liturgical year name or an Advent start year."""
    return ChurchYear(year) if liturgical else AdventYear(year)


def _year_keys(year: AdventYear | ChurchYear) -> dict[str, int]:
    church = year if isinstance(year, ChurchYear) else year.church_year
    return {"liturgical_year": int(church), "advent_year": int(church.advent_year)}


def _season_dict(window: SeasonWindow) -> dict[str, Any]:
    return {**window.model_dump(mode="json"), "days": window.days, "weeks": window.week_count}


def _feast_dict(feast: LiturgicalDate) -> dict[str, Any]:
    return feast.model_dump(mode="json")


class CalendarService(BaseService):
    """Read-only calendar queries."""

    @traced
    def easter(self, year: int) -> ServiceResult:
        """Easter Sunday of civil *year*."""
        try:
            easter = calculate_easter(year)
        except CalendarDomainError as exc:
            return domain_failure("easter", exc)
        return ServiceResult(
            ok=True,
            op="easter",
            data={
                "year": year,
                "easter": easter.isoformat(),
                "weekday": WEEKDAY_NAMES[weekday(easter)],
            },
        )

    @traced
    def liturgical_year(self, year: int, *, liturgical: bool = False) -> ServiceResult:
        """Full structure of one liturgical year.

        *year* is the Advent start year, or the liturgical year name when
        *liturgical* is set.
        """
        try:
            typed = _typed_year(year, liturgical=liturgical)
            with trace_span("generate"):
                built = generate_liturgical_year(typed)
        except CalendarDomainError as exc:
            return domain_failure("liturgical_year", exc)
        logger.debug("Built liturgical year %s", built.year)
        data = built.model_dump(mode="json")
        data["advent_year"] = int(built.advent_year)
        for window in data["seasons"]:
            window["days"] = built.season(window["name"]).days
        return ServiceResult(ok=True, op="liturgical_year", data=data)

    @traced
    def seasons(self, year: int, *, liturgical: bool = False) -> ServiceResult:
        """The six season windows of one liturgical year."""
        try:
            typed = _typed_year(year, liturgical=liturgical)
            windows = calculate_seasons(typed)
        except CalendarDomainError as exc:
            return domain_failure("seasons", exc)
        return ServiceResult(
            ok=True,
            op="seasons",
            data={
                **_year_keys(typed),
                "cycle": str(get_liturgical_cycle(typed)),
                "seasons": [_season_dict(w) for w in windows],
            },
        )

    @traced
    def season_for_date(self, d: DateArg = None) -> ServiceResult:
        """Season containing *d* (default: today)."""
        op = "season_for_date"
        try:
            target = to_calendar_date(d) if d is not None else today()
        except ValueError:
            return invalid_date(op, str(d))
        try:
            window = season_containing(target)
        except CalendarDomainError as exc:
            return domain_failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "date": target.isoformat(),
                "liturgical_year": int(church_year_for_date(target)),
                **_season_dict(window),
            },
        )

    @traced
    def propers(self, year: int, *, liturgical: bool = False) -> ServiceResult:
        """Ordinary Time Sundays and their Proper numbers."""
        try:
            typed = _typed_year(year, liturgical=liturgical)
            entries = get_ordinary_time_sundays(typed)
        except CalendarDomainError as exc:
            return domain_failure("propers", exc)
        return ServiceResult(
            ok=True,
            op="propers",
            data={
                **_year_keys(typed),
                "propers": [e.model_dump(mode="json") for e in entries],
                "count": len(entries),
            },
        )

    @traced
    def proper_for_date(self, d: DateArg = None) -> ServiceResult:
        """Proper governing *d* (default: today); ``proper`` is None outside it."""
        op = "proper_for_date"
        try:
            target = to_calendar_date(d) if d is not None else today()
        except ValueError:
            return invalid_date(op, str(d))
        try:
            proper = get_proper_number_for_date(target)
        except CalendarDomainError as exc:
            return domain_failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "date": target.isoformat(),
                "liturgical_year": int(church_year_for_date(target)),
                "proper": proper,
            },
        )

    @traced
    def feasts(self, year: int) -> ServiceResult:
        """Moveable and fixed feasts of civil *year*."""
        try:
            feasts = calculate_feasts(year)
        except CalendarDomainError as exc:
            return domain_failure("feasts", exc)
        return ServiceResult(
            ok=True,
            op="feasts",
            data={
                "year": year,
                "feasts": [_feast_dict(f) for f in feasts],
                "count": len(feasts),
            },
        )

    @traced
    def cycle(self, year: int) -> ServiceResult:
        """RCL cycle of liturgical year *year* (named by the year it ends in)."""
        try:
            typed = ChurchYear(year)
            check_year(int(typed.advent_year), minimum=MIN_ADVENT_YEAR, maximum=MAX_ADVENT_YEAR)
        except CalendarDomainError as exc:
            return domain_failure("cycle", exc)
        return ServiceResult(
            ok=True,
            op="cycle",
            data={**_year_keys(typed), "cycle": str(get_liturgical_cycle(typed))},
        )

    @traced
    def day(self, d: DateArg = None) -> ServiceResult:
        """Everything a reading lookup needs for one date.

        Returns the liturgical year, cycle, season, color, Proper and the
        feasts observed on *d* (default: today). A feast's color takes
        precedence over the season's.
        """
        op = "day"
        try:
            target = to_calendar_date(d) if d is not None else today()
        except ValueError:
            return invalid_date(op, str(d))
        try:
            church_year = church_year_for_date(target)
            with trace_span("generate"):
                built = generate_liturgical_year(church_year)
        except CalendarDomainError as exc:
            return domain_failure(op, exc)

        window = next(w for w in built.seasons if w.contains(target))
        observed = [f for f in built.feasts if f.date == target]
        proper = get_proper_number_for_date(target, built.advent_year)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "date": target.isoformat(),
                "weekday": WEEKDAY_NAMES[weekday(target)],
                "liturgical_year": built.year,
                "cycle": str(built.cycle),
                "season": str(window.name),
                "color": str(observed[0].color if observed else window.color),
                "proper": proper,
                "feasts": [_feast_dict(f) for f in observed],
            },
        )
