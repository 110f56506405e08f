"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import date

from litcal.domain.errors import CalendarDomainError
from litcal.services.result import ServiceError, ServiceResult


def today() -> date:
    """Today's local calendar date."""
    return date.today()


def domain_failure(op: str, exc: CalendarDomainError) -> ServiceResult:
    """Turn an out-of-range year into a DOMAIN_ERROR result."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="DOMAIN_ERROR",
            message=str(exc),
            detail={
                "year": exc.year if isinstance(exc.year, int) else repr(exc.year),
                "minimum": exc.minimum,
                "maximum": exc.maximum,
            },
        ),
    )


def invalid_date(op: str, value: str) -> ServiceResult:
    """Failure for a date argument that is not ISO ``YYYY-MM-DD``."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="INVALID_DATE",
            message=f"Not an ISO date (YYYY-MM-DD): {value!r}",
            detail={"value": value},
        ),
    )


def invalid_range(op: str, start: int, end: int) -> ServiceResult:
    """Failure for a year range whose end precedes its start."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="INVALID_RANGE",
            message=f"End year {end} precedes start year {start}",
            detail={"start": start, "end": end},
        ),
    )
