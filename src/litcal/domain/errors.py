"""Engine error taxonomy.

Two failure classes only:
- Domain errors: bad input (a year the Computus cannot serve). Rejected.
- Invariant errors: the engine produced an inconsistent calendar. These are
  programming faults and must never be caught and defaulted.
"""

from __future__ import annotations

from typing import Any


class CalendarError(Exception):
    """Base error for the calendar engine."""


class CalendarDomainError(CalendarError, ValueError):
    """Raised when a year lies outside the range the algorithms are valid for."""

    def __init__(self, year: object, minimum: int, maximum: int) -> None:
        self.year = year
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Year {year!r} is outside the supported range {minimum}-{maximum}")


class CalendarInvariantError(CalendarError):
    """Raised when a calendar computation invariant failed."""

    def __init__(self, invariant: str, message: str, **detail: Any) -> None:
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"Calendar computation invariant failed [{invariant}]: {message}")
