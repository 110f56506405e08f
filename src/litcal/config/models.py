"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, litcal.toml only contains overrides.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from litcal.domain.years import MAX_ADVENT_YEAR, MIN_ADVENT_YEAR


class CalendarConfig(BaseModel):
    """[calendar] section."""

    model_config = {"frozen": True}

    tradition: str = "RCL"
    check_start_year: int = Field(default=1900, ge=MIN_ADVENT_YEAR, le=MAX_ADVENT_YEAR)
    check_end_year: int = Field(default=2100, ge=MIN_ADVENT_YEAR, le=MAX_ADVENT_YEAR)

    @model_validator(mode="after")
    def _check_range(self) -> Self:
        if self.check_end_year < self.check_start_year:
            msg = "check_end_year must not precede check_start_year"
            raise ValueError(msg)
        return self


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)


class LitcalConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
