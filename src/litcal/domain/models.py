"""Immutable value models produced by the engine.

All models are frozen; sequences are tuples. A model is never mutated after
construction and never references anything outside itself, so any of them
may be cached or shared across threads.
"""

from __future__ import annotations

import datetime as dt
from typing import Self

from pydantic import BaseModel, Field, model_validator

from litcal.domain.dates import days_between, is_sunday
from litcal.domain.errors import CalendarInvariantError
from litcal.domain.types import Cycle, FeastRank, LiturgicalColor, SeasonName
from litcal.domain.years import AdventYear, ChurchYear


class LiturgicalDate(BaseModel):
    """A named observance on a specific civil date."""

    model_config = {"frozen": True}

    date: dt.date
    name: str
    season: SeasonName
    color: LiturgicalColor
    rank: FeastRank
    is_moveable: bool


class SeasonWindow(BaseModel):
    """One season of a liturgical year, both bounds inclusive."""

    model_config = {"frozen": True}

    name: SeasonName
    start_date: dt.date
    end_date: dt.date
    color: LiturgicalColor

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.end_date < self.start_date:
            raise CalendarInvariantError(
                "season_bounds",
                f"{self.name} ends before it starts",
                start_date=self.start_date.isoformat(),
                end_date=self.end_date.isoformat(),
            )
        return self

    @property
    def days(self) -> int:
        """Number of calendar days in the window."""
        return days_between(self.start_date, self.end_date) + 1

    @property
    def week_count(self) -> int:
        """Whole weeks spanned from start to end."""
        return days_between(self.start_date, self.end_date) // 7

    def contains(self, d: dt.date) -> bool:
        return self.start_date <= d <= self.end_date


class OrdinaryTimeEntry(BaseModel):
    """An Ordinary Time Sunday and the Proper number that keys its readings."""

    model_config = {"frozen": True}

    date: dt.date
    proper_number: int = Field(ge=2)

    @model_validator(mode="after")
    def _check_sunday(self) -> Self:
        if not is_sunday(self.date):
            raise CalendarInvariantError(
                "proper_sunday",
                f"Proper {self.proper_number} falls on a weekday",
                date=self.date.isoformat(),
            )
        return self


class LiturgicalYear(BaseModel):
    """Every anchor date, season and Proper of one liturgical year.

    Attributes:
        year: The liturgical year name, i.e. the calendar year it ends in.
        cycle: RCL Sunday cycle letter.
        advent1: First Sunday of Advent opening the year.
        next_advent1: First Sunday of Advent opening the following year.
        seasons: The six season windows, chronological, tiling the year.
        ordinary_time: Ordinary Time Sundays with their Proper numbers.
        feasts: Moveable and fixed observances falling inside the year.
    """

    model_config = {"frozen": True}

    year: int
    cycle: Cycle
    advent1: dt.date
    christmas: dt.date
    epiphany: dt.date
    ash_wednesday: dt.date
    palm_sunday: dt.date
    easter: dt.date
    pentecost: dt.date
    next_advent1: dt.date
    seasons: tuple[SeasonWindow, ...]
    ordinary_time: tuple[OrdinaryTimeEntry, ...] = ()
    feasts: tuple[LiturgicalDate, ...] = ()

    @model_validator(mode="after")
    def _check_naming(self) -> Self:
        # The liturgical year is named by the calendar year it ends in.
        if self.year != self.advent1.year + 1:
            raise CalendarInvariantError(
                "year_naming",
                f"Liturgical year {self.year} cannot begin with Advent {self.advent1.year}",
                year=self.year,
                advent1=self.advent1.isoformat(),
            )
        if len(self.seasons) != 6:
            raise CalendarInvariantError(
                "season_count",
                f"Expected 6 season windows, got {len(self.seasons)}",
                year=self.year,
            )
        return self

    @property
    def church_year(self) -> ChurchYear:
        return ChurchYear(self.year)

    @property
    def advent_year(self) -> AdventYear:
        return self.church_year.advent_year

    @property
    def start_date(self) -> dt.date:
        return self.advent1

    @property
    def end_date(self) -> dt.date:
        return self.seasons[-1].end_date

    def season(self, name: SeasonName | str) -> SeasonWindow:
        """Return the window called *name*."""
        for window in self.seasons:
            if window.name == name:
                return window
        msg = f"Unknown season: {name}"
        raise KeyError(msg)

    def contains(self, d: dt.date) -> bool:
        return self.start_date <= d <= self.end_date
