"""Command group: Ordinary Time Propers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from litcal.commands._base import LitcalGroup

if TYPE_CHECKING:
    from litcal.commands._context import AppContext


@click.group(
    cls=LitcalGroup,
    examples="""\
  litcal proper list 2025
  litcal proper at 2026-07-12""",
)
@click.pass_obj
def proper(app: AppContext) -> None:
    """Map Ordinary Time Sundays to Proper numbers."""


@proper.command(
    "list",
    examples="""\
  litcal proper list 2025
  litcal proper list 2026 --liturgical""",
)
@click.argument("year_arg", metavar="YEAR", type=int)
@click.option(
    "--liturgical",
    is_flag=True,
    help="Read YEAR as the liturgical year name instead of the Advent start year.",
)
@click.pass_obj
def list_propers(app: AppContext, year_arg: int, liturgical: bool) -> None:
    """List Ordinary Time Sundays of the year beginning at Advent of YEAR."""
    from litcal.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).propers(year_arg, liturgical=liturgical))


@proper.command(
    "at",
    examples="""\
  litcal proper at
  litcal proper at 2026-07-15    # a weekday takes its Sunday's Proper
  litcal -q proper at 2026-07-12""",
)
@click.argument("date_arg", metavar="[DATE]", required=False)
@click.pass_obj
def proper_at(app: AppContext, date_arg: str | None) -> None:
    """Show the Proper governing DATE (default: today)."""
    from litcal.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).proper_for_date(date_arg))
