"""Command group: season windows."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from litcal.commands._base import LitcalGroup

if TYPE_CHECKING:
    from litcal.commands._context import AppContext


@click.group(
    cls=LitcalGroup,
    examples="""\
  litcal season list 2025
  litcal season list 2026 --liturgical
  litcal season at 2026-03-01""",
)
@click.pass_obj
def season(app: AppContext) -> None:
    """Inspect the seasons of a liturgical year."""


@season.command(
    "list",
    examples="""\
  litcal season list 2025
  litcal season list 2026 --liturgical
  litcal --json season list 2025""",
)
@click.argument("year_arg", metavar="YEAR", type=int)
@click.option(
    "--liturgical",
    is_flag=True,
    help="Read YEAR as the liturgical year name instead of the Advent start year.",
)
@click.pass_obj
def list_seasons(app: AppContext, year_arg: int, liturgical: bool) -> None:
    """List the six season windows of the year beginning at Advent of YEAR."""
    from litcal.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).seasons(year_arg, liturgical=liturgical))


@season.command(
    "at",
    examples="""\
  litcal season at
  litcal season at 2026-03-01
  litcal -q season at 2025-12-24""",
)
@click.argument("date_arg", metavar="[DATE]", required=False)
@click.pass_obj
def season_at(app: AppContext, date_arg: str | None) -> None:
    """Show the season containing DATE (default: today)."""
    from litcal.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).season_for_date(date_arg))
