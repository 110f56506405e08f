"""Commands: single-year and single-date calendar lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from litcal.commands._base import LitcalCommand

if TYPE_CHECKING:
    from litcal.commands._context import AppContext


@click.command(
    cls=LitcalCommand,
    examples="""\
  litcal easter 2025
  litcal --json easter 2026
  litcal -q easter 2027""",
)
@click.argument("year_arg", metavar="YEAR", type=int)
@click.pass_obj
def easter(app: AppContext, year_arg: int) -> None:
    """Show the date of Easter Sunday in a calendar YEAR."""
    from litcal.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).easter(year_arg))


@click.command(
    cls=LitcalCommand,
    examples="""\
  litcal year 2025               # the year beginning at Advent 2025
  litcal year 2026 --liturgical  # the same year, by its liturgical name
  litcal -v year 2025            # include feasts and timings""",
)
@click.argument("year_arg", metavar="YEAR", type=int)
@click.option(
    "--liturgical",
    is_flag=True,
    help="Read YEAR as the liturgical year name instead of the Advent start year.",
)
@click.pass_obj
def year(app: AppContext, year_arg: int, liturgical: bool) -> None:
    """Show the full liturgical year beginning at Advent of YEAR."""
    from litcal.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).liturgical_year(year_arg, liturgical=liturgical))


@click.command(
    cls=LitcalCommand,
    examples="""\
  litcal cycle 2026
  litcal -q cycle 2025""",
)
@click.argument("year_arg", metavar="YEAR", type=int)
@click.pass_obj
def cycle(app: AppContext, year_arg: int) -> None:
    """Show the RCL Sunday cycle (A, B or C) of liturgical YEAR."""
    from litcal.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).cycle(year_arg))


@click.command(
    cls=LitcalCommand,
    examples="""\
  litcal feasts 2025
  litcal -v feasts 2025    # with rank and moveable columns""",
)
@click.argument("year_arg", metavar="YEAR", type=int)
@click.pass_obj
def feasts(app: AppContext, year_arg: int) -> None:
    """List the feasts falling in calendar YEAR."""
    from litcal.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).feasts(year_arg))


@click.command(
    cls=LitcalCommand,
    examples="""\
  litcal day
  litcal day 2025-12-25
  litcal --json day 2026-06-14""",
)
@click.argument("date_arg", metavar="[DATE]", required=False)
@click.pass_obj
def day(app: AppContext, date_arg: str | None) -> None:
    """Show season, color, cycle and Proper for DATE (default: today)."""
    from litcal.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).day(date_arg))
