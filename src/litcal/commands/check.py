"""Command: calendar invariant sweep over a range of years."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from litcal.commands._base import LitcalCommand

if TYPE_CHECKING:
    from litcal.commands._context import AppContext


@click.command(
    cls=LitcalCommand,
    examples="""\
  litcal check
  litcal check --start 2000 --end 2050
  litcal --json check --start 1583 --end 4098""",
)
@click.option("--start", type=int, default=None, help="First Advent year (default from config).")
@click.option("--end", type=int, default=None, help="Last Advent year (default from config).")
@click.pass_obj
def check(app: AppContext, start: int | None, end: int | None) -> None:
    """Validate Easter, seasons, Propers and cycles across a range of years."""
    from litcal.services.check import CheckService

    app.emit(CheckService(app.settings).check(start, end))
