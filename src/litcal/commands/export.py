"""Command group: season-row export and drift detection."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from litcal.commands._base import LitcalGroup

if TYPE_CHECKING:
    from litcal.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  litcal export seasons --start 2024 --end 2030 --output seasons.json
  litcal export diff seasons.json --start 2024 --end 2030"""


@click.group(cls=LitcalGroup, examples=_EXPORT_EXAMPLES)
@click.pass_obj
def export(app: AppContext) -> None:
    """Export season rows and compare persisted rows against them."""


@export.command(
    examples="""\
  litcal export seasons --start 2025 --end 2025
  litcal export seasons --start 2024 --end 2030 --output seasons.json
  litcal --json export seasons --start 2025 --end 2027"""
)
@click.option("--start", type=int, required=True, help="First Advent year.")
@click.option("--end", type=int, required=True, help="Last Advent year.")
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the rows to this JSON file.",
)
@click.pass_obj
def seasons(app: AppContext, start: int, end: int, output_file: str | None) -> None:
    """Generate deterministic season rows for Advent years START..END."""
    from litcal.services.export import ExportService

    output = Path(output_file) if output_file else None
    app.emit(ExportService(app.settings).season_rows(start, end, output=output))


@export.command(
    examples="""\
  litcal export diff seasons.json --start 2024 --end 2030
  litcal --json export diff seasons.json --start 2024 --end 2030"""
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--start", type=int, required=True, help="First Advent year.")
@click.option("--end", type=int, required=True, help="Last Advent year.")
@click.pass_obj
def diff(app: AppContext, file: str, start: int, end: int) -> None:
    """Compare season rows in FILE with freshly generated rows."""
    from litcal.services.export import ExportService

    app.emit(ExportService(app.settings).diff_season_file(Path(file), start, end))
