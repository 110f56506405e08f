"""Subcommand modules for litcal.

register_commands() imports lazily so ``litcal --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    # --- Groups ---
    from litcal.commands.export import export
    from litcal.commands.proper import proper
    from litcal.commands.season import season

    cli.add_command(season)
    cli.add_command(proper)
    cli.add_command(export)

    # --- Standalone commands ---
    from litcal.commands.calendar import cycle, day, easter, feasts, year
    from litcal.commands.check import check

    cli.add_command(easter)
    cli.add_command(year)
    cli.add_command(cycle)
    cli.add_command(feasts)
    cli.add_command(day)
    cli.add_command(check)
