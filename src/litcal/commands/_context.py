"""AppContext, the object every command receives via ``@click.pass_obj``.

Built once by the root group. Configures logging and telemetry, and owns
result emission: stdout with exit 0 on success, stderr with exit 1 on failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from litcal.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from litcal.config.settings import LitcalSettings
    from litcal.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LitcalSettings) -> None:
        self.settings = settings

        from litcal.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from litcal.services.telemetry import enable_telemetry

            enable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout and returns. Warnings go to stderr so
          piped output stays clean.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
