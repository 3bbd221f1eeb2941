"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup and centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shuttleforge.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from shuttleforge.config.settings import ShuttleSettings
    from shuttleforge.services.dispatch import DispatchService
    from shuttleforge.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ShuttleSettings) -> None:
        self.settings = settings

        from shuttleforge.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def dispatch_service(self) -> DispatchService:
        """A DispatchService bound to the configured rules."""
        from shuttleforge.services.dispatch import DispatchService

        return DispatchService(self.settings.rules)

    def emit(self, result: ServiceResult, *, blocked: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        * *blocked*: the report goes to stdout but the exit code is 1, so
          scripts can gate an export on it.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            show_legs=self.settings.display.show_legs,
            width=self.settings.display.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            if blocked:
                raise SystemExit(1)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
