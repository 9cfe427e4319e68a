"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Holds the resolved settings and routes results to
stdout/stderr with the right exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from civiltime.config.logging import bind_invocation, configure_logging
from civiltime.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from civiltime.config.settings import CivilTimeSettings
    from civiltime.services.result import ServiceResult

log = structlog.get_logger("civiltime.cli")


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CivilTimeSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        bind_invocation(
            zone=settings.default_zone,
            config_path=str(settings.config_path) if settings.config_path else None,
        )
        log.debug("settings.resolved", json_output=settings.json_output, quiet=settings.quiet)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout and returns. Warnings go to stderr so
          they don't pollute piped output.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON mode already carries warnings in the payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            log.debug("operation.failed", op=result.op, code=result.error and result.error.code)
            click.echo(output, err=True)
            raise SystemExit(1)
