"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Provides the name service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snn.config.logging import configure_logging
from snn.output.formatters import OutputSettings, format_result
from snn.services.names import NameService

if TYPE_CHECKING:
    from snn.config.settings import SnnSettings
    from snn.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SnnSettings) -> None:
        self.settings = settings
        self._names: NameService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def names(self) -> NameService:
        """The name service (created lazily on first access)."""
        if self._names is None:
            self._names = NameService(self.settings.check)
        return self._names

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
