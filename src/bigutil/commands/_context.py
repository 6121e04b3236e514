"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the logger and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bigutil.config.logging import configure_logging
from bigutil.output.formatters import format_result

if TYPE_CHECKING:
    from bigutil.config.settings import BigutilSettings
    from bigutil.services.codec import CodecService
    from bigutil.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BigutilSettings) -> None:
        self.settings = settings
        self.logger = configure_logging(settings)
        self._codec: CodecService | None = None

    @property
    def codec(self) -> CodecService:
        """The codec service (created lazily on first access)."""
        if self._codec is None:
            from bigutil.services.codec import CodecService

            self._codec = CodecService(self.settings, self.logger)
        return self._codec

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
