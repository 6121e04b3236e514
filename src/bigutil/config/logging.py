"""Logger construction from settings.

Two output modes for the key/value fields of each line:
- Human (default): ``key=value`` pairs
- JSON (--log-json): a JSON object

--verbose lowers the threshold to DEBUG regardless of the [log] level.
Lines go to stderr so they never mix with command output on stdout.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from bigutil.infrastructure.logger import Logger, LoggerConfig, LogLevel, Terminator

if TYPE_CHECKING:
    from bigutil.config.settings import BigutilSettings


def configure_logging(
    settings: BigutilSettings,
    *,
    output: TextIO | None = None,
    terminator: Terminator | None = None,
) -> Logger:
    """Build the application :class:`Logger` for *settings*."""
    level = LogLevel.DEBUG if settings.verbose else settings.log.level
    config = LoggerConfig(
        prefix=settings.log.prefix,
        level=level,
        header=settings.log.header,
        json_output=settings.log_json,
    )
    return Logger(config, output=output if output is not None else sys.stderr, terminator=terminator)
