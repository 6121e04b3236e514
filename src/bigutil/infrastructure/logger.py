"""Leveled logging facade with templated line headers.

Built on a private structlog pipeline (no global ``structlog.configure``):

    level filter -> callsite (file/line) -> header + message + fields

Each line starts with the configured header, a Jinja2 template whose only
placeholder syntax is ``${name}``: ``time`` (unix seconds), ``prefix``,
``level``, ``file``, ``line`` and ``message``. Unknown placeholders render
empty, and a lone ``$`` or ``$name`` is literal text. When the header has
no ``${message}`` the message follows as a ``message:<text>`` field.
Extra keyword fields are appended as ``key=value`` pairs, or as a JSON
object when ``json_output`` is set.

``fatal`` logs and then asks the injected :class:`Terminator` to end the
process. ``panic`` logs and then raises :class:`LoggerPanic`.
"""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import MutableMapping
from enum import IntEnum
from typing import Any, Protocol, TextIO

import structlog
from jinja2 import ChainableUndefined, Environment, Template, TemplateSyntaxError, meta
from pydantic import BaseModel

DEFAULT_HEADER = "time:${time}\tprefix:${prefix}\tlevel:${level}\tfile:${file}\tline:${line}"

_LEVEL_KEY = "_bigutil_level"


class LogLevel(IntEnum):
    """Severity levels. ``PRINT`` bypasses filtering, ``OFF`` silences all."""

    PRINT = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    PANIC = 6
    FATAL = 7
    OFF = 8


_LEVEL_NAMES: dict[LogLevel, str] = {
    LogLevel.PRINT: "-",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.PANIC: "PANIC",
    LogLevel.FATAL: "FATAL",
}


class LoggerConfig(BaseModel):
    """Construction-time logger settings."""

    model_config = {"frozen": True}

    prefix: str = ""
    level: LogLevel = LogLevel.INFO
    header: str = DEFAULT_HEADER
    json_output: bool = False


class LoggerPanic(RuntimeError):
    """Raised by :meth:`Logger.panic` after the message is written."""


class Terminator(Protocol):
    def exit(self, code: int) -> None: ...


class ProcessTerminator:
    """Default terminator: exits the interpreter."""

    def exit(self, code: int) -> None:
        sys.exit(code)


# Only ``${...}`` is special; block and comment tags are moved under ``$``
# too so a stray ``{%`` or ``{#`` in a header stays literal.
_HEADER_ENV = Environment(
    variable_start_string="${",
    variable_end_string="}",
    block_start_string="${%",
    block_end_string="%}",
    comment_start_string="${#",
    comment_end_string="#}",
    undefined=ChainableUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


class HeaderTemplate:
    """A compiled line header."""

    def __init__(self, source: str) -> None:
        try:
            ast = _HEADER_ENV.parse(source)
        except TemplateSyntaxError as exc:
            msg = f"invalid log header {source!r}: {exc.message}"
            raise ValueError(msg) from exc
        self.source = source
        self.has_message = "message" in meta.find_undeclared_variables(ast)
        self._template: Template = _HEADER_ENV.from_string(ast)

    def render(self, **values: str) -> str:
        return self._template.render(**values)


class Logger:
    """Structured, leveled logger writing one line per call to *output*."""

    def __init__(
        self,
        config: LoggerConfig | None = None,
        *,
        output: TextIO | None = None,
        terminator: Terminator | None = None,
    ) -> None:
        config = config or LoggerConfig()
        self._lock = threading.Lock()
        self._prefix = config.prefix
        self._level = config.level
        self._header = HeaderTemplate(config.header)
        self._json_output = config.json_output
        self._output = output if output is not None else sys.stdout
        self._terminator: Terminator = terminator or ProcessTerminator()
        self._fields_renderer = (
            structlog.processors.JSONRenderer(sort_keys=True)
            if self._json_output
            else structlog.processors.KeyValueRenderer(sort_keys=True, repr_native_str=False)
        )
        self._bound = self._build()

    def _build(self) -> structlog.BoundLogger:
        return structlog.BoundLogger(
            structlog.PrintLogger(file=self._output),
            processors=[
                self._filter_level,
                structlog.processors.CallsiteParameterAdder(
                    [
                        structlog.processors.CallsiteParameter.PATHNAME,
                        structlog.processors.CallsiteParameter.LINENO,
                    ],
                    additional_ignores=[__name__],
                ),
                self._render_line,
            ],
            context={},
        )

    # --- Configuration ---

    @property
    def output(self) -> TextIO:
        return self._output

    def set_output(self, output: TextIO) -> None:
        with self._lock:
            self._output = output
            self._bound = self._build()

    @property
    def prefix(self) -> str:
        return self._prefix

    def set_prefix(self, prefix: str) -> None:
        self._prefix = prefix

    @property
    def level(self) -> LogLevel:
        return self._level

    def set_level(self, level: LogLevel) -> None:
        self._level = LogLevel(level)

    def set_header(self, header: str) -> None:
        self._header = HeaderTemplate(header)

    # --- Processors ---

    def _filter_level(
        self, _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        level = event_dict[_LEVEL_KEY]
        if level != LogLevel.PRINT and level < self._level:
            raise structlog.DropEvent
        return event_dict

    def _render_line(self, logger: Any, method: str, event_dict: MutableMapping[str, Any]) -> str:
        level = event_dict.pop(_LEVEL_KEY)
        message = str(event_dict.pop("event", ""))
        line = self._header.render(
            time=str(int(time.time())),
            prefix=self._prefix,
            level=_LEVEL_NAMES.get(level, ""),
            file=str(event_dict.pop("pathname", "")),
            line=str(event_dict.pop("lineno", "")),
            message=message,
        )
        if not self._header.has_message:
            line = f"{line}\tmessage:{message}"
        if event_dict:
            line = f"{line}\t{self._fields_renderer(logger, method, event_dict)}"
        return line

    # --- Writing ---

    def _write(self, level: LogLevel, message: str, fields: dict[str, Any]) -> None:
        with self._lock:
            self._bound.msg(message, **fields, **{_LEVEL_KEY: level})

    def print(self, message: str, **fields: Any) -> None:
        self._write(LogLevel.PRINT, message, fields)

    def debug(self, message: str, **fields: Any) -> None:
        self._write(LogLevel.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._write(LogLevel.INFO, message, fields)

    def warn(self, message: str, **fields: Any) -> None:
        self._write(LogLevel.WARN, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._write(LogLevel.ERROR, message, fields)

    def panic(self, message: str, **fields: Any) -> None:
        self._write(LogLevel.PANIC, message, fields)
        raise LoggerPanic(message)

    def fatal(self, message: str, **fields: Any) -> None:
        self._write(LogLevel.FATAL, message, fields)
        self._terminator.exit(1)
