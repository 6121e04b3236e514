"""Human/JSON output helpers.

Human output is one line per result: ``<input> -> <rendered>`` followed by
a short parenthesized description. --json dumps the whole ServiceResult.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bigutil.services.result import ServiceResult


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _format_convert(data: dict[str, Any]) -> str:
    bits = _plural(data["bit_length"], "bit")
    return f"{data['input']} -> {data['output']} ({data['base']}, {bits})"


def _format_encode(data: dict[str, Any]) -> str:
    raw = data["hex"] or "(empty)"
    return f"{data['input']} -> {raw} ({_plural(data['length'], 'byte')})"


def _format_decode(data: dict[str, Any]) -> str:
    size = f"{_plural(data['length'], 'byte')}, {_plural(data['bit_length'], 'bit')}"
    return f"{data['input'] or '(empty)'} -> {data['output']} ({size})"


_FORMATTERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "convert": _format_convert,
    "encode": _format_encode,
    "decode": _format_decode,
}


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        formatter = _FORMATTERS.get(result.op)
        if formatter is None or not result.data:
            return f"OK: {result.op}"
        return formatter(result.data)
    if result.error is None:
        return f"ERROR: {result.op}: unknown error"
    line = f"ERROR: {result.op} [{result.error.code}] {result.error.message}"
    if "input" in result.error.detail:
        line = f"{line} (input: {result.error.detail['input']!r})"
    return line
