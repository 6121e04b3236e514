"""Text grammar for decimal and ``0x``-hexadecimal magnitudes.

Pure functions: nothing here touches a :class:`BoundedInt` instance.

Decimal: ``[0-9]+``. A leading ``-`` is recognized only to report
NegativeValueError rather than a generic parse failure.

Hexadecimal: literal ``0x`` followed by ``[0-9a-fA-F]+``. The prefix is
case-sensitive and mandatory. Rendering is always lowercase and zero is
``0x0``, never ``0x``.
"""

from __future__ import annotations

import re

from bigutil.domain.bounds import MAX_VALUE, check_magnitude
from bigutil.domain.errors import NegativeValueError, OverlengthValueError, ParseError
from bigutil.domain.types import Base

HEX_PREFIX = "0x"

DECIMAL_PATTERN = re.compile(r"(-?)([0-9]+)")
HEX_DIGITS_PATTERN = re.compile(r"[0-9a-fA-F]+")

# Significant digits in MAX_VALUE; longer runs are rejected before int()
# so huge inputs never reach the interpreter's str->int conversion limit.
_MAX_DECIMAL_DIGITS = len(str(MAX_VALUE))
_MAX_HEX_DIGITS = len(f"{MAX_VALUE:x}")


def _require_str(text: object) -> None:
    if not isinstance(text, str):
        raise TypeError(f"integer text must be str, not {type(text).__name__}")


def has_hex_prefix(text: str) -> bool:
    return text.startswith(HEX_PREFIX)


def parse_decimal(text: str) -> int:
    """Parse unprefixed base-10 digits into a bounded magnitude."""
    _require_str(text)
    match = DECIMAL_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"invalid decimal string: {text!r}")
    sign, digits = match.groups()
    if sign:
        raise NegativeValueError()
    significant = digits.lstrip("0")
    if len(significant) > _MAX_DECIMAL_DIGITS:
        raise OverlengthValueError()
    return check_magnitude(int(significant or "0", 10))


def parse_hex(text: str) -> int:
    """Parse ``0x``-prefixed hex digits into a bounded magnitude."""
    _require_str(text)
    if not has_hex_prefix(text):
        raise ParseError("invalid hex string")
    digits = text[len(HEX_PREFIX) :]
    if HEX_DIGITS_PATTERN.fullmatch(digits) is None:
        raise ParseError(f"invalid hex string: {text!r}")
    significant = digits.lstrip("0")
    if len(significant) > _MAX_HEX_DIGITS:
        raise OverlengthValueError()
    return check_magnitude(int(significant or "0", 16))


def parse_text(text: str) -> tuple[int, Base]:
    """Parse text in either base, dispatching on the ``0x`` prefix.

    Returns ``(magnitude, base)`` where *base* is the base that was parsed.
    """
    _require_str(text)
    if has_hex_prefix(text):
        return parse_hex(text), Base.HEXADECIMAL
    return parse_decimal(text), Base.DECIMAL


def render(value: int, base: Base) -> str:
    """Render *value* in *base*. Inverse of the matching parse function."""
    if base == Base.DECIMAL:
        return str(value)
    return f"{HEX_PREFIX}{value:x}"
