"""Magnitude bounds.

INVARIANT: every stored magnitude is non-negative and fits in
MAX_BYTE_LENGTH big-endian bytes.
"""

from __future__ import annotations

from bigutil.domain.errors import NegativeValueError, OverlengthValueError

MAX_BYTE_LENGTH = 32
MAX_BIT_LENGTH = MAX_BYTE_LENGTH * 8
MAX_VALUE = (1 << MAX_BIT_LENGTH) - 1


def check_magnitude(value: int) -> int:
    """Return *value* unchanged if it is within bounds, else raise."""
    if value < 0:
        raise NegativeValueError()
    if value.bit_length() > MAX_BIT_LENGTH:
        raise OverlengthValueError()
    return value
