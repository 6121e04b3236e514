"""Codec error taxonomy.

Each failure kind has its own exception class tagged with an
:class:`ErrorKind`, so callers can branch on ``exc.kind`` (or catch the
class) instead of matching message text.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Tag carried by every :class:`BoundedIntError`."""

    PARSE = "parse"
    NEGATIVE_VALUE = "negative_value"
    OVERLENGTH_VALUE = "overlength_value"
    NIL_SOURCE = "nil_source"
    NON_BYTES_SOURCE = "non_bytes_source"
    EMPTY_INPUT = "empty_input"
    OVERLENGTH_INPUT = "overlength_input"


class BoundedIntError(ValueError):
    """Base class for all codec errors."""

    kind: ClassVar[ErrorKind]
    default_message: ClassVar[str] = "invalid bounded integer"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ParseError(BoundedIntError):
    """Text does not match the grammar for the selected base."""

    kind = ErrorKind.PARSE
    default_message = "failed to parse integer text"


class NegativeValueError(BoundedIntError):
    kind = ErrorKind.NEGATIVE_VALUE
    default_message = "the value must be 0 or more"


class OverlengthValueError(BoundedIntError):
    kind = ErrorKind.OVERLENGTH_VALUE
    default_message = "the length of the value in bits must be 256 or less"


class NilSourceError(BoundedIntError):
    kind = ErrorKind.NIL_SOURCE
    default_message = "src must not be None"


class NonBytesSourceError(BoundedIntError, TypeError):
    """Storage value is not a byte sequence."""

    kind = ErrorKind.NON_BYTES_SOURCE
    default_message = "the type of src must be bytes"


class EmptyInputError(BoundedIntError):
    kind = ErrorKind.EMPTY_INPUT
    default_message = "the length of src in bytes must be greater than 0"


class OverlengthInputError(BoundedIntError):
    kind = ErrorKind.OVERLENGTH_INPUT
    default_message = "the length of src in bytes must be 32 or less"
