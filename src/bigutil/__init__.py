"""bigutil: bounded 256-bit integers with decimal, hex, and binary forms."""

from __future__ import annotations

from bigutil.domain.bounded_int import BoundedInt
from bigutil.domain.errors import (
    BoundedIntError,
    EmptyInputError,
    ErrorKind,
    NegativeValueError,
    NilSourceError,
    NonBytesSourceError,
    OverlengthInputError,
    OverlengthValueError,
    ParseError,
)
from bigutil.domain.types import Base, ScanPolicy

__version__ = "0.1.0"

__all__ = [
    "Base",
    "BoundedInt",
    "BoundedIntError",
    "EmptyInputError",
    "ErrorKind",
    "NegativeValueError",
    "NilSourceError",
    "NonBytesSourceError",
    "OverlengthInputError",
    "OverlengthValueError",
    "ParseError",
    "ScanPolicy",
    "__version__",
]
