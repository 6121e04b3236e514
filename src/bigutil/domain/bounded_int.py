"""BoundedInt: a non-negative integer of at most 256 bits.

One value, three representations:

- decimal text (``"2083236893"``)
- ``0x`` hex text (``"0x7c2bac1d"``)
- minimal big-endian bytes for storage (``b"\\x7c\\x2b\\xac\\x1d"``)

The preferred base only decides which text form ``str()`` produces. It
is set by whichever text form was parsed last and reset to hexadecimal
by :meth:`BoundedInt.scan`.

INVARIANT: every mutator validates completely before assigning, so a
failed parse or scan leaves the receiver unchanged.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from bigutil.domain import text as _text
from bigutil.domain.bounds import MAX_BYTE_LENGTH, check_magnitude
from bigutil.domain.errors import (
    EmptyInputError,
    NilSourceError,
    NonBytesSourceError,
    OverlengthInputError,
    ParseError,
)
from bigutil.domain.types import DEFAULT_BASE, Base, ScanPolicy

_BYTES_TYPES = (bytes, bytearray, memoryview)


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"expected int, got {type(value).__name__}"
        raise TypeError(msg)
    return value


class BoundedInt:
    """Bounded non-negative integer with a preferred text base.

    Not safe for concurrent mutation; copy it or guard it externally.
    """

    __slots__ = ("_magnitude", "_base")

    def __init__(self, value: int = 0, base: Base = DEFAULT_BASE) -> None:
        self._magnitude = check_magnitude(_require_int(value))
        self._base = Base(base)

    # --- Constructors ---

    @classmethod
    def from_int(cls, value: int) -> BoundedInt:
        return cls(value)

    @classmethod
    def from_decimal(cls, text: str) -> BoundedInt:
        x = cls()
        x.set_decimal(text)
        return x

    @classmethod
    def from_hex(cls, text: str) -> BoundedInt:
        x = cls()
        x.set_hex(text)
        return x

    @classmethod
    def from_text(cls, text: str) -> BoundedInt:
        """Parse *text* as hex if it has the ``0x`` prefix, else as decimal."""
        x = cls()
        x.set_string(text)
        return x

    @classmethod
    def from_bytes(cls, src: Any, *, policy: ScanPolicy = ScanPolicy.PERMISSIVE) -> BoundedInt:
        x = cls()
        x.scan(src, policy=policy)
        return x

    # --- Accessors ---

    @property
    def magnitude(self) -> int:
        """The stored value. Python ints are immutable, so this is a safe copy."""
        return self._magnitude

    @property
    def base(self) -> Base:
        return self._base

    def set_base_to_decimal(self) -> None:
        self._base = Base.DECIMAL

    def set_base_to_hexadecimal(self) -> None:
        self._base = Base.HEXADECIMAL

    def copy(self) -> BoundedInt:
        return BoundedInt(self._magnitude, self._base)

    # --- Text ---

    def set_decimal(self, text: str) -> None:
        """Replace the value with decimal *text* and prefer decimal output."""
        self._magnitude = _text.parse_decimal(text)
        self._base = Base.DECIMAL

    def set_hex(self, text: str) -> None:
        """Replace the value with ``0x`` hex *text* and prefer hex output."""
        self._magnitude = _text.parse_hex(text)
        self._base = Base.HEXADECIMAL

    def set_string(self, text: str) -> None:
        self._magnitude, self._base = _text.parse_text(text)

    def __str__(self) -> str:
        return _text.render(self._magnitude, self._base)

    def marshal_text(self) -> bytes:
        return str(self).encode("ascii")

    def unmarshal_text(self, text: bytes | str) -> None:
        if isinstance(text, _BYTES_TYPES):
            try:
                text = bytes(text).decode("ascii")
            except UnicodeDecodeError as exc:
                raise ParseError("integer text must be ASCII") from exc
        self.set_string(text)

    # --- JSON ---

    def marshal_json(self) -> str:
        """Return the JSON document for this value: a single JSON string."""
        return json.dumps(str(self))

    def unmarshal_json(self, data: str | bytes) -> None:
        try:
            decoded = json.loads(data)
        except ValueError as exc:
            raise ParseError(f"invalid JSON: {exc}") from exc
        if not isinstance(decoded, str):
            raise ParseError(f"expected JSON string, got {type(decoded).__name__}")
        self.set_string(decoded)

    # --- Storage ---

    def to_bytes(self) -> bytes:
        """Minimal big-endian bytes; zero encodes to ``b""``."""
        return self._magnitude.to_bytes((self._magnitude.bit_length() + 7) // 8, "big")

    def value(self) -> bytes:
        """Storage value for a database driver. Counterpart of :meth:`scan`."""
        return self.to_bytes()

    def scan(self, src: Any, *, policy: ScanPolicy = ScanPolicy.PERMISSIVE) -> None:
        """Load the value from storage bytes under *policy*.

        On success the preferred base resets to hexadecimal. Under the
        permissive policy a ``None`` source leaves the receiver untouched.
        """
        if src is None:
            if policy == ScanPolicy.STRICT:
                raise NilSourceError()
            return
        if not isinstance(src, _BYTES_TYPES):
            raise NonBytesSourceError(f"converting {type(src).__name__} to BoundedInt is unsupported")
        raw = bytes(src)
        if policy == ScanPolicy.STRICT:
            if not raw:
                raise EmptyInputError()
            if len(raw) > MAX_BYTE_LENGTH:
                raise OverlengthInputError()
        self._magnitude = check_magnitude(int.from_bytes(raw, "big"))
        self._base = DEFAULT_BASE

    # --- Python protocols ---

    def __int__(self) -> int:
        return self._magnitude

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedInt):
            return NotImplemented
        return self._magnitude == other._magnitude

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundedInt({str(self)!r})"

    # --- pydantic ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from BoundedInt, text, or int; serialize as text."""
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _pydantic_validate(cls, value: Any) -> BoundedInt:
        if isinstance(value, BoundedInt):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_int(value)
        msg = f"cannot build BoundedInt from {type(value).__name__}"
        raise ValueError(msg)
