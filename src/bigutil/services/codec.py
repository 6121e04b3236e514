"""CodecService: convert, encode, and decode bounded integers.

Thin orchestration over :class:`BoundedInt`: parse the input, render the
requested form, and translate codec errors into ServiceResult failures.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from bigutil.domain.bounded_int import BoundedInt
from bigutil.domain.errors import BoundedIntError
from bigutil.domain.text import HEX_PREFIX
from bigutil.domain.types import Base
from bigutil.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from bigutil.config.settings import BigutilSettings
    from bigutil.infrastructure.logger import Logger

# Whole bytes only; bytes.fromhex alone would also accept whitespace.
_HEX_BYTES_PATTERN = re.compile(r"(?:[0-9a-fA-F]{2})*")


def _base_name(base: Base) -> str:
    return base.name.lower()


def _describe(value: BoundedInt) -> dict[str, Any]:
    return {
        "output": str(value),
        "base": _base_name(value.base),
        "bit_length": value.magnitude.bit_length(),
    }


class CodecService:
    """Codec operations for the CLI and other front ends."""

    def __init__(self, settings: BigutilSettings, logger: Logger) -> None:
        self._settings = settings
        self._log = logger

    def _fail(self, op: str, exc: BoundedIntError, **detail: Any) -> ServiceResult:
        self._log.debug("codec operation failed", op=op, kind=str(exc.kind), error=str(exc))
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=str(exc.kind), message=str(exc), detail=detail),
        )

    def convert(self, text: str, *, to: Base | None = None) -> ServiceResult:
        """Re-render *text* in base *to* (default: the base it was not written in)."""
        op = "convert"
        try:
            value = BoundedInt.from_text(text)
        except BoundedIntError as exc:
            return self._fail(op, exc, input=text)

        if to is None:
            to = Base.DECIMAL if value.base == Base.HEXADECIMAL else Base.HEXADECIMAL
        if to == Base.DECIMAL:
            value.set_base_to_decimal()
        else:
            value.set_base_to_hexadecimal()

        self._log.debug("converted", input=text, output=str(value))
        return ServiceResult(ok=True, op=op, data={"input": text, **_describe(value)})

    def encode(self, text: str) -> ServiceResult:
        """Return the storage bytes for *text*."""
        op = "encode"
        try:
            value = BoundedInt.from_text(text)
        except BoundedIntError as exc:
            return self._fail(op, exc, input=text)

        raw = value.value()
        return ServiceResult(
            ok=True,
            op=op,
            data={"input": text, "hex": raw.hex(), "bytes": list(raw), "length": len(raw)},
        )

    def decode(self, data: str, *, base: Base | None = None) -> ServiceResult:
        """Decode hex-encoded storage bytes (``0x`` optional) and render as text."""
        op = "decode"
        digits = data[len(HEX_PREFIX) :] if data.startswith(HEX_PREFIX) else data
        if _HEX_BYTES_PATTERN.fullmatch(digits) is None:
            self._log.debug("invalid byte string", op=op, input=data)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="invalid_bytes",
                    message="byte string must be pairs of hex digits",
                    detail={"input": data},
                ),
            )
        raw = bytes.fromhex(digits)

        policy = self._settings.codec.scan_policy
        try:
            value = BoundedInt.from_bytes(raw, policy=policy)
        except BoundedIntError as exc:
            return self._fail(op, exc, input=data, policy=str(policy))

        if (base or self._settings.codec.default_base) == Base.DECIMAL:
            value.set_base_to_decimal()
        return ServiceResult(
            ok=True,
            op=op,
            data={"input": data, "length": len(raw), **_describe(value)},
        )
