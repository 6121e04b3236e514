"""Rendering bases and storage decode policies.

``Base`` is presentation-only: it selects how a magnitude is written as
text and never changes the stored value.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Base(IntEnum):
    """Textual base used when rendering a magnitude."""

    DECIMAL = 10
    HEXADECIMAL = 16


DEFAULT_BASE = Base.HEXADECIMAL


class ScanPolicy(StrEnum):
    """How storage bytes are validated on decode.

    STRICT rejects NULL, empty, and over-long byte strings outright.
    PERMISSIVE treats NULL as a no-op, empty bytes as zero, and only
    enforces the bound on the decoded value.
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"
