"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bigutil.toml only contains overrides.
Enum fields accept member names as well as values, so ``level = "debug"``
and ``default_base = "decimal"`` both work.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator

from bigutil.domain.types import DEFAULT_BASE, Base, ScanPolicy
from bigutil.infrastructure.logger import DEFAULT_HEADER, HeaderTemplate, LogLevel


def _enum_by_name(enum_cls: type[Enum], value: Any) -> Any:
    if isinstance(value, str) and value.upper() in enum_cls.__members__:
        return enum_cls[value.upper()]
    return value


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    default_base: Base = DEFAULT_BASE
    scan_policy: ScanPolicy = ScanPolicy.PERMISSIVE

    @field_validator("default_base", mode="before")
    @classmethod
    def _base_by_name(cls, value: Any) -> Any:
        return _enum_by_name(Base, value)


class LogConfig(BaseModel):
    """[log] section."""

    model_config = {"frozen": True}

    prefix: str = "bigutil"
    level: LogLevel = LogLevel.WARN
    header: str = DEFAULT_HEADER

    @field_validator("level", mode="before")
    @classmethod
    def _level_by_name(cls, value: Any) -> Any:
        return _enum_by_name(LogLevel, value)

    @field_validator("header")
    @classmethod
    def _header_compiles(cls, value: str) -> str:
        HeaderTemplate(value)
        return value

