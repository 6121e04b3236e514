"""SQLAlchemy column type storing BoundedInt as minimal big-endian bytes.

Works with SQLAlchemy Core tables and ORM mappings alike::

    amounts = Table(
        "amounts",
        metadata,
        Column("id", Text, primary_key=True),
        Column("value", BoundedIntType(), nullable=False),
    )

Zero is stored as an empty BLOB, so decoding under ``ScanPolicy.STRICT``
rejects stored zeros. The default permissive policy round-trips every value.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import LargeBinary
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from bigutil.domain.bounded_int import BoundedInt
from bigutil.domain.types import ScanPolicy


class BoundedIntType(TypeDecorator[BoundedInt]):
    """BLOB column holding a :class:`BoundedInt`."""

    impl = LargeBinary
    cache_ok = True

    def __init__(self, policy: ScanPolicy = ScanPolicy.PERMISSIVE, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.policy = ScanPolicy(policy)

    def process_bind_param(self, value: Any, dialect: Dialect) -> bytes | None:
        if value is None:
            return None
        if isinstance(value, BoundedInt):
            return value.value()
        if isinstance(value, int) and not isinstance(value, bool):
            return BoundedInt.from_int(value).value()
        msg = f"BoundedIntType expects BoundedInt or int, got {type(value).__name__}"
        raise TypeError(msg)

    def process_result_value(self, value: Any, dialect: Dialect) -> BoundedInt | None:
        if value is None:
            return None
        return BoundedInt.from_bytes(value, policy=self.policy)
