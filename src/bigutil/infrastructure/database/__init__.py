"""SQLAlchemy integration for BoundedInt columns."""

from bigutil.infrastructure.database.types import BoundedIntType

__all__ = ["BoundedIntType"]
