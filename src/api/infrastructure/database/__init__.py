"""Database infrastructure - shared engine and session primitives."""

from infrastructure.database.models import Base, CreatedAtMixin, TimestampMixin

__all__ = [
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
]
