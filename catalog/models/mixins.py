"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, String, func, false


def generate_id() -> str:
    """Generate an opaque record identifier (32 lowercase hex chars)."""
    return uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


class IdentifierMixin:
    """Mixin to add a store-assigned string primary key."""

    id = Column(String(32), primary_key=True, default=generate_id)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    # Python-side defaults keep microsecond precision on SQLite, so newest-first
    # ordering stays stable for rows created within the same second.
    created_at = Column(
        DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
        nullable=False,
    )


class SoftDeleteMixin:
    """Mixin to add soft delete functionality."""

    is_deleted = Column(Boolean, default=False, server_default=false(), nullable=False, index=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    def soft_delete(self) -> None:
        """Soft delete the record."""
        self.is_deleted = True
        self.deleted_at = utc_now()
