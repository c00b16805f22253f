"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in
VFA.gallery: the declarative base and the timestamp mixin.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from vfa_gallery.shared.models.base import Base, TimestampMixin

    class Gallery(Base, TimestampMixin):
        __tablename__ = "galleries"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

Identifiers use the portable `Uuid` type: native UUID on PostgreSQL,
CHAR(32) on SQLite (tests).
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time used for application-side timestamps."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either
    directly or together with TimestampMixin.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    Provides two timestamp columns that are automatically managed:
    - created_at: Set when the record is first inserted
    - updated_at: Updated whenever the record is modified through the ORM,
      or explicitly "touched" (see CollectionRepository.touch)

    Database Behavior:
    ==================
    - created_at: Set by the database on INSERT via server_default
    - updated_at: Set on INSERT, updated by SQLAlchemy on UPDATE via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
        nullable=False,
    )
