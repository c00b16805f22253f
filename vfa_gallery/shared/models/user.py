"""
User Entity Model

Represents a registered artist account. Users own galleries and artworks;
ownership of a collection is always resolved through its gallery.

Model Hierarchy:
================
    User
       ├── galleries (Gallery[])
       │      └── collections (Collection[])
       └── artworks (Artwork[])

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ email            │ "artist@example.com"                                      │
│ username         │ "artist"                                                  │
│ role             │ user                                                      │
│ collection_limit │ 1000                                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Enum as SQLEnum, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vfa_gallery.shared.models.base import Base, TimestampMixin
from vfa_gallery.shared.models.enums import UserRole, enum_values


if TYPE_CHECKING:
    from vfa_gallery.shared.models.gallery import Gallery
    from vfa_gallery.shared.models.artwork import Artwork


class User(Base, TimestampMixin):
    """
    User model representing an artist account.

    Attributes:
        id: Unique identifier (UUID v4)
        email: Email address (unique, indexed)
        username: Public handle (unique)
        display_name: Optional display name
        role: Account role
        collection_limit: Maximum collections across all galleries

    Relationships:
        galleries: Galleries owned by this user
        artworks: Artworks uploaded by this user
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
    )

    display_name: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    role: Mapped[UserRole] = mapped_column(
        SQLEnum(UserRole, name="userrole", native_enum=False, values_callable=enum_values),
        nullable=False,
        default=UserRole.USER,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # QUOTAS
    # ═══════════════════════════════════════════════════════════════════════════

    collection_limit: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1000,
        server_default="1000",
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    galleries: Mapped[list["Gallery"]] = relationship(
        "Gallery",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    artworks: Mapped[list["Artwork"]] = relationship(
        "Artwork",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
