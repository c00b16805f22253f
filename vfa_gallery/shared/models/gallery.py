"""
Gallery Entity Model

Primary container a user organises collections in. The gallery is the link
in the ownership chain: collection → gallery → user.

SAMPLE GALLERY RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ slug             │ "paintings"                                               │
│ name             │ "Paintings"                                               │
│ status           │ active                                                    │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, Enum as SQLEnum, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vfa_gallery.shared.models.base import Base, TimestampMixin
from vfa_gallery.shared.models.enums import PublicationStatus, enum_values


if TYPE_CHECKING:
    from vfa_gallery.shared.models.user import User
    from vfa_gallery.shared.models.collection import Collection


class Gallery(Base, TimestampMixin):
    """
    Gallery model - a user's top-level container of collections.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Owner user ID
        slug: URL slug, unique per user
        name: Display name
        description: Optional description
        is_default: Whether this is the user's default gallery
        status: Visibility state
    """

    __tablename__ = "galleries"
    __table_args__ = (UniqueConstraint("user_id", "slug", name="uq_galleries_user_slug"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    slug: Mapped[str] = mapped_column(String(100), nullable=False)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    status: Mapped[PublicationStatus] = mapped_column(
        SQLEnum(
            PublicationStatus,
            name="publicationstatus",
            native_enum=False,
            values_callable=enum_values,
        ),
        nullable=False,
        default=PublicationStatus.ACTIVE,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship(
        "User",
        back_populates="galleries",
    )

    collections: Mapped[list["Collection"]] = relationship(
        "Collection",
        back_populates="gallery",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Gallery(id={self.id}, slug={self.slug})>"
