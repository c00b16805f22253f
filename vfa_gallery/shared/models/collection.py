"""
Collection Entity Model

An ordered set of artworks inside a gallery. The collection itself only
carries metadata; its ordered contents live in CollectionArtwork rows owned
by the membership ledger, which also bumps `updated_at` on every structural
change.

SAMPLE COLLECTION RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 880e8400-e29b-41d4-a716-446655440000                      │
│ gallery_id       │ 770e8400-e29b-41d4-a716-446655440000                      │
│ slug             │ "spring-2026"                                             │
│ name             │ "Spring 2026"                                             │
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
    from vfa_gallery.shared.models.gallery import Gallery
    from vfa_gallery.shared.models.collection_artwork import CollectionArtwork


class Collection(Base, TimestampMixin):
    """
    Collection model - a named, ordered grouping of artworks in a gallery.

    Attributes:
        id: Unique identifier (UUID v4)
        gallery_id: Parent gallery
        slug: URL slug, unique within the gallery
        name: Display name
        description: Optional description
        is_default: Whether this is the gallery's default collection
        status: Visibility state

    Relationships:
        gallery: The parent gallery
        memberships: Ordered artwork memberships (CollectionArtwork)
    """

    __tablename__ = "collections"
    __table_args__ = (UniqueConstraint("gallery_id", "slug", name="uq_collections_gallery_slug"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    gallery_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("galleries.id", ondelete="CASCADE"),
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

    gallery: Mapped["Gallery"] = relationship(
        "Gallery",
        back_populates="collections",
    )

    memberships: Mapped[list["CollectionArtwork"]] = relationship(
        "CollectionArtwork",
        back_populates="collection",
        cascade="all, delete-orphan",
        order_by="CollectionArtwork.position",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Collection(id={self.id}, slug={self.slug})>"
