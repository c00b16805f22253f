"""
Artwork Entity Model

A single piece uploaded by a user. Artworks are referenced by collections
through CollectionArtwork rows and can belong to many collections at once;
the membership ledger never writes to the artwork itself.

Image URLs and processing metadata live outside this service.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Enum as SQLEnum, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vfa_gallery.shared.models.base import Base, TimestampMixin
from vfa_gallery.shared.models.enums import ArtworkStatus, enum_values


if TYPE_CHECKING:
    from vfa_gallery.shared.models.user import User
    from vfa_gallery.shared.models.collection_artwork import CollectionArtwork


class Artwork(Base, TimestampMixin):
    """
    Artwork model.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Owner user ID
        slug: URL slug, unique per user
        title: Title
        description: Optional description
        status: Lifecycle state
    """

    __tablename__ = "artworks"
    __table_args__ = (UniqueConstraint("user_id", "slug", name="uq_artworks_user_slug"),)

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

    title: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    status: Mapped[ArtworkStatus] = mapped_column(
        SQLEnum(
            ArtworkStatus,
            name="artworkstatus",
            native_enum=False,
            values_callable=enum_values,
        ),
        nullable=False,
        default=ArtworkStatus.ACTIVE,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship(
        "User",
        back_populates="artworks",
    )

    memberships: Mapped[list["CollectionArtwork"]] = relationship(
        "CollectionArtwork",
        back_populates="artwork",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Artwork(id={self.id}, slug={self.slug})>"
