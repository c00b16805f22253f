"""
CollectionArtwork Entity Model

Junction table linking Artworks to Collections at a position.

This is the membership ledger's table. For every collection the positions of
its rows are exactly 0..n-1 (dense, zero-based); the composite primary key
keeps an artwork from appearing twice in one collection.

SAMPLE COLLECTION_ARTWORK RECORDS (one collection):
┌──────────────────────────────────────────────────────────────────────────────┐
│ collection_id    │ artwork_id       │ position │ added_at                    │
├──────────────────┼──────────────────┼──────────┼─────────────────────────────┤
│ 880e8400-...     │ a1...            │ 0        │ 2026-10-01T09:00:00Z        │
│ 880e8400-...     │ a3...            │ 1        │ 2026-10-01T09:05:00Z        │
│ 880e8400-...     │ a2...            │ 2        │ 2026-10-02T14:30:00Z        │
└──────────────────────────────────────────────────────────────────────────────┘

There is deliberately no unique constraint on (collection_id, position):
reorder and compaction rewrite every position in a single UPDATE, and a
per-row uniqueness check would reject intermediate states of a permutation.
"""

from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vfa_gallery.shared.models.base import Base


if TYPE_CHECKING:
    from vfa_gallery.shared.models.collection import Collection
    from vfa_gallery.shared.models.artwork import Artwork


class CollectionArtwork(Base):
    """
    CollectionArtwork model - one artwork's place in one collection.

    Attributes:
        collection_id: The collection (part of composite PK)
        artwork_id: The artwork (part of composite PK)
        position: Zero-based rank within the collection
        added_at: When the artwork was added

    Relationships:
        collection: The parent collection
        artwork: The referenced artwork
    """

    __tablename__ = "collection_artworks"
    __table_args__ = (
        Index("ix_collection_artworks_collection_position", "collection_id", "position"),
        Index("ix_collection_artworks_artwork", "artwork_id"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # COMPOSITE PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    collection_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("collections.id", ondelete="CASCADE"),
        primary_key=True,
    )

    artwork_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("artworks.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # ORDERING
    # ═══════════════════════════════════════════════════════════════════════════

    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    collection: Mapped["Collection"] = relationship(
        "Collection",
        back_populates="memberships",
    )

    artwork: Mapped["Artwork"] = relationship(
        "Artwork",
        back_populates="memberships",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<CollectionArtwork(collection_id={self.collection_id}, "
            f"artwork_id={self.artwork_id}, position={self.position})>"
        )
