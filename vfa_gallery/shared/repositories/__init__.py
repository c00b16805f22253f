"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data
access. They only flush; the request session decides commit or rollback.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]             ← Generic CRUD operations
         │
         ├── UserRepository               ← Collection quota lookup
         ├── GalleryRepository            ← Gallery lookups
         ├── CollectionRepository         ← Row lock, touch, slug and quota checks
         ├── ArtworkRepository            ← Ownership-scoped artwork lookups
         └── CollectionArtworkRepository  ← Ordered membership rows

Usage Example:
==============
    from vfa_gallery.shared.repositories import CollectionArtworkRepository

    async def first_artwork(db: AsyncSession, collection_id: UUID):
        rows = await CollectionArtworkRepository(db).list_ordered(collection_id)
        return rows[0] if rows else None
"""

from vfa_gallery.shared.repositories.base import BaseRepository
from vfa_gallery.shared.repositories.user_repository import UserRepository
from vfa_gallery.shared.repositories.gallery_repository import GalleryRepository
from vfa_gallery.shared.repositories.collection_repository import CollectionRepository
from vfa_gallery.shared.repositories.artwork_repository import ArtworkRepository
from vfa_gallery.shared.repositories.collection_artwork_repository import (
    CollectionArtworkRepository,
)

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "GalleryRepository",
    "CollectionRepository",
    "ArtworkRepository",
    "CollectionArtworkRepository",
]
