"""
Ownership Guard

Decides whether a user may mutate or view a collection by following the
ownership chain collection → gallery → user. Artworks are owned directly.

The membership ledger never calls this itself; CollectionService asks the
guard first and only then invokes the ledger.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from vfa_gallery.shared.core.exceptions import (
    ArtworkNotFoundError,
    CollectionNotFoundError,
    GalleryNotFoundError,
    NotOwnerError,
)
from vfa_gallery.shared.models.artwork import Artwork
from vfa_gallery.shared.models.collection import Collection
from vfa_gallery.shared.models.enums import ArtworkStatus, PublicationStatus
from vfa_gallery.shared.models.gallery import Gallery
from vfa_gallery.shared.repositories.artwork_repository import ArtworkRepository
from vfa_gallery.shared.repositories.collection_repository import CollectionRepository
from vfa_gallery.shared.repositories.gallery_repository import GalleryRepository


class OwnershipGuard:
    """Ownership and visibility checks."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.collection_repo = CollectionRepository(session)
        self.gallery_repo = GalleryRepository(session)
        self.artwork_repo = ArtworkRepository(session)

    async def can_mutate(self, user_id: UUID, collection_id: UUID) -> bool:
        """True if the collection exists and its gallery belongs to the user."""
        collection = await self.collection_repo.get_with_gallery(collection_id)
        return collection is not None and collection.gallery.user_id == user_id

    async def require_collection_owner(self, user_id: UUID, collection_id: UUID) -> Collection:
        """
        Load a collection the user owns.

        Raises:
            CollectionNotFoundError: Collection does not exist
            NotOwnerError: Collection belongs to another user's gallery
        """
        collection = await self.collection_repo.get_with_gallery(collection_id)
        if not collection:
            raise CollectionNotFoundError(collection_id)
        if collection.gallery.user_id != user_id:
            raise NotOwnerError("Collection", collection_id)
        return collection

    async def require_gallery_owner(self, user_id: UUID, gallery_id: UUID) -> Gallery:
        """
        Load a gallery the user owns.

        Raises:
            GalleryNotFoundError: Gallery does not exist
            NotOwnerError: Gallery belongs to another user
        """
        gallery = await self.gallery_repo.get(gallery_id)
        if not gallery:
            raise GalleryNotFoundError(gallery_id)
        if gallery.user_id != user_id:
            raise NotOwnerError("Gallery", gallery_id)
        return gallery

    async def require_usable_artwork(self, user_id: UUID, artwork_id: UUID) -> Artwork:
        """
        Load an artwork the user may place in a collection.

        Other users' artworks and deleted artworks are reported as not found.
        """
        artwork = await self.artwork_repo.get_owned(artwork_id, user_id)
        if not artwork or artwork.status == ArtworkStatus.DELETED:
            raise ArtworkNotFoundError(artwork_id)
        return artwork

    @staticmethod
    def can_view(user_id: Optional[UUID], collection: Collection) -> bool:
        """
        Owners see every collection; everyone else only active ones.

        `collection` must have its gallery loaded (see get_with_gallery).
        """
        if user_id is not None and collection.gallery.user_id == user_id:
            return True
        return collection.status == PublicationStatus.ACTIVE
