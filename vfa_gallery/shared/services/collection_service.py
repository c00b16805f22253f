"""
Collection Service

User-facing collection operations: create, read, update and delete
collections, manage their ordered artworks, and copy them between
galleries. Every call checks ownership or visibility through OwnershipGuard
first; membership changes are then handed to MembershipLedger.

Usage:
======
    from vfa_gallery.shared.services.collection_service import CollectionService

    service = CollectionService(db)
    membership = await service.add_artwork(user_id, collection_id, artwork_id)
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from vfa_gallery.config.settings import settings
from vfa_gallery.shared.core.exceptions import (
    CollectionLimitError,
    CollectionNotFoundError,
    DefaultCollectionError,
    GalleryNotFoundError,
    ValidationError,
)
from vfa_gallery.shared.core.logging import get_logger
from vfa_gallery.shared.models.collection import Collection
from vfa_gallery.shared.models.collection_artwork import CollectionArtwork
from vfa_gallery.shared.models.enums import PublicationStatus
from vfa_gallery.shared.repositories.artwork_repository import ArtworkRepository
from vfa_gallery.shared.repositories.collection_artwork_repository import (
    CollectionArtworkRepository,
)
from vfa_gallery.shared.repositories.collection_repository import CollectionRepository
from vfa_gallery.shared.repositories.gallery_repository import GalleryRepository
from vfa_gallery.shared.repositories.user_repository import UserRepository
from vfa_gallery.shared.services.membership_ledger import MembershipLedger
from vfa_gallery.shared.services.ownership_guard import OwnershipGuard
from vfa_gallery.shared.utils.slugs import unique_slug


logger = get_logger(__name__)

UPDATABLE_FIELDS = ("name", "description", "status")


@dataclass
class CollectionDetail:
    """A collection and its memberships in position order."""

    collection: Collection
    memberships: list[CollectionArtwork]


@dataclass
class CollectionSummary:
    """A collection and how many artworks it holds."""

    collection: Collection
    artwork_count: int


class CollectionService:
    """
    Service for collections, their ordered membership and collection copy.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize CollectionService.

        Args:
            session: Async database session
        """
        self.session = session
        self.guard = OwnershipGuard(session)
        self.ledger = MembershipLedger(session)
        self.collection_repo = CollectionRepository(session)
        self.gallery_repo = GalleryRepository(session)
        self.artwork_repo = ArtworkRepository(session)
        self.membership_repo = CollectionArtworkRepository(session)
        self.user_repo = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # MEMBERSHIP
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_artworks(
        self,
        user_id: Optional[UUID],
        collection_id: UUID,
    ) -> list[CollectionArtwork]:
        """
        List a collection's artworks in order.

        Collections the caller may not see are reported as missing rather
        than forbidden, so their existence is not revealed.

        Raises:
            CollectionNotFoundError: Collection does not exist or is hidden
        """
        collection = await self.collection_repo.get_with_gallery(collection_id)
        if not collection or not self.guard.can_view(user_id, collection):
            raise CollectionNotFoundError(collection_id)

        return await self.ledger.list_ordered(collection_id)

    async def add_artwork(
        self,
        user_id: UUID,
        collection_id: UUID,
        artwork_id: UUID,
    ) -> CollectionArtwork:
        """
        Append one of the user's artworks to one of their collections.

        Raises:
            CollectionNotFoundError, NotOwnerError, ArtworkNotFoundError,
            AlreadyMemberError, StorageError
        """
        await self.guard.require_collection_owner(user_id, collection_id)
        await self.guard.require_usable_artwork(user_id, artwork_id)
        return await self.ledger.add(collection_id, artwork_id)

    async def remove_artwork(
        self,
        user_id: UUID,
        collection_id: UUID,
        artwork_id: UUID,
    ) -> None:
        """
        Remove an artwork from a collection.

        Raises:
            CollectionNotFoundError, NotOwnerError, NotMemberError, StorageError
        """
        await self.guard.require_collection_owner(user_id, collection_id)
        await self.ledger.remove(collection_id, artwork_id)

    async def reorder_artworks(
        self,
        user_id: UUID,
        collection_id: UUID,
        artwork_ids: Sequence[UUID],
    ) -> list[CollectionArtwork]:
        """
        Replace the order of a collection.

        Raises:
            CollectionNotFoundError, NotOwnerError, ReorderValidationError,
            StorageError
        """
        await self.guard.require_collection_owner(user_id, collection_id)
        return await self.ledger.reorder(collection_id, artwork_ids)

    # ═══════════════════════════════════════════════════════════════════════════
    # COLLECTIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_collection(
        self,
        user_id: UUID,
        gallery_id: UUID,
        name: str,
        description: Optional[str] = None,
    ) -> Collection:
        """
        Create an empty, active collection in one of the user's galleries.

        Raises:
            GalleryNotFoundError, NotOwnerError, CollectionLimitError
        """
        await self.guard.require_gallery_owner(user_id, gallery_id)
        await self._check_collection_limit(user_id)

        slug = await self._unique_slug(gallery_id, name)
        collection = await self.collection_repo.create(
            gallery_id=gallery_id,
            slug=slug,
            name=name,
            description=description,
            is_default=False,
            status=PublicationStatus.ACTIVE,
        )

        logger.info(
            "collection.created",
            collection_id=str(collection.id),
            gallery_id=str(gallery_id),
            slug=slug,
        )
        return collection

    async def list_gallery_collections(
        self,
        user_id: Optional[UUID],
        gallery_id: UUID,
        status: Optional[PublicationStatus] = None,
    ) -> list[tuple[Collection, int]]:
        """
        A gallery's collections with their artwork counts.

        Non-owners only get active collections and `status` is ignored for
        them; owners see everything, or only `status` when given.

        Raises:
            GalleryNotFoundError: Gallery does not exist
        """
        gallery = await self.gallery_repo.get(gallery_id)
        if not gallery:
            raise GalleryNotFoundError(gallery_id)

        if user_id is not None and gallery.user_id == user_id:
            statuses = [status] if status else None
        else:
            statuses = [PublicationStatus.ACTIVE]

        return await self.collection_repo.list_for_gallery(gallery_id, statuses)

    async def get_collection(
        self,
        user_id: Optional[UUID],
        collection_id: UUID,
    ) -> CollectionDetail:
        """
        Load a collection with its artworks in order.

        Raises:
            CollectionNotFoundError: Collection does not exist or is hidden
        """
        collection = await self.collection_repo.get_with_gallery(collection_id)
        if not collection or not self.guard.can_view(user_id, collection):
            raise CollectionNotFoundError(collection_id)

        memberships = await self.ledger.list_ordered(collection_id)
        return CollectionDetail(collection=collection, memberships=memberships)

    async def update_collection(
        self,
        user_id: UUID,
        collection_id: UUID,
        changes: dict[str, Any],
    ) -> CollectionSummary:
        """
        Change a collection's name, description or status.

        A new name also gets a new slug, unique within the gallery; the
        collection's own current slug does not count as taken.

        Args:
            changes: Subset of name / description / status to apply

        Raises:
            CollectionNotFoundError, NotOwnerError,
            ValidationError: No updatable field was given
        """
        collection = await self.guard.require_collection_owner(user_id, collection_id)

        values = {field: value for field, value in changes.items() if field in UPDATABLE_FIELDS}
        if not values:
            raise ValidationError("No valid fields to update", error_code="NO_FIELDS_TO_UPDATE")

        if "name" in values and values["name"] != collection.name:
            values["slug"] = await self._unique_slug(
                collection.gallery_id, values["name"], exclude_id=collection_id
            )

        updated = await self.collection_repo.update(collection_id, **values)

        logger.info(
            "collection.updated",
            collection_id=str(collection_id),
            fields=sorted(values),
        )
        artwork_count = await self.membership_repo.count_for_collection(collection_id)
        return CollectionSummary(collection=updated, artwork_count=artwork_count)

    async def delete_collection(self, user_id: UUID, collection_id: UUID) -> None:
        """
        Delete a collection together with its memberships.

        The artworks themselves are untouched.

        Raises:
            CollectionNotFoundError, NotOwnerError,
            DefaultCollectionError: The gallery's default collection
        """
        collection = await self.guard.require_collection_owner(user_id, collection_id)
        if collection.is_default:
            raise DefaultCollectionError(collection_id)
        gallery_id = collection.gallery_id

        # Wait for in-flight membership changes of this collection
        await self.collection_repo.get_for_update(collection_id)
        await self.collection_repo.delete(collection_id)

        logger.info(
            "collection.deleted",
            collection_id=str(collection_id),
            gallery_id=str(gallery_id),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # COPY
    # ═══════════════════════════════════════════════════════════════════════════

    async def copy_collection(
        self,
        user_id: UUID,
        collection_id: UUID,
        target_gallery_id: UUID,
    ) -> CollectionSummary:
        """
        Copy a collection into one of the user's galleries.

        Flow:
        1. Verify ownership of the source collection and the target gallery
        2. Enforce the user's collection limit
        3. Create "<name> (Copy)" with a slug unique in the target gallery
        4. Copy memberships for artworks the user owns, in source order,
           at positions 0..k-1

        Raises:
            CollectionNotFoundError, GalleryNotFoundError, NotOwnerError,
            CollectionLimitError
        """
        source = await self.guard.require_collection_owner(user_id, collection_id)
        await self.guard.require_gallery_owner(user_id, target_gallery_id)

        await self._check_collection_limit(user_id)

        name = f"{source.name} (Copy)"
        slug = await self._unique_slug(target_gallery_id, name)

        copy = await self.collection_repo.create(
            gallery_id=target_gallery_id,
            slug=slug,
            name=name,
            description=source.description,
            is_default=False,
            status=PublicationStatus.ACTIVE,
        )

        source_rows = await self.ledger.list_ordered(source.id)
        owned = await self.artwork_repo.filter_owned_ids(
            [row.artwork_id for row in source_rows], user_id
        )
        copied = await self.membership_repo.bulk_insert(
            copy.id,
            [row.artwork_id for row in source_rows if row.artwork_id in owned],
        )

        logger.info(
            "collection.copied",
            source_collection_id=str(source.id),
            collection_id=str(copy.id),
            gallery_id=str(target_gallery_id),
            artwork_count=len(copied),
        )
        return CollectionSummary(collection=copy, artwork_count=len(copied))

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _check_collection_limit(self, user_id: UUID) -> None:
        limit = await self.user_repo.get_collection_limit(user_id)
        if limit is None:
            limit = settings.DEFAULT_COLLECTION_LIMIT
        if await self.collection_repo.count_for_user(user_id) >= limit:
            raise CollectionLimitError(limit)

    async def _unique_slug(
        self,
        gallery_id: UUID,
        name: str,
        exclude_id: Optional[UUID] = None,
    ) -> str:
        async def slug_taken(candidate: str) -> bool:
            return await self.collection_repo.slug_exists(gallery_id, candidate, exclude_id)

        return await unique_slug(name, slug_taken)
