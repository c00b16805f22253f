"""
Membership Ledger

Maintains the ordered set of artworks in each collection.

For every collection the member positions are exactly 0..n-1, an artwork
appears at most once per collection, and changes in one collection never
touch another. Every operation below leaves those properties intact, even
when it fails part way.

OPERATIONS:
===========
    add(c, a)          → append at position n (current count)
    remove(c, a)       → delete, then compact survivors to 0..n-2 in their old order
    reorder(c, ids)    → validate the full new order, then rewrite every position at once
    list_ordered(c)    → memberships by ascending position

CONCURRENCY:
============
Each mutation first locks the collection row (SELECT ... FOR UPDATE). The
lock is held until the request transaction ends, so mutations of the same
collection run one after another and never interleave.

ATOMICITY:
==========
The ledger only flushes. Remove's delete + compaction and Reorder's rewrite
run inside the request transaction, and both rewrites are a single UPDATE
statement. A database error while writing surfaces as StorageError and the
request session rolls everything back, leaving the previous order intact.

Callers are expected to have checked ownership (see OwnershipGuard) before
calling any mutation.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vfa_gallery.shared.core.exceptions import (
    AlreadyMemberError,
    CollectionNotFoundError,
    CountMismatchError,
    DuplicateInRequestError,
    EmptyCollectionError,
    MissingMemberError,
    NotMemberError,
    StorageError,
    UnknownMemberError,
)
from vfa_gallery.shared.core.logging import get_logger
from vfa_gallery.shared.models.collection import Collection
from vfa_gallery.shared.models.collection_artwork import CollectionArtwork
from vfa_gallery.shared.repositories.collection_artwork_repository import (
    CollectionArtworkRepository,
)
from vfa_gallery.shared.repositories.collection_repository import CollectionRepository


logger = get_logger(__name__)


def validate_reorder(
    current_ids: Sequence[UUID],
    requested_ids: Sequence[UUID],
    collection_id: Optional[UUID] = None,
) -> None:
    """
    Check that `requested_ids` is a complete new order of `current_ids`.

    Checks run in this order and the first failure is raised:

    1. both lists empty           → EmptyCollectionError
    2. an id repeated             → DuplicateInRequestError (first repeat)
    3. more ids than members      → CountMismatchError, naming the first
                                    requested id that is not a member
    4. fewer ids than members     → MissingMemberError (a CountMismatchError),
                                    naming the first member left out
    5. an id that is not a member → UnknownMemberError (first such id)

    Once 2 to 4 pass, requested_ids has no repeats and the right length, so
    it is the member set unless it names an unknown id.

    Args:
        current_ids: Member artwork ids in current position order
        requested_ids: Proposed complete order
        collection_id: Only used to enrich EmptyCollectionError

    Raises:
        ReorderValidationError subclass describing the first mismatch
    """
    if not current_ids and not requested_ids:
        raise EmptyCollectionError(collection_id)

    seen: set[UUID] = set()
    for artwork_id in requested_ids:
        if artwork_id in seen:
            raise DuplicateInRequestError(artwork_id)
        seen.add(artwork_id)

    members = set(current_ids)
    expected, provided = len(current_ids), len(requested_ids)

    if provided > expected:
        # Without repeats, a longer list must name at least one outsider
        unknown = next(artwork_id for artwork_id in requested_ids if artwork_id not in members)
        raise CountMismatchError(expected=expected, provided=provided, artwork_id=unknown)

    if provided < expected:
        omitted = next(artwork_id for artwork_id in current_ids if artwork_id not in seen)
        raise MissingMemberError(expected=expected, provided=provided, artwork_id=omitted)

    for artwork_id in requested_ids:
        if artwork_id not in members:
            raise UnknownMemberError(artwork_id)


class MembershipLedger:
    """
    Ordered collection ↔ artwork membership.

    Holds no state beyond its session; every call reads current rows fresh.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize MembershipLedger.

        Args:
            session: Async database session (request-scoped)
        """
        self.session = session
        self.collection_repo = CollectionRepository(session)
        self.membership_repo = CollectionArtworkRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_ordered(self, collection_id: UUID) -> list[CollectionArtwork]:
        """Memberships of a collection sorted by ascending position."""
        return await self.membership_repo.list_ordered(collection_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # MUTATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def add(self, collection_id: UUID, artwork_id: UUID) -> CollectionArtwork:
        """
        Append an artwork to the end of a collection.

        Flow:
        1. Lock the collection row
        2. Reject if the pair already exists
        3. n = current count, insert at position n
        4. Touch the collection

        Returns:
            The new membership with its assigned position

        Raises:
            CollectionNotFoundError: Collection does not exist
            AlreadyMemberError: Artwork is already in the collection
            StorageError: The write failed
        """
        await self._lock(collection_id)

        if await self.membership_repo.get_membership(collection_id, artwork_id):
            raise AlreadyMemberError(collection_id, artwork_id)

        position = await self.membership_repo.count_for_collection(collection_id)

        async with self._storage("add"):
            try:
                membership = await self.membership_repo.insert(collection_id, artwork_id, position)
            except IntegrityError as exc:
                raise AlreadyMemberError(collection_id, artwork_id) from exc
            await self.collection_repo.touch(collection_id)

        logger.info(
            "membership.added",
            collection_id=str(collection_id),
            artwork_id=str(artwork_id),
            position=position,
        )
        return membership

    async def remove(self, collection_id: UUID, artwork_id: UUID) -> None:
        """
        Remove an artwork and compact the remaining positions.

        Survivors keep their relative order and shift down to fill the gap.
        The delete and the compaction share one transaction; if compaction
        fails the delete is rolled back with it.

        Raises:
            CollectionNotFoundError: Collection does not exist
            NotMemberError: Artwork is not in the collection
            StorageError: The write failed
        """
        await self._lock(collection_id)

        if not await self.membership_repo.get_membership(collection_id, artwork_id):
            raise NotMemberError(collection_id, artwork_id)

        async with self._storage("remove"):
            await self.membership_repo.delete_membership(collection_id, artwork_id)
            survivors = await self.membership_repo.list_ordered(collection_id)
            await self.membership_repo.rewrite_positions(
                collection_id, [row.artwork_id for row in survivors]
            )
            await self.collection_repo.touch(collection_id)

        logger.info(
            "membership.removed",
            collection_id=str(collection_id),
            artwork_id=str(artwork_id),
            remaining=len(survivors),
        )

    async def reorder(
        self,
        collection_id: UUID,
        ordered_artwork_ids: Sequence[UUID],
    ) -> list[CollectionArtwork]:
        """
        Replace the order of a collection with `ordered_artwork_ids`.

        All validation happens before anything is written. The artwork at
        index i gets position i, for every member, in one UPDATE.
        Submitting the same order twice gives the same result.

        Returns:
            The memberships in their new order

        Raises:
            CollectionNotFoundError: Collection does not exist
            ReorderValidationError: The list is not a complete new order
            StorageError: The write failed
        """
        await self._lock(collection_id)

        current = await self.membership_repo.list_ordered(collection_id)
        requested = list(ordered_artwork_ids)
        validate_reorder([row.artwork_id for row in current], requested, collection_id)

        async with self._storage("reorder"):
            await self.membership_repo.rewrite_positions(collection_id, requested)
            await self.collection_repo.touch(collection_id)

        reordered = await self.membership_repo.list_ordered(collection_id)
        logger.info(
            "membership.reordered",
            collection_id=str(collection_id),
            count=len(reordered),
        )
        return reordered

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _lock(self, collection_id: UUID) -> Collection:
        collection = await self.collection_repo.get_for_update(collection_id)
        if not collection:
            raise CollectionNotFoundError(collection_id)
        return collection

    @asynccontextmanager
    async def _storage(self, operation: str) -> AsyncIterator[None]:
        """Re-raise database errors raised while writing as StorageError."""
        try:
            yield
        except DBAPIError as exc:
            logger.error("membership.write_failed", operation=operation, error=str(exc))
            raise StorageError(operation) from exc
