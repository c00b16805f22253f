"""
CollectionArtwork Repository

Data access for the ordered collection ↔ artwork membership table.

Common Operations:
==================
- get_membership()        → One (collection, artwork) row
- count_for_collection()  → Current membership count n
- list_ordered()          → All rows of a collection by ascending position
- insert()                → Append a row at a given position
- delete_membership()     → Remove one row
- rewrite_positions()     → Reassign every position in one statement
- bulk_insert()           → Insert many rows at once (collection copy)

Position Rewrite:
=================
Reorder and compaction both go through rewrite_positions(), which issues one
statement for the whole collection:

    UPDATE collection_artworks
    SET position = CASE
        WHEN artwork_id = 'a3...' THEN 0
        WHEN artwork_id = 'a1...' THEN 1
        ELSE position
    END
    WHERE collection_id = '...'

A single statement either applies to every row or to none, so a reader can
never see half of a new order.
"""

from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import case, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from vfa_gallery.shared.models.collection_artwork import CollectionArtwork
from vfa_gallery.shared.repositories.base import BaseRepository


class CollectionArtworkRepository(BaseRepository[CollectionArtwork]):
    """
    Repository for CollectionArtwork (membership) operations.

    Rows are keyed by (collection_id, artwork_id), so the id-based helpers
    of BaseRepository are not used here.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(CollectionArtwork, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_membership(
        self,
        collection_id: UUID,
        artwork_id: UUID,
    ) -> Optional[CollectionArtwork]:
        """Get the membership row for a pair, or None."""
        result = await self.session.execute(
            select(CollectionArtwork).where(
                CollectionArtwork.collection_id == collection_id,
                CollectionArtwork.artwork_id == artwork_id,
            )
        )
        return result.scalar_one_or_none()

    async def count_for_collection(self, collection_id: UUID) -> int:
        """Number of artworks currently in the collection."""
        result = await self.session.execute(
            select(sql_count())
            .select_from(CollectionArtwork)
            .where(CollectionArtwork.collection_id == collection_id)
        )
        return result.scalar() or 0

    async def list_ordered(self, collection_id: UUID) -> list[CollectionArtwork]:
        """
        All memberships of a collection, ascending by position.

        populate_existing makes rows already in the session pick up positions
        written by rewrite_positions(), which bypasses the identity map.
        """
        result = await self.session.execute(
            select(CollectionArtwork)
            .where(CollectionArtwork.collection_id == collection_id)
            .order_by(CollectionArtwork.position.asc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def insert(
        self,
        collection_id: UUID,
        artwork_id: UUID,
        position: int,
    ) -> CollectionArtwork:
        """Insert a membership row at the given position."""
        return await self.create(
            collection_id=collection_id,
            artwork_id=artwork_id,
            position=position,
        )

    async def delete_membership(self, collection_id: UUID, artwork_id: UUID) -> bool:
        """
        Delete one membership row.

        Returns:
            True if a row was deleted, False if the pair did not exist
        """
        result = await self.session.execute(
            delete(CollectionArtwork).where(
                CollectionArtwork.collection_id == collection_id,
                CollectionArtwork.artwork_id == artwork_id,
            )
        )
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def rewrite_positions(self, collection_id: UUID, ordered_artwork_ids: list[UUID]) -> None:
        """
        Set position = index for every artwork in `ordered_artwork_ids`.

        Args:
            collection_id: Collection whose rows are rewritten
            ordered_artwork_ids: Complete new order of the collection
        """
        if not ordered_artwork_ids:
            return

        new_position = case(
            *[
                (CollectionArtwork.artwork_id == artwork_id, index)
                for index, artwork_id in enumerate(ordered_artwork_ids)
            ],
            else_=CollectionArtwork.position,
        )

        await self.session.execute(
            update(CollectionArtwork)
            .where(CollectionArtwork.collection_id == collection_id)
            .values(position=new_position)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()

    async def bulk_insert(
        self,
        collection_id: UUID,
        artwork_ids: Iterable[UUID],
    ) -> list[CollectionArtwork]:
        """
        Insert memberships for `artwork_ids` at positions 0..k-1 in the given order.
        """
        rows = [
            CollectionArtwork(collection_id=collection_id, artwork_id=artwork_id, position=index)
            for index, artwork_id in enumerate(artwork_ids)
        ]
        if not rows:
            return []

        self.session.add_all(rows)
        await self.session.flush()
        return rows
