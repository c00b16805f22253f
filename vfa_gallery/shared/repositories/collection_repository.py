"""
Collection Repository

Database operations for collections.

Common Operations:
==================
- get_for_update()    → Load a collection and lock its row for the transaction
- get_with_gallery()  → Load a collection with its gallery (ownership chain)
- touch()             → Bump updated_at after a membership change
- slug_exists()       → Slug uniqueness check within a gallery
- list_for_gallery()  → A gallery's collections with artwork counts
- count_for_user()    → Number of collections across a user's galleries
"""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload
from sqlalchemy.sql.functions import count as sql_count

from vfa_gallery.shared.models.base import utcnow
from vfa_gallery.shared.models.collection import Collection
from vfa_gallery.shared.models.collection_artwork import CollectionArtwork
from vfa_gallery.shared.models.enums import PublicationStatus
from vfa_gallery.shared.models.gallery import Gallery
from vfa_gallery.shared.repositories.base import BaseRepository


class CollectionRepository(BaseRepository[Collection]):
    """
    Repository for Collection database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Collection, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_for_update(self, collection_id: UUID) -> Optional[Collection]:
        """
        Load a collection and take a row lock on it.

        The lock is held until the surrounding transaction ends, so every
        mutation of the same collection's memberships runs one at a time.
        SQLite has no row locks and compiles this to a plain SELECT.

        SQL Generated:
            SELECT * FROM collections WHERE id = '...' FOR UPDATE
        """
        result = await self.session.execute(
            select(Collection).where(Collection.id == collection_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def get_with_gallery(self, collection_id: UUID) -> Optional[Collection]:
        """
        Load a collection together with its gallery.

        Used by the ownership guard to follow collection → gallery → user
        without lazy loading.
        """
        result = await self.session.execute(
            select(Collection)
            .options(joinedload(Collection.gallery))
            .where(Collection.id == collection_id)
        )
        return result.scalar_one_or_none()

    async def slug_exists(
        self,
        gallery_id: UUID,
        slug: str,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        """
        Check whether a slug is already taken within a gallery.

        Args:
            gallery_id: Gallery the slug is scoped to
            slug: Candidate slug
            exclude_id: Collection to ignore, so a renamed collection does
                not collide with its own current slug
        """
        query = (
            select(sql_count())
            .select_from(Collection)
            .where(Collection.gallery_id == gallery_id, Collection.slug == slug)
        )
        if exclude_id is not None:
            query = query.where(Collection.id != exclude_id)

        result = await self.session.execute(query)
        return (result.scalar() or 0) > 0

    async def list_for_gallery(
        self,
        gallery_id: UUID,
        statuses: Optional[Sequence[PublicationStatus]] = None,
    ) -> list[tuple[Collection, int]]:
        """
        Collections of a gallery with their artwork counts.

        Default collection first, then oldest first.

        SQL Generated:
            SELECT collections.*, COUNT(collection_artworks.artwork_id)
            FROM collections
            LEFT JOIN collection_artworks ON collection_artworks.collection_id = collections.id
            WHERE collections.gallery_id = '...'
            GROUP BY collections.id
            ORDER BY collections.is_default DESC, collections.created_at ASC
        """
        query = (
            select(Collection, sql_count(CollectionArtwork.artwork_id))
            .outerjoin(CollectionArtwork, CollectionArtwork.collection_id == Collection.id)
            .where(Collection.gallery_id == gallery_id)
            .group_by(Collection.id)
            .order_by(Collection.is_default.desc(), Collection.created_at.asc())
        )
        if statuses:
            query = query.where(Collection.status.in_(list(statuses)))

        result = await self.session.execute(query)
        return [(collection, count) for collection, count in result.all()]

    async def count_for_user(self, user_id: UUID) -> int:
        """
        Count collections across all galleries owned by a user.

        SQL Generated:
            SELECT COUNT(*) FROM collections
            JOIN galleries ON galleries.id = collections.gallery_id
            WHERE galleries.user_id = '...'
        """
        result = await self.session.execute(
            select(sql_count())
            .select_from(Collection)
            .join(Gallery, Gallery.id == Collection.gallery_id)
            .where(Gallery.user_id == user_id)
        )
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def touch(self, collection_id: UUID, at: Optional[datetime] = None) -> None:
        """
        Mark a collection as updated.

        Only updated_at is written; the collection's other fields are never
        changed by membership operations.
        """
        await self.session.execute(
            update(Collection)
            .where(Collection.id == collection_id)
            .values(updated_at=at or utcnow())
        )
        await self.session.flush()
