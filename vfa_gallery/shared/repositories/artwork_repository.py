"""
Artwork Repository

Read-only lookups on artworks. Membership operations reference artworks by
ID and never write to them.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vfa_gallery.shared.models.artwork import Artwork
from vfa_gallery.shared.models.enums import ArtworkStatus
from vfa_gallery.shared.repositories.base import BaseRepository


class ArtworkRepository(BaseRepository[Artwork]):
    """
    Repository for Artwork database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Artwork, session)

    async def get_owned(self, artwork_id: UUID, user_id: UUID) -> Optional[Artwork]:
        """
        Get an artwork only if it belongs to the user.

        Args:
            artwork_id: Artwork UUID
            user_id: Expected owner

        Returns:
            The artwork, or None if missing or owned by someone else
        """
        result = await self.session.execute(
            select(Artwork).where(Artwork.id == artwork_id, Artwork.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def filter_owned_ids(self, artwork_ids: list[UUID], user_id: UUID) -> set[UUID]:
        """
        Return the subset of `artwork_ids` that the user owns and has not deleted.

        Used when copying a collection so that artworks belonging to other
        users are left behind.
        """
        if not artwork_ids:
            return set()

        result = await self.session.execute(
            select(Artwork.id).where(
                Artwork.id.in_(artwork_ids),
                Artwork.user_id == user_id,
                Artwork.status != ArtworkStatus.DELETED,
            )
        )
        return set(result.scalars().all())
