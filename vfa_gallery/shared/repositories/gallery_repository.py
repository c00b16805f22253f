"""
Gallery Repository

Galleries are only read by this service: the ownership guard resolves
gallery → user, and copy targets a gallery. Everything needed is inherited
from BaseRepository.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from vfa_gallery.shared.models.gallery import Gallery
from vfa_gallery.shared.repositories.base import BaseRepository


class GalleryRepository(BaseRepository[Gallery]):
    """Repository for Gallery database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Gallery, session)
