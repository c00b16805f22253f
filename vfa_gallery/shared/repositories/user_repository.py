"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get()                    → Inherited lookup by id
- get_collection_limit()   → Per-user collection quota
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vfa_gallery.shared.repositories.base import BaseRepository
from vfa_gallery.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_collection_limit(self, user_id: UUID) -> Optional[int]:
        """
        Get the maximum number of collections a user may own.

        Returns:
            The stored limit, or None if the user row does not exist
        """
        result = await self.session.execute(
            select(User.collection_limit).where(User.id == user_id)
        )
        return result.scalar_one_or_none()
