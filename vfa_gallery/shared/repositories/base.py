"""
Base Repository

Generic base repository with the CRUD operations shared by every entity
repository.

What This Provides:
===================
- get(id)        → Fetch single record by UUID
- exists(id)     → Check if record exists without loading it
- count()        → Count records with simple equality filters
- create()       → Insert a new record
- update(id)     → Apply field changes to one record
- delete(id)     → Hard delete one record (and its ORM cascades)

Generic Type Pattern:
=====================
    class GalleryRepository(BaseRepository[Gallery]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(Gallery, session)

    repo = GalleryRepository(db)
    gallery = await repo.get(gallery_id)  # Returns Gallery, not Any

flush() vs commit():
====================
Repository methods only flush(). The request session from get_db() commits
once the handler returns and rolls back on any exception, so every service
call made during one request is a single all-or-nothing transaction.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from vfa_gallery.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID.

        SQL Generated:
            SELECT * FROM galleries WHERE id = '770e8400-...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def exists(self, record_id: UUID) -> bool:
        """
        Check if a record exists without loading it.

        SQL Generated:
            SELECT COUNT(*) FROM artworks WHERE id = '...'
        """
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional equality filtering.

        Args:
            filters: Dict of field=value for WHERE clauses

        Returns:
            Number of matching records
        """
        query = select(sql_count()).select_from(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Adds the instance, flushes the INSERT and refreshes so that
        server-generated values (created_at, added_at) are loaded.

        Example:
            collection = await repo.create(gallery_id=gallery.id, slug="spring", name="Spring")
        """
        instance = self.model(**kwargs)
        self.session.add(instance)

        # Flush: send INSERT to database (but don't commit yet)
        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    async def update(self, record_id: UUID, **kwargs: Any) -> Optional[ModelType]:
        """
        Update a record by ID.

        Every keyword is applied as given, None included, so callers pass
        only the fields that change.

        Returns:
            Updated model instance, or None if not found

        SQL Generated:
            UPDATE collections
            SET name = 'Autumn', slug = 'autumn', updated_at = NOW()
            WHERE id = '...'
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field):
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: UUID) -> bool:
        """
        Hard delete a record by ID.

        ORM cascades configured on the model's relationships run as well
        (a collection takes its memberships with it).

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
