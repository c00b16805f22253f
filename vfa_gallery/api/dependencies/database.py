"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed when the handler returns and rolled back if it
raises, so one request is one transaction. Tests override get_db to point
at an in-memory database.

Usage:
======
    from vfa_gallery.api.dependencies.database import DbSession

    @router.get("/collections/{collection_id}/artworks")
    async def list_artworks(collection_id: UUID, db: DbSession):
        return await CollectionArtworkRepository(db).list_ordered(collection_id)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vfa_gallery.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
