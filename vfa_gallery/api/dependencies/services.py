"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request. They hold nothing but the request's
session, so nothing is shared between requests.

Usage:
======
    from vfa_gallery.api.dependencies.services import CollectionServiceDep

    @router.patch("/collections/{collection_id}/artworks/reorder")
    async def reorder(..., service: CollectionServiceDep):
        return await service.reorder_artworks(user_id, collection_id, ids)
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vfa_gallery.api.dependencies.database import get_db
from vfa_gallery.shared.services.collection_service import CollectionService


async def get_collection_service(
    db: AsyncSession = Depends(get_db),
) -> CollectionService:
    """
    Dependency to get CollectionService instance.

    Creates a new service instance per request with the request's db session.
    """
    return CollectionService(db)


CollectionServiceDep = Annotated[CollectionService, Depends(get_collection_service)]
