"""
Gallery handler.
Collections scoped to a gallery: creating one and listing them.

Handler → Service → Repository → Model
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from ...shared.models.enums import PublicationStatus
from ...shared.schemas.collection import (
    CollectionResponse,
    CreateCollectionRequest,
    GalleryCollectionsResponse,
)
from ..dependencies.auth import CurrentUser, OptionalUser
from ..dependencies.services import CollectionServiceDep

router = APIRouter()


@router.post(
    "/{gallery_id}/collections",
    response_model=CollectionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_collection(
    gallery_id: UUID,
    body: CreateCollectionRequest,
    current_user: CurrentUser,
    service: CollectionServiceDep,
):
    """
    Create an empty, active collection in one of the caller's galleries.

    The slug is derived from the name and made unique within the gallery.
    """
    collection = await service.create_collection(
        current_user["user_id"], gallery_id, body.name, body.description
    )
    return CollectionResponse.model_validate(collection)


@router.get("/{gallery_id}/collections", response_model=GalleryCollectionsResponse)
async def list_gallery_collections(
    gallery_id: UUID,
    current_user: OptionalUser,
    service: CollectionServiceDep,
    status_filter: Optional[PublicationStatus] = Query(default=None, alias="status"),
):
    """
    List a gallery's collections, default collection first.

    Visitors only see active collections; the owner may filter by status.
    """
    user_id = current_user["user_id"] if current_user else None
    rows = await service.list_gallery_collections(user_id, gallery_id, status_filter)

    items = []
    for collection, artwork_count in rows:
        item = CollectionResponse.model_validate(collection)
        item.artwork_count = artwork_count
        items.append(item)

    return GalleryCollectionsResponse(gallery_id=gallery_id, items=items, total=len(items))
