"""
Collection handler.
Handles reading, updating and deleting collections, their ordered artwork
membership, and collection copy.

Handler → Service → Repository → Model

Handlers only parse the request, call CollectionService and shape the
response. Ownership, validation of the reorder list and all position
arithmetic live in the service layer.
"""

from uuid import UUID

from fastapi import APIRouter, status

from ...shared.models.collection_artwork import CollectionArtwork
from ...shared.schemas.collection import (
    CollectionDetailResponse,
    CollectionResponse,
    CopyCollectionRequest,
    UpdateCollectionRequest,
)
from ...shared.schemas.common import MessageResponse
from ...shared.schemas.membership import (
    AddArtworkRequest,
    CollectionArtworksResponse,
    MembershipResponse,
    ReorderArtworksRequest,
)
from ..dependencies.auth import CurrentUser, OptionalUser
from ..dependencies.services import CollectionServiceDep

router = APIRouter()


def _ordered_response(collection_id: UUID, rows: list[CollectionArtwork]) -> CollectionArtworksResponse:
    return CollectionArtworksResponse(
        collection_id=collection_id,
        items=[MembershipResponse.model_validate(row) for row in rows],
        total=len(rows),
    )


@router.get("/{collection_id}", response_model=CollectionDetailResponse)
async def get_collection(
    collection_id: UUID,
    current_user: OptionalUser,
    service: CollectionServiceDep,
):
    """
    Collection metadata plus its artworks in display order.

    Drafts and archived collections are only visible to their owner.
    """
    user_id = current_user["user_id"] if current_user else None
    detail = await service.get_collection(user_id, collection_id)

    response = CollectionDetailResponse.model_validate(detail.collection)
    response.artworks = [MembershipResponse.model_validate(row) for row in detail.memberships]
    response.artwork_count = len(detail.memberships)
    return response


@router.patch("/{collection_id}", response_model=CollectionResponse)
async def update_collection(
    collection_id: UUID,
    body: UpdateCollectionRequest,
    current_user: CurrentUser,
    service: CollectionServiceDep,
):
    """
    Change the name, description or status of a collection.

    Renaming also regenerates the slug.
    """
    result = await service.update_collection(current_user["user_id"], collection_id, body.changes())
    response = CollectionResponse.model_validate(result.collection)
    response.artwork_count = result.artwork_count
    return response


@router.delete("/{collection_id}", response_model=MessageResponse)
async def delete_collection(
    collection_id: UUID,
    current_user: CurrentUser,
    service: CollectionServiceDep,
):
    """
    Delete a collection and its memberships. The default collection stays.
    """
    await service.delete_collection(current_user["user_id"], collection_id)
    return MessageResponse(message="Collection deleted")


@router.get("/{collection_id}/artworks", response_model=CollectionArtworksResponse)
async def list_collection_artworks(
    collection_id: UUID,
    current_user: OptionalUser,
    service: CollectionServiceDep,
):
    """
    List a collection's artworks in display order.

    Anyone may read an active collection; drafts and archived collections
    are visible only to their owner.
    """
    user_id = current_user["user_id"] if current_user else None
    rows = await service.list_artworks(user_id, collection_id)
    return _ordered_response(collection_id, rows)


@router.post(
    "/{collection_id}/artworks",
    response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_artwork_to_collection(
    collection_id: UUID,
    body: AddArtworkRequest,
    current_user: CurrentUser,
    service: CollectionServiceDep,
):
    """
    Append an artwork to the end of a collection.
    """
    membership = await service.add_artwork(current_user["user_id"], collection_id, body.artwork_id)
    return MembershipResponse.model_validate(membership)


@router.delete("/{collection_id}/artworks/{artwork_id}", response_model=MessageResponse)
async def remove_artwork_from_collection(
    collection_id: UUID,
    artwork_id: UUID,
    current_user: CurrentUser,
    service: CollectionServiceDep,
):
    """
    Remove an artwork; the remaining artworks close the gap.
    """
    await service.remove_artwork(current_user["user_id"], collection_id, artwork_id)
    return MessageResponse(message="Artwork removed from collection")


@router.patch("/{collection_id}/artworks/reorder", response_model=CollectionArtworksResponse)
async def reorder_collection_artworks(
    collection_id: UUID,
    body: ReorderArtworksRequest,
    current_user: CurrentUser,
    service: CollectionServiceDep,
):
    """
    Replace the order of a collection.

    The body lists every artwork in the collection exactly once; the
    response is the new canonical order.
    """
    rows = await service.reorder_artworks(current_user["user_id"], collection_id, body.artwork_ids)
    return _ordered_response(collection_id, rows)


@router.post(
    "/{collection_id}/copy",
    response_model=CollectionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def copy_collection(
    collection_id: UUID,
    body: CopyCollectionRequest,
    current_user: CurrentUser,
    service: CollectionServiceDep,
):
    """
    Copy a collection, with the caller's own artworks, into one of their galleries.
    """
    result = await service.copy_collection(current_user["user_id"], collection_id, body.gallery_id)
    response = CollectionResponse.model_validate(result.collection)
    response.artwork_count = result.artwork_count
    return response
