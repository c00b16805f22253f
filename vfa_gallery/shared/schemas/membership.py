"""
Membership Schemas

Request and response schemas for collection ↔ artwork membership endpoints.

Request bodies are validated here, once, at the HTTP boundary. The ledger
only ever receives typed UUIDs.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from vfa_gallery.shared.schemas.common import BaseSchema


# ═══════════════════════════════════════════════════════════════════════════════
# REQUEST SCHEMAS
# ═══════════════════════════════════════════════════════════════════════════════


class AddArtworkRequest(BaseSchema):
    """
    Body of POST /collections/{id}/artworks.

    Example:
        {"artworkId": "a1b2c3d4-..."}
    """

    artwork_id: UUID = Field(description="Artwork to append to the collection")


class ReorderArtworksRequest(BaseSchema):
    """
    Body of PATCH /collections/{id}/artworks/reorder.

    The list is the complete new order; index i becomes position i.

    Example:
        {"artworkIds": ["a3...", "a1...", "a2..."]}
    """

    artwork_ids: list[UUID] = Field(description="Every member of the collection, in the new order")


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSE SCHEMAS
# ═══════════════════════════════════════════════════════════════════════════════


class MembershipResponse(BaseSchema):
    """One artwork's place in a collection."""

    artwork_id: UUID
    position: int
    added_at: datetime


class CollectionArtworksResponse(BaseSchema):
    """
    Ordered contents of a collection.

    Example:
        {
            "collectionId": "880e8400-...",
            "items": [
                {"artworkId": "a3...", "position": 0, "addedAt": "..."},
                {"artworkId": "a1...", "position": 1, "addedAt": "..."}
            ],
            "total": 2
        }
    """

    collection_id: UUID
    items: list[MembershipResponse]
    total: int
