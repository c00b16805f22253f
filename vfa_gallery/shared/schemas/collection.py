"""
Collection Schemas

Request bodies for creating, updating and copying collections, and the
collection metadata and detail responses.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from vfa_gallery.shared.models.enums import PublicationStatus
from vfa_gallery.shared.schemas.common import BaseSchema
from vfa_gallery.shared.schemas.membership import MembershipResponse


MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 2000


# ═══════════════════════════════════════════════════════════════════════════════
# REQUEST SCHEMAS
# ═══════════════════════════════════════════════════════════════════════════════


class CreateCollectionRequest(BaseSchema):
    """
    Body of POST /galleries/{id}/collections.

    Example:
        {"name": "Spring 2026", "description": "New oils"}
    """

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH)


class UpdateCollectionRequest(BaseSchema):
    """
    Body of PATCH /collections/{id}.

    Only the fields present in the body change. `description` may be set
    to null to clear it; `name` and `status` may not.

    Example:
        {"name": "Spring 2026 (final)", "status": "archived"}
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=MAX_NAME_LENGTH)
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH)
    status: Optional[PublicationStatus] = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "UpdateCollectionRequest":
        for field in ("name", "status"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        """Fields the caller actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, by_alias=False)


class CopyCollectionRequest(BaseSchema):
    """
    Body of POST /collections/{id}/copy.

    Example:
        {"galleryId": "770e8400-..."}
    """

    gallery_id: UUID = Field(description="Gallery that receives the copy")


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSE SCHEMAS
# ═══════════════════════════════════════════════════════════════════════════════


class CollectionResponse(BaseSchema):
    """Collection metadata with its artwork count."""

    id: UUID
    gallery_id: UUID
    slug: str
    name: str
    description: Optional[str] = None
    is_default: bool
    status: PublicationStatus
    artwork_count: int = 0
    created_at: datetime
    updated_at: datetime


class CollectionDetailResponse(CollectionResponse):
    """
    A collection together with its artworks in display order.

    Example:
        {
            "id": "880e8400-...",
            "name": "Spring 2026",
            ...
            "artworks": [
                {"artworkId": "a3...", "position": 0, "addedAt": "..."},
                {"artworkId": "a1...", "position": 1, "addedAt": "..."}
            ]
        }
    """

    artworks: list[MembershipResponse] = Field(default_factory=list)


class GalleryCollectionsResponse(BaseSchema):
    """Collections of one gallery, default collection first."""

    gallery_id: UUID
    items: list[CollectionResponse]
    total: int
