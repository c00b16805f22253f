"""
Pydantic Schemas

Request validation and response serialisation for the HTTP API.

Modules:
========
- common: BaseSchema, MessageResponse, ErrorResponse, HealthResponse
- membership: add / reorder requests, ordered membership responses
- collection: create / update / copy requests, collection and detail responses
"""

from vfa_gallery.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from vfa_gallery.shared.schemas.membership import (
    AddArtworkRequest,
    ReorderArtworksRequest,
    MembershipResponse,
    CollectionArtworksResponse,
)
from vfa_gallery.shared.schemas.collection import (
    CreateCollectionRequest,
    UpdateCollectionRequest,
    CopyCollectionRequest,
    CollectionResponse,
    CollectionDetailResponse,
    GalleryCollectionsResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Membership
    "AddArtworkRequest",
    "ReorderArtworksRequest",
    "MembershipResponse",
    "CollectionArtworksResponse",
    # Collection
    "CreateCollectionRequest",
    "UpdateCollectionRequest",
    "CopyCollectionRequest",
    "CollectionResponse",
    "CollectionDetailResponse",
    "GalleryCollectionsResponse",
]
