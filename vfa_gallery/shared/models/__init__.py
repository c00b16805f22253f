"""
VFA.gallery SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── galleries (Gallery[])
       │      └── collections (Collection[])
       │             └── memberships (CollectionArtwork[], ordered by position)
       └── artworks (Artwork[])
              └── memberships (CollectionArtwork[])

Models Overview:
================
- Base: Declarative base and timestamp mixin
- User: Artist account, owns galleries and artworks
- Gallery: Container of collections, the ownership link for collections
- Collection: Named, ordered grouping of artworks
- Artwork: A single piece, may sit in many collections
- CollectionArtwork: Ordered membership (collection, artwork, position)

Usage:
======
    from vfa_gallery.shared.models import Collection, CollectionArtwork
"""

from vfa_gallery.shared.models.base import Base, TimestampMixin
from vfa_gallery.shared.models.enums import (
    UserRole,
    PublicationStatus,
    ArtworkStatus,
)
from vfa_gallery.shared.models.user import User
from vfa_gallery.shared.models.gallery import Gallery
from vfa_gallery.shared.models.collection import Collection
from vfa_gallery.shared.models.artwork import Artwork
from vfa_gallery.shared.models.collection_artwork import CollectionArtwork

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "UserRole",
    "PublicationStatus",
    "ArtworkStatus",
    # Models
    "User",
    "Gallery",
    "Collection",
    "Artwork",
    "CollectionArtwork",
]
