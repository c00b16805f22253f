"""
API Handlers

Route handlers for the VFA.gallery API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from vfa_gallery.api.handlers import (
    collection_handler,
    gallery_handler,
    health_handler,
)

__all__ = [
    "collection_handler",
    "gallery_handler",
    "health_handler",
]
