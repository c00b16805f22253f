"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from vfa_gallery.shared.core.logging import logger, get_logger
    from vfa_gallery.shared.core.exceptions import VFAException, NotMemberError

    logger.info("membership.removed", collection_id=collection_id)
"""

from vfa_gallery.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from vfa_gallery.shared.core.exceptions import (
    VFAException,
    AuthenticationError,
    AuthorizationError,
    NotOwnerError,
    NotFoundError,
    GalleryNotFoundError,
    CollectionNotFoundError,
    ArtworkNotFoundError,
    NotMemberError,
    ValidationError,
    CollectionLimitError,
    DefaultCollectionError,
    ReorderValidationError,
    DuplicateInRequestError,
    UnknownMemberError,
    MissingMemberError,
    CountMismatchError,
    EmptyCollectionError,
    ConflictError,
    AlreadyMemberError,
    ServiceUnavailableError,
    StorageError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "VFAException",
    "AuthenticationError",
    "AuthorizationError",
    "NotOwnerError",
    "NotFoundError",
    "GalleryNotFoundError",
    "CollectionNotFoundError",
    "ArtworkNotFoundError",
    "NotMemberError",
    "ValidationError",
    "CollectionLimitError",
    "DefaultCollectionError",
    "ReorderValidationError",
    "DuplicateInRequestError",
    "UnknownMemberError",
    "MissingMemberError",
    "CountMismatchError",
    "EmptyCollectionError",
    "ConflictError",
    "AlreadyMemberError",
    "ServiceUnavailableError",
    "StorageError",
]
