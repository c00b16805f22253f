"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    VFAException (base)
       │
       ├── AuthenticationError (401)      ← Missing or invalid bearer token
       ├── AuthorizationError (403)
       │      └── NotOwnerError           ← Caller may not mutate the collection
       ├── NotFoundError (404)
       │      ├── GalleryNotFoundError
       │      ├── CollectionNotFoundError
       │      ├── ArtworkNotFoundError
       │      └── NotMemberError          ← Artwork is not in the collection
       ├── ValidationError (400)
       │      ├── CollectionLimitError
       │      ├── DefaultCollectionError
       │      └── ReorderValidationError  ← Reorder payload does not match the ledger
       │             ├── DuplicateInRequestError
       │             ├── UnknownMemberError
       │             ├── CountMismatchError    ← List length differs from the membership
       │             │      └── MissingMemberError
       │             └── EmptyCollectionError
       ├── ConflictError (409)
       │      └── AlreadyMemberError
       └── ServiceUnavailableError (503)
              └── StorageError            ← Write could not complete, safe to retry

Usage:
======
    from vfa_gallery.shared.core.exceptions import NotMemberError

    raise NotMemberError(collection_id, artwork_id)
    # Results in: {"error": {"code": "NOT_MEMBER", "message": "...", "details": {...}}}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "COUNT_MISMATCH",
            "message": "Expected 3 artwork IDs, got 2",
            "details": {"expected": 3, "provided": 2, "artwork_id": "..."}
        }
    }
"""

from typing import Any, Optional
from uuid import UUID


class VFAException(Exception):
    """
    Base exception for all VFA.gallery application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(VFAException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when the bearer token is missing, malformed or expired.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(VFAException):
    """
    Authorization failed error (403 Forbidden).

    Raised when user is authenticated but lacks permission.
    """

    def __init__(
        self,
        message: str = "Access denied",
        error_code: str = "AUTHORIZATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code=error_code,
            details=details,
        )


class NotOwnerError(AuthorizationError):
    """The caller does not own the gallery the resource belongs to."""

    def __init__(self, resource: str, resource_id: UUID | str) -> None:
        super().__init__(
            message=f"You do not own this {resource.lower()}",
            error_code="NOT_OWNER",
            details={f"{resource.lower()}_id": str(resource_id)},
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(VFAException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("Collection", collection_id)
        # Message: "Collection with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[UUID | str] = None,
        error_code: str = "NOT_FOUND",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code=error_code,
            details=details,
        )


class GalleryNotFoundError(NotFoundError):
    """Gallery not found error."""

    def __init__(self, gallery_id: UUID | str) -> None:
        super().__init__(
            resource="Gallery",
            resource_id=str(gallery_id),
            error_code="GALLERY_NOT_FOUND",
        )


class CollectionNotFoundError(NotFoundError):
    """Collection not found error."""

    def __init__(self, collection_id: UUID | str) -> None:
        super().__init__(
            resource="Collection",
            resource_id=str(collection_id),
            error_code="COLLECTION_NOT_FOUND",
        )


class ArtworkNotFoundError(NotFoundError):
    """Artwork not found error."""

    def __init__(self, artwork_id: UUID | str) -> None:
        super().__init__(
            resource="Artwork",
            resource_id=str(artwork_id),
            error_code="ARTWORK_NOT_FOUND",
        )


class NotMemberError(NotFoundError):
    """The artwork exists but is not part of the collection."""

    def __init__(self, collection_id: UUID | str, artwork_id: UUID | str) -> None:
        super().__init__(
            resource="Artwork in this collection",
            error_code="NOT_MEMBER",
            details={
                "collection_id": str(collection_id),
                "artwork_id": str(artwork_id),
            },
        )


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(VFAException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        error_code: str = "VALIDATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class CollectionLimitError(ValidationError):
    """User already owns the maximum number of collections."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            message="Collection limit exceeded",
            error_code="COLLECTION_LIMIT_EXCEEDED",
            details={"limit": limit},
        )


class DefaultCollectionError(ValidationError):
    """A gallery's default collection cannot be deleted."""

    def __init__(self, collection_id: UUID | str) -> None:
        super().__init__(
            message="Cannot delete the default collection",
            error_code="DEFAULT_COLLECTION",
            details={"collection_id": str(collection_id)},
        )


class ReorderValidationError(ValidationError):
    """
    Base for reorder payloads that do not match the current membership.

    Callers should re-read the collection and resubmit the full order.
    """


class DuplicateInRequestError(ReorderValidationError):
    """The requested order names the same artwork more than once."""

    def __init__(self, artwork_id: UUID | str) -> None:
        super().__init__(
            message="Duplicate artwork IDs are not allowed",
            error_code="DUPLICATE_IN_REQUEST",
            details={"artwork_id": str(artwork_id)},
        )


class UnknownMemberError(ReorderValidationError):
    """The requested order names an artwork that is not in the collection."""

    def __init__(self, artwork_id: UUID | str) -> None:
        super().__init__(
            message=f"Artwork {artwork_id} is not in this collection",
            error_code="UNKNOWN_MEMBER",
            details={"artwork_id": str(artwork_id)},
        )


class CountMismatchError(ReorderValidationError):
    """
    The requested order has a different length than the membership.

    Raised directly when the list is too long; `artwork_id` then names the
    first requested id that is not a member. Short lists raise the
    MissingMemberError subclass instead.
    """

    def __init__(
        self,
        expected: int,
        provided: int,
        artwork_id: UUID | str,
        message: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=message or f"Expected {expected} artwork IDs, got {provided}",
            error_code="COUNT_MISMATCH",
            details={"expected": expected, "provided": provided, "artwork_id": str(artwork_id)},
        )
        self.expected = expected
        self.provided = provided
        self.artwork_id = str(artwork_id)


class MissingMemberError(CountMismatchError):
    """
    The requested order is shorter than the membership.

    Duplicates are ruled out first, so a short list always leaves out at
    least one member; `artwork_id` names the first one in current order.
    """


class EmptyCollectionError(ReorderValidationError):
    """Reorder was requested with an empty list on an empty collection."""

    def __init__(self, collection_id: Optional[UUID | str] = None) -> None:
        super().__init__(
            message="Collection has no artworks to reorder",
            error_code="EMPTY_COLLECTION",
            details={"collection_id": str(collection_id)} if collection_id else None,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(VFAException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        error_code: str = "CONFLICT",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code=error_code,
            details=details,
        )


class AlreadyMemberError(ConflictError):
    """The artwork is already part of the collection."""

    def __init__(self, collection_id: UUID | str, artwork_id: UUID | str) -> None:
        super().__init__(
            message="Artwork is already in this collection",
            error_code="ALREADY_MEMBER",
            details={
                "collection_id": str(collection_id),
                "artwork_id": str(artwork_id),
            },
        )


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(VFAException):
    """
    Service temporarily unavailable error (503).

    Raised when a backing service cannot complete the request right now.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        error_code: str = "SERVICE_UNAVAILABLE",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code=error_code,
            details=details,
        )


class StorageError(ServiceUnavailableError):
    """
    A membership write failed inside its transaction.

    Nothing was applied; resubmitting the same request is safe.
    """

    def __init__(
        self,
        operation: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = details or {}
        extra_details["operation"] = operation
        extra_details["retryable"] = True
        super().__init__(
            message=f"Could not complete {operation}, please retry",
            error_code="STORAGE_ERROR",
            details=extra_details,
        )
