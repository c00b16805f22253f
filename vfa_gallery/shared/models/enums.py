"""
Enums used across the application.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role."""

    USER = "user"
    ADMIN = "admin"


class PublicationStatus(str, Enum):
    """
    Visibility state of galleries and collections.

    Only ACTIVE collections are readable by anyone other than their owner.
    """

    ACTIVE = "active"
    ARCHIVED = "archived"
    DRAFT = "draft"


class ArtworkStatus(str, Enum):
    """Lifecycle state of an artwork. DELETED artworks cannot be added to collections."""

    ACTIVE = "active"
    DRAFT = "draft"
    DELETED = "deleted"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Persist enum values (``"active"``) rather than member names (``"ACTIVE"``)."""
    return [member.value for member in enum_cls]
