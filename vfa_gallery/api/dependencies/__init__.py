"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), get_optional_user(), CurrentUser, OptionalUser
- Services: get_collection_service(), CollectionServiceDep

Type Aliases:
=============
    # Instead of this:
    async def handler(
        service: CollectionService = Depends(get_collection_service),
        user: dict = Depends(get_current_user)
    ):

    # Write this:
    async def handler(service: CollectionServiceDep, user: CurrentUser):
"""

from vfa_gallery.api.dependencies.database import (
    get_db,
    DbSession,
)
from vfa_gallery.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    get_optional_user,
    CurrentUser,
    OptionalUser,
)
from vfa_gallery.api.dependencies.services import (
    get_collection_service,
    CollectionServiceDep,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "get_optional_user",
    "CurrentUser",
    "OptionalUser",
    # Services
    "get_collection_service",
    "CollectionServiceDep",
]
