"""
Authentication Dependencies

FastAPI dependencies that identify the caller from a bearer token.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Read user_id claim (401 if absent)

    get_optional_user()       ← Same, but anonymous callers get None

Type Aliases:
=============
    CurrentUser   - Authenticated caller, {"user_id": UUID, "email": str | None}
    OptionalUser  - Authenticated caller or None

Usage:
======
    from vfa_gallery.api.dependencies.auth import CurrentUser

    @router.delete("/collections/{collection_id}/artworks/{artwork_id}")
    async def remove(collection_id: UUID, artwork_id: UUID, current_user: CurrentUser):
        await service.remove_artwork(current_user["user_id"], collection_id, artwork_id)
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ...config.settings import settings
from ...shared.core.exceptions import AuthenticationError
from ...shared.core.logging import log_context
from ...shared.utils.security import SecurityUtils


# auto_error=False so a missing header reaches our handler as 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)


def _user_from_payload(payload: dict) -> dict:
    user_id = payload.get("user_id")
    if not user_id:
        raise AuthenticationError("Invalid token payload")

    try:
        parsed_id = UUID(str(user_id))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e

    log_context(user_id=str(parsed_id))
    return {
        "user_id": parsed_id,
        "email": payload.get("email"),
    }


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Get current authenticated user from token.

    Raises:
        AuthenticationError: If user_id is missing or not a UUID
    """
    return _user_from_payload(token)


async def get_optional_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> Optional[dict]:
    """
    Identify the caller if a token was sent.

    A missing header means an anonymous caller. A token that is present but
    invalid is still rejected.
    """
    if not credentials:
        return None

    token = await get_current_user_token(credentials)
    return _user_from_payload(token)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[dict, Depends(get_current_user)]

# Authenticated user or None for public reads
OptionalUser = Annotated[Optional[dict], Depends(get_optional_user)]
