"""
Shared helpers for API tests.
"""

from __future__ import annotations

from datetime import timedelta
from uuid import UUID

from tests.test_constants import TEST_SECRET_KEY
from vfa_gallery.shared.utils.security import SecurityUtils


def auth_headers(
    user_id: UUID | str,
    secret_key: str = TEST_SECRET_KEY,
    expires_delta: timedelta = timedelta(minutes=5),
) -> dict[str, str]:
    """Authorization header carrying a bearer token for `user_id`."""
    token = SecurityUtils.create_access_token(
        data={"user_id": str(user_id)},
        secret_key=secret_key,
        expires_delta=expires_delta,
    )
    return {"Authorization": f"Bearer {token}"}


def positions(payload: dict) -> list[tuple[str, int]]:
    """(artworkId, position) pairs from an ordered-list response."""
    return [(item["artworkId"], item["position"]) for item in payload["items"]]
