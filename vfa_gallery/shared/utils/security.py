"""
Security Utilities

Bearer-token (JWT) handling.

Tokens are issued by the sign-in service in front of this backend; this
service only verifies them and reads the `user_id` claim. create_access_token
exists for local tooling and tests.

Usage:
======
    from vfa_gallery.shared.utils.security import SecurityUtils

    token = SecurityUtils.create_access_token(
        data={"user_id": str(user.id)},
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(hours=1),
    )

    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
    user_id = UUID(payload["user_id"])
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt


class SecurityUtils:
    """JWT creation and validation."""

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create a signed JWT.

        Args:
            data: Claims to encode (at least user_id)
            secret_key: Secret key for signing
            expires_delta: Token lifetime (default: 7 days)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)

        to_encode.update({
            "exp": now + (expires_delta or timedelta(days=7)),
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify a JWT.

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
