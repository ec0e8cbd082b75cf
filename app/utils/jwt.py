"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.

JWT Payload Structure:
    Access and refresh tokens share the same base payload:
    {
        "sub": "42",                # User id (string, per RFC 7519)
        "role": "ADMIN",            # Application role
        "exp": 1234567890,          # Expiration UNIX timestamp
        "type": "access"|"refresh", # Token type discriminator
        "jti": "9f1c..."            # Random id, keeps tokens issued in the same second distinct
    }
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any
import jwt

from app.config import settings


def _encode(data: dict[str, Any], expires_in: timedelta, token_type: str) -> str:
    to_encode: dict[str, Any] = data.copy()
    to_encode.update({
        "exp": datetime.now(timezone.utc) + expires_in,
        "type": token_type,
        "jti": uuid.uuid4().hex,
    })
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(data: dict[str, Any]) -> str:
    """Generate a JWT access token with the given payload data.

    Token expires after JWT_ACCESS_TOKEN_EXPIRE_MINUTES (default: 30 min).

    Args:
        data: JWT payload, typically {"sub": str(user.id), "role": user.role}

    Returns:
        str: Encoded JWT token string
    """
    return _encode(data, timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES), "access")


def create_refresh_token(data: dict[str, Any]) -> str:
    """Generate a JWT refresh token with the given payload data.

    Token expires after JWT_REFRESH_TOKEN_EXPIRE_DAYS (default: 7 days).
    """
    return _encode(data, timedelta(days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS), "refresh")


def decode_token(token: str) -> dict[str, Any]:
    """Decode and verify a JWT token string.

    Args:
        token: Encoded JWT token string

    Returns:
        dict[str, Any]: Decoded payload dictionary

    Raises:
        jwt.ExpiredSignatureError: When token has expired
        jwt.InvalidTokenError: When token is invalid
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
