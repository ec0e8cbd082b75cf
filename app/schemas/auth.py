"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.

Covers login, token issuance/refresh, and current user info.
"""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Login request schema.

    Attributes:
        username: User login identifier
        password: Plain text password, verified against the bcrypt hash
    """

    username: str
    password: str


class TokenResponse(BaseModel):
    """JWT token issuance response schema.

    Returned after successful login or token refresh.

    Attributes:
        access_token: Short-lived access token
        refresh_token: Long-lived refresh token
        token_type: Always "bearer" for the Authorization header
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshRequest(BaseModel):
    """Exchanges a valid refresh token for a new access/refresh token pair."""

    refresh_token: str


class UserMeResponse(BaseModel):
    """Current user info response schema for GET /me."""

    id: int
    username: str
    email: str | None
    role: str
    is_active: bool
