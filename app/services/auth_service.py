"""인증 서비스: 로그인, 토큰 갱신, 로그아웃 비즈니스 로직.

Auth Service: business logic for login, token refresh and logout.

Handles the JWT token lifecycle and current user profile retrieval.
"""

from datetime import datetime, timedelta, timezone

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.user import User
from app.repositories.auth_repository import auth_repository
from app.repositories.user_repository import user_repository
from app.schemas.auth import (
    LoginRequest,
    RefreshRequest,
    TokenResponse,
    UserMeResponse,
)
from app.utils.exceptions import UnauthorizedError
from app.utils.jwt import create_access_token, create_refresh_token, decode_token
from app.utils.password import verify_password


class AuthService:
    """Service handling authentication business logic."""

    def _build_jwt_payload(self, user: User) -> dict[str, str]:
        return {"sub": str(user.id), "role": user.role}

    async def _generate_tokens(
        self,
        db: AsyncSession,
        user: User,
    ) -> TokenResponse:
        """Generate access and refresh token pair for a user.

        Previously issued refresh tokens of the user are revoked so that
        only the newest pair stays valid.

        Args:
            db: Async database session
            user: User model instance

        Returns:
            TokenResponse: Token response with access and refresh tokens
        """
        payload: dict[str, str] = self._build_jwt_payload(user)
        access_token: str = create_access_token(payload)
        refresh_token: str = create_refresh_token(payload)

        await auth_repository.delete_user_refresh_tokens(db, user.id)

        expires_at: datetime = datetime.now(timezone.utc) + timedelta(
            days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS
        )
        await auth_repository.create_refresh_token(
            db, user_id=user.id, token=refresh_token, expires_at=expires_at
        )

        return TokenResponse(
            access_token=access_token,
            refresh_token=refresh_token,
        )

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """Process a username/password login.

        Args:
            db: Async database session
            data: Login request data

        Returns:
            TokenResponse: Token response

        Raises:
            UnauthorizedError: Invalid credentials or deactivated account
        """
        user: User | None = await auth_repository.get_user_by_username(db, data.username)
        if user is None or not verify_password(data.password, user.password_hash):
            raise UnauthorizedError("Invalid username or password")

        if not user.is_active:
            raise UnauthorizedError("Account is deactivated")

        return await self._generate_tokens(db, user)

    async def refresh_tokens(
        self,
        db: AsyncSession,
        data: RefreshRequest,
    ) -> TokenResponse:
        """Issue a new token pair using a stored refresh token.

        Raises:
            UnauthorizedError: Unknown, expired or malformed refresh token,
                or the user is gone or inactive
        """
        db_token = await auth_repository.get_refresh_token(db, data.refresh_token)
        if db_token is None:
            raise UnauthorizedError("Invalid refresh token")

        expires_at: datetime = db_token.expires_at
        # SQLite hands back naive datetimes
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if expires_at < datetime.now(timezone.utc):
            await auth_repository.delete_refresh_token(db, data.refresh_token)
            raise UnauthorizedError("Refresh token has expired")

        try:
            payload: dict = decode_token(data.refresh_token)
        except jwt.InvalidTokenError:
            await auth_repository.delete_refresh_token(db, data.refresh_token)
            raise UnauthorizedError("Invalid refresh token")

        if payload.get("type") != "refresh":
            raise UnauthorizedError("Invalid token type")

        user: User | None = await user_repository.get_by_id(db, db_token.user_id)
        if user is None or not user.is_active:
            raise UnauthorizedError("User not found or inactive")

        await auth_repository.delete_refresh_token(db, data.refresh_token)
        return await self._generate_tokens(db, user)

    async def logout(
        self,
        db: AsyncSession,
        refresh_token: str,
    ) -> None:
        """Revoke the given refresh token."""
        await auth_repository.delete_refresh_token(db, refresh_token)

    def get_me(self, user: User) -> UserMeResponse:
        """Return the profile of the currently authenticated user."""
        return UserMeResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role,
            is_active=user.is_active,
        )


# 싱글턴 인스턴스: Singleton instance
auth_service: AuthService = AuthService()
