"""인증 리포지토리: 리프레시 토큰 CRUD 및 사용자명 조회.

Auth Repository: refresh token CRUD and user lookup by username.
"""

from datetime import datetime

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.token import RefreshToken
from app.models.user import User


class AuthRepository:
    """Repository handling authentication-related database queries.

    Manages refresh token lifecycle and user credential lookups.
    """

    async def get_user_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> User | None:
        """Retrieve a user by username.

        Args:
            db: Async database session
            username: Username to look up

        Returns:
            User | None: Found user or None
        """
        query: Select = select(User).where(User.username == username)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def create_refresh_token(
        self,
        db: AsyncSession,
        user_id: int,
        token: str,
        expires_at: datetime,
    ) -> RefreshToken:
        """Persist a newly issued refresh token.

        Args:
            db: Async database session
            user_id: Token owner
            token: JWT refresh token string
            expires_at: Token expiration timestamp

        Returns:
            RefreshToken: Created refresh token record
        """
        db_token: RefreshToken = RefreshToken(
            user_id=user_id,
            token=token,
            expires_at=expires_at,
        )
        db.add(db_token)
        await db.flush()
        await db.refresh(db_token)
        return db_token

    async def get_refresh_token(
        self,
        db: AsyncSession,
        token: str,
    ) -> RefreshToken | None:
        query: Select = select(RefreshToken).where(RefreshToken.token == token)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def delete_refresh_token(
        self,
        db: AsyncSession,
        token: str,
    ) -> bool:
        """Delete a specific refresh token by its token string.

        Returns:
            bool: Whether a token was deleted
        """
        db_token: RefreshToken | None = await self.get_refresh_token(db, token)
        if db_token is None:
            return False

        await db.delete(db_token)
        await db.flush()
        return True

    async def delete_user_refresh_tokens(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> None:
        """Delete all refresh tokens of a user (logout everywhere)."""
        stmt = delete(RefreshToken).where(RefreshToken.user_id == user_id)
        await db.execute(stmt)
        await db.flush()


# 싱글턴 인스턴스: Singleton instance
auth_repository: AuthRepository = AuthRepository()
