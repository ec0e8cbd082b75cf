"""사용자 서비스: 사용자 계정 관리 비즈니스 로직.

User Service: business logic for user account management.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.license_repository import license_history_repository, license_repository
from app.repositories.user_repository import user_repository
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError
from app.utils.password import hash_password


class UserService:
    """Service handling user business logic."""

    def _to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role,
            is_active=user.is_active,
            created_at=user.created_at,
        )

    async def get_user(self, db: AsyncSession, user_id: int) -> User:
        """Load a user or raise NotFoundError.

        Shared by the license, device and history services to validate
        user references.
        """
        user: User | None = await user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError(f"User with id {user_id} not found")
        return user

    async def list_users(self, db: AsyncSession) -> list[UserResponse]:
        users = await user_repository.get_all(db)
        return [self._to_response(u) for u in users]

    async def create_user(
        self,
        db: AsyncSession,
        data: UserCreate,
    ) -> UserResponse:
        """Create a new user account.

        Args:
            db: Async database session
            data: User creation data

        Returns:
            UserResponse: Created user response

        Raises:
            DuplicateError: When the username or email is already taken
        """
        if await user_repository.exists(db, {"username": data.username}):
            raise DuplicateError("Username already exists")
        if data.email is not None and await user_repository.exists(db, {"email": data.email}):
            raise DuplicateError("Email already exists")

        user: User = await user_repository.create(
            db,
            {
                "username": data.username,
                "email": data.email,
                "password_hash": hash_password(data.password),
                "role": data.role.value,
            },
        )
        return self._to_response(user)

    async def update_user(
        self,
        db: AsyncSession,
        data: UserUpdate,
    ) -> UserResponse:
        """Update an existing user. Unset fields are left untouched.

        Raises:
            NotFoundError: User not found
            DuplicateError: New username or email is already taken
        """
        await self.get_user(db, data.id)

        if data.username is not None and await user_repository.exists(
            db, {"username": data.username}, exclude_id=data.id
        ):
            raise DuplicateError("Username already exists")
        if data.email is not None and await user_repository.exists(
            db, {"email": data.email}, exclude_id=data.id
        ):
            raise DuplicateError("Email already exists")

        update_data: dict[str, Any] = data.model_dump(exclude_unset=True, exclude={"id", "password"})
        if data.role is not None:
            update_data["role"] = data.role.value
        if data.password is not None:
            update_data["password_hash"] = hash_password(data.password)

        user: User | None = await user_repository.update(db, data.id, update_data)
        if user is None:
            raise NotFoundError(f"User with id {data.id} not found")
        return self._to_response(user)

    async def delete_user(self, db: AsyncSession, user_id: int) -> None:
        """Delete a user together with their devices and refresh tokens.

        Users still referenced by licenses or by the license history audit
        trail are kept.

        Raises:
            NotFoundError: User not found
            BadRequestError: User owns licenses or appears in license history
        """
        if await license_repository.exists(db, {"owner_id": user_id}):
            raise BadRequestError(f"User with id {user_id} still owns licenses")
        if await license_history_repository.exists(db, {"user_id": user_id}):
            raise BadRequestError(f"User with id {user_id} is referenced by license history")

        deleted: bool = await user_repository.delete(db, user_id)
        if not deleted:
            raise NotFoundError(f"User with id {user_id} not found")


# 싱글턴 인스턴스: Singleton instance
user_service: UserService = UserService()
