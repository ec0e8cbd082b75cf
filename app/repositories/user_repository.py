"""사용자 리포지토리: 사용자 계정 CRUD.

User Repository: CRUD for user accounts.
"""

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository handling database queries for the users table."""

    def __init__(self) -> None:
        super().__init__(User)


# 싱글턴 인스턴스: Singleton instance
user_repository: UserRepository = UserRepository()
