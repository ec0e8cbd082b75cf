"""사용자 관리 Pydantic 요청/응답 스키마.

User management Pydantic request/response schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.user import UserRole


class UserCreate(BaseModel):
    """User creation request schema.

    Attributes:
        username: Login username, unique
        password: Plain text, hashed with bcrypt by the server
        email: Email address, optional
        role: Application role, defaults to USER
    """

    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)
    email: str | None = None
    role: UserRole = UserRole.USER


class UserUpdate(BaseModel):
    """User update request schema. The body carries the id; unset fields are kept."""

    id: int
    username: str | None = Field(default=None, min_length=1, max_length=100)
    password: str | None = Field(default=None, min_length=1)
    email: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None


class UserResponse(BaseModel):
    """User response schema. Never carries the password hash."""

    id: int
    username: str
    email: str | None
    role: str
    is_active: bool
    created_at: datetime | None = None
