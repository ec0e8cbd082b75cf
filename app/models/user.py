"""사용자 ORM 모델 정의.

User SQLAlchemy ORM model definition.

Tables:
    - users: User accounts with an application role (ADMIN or USER)
"""

import enum
from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class UserRole(str, enum.Enum):
    """Application roles. Only ADMIN may use the admin API."""

    ADMIN = "ADMIN"
    USER = "USER"


class User(Base):
    """User model: system account that can own licenses and devices.

    Attributes:
        id: Auto-increment primary key
        username: Login username, globally unique
        email: Email address, optional, unique when set
        password_hash: bcrypt-hashed password
        role: Application role name (UserRole value)
        is_active: Deactivated users cannot authenticate
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)

    Relationships:
        devices: Devices registered to this user (cascade delete)
        owned_licenses: Licenses this user owns
        refresh_tokens: Issued refresh tokens (cascade delete)
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    # Never store plaintext
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=UserRole.USER.value)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    devices = relationship("Device", back_populates="user", cascade="all, delete-orphan")
    owned_licenses = relationship("License", back_populates="owner", foreign_keys="License.owner_id")
    refresh_tokens = relationship("RefreshToken", back_populates="user", cascade="all, delete-orphan")
