"""SQLAlchemy ORM 모델 패키지.

SQLAlchemy ORM models package: central import point for all domain models.

Importing from this package registers every model with the SQLAlchemy
metadata, which Alembic migrations and relationship resolution rely on.

Modules:
    user: Users and application roles
    token: Refresh tokens
    product: Products and license types
    license: Licenses, devices and license history
"""

from app.models.user import User, UserRole
from app.models.token import RefreshToken
from app.models.product import Product, LicenseType
from app.models.license import License, Device, LicenseHistory

__all__ = [
    "User", "UserRole",
    "RefreshToken",
    "Product", "LicenseType",
    "License", "Device", "LicenseHistory",
]
