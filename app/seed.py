"""초기 데이터 시드 스크립트.

Seed script: creates the schema and the bootstrap records.

Run this script once to bootstrap the database.

Usage:
    python -m app.seed

Creates (each only when missing):
    - All tables from the ORM metadata
    - 1 ADMIN user (SEED_ADMIN_USERNAME / SEED_ADMIN_PASSWORD)
    - 1 license type: "annual" (365 days)
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import async_session, engine, Base
from app.models import LicenseType, User, UserRole
from app.utils.password import hash_password

logger = logging.getLogger(__name__)

DEFAULT_LICENSE_TYPE: str = "annual"


async def _seed_admin(db: AsyncSession) -> None:
    result = await db.execute(select(User).where(User.role == UserRole.ADMIN.value).limit(1))
    if result.scalar_one_or_none():
        logger.info("Admin user already exists. Skipping.")
        return

    db.add(User(
        username=settings.SEED_ADMIN_USERNAME,
        password_hash=hash_password(settings.SEED_ADMIN_PASSWORD),
        role=UserRole.ADMIN.value,
        is_active=True,
    ))
    logger.info("Seeded admin user=%s", settings.SEED_ADMIN_USERNAME)


async def _seed_license_type(db: AsyncSession) -> None:
    result = await db.execute(select(LicenseType).where(LicenseType.name == DEFAULT_LICENSE_TYPE))
    if result.scalar_one_or_none():
        logger.info("License type '%s' already exists. Skipping.", DEFAULT_LICENSE_TYPE)
        return

    db.add(LicenseType(name=DEFAULT_LICENSE_TYPE, default_duration=365, description="One year license"))
    logger.info("Seeded license type=%s", DEFAULT_LICENSE_TYPE)


async def seed() -> None:
    """Seed the database with initial data.

    Idempotent: the admin user and the default license type are checked
    separately, so a partially seeded database is completed.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        await _seed_admin(db)
        await _seed_license_type(db)
        await db.commit()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
