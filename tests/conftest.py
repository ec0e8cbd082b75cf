"""Test infrastructure: in-memory SQLite DB, session factory, and httpx client fixtures.

Each test gets a fresh in-memory database (aiosqlite + StaticPool) with the
schema created from the ORM metadata. The client opens a new session per
request like production does, so a rolled-back request never expires the
objects created by fixtures.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Device, License, LicenseHistory, LicenseType, Product, User, UserRole
from app.utils.jwt import create_access_token
from app.utils.password import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Engine, sessions, client
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Async engine bound to a fresh in-memory database with the schema applied."""
    eng = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    @event.listens_for(eng.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """A standalone session for asserting on persisted state."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI test client with get_db pointed at the test database."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def persist(factory: async_sessionmaker[AsyncSession], obj: Any) -> Any:
    """Insert an ORM object in its own committed session and return it loaded."""
    async with factory() as session:
        session.add(obj)
        await session.flush()
        await session.refresh(obj)
        await session.commit()
    return obj


# ---------------------------------------------------------------------------
# Data fixtures
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def admin_user(session_factory) -> User:
    return await persist(session_factory, User(
        username="admin",
        email="admin@test.com",
        password_hash=hash_password("admin123!"),
        role=UserRole.ADMIN.value,
    ))


@pytest_asyncio.fixture
async def regular_user(session_factory) -> User:
    return await persist(session_factory, User(
        username="alice",
        email="alice@test.com",
        password_hash=hash_password("alice123!"),
        role=UserRole.USER.value,
    ))


@pytest_asyncio.fixture
async def product(session_factory) -> Product:
    return await persist(session_factory, Product(name="Antivirus Pro", is_blocked=False))


@pytest_asyncio.fixture
async def blocked_product(session_factory) -> Product:
    return await persist(session_factory, Product(name="Legacy Suite", is_blocked=True))


@pytest_asyncio.fixture
async def license_type(session_factory) -> LicenseType:
    return await persist(session_factory, LicenseType(
        name="annual", default_duration=365, description="One year"
    ))


@pytest_asyncio.fixture
async def license_(session_factory, product, license_type, regular_user) -> License:
    return await persist(session_factory, License(
        code="TEST-CODE-0001",
        product_id=product.id,
        owner_id=regular_user.id,
        license_type_id=license_type.id,
        device_count=2,
        duration=365,
        is_blocked=False,
    ))


@pytest_asyncio.fixture
async def device(session_factory, regular_user) -> Device:
    return await persist(session_factory, Device(
        name="alice-laptop", mac_address="00:1A:2B:3C:4D:5E", user_id=regular_user.id
    ))


@pytest_asyncio.fixture
async def history_entry(session_factory, license_, regular_user) -> LicenseHistory:
    from datetime import date
    return await persist(session_factory, LicenseHistory(
        license_id=license_.id,
        user_id=regular_user.id,
        status="CREATED",
        description="License created",
        change_date=date(2024, 1, 10),
    ))


def make_token(user: User) -> str:
    """Build a JWT access token for a test user."""
    return create_access_token({"sub": str(user.id), "role": user.role})


@pytest.fixture
def admin_token(admin_user) -> str:
    return make_token(admin_user)


@pytest.fixture
def user_token(regular_user) -> str:
    return make_token(regular_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
