"""User management API tests."""

from datetime import date

from httpx import AsyncClient
from sqlalchemy import func, select

from app.models import LicenseHistory, User
from app.utils.password import hash_password
from tests.conftest import auth_header, persist

URL = "/api/v1/admin/users"


class TestUserCreate:

    async def test_create_user(self, client: AsyncClient, admin_token):
        res = await client.post(URL, json={
            "username": "bob", "password": "s3cret!", "email": "bob@test.com",
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["username"] == "bob"
        assert data["role"] == "USER"
        assert data["is_active"] is True
        assert "password" not in data
        assert "password_hash" not in data

    async def test_create_admin(self, client: AsyncClient, admin_token):
        res = await client.post(URL, json={
            "username": "root", "password": "pw", "role": "ADMIN",
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        assert res.json()["role"] == "ADMIN"

    async def test_create_duplicate_username(self, client: AsyncClient, regular_user, admin_token):
        res = await client.post(URL, json={
            "username": regular_user.username, "password": "pw",
        }, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert res.json()["detail"] == "Error saving user: Username already exists"

    async def test_create_user_non_admin(self, client: AsyncClient, user_token):
        res = await client.post(URL, json={"username": "eve", "password": "pw"}, headers=auth_header(user_token))
        assert res.status_code == 403


class TestUserUpdateDelete:

    async def test_list_users(self, client: AsyncClient, admin_user, regular_user, admin_token):
        res = await client.get(URL, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert [u["username"] for u in res.json()] == ["admin", "alice"]

    async def test_deactivate_user(self, client: AsyncClient, regular_user, admin_token):
        res = await client.put(URL, json={"id": regular_user.id, "is_active": False}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["is_active"] is False
        assert res.json()["username"] == regular_user.username

    async def test_change_password_allows_login(self, client: AsyncClient, regular_user, admin_token):
        res = await client.put(URL, json={"id": regular_user.id, "password": "new-pass"}, headers=auth_header(admin_token))
        assert res.status_code == 200

        login = await client.post("/api/v1/auth/login", json={"username": "alice", "password": "new-pass"})
        assert login.status_code == 200

    async def test_update_email_taken(self, client: AsyncClient, admin_user, regular_user, admin_token):
        res = await client.put(URL, json={
            "id": regular_user.id, "email": admin_user.email,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_delete_user(self, client: AsyncClient, regular_user, admin_token):
        res = await client.delete(URL, params={"id": regular_user.id}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"message": "User deleted"}

    async def test_delete_nonexistent(self, client: AsyncClient, admin_token):
        res = await client.delete(URL, params={"id": 12345}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert res.json()["detail"] == "Error deleting user: User with id 12345 not found"

    async def test_delete_license_owner_rejected(self, client: AsyncClient, license_, regular_user, admin_token):
        res = await client.delete(URL, params={"id": regular_user.id}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert res.json()["detail"] == f"Error deleting user: User with id {regular_user.id} still owns licenses"

    async def test_delete_history_author_keeps_audit_trail(
        self, client: AsyncClient, session_factory, license_, admin_user, admin_token, db
    ):
        operator = await persist(session_factory, User(
            username="operator", password_hash=hash_password("op-pass"), role="ADMIN",
        ))
        await persist(session_factory, LicenseHistory(
            license_id=license_.id,
            user_id=operator.id,
            status="BLOCKED",
            description="Blocked by operator",
            change_date=date(2024, 4, 2),
        ))

        res = await client.delete(URL, params={"id": operator.id}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert "referenced by license history" in res.json()["detail"]

        count = (await db.execute(
            select(func.count()).select_from(LicenseHistory).where(LicenseHistory.user_id == operator.id)
        )).scalar()
        assert count == 1
        assert await db.get(User, operator.id) is not None
