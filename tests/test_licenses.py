"""License API tests.

Issuance with generated codes and default durations, partial updates,
deletion, and the history entries each change leaves behind.
"""

from httpx import AsyncClient
from sqlalchemy import select

from app.models import LicenseHistory
from tests.conftest import auth_header

URL = "/api/v1/admin/licenses"


async def _history(db, license_id: int) -> list[LicenseHistory]:
    result = await db.execute(
        select(LicenseHistory).where(LicenseHistory.license_id == license_id).order_by(LicenseHistory.id)
    )
    return list(result.scalars().all())


class TestLicenseCreate:

    async def test_create_license(self, client: AsyncClient, product, license_type, regular_user, admin_token, db):
        res = await client.post(URL, json={
            "product_id": product.id,
            "device_count": 3,
            "owner_id": regular_user.id,
            "license_type_id": license_type.id,
            "duration": 30,
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["code"]
        assert data["duration"] == 30
        assert data["device_count"] == 3
        assert data["is_blocked"] is False
        assert data["first_activation_date"] is None

        history = await _history(db, data["id"])
        assert len(history) == 1
        assert history[0].status == "CREATED"
        assert history[0].user_id == regular_user.id

    async def test_create_uses_default_duration(self, client: AsyncClient, product, license_type, regular_user, admin_token):
        res = await client.post(URL, json={
            "product_id": product.id,
            "owner_id": regular_user.id,
            "license_type_id": license_type.id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        assert res.json()["duration"] == license_type.default_duration

    async def test_codes_are_unique(self, client: AsyncClient, product, license_type, regular_user, admin_token):
        body = {"product_id": product.id, "owner_id": regular_user.id, "license_type_id": license_type.id}
        first = await client.post(URL, json=body, headers=auth_header(admin_token))
        second = await client.post(URL, json=body, headers=auth_header(admin_token))
        assert first.json()["code"] != second.json()["code"]

    async def test_create_blocked_product(self, client: AsyncClient, blocked_product, license_type, regular_user, admin_token):
        res = await client.post(URL, json={
            "product_id": blocked_product.id,
            "owner_id": regular_user.id,
            "license_type_id": license_type.id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert "blocked" in res.json()["detail"]

    async def test_create_unknown_owner(self, client: AsyncClient, product, license_type, admin_token):
        res = await client.post(URL, json={
            "product_id": product.id,
            "owner_id": 404,
            "license_type_id": license_type.id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert res.json()["detail"].startswith("Error creating license: ")


class TestLicenseUpdate:

    async def test_block_license_records_history(self, client: AsyncClient, license_, admin_user, admin_token, db):
        res = await client.put(URL, json={"id": license_.id, "is_blocked": True}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["is_blocked"] is True

        history = await _history(db, license_.id)
        assert [h.status for h in history] == ["BLOCKED"]
        assert history[0].user_id == admin_user.id

    async def test_modify_license_records_history(self, client: AsyncClient, license_, admin_token, db):
        res = await client.put(URL, json={
            "id": license_.id, "device_count": 5, "ending_date": "2025-12-31",
        }, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["device_count"] == 5
        assert res.json()["ending_date"] == "2025-12-31"

        history = await _history(db, license_.id)
        assert history[-1].status == "MODIFIED"
        assert "device_count" in history[-1].description

    async def test_update_unknown_product(self, client: AsyncClient, license_, admin_token):
        res = await client.put(URL, json={"id": license_.id, "product_id": 999}, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_update_nonexistent(self, client: AsyncClient, admin_token):
        res = await client.put(URL, json={"id": 999, "device_count": 2}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert res.json()["detail"].startswith("Error updating license: ")


class TestLicenseListDelete:

    async def test_list_licenses(self, client: AsyncClient, license_, admin_token):
        res = await client.get(URL, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert [lic["code"] for lic in res.json()] == [license_.code]

    async def test_delete_license_removes_history(self, client: AsyncClient, history_entry, license_, admin_token, db):
        res = await client.delete(URL, params={"id": license_.id}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"message": "License deleted"}
        assert await _history(db, license_.id) == []

    async def test_delete_nonexistent(self, client: AsyncClient, admin_token):
        res = await client.delete(URL, params={"id": 999}, headers=auth_header(admin_token))
        assert res.status_code == 400
