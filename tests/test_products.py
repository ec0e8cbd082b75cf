"""Product and license type API tests."""

from httpx import AsyncClient

from tests.conftest import auth_header

PRODUCTS_URL = "/api/v1/admin/products"
TYPES_URL = "/api/v1/admin/license-types"


class TestProducts:

    async def test_create_product(self, client: AsyncClient, admin_token):
        res = await client.post(PRODUCTS_URL, json={"name": "Backup Manager"}, headers=auth_header(admin_token))
        assert res.status_code == 201
        assert res.json()["name"] == "Backup Manager"
        assert res.json()["is_blocked"] is False

    async def test_create_duplicate_name(self, client: AsyncClient, product, admin_token):
        res = await client.post(PRODUCTS_URL, json={"name": product.name}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert "already exists" in res.json()["detail"]

    async def test_block_product(self, client: AsyncClient, product, admin_token):
        res = await client.put(
            PRODUCTS_URL, json={"id": product.id, "is_blocked": True}, headers=auth_header(admin_token)
        )
        assert res.status_code == 200
        assert res.json()["is_blocked"] is True
        assert res.json()["name"] == product.name

    async def test_list_and_delete(self, client: AsyncClient, product, admin_token):
        res = await client.get(PRODUCTS_URL, headers=auth_header(admin_token))
        assert [p["id"] for p in res.json()] == [product.id]

        res = await client.delete(PRODUCTS_URL, params={"id": product.id}, headers=auth_header(admin_token))
        assert res.status_code == 200

        res = await client.delete(PRODUCTS_URL, params={"id": product.id}, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_staff_forbidden(self, client: AsyncClient, user_token):
        res = await client.get(PRODUCTS_URL, headers=auth_header(user_token))
        assert res.status_code == 403


class TestLicenseTypes:

    async def test_create_license_type(self, client: AsyncClient, admin_token):
        res = await client.post(TYPES_URL, json={
            "name": "trial", "default_duration": 14,
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        assert res.json()["default_duration"] == 14
        assert res.json()["description"] is None

    async def test_create_non_positive_duration(self, client: AsyncClient, admin_token):
        res = await client.post(TYPES_URL, json={
            "name": "broken", "default_duration": 0,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_update_license_type(self, client: AsyncClient, license_type, admin_token):
        res = await client.put(TYPES_URL, json={
            "id": license_type.id, "default_duration": 730,
        }, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["default_duration"] == 730
        assert res.json()["name"] == license_type.name

    async def test_delete_type_in_use(self, client: AsyncClient, license_, license_type, admin_token):
        res = await client.delete(TYPES_URL, params={"id": license_type.id}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert res.json()["detail"].startswith("Error deleting license type: ")
