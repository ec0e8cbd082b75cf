"""Device API tests.

Save, list, update, delete and register-or-update of devices, which are
identified by name + MAC address + owning user.
"""

from httpx import AsyncClient
from sqlalchemy import func, select

from app.models import Device
from app.services.device_service import device_service
from tests.conftest import auth_header

URL = "/api/v1/admin/devices"


class TestDeviceSave:

    async def test_save_device(self, client: AsyncClient, regular_user, admin_token):
        res = await client.post(URL, json={
            "name": "office-pc",
            "mac_address": "AA:BB:CC:DD:EE:FF",
            "user_id": regular_user.id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "office-pc"
        assert data["mac_address"] == "AA:BB:CC:DD:EE:FF"
        assert data["user_id"] == regular_user.id

    async def test_save_duplicate_identity(self, client: AsyncClient, device, admin_token):
        res = await client.post(URL, json={
            "name": device.name,
            "mac_address": device.mac_address,
            "user_id": device.user_id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert res.json()["detail"].startswith("Error saving device: ")

    async def test_same_mac_for_other_user_allowed(self, client: AsyncClient, device, admin_user, admin_token):
        res = await client.post(URL, json={
            "name": device.name,
            "mac_address": device.mac_address,
            "user_id": admin_user.id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 201

    async def test_save_unknown_user(self, client: AsyncClient, admin_token):
        res = await client.post(URL, json={
            "name": "ghost", "mac_address": "00:00:00:00:00:01", "user_id": 555,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert "555" in res.json()["detail"]

    async def test_save_non_admin_forbidden(self, client: AsyncClient, regular_user, user_token):
        res = await client.post(URL, json={
            "name": "mine", "mac_address": "00:00:00:00:00:02", "user_id": regular_user.id,
        }, headers=auth_header(user_token))
        assert res.status_code == 403


class TestDeviceRegister:

    async def test_register_is_idempotent(self, client: AsyncClient, regular_user, admin_token, db):
        body = {"name": "tablet", "mac_address": "10:20:30:40:50:60", "user_id": regular_user.id}
        first = await client.post(f"{URL}/register", json=body, headers=auth_header(admin_token))
        second = await client.post(f"{URL}/register", json=body, headers=auth_header(admin_token))
        assert first.status_code == 200
        assert second.status_code == 200
        assert first.json()["id"] == second.json()["id"]

        count = (await db.execute(select(func.count()).select_from(Device))).scalar()
        assert count == 1

    async def test_register_returns_existing(self, client: AsyncClient, device, admin_token):
        res = await client.post(f"{URL}/register", json={
            "name": device.name, "mac_address": device.mac_address, "user_id": device.user_id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["id"] == device.id


class TestDeviceReadUpdateDelete:

    async def test_list_devices(self, client: AsyncClient, device, admin_token):
        res = await client.get(URL, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert [d["id"] for d in res.json()] == [device.id]

    async def test_update_device(self, client: AsyncClient, device, admin_token):
        res = await client.put(URL, json={
            "id": device.id,
            "name": "alice-desktop",
            "mac_address": device.mac_address,
            "user_id": device.user_id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["name"] == "alice-desktop"

    async def test_update_without_id(self, client: AsyncClient, device, admin_token):
        res = await client.put(URL, json={
            "name": "x", "mac_address": device.mac_address, "user_id": device.user_id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert "id is required" in res.json()["detail"]

    async def test_update_nonexistent(self, client: AsyncClient, regular_user, admin_token):
        res = await client.put(URL, json={
            "id": 321, "name": "x", "mac_address": "00:00:00:00:00:03", "user_id": regular_user.id,
        }, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert res.json()["detail"].startswith("Error updating device: ")

    async def test_delete_device(self, client: AsyncClient, device, admin_token):
        res = await client.delete(URL, params={"id": device.id}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"message": "Device deleted"}

    async def test_delete_nonexistent(self, client: AsyncClient, admin_token):
        res = await client.delete(URL, params={"id": 9999}, headers=auth_header(admin_token))
        assert res.status_code == 400
        assert res.json()["detail"].startswith("Error deleting device: ")


class TestDeviceLookup:

    async def test_find_device_by_info(self, device, regular_user, db):
        found = await device_service.find_device_by_info(db, device.name, device.mac_address, regular_user)
        assert found is not None
        assert found.id == device.id

    async def test_find_device_by_info_other_mac(self, device, regular_user, db):
        found = await device_service.find_device_by_info(db, device.name, "FF:FF:FF:FF:FF:FF", regular_user)
        assert found is None

    async def test_find_device_by_id(self, device, db):
        assert (await device_service.find_device_by_id(db, device.id)).name == device.name
        assert await device_service.find_device_by_id(db, 9999) is None
