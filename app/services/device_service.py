"""기기 서비스: 기기 등록 및 CRUD 비즈니스 로직.

Device Service: device registration and CRUD business logic.

A device is identified by (name, mac_address, user). Registration is
lookup-or-create on that triple, so repeating it never duplicates a device.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.license import Device
from app.models.user import User
from app.repositories.device_repository import device_repository
from app.schemas.device import DeviceRequest, DeviceResponse
from app.services.user_service import user_service
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError


class DeviceService:
    """Service handling device business logic."""

    def _to_response(self, device: Device) -> DeviceResponse:
        return DeviceResponse(
            id=device.id,
            name=device.name,
            mac_address=device.mac_address,
            user_id=device.user_id,
        )

    async def register_or_update_device(
        self,
        db: AsyncSession,
        name: str,
        mac_address: str,
        user: User,
    ) -> Device:
        """Return the device registered under (name, MAC, user), creating it if absent.

        Args:
            db: Async database session
            name: Device name
            mac_address: Device MAC address
            user: Owning user

        Returns:
            Device: Existing or newly created device
        """
        device: Device | None = await self.find_device_by_info(db, name, mac_address, user)
        if device is not None:
            return device
        return await device_repository.create(
            db, {"name": name, "mac_address": mac_address, "user_id": user.id}
        )

    async def find_device_by_info(
        self,
        db: AsyncSession,
        name: str,
        mac_address: str,
        user: User,
    ) -> Device | None:
        return await device_repository.get_by_info(db, name, mac_address, user.id)

    async def find_device_by_id(self, db: AsyncSession, device_id: int) -> Device | None:
        return await device_repository.get_by_id(db, device_id)

    async def save(self, db: AsyncSession, data: DeviceRequest) -> DeviceResponse:
        """Create a device from a request. Any id in the request is ignored.

        Raises:
            NotFoundError: The owning user does not exist
            DuplicateError: The user already has a device with this name and MAC
        """
        user: User = await user_service.get_user(db, data.user_id)
        if await self.find_device_by_info(db, data.name, data.mac_address, user) is not None:
            raise DuplicateError("Device with this name and MAC address is already registered")
        device: Device = await device_repository.create(
            db, {"name": data.name, "mac_address": data.mac_address, "user_id": user.id}
        )
        return self._to_response(device)

    async def get_all(self, db: AsyncSession) -> list[DeviceResponse]:
        devices = await device_repository.get_all(db)
        return [self._to_response(d) for d in devices]

    async def update(self, db: AsyncSession, data: DeviceRequest) -> DeviceResponse:
        """Overwrite name, MAC and owner of an existing device.

        Raises:
            BadRequestError: The request carries no id
            NotFoundError: Device or user not found
            DuplicateError: Another device already has this identity
        """
        if data.id is None:
            raise BadRequestError("Device id is required for update")
        device: Device | None = await self.find_device_by_id(db, data.id)
        if device is None:
            raise NotFoundError(f"Device with id {data.id} not found")

        user: User = await user_service.get_user(db, data.user_id)
        clash: Device | None = await self.find_device_by_info(db, data.name, data.mac_address, user)
        if clash is not None and clash.id != device.id:
            raise DuplicateError("Device with this name and MAC address is already registered")

        updated: Device | None = await device_repository.update(
            db,
            device.id,
            {"name": data.name, "mac_address": data.mac_address, "user_id": user.id},
        )
        return self._to_response(updated)

    async def delete(self, db: AsyncSession, device_id: int) -> None:
        if not await device_repository.delete(db, device_id):
            raise NotFoundError(f"Device with id {device_id} not found")


# 싱글턴 인스턴스: Singleton instance
device_service: DeviceService = DeviceService()
