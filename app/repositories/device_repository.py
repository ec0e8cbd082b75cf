"""기기 리포지토리: 기기 CRUD 및 식별 정보 조회.

Device Repository: CRUD and identity lookup for devices.

A device is identified by the (name, mac_address, user_id) triple,
mirrored by the uq_device_name_mac_user constraint.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.license import Device
from app.repositories.base import BaseRepository


class DeviceRepository(BaseRepository[Device]):
    """Repository handling database queries for the devices table."""

    def __init__(self) -> None:
        super().__init__(Device)

    async def get_by_info(
        self,
        db: AsyncSession,
        name: str,
        mac_address: str,
        user_id: int,
    ) -> Device | None:
        """Retrieve the device registered under name + MAC for a user.

        Args:
            db: Async database session
            name: Device name
            mac_address: Device MAC address
            user_id: Owning user id

        Returns:
            Device | None: Matching device or None
        """
        query: Select = select(Device).where(
            Device.name == name,
            Device.mac_address == mac_address,
            Device.user_id == user_id,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스: Singleton instance
device_repository: DeviceRepository = DeviceRepository()
