"""관리자 기기 라우터: 기기 CRUD 및 등록/갱신 엔드포인트.

Admin Device Router: device CRUD and register-or-update endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.license import Device
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.device import DeviceRegisterRequest, DeviceRequest, DeviceResponse
from app.services.device_service import device_service
from app.services.user_service import user_service
from app.utils.exceptions import bad_request_on_error

router: APIRouter = APIRouter()


@router.post("", response_model=DeviceResponse, status_code=201)
async def save_device(
    data: DeviceRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> DeviceResponse:
    """Register a new device for a user."""
    async with bad_request_on_error(db, "Error saving device"):
        result: DeviceResponse = await device_service.save(db, data)
        await db.commit()
    return result


@router.post("/register", response_model=DeviceResponse)
async def register_device(
    data: DeviceRegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> DeviceResponse:
    """Return the device matching name + MAC + user, creating it when absent."""
    async with bad_request_on_error(db, "Error registering device"):
        owner: User = await user_service.get_user(db, data.user_id)
        device: Device = await device_service.register_or_update_device(
            db, data.name, data.mac_address, owner
        )
        await db.commit()
    return DeviceResponse(
        id=device.id, name=device.name, mac_address=device.mac_address, user_id=device.user_id
    )


@router.get("", response_model=list[DeviceResponse])
async def list_devices(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[DeviceResponse]:
    async with bad_request_on_error(db, "Error fetching devices"):
        return await device_service.get_all(db)


@router.put("", response_model=DeviceResponse)
async def update_device(
    data: DeviceRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> DeviceResponse:
    """Update a device; the body must carry its id."""
    async with bad_request_on_error(db, "Error updating device"):
        result: DeviceResponse = await device_service.update(db, data)
        await db.commit()
    return result


@router.delete("", response_model=MessageResponse)
async def delete_device(
    device_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    async with bad_request_on_error(db, "Error deleting device"):
        await device_service.delete(db, device_id)
        await db.commit()
    return MessageResponse(message="Device deleted")
