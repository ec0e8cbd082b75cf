"""기기 Pydantic 요청/응답 스키마.

Device Pydantic request/response schemas.
"""

from pydantic import BaseModel, Field


class DeviceRequest(BaseModel):
    """Device save/update request schema.

    The same shape serves both operations: id is ignored on save
    and required on update.

    Attributes:
        id: Device id (update only)
        name: Device display name
        mac_address: MAC address, e.g. "00:1A:2B:3C:4D:5E"
        user_id: Owning user id
    """

    id: int | None = None
    name: str = Field(min_length=1, max_length=255)
    mac_address: str = Field(min_length=1, max_length=17)
    user_id: int


class DeviceRegisterRequest(BaseModel):
    """Register-or-update request: identifies a device by name, MAC and user."""

    name: str = Field(min_length=1, max_length=255)
    mac_address: str = Field(min_length=1, max_length=17)
    user_id: int


class DeviceResponse(BaseModel):
    id: int
    name: str
    mac_address: str
    user_id: int
