"""라이선스 및 라이선스 이력 Pydantic 요청/응답 스키마.

License and license history Pydantic request/response schemas.
"""

from datetime import date

from pydantic import BaseModel, Field


class LicenseCreateRequest(BaseModel):
    """License issuance request schema.

    Attributes:
        product_id: Licensed product
        device_count: Maximum number of devices
        owner_id: Owning user
        license_type_id: License type
        duration: Validity in days; the license type's default when omitted
        description: Optional notes
    """

    product_id: int
    device_count: int = Field(default=1, gt=0)
    owner_id: int
    license_type_id: int
    duration: int | None = Field(default=None, gt=0)
    description: str | None = None


class LicenseUpdateRequest(BaseModel):
    """License update request schema (partial update, id in body).

    Setting is_blocked=True records a BLOCKED history entry, any other
    change records MODIFIED.
    """

    id: int
    product_id: int | None = None
    owner_id: int | None = None
    license_type_id: int | None = None
    user_id: int | None = None
    device_count: int | None = Field(default=None, gt=0)
    duration: int | None = Field(default=None, gt=0)
    first_activation_date: date | None = None
    ending_date: date | None = None
    is_blocked: bool | None = None
    description: str | None = None


class LicenseResponse(BaseModel):
    id: int
    code: str
    product_id: int
    owner_id: int
    license_type_id: int
    user_id: int | None
    first_activation_date: date | None
    ending_date: date | None
    is_blocked: bool
    device_count: int
    duration: int
    description: str | None


class LicenseHistoryRequest(BaseModel):
    """Internal license history save/update request.

    Built by the router from query parameters after the date is parsed.
    id is None on save and set on update.
    """

    id: int | None = None
    license_id: int
    user_id: int
    status: str
    description: str
    change_date: date


class LicenseHistoryResponse(BaseModel):
    id: int
    license_id: int
    user_id: int
    status: str
    description: str
    change_date: date


class LicenseHistoryParams(BaseModel):
    """License history save parameters, read from the query string or form body.

    Field names follow the camelCase wire names (licenseId, userId, changeDate).
    The date stays a string so the router can answer a malformed one with its
    own message.
    """

    license_id: int = Field(alias="licenseId")
    user_id: int = Field(alias="userId")
    status: str
    description: str
    change_date: str = Field(alias="changeDate")


class LicenseHistoryUpdateParams(BaseModel):
    """License history update parameters; the date travels as changeDateStr."""

    id: int
    license_id: int = Field(alias="licenseId")
    user_id: int = Field(alias="userId")
    status: str
    description: str
    change_date_str: str = Field(alias="changeDateStr")
