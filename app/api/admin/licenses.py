"""관리자 라이선스 라우터: 라이선스 발급 및 CRUD 엔드포인트.

Admin License Router: license issuance and CRUD endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.license import LicenseCreateRequest, LicenseResponse, LicenseUpdateRequest
from app.services.license_service import license_service
from app.utils.exceptions import bad_request_on_error

router: APIRouter = APIRouter()


@router.post("", response_model=LicenseResponse, status_code=201)
async def create_license(
    data: LicenseCreateRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> LicenseResponse:
    """Issue a license with a generated activation code."""
    async with bad_request_on_error(db, "Error creating license"):
        result: LicenseResponse = await license_service.create_license(db, data)
        await db.commit()
    return result


@router.get("", response_model=list[LicenseResponse])
async def list_licenses(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[LicenseResponse]:
    async with bad_request_on_error(db, "Error fetching licenses"):
        return await license_service.get_all(db)


@router.put("", response_model=LicenseResponse)
async def update_license(
    data: LicenseUpdateRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> LicenseResponse:
    """Partially update a license; the change is recorded as done by the caller."""
    async with bad_request_on_error(db, "Error updating license"):
        result: LicenseResponse = await license_service.update(db, data, current_user)
        await db.commit()
    return result


@router.delete("", response_model=MessageResponse)
async def delete_license(
    license_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    async with bad_request_on_error(db, "Error deleting license"):
        await license_service.delete(db, license_id)
        await db.commit()
    return MessageResponse(message="License deleted")
