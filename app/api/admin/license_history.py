"""관리자 라이선스 이력 라우터: 라이선스 감사 이력 CRUD 엔드포인트.

Admin License History Router: CRUD endpoints for the license audit trail.

Parameters travel as query or form parameters with camelCase names, dates as
yyyy-MM-dd strings. Every failure is answered with 400 and a message
naming the failed operation followed by the underlying error.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import bind_params, require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.license import (
    LicenseHistoryParams,
    LicenseHistoryRequest,
    LicenseHistoryResponse,
    LicenseHistoryUpdateParams,
)
from app.services.license_history_service import license_history_service
from app.utils.dates import parse_date
from app.utils.exceptions import BadRequestError, bad_request_on_error

router: APIRouter = APIRouter()


@router.post("", response_model=LicenseHistoryResponse, status_code=201)
async def save_license_history(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
    params: Annotated[LicenseHistoryParams, Depends(bind_params(LicenseHistoryParams))],
) -> LicenseHistoryResponse:
    """Record a license status change.

    changeDate must be yyyy-MM-dd; the id is generated by the database.
    """
    try:
        parsed: date = parse_date(params.change_date)
    except ValueError as exc:
        raise BadRequestError(f"Invalid date format. Use yyyy-MM-dd: {exc}") from exc

    request = LicenseHistoryRequest(
        license_id=params.license_id,
        user_id=params.user_id,
        status=params.status,
        description=params.description,
        change_date=parsed,
    )
    async with bad_request_on_error(db, "Error saving license history"):
        result: LicenseHistoryResponse = await license_history_service.save(db, request)
        await db.commit()
    return result


@router.get("", response_model=list[LicenseHistoryResponse])
async def list_license_history(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[LicenseHistoryResponse]:
    """List all license history records in persistence order."""
    async with bad_request_on_error(db, "Error fetching license history"):
        return await license_history_service.get_all(db)


@router.get("/license/{license_id}", response_model=list[LicenseHistoryResponse])
async def list_license_history_for_license(
    license_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[LicenseHistoryResponse]:
    """List the audit trail of one license, oldest first."""
    async with bad_request_on_error(db, "Error fetching license history"):
        return await license_history_service.get_by_license(db, license_id)


@router.put("", response_model=LicenseHistoryResponse)
async def update_license_history(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
    params: Annotated[LicenseHistoryUpdateParams, Depends(bind_params(LicenseHistoryUpdateParams))],
) -> LicenseHistoryResponse:
    """Overwrite a license history record."""
    try:
        parsed: date = parse_date(params.change_date_str)
    except ValueError as exc:
        raise BadRequestError("Error: invalid date format. Use 'yyyy-MM-dd'.") from exc

    request = LicenseHistoryRequest(
        id=params.id,
        license_id=params.license_id,
        user_id=params.user_id,
        status=params.status,
        description=params.description,
        change_date=parsed,
    )
    async with bad_request_on_error(db, "Error updating license history"):
        result: LicenseHistoryResponse = await license_history_service.update(db, request)
        await db.commit()
    return result


@router.delete("", response_model=MessageResponse)
async def delete_license_history(
    history_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    """Delete a license history record."""
    async with bad_request_on_error(db, "Error deleting license history"):
        await license_history_service.delete(db, history_id)
        await db.commit()
    return MessageResponse(message="License history deleted")
