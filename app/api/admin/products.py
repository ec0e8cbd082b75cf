"""관리자 제품/라이선스 유형 라우터: 기준 데이터 CRUD 엔드포인트.

Admin Product and License Type Routers: reference data CRUD endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.product import (
    LicenseTypeCreate,
    LicenseTypeResponse,
    LicenseTypeUpdate,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from app.services.product_service import license_type_service, product_service
from app.utils.exceptions import bad_request_on_error

router: APIRouter = APIRouter()
license_types_router: APIRouter = APIRouter()


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    data: ProductCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> ProductResponse:
    async with bad_request_on_error(db, "Error saving product"):
        result: ProductResponse = await product_service.create_product(db, data)
        await db.commit()
    return result


@router.get("", response_model=list[ProductResponse])
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[ProductResponse]:
    async with bad_request_on_error(db, "Error fetching products"):
        return await product_service.list_products(db)


@router.put("", response_model=ProductResponse)
async def update_product(
    data: ProductUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> ProductResponse:
    async with bad_request_on_error(db, "Error updating product"):
        result: ProductResponse = await product_service.update_product(db, data)
        await db.commit()
    return result


@router.delete("", response_model=MessageResponse)
async def delete_product(
    product_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    async with bad_request_on_error(db, "Error deleting product"):
        await product_service.delete_product(db, product_id)
        await db.commit()
    return MessageResponse(message="Product deleted")


@license_types_router.post("", response_model=LicenseTypeResponse, status_code=201)
async def create_license_type(
    data: LicenseTypeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> LicenseTypeResponse:
    async with bad_request_on_error(db, "Error saving license type"):
        result: LicenseTypeResponse = await license_type_service.create_license_type(db, data)
        await db.commit()
    return result


@license_types_router.get("", response_model=list[LicenseTypeResponse])
async def list_license_types(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[LicenseTypeResponse]:
    async with bad_request_on_error(db, "Error fetching license types"):
        return await license_type_service.list_license_types(db)


@license_types_router.put("", response_model=LicenseTypeResponse)
async def update_license_type(
    data: LicenseTypeUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> LicenseTypeResponse:
    async with bad_request_on_error(db, "Error updating license type"):
        result: LicenseTypeResponse = await license_type_service.update_license_type(db, data)
        await db.commit()
    return result


@license_types_router.delete("", response_model=MessageResponse)
async def delete_license_type(
    license_type_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    async with bad_request_on_error(db, "Error deleting license type"):
        await license_type_service.delete_license_type(db, license_type_id)
        await db.commit()
    return MessageResponse(message="License type deleted")
