"""제품 및 라이선스 유형 서비스: 기준 데이터 CRUD.

Product and license type services: reference data CRUD.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.product import LicenseType, Product
from app.repositories.product_repository import license_type_repository, product_repository
from app.schemas.product import (
    LicenseTypeCreate,
    LicenseTypeResponse,
    LicenseTypeUpdate,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from app.utils.exceptions import DuplicateError, NotFoundError


class ProductService:
    """Service handling product business logic."""

    def _to_response(self, product: Product) -> ProductResponse:
        return ProductResponse(id=product.id, name=product.name, is_blocked=product.is_blocked)

    async def get_product(self, db: AsyncSession, product_id: int) -> Product:
        """Load a product or raise NotFoundError."""
        product: Product | None = await product_repository.get_by_id(db, product_id)
        if product is None:
            raise NotFoundError(f"Product with id {product_id} not found")
        return product

    async def list_products(self, db: AsyncSession) -> list[ProductResponse]:
        products = await product_repository.get_all(db)
        return [self._to_response(p) for p in products]

    async def create_product(self, db: AsyncSession, data: ProductCreate) -> ProductResponse:
        """Create a product.

        Raises:
            DuplicateError: A product with this name already exists
        """
        if await product_repository.exists(db, {"name": data.name}):
            raise DuplicateError("A product with this name already exists")
        product: Product = await product_repository.create(db, data.model_dump())
        return self._to_response(product)

    async def update_product(self, db: AsyncSession, data: ProductUpdate) -> ProductResponse:
        if data.name is not None and await product_repository.exists(
            db, {"name": data.name}, exclude_id=data.id
        ):
            raise DuplicateError("A product with this name already exists")
        update_data: dict[str, Any] = data.model_dump(exclude_unset=True, exclude={"id"})
        product: Product | None = await product_repository.update(db, data.id, update_data)
        if product is None:
            raise NotFoundError(f"Product with id {data.id} not found")
        return self._to_response(product)

    async def delete_product(self, db: AsyncSession, product_id: int) -> None:
        if not await product_repository.delete(db, product_id):
            raise NotFoundError(f"Product with id {product_id} not found")


class LicenseTypeService:
    """Service handling license type business logic."""

    def _to_response(self, license_type: LicenseType) -> LicenseTypeResponse:
        return LicenseTypeResponse(
            id=license_type.id,
            name=license_type.name,
            default_duration=license_type.default_duration,
            description=license_type.description,
        )

    async def get_license_type(self, db: AsyncSession, license_type_id: int) -> LicenseType:
        """Load a license type or raise NotFoundError."""
        license_type: LicenseType | None = await license_type_repository.get_by_id(db, license_type_id)
        if license_type is None:
            raise NotFoundError(f"License type with id {license_type_id} not found")
        return license_type

    async def list_license_types(self, db: AsyncSession) -> list[LicenseTypeResponse]:
        license_types = await license_type_repository.get_all(db)
        return [self._to_response(t) for t in license_types]

    async def create_license_type(
        self, db: AsyncSession, data: LicenseTypeCreate
    ) -> LicenseTypeResponse:
        if await license_type_repository.exists(db, {"name": data.name}):
            raise DuplicateError("A license type with this name already exists")
        license_type: LicenseType = await license_type_repository.create(db, data.model_dump())
        return self._to_response(license_type)

    async def update_license_type(
        self, db: AsyncSession, data: LicenseTypeUpdate
    ) -> LicenseTypeResponse:
        if data.name is not None and await license_type_repository.exists(
            db, {"name": data.name}, exclude_id=data.id
        ):
            raise DuplicateError("A license type with this name already exists")
        update_data: dict[str, Any] = data.model_dump(exclude_unset=True, exclude={"id"})
        license_type: LicenseType | None = await license_type_repository.update(db, data.id, update_data)
        if license_type is None:
            raise NotFoundError(f"License type with id {data.id} not found")
        return self._to_response(license_type)

    async def delete_license_type(self, db: AsyncSession, license_type_id: int) -> None:
        if not await license_type_repository.delete(db, license_type_id):
            raise NotFoundError(f"License type with id {license_type_id} not found")


# 싱글턴 인스턴스: Singleton instances
product_service: ProductService = ProductService()
license_type_service: LicenseTypeService = LicenseTypeService()
