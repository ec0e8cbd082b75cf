"""라이선스 서비스: 라이선스 발급 및 CRUD 비즈니스 로직.

License Service: license issuance and CRUD business logic.

Every change of a license is mirrored into the license history:
CREATED on issuance, BLOCKED when an update blocks the license,
MODIFIED for any other update.
"""

import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.license import License
from app.models.product import LicenseType, Product
from app.models.user import User
from app.repositories.license_repository import license_repository
from app.schemas.license import LicenseCreateRequest, LicenseResponse, LicenseUpdateRequest
from app.services.license_history_service import license_history_service
from app.services.product_service import license_type_service, product_service
from app.services.user_service import user_service
from app.utils.exceptions import BadRequestError, NotFoundError

STATUS_CREATED: str = "CREATED"
STATUS_MODIFIED: str = "MODIFIED"
STATUS_BLOCKED: str = "BLOCKED"


class LicenseService:
    """Service handling license business logic."""

    def _to_response(self, license_: License) -> LicenseResponse:
        return LicenseResponse(
            id=license_.id,
            code=license_.code,
            product_id=license_.product_id,
            owner_id=license_.owner_id,
            license_type_id=license_.license_type_id,
            user_id=license_.user_id,
            first_activation_date=license_.first_activation_date,
            ending_date=license_.ending_date,
            is_blocked=license_.is_blocked,
            device_count=license_.device_count,
            duration=license_.duration,
            description=license_.description,
        )

    async def _generate_code(self, db: AsyncSession) -> str:
        code: str = str(uuid.uuid4())
        while await license_repository.get_by_code(db, code) is not None:
            code = str(uuid.uuid4())
        return code

    async def get_license(self, db: AsyncSession, license_id: int) -> License:
        """Load a license or raise NotFoundError."""
        license_: License | None = await license_repository.get_by_id(db, license_id)
        if license_ is None:
            raise NotFoundError(f"License with id {license_id} not found")
        return license_

    async def create_license(
        self,
        db: AsyncSession,
        data: LicenseCreateRequest,
    ) -> LicenseResponse:
        """Issue a new license with a freshly generated activation code.

        The duration defaults to the license type's default_duration.
        A CREATED history entry is recorded for the owner.

        Args:
            db: Async database session
            data: License issuance request

        Returns:
            LicenseResponse: Issued license

        Raises:
            NotFoundError: Product, owner or license type not found
            BadRequestError: The product is blocked
        """
        product: Product = await product_service.get_product(db, data.product_id)
        if product.is_blocked:
            raise BadRequestError(f"Product '{product.name}' is blocked")
        owner: User = await user_service.get_user(db, data.owner_id)
        license_type: LicenseType = await license_type_service.get_license_type(db, data.license_type_id)

        duration: int = data.duration if data.duration is not None else license_type.default_duration
        license_: License = await license_repository.create(
            db,
            {
                "code": await self._generate_code(db),
                "product_id": product.id,
                "owner_id": owner.id,
                "license_type_id": license_type.id,
                "device_count": data.device_count,
                "duration": duration,
                "description": data.description,
                "is_blocked": False,
            },
        )
        await license_history_service.record(
            db, license_, owner, STATUS_CREATED, "License created"
        )
        return self._to_response(license_)

    async def get_all(self, db: AsyncSession) -> list[LicenseResponse]:
        licenses = await license_repository.get_all(db)
        return [self._to_response(lic) for lic in licenses]

    async def update(
        self,
        db: AsyncSession,
        data: LicenseUpdateRequest,
        actor: User,
    ) -> LicenseResponse:
        """Apply a partial update and record it in the history as done by actor.

        Raises:
            NotFoundError: License or any referenced entity not found
        """
        license_: License = await self.get_license(db, data.id)
        update_data: dict[str, Any] = data.model_dump(exclude_unset=True, exclude={"id"})

        # Validate references before touching the row
        if update_data.get("product_id") is not None:
            await product_service.get_product(db, update_data["product_id"])
        if update_data.get("owner_id") is not None:
            await user_service.get_user(db, update_data["owner_id"])
        if update_data.get("user_id") is not None:
            await user_service.get_user(db, update_data["user_id"])
        if update_data.get("license_type_id") is not None:
            await license_type_service.get_license_type(db, update_data["license_type_id"])

        newly_blocked: bool = data.is_blocked is True and not license_.is_blocked
        updated: License | None = await license_repository.update(db, license_.id, update_data)

        if newly_blocked:
            await license_history_service.record(
                db, updated, actor, STATUS_BLOCKED, "License blocked"
            )
        else:
            changed: str = ", ".join(sorted(update_data)) or "nothing"
            await license_history_service.record(
                db, updated, actor, STATUS_MODIFIED, f"License updated: {changed}"
            )
        return self._to_response(updated)

    async def delete(self, db: AsyncSession, license_id: int) -> None:
        """Delete a license together with its history."""
        if not await license_repository.delete(db, license_id):
            raise NotFoundError(f"License with id {license_id} not found")


# 싱글턴 인스턴스: Singleton instance
license_service: LicenseService = LicenseService()
