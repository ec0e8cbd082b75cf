"""라이선스 이력 서비스: 라이선스 상태 변경 감사 이력.

License History Service: audit trail of license status changes.

Each entry ties a license and a user to a status, a description and the
calendar date of the change.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.license import License, LicenseHistory
from app.models.user import User
from app.repositories.license_repository import license_history_repository, license_repository
from app.schemas.license import LicenseHistoryRequest, LicenseHistoryResponse
from app.services.user_service import user_service
from app.utils.exceptions import BadRequestError, NotFoundError


class LicenseHistoryService:
    """Service handling license history business logic."""

    def _to_response(self, history: LicenseHistory) -> LicenseHistoryResponse:
        return LicenseHistoryResponse(
            id=history.id,
            license_id=history.license_id,
            user_id=history.user_id,
            status=history.status,
            description=history.description,
            change_date=history.change_date,
        )

    async def _get_license(self, db: AsyncSession, license_id: int) -> License:
        license_: License | None = await license_repository.get_by_id(db, license_id)
        if license_ is None:
            raise NotFoundError(f"License with id {license_id} not found")
        return license_

    async def record(
        self,
        db: AsyncSession,
        license_: License,
        user: User,
        status: str,
        description: str,
    ) -> LicenseHistory:
        """Append an entry dated today for an already loaded license and user."""
        return await license_history_repository.create(
            db,
            {
                "license_id": license_.id,
                "user_id": user.id,
                "status": status,
                "description": description,
                "change_date": date.today(),
            },
        )

    async def save(
        self,
        db: AsyncSession,
        data: LicenseHistoryRequest,
    ) -> LicenseHistoryResponse:
        """Create a history entry.

        Args:
            db: Async database session
            data: History request; id is ignored

        Returns:
            LicenseHistoryResponse: Created entry

        Raises:
            NotFoundError: License or user not found
        """
        license_: License = await self._get_license(db, data.license_id)
        user: User = await user_service.get_user(db, data.user_id)
        history: LicenseHistory = await license_history_repository.create(
            db,
            {
                "license_id": license_.id,
                "user_id": user.id,
                "status": data.status,
                "description": data.description,
                "change_date": data.change_date,
            },
        )
        return self._to_response(history)

    async def get_all(self, db: AsyncSession) -> list[LicenseHistoryResponse]:
        """List every entry in persistence order."""
        histories = await license_history_repository.get_all(db)
        return [self._to_response(h) for h in histories]

    async def get_by_license(
        self,
        db: AsyncSession,
        license_id: int,
    ) -> list[LicenseHistoryResponse]:
        await self._get_license(db, license_id)
        histories = await license_history_repository.get_by_license(db, license_id)
        return [self._to_response(h) for h in histories]

    async def update(
        self,
        db: AsyncSession,
        data: LicenseHistoryRequest,
    ) -> LicenseHistoryResponse:
        """Overwrite every field of an existing entry.

        Raises:
            BadRequestError: The request carries no id
            NotFoundError: Entry, license or user not found
        """
        if data.id is None:
            raise BadRequestError("License history id is required for update")
        existing: LicenseHistory | None = await license_history_repository.get_by_id(db, data.id)
        if existing is None:
            raise NotFoundError(f"License history with id {data.id} not found")

        license_: License = await self._get_license(db, data.license_id)
        user: User = await user_service.get_user(db, data.user_id)
        history: LicenseHistory | None = await license_history_repository.update(
            db,
            existing.id,
            {
                "license_id": license_.id,
                "user_id": user.id,
                "status": data.status,
                "description": data.description,
                "change_date": data.change_date,
            },
        )
        return self._to_response(history)

    async def delete(self, db: AsyncSession, history_id: int) -> None:
        if not await license_history_repository.delete(db, history_id):
            raise NotFoundError(f"License history with id {history_id} not found")


# 싱글턴 인스턴스: Singleton instance
license_history_service: LicenseHistoryService = LicenseHistoryService()
