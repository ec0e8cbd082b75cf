"""라이선스 및 라이선스 이력 리포지토리.

License and license history repositories.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.license import License, LicenseHistory
from app.repositories.base import BaseRepository


class LicenseRepository(BaseRepository[License]):
    """Repository handling database queries for the licenses table."""

    def __init__(self) -> None:
        super().__init__(License)

    async def get_by_code(self, db: AsyncSession, code: str) -> License | None:
        """Retrieve a license by its activation code."""
        query: Select = select(License).where(License.code == code)
        result = await db.execute(query)
        return result.scalar_one_or_none()


class LicenseHistoryRepository(BaseRepository[LicenseHistory]):
    """Repository handling database queries for the license_histories table."""

    def __init__(self) -> None:
        super().__init__(LicenseHistory)

    async def get_by_license(
        self,
        db: AsyncSession,
        license_id: int,
    ) -> list[LicenseHistory]:
        """Retrieve the audit trail of one license, oldest first."""
        query: Select = (
            select(LicenseHistory)
            .where(LicenseHistory.license_id == license_id)
            .order_by(LicenseHistory.change_date, LicenseHistory.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스: Singleton instances
license_repository: LicenseRepository = LicenseRepository()
license_history_repository: LicenseHistoryRepository = LicenseHistoryRepository()
