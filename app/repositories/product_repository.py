"""제품 및 라이선스 유형 리포지토리.

Product and license type repositories.
"""

from app.models.product import LicenseType, Product
from app.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository handling database queries for the products table."""

    def __init__(self) -> None:
        super().__init__(Product)


class LicenseTypeRepository(BaseRepository[LicenseType]):
    """Repository handling database queries for the license_types table."""

    def __init__(self) -> None:
        super().__init__(LicenseType)


# 싱글턴 인스턴스: Singleton instances
product_repository: ProductRepository = ProductRepository()
license_type_repository: LicenseTypeRepository = LicenseTypeRepository()
