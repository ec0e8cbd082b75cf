"""제품 및 라이선스 유형 ORM 모델.

Product and license type ORM models.

Tables:
    - products: Software products licenses are issued for
    - license_types: License tiers with a default validity period
"""

from sqlalchemy import String, Boolean, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Product(Base):
    """Product model.

    Attributes:
        id: Auto-increment primary key
        name: Product name, unique
        is_blocked: Blocked products cannot receive new licenses
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    is_blocked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    licenses = relationship("License", back_populates="product")


class LicenseType(Base):
    """License type model (e.g. "trial", "annual", "perpetual").

    Attributes:
        id: Auto-increment primary key
        name: Type name, unique
        default_duration: Default validity in days for licenses of this type
        description: Free-form description, optional
    """

    __tablename__ = "license_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    default_duration: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    licenses = relationship("License", back_populates="license_type")
