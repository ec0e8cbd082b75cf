"""라이선스, 기기, 라이선스 이력 ORM 모델.

License, device and license history ORM models.

Tables:
    - licenses: Issued licenses (product + owner + type)
    - devices: MAC-identified endpoints registered to a user
    - license_histories: Audit trail of license status changes
"""

from datetime import date

from sqlalchemy import String, Boolean, Date, Integer, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class License(Base):
    """License model: grant of product usage rights.

    Attributes:
        id: Auto-increment primary key
        code: Unique activation key, generated on creation
        product_id: Licensed product FK
        owner_id: Owning user FK
        license_type_id: License type FK
        user_id: Activating user FK, set on first activation
        first_activation_date: Date of first activation, optional
        ending_date: Expiry date, optional until activation
        is_blocked: Blocked licenses cannot be activated
        device_count: Maximum number of devices
        duration: Validity period in days
        description: Free-form notes

    Relationships:
        histories: Audit trail (cascade delete)
    """

    __tablename__ = "licenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.id"), nullable=False)
    owner_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    license_type_id: Mapped[int] = mapped_column(Integer, ForeignKey("license_types.id"), nullable=False)
    user_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    first_activation_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    ending_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_blocked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    device_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    product = relationship("Product", back_populates="licenses")
    license_type = relationship("LicenseType", back_populates="licenses")
    owner = relationship("User", back_populates="owned_licenses", foreign_keys=[owner_id])
    user = relationship("User", foreign_keys=[user_id])
    histories = relationship("LicenseHistory", back_populates="license", cascade="all, delete-orphan")


class Device(Base):
    """Device model: a named, MAC-identified endpoint registered to a user.

    Constraints:
        uq_device_name_mac_user: (name, mac_address, user_id) identifies a device
    """

    __tablename__ = "devices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    mac_address: Mapped[str] = mapped_column(String(17), nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (
        UniqueConstraint("name", "mac_address", "user_id", name="uq_device_name_mac_user"),
    )

    user = relationship("User", back_populates="devices")


class LicenseHistory(Base):
    """License history model: one status change of a license.

    Attributes:
        id: Auto-increment primary key
        license_id: License FK (cascade on license delete)
        user_id: User who caused the change (no cascade; referenced users cannot be deleted)
        status: License status at the time of change (e.g. "CREATED", "BLOCKED")
        description: What happened
        change_date: Calendar date of the change
    """

    __tablename__ = "license_histories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    license_id: Mapped[int] = mapped_column(Integer, ForeignKey("licenses.id", ondelete="CASCADE"), nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    change_date: Mapped[date] = mapped_column(Date, nullable=False)

    license = relationship("License", back_populates="histories")
    user = relationship("User")
