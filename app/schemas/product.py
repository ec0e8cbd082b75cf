"""제품 및 라이선스 유형 Pydantic 요청/응답 스키마.

Product and license type Pydantic request/response schemas.
"""

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Product creation request schema."""

    name: str = Field(min_length=1, max_length=255)
    is_blocked: bool = False


class ProductUpdate(BaseModel):
    """Product update request schema (partial update, id in body)."""

    id: int
    name: str | None = Field(default=None, min_length=1, max_length=255)
    is_blocked: bool | None = None


class ProductResponse(BaseModel):
    id: int
    name: str
    is_blocked: bool


class LicenseTypeCreate(BaseModel):
    """License type creation request schema.

    Attributes:
        name: Type name, unique
        default_duration: Default validity in days, must be positive
        description: Optional description
    """

    name: str = Field(min_length=1, max_length=100)
    default_duration: int = Field(gt=0)
    description: str | None = None


class LicenseTypeUpdate(BaseModel):
    """License type update request schema (partial update, id in body)."""

    id: int
    name: str | None = Field(default=None, min_length=1, max_length=100)
    default_duration: int | None = Field(default=None, gt=0)
    description: str | None = None


class LicenseTypeResponse(BaseModel):
    id: int
    name: str
    default_duration: int
    description: str | None
