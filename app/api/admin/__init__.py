"""관리자 API 라우터 패키지: 관리자 전용 엔드포인트를 모음.

Admin API Router package: aggregates all admin-only endpoints.

Every router here depends on require_admin.

Included routers:
    - users: User account management
    - products: Product management
    - license_types: License type management
    - licenses: License issuance and management
    - devices: Device registration and management
    - license_history: License status audit trail
"""

from fastapi import APIRouter

from app.api.admin.users import router as users_router
from app.api.admin.products import router as products_router
from app.api.admin.products import license_types_router
from app.api.admin.licenses import router as licenses_router
from app.api.admin.devices import router as devices_router
from app.api.admin.license_history import router as license_history_router

admin_router: APIRouter = APIRouter()

admin_router.include_router(users_router, prefix="/users", tags=["Users"])
admin_router.include_router(products_router, prefix="/products", tags=["Products"])
admin_router.include_router(license_types_router, prefix="/license-types", tags=["License Types"])
admin_router.include_router(licenses_router, prefix="/licenses", tags=["Licenses"])
admin_router.include_router(devices_router, prefix="/devices", tags=["Devices"])
admin_router.include_router(license_history_router, prefix="/license-history", tags=["License History"])
