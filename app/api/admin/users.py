"""관리자 사용자 라우터: 사용자 계정 관리 엔드포인트.

Admin User Router: user account management endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.user_service import user_service
from app.utils.exceptions import bad_request_on_error

router: APIRouter = APIRouter()


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    data: UserCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> UserResponse:
    """Create a user account; the password is stored as a bcrypt hash."""
    async with bad_request_on_error(db, "Error saving user"):
        result: UserResponse = await user_service.create_user(db, data)
        await db.commit()
    return result


@router.get("", response_model=list[UserResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[UserResponse]:
    async with bad_request_on_error(db, "Error fetching users"):
        return await user_service.list_users(db)


@router.put("", response_model=UserResponse)
async def update_user(
    data: UserUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> UserResponse:
    async with bad_request_on_error(db, "Error updating user"):
        result: UserResponse = await user_service.update_user(db, data)
        await db.commit()
    return result


@router.delete("", response_model=MessageResponse)
async def delete_user(
    user_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    async with bad_request_on_error(db, "Error deleting user"):
        await user_service.delete_user(db, user_id)
        await db.commit()
    return MessageResponse(message="User deleted")
