"""FastAPI 의존성 주입 모듈: 인증, 권한 검사, 쿼리/폼 파라미터 바인딩.

FastAPI dependency injection module: authentication, authorization and
query-or-form parameter binding.

Authentication Flow:
    1. Client sends an Authorization: Bearer <token> header
    2. HTTPBearer extracts the token
    3. decode_token() verifies the JWT and returns the payload
    4. The user is loaded from the DB using the payload "sub" field
    5. The user's active status is verified

Authorization Flow (require_role):
    1. User authenticated via get_current_user
    2. The user's role is checked against the allowed roles
    3. 403 Forbidden when the role is not allowed

Parameter Binding (bind_params):
    Query string and form body parameters are merged and validated into a
    pydantic schema, so clients may send either encoding.
"""

from typing import Annotated, Callable, Awaitable, TypeVar

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import User, UserRole
from app.utils.jwt import decode_token

security: HTTPBearer = HTTPBearer()

ParamsModel = TypeVar("ParamsModel", bound=BaseModel)

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """Decode the JWT from the Authorization header and return the authenticated user.

    Args:
        credentials: Bearer token credentials from header
        db: Async database session

    Returns:
        User: Authenticated user ORM instance

    Raises:
        HTTPException(401): Invalid or expired token, or user missing/inactive
    """
    try:
        payload: dict = decode_token(credentials.credentials)
        # Reject refresh tokens used as access tokens
        if payload.get("type") != "access":
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token type")
        user_id: str | None = payload.get("sub")
        if user_id is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
        user_pk: int = int(user_id)
    except HTTPException:
        raise
    except (jwt.InvalidTokenError, KeyError, ValueError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token")

    user: User | None = await db.get(User, user_pk)

    if user is None or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found or inactive")

    return user


def require_role(*roles: UserRole) -> Callable[..., Awaitable[User]]:
    """Dependency factory enforcing that the current user has one of the given roles.

    Args:
        roles: Allowed application roles

    Returns:
        FastAPI dependency function that returns the User or raises 403
    """
    allowed: set[str] = {r.value for r in roles}

    async def _check(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        if current_user.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return current_user
    return _check


# 관리자 API용 역할 의존성 (Pre-configured role dependency for the admin API)
require_admin = require_role(UserRole.ADMIN)


async def request_params(request: Request) -> dict[str, str]:
    """Collect plain parameters from the query string and a form body.

    Form fields override query parameters of the same name. Uploaded files
    are ignored.
    """
    params: dict[str, str] = dict(request.query_params)
    if request.headers.get("content-type", "").startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        params.update({key: value for key, value in form.items() if isinstance(value, str)})
    return params


def bind_params(model: type[ParamsModel]) -> Callable[..., Awaitable[ParamsModel]]:
    """Dependency factory validating query-or-form parameters into a schema.

    Validation failures surface as RequestValidationError, so they get the
    same 400 answer as any other malformed request.

    Args:
        model: Pydantic schema whose field aliases are the wire names

    Returns:
        FastAPI dependency function returning a populated model instance
    """

    async def _bind(
        params: Annotated[dict[str, str], Depends(request_params)],
    ) -> ParamsModel:
        try:
            return model.model_validate(params)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors()) from exc
    return _bind
