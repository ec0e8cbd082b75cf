"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.

Provides pre-configured HTTPException subclasses for common error patterns,
plus the boundary helper admin routers use to turn any failure into a 400.

Usage:
    from app.utils.exceptions import NotFoundError, bad_request_on_error
    raise NotFoundError("Device not found")

    async with bad_request_on_error(db, "Error saving device"):
        result = await device_service.save(db, data)
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession


class NotFoundError(HTTPException):
    """404 Not Found 예외: 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.

    Raised when a requested resource (user, license, device, etc.) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외: 고유 제약 조건 위반 시 사용.

    409 Conflict exception.

    Raised when attempting to create a resource that violates a uniqueness
    constraint (e.g. duplicate username, duplicate product name).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외: 권한이 부족할 때 사용.

    403 Forbidden exception.

    Raised when the authenticated user lacks the required role.

    Args:
        detail: 오류 메시지 (Error message, default: "Insufficient permissions")
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외: 인증 실패 시 사용.

    401 Unauthorized exception.

    Raised when authentication is missing, invalid, or expired.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외: 잘못된 요청 및 관리자 API 경계의 모든 실패.

    400 Bad Request exception.

    Raised when the request data is invalid beyond what Pydantic validation
    catches, and for every failure translated at the admin router boundary.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def describe_error(exc: Exception) -> str:
    """Human-readable text of an exception (HTTPException detail or str())."""
    if isinstance(exc, HTTPException):
        return str(exc.detail)
    return str(exc)


@asynccontextmanager
async def bad_request_on_error(db: AsyncSession, message: str) -> AsyncIterator[None]:
    """Translate any failure inside the block into a 400 response.

    Rolls back the session so the failed unit of work is discarded, then
    raises BadRequestError with "<message>: <error text>". No distinction is
    made between missing entities, invalid input and persistence errors.

    Args:
        db: Async database session used inside the block
        message: Context message prefixed to the error text
    """
    try:
        yield
    except Exception as exc:
        await db.rollback()
        raise BadRequestError(f"{message}: {describe_error(exc)}") from exc
