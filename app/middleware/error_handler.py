"""요청 검증 오류 처리 모듈.

Request validation error handling.

Malformed or missing parameters (e.g. a non-numeric licenseId) are answered
with 400 and a readable message instead of FastAPI's default 422.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Render validation errors as "loc -> field: msg" pairs joined by "; "."""
    messages: list[str] = []
    for error in exc.errors():
        loc = " -> ".join(str(item) for item in error["loc"])
        messages.append(f"{loc}: {error['msg']}")
    return "; ".join(messages)


def add_error_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        detail = f"Invalid request parameters: {format_validation_errors(exc)}"
        logger.warning("%s %s: %s", request.method, request.url.path, detail)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})
