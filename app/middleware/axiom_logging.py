"""Axiom 요청 로깅 미들웨어.

Axiom request logging middleware for the admin API.

Every request to /api/v1 becomes one structured event in the configured
Axiom dataset: the admin resource touched (licenses, devices, ...), the
license id when one is involved, parameters, masked body, status code,
duration and the 400 message for failed operations.

Credentials (password, token, secret fields) are masked before shipping.
"""

import json
import logging
import re
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from app.config import settings

logger = logging.getLogger(__name__)

_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

_API_PREFIX = "/api/v1/"

# Keys that identify the license an operation is about
_LICENSE_KEYS = ("licenseId", "license_id")


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def resolve_resource(path: str) -> tuple[str, str | None]:
    """Split an API path into its area and resource.

    "/api/v1/admin/license-history/license/3" -> ("admin", "license-history")
    "/api/v1/auth/login" -> ("auth", "login")
    """
    parts = path[len(_API_PREFIX):].strip("/").split("/")
    area = parts[0]
    return area, parts[1] if len(parts) > 1 else None


def _find_license_id(*sources: dict[str, Any] | None) -> Any:
    for source in sources:
        if not isinstance(source, dict):
            continue
        for key in _LICENSE_KEYS:
            if source.get(key) is not None:
                return source[key]
    return None


def _read_detail(body: bytes) -> str:
    try:
        payload = json.loads(body)
        detail = payload.get("detail", payload) if isinstance(payload, dict) else payload
        if not isinstance(detail, str):
            detail = json.dumps(detail, ensure_ascii=False)
    except (json.JSONDecodeError, UnicodeDecodeError):
        detail = body.decode("utf-8", errors="replace")
    return detail[:500]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """Ships one Axiom event per API request.

    Inactive (pure pass-through) unless both AXIOM_API_TOKEN and
    AXIOM_DATASET are configured. Requests outside /api/v1 (health check,
    docs) are never logged.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._dataset: str = settings.AXIOM_DATASET
        self._client: AxiomClient | None = (
            AxiomClient(token=settings.AXIOM_API_TOKEN)
            if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET
            else None
        )

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self._client is None or not request.url.path.startswith(_API_PREFIX):
            return await call_next(request)

        started = time.perf_counter()
        area, resource = resolve_resource(request.url.path)
        params: dict[str, str] = dict(request.query_params)

        body: Any = None
        if request.method in ("POST", "PUT"):
            raw = await request.body()
            if raw:
                try:
                    body = mask_sensitive(json.loads(raw))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    body = "(non-json body)"

        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "area": area,
            "resource": resource,
            "status_code": 500,
        }
        license_id = _find_license_id(params, body)
        if license_id is not None:
            event["license_id"] = license_id
        if params:
            event["query_params"] = mask_sensitive(params)
        if body is not None:
            event["request_body"] = body

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code

            if response.status_code >= 400:
                content = b""
                async for chunk in response.body_iterator:
                    content += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _read_detail(content)

                # body_iterator is exhausted, so the response is rebuilt
                response = Response(
                    content=content,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            self._ship(event)

        return response

    def _ship(self, event: dict[str, Any]) -> None:
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            logger.warning("Axiom ingest failed for %s %s", event["method"], event["path"], exc_info=True)
