"""
Structured JSON request logging middleware.

Every request/response cycle is logged as a single structured event with
method, path, query, status code, duration and a unique request id. The
request id is bound into structlog's context variables so page-set log
events emitted while handling the request carry it too.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from infrastructure.observability.logging_config import get_logger

logger = get_logger("pagewindow.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every HTTP request/response with structured fields.

    Captured fields:
        - ``request_id``  -- unique UUID for the request
        - ``method``      -- HTTP method
        - ``path``        -- request path
        - ``query``       -- raw query string (page / per-page params)
        - ``status_code`` -- response status
        - ``duration_ms`` -- wall-clock duration in milliseconds
        - ``client_ip``   -- client IP address
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            self._log_request(
                request=request,
                status_code=500,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                level="error",
            )
            raise

        response.headers["X-Request-ID"] = request_id

        if response.status_code >= 500:
            level = "error"
        elif response.status_code >= 400:
            level = "warning"
        else:
            level = "info"

        self._log_request(
            request=request,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            level=level,
        )
        return response

    @staticmethod
    def _log_request(
        *,
        request: Request,
        status_code: int,
        duration_ms: float,
        level: str = "info",
    ) -> None:
        event_data: dict[str, Any] = {
            "method": request.method,
            "path": str(request.url.path),
            "query": str(request.url.query) if request.url.query else None,
            "status_code": status_code,
            "duration_ms": duration_ms,
            "client_ip": request.client.host if request.client else None,
        }

        log_method = getattr(logger, level, logger.info)
        log_method("http_request", **event_data)
