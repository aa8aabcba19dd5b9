"""
Request logging middleware.
"""

import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from backoffice.core.shared.logger import get_logger

request_logger = get_logger("backoffice.http", {"component": "api"})

REQUEST_ID_HEADER = "X-Request-ID"
USER_ID_HEADER = "X-User-Id"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line when a request arrives and one when it completes, tagged
    with a request id that is echoed back in the response headers.
    """

    EXCLUDE_PATHS: tuple[str, ...] = (
        "/health",
        "/favicon.ico",
    )

    def _should_log(self, path: str) -> bool:
        return not any(path.startswith(exclude) for exclude in self.EXCLUDE_PATHS)

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = request_id

        if not self._should_log(request.url.path):
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        log = request_logger.with_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            user_id=request.headers.get(USER_ID_HEADER),
        )
        start_time = time.perf_counter()
        log.info(f"[{request_id}] --> {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            log.error(
                f"[{request_id}] <-- {request.method} {request.url.path} ERROR in {duration_ms:.2f}ms: {e}",
                duration_ms=round(duration_ms, 2),
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        message = f"[{request_id}] <-- {request.method} {request.url.path} {response.status_code} in {duration_ms:.2f}ms"
        if response.status_code >= 500:
            log.error(message, status=response.status_code, duration_ms=round(duration_ms, 2))
        elif response.status_code >= 400:
            log.warning(message, status=response.status_code, duration_ms=round(duration_ms, 2))
        else:
            log.info(message, status=response.status_code, duration_ms=round(duration_ms, 2))

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.2f}"
        return response
