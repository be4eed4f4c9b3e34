"""
Request logging middleware.

Tags every request with a correlation ID and logs its outcome and duration.
"""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
RESPONSE_TIME_HEADER = "X-Response-Time-Ms"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and timing of each request.

    The correlation ID comes from the ``X-Correlation-ID`` header when the
    caller sends one and is echoed back on the response.
    """

    # Polled by load balancers and browsers; not worth a log line
    QUIET_PATHS: tuple[str, ...] = (
        "/health",
        "/docs",
        "/openapi.json",
        "/favicon.ico",
    )

    def _is_quiet(self, path: str) -> bool:
        return any(path.startswith(p) for p in self.QUIET_PATHS)

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8]
        request.state.correlation_id = correlation_id

        start_time = time.perf_counter()
        quiet = self._is_quiet(request.url.path)
        if not quiet:
            logger.info(f"[{correlation_id}] --> {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"[{correlation_id}] <-- {request.method} {request.url.path} ERROR in {duration_ms:.2f}ms: {e}")
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        if not quiet:
            level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                level,
                f"[{correlation_id}] <-- {request.method} {request.url.path} {response.status_code} in {duration_ms:.2f}ms",
            )

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}"
        return response
