"""
BlogAPI Backend: Request Logging Middleware
============================================

What:  One log line per HTTP request with method, path, status and duration.
How:   Measures the time around `call_next`, picks the log level from the
       status code and attaches the fields as `extra` for structured handlers.
When:  Runs inside RequestIDMiddleware, so the request id is available.

Logged:      method, path, status, duration, client IP, request id
Not logged:  request or response bodies (post content may be personal data)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from blogapi.middleware.request_id import request_id_var

logger = logging.getLogger("blogapi.access")

# Probed every few seconds by orchestrators
UNLOGGED_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs the outcome and duration of every request except health checks."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
