"""
Content API — Request Logging Middleware
==========================================

What:  One structured access-log line per HTTP request.
How:   Measures time from middleware entry to response, then logs method,
       path, status, duration, request ID and client IP. The level follows
       the status class so 5xx responses surface as errors.

Example:
    2026-01-15T12:00:00 [ERROR] content_api.access: POST /content/a.txt 500 3.2ms [1f0c2a9b] from 127.0.0.1

What we DON'T log: request bodies (file contents may be sensitive).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from content_api.middleware.request_id import request_id_var

logger = logging.getLogger("content_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Health checks are skipped; probes run every few seconds and would drown
    out the content traffic.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path == "/health":
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        # 5xx → ERROR, 4xx → WARNING, everything else → INFO
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
