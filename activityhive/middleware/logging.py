"""
ActivityHive Backend — Request Logging Middleware
==================================================

What:  One access-log line per HTTP request.
How:   Measures the time from middleware entry to response, then logs
       method, path, status, duration, request ID and client IP. The
       timestamp comes from the logging formatter configured in main.py.

Example line:
    2024-01-15T12:00:00 [INFO] activityhive.access: GET /api/products 200 4.2ms [a1b2c3d4] from 127.0.0.1

Request bodies are never logged (orders carry names and phone numbers).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from activityhive.middleware.request_id import request_id_var

logger = logging.getLogger("activityhive.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request with a level chosen from the response status:

        5xx → ERROR
        4xx → WARNING
        else → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors are rendered by the outermost error handler;
            # record the request here so it still shows up in the access log.
            logger.error(
                "%s %s raised after %.1fms [%s] from %s",
                method,
                path,
                (time.perf_counter() - start_time) * 1000,
                rid,
                client_ip,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000

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
