"""
Site Content API — Access Log Middleware
=========================================

What:  One log line per HTTP request on the `content_api.access` logger.
How:   Times the downstream call with perf_counter and picks the level from
       the status code: 5xx ERROR, 4xx WARNING, everything else INFO.
When:  Runs inside RequestIDMiddleware, so the request id is already set.

Logged:     method, path, status, duration, request id, client IP
Not logged: request bodies (contact form PII, passwords) and headers
            (session cookie, Authorization)

Example line:
    2025-01-15T12:00:00 [WARNING] content_api.access: PUT /api/admin/ticker/3 401 2.4ms [a1b2c3d4] from 10.0.0.7
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from content_api.config import settings
from content_api.middleware.request_id import request_id_var

logger = logging.getLogger("content_api.access")

QUIET_PATHS = {"/health"}


def client_ip_of(request: Request) -> str:
    """
    The visitor address used for rate limiting and access logs.

    Behind a proxy the socket peer is the proxy itself, so the first
    X-Forwarded-For entry and then X-Real-IP are preferred when
    TRUST_FORWARDED_HEADERS is on.
    """
    if settings.trust_forwarded_headers:
        forwarded = request.headers.get("x-forwarded-for", "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first
        real_ip = request.headers.get("x-real-ip", "").strip()
        if real_ip:
            return real_ip
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        # Health probes run every few seconds
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = request_id_var.get("")
        client_ip = client_ip_of(request)
        logger.log(
            log_level,
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
