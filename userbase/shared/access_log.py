"""
Access log middleware.

- Adds an X-Request-ID header to responses (reusing any incoming one)
- Logs method, path, status, duration and request id per request
- Logs the error message the error pipeline stored on request.state
- Does not log request/response bodies to avoid leaking passwords
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("userbase.access")

REQUEST_ID_HEADER = "X-Request-ID"


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request, with the error message when there is one."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.monotonic()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        response = await call_next(request)

        duration_ms = int((time.monotonic() - start) * 1000)
        error_message = getattr(request.state, "error_message", None)
        extra = {
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": duration_ms,
            "client_ip": request.client.host if request.client else None,
            "request_id": request_id,
            "error_message": error_message,
        }
        if error_message:
            logger.info(
                "%s %s %d %dms - %s",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                error_message,
                extra=extra,
            )
        else:
            logger.info(
                "%s %s %d %dms",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                extra=extra,
            )

        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response
