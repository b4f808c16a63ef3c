"""
Secure HTTP headers middleware.

Every response, error responses included, leaves with a fixed set of
protective headers. Account data is marked no-store so intermediaries
never cache it. Strict-Transport-Security is only sent over HTTPS.
Headers a route set itself are kept.
"""

from typing import Mapping, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cache-Control": "no-store",
}

HSTS_HEADER = "Strict-Transport-Security"
HSTS_VALUE = "max-age=31536000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds SECURE_HEADERS, or the given headers, to every response.

    Args:
        app: The downstream ASGI application.
        headers: Header name to value. Defaults to SECURE_HEADERS.
    """

    def __init__(
        self, app: ASGIApp, headers: Optional[Mapping[str, str]] = None
    ) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in self._headers.items():
            response.headers.setdefault(header_name, header_value)
        if request.url.scheme == "https":
            response.headers.setdefault(HSTS_HEADER, HSTS_VALUE)
        return response
