"""
Catch-all middleware for the error pipeline.

Errors FastAPI does not route to an exception handler (persistence
errors, programming errors) propagate out of the router; this
middleware catches them and runs them through the same stages.
"""

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turns any uncaught exception into a JSON error response.

    Args:
        app: The downstream ASGI application.
        convert: Conversion stage, any exception to ApiError.
        render: Response stage, ApiError to response.
        development: Passed through to the response stage.
    """

    def __init__(
        self,
        app: ASGIApp,
        convert: Callable,
        render: Callable,
        development: bool = False,
    ) -> None:
        super().__init__(app)
        self._convert = convert
        self._render = render
        self._development = development

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and render any escaping exception."""
        try:
            return await call_next(request)
        except Exception as exc:
            return self._render(
                self._convert(exc), request, development=self._development
            )
