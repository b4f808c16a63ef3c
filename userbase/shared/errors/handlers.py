"""
Response stage of the error pipeline, and its FastAPI wiring.

Maps domain errors to ApiErrors and renders every ApiError as
{"code", "message", "errors"?, "stack"?}. Stack traces reach clients
only in development.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from userbase.core.config import Settings
from userbase.domain.users.errors import (
    EmailAlreadyTakenError,
    InvalidCredentialsError,
    UserDomainError,
    UserNotFoundError,
)
from userbase.shared.errors.api_error import ApiError, reason_phrase
from userbase.shared.errors.conversion import (
    convert_to_api_error,
    errors_of,
    message_of,
    stack_of,
    status_of,
)
from userbase.shared.errors.middleware import ErrorHandlingMiddleware

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_500 = 500


def render_error_response(
    error: object, request: Request, *, development: bool
) -> JSONResponse:
    """Render an error as a JSON response.

    Accepts any error, not only ApiError: a missing or invalid status
    becomes 500 and a missing message becomes the status reason phrase.
    The effective message is stored on request.state for the access log.

    Args:
        error: The error to render, normally an ApiError.
        request: The current request.
        development: Include the stack trace in the body.

    Returns:
        The JSON error response.
    """
    status_code = status_of(error) or HTTP_500
    message = message_of(error) or reason_phrase(status_code)
    request.state.error_message = message

    body: dict[str, object] = {"code": status_code, "message": message}
    errors = errors_of(error)
    if errors is not None:
        body["errors"] = errors
    stack = stack_of(error)
    if development:
        body["stack"] = stack

    if status_code >= HTTP_500:
        logger.error("%d %s\n%s", status_code, message, stack)
    elif not getattr(error, "is_operational", False):
        logger.warning("%d %s", status_code, message)

    return JSONResponse(status_code=status_code, content=body)


def domain_error_to_api_error(exc: UserDomainError) -> ApiError:
    """Map a users domain error to an operational ApiError."""
    if isinstance(exc, UserNotFoundError):
        return ApiError(HTTP_404, exc.message)
    if isinstance(exc, EmailAlreadyTakenError):
        return ApiError(HTTP_400, exc.message)
    if isinstance(exc, InvalidCredentialsError):
        return ApiError(HTTP_401, exc.message)
    return ApiError(HTTP_500, exc.message, stack=stack_of(exc), is_operational=False)


def to_api_error(exc: object) -> ApiError:
    """Run the conversion stage, translating domain errors first."""
    if isinstance(exc, UserDomainError):
        return domain_error_to_api_error(exc)
    return convert_to_api_error(exc)


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register the error pipeline on the FastAPI application.

    Errors FastAPI already routes to exception handlers (HTTP and request
    validation errors) and domain errors are handled here; everything
    else is caught by ErrorHandlingMiddleware. Both paths share the same
    conversion and response stages.

    Args:
        app: The FastAPI application instance.
        settings: Application settings; the environment decides whether
            stack traces are rendered.
    """
    development = settings.is_development

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        """Render an ApiError raised directly by a route."""
        return render_error_response(exc, request, development=development)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors and explicit HTTPExceptions."""
        return render_error_response(
            convert_to_api_error(exc), request, development=development
        )

    # SlowAPIMiddleware calls this handler directly, looked up by exact type,
    # and never awaits it
    @app.exception_handler(RateLimitExceeded)
    def handle_rate_limit_exceeded(
        request: Request, exc: RateLimitExceeded
    ) -> JSONResponse:
        """Handle requests over a default or per-route rate limit."""
        return render_error_response(
            convert_to_api_error(exc), request, development=development
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request bodies and parameters that fail their schema."""
        return render_error_response(
            convert_to_api_error(exc), request, development=development
        )

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Handle users domain errors."""
        return render_error_response(
            domain_error_to_api_error(exc), request, development=development
        )

    app.add_middleware(
        ErrorHandlingMiddleware,
        convert=to_api_error,
        render=render_error_response,
        development=development,
    )
    logger.debug("Error handlers registered (development=%s).", development)
