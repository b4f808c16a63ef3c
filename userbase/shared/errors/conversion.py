"""
Conversion stage of the error pipeline.

Turns any raised value into an ApiError. Conversion is total: it
accepts exceptions of any type and arbitrary objects, and never raises.
"""

import traceback
from http import HTTPStatus
from typing import Any, Optional

from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError, StatementError
from starlette.exceptions import HTTPException as StarletteHTTPException

from userbase.infrastructure.errors import PersistenceError
from userbase.shared.errors.api_error import ApiError, capture_stack, reason_phrase

# Errors raised by the persistence layer map to a bad request
PERSISTENCE_ERRORS = (SQLAlchemyError, PersistenceError)

# Framework errors already describe a client-facing failure
OPERATIONAL_ERRORS = (StarletteHTTPException, RequestValidationError)

STATUS_ATTRIBUTES = ("status_code", "status")
MESSAGE_ATTRIBUTES = ("message", "detail")


def _attribute(value: object, name: str) -> Any:
    # Conversion must not raise, even for objects with failing properties
    try:
        return getattr(value, name, None)
    except Exception:
        return None


def is_error_status(value: object) -> bool:
    """True for an integer HTTP status in the 4xx or 5xx range."""
    return isinstance(value, int) and not isinstance(value, bool) and 400 <= value <= 599


def status_of(value: object) -> Optional[int]:
    """Return the error status carried by value, if any."""
    for name in STATUS_ATTRIBUTES:
        candidate = _attribute(value, name)
        if is_error_status(candidate):
            return candidate
    return None


def message_of(value: object) -> Optional[str]:
    """Return the non-empty message carried by value, if any."""
    for name in MESSAGE_ATTRIBUTES:
        candidate = _attribute(value, name)
        if isinstance(candidate, str) and candidate:
            return candidate
    if isinstance(value, BaseException):
        try:
            text = str(value)
        except Exception:
            return None
        # Statement errors append the SQL and its parameters after the first line
        if isinstance(value, StatementError):
            text = text.split("\n", 1)[0]
        return text or None
    return None


def errors_of(value: object) -> Optional[list[str]]:
    """Return the field error descriptions carried by value, if any."""
    if isinstance(value, RequestValidationError):
        return [
            f"{'.'.join(str(part) for part in entry.get('loc', ()))}: {entry.get('msg', '')}"
            for entry in value.errors()
        ]
    errors = _attribute(value, "errors")
    if isinstance(errors, (list, tuple)):
        return [str(error) for error in errors]
    return None


def stack_of(value: object) -> str:
    """Return the stack trace text for value.

    An explicit `stack` string wins, then the exception's own traceback,
    then the current call stack.
    """
    stack = _attribute(value, "stack")
    if isinstance(stack, str) and stack:
        return stack
    if isinstance(value, BaseException) and value.__traceback__ is not None:
        return "".join(
            traceback.format_exception(type(value), value, value.__traceback__)
        )
    return capture_stack()


def convert_to_api_error(value: object) -> ApiError:
    """Convert any raised value into an ApiError.

    Args:
        value: An exception or arbitrary object that reached the pipeline.

    Returns:
        The value itself when it is already an ApiError, otherwise a new
        ApiError. Only framework request errors come out operational.
    """
    if isinstance(value, ApiError):
        return value

    status_code = status_of(value)
    if status_code is None:
        if isinstance(value, RequestValidationError):
            status_code = HTTPStatus.UNPROCESSABLE_ENTITY.value
        elif isinstance(value, PERSISTENCE_ERRORS):
            status_code = HTTPStatus.BAD_REQUEST.value
        else:
            status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value

    # A request validation error summarizes its fields in `errors`
    message = None if isinstance(value, RequestValidationError) else message_of(value)

    return ApiError(
        status_code,
        message or reason_phrase(status_code),
        errors=errors_of(value),
        stack=stack_of(value),
        is_operational=isinstance(value, OPERATIONAL_ERRORS),
    )
