"""
Typed API error.

The single error shape the response stage knows how to render.
"""

import traceback
from http import HTTPStatus
from typing import Iterable, Optional


def reason_phrase(status_code: int) -> str:
    """Return the standard reason phrase for an HTTP status code.

    Unknown codes get the phrase for 500.
    """
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return HTTPStatus.INTERNAL_SERVER_ERROR.phrase


def capture_stack() -> str:
    """Format the current call stack, excluding this function."""
    return "".join(traceback.format_stack()[:-1])


class ApiError(Exception):
    """An error with an HTTP status, safe to render to clients.

    Attributes are read-only once the error is built.

    Args:
        status_code: HTTP status code.
        message: Client-facing message. Defaults to the status reason phrase.
        errors: Optional per-field error descriptions.
        stack: Stack trace text. Captured at construction when omitted.
        is_operational: False for programming defects, True for expected
            failures such as bad input.
    """

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        errors: Optional[Iterable[str]] = None,
        stack: Optional[str] = None,
        is_operational: bool = True,
    ) -> None:
        self._status_code = status_code
        self._message = message or reason_phrase(status_code)
        self._errors = tuple(errors) if errors is not None else None
        self._stack = stack if stack is not None else capture_stack()
        self._is_operational = is_operational
        super().__init__(self._message)

    def __repr__(self) -> str:
        return f"ApiError({self._status_code}, {self._message!r})"

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    @property
    def errors(self) -> Optional[tuple[str, ...]]:
        return self._errors

    @property
    def stack(self) -> str:
        return self._stack

    @property
    def is_operational(self) -> bool:
        return self._is_operational
