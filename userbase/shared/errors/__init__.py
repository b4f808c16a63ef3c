"""
Shared error handling package.

Every error raised while serving a request goes through two stages:
conversion into an ApiError, then rendering as a JSON response.
"""

from userbase.shared.errors.api_error import ApiError, reason_phrase
from userbase.shared.errors.conversion import convert_to_api_error
from userbase.shared.errors.handlers import register_error_handlers, render_error_response

__all__ = [
    "ApiError",
    "convert_to_api_error",
    "reason_phrase",
    "register_error_handlers",
    "render_error_response",
]
