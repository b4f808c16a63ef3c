"""
Field rules for user records.

Rules are declared once on a Pydantic model and checked all together,
so a record with several bad fields reports every violation at once.
"""

import re
from typing import Any, Mapping

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

from userbase.domain.users.entities import UserRole
from userbase.infrastructure.errors import RecordValidationError

PASSWORD_MIN_LENGTH = 8
# bcrypt only accepts this many bytes of input
PASSWORD_MAX_BYTES = 72
USER_VALIDATION_FAILED = "User validation failed"

_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"\d")


class UserFieldRules(BaseModel):
    """Declarative rules every persisted user must satisfy."""

    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    role: UserRole

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not _LETTER.search(value) or not _DIGIT.search(value):
            raise ValueError("Password must contain at least one letter and one number")
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(
                f"Password must be at most {PASSWORD_MAX_BYTES} bytes long"
            )
        return value


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Flatten Pydantic errors into "<field>: <reason>" strings."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {error['msg']}")
    return messages


def validate_user_fields(values: Mapping[str, Any]) -> None:
    """Check user field values against UserFieldRules.

    Raises:
        RecordValidationError: If any field breaks its rule.
    """
    try:
        UserFieldRules.model_validate(dict(values))
    except ValidationError as exc:
        raise RecordValidationError(
            USER_VALIDATION_FAILED, format_validation_errors(exc)
        ) from exc
