"""
Pydantic schemas for users API request/response validation.

Request schemas check shapes and the role enum only. Field rules (email
format, password strength) are enforced by the persistence layer so every
write path applies the same rules and reports every violation together.
No response schema has a password field.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from userbase.domain.users.entities import UserRole

NAME_MAX_LEN = 100
EMAIL_MAX_LEN = 255


class CreateUserRequest(BaseModel):
    """Request schema for registering an account.

    Attributes:
        name: Display name (1-100 chars).
        email: Email address, unique across accounts.
        password: Plaintext password (8+ chars, letters and digits).
        role: "user" or "admin".
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    email: str = Field(..., max_length=EMAIL_MAX_LEN)
    password: str
    role: UserRole = Field(default=UserRole.USER, description="Account role")


class UpdateUserRequest(BaseModel):
    """Request schema for a partial account update. Omitted fields are kept."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    email: Optional[str] = Field(default=None, max_length=EMAIL_MAX_LEN)
    password: Optional[str] = None
    role: Optional[UserRole] = None


class LoginRequest(BaseModel):
    """Request schema for the credential check."""

    email: str
    password: str


class UserResponse(BaseModel):
    """A user account as exposed over HTTP."""

    id: UUID
    name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserListResponse(BaseModel):
    """One page of user accounts."""

    results: list[UserResponse]
    limit: int
    offset: int


class ErrorResponse(BaseModel):
    """Body of every error response."""

    code: int
    message: str
    errors: Optional[list[str]] = None
    stack: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
