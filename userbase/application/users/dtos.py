"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from userbase.domain.users.entities import UserRole


def normalize_email(email: str) -> str:
    """Trim and lowercase an email before lookups."""
    return email.strip().lower()


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for registering a new account.

    Attributes:
        name: Display name.
        email: Email address, unique across accounts.
        password: Plaintext password, hashed before it is stored.
        role: Account role.
    """

    name: str
    email: str
    password: str
    role: UserRole = UserRole.USER


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for changing an account. None means "leave unchanged"."""

    user_id: UUID
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None


@dataclass(frozen=True)
class ListUsersQuery:
    """Input DTO for paging through accounts."""

    role: Optional[UserRole] = None
    limit: int = 50
    offset: int = 0


@dataclass(frozen=True)
class AuthenticateUserCommand:
    """Input DTO for checking an email/password pair."""

    email: str
    password: str
