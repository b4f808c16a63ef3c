"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from userbase.domain.users.entities import User, UserRole


class UserRepository(ABC):
    """Port for persisting and querying user accounts."""

    @abstractmethod
    def is_email_taken(
        self, email: str, exclude_user_id: Optional[UUID] = None
    ) -> bool:
        """Return True if an account other than exclude_user_id uses email.

        The lookup is exact. Callers normalize the email (trim, lowercase)
        before calling.
        """
        raise NotImplementedError

    @abstractmethod
    def add(self, name: str, email: str, password: str, role: UserRole) -> User:
        """Persist a new account. The plaintext password is hashed on save."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Return a user by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return a user by exact email, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_all(
        self, role: Optional[UserRole] = None, limit: int = 50, offset: int = 0
    ) -> list[User]:
        """Return users ordered by creation date, optionally filtered by role."""
        raise NotImplementedError

    @abstractmethod
    def update(self, user_id: UUID, changes: dict[str, Any]) -> Optional[User]:
        """Apply field changes to a user. Returns None if the user is missing."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: UUID) -> bool:
        """Delete a user. Returns False if the user is missing."""
        raise NotImplementedError

    @abstractmethod
    def check_password(self, user_id: UUID, candidate: str) -> bool:
        """Return True if candidate matches the stored password hash."""
        raise NotImplementedError
