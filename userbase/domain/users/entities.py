"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID


class UserRole(Enum):
    """Role granted to a user account."""

    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class User:
    """A registered user account.

    The password hash never leaves the persistence layer, so the
    entity has no password attribute.
    """

    id: UUID
    name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN
