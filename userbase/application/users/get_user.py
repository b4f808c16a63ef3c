"""
Use case: Retrieve a single user account.

Input: user ID
Output: User
Side effects: None.
Failure cases: UserNotFoundError.
"""

from uuid import UUID

from userbase.domain.users.entities import User
from userbase.domain.users.errors import UserNotFoundError
from userbase.domain.users.ports import UserRepository


class GetUserUseCase:
    """Looks up an account by ID."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: UUID) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user
