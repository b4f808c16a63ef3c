"""
Use case: Remove a user account.

Input: user ID
Output: None
Side effects: Deletes the account.
Failure cases: UserNotFoundError.
"""

from uuid import UUID

from userbase.domain.users.errors import UserNotFoundError
from userbase.domain.users.ports import UserRepository


class DeleteUserUseCase:
    """Deletes an account by ID."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: UUID) -> None:
        if not self._user_repo.delete(user_id):
            raise UserNotFoundError(str(user_id))
