"""
Use case: Page through user accounts.

Input: ListUsersQuery
Output: list of User
Side effects: None.
"""

from userbase.application.users.dtos import ListUsersQuery
from userbase.domain.users.entities import User
from userbase.domain.users.ports import UserRepository


class ListUsersUseCase:
    """Returns one page of accounts, optionally filtered by role."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: ListUsersQuery) -> list[User]:
        return self._user_repo.find_all(
            role=query.role, limit=query.limit, offset=query.offset
        )
