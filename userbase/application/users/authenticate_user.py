"""
Use case: Check an email/password pair.

Input: AuthenticateUserCommand
Output: User
Side effects: None.
Failure cases: InvalidCredentialsError.
"""

import logging

from userbase.application.users.dtos import AuthenticateUserCommand, normalize_email
from userbase.domain.users.entities import User
from userbase.domain.users.errors import InvalidCredentialsError
from userbase.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """Verifies credentials against the stored password hash.

    Unknown email and wrong password fail the same way so the response
    does not reveal which accounts exist.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: AuthenticateUserCommand) -> User:
        user = self._user_repo.get_by_email(normalize_email(command.email))
        if user is None or not self._user_repo.check_password(user.id, command.password):
            logger.info("Credential check failed.")
            raise InvalidCredentialsError()
        return user
