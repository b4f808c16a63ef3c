"""
Use case: Register a new user account.

Input: CreateUserCommand
Output: User
Side effects: Persists the account with a hashed password.
Failure cases: EmailAlreadyTakenError, RecordValidationError.
"""

import logging

from userbase.application.users.dtos import CreateUserCommand, normalize_email
from userbase.domain.users.entities import User
from userbase.domain.users.errors import EmailAlreadyTakenError
from userbase.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Registers an account after checking the email is free."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: CreateUserCommand) -> User:
        """Run the registration use case.

        Args:
            command: The new account's fields.

        Returns:
            The stored account.
        """
        email = normalize_email(command.email)
        if self._user_repo.is_email_taken(email):
            logger.info("Registration rejected: email already taken.")
            raise EmailAlreadyTakenError(email)

        return self._user_repo.add(
            name=command.name,
            email=email,
            password=command.password,
            role=command.role,
        )
