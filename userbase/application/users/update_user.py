"""
Use case: Change fields of an existing account.

Input: UpdateUserCommand
Output: User
Side effects: Persists the changes; a new password is hashed before storage.
Failure cases: UserNotFoundError, EmailAlreadyTakenError, RecordValidationError.
"""

import logging

from userbase.application.users.dtos import UpdateUserCommand, normalize_email
from userbase.domain.users.entities import User
from userbase.domain.users.errors import EmailAlreadyTakenError, UserNotFoundError
from userbase.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Applies a partial update to an account."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: UpdateUserCommand) -> User:
        """Run the update use case.

        Only the fields set on the command are changed. An email change is
        checked against every other account first.

        Args:
            command: The account ID and the fields to change.

        Returns:
            The updated account.
        """
        changes = {}
        if command.name is not None:
            changes["name"] = command.name
        if command.email is not None:
            email = normalize_email(command.email)
            if self._user_repo.is_email_taken(email, exclude_user_id=command.user_id):
                raise EmailAlreadyTakenError(email)
            changes["email"] = email
        if command.password is not None:
            changes["password"] = command.password
        if command.role is not None:
            changes["role"] = command.role

        if not changes:
            logger.debug("Empty update for user id=%s.", command.user_id)

        user = self._user_repo.update(command.user_id, changes)
        if user is None:
            raise UserNotFoundError(str(command.user_id))
        return user
