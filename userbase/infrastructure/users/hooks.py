"""
Pre-persistence hooks for user records.

A hook inspects the document about to be written and returns a
HookResult instead of raising, so callers decide how a failure
aborts the write.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from userbase.infrastructure.users.passwords import PASSWORD_HASH_ROUNDS, hash_password

logger = logging.getLogger(__name__)

PASSWORD_FIELD = "password"


class PasswordDocument(Protocol):
    """Anything carrying a password field and change tracking."""

    password: Optional[str]

    def is_modified(self, field: str) -> bool:
        ...


@dataclass(frozen=True)
class HookResult:
    """Outcome of a pre-persistence hook."""

    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def hash_password_before_save(
    document: PasswordDocument, rounds: int = PASSWORD_HASH_ROUNDS
) -> HookResult:
    """Replace a changed plaintext password with its hash.

    An unchanged password is left as is, so a stored hash is never
    hashed a second time.

    Args:
        document: The document about to be persisted.
        rounds: bcrypt cost factor.

    Returns:
        A successful HookResult, or one carrying the hashing error.
    """
    if not document.is_modified(PASSWORD_FIELD):
        return HookResult()

    try:
        document.password = hash_password(document.password, rounds=rounds)
    except (TypeError, ValueError) as exc:
        logger.warning("Password hashing failed: %s", type(exc).__name__)
        return HookResult(error=exc)

    return HookResult()
