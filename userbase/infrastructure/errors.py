"""
Persistence layer errors.

Raised by ORM records and repositories. The error pipeline treats
this hierarchy, like SQLAlchemy's own, as a bad request.
"""

from typing import Iterable


class PersistenceError(Exception):
    """Base error for record-level failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class RecordValidationError(PersistenceError):
    """Raised when one or more record fields break their rules.

    Attributes:
        errors: One "<field>: <reason>" string per violation.
    """

    def __init__(self, message: str, errors: Iterable[str]) -> None:
        super().__init__(message)
        self.errors = list(errors)
