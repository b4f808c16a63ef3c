"""
Adapter: User account persistence.

Implements the UserRepository port on top of a SQLAlchemy session.
Validation and password hashing happen in UserRecord's save hooks.
"""

import logging
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from userbase.domain.users.entities import User, UserRole
from userbase.domain.users.errors import EmailAlreadyTakenError
from userbase.domain.users.ports import UserRepository
from userbase.infrastructure.users.model import UserRecord

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "email", "password", "role"})


def _to_entity(record: UserRecord) -> User:
    data = record.to_dict()
    data["role"] = UserRole(data["role"])
    return User(**data)


class SqlAlchemyUserRepository(UserRepository):
    """Persists user accounts through a SQLAlchemy session.

    Each write commits its own transaction. A failed commit is rolled
    back before the error propagates.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def is_email_taken(
        self, email: str, exclude_user_id: Optional[UUID] = None
    ) -> bool:
        query = select(UserRecord.id).where(UserRecord.email == email)
        if exclude_user_id is not None:
            query = query.where(UserRecord.id != exclude_user_id)
        return self._session.execute(query.limit(1)).first() is not None

    def add(self, name: str, email: str, password: str, role: UserRole) -> User:
        record = UserRecord(name=name, email=email, password=password, role=role)
        self._session.add(record)
        self._commit(email=email)
        logger.info("Created user id=%s role=%s.", record.id, record.role)
        return _to_entity(record)

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        record = self._session.get(UserRecord, user_id)
        return _to_entity(record) if record is not None else None

    def get_by_email(self, email: str) -> Optional[User]:
        record = self._session.scalars(
            select(UserRecord).where(UserRecord.email == email)
        ).first()
        return _to_entity(record) if record is not None else None

    def find_all(
        self, role: Optional[UserRole] = None, limit: int = 50, offset: int = 0
    ) -> list[User]:
        query = select(UserRecord).order_by(UserRecord.created_at, UserRecord.email)
        if role is not None:
            query = query.where(UserRecord.role == role.value)
        records = self._session.scalars(query.limit(limit).offset(offset)).all()
        return [_to_entity(record) for record in records]

    def update(self, user_id: UUID, changes: dict[str, Any]) -> Optional[User]:
        """Apply field changes and commit.

        Raises:
            ValueError: If changes names a field that cannot be updated.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        record = self._session.get(UserRecord, user_id)
        if record is None:
            return None

        for field, value in changes.items():
            setattr(record, field, value)
        self._commit(email=changes.get("email"))
        logger.info("Updated user id=%s fields=%s.", user_id, sorted(changes))
        return _to_entity(record)

    def delete(self, user_id: UUID) -> bool:
        record = self._session.get(UserRecord, user_id)
        if record is None:
            return False
        self._session.delete(record)
        self._commit()
        logger.info("Deleted user id=%s.", user_id)
        return True

    def check_password(self, user_id: UUID, candidate: str) -> bool:
        record = self._session.get(UserRecord, user_id)
        return record is not None and record.is_password_matching(candidate)

    def _commit(self, email: Optional[str] = None) -> None:
        try:
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            if email is not None:
                raise EmailAlreadyTakenError(email) from exc
            raise
        except Exception:
            self._session.rollback()
            raise
