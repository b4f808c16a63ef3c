"""
ORM record for user accounts.

The record owns its persistence rules: field normalization on
assignment, validation and password hashing right before every
insert or update, and password redaction on serialization.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import DateTime, String, Uuid, event, inspect
from sqlalchemy.orm import Mapped, mapped_column, validates

from userbase.domain.users.entities import UserRole
from userbase.infrastructure.db import Base
from userbase.infrastructure.users.hooks import hash_password_before_save
from userbase.infrastructure.users.passwords import is_password_matching
from userbase.infrastructure.users.validation import validate_user_fields

PRIVATE_FIELDS = ("password",)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _json_value(value: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class UserRecord(Base):
    """A persisted user account."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=UserRole.USER.value)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("role", UserRole.USER.value)
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<UserRecord {self.email}>"

    @validates("name")
    def _strip_name(self, _key: str, value: Optional[str]) -> Optional[str]:
        return value.strip() if isinstance(value, str) else value

    @validates("email")
    def _normalize_email(self, _key: str, value: Optional[str]) -> Optional[str]:
        return value.strip().lower() if isinstance(value, str) else value

    @validates("role")
    def _role_value(self, _key: str, value: Any) -> Any:
        return value.value if isinstance(value, UserRole) else value

    def is_modified(self, field: str) -> bool:
        """Return True if field changed since the record was loaded or last flushed."""
        return inspect(self).attrs[field].history.has_changes()

    def is_password_matching(self, candidate: str) -> bool:
        """Compare a plaintext candidate against the stored hash."""
        return is_password_matching(self.password, candidate)

    def validate(self) -> None:
        """Check every field rule at once.

        Raises:
            RecordValidationError: If any field breaks its rule.
        """
        validate_user_fields(
            {
                "name": self.name,
                "email": self.email,
                "password": self.password,
                "role": self.role,
            }
        )

    def to_dict(self) -> dict[str, Any]:
        """Column values without private fields."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
            if column.key not in PRIVATE_FIELDS
        }

    def to_json(self) -> dict[str, Any]:
        """JSON-safe column values without private fields."""
        return {key: _json_value(value) for key, value in self.to_dict().items()}


@event.listens_for(UserRecord, "before_insert")
@event.listens_for(UserRecord, "before_update")
def _before_save(_mapper, _connection, target: UserRecord) -> None:
    target.validate()
    hash_password_before_save(target).raise_for_error()
