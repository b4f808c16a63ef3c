"""
Tests for the users application layer (use cases).

Use cases run against an in-memory repository that records the calls
it receives. No real infrastructure needed. Each test verifies
orchestration logic, not field rules.
"""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID, uuid4

import pytest

from userbase.application.users.authenticate_user import AuthenticateUserUseCase
from userbase.application.users.create_user import CreateUserUseCase
from userbase.application.users.delete_user import DeleteUserUseCase
from userbase.application.users.dtos import (
    AuthenticateUserCommand,
    CreateUserCommand,
    ListUsersQuery,
    UpdateUserCommand,
)
from userbase.application.users.get_user import GetUserUseCase
from userbase.application.users.list_users import ListUsersUseCase
from userbase.application.users.update_user import UpdateUserUseCase
from userbase.domain.users.entities import User, UserRole
from userbase.domain.users.errors import (
    EmailAlreadyTakenError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from userbase.domain.users.ports import UserRepository


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository; keeps plaintext passwords and a call log."""

    def __init__(self) -> None:
        self.users: dict[UUID, User] = {}
        self.passwords: dict[UUID, str] = {}
        self.calls: list[tuple[str, tuple]] = []

    def is_email_taken(self, email: str, exclude_user_id: Optional[UUID] = None) -> bool:
        self.calls.append(("is_email_taken", (email, exclude_user_id)))
        return any(
            user.email == email and user.id != exclude_user_id
            for user in self.users.values()
        )

    def add(self, name: str, email: str, password: str, role: UserRole) -> User:
        self.calls.append(("add", (name, email, role)))
        user = User(
            id=uuid4(),
            name=name,
            email=email,
            role=role,
            created_at=datetime.now(timezone.utc),
        )
        self.users[user.id] = user
        self.passwords[user.id] = password
        return user

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        self.calls.append(("get_by_email", (email,)))
        return next((u for u in self.users.values() if u.email == email), None)

    def find_all(
        self, role: Optional[UserRole] = None, limit: int = 50, offset: int = 0
    ) -> list[User]:
        users = [u for u in self.users.values() if role is None or u.role is role]
        return users[offset : offset + limit]

    def update(self, user_id: UUID, changes: dict[str, Any]) -> Optional[User]:
        self.calls.append(("update", (user_id, dict(changes))))
        user = self.users.get(user_id)
        if user is None:
            return None
        password = changes.pop("password", None)
        if password is not None:
            self.passwords[user_id] = password
        updated = User(**{**user.__dict__, **changes})
        self.users[user_id] = updated
        return updated

    def delete(self, user_id: UUID) -> bool:
        self.passwords.pop(user_id, None)
        return self.users.pop(user_id, None) is not None

    def check_password(self, user_id: UUID, candidate: str) -> bool:
        return self.passwords.get(user_id) == candidate


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def ada(repo) -> User:
    return repo.add("Ada Lovelace", "ada@mailbox.org", "somepasswordhere1", UserRole.USER)


class TestCreateUserUseCase:
    """Tests for the CreateUserUseCase."""

    def test_normalizes_email_before_checking(self, repo) -> None:
        command = CreateUserCommand(
            name="Ada Lovelace", email="  Ada@MailBox.org ", password="somepasswordhere1"
        )

        user = CreateUserUseCase(repo).execute(command)

        assert repo.calls[0] == ("is_email_taken", ("ada@mailbox.org", None))
        assert user.email == "ada@mailbox.org"
        assert user.role is UserRole.USER

    def test_taken_email_raises_error(self, repo, ada) -> None:
        repo.calls.clear()
        command = CreateUserCommand(
            name="Someone Else", email="ADA@mailbox.org", password="somepasswordhere1"
        )

        with pytest.raises(EmailAlreadyTakenError):
            CreateUserUseCase(repo).execute(command)

        assert [name for name, _ in repo.calls] == ["is_email_taken"]


class TestGetUserUseCase:
    """Tests for the GetUserUseCase."""

    def test_returns_existing_user(self, repo, ada) -> None:
        assert GetUserUseCase(repo).execute(ada.id) == ada

    def test_missing_user_raises_error(self, repo) -> None:
        with pytest.raises(UserNotFoundError):
            GetUserUseCase(repo).execute(uuid4())


class TestListUsersUseCase:
    """Tests for the ListUsersUseCase."""

    def test_filters_by_role(self, repo, ada) -> None:
        admin = repo.add("Grace Hopper", "grace@mailbox.org", "cobol1959x", UserRole.ADMIN)

        users = ListUsersUseCase(repo).execute(ListUsersQuery(role=UserRole.ADMIN))

        assert users == [admin]


class TestUpdateUserUseCase:
    """Tests for the UpdateUserUseCase."""

    def test_only_set_fields_are_changed(self, repo, ada) -> None:
        updated = UpdateUserUseCase(repo).execute(
            UpdateUserCommand(user_id=ada.id, name="Augusta Ada King")
        )

        assert updated.name == "Augusta Ada King"
        assert repo.calls[-1] == ("update", (ada.id, {"name": "Augusta Ada King"}))

    def test_email_change_excludes_own_account(self, repo, ada) -> None:
        UpdateUserUseCase(repo).execute(
            UpdateUserCommand(user_id=ada.id, email="ADA@mailbox.org")
        )
        assert ("is_email_taken", ("ada@mailbox.org", ada.id)) in repo.calls

    def test_email_of_another_account_is_rejected(self, repo, ada) -> None:
        grace = repo.add("Grace Hopper", "grace@mailbox.org", "cobol1959x", UserRole.USER)

        with pytest.raises(EmailAlreadyTakenError):
            UpdateUserUseCase(repo).execute(
                UpdateUserCommand(user_id=grace.id, email="ada@mailbox.org")
            )

    def test_missing_user_raises_error(self, repo) -> None:
        with pytest.raises(UserNotFoundError):
            UpdateUserUseCase(repo).execute(UpdateUserCommand(user_id=uuid4(), name="X"))


class TestDeleteUserUseCase:
    """Tests for the DeleteUserUseCase."""

    def test_deletes_existing_user(self, repo, ada) -> None:
        DeleteUserUseCase(repo).execute(ada.id)
        assert repo.get_by_id(ada.id) is None

    def test_missing_user_raises_error(self, repo) -> None:
        with pytest.raises(UserNotFoundError):
            DeleteUserUseCase(repo).execute(uuid4())


class TestAuthenticateUserUseCase:
    """Tests for the AuthenticateUserUseCase."""

    def test_valid_credentials_return_user(self, repo, ada) -> None:
        user = AuthenticateUserUseCase(repo).execute(
            AuthenticateUserCommand(email=" ADA@mailbox.org", password="somepasswordhere1")
        )
        assert user == ada

    def test_wrong_password_raises_error(self, repo, ada) -> None:
        with pytest.raises(InvalidCredentialsError):
            AuthenticateUserUseCase(repo).execute(
                AuthenticateUserCommand(email="ada@mailbox.org", password="wrongpass1")
            )

    def test_unknown_email_raises_error(self, repo) -> None:
        with pytest.raises(InvalidCredentialsError):
            AuthenticateUserUseCase(repo).execute(
                AuthenticateUserCommand(email="nobody@mailbox.org", password="whatever1")
            )
