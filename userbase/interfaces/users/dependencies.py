"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the users context.
"""

from typing import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from userbase.application.users.authenticate_user import AuthenticateUserUseCase
from userbase.application.users.create_user import CreateUserUseCase
from userbase.application.users.delete_user import DeleteUserUseCase
from userbase.application.users.get_user import GetUserUseCase
from userbase.application.users.list_users import ListUsersUseCase
from userbase.application.users.update_user import UpdateUserUseCase
from userbase.domain.users.ports import UserRepository
from userbase.infrastructure.users.repository import SqlAlchemyUserRepository


def get_session(request: Request) -> Iterator[Session]:
    """Yield a database session for the duration of one request."""
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    """Build the user repository on the request's session."""
    return SqlAlchemyUserRepository(session)


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    return CreateUserUseCase(user_repo=user_repo)


def get_get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    return GetUserUseCase(user_repo=user_repo)


def get_list_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersUseCase:
    return ListUsersUseCase(user_repo=user_repo)


def get_update_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UpdateUserUseCase:
    return UpdateUserUseCase(user_repo=user_repo)


def get_delete_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    return DeleteUserUseCase(user_repo=user_repo)


def get_authenticate_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(user_repo=user_repo)
