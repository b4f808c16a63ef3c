"""
FastAPI routers for the users bounded context.

All routes delegate to use cases. No business logic here.
Input shapes are checked by Pydantic schemas; field rules by the
persistence layer. Error mapping is handled by the error pipeline.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from slowapi import Limiter

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
from userbase.interfaces.users.dependencies import (
    get_authenticate_user_use_case,
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from userbase.interfaces.users.schemas import (
    CreateUserRequest,
    ErrorResponse,
    LoginRequest,
    UpdateUserRequest,
    UserListResponse,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])


def _to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Register a user",
    description="Create an account. The password is stored only as a bcrypt hash.",
)
def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """Register a new account."""
    command = CreateUserCommand(
        name=request.name,
        email=request.email,
        password=request.password,
        role=request.role,
    )
    return _to_response(use_case.execute(command))


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users",
    description="Page through accounts, optionally filtered by role.",
)
def list_users(
    role: Optional[UserRole] = Query(default=None),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> UserListResponse:
    """List accounts."""
    users = use_case.execute(ListUsersQuery(role=role, limit=limit, offset=offset))
    return UserListResponse(
        results=[_to_response(user) for user in users],
        limit=limit,
        offset=offset,
    )


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a user",
)
def get_user(
    user_id: UUID,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    """Return one account."""
    return _to_response(use_case.execute(user_id))


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a user",
    description="Change some fields of an account. A new password is re-hashed.",
)
def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    """Apply a partial update to an account."""
    command = UpdateUserCommand(
        user_id=user_id,
        name=request.name,
        email=request.email,
        password=request.password,
        role=request.role,
    )
    return _to_response(use_case.execute(command))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a user",
)
def delete_user(
    user_id: UUID,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> Response:
    """Delete an account."""
    use_case.execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def build_auth_router(limiter: Limiter, login_limit: str) -> APIRouter:
    """Build the credential check router.

    The route is built per application so it is limited by that
    application's limiter and configured login limit.

    Args:
        limiter: The application's rate limiter.
        login_limit: Rate limit string for the credential check, e.g. "10/minute".
    """
    auth_router = APIRouter(prefix="/auth", tags=["auth"])

    @auth_router.post(
        "/login",
        response_model=UserResponse,
        responses={401: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
        summary="Check credentials",
        description="Verify an email/password pair and return the matching account.",
    )
    @limiter.limit(login_limit)
    def login(
        request: Request,
        credentials: LoginRequest,
        use_case: AuthenticateUserUseCase = Depends(get_authenticate_user_use_case),
    ) -> UserResponse:
        """Verify credentials."""
        command = AuthenticateUserCommand(
            email=credentials.email, password=credentials.password
        )
        return _to_response(use_case.execute(command))

    return auth_router
