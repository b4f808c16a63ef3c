"""
Domain-specific errors for the users bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserNotFoundError(UserDomainError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class EmailAlreadyTakenError(UserDomainError):
    """Raised when another account already uses the email address."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already taken")
        self.email = email


class InvalidCredentialsError(UserDomainError):
    """Raised when an email/password pair does not match an account."""

    def __init__(self) -> None:
        super().__init__("Incorrect email or password")
