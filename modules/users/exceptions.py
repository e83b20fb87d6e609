"""
Users module exceptions.
"""
from shared.exceptions import AppException, ConflictError


class UserAlreadyExistsError(ConflictError):
    """Raised when attempting to create a user that already exists."""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"User with {field} '{value}' already exists",
            code="USER_ALREADY_EXISTS"
        )
        self.field = field
        self.value = value


class InvalidCredentialsError(AppException):
    """Raised when login credentials are invalid."""

    status_code = 401

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS"
        )
