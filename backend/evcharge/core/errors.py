"""Error taxonomy shared by the service and API layers."""
from fastapi import status


class AppError(Exception):
    """Base error. Rendered as ``{"message": ...}`` with ``status_code``."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or out-of-range input."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "All fields are required"


class AuthError(AppError):
    """Missing, invalid or expired credential.

    Subclasses exist for logging and tests only; clients always see the
    same generic message.
    """
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid or missing authentication"


class MissingCredential(AuthError):
    pass


class InvalidCredential(AuthError):
    pass


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Charging station not found"


class ConstraintViolation(AppError):
    """Duplicate unique key."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class InternalError(AppError):
    """Unexpected store or runtime failure."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"

    def __init__(self, message: str | None = None, detail: str | None = None):
        super().__init__(message)
        self.detail = detail


class InvalidLogin(AppError):
    """Wrong email or password. Never says which."""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"
