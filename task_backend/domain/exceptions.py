"""
Error taxonomy for the task backend.

Every failure raised by a use case is one of these kinds. The API layer maps
each kind to an HTTP status; persistence failures are not wrapped here and
reach the caller unchanged.
"""


class TaskBackendError(Exception):
    """Base exception for all domain and application errors."""

    error_type = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskBackendError):
    """Raised when required input is missing or malformed."""

    error_type = "validation_error"


class AuthenticationError(TaskBackendError):
    """Raised when caller credentials are missing, invalid or expired."""

    error_type = "authentication_error"


class AuthorizationError(TaskBackendError):
    """Raised when the caller does not own the referenced task."""

    error_type = "authorization_error"


class NotFoundError(TaskBackendError):
    """Raised when a referenced task does not exist."""

    error_type = "not_found"


class ConflictError(TaskBackendError):
    """Raised when a user registers an email that is already taken."""

    error_type = "conflict"
