"""Custom exceptions for the Wellness Sessions application.

These exceptions provide structured error handling that:
- Separates internal details from user-facing messages
- Carries the HTTP status each failure maps to
- Keeps ownership mismatches indistinguishable from missing records
"""


class SessionAppError(Exception):
    """Base exception for application errors."""

    status_code: int = 500

    def __init__(self, message: str, user_message: str | None = None):
        """
        Initialize application error.

        Args:
            message: Internal error message for logging/debugging
            user_message: Safe message to show to users (defaults to generic message)
        """
        super().__init__(message)
        self.user_message = user_message or "An error occurred while processing your request."


class ValidationError(SessionAppError):
    """Malformed or missing input."""

    status_code = 400

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or message)


class InvalidIdError(SessionAppError):
    """Session id rejected by shape before any lookup."""

    status_code = 400

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or "Invalid session ID")


class AuthError(SessionAppError):
    """Missing, malformed, expired or unresolvable credentials."""

    status_code = 401

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or "Not authorized")


class InvalidCredentialsError(AuthError):
    """Login rejected. Unknown email and wrong password look the same."""

    status_code = 400

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or "Invalid credentials")


class ConflictError(SessionAppError):
    """Unique key already taken."""

    status_code = 400

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or "Email already exists")


class NotFoundError(SessionAppError):
    """No record matched the owner-scoped lookup."""

    status_code = 404

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or "Session not found")


class InternalError(SessionAppError):
    """Unexpected persistence failure. Details are logged, never returned."""

    status_code = 500

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or "Internal Server Error")
