"""Custom exceptions for the application."""

from typing import Any


class AppException(Exception):
    """Base exception for all application exceptions."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)


# Authentication Exceptions
class AuthenticationError(AppException):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed", details: dict | None = None):
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised when sign-in fails.

    The message never says whether the account exists.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message=message)
        self.error_code = "INVALID_CREDENTIALS"


class TokenExpiredError(AuthenticationError):
    """Raised when token has expired."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message=message)
        self.error_code = "TOKEN_EXPIRED"


class InvalidTokenError(AuthenticationError):
    """Raised when token is invalid."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message=message)
        self.error_code = "INVALID_TOKEN"


# Authorization Exceptions
class AuthorizationError(AppException):
    """Raised when authorization fails."""

    def __init__(self, message: str = "Access denied", details: dict | None = None):
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


class SignupDisabledError(AuthorizationError):
    """Raised when admin self sign-up is switched off."""

    def __init__(self, message: str = "Admin sign-up is disabled"):
        super().__init__(message=message)
        self.error_code = "SIGNUP_DISABLED"


# Resource Exceptions
class ConflictError(AppException):
    """Raised when resource conflicts."""

    def __init__(self, message: str = "Resource already exists", details: dict | None = None):
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateError(ConflictError):
    """Raised when duplicate resource is detected."""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"Resource with {field}='{value}' already exists",
            details={"field": field, "value": value},
        )
        self.error_code = "DUPLICATE_ERROR"


# Validation Exceptions
class ValidationError(AppException):
    """Raised when validation fails."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None):
        super().__init__(
            message=message,
            status_code=422,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class InvalidArgumentError(AppException):
    """Raised when a dashboard operation gets an argument outside its domain.

    Unknown question ids and non-positive page numbers are programming
    errors on the caller side; they are never turned into empty results.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_ARGUMENT",
            details=details,
        )


# Rate Limiting
class RateLimitExceededError(AppException):
    """Raised when rate limit is exceeded."""

    def __init__(self, retry_after: int = 60):
        super().__init__(
            message="Rate limit exceeded. Please try again later.",
            status_code=429,
            error_code="RATE_LIMIT_EXCEEDED",
            details={"retry_after": retry_after},
        )


# Store Exceptions
class FetchError(AppException):
    """Raised when the response store is unreachable or a query fails."""

    def __init__(self, message: str = "Failed to load survey data"):
        super().__init__(
            message=message,
            status_code=503,
            error_code="FETCH_ERROR",
        )
