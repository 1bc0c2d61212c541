"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Every failure the core can produce maps to exactly one of these kinds.
Each carries a stable machine-readable code and a human-readable message;
internal identifiers and stack traces are never part of the payload.

Exception Hierarchy:
====================
    PuppyMatchException (base)
       │
       ├── ValidationError (400)            ← Malformed input
       ├── AuthenticationError (401)
       │      ├── InvalidCredentialsError   ← Unknown email OR wrong password
       │      └── InvalidTokenError         ← Missing/bad/expired token, ghost user
       ├── ConflictError (409)
       │      └── DuplicateIdentityError    ← Email or username already taken
       └── ServiceUnavailableError (503)
              └── StoreUnavailableError     ← Database down or pool exhausted

Usage:
======
    from puppymatch.shared.core.exceptions import ValidationError, InvalidTokenError

    raise ValidationError("Too many interests", details={"max": 500})
    # Results in: {"error": {"code": "VALIDATION_ERROR", "message": "Too many interests", ...}}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "INVALID_TOKEN",
            "message": "Your session is no longer valid. Please log in again.",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class PuppyMatchException(Exception):
    """
    Base exception for all PuppyMatch application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(PuppyMatchException):
    """
    Validation error (400 Bad Request).

    Raised before any store access when input fails validation:
    empty credentials, short password, oversized interest set, overlong tag.
    Never worth retrying.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(PuppyMatchException):
    """
    Authentication failed error (401 Unauthorized).

    Base for the two credential kinds below. Not raised directly.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        error_code: str = "AUTHENTICATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code=error_code,
            details=details,
        )


class InvalidCredentialsError(AuthenticationError):
    """
    Login failed.

    The same message is used whether the email is unknown or the password
    is wrong, so callers cannot tell which accounts exist.
    """

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message=message, error_code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """
    Bearer token rejected.

    Covers a missing header, malformed or wrong-signature tokens, expired
    tokens, and tokens whose user no longer exists.
    """

    def __init__(
        self,
        message: str = "Your session is no longer valid. Please log in again.",
    ) -> None:
        super().__init__(message=message, error_code="INVALID_TOKEN")


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(PuppyMatchException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        error_code: str = "CONFLICT",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code=error_code,
            details=details,
        )


class DuplicateIdentityError(ConflictError):
    """Email (or username) is already registered to another account."""

    def __init__(
        self,
        message: str = "That email is already registered. Try logging in instead.",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="DUPLICATE_IDENTITY",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(PuppyMatchException):
    """
    Service temporarily unavailable error (503).

    Transient: the same request may succeed if retried later.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        error_code: str = "SERVICE_UNAVAILABLE",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code=error_code,
            details=details,
        )


class StoreUnavailableError(ServiceUnavailableError):
    """
    The database could not be reached or no pooled connection was free
    within the configured timeout.
    """

    def __init__(
        self,
        message: str = "The data store is temporarily unavailable. Please try again.",
    ) -> None:
        super().__init__(message=message, error_code="STORE_UNAVAILABLE")
