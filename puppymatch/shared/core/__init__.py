"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions (the error taxonomy)

Usage:
======
    from puppymatch.shared.core.logging import logger, get_logger
    from puppymatch.shared.core.exceptions import ValidationError, InvalidTokenError

    logger.info("Interests replaced", user_id=str(user_id), count=3)
"""

from puppymatch.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from puppymatch.shared.core.exceptions import (
    PuppyMatchException,
    ValidationError,
    AuthenticationError,
    InvalidCredentialsError,
    InvalidTokenError,
    ConflictError,
    DuplicateIdentityError,
    ServiceUnavailableError,
    StoreUnavailableError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "PuppyMatchException",
    "ValidationError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ConflictError",
    "DuplicateIdentityError",
    "ServiceUnavailableError",
    "StoreUnavailableError",
]
