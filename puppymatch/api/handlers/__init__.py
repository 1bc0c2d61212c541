"""
API Handlers

Route handlers for the PuppyMatch API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from puppymatch.api.handlers import (
    auth_handler,
    health_handler,
    user_handler,
)

__all__ = [
    "auth_handler",
    "health_handler",
    "user_handler",
]
