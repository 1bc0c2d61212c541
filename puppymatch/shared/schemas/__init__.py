"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error and health responses
- user: Authentication and profile schemas
- interest: Interest set schemas
- match: Match results

Usage:
======
    from puppymatch.shared.schemas.user import RegisterRequest, AuthResponse
    from puppymatch.shared.schemas.common import ErrorResponse
"""

from puppymatch.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from puppymatch.shared.schemas.user import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    AuthResponse,
    ProfileUpdate,
)
from puppymatch.shared.schemas.interest import (
    InterestsRequest,
    InterestsResponse,
    InterestsSavedResponse,
)
from puppymatch.shared.schemas.match import MatchResult

__all__ = [
    # Common
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "ProfileUpdate",
    # Interest
    "InterestsRequest",
    "InterestsResponse",
    "InterestsSavedResponse",
    # Match
    "MatchResult",
]
