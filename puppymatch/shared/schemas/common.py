"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (camelCase aliases, from_attributes)
- Standard responses: ErrorResponse, HealthResponse

Usage:
======
    from puppymatch.shared.schemas.common import BaseSchema

    class InterestsResponse(BaseSchema):
        interests: list[str]
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    Provides:
    - alias_generator: snake_case fields serialize as camelCase JSON
    - populate_by_name: Accept either the field name or its alias
    - from_attributes: Allow creating from ORM models
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "error": {
                "code": "INVALID_CREDENTIALS",
                "message": "Invalid email or password",
                "details": {}
            }
        }
    """

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "puppymatch"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
