"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /auth                   → Authentication (register, login)
    /users/me               → Caller's profile, interests and matches

Every error status a router can produce is documented with the shared
ErrorResponse body, so the OpenAPI schema matches what the exception
handlers actually send.

Usage:
======
    from puppymatch.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from typing import Any

from fastapi import FastAPI

from puppymatch.api.handlers import (
    auth_handler,
    health_handler,
    user_handler,
)
from puppymatch.shared.schemas.common import ErrorResponse


def _error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    return {code: {"model": ErrorResponse} for code in status_codes}


ERROR_RESPONSES = _error_responses(400, 401, 409, 503)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
        responses=ERROR_RESPONSES,
    )
