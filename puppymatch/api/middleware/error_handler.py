"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "INVALID_TOKEN",
            "message": "Your session is no longer valid. Please log in again.",
            "details": {}
        }
    }

Exception Handling:
===================
1. PuppyMatchException subclasses → Use their status_code and to_dict()
2. RequestValidationError → 400 VALIDATION_ERROR with field errors
3. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from puppymatch.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from puppymatch.shared.core.exceptions import PuppyMatchException
from puppymatch.shared.core.logging import logger


def _field_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may hold exception objects; keep only the JSON-safe parts
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(PuppyMatchException)
    async def puppymatch_exception_handler(
        request: Request,
        exc: PuppyMatchException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from PuppyMatchException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        These occur when the body or query doesn't match the expected schema.
        """
        errors = _field_errors(exc)
        logger.warning(
            "Validation error",
            errors=errors,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"errors": errors},
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "details": {},
                }
            },
        )
