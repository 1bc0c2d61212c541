"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_context: Per-request log context (request id, method, path)

Usage:
======
    from puppymatch.api.middleware import setup_exception_handlers, setup_request_context

    app = FastAPI()
    setup_exception_handlers(app)
    setup_request_context(app)
"""

from puppymatch.api.middleware.error_handler import setup_exception_handlers
from puppymatch.api.middleware.request_context import setup_request_context

__all__ = [
    "setup_exception_handlers",
    "setup_request_context",
]
