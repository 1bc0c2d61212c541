"""
Request Context Middleware

Binds a request id plus method and path into the structlog context so every
log line emitted while handling a request carries them. The id is echoed
back in the X-Request-ID response header.
"""

import time
import uuid

from fastapi import FastAPI, Request

from puppymatch.shared.core.logging import clear_log_context, log_context, logger


REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_context(app: FastAPI) -> None:
    """Register the request context middleware on the application."""

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        clear_log_context()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        log_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
            logger.debug("Request handled", duration_ms=elapsed_ms)
            clear_log_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
