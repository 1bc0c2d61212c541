"""
PuppyMatch API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           PUPPYMATCH API                                    │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  ┌─────────────────────────────────────────────────────┐    │          │
│   │  │ CORS Middleware                                      │    │          │
│   │  │ Request Context (request id → log context)           │    │          │
│   │  │ Error Handlers                                       │    │          │
│   │  └─────────────────────────────────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌──────────┐ ┌──────────┐ ┌──────────────────────────┐     │          │
│   │  │  Health  │ │   Auth   │ │ Users (me, interests,    │     │          │
│   │  │          │ │          │ │        matches)          │     │          │
│   │  └──────────┘ └──────────┘ └──────────────────────────┘     │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                Dependencies (Injected)                       │          │
│   │  ┌──────────┐ ┌──────────┐ ┌──────────┐                    │          │
│   │  │ Database │ │   Auth   │ │ Services │                    │          │
│   │  └──────────┘ └──────────┘ └──────────┘                    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database reachability checked (tables created if DATABASE_AUTO_CREATE)
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connection pool disposed

Usage:
======
    # Run with uvicorn
    uvicorn puppymatch.api.main:app --host 0.0.0.0 --port 3000 --reload

    # Or programmatically
    from puppymatch.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from puppymatch.config.settings import settings
from puppymatch.shared.db import init_db, close_db
from puppymatch.shared.core.logging import logger
from puppymatch.api.middleware import setup_exception_handlers, setup_request_context
from puppymatch.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database is reachable (optionally create tables)

    Shutdown:
    - Dispose the connection pool
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting PuppyMatch API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()

    logger.info("PuppyMatch API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down PuppyMatch API")

    await close_db()

    logger.info("PuppyMatch API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request context)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Meet people who share your interests",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    setup_request_context(app)

    # Added last so it wraps everything, including preflight requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "puppymatch.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
