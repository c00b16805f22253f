"""
VFA.gallery API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                          VFA.gallery API                                    │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:    CORS  →  Request log context  →  Exception handlers        │
│                              │                                              │
│                              ▼                                              │
│   Routers:       Health  |  Galleries  |  Collections (CRUD, membership)      │
│                              │                                              │
│                              ▼                                              │
│   Dependencies:  DbSession | CurrentUser / OptionalUser | CollectionService │
│                              │                                              │
│                              ▼                                              │
│   Services:      OwnershipGuard  →  MembershipLedger                        │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection verified
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connections closed

Usage:
======
    # Run with uvicorn
    uvicorn vfa_gallery.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from vfa_gallery.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from vfa_gallery.config.settings import settings
from vfa_gallery.shared.db import init_db, close_db
from vfa_gallery.shared.core.logging import clear_log_context, log_context, logger
from vfa_gallery.api.middleware import setup_exception_handlers
from vfa_gallery.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup verifies the database is reachable; shutdown disposes the
    connection pool.
    """
    logger.info(
        "Starting VFA.gallery API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()
    logger.info("VFA.gallery API started successfully")

    yield

    logger.info("Shutting down VFA.gallery API")
    await close_db()
    logger.info("VFA.gallery API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Galleries, collections and ordered artwork membership",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # CORS Middleware - Must be added first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_log_context(request: Request, call_next):
        # Every log line of a request carries its method, path and request id
        clear_log_context()
        log_context(
            request_id=request.headers.get("X-Request-ID") or str(uuid4()),
            method=request.method,
            path=request.url.path,
        )
        return await call_next(request)

    setup_exception_handlers(app)
    register_routes(app)

    return app


# Create the application instance
app = create_application()
