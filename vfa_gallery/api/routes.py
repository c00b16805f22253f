"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live                       → Health checks
    /galleries/{id}/collections                  → Create (POST), list (GET)
    /collections/{id}                            → Detail (GET), update (PATCH), delete (DELETE)
    /collections/{id}/artworks                   → List (GET), add (POST)
    /collections/{id}/artworks/{artwork_id}      → Remove (DELETE)
    /collections/{id}/artworks/reorder           → Reorder (PATCH)
    /collections/{id}/copy                       → Copy (POST)

Usage:
======
    from vfa_gallery.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from vfa_gallery.api.handlers import (
    collection_handler,
    gallery_handler,
    health_handler,
)


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

    # Collections created and listed under their gallery
    app.include_router(
        gallery_handler.router,
        prefix="/galleries",
        tags=["Galleries"],
    )

    # Collection detail, update, delete, membership and copy endpoints
    app.include_router(
        collection_handler.router,
        prefix="/collections",
        tags=["Collections"],
    )
