"""
Database Module

Database connectivity and session management for VFA.gallery.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to Services → Repositories
        ▼
    Repositories
        - GalleryRepository
        - CollectionRepository
        - ArtworkRepository
        - CollectionArtworkRepository
        │  SQL Queries
        ▼
    PostgreSQL Database

Usage in FastAPI:
=================
    from fastapi import Depends
    from vfa_gallery.shared.db import get_db
    from vfa_gallery.shared.services import MembershipLedger

    @app.get("/collections/{collection_id}/artworks")
    async def list_artworks(collection_id: UUID, db: AsyncSession = Depends(get_db)):
        return await MembershipLedger(db).list_ordered(collection_id)
"""

from vfa_gallery.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
