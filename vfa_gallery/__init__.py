"""
VFA.gallery Backend

Galleries, collections and the ordered membership of artworks in collections.

Package Structure:
==================
    vfa_gallery/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, repositories, services, schemas
    └── config/     ← Configuration

Running the Application:
========================
    # Apply migrations
    alembic upgrade head

    # API Server
    uvicorn vfa_gallery.api.main:app --reload
"""
