"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Membership ledger, ownership guard, collection service
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Slugs, JWT

Usage:
======
    from vfa_gallery.shared.models import Collection, CollectionArtwork
    from vfa_gallery.shared.repositories import CollectionArtworkRepository
    from vfa_gallery.shared.services import MembershipLedger
    from vfa_gallery.shared.core import logger, VFAException
"""
