"""
VFA.gallery HTTP API.

Exposes galleries' collections and their ordered artworks over FastAPI:

    main.py         create_application(), lifespan, request log context
    routes.py       mounts /galleries, /collections and the health routes
    dependencies/   request session, bearer-token users, CollectionService
    handlers/       one router per resource, no business logic
    middleware/     VFAException and request validation → JSON error body

Run with ``uvicorn vfa_gallery.api.main:app``.
"""
