"""
API Middleware

Components:
===========
- error_handler: Global exception handling

Usage:
======
    from vfa_gallery.api.middleware import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from vfa_gallery.api.middleware.error_handler import setup_exception_handlers

__all__ = [
    "setup_exception_handlers",
]
