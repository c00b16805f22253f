"""
VFA.gallery settings, read once from the environment (or .env) by
pydantic-settings. The database URL, JWT secret and the default per-user
collection limit live here.

    from vfa_gallery.config import settings

    limit = settings.DEFAULT_COLLECTION_LIMIT
"""

from vfa_gallery.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
