"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: JWT verification
- slugs: URL slug generation and per-parent uniqueness

Usage:
======
    from vfa_gallery.shared.utils.security import SecurityUtils
    from vfa_gallery.shared.utils.slugs import slugify, unique_slug
"""

from vfa_gallery.shared.utils.security import SecurityUtils
from vfa_gallery.shared.utils.slugs import MAX_SLUG_LENGTH, slugify, unique_slug

__all__ = [
    "SecurityUtils",
    "MAX_SLUG_LENGTH",
    "slugify",
    "unique_slug",
]
