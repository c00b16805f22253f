"""
URL slug helpers.

    slugify("Spring 2026: Oils!")  → "spring-2026-oils"
    slugify("Café Nights")         → "caf-nights"  (non-ASCII letters are dropped)

unique_slug() appends -1, -2, ... until the caller's `exists` check (scoped
to the parent gallery or user) reports the slug as free.
"""

import re
from typing import Awaitable, Callable

MAX_SLUG_LENGTH = 50

_INVALID_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_REPEATED_HYPHENS = re.compile(r"-+")


def slugify(name: str) -> str:
    """Lower-case, strip punctuation, hyphenate whitespace, cap at 50 chars."""
    slug = name.lower().strip()
    slug = _INVALID_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _REPEATED_HYPHENS.sub("-", slug)
    return slug[:MAX_SLUG_LENGTH]


async def unique_slug(
    name: str,
    exists: Callable[[str], Awaitable[bool]],
    fallback: str = "collection",
) -> str:
    """
    Return the first of slug, slug-1, slug-2, ... for which `exists` is False.

    Args:
        name: Human-readable name to derive the slug from
        exists: Async predicate, e.g. a slug lookup within one gallery
        fallback: Base slug when nothing of `name` survives slugify()
    """
    base = slugify(name) or fallback
    slug = base
    counter = 1

    while await exists(slug):
        slug = f"{base}-{counter}"
        counter += 1

    return slug
