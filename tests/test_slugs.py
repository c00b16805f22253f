"""
Slug helper tests.
"""

import pytest

from vfa_gallery.shared.utils.slugs import MAX_SLUG_LENGTH, slugify, unique_slug


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Spring", "spring"),
        ("Spring (Copy)", "spring-copy"),
        ("  Autumn   Oils  ", "autumn-oils"),
        ("Spring 2026: Oils!", "spring-2026-oils"),
        ("a - b", "a-b"),
        ("Café Nights", "caf-nights"),
        ("snake_case name", "snake_case-name"),
    ],
)
def test_slugify(name: str, expected: str) -> None:
    assert slugify(name) == expected


def test_slugify_truncates() -> None:
    assert len(slugify("x" * 80)) == MAX_SLUG_LENGTH


async def test_unique_slug_returns_base_when_free() -> None:
    async def exists(candidate: str) -> bool:
        return False

    assert await unique_slug("Spring (Copy)", exists) == "spring-copy"


async def test_unique_slug_appends_counter() -> None:
    taken = {"spring-copy", "spring-copy-1", "spring-copy-2"}
    checked: list[str] = []

    async def exists(candidate: str) -> bool:
        checked.append(candidate)
        return candidate in taken

    assert await unique_slug("Spring (Copy)", exists) == "spring-copy-3"
    assert checked == ["spring-copy", "spring-copy-1", "spring-copy-2", "spring-copy-3"]


async def test_unique_slug_falls_back_when_name_has_no_slug() -> None:
    taken = {"collection"}

    async def exists(candidate: str) -> bool:
        return candidate in taken

    assert await unique_slug("!!!", exists) == "collection-1"
    assert await unique_slug("Ωμέγα", exists, fallback="untitled") == "untitled"
