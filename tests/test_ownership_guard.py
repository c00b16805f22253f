"""
OwnershipGuard tests.
"""

from uuid import uuid4

import pytest

from vfa_gallery.shared.core.exceptions import (
    ArtworkNotFoundError,
    CollectionNotFoundError,
    GalleryNotFoundError,
    NotOwnerError,
)
from vfa_gallery.shared.models import ArtworkStatus, PublicationStatus
from vfa_gallery.shared.services.ownership_guard import OwnershipGuard


async def test_owner_can_mutate(db, world) -> None:
    guard = OwnershipGuard(db)

    assert await guard.can_mutate(world.owner.id, world.collection.id) is True
    assert await guard.can_mutate(world.stranger.id, world.collection.id) is False
    assert await guard.can_mutate(world.owner.id, uuid4()) is False


async def test_require_collection_owner(db, world) -> None:
    guard = OwnershipGuard(db)

    collection = await guard.require_collection_owner(world.owner.id, world.collection.id)

    assert collection.id == world.collection.id
    assert collection.gallery.id == world.gallery.id


async def test_require_collection_owner_rejects_stranger(db, world) -> None:
    with pytest.raises(NotOwnerError) as exc_info:
        await OwnershipGuard(db).require_collection_owner(world.stranger.id, world.collection.id)

    assert exc_info.value.status_code == 403
    assert exc_info.value.error_code == "NOT_OWNER"
    assert exc_info.value.details == {"collection_id": str(world.collection.id)}


async def test_require_collection_owner_missing(db, world) -> None:
    with pytest.raises(CollectionNotFoundError):
        await OwnershipGuard(db).require_collection_owner(world.owner.id, uuid4())


async def test_require_gallery_owner(db, world) -> None:
    guard = OwnershipGuard(db)

    gallery = await guard.require_gallery_owner(world.owner.id, world.gallery.id)
    assert gallery.id == world.gallery.id

    with pytest.raises(NotOwnerError):
        await guard.require_gallery_owner(world.owner.id, world.stranger_gallery.id)
    with pytest.raises(GalleryNotFoundError):
        await guard.require_gallery_owner(world.owner.id, uuid4())


async def test_require_usable_artwork(db, seeder, world) -> None:
    guard = OwnershipGuard(db)
    deleted = await seeder.artwork(world.owner, status=ArtworkStatus.DELETED)
    draft = await seeder.artwork(world.owner, status=ArtworkStatus.DRAFT)

    assert (await guard.require_usable_artwork(world.owner.id, world.a1.id)).id == world.a1.id
    assert (await guard.require_usable_artwork(world.owner.id, draft.id)).id == draft.id

    with pytest.raises(ArtworkNotFoundError):
        await guard.require_usable_artwork(world.owner.id, world.stranger_artwork.id)
    with pytest.raises(ArtworkNotFoundError):
        await guard.require_usable_artwork(world.owner.id, deleted.id)


@pytest.mark.parametrize(
    "status,owner_sees,stranger_sees",
    [
        (PublicationStatus.ACTIVE, True, True),
        (PublicationStatus.DRAFT, True, False),
        (PublicationStatus.ARCHIVED, True, False),
    ],
)
async def test_can_view(db, seeder, world, status, owner_sees, stranger_sees) -> None:
    collection = await seeder.collection(world.gallery, status=status)
    loaded = await OwnershipGuard(db).collection_repo.get_with_gallery(collection.id)

    assert OwnershipGuard.can_view(world.owner.id, loaded) is owner_sees
    assert OwnershipGuard.can_view(world.stranger.id, loaded) is stranger_sees
    assert OwnershipGuard.can_view(None, loaded) is stranger_sees
