"""
Repository tests for the lookups the services build on.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import select

from vfa_gallery.shared.models import ArtworkStatus, Collection, PublicationStatus
from vfa_gallery.shared.repositories import (
    ArtworkRepository,
    CollectionArtworkRepository,
    CollectionRepository,
    UserRepository,
)


async def test_exists_and_count(db, world) -> None:
    repo = ArtworkRepository(db)

    assert await repo.exists(world.a1.id) is True
    assert await repo.exists(uuid4()) is False
    assert await repo.count() == 4
    assert await repo.count({"user_id": world.owner.id}) == 3


async def test_filter_owned_ids(db, seeder, world) -> None:
    deleted = await seeder.artwork(world.owner, status=ArtworkStatus.DELETED)
    repo = ArtworkRepository(db)

    owned = await repo.filter_owned_ids(
        [world.a1.id, world.stranger_artwork.id, deleted.id, world.a3.id], world.owner.id
    )

    assert owned == {world.a1.id, world.a3.id}
    assert await repo.filter_owned_ids([], world.owner.id) == set()


async def test_collection_lookups(db, seeder, world) -> None:
    repo = CollectionRepository(db)
    await seeder.collection(world.stranger_gallery)

    assert await repo.slug_exists(world.gallery.id, world.collection.slug) is True
    assert await repo.slug_exists(world.stranger_gallery.id, world.collection.slug) is False
    assert await repo.count_for_user(world.owner.id) == 1
    assert await repo.count_for_user(world.stranger.id) == 1
    assert (await repo.get_for_update(world.collection.id)).id == world.collection.id
    assert await repo.get_for_update(uuid4()) is None


async def test_touch_sets_updated_at(db, world) -> None:
    at = datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    await CollectionRepository(db).touch(world.collection.id, at)

    stored = (
        await db.execute(select(Collection.updated_at).where(Collection.id == world.collection.id))
    ).scalar_one()
    assert stored.replace(tzinfo=None) == at.replace(tzinfo=None)


async def test_rewrite_positions_single_statement(db, world) -> None:
    repo = CollectionArtworkRepository(db)
    cid = world.collection.id
    await repo.bulk_insert(cid, [world.a1.id, world.a2.id, world.a3.id])

    await repo.rewrite_positions(cid, [world.a2.id, world.a3.id, world.a1.id])

    rows = await repo.list_ordered(cid)
    assert [(row.artwork_id, row.position) for row in rows] == [
        (world.a2.id, 0),
        (world.a3.id, 1),
        (world.a1.id, 2),
    ]
    assert await repo.count_for_collection(cid) == 3


async def test_delete_membership(db, world) -> None:
    repo = CollectionArtworkRepository(db)
    cid = world.collection.id
    await repo.insert(cid, world.a1.id, 0)

    assert await repo.delete_membership(cid, world.a1.id) is True
    assert await repo.delete_membership(cid, world.a1.id) is False
    assert await repo.get_membership(cid, world.a1.id) is None


async def test_collection_limit(db, seeder) -> None:
    user = await seeder.user(collection_limit=7)
    repo = UserRepository(db)

    assert await repo.get_collection_limit(user.id) == 7
    assert await repo.get_collection_limit(uuid4()) is None


async def test_slug_exists_excluding_own_collection(db, world) -> None:
    repo = CollectionRepository(db)
    slug = world.collection.slug

    assert await repo.slug_exists(world.gallery.id, slug, exclude_id=world.collection.id) is False
    assert await repo.slug_exists(world.gallery.id, slug, exclude_id=uuid4()) is True


async def test_list_for_gallery_counts_artworks(db, seeder, world) -> None:
    repo = CollectionRepository(db)
    draft = await seeder.collection(world.gallery, status=PublicationStatus.DRAFT)
    await CollectionArtworkRepository(db).bulk_insert(draft.id, [world.a1.id, world.a2.id])

    everything = await repo.list_for_gallery(world.gallery.id)
    active = await repo.list_for_gallery(world.gallery.id, [PublicationStatus.ACTIVE])

    assert {c.id: n for c, n in everything} == {world.collection.id: 0, draft.id: 2}
    assert [(c.id, n) for c, n in active] == [(world.collection.id, 0)]


async def test_update_and_delete(db, world) -> None:
    repo = CollectionRepository(db)

    updated = await repo.update(world.collection.id, name="Summer", description=None)
    assert (updated.name, updated.description) == ("Summer", None)
    assert await repo.update(uuid4(), name="Nobody") is None

    assert await repo.delete(world.collection.id) is True
    assert await repo.delete(world.collection.id) is False
    assert await repo.exists(world.collection.id) is False
