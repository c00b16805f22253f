"""
HTTP tests for the collection membership and copy endpoints.
"""

from uuid import uuid4

from sqlalchemy.exc import DBAPIError

from tests.helpers import auth_headers, positions
from vfa_gallery.shared.models import PublicationStatus


def artworks_url(collection_id) -> str:
    return f"/collections/{collection_id}/artworks"


async def add(client, world, artwork) -> None:
    response = await client.post(
        artworks_url(world.collection.id),
        json={"artworkId": str(artwork.id)},
        headers=auth_headers(world.owner.id),
    )
    assert response.status_code == 201, response.text


# ═══════════════════════════════════════════════════════════════════════════════
# ADD
# ═══════════════════════════════════════════════════════════════════════════════


async def test_add_artwork(client, world) -> None:
    response = await client.post(
        artworks_url(world.collection.id),
        json={"artworkId": str(world.a1.id)},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["artworkId"] == str(world.a1.id)
    assert body["position"] == 0
    assert "addedAt" in body


async def test_add_accepts_snake_case_body(client, world) -> None:
    response = await client.post(
        artworks_url(world.collection.id),
        json={"artwork_id": str(world.a1.id)},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 201


async def test_add_twice_is_conflict(client, world) -> None:
    await add(client, world, world.a1)

    response = await client.post(
        artworks_url(world.collection.id),
        json={"artworkId": str(world.a1.id)},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_MEMBER"


async def test_add_without_token(client, world) -> None:
    response = await client.post(
        artworks_url(world.collection.id),
        json={"artworkId": str(world.a1.id)},
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


async def test_add_with_bad_token(client, world) -> None:
    response = await client.post(
        artworks_url(world.collection.id),
        json={"artworkId": str(world.a1.id)},
        headers=auth_headers(world.owner.id, secret_key="some-other-signing-key-not-the-servers"),
    )

    assert response.status_code == 401


async def test_add_to_foreign_collection(client, world) -> None:
    response = await client.post(
        artworks_url(world.collection.id),
        json={"artworkId": str(world.stranger_artwork.id)},
        headers=auth_headers(world.stranger.id),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "NOT_OWNER"


async def test_add_foreign_artwork(client, world) -> None:
    response = await client.post(
        artworks_url(world.collection.id),
        json={"artworkId": str(world.stranger_artwork.id)},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "ARTWORK_NOT_FOUND"


async def test_add_to_missing_collection(client, world) -> None:
    response = await client.post(
        artworks_url(uuid4()),
        json={"artworkId": str(world.a1.id)},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "COLLECTION_NOT_FOUND"


async def test_add_with_malformed_artwork_id(client, world) -> None:
    response = await client.post(
        artworks_url(world.collection.id),
        json={"artworkId": "not-a-uuid"},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# LIST
# ═══════════════════════════════════════════════════════════════════════════════


async def test_list_artworks_in_order(client, world) -> None:
    for artwork in (world.a2, world.a1, world.a3):
        await add(client, world, artwork)

    response = await client.get(artworks_url(world.collection.id))

    assert response.status_code == 200
    body = response.json()
    assert body["collectionId"] == str(world.collection.id)
    assert body["total"] == 3
    assert positions(body) == [(str(world.a2.id), 0), (str(world.a1.id), 1), (str(world.a3.id), 2)]


async def test_list_draft_collection(client, seeder, db, world) -> None:
    draft = await seeder.collection(world.gallery, status=PublicationStatus.DRAFT)
    await db.commit()

    anonymous = await client.get(artworks_url(draft.id))
    stranger = await client.get(artworks_url(draft.id), headers=auth_headers(world.stranger.id))
    owner = await client.get(artworks_url(draft.id), headers=auth_headers(world.owner.id))

    assert anonymous.status_code == 404
    assert stranger.status_code == 404
    assert owner.status_code == 200
    assert owner.json()["items"] == []


# ═══════════════════════════════════════════════════════════════════════════════
# REMOVE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_remove_artwork_compacts(client, world) -> None:
    for artwork in (world.a1, world.a2, world.a3):
        await add(client, world, artwork)

    response = await client.delete(
        f"{artworks_url(world.collection.id)}/{world.a2.id}",
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Artwork removed from collection", "success": True}

    listing = (await client.get(artworks_url(world.collection.id))).json()
    assert positions(listing) == [(str(world.a1.id), 0), (str(world.a3.id), 1)]


async def test_remove_non_member(client, world) -> None:
    response = await client.delete(
        f"{artworks_url(world.collection.id)}/{world.a1.id}",
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_MEMBER"


async def test_remove_by_stranger(client, world) -> None:
    await add(client, world, world.a1)

    response = await client.delete(
        f"{artworks_url(world.collection.id)}/{world.a1.id}",
        headers=auth_headers(world.stranger.id),
    )

    assert response.status_code == 403


# ═══════════════════════════════════════════════════════════════════════════════
# REORDER
# ═══════════════════════════════════════════════════════════════════════════════


async def test_reorder(client, world) -> None:
    for artwork in (world.a1, world.a2, world.a3):
        await add(client, world, artwork)
    new_order = [str(world.a3.id), str(world.a1.id), str(world.a2.id)]

    response = await client.patch(
        f"{artworks_url(world.collection.id)}/reorder",
        json={"artworkIds": new_order},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 200
    assert positions(response.json()) == [(artwork_id, i) for i, artwork_id in enumerate(new_order)]

    listing = (await client.get(artworks_url(world.collection.id))).json()
    assert positions(listing) == positions(response.json())


async def test_reorder_with_former_member(client, world) -> None:
    for artwork in (world.a1, world.a2, world.a3):
        await add(client, world, artwork)
    await client.delete(
        f"{artworks_url(world.collection.id)}/{world.a2.id}",
        headers=auth_headers(world.owner.id),
    )

    response = await client.patch(
        f"{artworks_url(world.collection.id)}/reorder",
        json={"artworkIds": [str(world.a1.id), str(world.a3.id), str(world.a2.id)]},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "COUNT_MISMATCH"
    assert error["details"] == {"expected": 2, "provided": 3, "artwork_id": str(world.a2.id)}

    listing = (await client.get(artworks_url(world.collection.id))).json()
    assert positions(listing) == [(str(world.a1.id), 0), (str(world.a3.id), 1)]


async def test_reorder_short_list(client, world) -> None:
    for artwork in (world.a1, world.a2):
        await add(client, world, artwork)

    response = await client.patch(
        f"{artworks_url(world.collection.id)}/reorder",
        json={"artworkIds": [str(world.a2.id)]},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "COUNT_MISMATCH"
    assert error["details"] == {"expected": 2, "provided": 1, "artwork_id": str(world.a1.id)}


async def test_reorder_unknown_artwork_with_right_length(client, world) -> None:
    for artwork in (world.a1, world.a2):
        await add(client, world, artwork)

    response = await client.patch(
        f"{artworks_url(world.collection.id)}/reorder",
        json={"artworkIds": [str(world.a1.id), str(world.a3.id)]},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "UNKNOWN_MEMBER"
    assert error["details"] == {"artwork_id": str(world.a3.id)}


async def test_reorder_duplicates(client, world) -> None:
    for artwork in (world.a1, world.a2):
        await add(client, world, artwork)

    response = await client.patch(
        f"{artworks_url(world.collection.id)}/reorder",
        json={"artworkIds": [str(world.a1.id), str(world.a1.id)]},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "DUPLICATE_IN_REQUEST"


async def test_reorder_empty_collection(client, world) -> None:
    response = await client.patch(
        f"{artworks_url(world.collection.id)}/reorder",
        json={"artworkIds": []},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "EMPTY_COLLECTION"


async def test_reorder_requires_list(client, world) -> None:
    response = await client.patch(
        f"{artworks_url(world.collection.id)}/reorder",
        json={"artworkIds": "not-a-list"},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# COPY
# ═══════════════════════════════════════════════════════════════════════════════


async def test_copy_collection(client, world) -> None:
    for artwork in (world.a2, world.a1):
        await add(client, world, artwork)

    response = await client.post(
        f"/collections/{world.collection.id}/copy",
        json={"galleryId": str(world.gallery.id)},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Spring (Copy)"
    assert body["slug"] == "spring-copy"
    assert body["galleryId"] == str(world.gallery.id)
    assert body["isDefault"] is False
    assert body["status"] == "active"
    assert body["artworkCount"] == 2

    listing = (await client.get(artworks_url(body["id"]))).json()
    assert positions(listing) == [(str(world.a2.id), 0), (str(world.a1.id), 1)]


async def test_copy_into_foreign_gallery(client, world) -> None:
    response = await client.post(
        f"/collections/{world.collection.id}/copy",
        json={"galleryId": str(world.stranger_gallery.id)},
        headers=auth_headers(world.owner.id),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "NOT_OWNER"


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_health(client) -> None:
    assert (await client.get("/health")).json()["status"] == "healthy"
    assert (await client.get("/live")).json() == {"status": "alive"}
    assert (await client.get("/ready")).json() == {"status": "ready"}


async def test_ready_reports_unreachable_database(client) -> None:
    from vfa_gallery.api.dependencies.database import get_db
    from vfa_gallery.api.main import app

    class UnreachableSession:
        async def execute(self, statement):
            raise DBAPIError("SELECT 1", {}, ConnectionRefusedError("db down"))

    async def unreachable_db():
        yield UnreachableSession()

    app.dependency_overrides[get_db] = unreachable_db
    response = await client.get("/ready")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "NOT_READY"
