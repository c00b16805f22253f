"""
Pytest configuration and fixtures.

Every test gets its own in-memory SQLite database (aiosqlite) with the schema
created from the models. StaticPool keeps the single connection alive so all
sessions in a test see the same database.
"""

from __future__ import annotations

import os
from types import SimpleNamespace
from typing import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tests.test_constants import TEST_DATABASE_URL, TEST_SECRET_KEY

# Force test settings before any application module is imported
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = TEST_SECRET_KEY

from vfa_gallery.shared.models import (  # noqa: E402
    Artwork,
    ArtworkStatus,
    Base,
    Collection,
    Gallery,
    PublicationStatus,
    User,
)


@pytest.fixture
async def engine():
    """Fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory) -> AsyncIterator[AsyncSession]:
    """Database session for service and repository tests."""
    async with session_factory() as session:
        yield session


class Seeder:
    """Creates rows directly through the session (flush + refresh, no commit)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._counter = 0

    def _next(self) -> int:
        self._counter += 1
        return self._counter

    async def _save(self, instance):
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def user(self, collection_limit: int = 1000) -> User:
        n = self._next()
        return await self._save(
            User(
                email=f"artist{n}@example.com",
                username=f"artist{n}",
                collection_limit=collection_limit,
            )
        )

    async def gallery(self, user: User, name: str = "Paintings") -> Gallery:
        n = self._next()
        return await self._save(Gallery(user_id=user.id, slug=f"gallery-{n}", name=name))

    async def collection(
        self,
        gallery: Gallery,
        name: str = "Spring",
        slug: str | None = None,
        status: PublicationStatus = PublicationStatus.ACTIVE,
        description: str | None = None,
        is_default: bool = False,
    ) -> Collection:
        n = self._next()
        return await self._save(
            Collection(
                gallery_id=gallery.id,
                slug=slug or f"collection-{n}",
                name=name,
                description=description,
                is_default=is_default,
                status=status,
            )
        )

    async def artwork(
        self,
        user: User,
        status: ArtworkStatus = ArtworkStatus.ACTIVE,
    ) -> Artwork:
        n = self._next()
        return await self._save(
            Artwork(user_id=user.id, slug=f"artwork-{n}", title=f"Artwork {n}", status=status)
        )


@pytest.fixture
def seeder(db: AsyncSession) -> Seeder:
    return Seeder(db)


@pytest.fixture
async def world(db: AsyncSession, seeder: Seeder) -> SimpleNamespace:
    """
    An owner with one gallery, one empty collection and three artworks,
    plus a second user with their own gallery and artwork. Committed.
    """
    owner = await seeder.user()
    gallery = await seeder.gallery(owner)
    collection = await seeder.collection(gallery)
    a1 = await seeder.artwork(owner)
    a2 = await seeder.artwork(owner)
    a3 = await seeder.artwork(owner)

    stranger = await seeder.user()
    stranger_gallery = await seeder.gallery(stranger)
    stranger_artwork = await seeder.artwork(stranger)

    await db.commit()

    return SimpleNamespace(
        owner=owner,
        gallery=gallery,
        collection=collection,
        a1=a1,
        a2=a2,
        a3=a3,
        stranger=stranger,
        stranger_gallery=stranger_gallery,
        stranger_artwork=stranger_artwork,
    )

@pytest.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    """HTTP client with get_db overridden to use the test database."""
    from vfa_gallery.api.dependencies.database import get_db
    from vfa_gallery.api.main import app

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.pop(get_db, None)
