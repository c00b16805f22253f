"""
Exception serialization and the global error handlers.
"""

from uuid import uuid4

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from vfa_gallery.api.middleware import setup_exception_handlers
from vfa_gallery.shared.core.exceptions import (
    AlreadyMemberError,
    DefaultCollectionError,
    NotMemberError,
    StorageError,
    VFAException,
)


def test_to_dict_shape() -> None:
    collection_id, artwork_id = uuid4(), uuid4()

    body = NotMemberError(collection_id, artwork_id).to_dict()

    assert body == {
        "error": {
            "code": "NOT_MEMBER",
            "message": "Artwork in this collection not found",
            "details": {"collection_id": str(collection_id), "artwork_id": str(artwork_id)},
        }
    }


def test_status_codes() -> None:
    assert AlreadyMemberError(uuid4(), uuid4()).status_code == 409
    assert StorageError("reorder").status_code == 503
    assert DefaultCollectionError(uuid4()).status_code == 400
    assert VFAException("boom").error_code == "INTERNAL_ERROR"


def test_storage_error_is_retryable() -> None:
    error = StorageError("remove", details={"collection_id": "c1"})

    assert error.message == "Could not complete remove, please retry"
    assert error.details == {"collection_id": "c1", "operation": "remove", "retryable": True}


def _app_raising(exc: Exception) -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise exc

    return app


async def test_application_error_is_rendered() -> None:
    app = _app_raising(StorageError("add"))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORAGE_ERROR"
    assert response.json()["error"]["details"]["retryable"] is True


async def test_unexpected_error_hides_details() -> None:
    app = _app_raising(RuntimeError("secret internals"))
    transport = ASGITransport(app=app, raise_app_exceptions=False)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"}
    }
