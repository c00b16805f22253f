"""
Health handler.

/health and /live answer without touching the database. /ready runs a
trivial query so a node whose database is unreachable is taken out of
rotation with a 503 instead of failing collection requests.
"""

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError

from vfa_gallery.api.dependencies.database import DbSession
from vfa_gallery.config.settings import settings
from vfa_gallery.shared.core.exceptions import ServiceUnavailableError
from vfa_gallery.shared.core.logging import get_logger
from vfa_gallery.shared.schemas.common import HealthResponse


logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service name, version and current time."""
    return HealthResponse(
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession):
    """Ready once the collections database answers."""
    try:
        await db.execute(text("SELECT 1"))
    except DBAPIError as exc:
        logger.error("readiness.database_unreachable", error=str(exc))
        raise ServiceUnavailableError(
            "Database unreachable", error_code="NOT_READY"
        ) from exc
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    return {"status": "alive"}
