"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "UNKNOWN_MEMBER",
            "message": "Artwork a2... is not in this collection",
            "details": {"artwork_id": "a2..."}
        }
    }

Exception Handling:
===================
1. VFAException subclasses → Use their status_code and to_dict()
2. Request validation (malformed body, non-UUID ids) → 400 VALIDATION_ERROR
3. Other exceptions → 500 with generic message (details hidden)

How callers should react:
    400 *    → resync the collection and resubmit
    401/403  → stop
    404      → stop
    409      → already done, or remove first
    503      → retry, nothing was applied
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from vfa_gallery.shared.core.exceptions import VFAException
from vfa_gallery.shared.core.logging import logger


def _validation_response(errors: list) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": jsonable_encoder(errors)},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(VFAException)
    async def vfa_exception_handler(
        request: Request,
        exc: VFAException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        Rejected membership operations end up here and are logged at
        warning level with their error code.
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request parsing errors.

        FastAPI raises these before the handler runs when the body, path or
        query parameters do not match their declared types.
        """
        logger.warning(
            "Request validation error",
            errors=jsonable_encoder(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors raised inside handlers."""
        logger.warning(
            "Validation error",
            errors=jsonable_encoder(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
