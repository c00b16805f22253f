"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2026-10-18 10:30:00 [info     ] membership.added     collection_id=550e8400-... position=3

Production (JSON):
    {"timestamp": "2026-10-18T10:30:00", "level": "info", "event": "membership.added", "position": 3}

Event Names:
============
Ledger and collection mutations log one event each so the history of a
collection can be followed in aggregated logs:

    membership.added       collection_id, artwork_id, position
    membership.removed     collection_id, artwork_id, remaining
    membership.reordered   collection_id, count
    collection.created     collection_id, gallery_id, slug
    collection.updated     collection_id, fields
    collection.deleted     collection_id, gallery_id
    collection.copied      source_collection_id, collection_id, gallery_id, artwork_count

Usage:
======
    from vfa_gallery.shared.core.logging import logger, get_logger, log_context

    logger.info("membership.added", collection_id=cid, artwork_id=aid, position=n)

    ledger_logger = get_logger("ledger")
    ledger_logger.debug("positions rewritten", count=len(ids))

    # Add context to all subsequent logs
    log_context(request_id=request_id, user_id=user_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from vfa_gallery.config.settings import settings


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Sets up structlog with:
    - Development: Colored console output for readability
    - Production: JSON output for log aggregation systems

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context lives in contextvars, so it is scoped to the current request
    task until cleared.

    Args:
        **kwargs: Key-value pairs to add to log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all context variables bound with log_context()."""
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("vfa_gallery")
