"""Structured logging configuration.

Features:
- JSON-formatted log output for production
- Human-readable format for development
- Service context on every entry
- Session identifiers bound by the cache manager
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from pset_cache.core.config import get_settings


_configured = False


def add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add service context to all log entries.

    Args:
        logger: The wrapped logger object.
        method_name: The name of the method called on the logger.
        event_dict: The event dictionary to process.

    Returns:
        Updated event dictionary with service context.
    """
    settings = get_settings()
    event_dict["service"] = settings.service_name
    event_dict["environment"] = settings.environment
    return event_dict


def configure_logging(force: bool = False) -> None:
    """Configure structured logging for the library.

    In development: Human-readable colored output
    In production: JSON-formatted structured logs

    Args:
        force: Reconfigure even if logging was already configured.
    """
    global _configured
    if _configured and not force:
        return

    settings = get_settings()

    use_json = settings.environment in ("production", "staging")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if use_json:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    level = logging.getLevelName(settings.log_level.upper())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    _configured = True


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Optional logger name (module name recommended).

    Returns:
        structlog BoundLogger instance.

    Example:
        ```python
        from pset_cache.core.logging import get_logger

        logger = get_logger(__name__)
        logger.debug("cache hit", kind="length", name="Width")
        ```
    """
    return structlog.get_logger(name)
