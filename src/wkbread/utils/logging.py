"""Structured logging for wkbread.

Library modules log through structlog loggers wrapped around stdlib loggers
under the "wkbread" namespace, so nothing is emitted unless the host
application configures logging. The CLI calls configure_logging() to render
events (JSON or colored console) on stderr, keeping stdout for results.
Correlation IDs tie each event to the payload being decoded.
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from wkbread.config import settings

LIBRARY_LOGGER = "wkbread"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())

# Context variables for correlation IDs
_payload_id: ContextVar[str | None] = ContextVar("payload_id", default=None)
_source: ContextVar[str | None] = ContextVar("source", default=None)


def set_correlation_context(
    payload_id: str | None = None,
    source: str | None = None,
) -> None:
    """Set correlation IDs for the current context.

    Args:
        payload_id: Identifier of the payload being decoded (e.g., "input:3")
        source: Where the payload came from (argument, file path, ...)
    """
    if payload_id is not None:
        _payload_id.set(payload_id)
    if source is not None:
        _source.set(source)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    _payload_id.set(None)
    _source.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add correlation IDs to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    payload_id = _payload_id.get()
    source = _source.get()

    if payload_id is not None:
        event_dict["payload_id"] = payload_id
    if source is not None:
        event_dict["source"] = source

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
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

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str = LIBRARY_LOGGER) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger of the same name.

    Level filtering and output stay with stdlib logging, so an unconfigured
    host never sees wkbread debug events.

    Args:
        name: Logger name, normally the calling module's __name__.

    Returns:
        A bound structlog logger instance.
    """
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.wrap_logger(
            logging.getLogger(name),
            wrapper_class=structlog.stdlib.BoundLogger,
        ),
    )
