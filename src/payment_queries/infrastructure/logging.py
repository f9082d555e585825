"""Structured logging configuration using structlog.

Modules log through ``structlog.get_logger(__name__)`` with snake_case event
names and key/value context::

    logger.debug("payments_queried", count=12)

configure_logging() decides how those events are rendered.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, cast

import structlog

if TYPE_CHECKING:
    from structlog.types import EventDict, Processor

    from payment_queries.infrastructure.config import PaymentQueriesSettings


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to every log entry."""
    from payment_queries import __version__

    event_dict["app"] = "payment-queries"
    event_dict["version"] = __version__
    return event_dict


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to output JSON logs instead of console output
    """
    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=False)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
        force=True,
    )


def configure_logging_from_settings(settings: PaymentQueriesSettings) -> None:
    configure_logging(log_level=settings.log_level, json_logs=settings.json_logs)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("payments_queried", count=3)
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
