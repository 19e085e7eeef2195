"""
Structured logging configuration using structlog.
Provides JSON-formatted logs for production and human-readable logs for development.
"""

import logging
import sys
from typing import cast

import structlog
from structlog.types import Processor

from gs1dl.core.config import get_settings


def configure_logging(log_level: str | None = None) -> None:
    """
    Configure structured logging for the command-line tool.

    In development mode, logs are formatted for human readability.
    Elsewhere, logs are JSON-formatted for log aggregation systems.
    Logs go to stderr so that rendered element strings on stdout stay clean.
    """
    settings = get_settings()
    level = log_level or settings.log_level

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.environment == "development":
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]
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

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance with the given name.

    The logger always wraps the standard library logger, so that when the
    package is used as a library without :func:`configure_logging` the
    host application's logging levels apply.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.wrap_logger(logging.getLogger(name)))
