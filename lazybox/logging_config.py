"""Structured logging configuration for lazybox.

Uses structlog on top of the stdlib logging module so container events
can be rendered either for the console or as JSON lines.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

LEVEL_ENV = "LAZYBOX_LOG_LEVEL"


def configure_logging(level: str | None = None, json_output: bool = False) -> None:
    """Configure structured logging.

    Args:
        level: Log level name; falls back to LAZYBOX_LOG_LEVEL, then INFO
        json_output: Whether to output JSON format
    """
    requested = level or os.environ.get(LEVEL_ENV)
    level_no = getattr(logging, (requested or "INFO").upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level_no)
    # basicConfig is a no-op once the root logger has handlers
    if requested:
        logging.getLogger().setLevel(level_no)

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)
