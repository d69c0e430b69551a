"""
structlog setup driven by the log_level and log_format settings.
"""

import logging
import sys
from typing import Optional

import structlog

from hiring_ledger.config.settings import settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog processors and output.

    Args:
        level: Log level name. Uses settings.log_level if not provided.
        fmt: 'json' for JSON lines, anything else for console output.
    """
    level_name = (level or settings.log_level).upper()
    log_format = (fmt or settings.log_format).lower()

    level_value = logging.getLevelName(level_name)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        # stdout is reserved for command output
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
