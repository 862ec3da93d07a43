"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from mail_headers.exceptions import ConfigurationError


def configure_logging(level: str = "INFO") -> None:
    """Install a structlog logger that drops events below ``level``.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"warning"``.

    Raises:
        ConfigurationError: If ``level`` is not a standard logging level.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ConfigurationError(f"Unknown log level: {level}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )
