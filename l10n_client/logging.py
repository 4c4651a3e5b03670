"""Structured logging helpers."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: int | str = logging.INFO, *, stream: TextIO | None = None) -> None:
    """Render JSON log events to ``stream`` (stdout unless given).

    The CLI passes stderr so that command output on stdout stays parseable.
    """

    numeric_level = resolve_level(level)
    target = stream or sys.stdout
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        handlers=[logging.StreamHandler(target)],
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=target),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()

__all__ = ["configure_logging", "logger", "resolve_level"]
