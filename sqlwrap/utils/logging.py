"""Structured logging helpers built on structlog.

sqlwrap modules obtain loggers through :func:`get_logger`; nothing is
configured on import.  Applications that want sqlwrap's events rendered call
:func:`configure_logging` once at startup::

    from sqlwrap.utils.logging import configure_logging

    configure_logging("DEBUG", json=True)

Events emitted by the library:

- ``statement_built`` (debug) when the builder's ``log_statements`` flag is on.
- ``statement_rejected`` (warning) under the same flag when a build raises.
"""
from __future__ import annotations

import logging
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from sqlwrap.config import get_settings


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = get_settings().log_level
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(
    level: str | int | None = None,
    json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog with level filtering, ISO timestamps and a renderer.

    Args:
        level: Level name or number.  Defaults to ``SQLWRAP_LOG_LEVEL``.
        json: Render events as JSON lines instead of the console format.
        stream: Output stream (default: standard output).
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
