"""structlog setup shared by the CLI, the HTTP API and the engine modules."""

from __future__ import annotations

import logging
from typing import Any

import structlog

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=False),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def _route_through_stdlib() -> None:
    structlog.configure(
        processors=_PROCESSORS,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str = "WARNING") -> None:
    """Entry points call this once; JSON lines go to stderr at `level`."""
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(format="%(message)s", level=numeric)
    logging.getLogger().setLevel(numeric)
    _route_through_stdlib()


def get_logger(name: str | None = None) -> Any:
    # Library use without configure_logging must not print to stdout,
    # where account numbers go.
    if not structlog.is_configured():
        _route_through_stdlib()
    return structlog.get_logger(name)
