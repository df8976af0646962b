"""Structured logging.

Library modules log through the standard ``logging`` module.  Their
records are rendered by structlog (JSON or console) through a
``ProcessorFormatter`` on one handler attached to the ``localelist``
logger, so the same output format covers stdlib and structlog loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from localelist.core.config import Settings

PACKAGE_LOGGER = "localelist"

# Handler installed by the last setup_logging() call
_handler: logging.Handler | None = None


def _add_component(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add component name."""
    event_dict.setdefault("component", PACKAGE_LOGGER)
    return event_dict


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        _add_component,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def setup_logging(
    level: str = "INFO",
    format: str = "console",
    stream: IO[str] | None = None,
) -> None:
    """Configure structured logging for the ``localelist`` loggers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: "json" for production, "console" for development.
        stream: Where records go (default: stderr).
    """
    global _handler

    log_level = getattr(logging, level.upper(), logging.INFO)
    shared = _shared_processors()

    if format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    _handler = handler


def setup_logging_from_settings(
    settings: Settings, stream: IO[str] | None = None
) -> None:
    setup_logging(
        settings.observability.log_level,
        settings.observability.log_format,
        stream=stream,
    )

