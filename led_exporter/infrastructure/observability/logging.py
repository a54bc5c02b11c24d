"""Structured logging configuration with structlog.

Production renders one JSON object per line on stdout, which is what
journald and container log collectors expect from an exporter:

    {"event": "leds_discovered", "count": 3, "component": "collector",
     "level": "info", "timestamp": "2024-01-01T00:00:00.000000Z"}

Any other environment renders colored console lines for local runs.
Per-LED read failures are debug events, so they only appear with
LOG_LEVEL=DEBUG.
"""

from __future__ import annotations

import logging

import structlog
from structlog.typing import Processor

DEFAULT_LOG_LEVEL = "INFO"
SERVICE_NAME = "led-exporter"


def resolve_log_level(name: str | None) -> int:
    """Map a level name such as "debug" to its logging constant.

    Unknown or missing names resolve to INFO.
    """
    level = logging.getLevelName((name or DEFAULT_LOG_LEVEL).upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(environment: str) -> list[Processor]:
    """Processor chain for the given environment, renderer last."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if environment == "production":
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    return processors


def configure_structlog(
    environment: str = "production", log_level: str | None = None
) -> None:
    """Configure structlog once at startup, before the collector is built.

    Args:
        environment: 'production' for JSON output, anything else for console.
        log_level: Level name; defaults to INFO.
    """
    structlog.configure(
        processors=build_processors(environment),
        wrapper_class=structlog.make_filtering_bound_logger(
            resolve_log_level(log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_component(component: str) -> structlog.BoundLogger:
    """Get a logger with service and component already bound."""
    return structlog.get_logger().bind(service=SERVICE_NAME, component=component)
