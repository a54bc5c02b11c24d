"""Observability infrastructure for structured logging.

Request-scoped fields (such as the correlation ID bound by the HTTP
middleware) travel through structlog.contextvars and are merged into
every log entry emitted while serving that request.

Usage:
    from led_exporter.infrastructure.observability import configure_structlog

    configure_structlog(environment="production", log_level="DEBUG")
"""

from led_exporter.infrastructure.observability.logging import (
    build_processors,
    configure_structlog,
    get_logger_for_component,
    resolve_log_level,
)

__all__: list[str] = [
    "build_processors",
    "configure_structlog",
    "get_logger_for_component",
    "resolve_log_level",
]
