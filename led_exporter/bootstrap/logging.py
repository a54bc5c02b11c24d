"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from led_exporter.config.exporter_config import ExporterConfig
from led_exporter.infrastructure.observability import configure_structlog


def configure_logging(config: ExporterConfig) -> None:
    """Configure structlog from the exporter configuration."""
    configure_structlog(environment=config.environment, log_level=config.log_level)


__all__ = ["configure_logging"]
