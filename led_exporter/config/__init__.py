"""Configuration module for the LED exporter.

Available Configurations:
- ExporterConfig: Listen address, LED class path and log environment
"""

from led_exporter.config.exporter_config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    ExporterConfig,
)

__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "ExporterConfig"]
