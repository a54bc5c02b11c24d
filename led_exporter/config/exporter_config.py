"""Exporter configuration.

Defines listen address, device path and logging environment with
environment variable overrides. The --port command line flag takes
precedence over LED_EXPORTER_PORT.

Environment Variables:
- LED_EXPORTER_PORT: TCP port to listen on (default: 9342)
- LED_EXPORTER_HOST: Address to bind (default: 0.0.0.0)
- LED_EXPORTER_LEDS_PATH: LED class directory (default: /sys/class/leds)
- ENVIRONMENT: 'production' for JSON logs, anything else for console logs
- LOG_LEVEL: structlog level name (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from led_exporter.infrastructure.adapters.sysfs_led_source import DEFAULT_LEDS_PATH

DEFAULT_PORT = 9342
DEFAULT_HOST = "0.0.0.0"
DEFAULT_ENVIRONMENT = "production"
DEFAULT_LOG_LEVEL = "INFO"

MIN_PORT = 1
MAX_PORT = 65535


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class ExporterConfig:
    """Configuration for the LED exporter process.

    Attributes:
        port: TCP port for the HTTP server. Default: 9342.
        host: Address the HTTP server binds. Default: all interfaces.
        leds_path: Directory holding LED class devices.
        environment: Log rendering mode ('production' renders JSON).
        log_level: Log level name (DEBUG shows per-LED read failures).
    """

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    leds_path: str = DEFAULT_LEDS_PATH
    environment: str = DEFAULT_ENVIRONMENT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not MIN_PORT <= self.port <= MAX_PORT:
            raise ValueError(
                f"port must be between {MIN_PORT} and {MAX_PORT}, got {self.port}"
            )
        if not self.host:
            raise ValueError("host must not be empty")
        if not self.leds_path:
            raise ValueError("leds_path must not be empty")

    @classmethod
    def from_environment(cls, port: int | None = None) -> "ExporterConfig":
        """Create config from environment variables with defaults.

        Args:
            port: Explicit port (from the command line), overrides the environment.

        Returns:
            ExporterConfig with values from environment or defaults.
        """
        return cls(
            port=port if port is not None else _get_int_env("LED_EXPORTER_PORT", DEFAULT_PORT),
            host=os.environ.get("LED_EXPORTER_HOST", DEFAULT_HOST),
            leds_path=os.environ.get("LED_EXPORTER_LEDS_PATH", DEFAULT_LEDS_PATH),
            environment=os.environ.get("ENVIRONMENT", DEFAULT_ENVIRONMENT),
            log_level=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
