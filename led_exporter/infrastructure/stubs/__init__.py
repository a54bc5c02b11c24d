"""In-memory stubs for development and testing."""

from led_exporter.infrastructure.stubs.led_source_stub import StaticLed, StaticLedSource

__all__ = ["StaticLed", "StaticLedSource"]
