"""Adapters connecting ports to host interfaces."""

from led_exporter.infrastructure.adapters.sysfs_led_source import (
    DEFAULT_LEDS_PATH,
    SysfsLed,
    SysfsLedSource,
)

__all__ = ["DEFAULT_LEDS_PATH", "SysfsLed", "SysfsLedSource"]
