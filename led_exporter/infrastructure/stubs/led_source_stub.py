"""Stub LED device source for testing.

Provides in-memory LED devices whose readings are fixed values or
errors, so collection behavior can be exercised without sysfs.

WARNING: This stub is for development/testing only.
Production should use SysfsLedSource.
"""

from __future__ import annotations

from dataclasses import dataclass

from led_exporter.application.ports.led_source import LedDevice, LedSource
from led_exporter.domain.errors.led import LedEnumerationError, LedReadError

# A reading is either a value or the exception raised when reading it
Reading = int | Exception


@dataclass
class StaticLed:
    """In-memory LED device.

    Readings may be reassigned between scrapes to simulate hardware
    changes. Setting a reading to None makes the read fail with
    LedReadError.

    Attributes:
        name: Raw device name.
        brightness_value: Current brightness, an exception to raise, or None.
        max_brightness_value: Max brightness, an exception to raise, or None.
        reads: Number of attribute reads performed.
    """

    name: str
    brightness_value: Reading | None = 0
    max_brightness_value: Reading | None = 255
    reads: int = 0

    def brightness(self) -> int:
        return self._read("brightness", self.brightness_value)

    def max_brightness(self) -> int:
        return self._read("max_brightness", self.max_brightness_value)

    def _read(self, attribute: str, value: Reading | None) -> int:
        self.reads += 1
        if value is None:
            raise LedReadError(self.name, attribute, "no such attribute")
        if isinstance(value, Exception):
            raise value
        return value


class StaticLedSource(LedSource):
    """Stub device source returning a fixed list of devices.

    Attributes:
        leds: Devices returned by discover().
        error: If set, discover() raises it instead.
        discover_calls: Number of times discover() was called.
    """

    def __init__(
        self,
        leds: list[LedDevice] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.leds: list[LedDevice] = list(leds or [])
        self.error = error
        self.discover_calls = 0

    def discover(self) -> list[LedDevice]:
        self.discover_calls += 1
        if self.error is not None:
            raise self.error
        return list(self.leds)

    @classmethod
    def failing(cls, message: str = "LED class not available") -> "StaticLedSource":
        """Create a source whose enumeration always fails."""
        return cls(error=LedEnumerationError(message))
