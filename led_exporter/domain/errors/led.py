"""LED device domain exceptions.

These exceptions are raised by device sources when LEDs cannot be
enumerated or when a single attribute read fails.

Failure Semantics:
- LedEnumerationError is fatal: the exporter must not start serving
- LedReadError is local: the affected sample is omitted for one scrape
"""

from led_exporter.domain.exceptions import LedExporterError


class LedEnumerationError(LedExporterError):
    """Raised when the device source cannot list LED devices.

    Raised at startup only. The process exits instead of serving
    an empty or partial device set.
    """

    def __init__(self, message: str = "LED devices could not be enumerated") -> None:
        """Initialize with default message for enumeration failure."""
        super().__init__(message)


class LedReadError(LedExporterError):
    """Raised when reading one attribute of one LED fails.

    Attributes:
        led: Raw name of the device that failed.
        attribute: Attribute being read (brightness, max_brightness).
    """

    def __init__(self, led: str, attribute: str, reason: str = "") -> None:
        self.led = led
        self.attribute = attribute
        message = f"Failed to read {attribute} of LED '{led}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
