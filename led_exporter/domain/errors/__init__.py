"""Domain errors for the LED exporter.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from LedExporterError.
"""

from led_exporter.domain.errors.led import LedEnumerationError, LedReadError

__all__: list[str] = ["LedEnumerationError", "LedReadError"]
