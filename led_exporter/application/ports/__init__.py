"""Application ports (interfaces) for the LED exporter.

Ports decouple collection logic from the host device interface and
from the metrics output format.
"""

from led_exporter.application.ports.led_source import LedDevice, LedSource
from led_exporter.application.ports.metrics_exporter import MetricsExporterPort

__all__ = ["LedDevice", "LedSource", "MetricsExporterPort"]
