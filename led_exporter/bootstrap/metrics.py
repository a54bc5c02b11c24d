"""Bootstrap wiring for LED metrics.

The exporter is built once at startup by init_metrics(). Building it
enumerates the LED devices, so a failing device source stops the
process before the HTTP server is bound.
"""

from __future__ import annotations

from led_exporter.application.ports.led_source import LedSource
from led_exporter.application.ports.metrics_exporter import MetricsExporterPort
from led_exporter.infrastructure.monitoring.metrics import create_led_registry
from led_exporter.infrastructure.monitoring.metrics_exporter import (
    PrometheusMetricsExporter,
)

_metrics_exporter: MetricsExporterPort | None = None


def init_metrics(source: LedSource) -> MetricsExporterPort:
    """Build the LED collector and exporter for the given device source.

    Args:
        source: Device source, enumerated once here.

    Returns:
        The installed metrics exporter.

    Raises:
        LedEnumerationError: If the source cannot enumerate devices.
    """
    registry, _ = create_led_registry(source)
    exporter = PrometheusMetricsExporter(registry)
    set_metrics_exporter(exporter)
    return exporter


def get_metrics_exporter() -> MetricsExporterPort:
    """Get the metrics exporter instance.

    Raises:
        RuntimeError: If init_metrics() has not been called.
    """
    if _metrics_exporter is None:
        raise RuntimeError("Metrics exporter not initialized; call init_metrics() first")
    return _metrics_exporter


def set_metrics_exporter(exporter: MetricsExporterPort) -> None:
    """Set custom metrics exporter (testing/override)."""
    global _metrics_exporter
    _metrics_exporter = exporter


def reset_metrics() -> None:
    """Reset metrics singleton (testing cleanup)."""
    global _metrics_exporter
    _metrics_exporter = None
