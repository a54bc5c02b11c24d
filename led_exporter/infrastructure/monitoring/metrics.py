"""Prometheus registry wiring for LED metrics.

Each exporter owns a dedicated CollectorRegistry holding only the LED
collector. The process-wide default registry is never used, so tests
can build as many exporters as they like.
"""

from prometheus_client import CollectorRegistry, generate_latest

from led_exporter.application.ports.led_source import LedSource
from led_exporter.infrastructure.monitoring.led_collector import LedCollector

# Content type for Prometheus metrics endpoint
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


def create_led_registry(source: LedSource) -> tuple[CollectorRegistry, LedCollector]:
    """Build an LED collector and register it on a fresh registry.

    Registration calls LedCollector.describe(), so no device is read
    until the first scrape.

    Args:
        source: Device source to enumerate.

    Returns:
        The registry and the collector registered on it.

    Raises:
        LedEnumerationError: If the source cannot enumerate devices.
    """
    collector = LedCollector(source)
    registry = CollectorRegistry()
    registry.register(collector)
    return registry, collector


def generate_metrics(registry: CollectorRegistry) -> bytes:
    """Generate Prometheus metrics in exposition format.

    Args:
        registry: Registry to serialize.

    Returns:
        Metrics in Prometheus text format as bytes.
    """
    return generate_latest(registry)
