"""Infrastructure monitoring components.

Prometheus collection and exposition for LED brightness gauges.
"""

from led_exporter.infrastructure.monitoring.led_collector import (
    LED_LABEL,
    NAMESPACE,
    SUBSYSTEM,
    LedCollector,
)
from led_exporter.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    create_led_registry,
    generate_metrics,
)
from led_exporter.infrastructure.monitoring.metrics_exporter import (
    PrometheusMetricsExporter,
)

__all__ = [
    "LED_LABEL",
    "NAMESPACE",
    "SUBSYSTEM",
    "LedCollector",
    "METRICS_CONTENT_TYPE",
    "create_led_registry",
    "generate_metrics",
    "PrometheusMetricsExporter",
]
