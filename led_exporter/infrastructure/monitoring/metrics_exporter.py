"""Metrics exporter adapter for Prometheus output."""

from __future__ import annotations

from prometheus_client import CollectorRegistry

from led_exporter.application.ports.metrics_exporter import MetricsExporterPort
from led_exporter.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    generate_metrics,
)


class PrometheusMetricsExporter(MetricsExporterPort):
    """Prometheus metrics exporter adapter."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    @property
    def content_type(self) -> str:
        return METRICS_CONTENT_TYPE

    def generate_metrics(self) -> bytes:
        return generate_metrics(self._registry)
