"""Domain models for the LED exporter."""

from led_exporter.domain.models.led_metric import LedSample, MetricDescriptor

__all__ = ["LedSample", "MetricDescriptor"]
