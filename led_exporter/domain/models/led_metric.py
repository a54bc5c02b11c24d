"""Metric descriptor and sample models for LED gauges.

Usage:
    from led_exporter.domain.models.led_metric import LedSample, MetricDescriptor

    descriptor = MetricDescriptor(
        name="led_led_brightness",
        documentation="LED brightness",
    )
    sample = LedSample(metric=descriptor.name, led="input3__capslock", value=1.0)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MetricDescriptor:
    """Static description of one gauge the collector can emit.

    Created once per collector and shared read-only across scrapes.

    Attributes:
        name: Fully qualified metric name.
        documentation: HELP text.
        labelnames: Label names carried by every sample.
    """

    name: str
    documentation: str
    labelnames: tuple[str, ...] = ("led",)


@dataclass(frozen=True)
class LedSample:
    """One gauge reading for one LED in one collection pass.

    Attributes:
        metric: Name of the descriptor this sample belongs to.
        led: Sanitized LED name used as the "led" label value.
        value: Raw integer reading as a float gauge value.
    """

    metric: str
    led: str
    value: float
