"""Prometheus collector for LED brightness gauges.

Exposes two gauges per LED, labeled by sanitized device name:

    led_led_brightness{led="input3__capslock"} 0.0
    led_led_max_brightness{led="input3__capslock"} 1.0

Collection Rules:
- Devices are enumerated once, when the collector is built
- Attributes are read live on every scrape, in device order
- A failed read omits that one sample; the other attribute is still read
- collect() never raises, whatever the devices do
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Callable

import structlog
from prometheus_client.core import GaugeMetricFamily
from prometheus_client.registry import Collector

from led_exporter.application.ports.led_source import LedDevice, LedSource
from led_exporter.domain.models.led_metric import LedSample, MetricDescriptor
from led_exporter.domain.services.led_label import led_label

NAMESPACE = "led"
SUBSYSTEM = "led"
LED_LABEL = "led"


def build_fq_name(*parts: str) -> str:
    """Join non-empty name parts with underscores."""
    return "_".join(part for part in parts if part)


def _encodable(label: str) -> str:
    """Replace characters UTF-8 cannot encode (lone surrogates) with "?"."""
    return label.encode("utf-8", "replace").decode("utf-8")


class LedCollector(Collector):
    """Custom collector reading LED brightness on each scrape.

    The device tuple and both descriptors are fixed at construction and
    never reassigned, so concurrent scrapes share them without locking.

    Attributes:
        devices: LED devices discovered at construction.
        brightness: Descriptor for led_led_brightness.
        max_brightness: Descriptor for led_led_max_brightness.
    """

    def __init__(self, source: LedSource) -> None:
        """Discover devices and build metric descriptors.

        Args:
            source: Device source, enumerated exactly once.

        Raises:
            LedEnumerationError: If the source cannot enumerate devices.
        """
        self._devices: tuple[LedDevice, ...] = tuple(source.discover())
        self._brightness = MetricDescriptor(
            name=build_fq_name(NAMESPACE, SUBSYSTEM, "brightness"),
            documentation="LED brightness",
            labelnames=(LED_LABEL,),
        )
        self._max_brightness = MetricDescriptor(
            name=build_fq_name(NAMESPACE, SUBSYSTEM, "max_brightness"),
            documentation="LED max brightness",
            labelnames=(LED_LABEL,),
        )
        self._log = structlog.get_logger().bind(component="collector")
        self._log.info(
            "leds_discovered",
            count=len(self._devices),
            leds=[device.name for device in self._devices],
        )

    @property
    def devices(self) -> tuple[LedDevice, ...]:
        return self._devices

    @property
    def brightness(self) -> MetricDescriptor:
        return self._brightness

    @property
    def max_brightness(self) -> MetricDescriptor:
        return self._max_brightness

    @property
    def descriptors(self) -> tuple[MetricDescriptor, ...]:
        return (self._brightness, self._max_brightness)

    def describe(self) -> Iterable[GaugeMetricFamily]:
        """Return one empty gauge family per descriptor.

        Called by the registry on registration; performs no device reads.
        """
        return [self._family(descriptor) for descriptor in self.descriptors]

    def collect(self) -> Iterator[GaugeMetricFamily]:
        """Yield both gauge families populated from a fresh read pass."""
        families = {
            descriptor.name: self._family(descriptor) for descriptor in self.descriptors
        }
        for sample in self.collect_samples():
            families[sample.metric].add_metric([sample.led], sample.value)
        yield from families.values()

    def collect_samples(self) -> list[LedSample]:
        """Read every device once and return samples in device order.

        Returns:
            Between 0 and 2 samples per device, brightness before
            max_brightness for each device.
        """
        samples: list[LedSample] = []
        for device in self._devices:
            label = _encodable(led_label(device.name))
            readers: Sequence[tuple[MetricDescriptor, Callable[[], int]]] = (
                (self._brightness, device.brightness),
                (self._max_brightness, device.max_brightness),
            )
            for descriptor, read in readers:
                value = self._read(device, descriptor, read)
                if value is None:
                    continue
                samples.append(
                    LedSample(metric=descriptor.name, led=label, value=value)
                )
        return samples

    def _read(
        self, device: LedDevice, descriptor: MetricDescriptor, read: Callable[[], int]
    ) -> float | None:
        try:
            return float(read())
        except Exception as exc:
            # Omitted for this scrape only; the next scrape reads again
            self._log.debug(
                "led_read_failed",
                led=device.name,
                metric=descriptor.name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return None

    @staticmethod
    def _family(descriptor: MetricDescriptor) -> GaugeMetricFamily:
        return GaugeMetricFamily(
            descriptor.name,
            descriptor.documentation,
            labels=list(descriptor.labelnames),
        )
