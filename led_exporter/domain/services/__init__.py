"""Domain services for the LED exporter."""

from led_exporter.domain.services.led_label import led_label

__all__ = ["led_label"]
