"""
Pytest configuration and shared fixtures for LED exporter tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the package layout
- Device behavior is injected with StaticLedSource / StaticLed stubs
- Sysfs behavior is exercised against fake trees under tmp_path
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from led_exporter.bootstrap.metrics import reset_metrics
from led_exporter.infrastructure.stubs.led_source_stub import StaticLed, StaticLedSource
from tests.helpers.fake_sysfs import write_led


@pytest.fixture(autouse=True)
def reset_global_state() -> Iterator[None]:
    """Reset structlog configuration and the metrics singleton after each test."""
    yield
    reset_metrics()
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from led_exporter import __version__

    return __version__


@pytest.fixture
def three_leds() -> list[StaticLed]:
    """Three healthy LEDs with names that need sanitizing."""
    return [
        StaticLed("input3::capslock", brightness_value=1, max_brightness_value=1),
        StaticLed("tpacpi::power-led", brightness_value=0, max_brightness_value=255),
        StaticLed("mmc0::", brightness_value=3, max_brightness_value=7),
    ]


@pytest.fixture
def led_source(three_leds: list[StaticLed]) -> StaticLedSource:
    """Device source returning the three healthy LEDs."""
    return StaticLedSource(three_leds)


@pytest.fixture
def sysfs_leds(tmp_path: Path) -> Path:
    """Fake /sys/class/leds tree with two readable LEDs."""
    root = tmp_path / "leds"
    root.mkdir()
    write_led(root, "input3::capslock", "1\n", "1\n")
    write_led(root, "tpacpi::power-led", "0\n", "255\n")
    return root
