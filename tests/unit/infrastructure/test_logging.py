"""Unit tests for structured logging configuration.

Tests the structlog configuration, output format, and collector events.
"""

import json
import logging

import pytest
import structlog

from led_exporter.bootstrap.logging import configure_logging
from led_exporter.config.exporter_config import ExporterConfig
from led_exporter.infrastructure.monitoring.led_collector import LedCollector
from led_exporter.infrastructure.observability.logging import (
    build_processors,
    configure_structlog,
    get_logger_for_component,
    resolve_log_level,
)
from led_exporter.infrastructure.stubs.led_source_stub import StaticLed, StaticLedSource


def _log_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


class TestBuildProcessors:
    """Tests for processor chain selection."""

    def test_production_renders_json(self) -> None:
        """Production ends with a JSON renderer."""
        processors = build_processors("production")

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.contextvars.merge_contextvars in processors

    def test_development_renders_console(self) -> None:
        """Other environments end with a console renderer."""
        processors = build_processors("development")

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_defaults_to_production(self) -> None:
        """Default environment is production."""
        configure_structlog()

        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)


class TestResolveLogLevel:
    """Tests for log level resolution."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("debug", logging.DEBUG),
            ("warning", logging.WARNING),
            (None, logging.INFO),
            ("chatty", logging.INFO),
        ],
    )
    def test_level_names(self, name: str | None, expected: int) -> None:
        """Known names map to constants; anything else is INFO."""
        assert resolve_log_level(name) == expected

    def test_unknown_level_hides_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An unknown level behaves like INFO."""
        configure_structlog(environment="production", log_level="chatty")

        logger = structlog.get_logger()
        logger.debug("hidden")
        logger.info("shown")

        assert [e["event"] for e in _log_lines(capsys.readouterr().out)] == ["shown"]


class TestLogOutput:
    """Tests for actual log output format."""

    def test_json_output_structure(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Log output is JSON with level, timestamp and bound context."""
        configure_structlog(environment="production")
        structlog.contextvars.bind_contextvars(correlation_id="scrape-7")
        try:
            structlog.get_logger().info("test_event", custom_field="value")
        finally:
            structlog.contextvars.clear_contextvars()

        (entry,) = _log_lines(capsys.readouterr().out)
        assert entry["event"] == "test_event"
        assert entry["level"] == "info"
        assert "T" in entry["timestamp"]
        assert entry["correlation_id"] == "scrape-7"
        assert entry["custom_field"] == "value"

    def test_component_logger_binds_context(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Component loggers carry service and component fields."""
        configure_structlog(environment="production")

        get_logger_for_component("server").info("exporter_starting")

        (entry,) = _log_lines(capsys.readouterr().out)
        assert entry["service"] == "led-exporter"
        assert entry["component"] == "server"

    def test_configure_logging_uses_exporter_config(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """The bootstrap wiring applies environment and level from config."""
        configure_logging(ExporterConfig(environment="production", log_level="DEBUG"))

        structlog.get_logger().debug("visible")

        (entry,) = _log_lines(capsys.readouterr().out)
        assert entry["event"] == "visible"
        assert entry["level"] == "debug"


class TestCollectorLogging:
    """Tests for events emitted by the collector."""

    def test_discovery_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Construction logs the discovered LED count."""
        configure_structlog(environment="production")

        LedCollector(StaticLedSource([StaticLed("a"), StaticLed("b")]))

        (entry,) = _log_lines(capsys.readouterr().out)
        assert entry["event"] == "leds_discovered"
        assert entry["count"] == 2
        assert entry["leds"] == ["a", "b"]

    def test_read_failure_logged_at_debug(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Read failures are logged only when debug is enabled."""
        configure_structlog(environment="production", log_level="DEBUG")
        collector = LedCollector(StaticLedSource([StaticLed("a", brightness_value=None)]))

        collector.collect_samples()

        entries = _log_lines(capsys.readouterr().out)
        failure = next(e for e in entries if e["event"] == "led_read_failed")
        assert failure["level"] == "debug"
        assert failure["led"] == "a"
        assert failure["metric"] == "led_led_brightness"
        assert failure["error_type"] == "LedReadError"

    def test_read_failure_silent_at_info(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """At the default level failed reads produce no output."""
        configure_structlog(environment="production")
        collector = LedCollector(StaticLedSource([StaticLed("a", brightness_value=None)]))
        capsys.readouterr()

        collector.collect_samples()

        assert capsys.readouterr().out == ""
