"""Command line entry point for the LED exporter.

Usage:
    led-exporter [--port 9342]
    python -m led_exporter [--port 9342]

Startup order:
1. Load .env and environment configuration
2. Configure structured logging
3. Enumerate LEDs (exit 1 on failure)
4. Bind the listening socket (exit 1 on failure)
5. Serve until interrupted
"""

from __future__ import annotations

import argparse
import sys

from dotenv import load_dotenv

from led_exporter import __version__
from led_exporter.api.main import create_app
from led_exporter.bootstrap.logging import configure_logging
from led_exporter.bootstrap.metrics import init_metrics
from led_exporter.bootstrap.server import bind_socket, serve
from led_exporter.config.exporter_config import DEFAULT_PORT, ExporterConfig
from led_exporter.domain.errors.led import LedEnumerationError
from led_exporter.infrastructure.adapters.sysfs_led_source import SysfsLedSource
from led_exporter.infrastructure.observability.logging import get_logger_for_component


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="led-exporter",
        description="Export host LED brightness as Prometheus metrics",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"HTTP port (default: {DEFAULT_PORT}, or LED_EXPORTER_PORT)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the exporter.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Process exit status: 0 after a clean shutdown, 1 on startup failure.
    """
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ExporterConfig.from_environment(port=args.port)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(config)
    log = get_logger_for_component("server")

    try:
        init_metrics(SysfsLedSource(config.leds_path))
    except LedEnumerationError as e:
        log.error("led_enumeration_failed", leds_path=config.leds_path, error=str(e))
        return 1

    try:
        sock = bind_socket(config.host, config.port)
    except OSError as e:
        log.error("bind_failed", host=config.host, port=config.port, error=str(e))
        return 1

    log.info("exporter_starting", host=config.host, port=config.port, version=__version__)
    try:
        serve(create_app(), sock)
    finally:
        sock.close()
    log.info("exporter_stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
