"""FastAPI application entry point for the LED exporter."""

from fastapi import FastAPI

from led_exporter import __version__
from led_exporter.api.middleware.logging_middleware import LoggingMiddleware
from led_exporter.api.routes.index import router as index_router
from led_exporter.api.routes.metrics import router as metrics_router


def create_app() -> FastAPI:
    """Create the exporter application.

    The metrics exporter must be installed with
    led_exporter.bootstrap.metrics.init_metrics() before serving.

    Returns:
        FastAPI app exposing "/" and "/metrics".
    """
    app = FastAPI(
        title="LED Exporter",
        description="Prometheus exporter for host LED brightness",
        version=__version__,
        docs_url=None,
        redoc_url=None,
    )
    app.add_middleware(LoggingMiddleware)
    app.include_router(index_router)
    app.include_router(metrics_router)
    return app
