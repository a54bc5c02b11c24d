"""API route modules."""

from led_exporter.api.routes.index import router as index_router
from led_exporter.api.routes.metrics import router as metrics_router

__all__ = ["index_router", "metrics_router"]
