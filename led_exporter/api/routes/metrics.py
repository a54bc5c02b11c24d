"""Metrics endpoint for Prometheus scraping.

Every request runs a fresh collection pass: LED attributes are read from
the device source while the request is being served. Nothing is cached.

The handler is a plain function so FastAPI runs it in its threadpool and
blocking file reads never stall the event loop.
"""

from fastapi import APIRouter, Depends, Response

from led_exporter.application.ports.metrics_exporter import MetricsExporterPort
from led_exporter.bootstrap.metrics import get_metrics_exporter

router = APIRouter(tags=["metrics"])


@router.get(
    "/metrics",
    summary="Prometheus metrics endpoint",
    description="Returns LED brightness gauges in Prometheus exposition format.",
    response_class=Response,
    responses={
        200: {
            "description": "Metrics in Prometheus format",
            "content": {"text/plain": {}},
        }
    },
)
def get_metrics(
    exporter: MetricsExporterPort = Depends(get_metrics_exporter),
) -> Response:
    """Get LED metrics in Prometheus format.

    Returns:
        Response with led_led_brightness and led_led_max_brightness gauges.
    """
    return Response(
        content=exporter.generate_metrics(),
        media_type=exporter.content_type,
    )
