"""Landing page linking to the metrics endpoint."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["index"])

INDEX_HTML = """<html>
<head><title>LED Exporter</title></head>
<body>
<h1>LED Exporter</h1>
<p><a href="/metrics">Metrics</a></p>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    """Return the static landing page."""
    return HTMLResponse(content=INDEX_HTML)
