"""Bootstrap wiring: builds the collector, exporter and HTTP server."""
