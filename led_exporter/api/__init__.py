"""HTTP API for the LED exporter."""
