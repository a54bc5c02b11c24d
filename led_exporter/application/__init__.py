"""Application layer: ports the exporter depends on."""
