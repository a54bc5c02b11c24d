"""Infrastructure layer: sysfs adapter, Prometheus monitoring, logging."""
