"""
LED Exporter - Prometheus metrics for host LED brightness

Reads brightness and max_brightness for every LED class device on the
host and serves them as labeled gauges over HTTP.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
