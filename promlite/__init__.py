"""A small Prometheus metrics client: counters, gauges, histograms, collectors and text exposition."""

__version__ = "0.1.0"
__all__ = ["__version__"]