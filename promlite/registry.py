"""The collector registry and the process-wide default registry."""

from __future__ import annotations

import re
import threading

from .collector import Collector
from .errors import DuplicateRegistrationError, InvalidMetricNameError, MetricError
from .formatter import format_collectors
from .metric import Metric

_METRIC_NAME = re.compile(r"[a-zA-Z_:][a-zA-Z0-9_:]*")


class CollectorRegistry:
    """Collectors keyed by name, rendered together on demand."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.disable_process_metrics = False
        self._collectors: dict[str, Collector] = {"default": Collector("default")}
        self._lock = threading.RLock()

    @property
    def collectors(self) -> dict[str, Collector]:
        """Registered collectors keyed by name, in registration order."""
        with self._lock:
            return dict(self._collectors)

    def register_collector(self, collector: Collector) -> None:
        """Add a collector; a name that is already taken is rejected."""
        with self._lock:
            if collector.name in self._collectors:
                raise DuplicateRegistrationError(
                    f"collector {collector.name!r} is already registered"
                )
            self._collectors[collector.name] = collector

    def register_metric(self, metric: Metric) -> Metric:
        """Add a metric to this registry's default collector and return it."""
        with self._lock:
            default = self._collectors.get("default")
        if default is None:
            raise MetricError("registry has no default collector")
        default.add_metric(metric)
        return metric

    def validate_metric_name(self, metric_name: str) -> None:
        """Raise ``InvalidMetricNameError`` unless the name is a valid metric name."""
        if _METRIC_NAME.fullmatch(metric_name) is None:
            raise InvalidMetricNameError(f"invalid metric name: {metric_name!r}")

    def bridge(self) -> str:
        """Render every collector's metrics in the text exposition format."""
        with self._lock:
            collectors = list(self._collectors.values())
        return format_collectors(collectors)

    def __repr__(self) -> str:
        return f"CollectorRegistry({self.name!r}, collectors={list(self.collectors)!r})"


_default_registry: CollectorRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> CollectorRegistry:
    """Return the shared default registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = CollectorRegistry("default")
        return _default_registry


def register_metric(metric: Metric) -> Metric:
    """Add a metric to the default registry's default collector."""
    return default_registry().register_metric(metric)


def must_register_metric(metric: Metric) -> Metric:
    """Register a metric with the default registry, exiting the program on failure."""
    try:
        return register_metric(metric)
    except MetricError as exc:
        raise SystemExit(1) from exc