"""Rendering of metrics in the text exposition format."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .collector import Collector
from .errors import MetricError
from .metric import Metric
from .sample import MetricSample, MetricType


def format_value(value: float) -> str:
    """Render a sample value with 17 significant digits."""
    return "%.17g" % value


def format_help(name: str, help: str) -> str:
    """Return the ``# HELP`` line for a metric."""
    return f"# HELP {name} {help}\n"


def format_type(name: str, metric_type: MetricType) -> str:
    """Return the ``# TYPE`` line for a metric."""
    return f"# TYPE {name} {metric_type.value}\n"


def format_sample(sample: MetricSample) -> str:
    """Return one exposition line for a sample."""
    return f"{sample.l_value} {format_value(sample.value)}\n"


def format_metric(metric: Metric) -> str:
    """Render a metric's help, type and samples, followed by a blank line."""
    parts = [format_help(metric.name, metric.help), format_type(metric.name, metric.metric_type)]
    parts.extend(format_sample(sample) for sample in metric.iter_samples())
    parts.append("\n")
    return "".join(parts)


def format_collectors(collectors: Mapping[str, Collector] | Iterable[Collector]) -> str:
    """Collect from every collector in order and render all their metrics."""
    if isinstance(collectors, Mapping):
        items: Iterable[Collector] = collectors.values()
    else:
        items = collectors
    parts: list[str] = []
    for collector in items:
        metrics = collector.collect()
        if metrics is None:
            raise MetricError(f"collector {collector.name!r} returned no metrics")
        parts.extend(format_metric(metric) for metric in metrics.values())
    return "".join(parts)