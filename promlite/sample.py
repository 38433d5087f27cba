"""Metric types, single metric samples and sample name formatting."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from enum import Enum

from .errors import IncorrectMetricTypeError


class MetricType(Enum):
    """The kinds of metric, valued by their exposition name."""

    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"

    def __str__(self) -> str:
        return self.value


class MetricSample:
    """A single named value belonging to a metric, safe to update from many threads."""

    __slots__ = ("metric_type", "l_value", "_value", "_lock")

    def __init__(self, metric_type: MetricType, l_value: str, value: float = 0.0) -> None:
        self.metric_type = metric_type
        self.l_value = l_value
        self._value = float(value)
        self._lock = threading.Lock()

    @property
    def value(self) -> float:
        with self._lock:
            return self._value

    def add(self, value: float) -> None:
        """Increase the value; negative amounts are rejected."""
        if value < 0:
            raise ValueError("cannot add a negative value to a sample")
        with self._lock:
            self._value += value

    def sub(self, value: float) -> None:
        """Decrease the value; only gauge samples may go down."""
        if self.metric_type is not MetricType.GAUGE:
            raise IncorrectMetricTypeError()
        with self._lock:
            self._value -= value

    def set(self, value: float) -> None:
        """Replace the value; only gauge samples may be set."""
        if self.metric_type is not MetricType.GAUGE:
            raise IncorrectMetricTypeError()
        with self._lock:
            self._value = float(value)

    def __repr__(self) -> str:
        return f"MetricSample({self.metric_type.name}, {self.l_value!r}, {self.value!r})"


def format_l_value(
    name: str,
    suffix: str | None,
    label_keys: Sequence[str],
    label_values: Sequence[str],
) -> str:
    """Build a sample name such as ``name_suffix{key="value",...}``."""
    if len(label_keys) != len(label_values):
        raise ValueError("label keys and label values differ in length")
    result = name if suffix is None else f"{name}_{suffix}"
    if not label_keys:
        return result
    labels = ",".join(f'{key}="{value}"' for key, value in zip(label_keys, label_values))
    return f"{result}{{{labels}}}"