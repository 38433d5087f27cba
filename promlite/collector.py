"""Collectors: named groups of metrics, and process file-descriptor counting."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable, Mapping

from .errors import DuplicateRegistrationError
from .metric import Metric

CollectFn = Callable[["Collector"], Mapping[str, Metric]]


def _default_collect(collector: Collector) -> Mapping[str, Metric]:
    return collector.metrics


class Collector:
    """A named set of metrics, gathered on demand by a collect function."""

    def __init__(self, name: str, collect_fn: CollectFn | None = None) -> None:
        self.name = name
        self.collect_fn: CollectFn = collect_fn if collect_fn is not None else _default_collect
        self._metrics: dict[str, Metric] = {}
        self._lock = threading.Lock()

    @property
    def metrics(self) -> dict[str, Metric]:
        """The registered metrics keyed by name, in registration order."""
        with self._lock:
            return dict(self._metrics)

    def add_metric(self, metric: Metric) -> None:
        """Register a metric; a second metric with the same name is rejected."""
        with self._lock:
            if metric.name in self._metrics:
                raise DuplicateRegistrationError(
                    f"metric {metric.name!r} already found in collector {self.name!r}"
                )
            self._metrics[metric.name] = metric

    def collect(self) -> Mapping[str, Metric]:
        """Run the collect function and return the metrics it yields."""
        return self.collect_fn(self)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._metrics

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)

    def __repr__(self) -> str:
        return f"Collector({self.name!r}, metrics={list(self.metrics)!r})"


def count_process_fds(path: str | os.PathLike[str] | None = None) -> int:
    """Count the entries in a file-descriptor directory.

    Without a path, the current process's ``/proc/<pid>/fd`` is used.
    Raises ``OSError`` if the directory cannot be read.
    """
    if path is None:
        path = f"/proc/{os.getpid()}/fd"
    with os.scandir(path) as entries:
        return sum(1 for entry in entries if entry.name not in (".", ".."))