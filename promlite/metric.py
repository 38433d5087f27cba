"""Metrics: a named family of samples keyed by label values, and its typed forms."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence

from .buckets import HistogramBuckets, default_buckets
from .errors import IncorrectMetricTypeError, InvalidBucketsError, InvalidLabelNameError
from .histogram_sample import HistogramSample
from .sample import MetricSample, MetricType, format_l_value

_RESERVED_LABELS = frozenset({"le", "quantile"})


class Metric:
    """Metric metadata plus one sample (or histogram series) per set of label values."""

    def __init__(
        self,
        metric_type: MetricType,
        name: str,
        help: str,
        label_keys: Sequence[str] = (),
    ) -> None:
        keys = tuple(label_keys)
        for key in keys:
            if key in _RESERVED_LABELS:
                raise InvalidLabelNameError(f"invalid label name: {key!r}")
        self.metric_type = metric_type
        self.name = name
        self.help = help
        self.label_keys = keys
        self.buckets: HistogramBuckets | None = None
        self._samples: dict[str, MetricSample | HistogramSample] = {}
        self._lock = threading.Lock()

    def _key_for(self, label_values: Sequence[str] | None) -> tuple[tuple[str, ...], str]:
        values = tuple(label_values) if label_values is not None else ()
        if len(values) != len(self.label_keys):
            raise ValueError(
                f"expected {len(self.label_keys)} label values, got {len(values)}"
            )
        return values, format_l_value(self.name, None, self.label_keys, values)

    def sample_from_labels(self, label_values: Sequence[str] | None = None) -> MetricSample:
        """Return the sample for these label values, creating it at zero if new."""
        if self.metric_type is MetricType.HISTOGRAM:
            raise IncorrectMetricTypeError()
        _, l_value = self._key_for(label_values)
        with self._lock:
            sample = self._samples.get(l_value)
            if sample is None:
                sample = MetricSample(self.metric_type, l_value, 0.0)
                self._samples[l_value] = sample
        return sample  # type: ignore[return-value]

    def histogram_sample_from_labels(
        self, label_values: Sequence[str] | None = None
    ) -> HistogramSample:
        """Return the histogram series for these label values, creating it if new."""
        if self.metric_type is not MetricType.HISTOGRAM or self.buckets is None:
            raise IncorrectMetricTypeError()
        values, l_value = self._key_for(label_values)
        with self._lock:
            sample = self._samples.get(l_value)
            if sample is None:
                sample = HistogramSample(self.name, self.buckets, self.label_keys, values)
                self._samples[l_value] = sample
        return sample  # type: ignore[return-value]

    def iter_samples(self) -> Iterator[MetricSample]:
        """Yield every sample in creation order, expanding histogram series."""
        with self._lock:
            entries = list(self._samples.values())
        for entry in entries:
            if isinstance(entry, HistogramSample):
                yield from entry.iter_samples()
            else:
                yield entry

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, labels={self.label_keys!r})"


class Counter(Metric):
    """A value that only goes up."""

    def __init__(self, name: str, help: str, label_keys: Sequence[str] = ()) -> None:
        super().__init__(MetricType.COUNTER, name, help, label_keys)

    def inc(self, label_values: Sequence[str] | None = None) -> None:
        """Add one."""
        self.sample_from_labels(label_values).add(1.0)

    def add(self, value: float, label_values: Sequence[str] | None = None) -> None:
        """Add a non-negative amount."""
        self.sample_from_labels(label_values).add(value)


class Gauge(Metric):
    """A value that may go up and down."""

    def __init__(self, name: str, help: str, label_keys: Sequence[str] = ()) -> None:
        super().__init__(MetricType.GAUGE, name, help, label_keys)

    def inc(self, label_values: Sequence[str] | None = None) -> None:
        """Add one."""
        self.sample_from_labels(label_values).add(1.0)

    def dec(self, label_values: Sequence[str] | None = None) -> None:
        """Subtract one."""
        self.sample_from_labels(label_values).sub(1.0)

    def add(self, value: float, label_values: Sequence[str] | None = None) -> None:
        """Add a non-negative amount."""
        self.sample_from_labels(label_values).add(value)

    def sub(self, value: float, label_values: Sequence[str] | None = None) -> None:
        """Subtract an amount."""
        self.sample_from_labels(label_values).sub(value)

    def set(self, value: float, label_values: Sequence[str] | None = None) -> None:
        """Replace the value."""
        self.sample_from_labels(label_values).set(value)


class Histogram(Metric):
    """Observations counted into cumulative buckets, with a count and a sum."""

    def __init__(
        self,
        name: str,
        help: str,
        buckets: HistogramBuckets | None = None,
        label_keys: Sequence[str] = (),
    ) -> None:
        super().__init__(MetricType.HISTOGRAM, name, help, label_keys)
        if buckets is None:
            buckets = default_buckets()
        elif not buckets.is_increasing:
            raise InvalidBucketsError("bucket bounds must be increasing")
        self.buckets = buckets

    def observe(self, value: float, label_values: Sequence[str] | None = None) -> None:
        """Record one observation."""
        self.histogram_sample_from_labels(label_values).observe(value)