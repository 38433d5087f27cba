"""Per-label-set histogram state: bucket counters, +Inf, count and sum."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence

from .buckets import HistogramBuckets
from .sample import MetricSample, MetricType, format_l_value

_INF_KEY = "+Inf"
_COUNT_KEY = "count"
_SUM_KEY = "sum"


def bucket_to_str(bucket: float) -> str:
    """Render a bucket bound the way it appears in an ``le`` label."""
    text = "%g" % bucket
    if "." not in text:
        text += ".0"
    return text


class HistogramSample:
    """The samples that make up one histogram series for a single set of label values."""

    def __init__(
        self,
        name: str,
        buckets: HistogramBuckets,
        label_keys: Sequence[str] = (),
        label_values: Sequence[str] = (),
    ) -> None:
        label_keys = tuple(label_keys)
        label_values = tuple(label_values)
        if len(label_keys) != len(label_values):
            raise ValueError("label keys and label values differ in length")

        self.buckets = buckets
        self._lock = threading.Lock()
        self._l_value_list: list[str] = []
        self._l_values: dict[str, str] = {}
        self._samples: dict[str, MetricSample] = {}

        le_keys = label_keys + ("le",)
        for bound in buckets:
            bucket_key = bucket_to_str(bound)
            l_value = format_l_value(name, None, le_keys, label_values + (bucket_key,))
            self._add_series(bucket_key, l_value)

        self._add_series(_INF_KEY, format_l_value(name, None, le_keys, label_values + (_INF_KEY,)))
        self._add_series(_COUNT_KEY, format_l_value(name, "count", label_keys, label_values))
        self._add_series(_SUM_KEY, format_l_value(name, "sum", label_keys, label_values))

    def _add_series(self, key: str, l_value: str) -> None:
        self._l_value_list.append(l_value)
        self._l_values[key] = l_value
        self._samples[l_value] = MetricSample(MetricType.HISTOGRAM, l_value, 0.0)

    def _sample_for(self, key: str) -> MetricSample:
        return self._samples[self._l_values[key]]

    @property
    def l_values(self) -> list[str]:
        """Sample names in exposition order."""
        return list(self._l_value_list)

    def __getitem__(self, l_value: str) -> MetricSample:
        return self._samples[l_value]

    def observe(self, value: float) -> None:
        """Record one observation in every bucket whose bound is not below it."""
        with self._lock:
            for bound in reversed(self.buckets.upper_bounds):
                if value > bound:
                    break
                self._sample_for(bucket_to_str(bound)).add(1.0)
            self._sample_for(_INF_KEY).add(1.0)
            self._sample_for(_COUNT_KEY).add(1.0)
            self._sample_for(_SUM_KEY).add(value)

    def iter_samples(self) -> Iterator[MetricSample]:
        """Yield the samples in exposition order: buckets, +Inf, count, sum."""
        for l_value in self._l_value_list:
            yield self._samples[l_value]