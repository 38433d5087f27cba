# promlite

A small Prometheus metrics client with no third-party dependencies. It
provides counters, gauges and histograms with labels, groups them into
collectors and registries, and renders everything in the Prometheus text
exposition format.

## Installation

```
pip install promlite
```

## Metrics

```python
from promlite.metric import Counter, Gauge, Histogram
from promlite.buckets import HistogramBuckets

requests = Counter("http_requests_total", "Total HTTP requests.", ["method"])
requests.inc(["GET"])
requests.add(3, ["POST"])

in_flight = Gauge("http_in_flight", "Requests currently being served.", [])
in_flight.inc([])
in_flight.dec([])
in_flight.set(7, [])

latency = Histogram(
    "http_latency_seconds",
    "Request latency.",
    HistogramBuckets.exponential(0.01, 2, 8),
    [],
)
latency.observe(0.12, [])
```

- Each distinct list of label values gets its own sample, created at zero on
  first use. The number of label values must match the number of label names,
  otherwise `ValueError` is raised. Label values may be omitted (`None`) for a
  metric without labels.
- Counters only go up: adding a negative amount raises `ValueError`. Gauges
  also support `sub` and `set`.
- The label names `le` and `quantile` are reserved and raise
  `InvalidLabelNameError`.
- A histogram records each observation in every bucket whose upper bound is
  not below it, plus a `+Inf` bucket, a `_count` and a `_sum` series.

## Buckets

`promlite.buckets.HistogramBuckets` holds the upper bounds of a histogram:

- `HistogramBuckets(0.1, 0.5, 1.0)` gives explicit bounds (at least one).
- `HistogramBuckets.linear(start, width, count)` needs `count > 1`.
- `HistogramBuckets.exponential(start, factor, count)` needs `count >= 1`,
  `start > 0` and `factor > 1`.

Violations raise `InvalidBucketsError`. Passing `None` as the buckets of a
`Histogram` uses `promlite.buckets.default_buckets()` (`0.005` up to `10.0`);
bounds given explicitly to a `Histogram` must be non-decreasing.

## Collectors and registries

```python
from promlite.collector import Collector
from promlite.registry import CollectorRegistry

registry = CollectorRegistry("default")
registry.register_metric(requests)        # goes to the "default" collector

jobs = Collector("jobs")
jobs.add_metric(in_flight)
registry.register_collector(jobs)

print(registry.bridge())
```

`bridge()` returns the text exposition of every metric of every collector,
in the order they were registered, each metric followed by a blank line. The
output above begins:

```
# HELP http_requests_total Total HTTP requests.
# TYPE http_requests_total counter
http_requests_total{method="GET"} 1
http_requests_total{method="POST"} 3
```

A `Collector` may be given a `collect_fn`, a callable taking the collector
and returning a mapping of name to metric; by default it returns the
collector's own metrics. `promlite.collector.count_process_fds(path=None)`
counts the entries of a file-descriptor directory (by default
`/proc/<pid>/fd` of the current process) and raises `OSError` if it cannot be
read.

A process-wide registry is available through
`promlite.registry.default_registry()`, with the shortcuts
`register_metric(metric)` and `must_register_metric(metric)`; the latter
raises `SystemExit(1)` if registration fails. Registering a second metric or
collector under a name already taken raises `DuplicateRegistrationError`.
`CollectorRegistry.validate_metric_name` raises `InvalidMetricNameError`
unless a name matches `[a-zA-Z_:][a-zA-Z0-9_:]*`.

The functions in `promlite.formatter` (`format_metric`, `format_collectors`,
`format_sample` and others) render the same text directly.

## What it does not do

- It does not serve metrics over HTTP; `bridge()` returns a string for you to
  serve however you like.
- It has no built-in process metrics collector (CPU time, memory, limits);
  only `count_process_fds` is provided.
- `MetricType.SUMMARY` exists as a type name, but there is no summary metric.

## Errors

All errors derive from `promlite.errors.MetricError`:
`IncorrectMetricTypeError`, `InvalidLabelNameError`, `InvalidMetricNameError`,
`InvalidBucketsError` and `DuplicateRegistrationError`. The label, name and
bucket errors are also `ValueError`s.

## Running the tests

```
pip install -e ".[test]"
pytest
```