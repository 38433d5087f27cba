import pytest

from promlite.buckets import HistogramBuckets, default_buckets
from promlite.errors import InvalidBucketsError

DEFAULT_BOUNDS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)


def test_explicit_buckets_keep_order():
    buckets = HistogramBuckets(1, 2, 5)
    assert list(buckets) == [1.0, 2.0, 5.0]
    assert len(buckets) == 3


def test_empty_buckets_rejected():
    with pytest.raises(InvalidBucketsError):
        HistogramBuckets()


def test_default_buckets_values():
    assert tuple(default_buckets()) == DEFAULT_BOUNDS


def test_default_buckets_shared():
    first = default_buckets()
    second = default_buckets()
    assert first is second
    assert tuple(second) == DEFAULT_BOUNDS
    assert len(second) == 11


def test_linear_invariants():
    buckets = HistogramBuckets.linear(1.0, 0.5, 6)
    assert len(buckets) == 6
    assert buckets[0] == 1.0
    bounds = list(buckets)
    for a, b in zip(bounds, bounds[1:]):
        assert b - a == pytest.approx(0.5)
    assert buckets.is_increasing


@pytest.mark.parametrize("count", [0, 1])
def test_linear_count_too_small(count):
    with pytest.raises(InvalidBucketsError):
        HistogramBuckets.linear(0.0, 1.0, count)


def test_exponential_invariants():
    buckets = HistogramBuckets.exponential(0.5, 3.0, 5)
    assert len(buckets) == 5
    assert buckets[0] == 0.5
    bounds = list(buckets)
    for a, b in zip(bounds, bounds[1:]):
        assert b / a == pytest.approx(3.0)


def test_exponential_single_bucket():
    assert list(HistogramBuckets.exponential(2.0, 2.0, 1)) == [2.0]


@pytest.mark.parametrize(
    "start, factor, count",
    [(1.0, 2.0, 0), (0.0, 2.0, 3), (-1.0, 2.0, 3), (1.0, 1.0, 3), (1.0, 0.5, 3)],
)
def test_exponential_rejects_bad_arguments(start, factor, count):
    with pytest.raises(InvalidBucketsError):
        HistogramBuckets.exponential(start, factor, count)


def test_is_increasing_detects_disorder():
    assert not HistogramBuckets(3, 1, 2).is_increasing


def test_equality_by_bounds():
    assert HistogramBuckets(1, 2) == HistogramBuckets(1.0, 2.0)
    assert not (HistogramBuckets(1, 2) == HistogramBuckets(2, 1))