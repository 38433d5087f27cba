import threading

import pytest

from promlite.errors import IncorrectMetricTypeError
from promlite.sample import MetricSample, MetricType, format_l_value


@pytest.mark.parametrize("name", ["counter", "gauge", "histogram", "summary"])
def test_metric_type_names(name):
    metric_type = MetricType(name)
    assert metric_type.value == name
    assert str(metric_type) == name


def test_sample_starts_with_given_value():
    sample = MetricSample(MetricType.GAUGE, "g", 7.0)
    assert sample.value == 7.0
    assert sample.l_value == "g"


def test_add_accumulates():
    sample = MetricSample(MetricType.COUNTER, "c", 0.0)
    sample.add(1.5)
    sample.add(2.5)
    assert sample.value == 1.5 + 2.5


def test_add_negative_rejected_and_value_unchanged():
    sample = MetricSample(MetricType.COUNTER, "c", 3.0)
    with pytest.raises(ValueError):
        sample.add(-1.0)
    assert sample.value == 3.0


def test_gauge_sub_and_set():
    sample = MetricSample(MetricType.GAUGE, "g", 10.0)
    sample.sub(4.0)
    assert sample.value == 10.0 - 4.0
    sample.set(-2.0)
    assert sample.value == -2.0


@pytest.mark.parametrize("metric_type", [MetricType.COUNTER, MetricType.HISTOGRAM])
def test_sub_and_set_require_gauge(metric_type):
    sample = MetricSample(metric_type, "x", 1.0)
    with pytest.raises(IncorrectMetricTypeError):
        sample.sub(1.0)
    with pytest.raises(IncorrectMetricTypeError):
        sample.set(5.0)
    assert sample.value == 1.0


def test_concurrent_adds():
    sample = MetricSample(MetricType.COUNTER, "c", 0.0)
    threads_count, per_thread = 8, 1000

    def work():
        for _ in range(per_thread):
            sample.add(1.0)

    threads = [threading.Thread(target=work) for _ in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sample.value == threads_count * per_thread


def test_format_l_value_no_labels():
    assert format_l_value("requests", None, [], []) == "requests"


def test_format_l_value_with_suffix_and_labels():
    assert (
        format_l_value("latency", "count", ["method", "code"], ["get", "200"])
        == 'latency_count{method="get",code="200"}'
    )


def test_format_l_value_single_label():
    assert format_l_value("m", None, ["le"], ["+Inf"]) == 'm{le="+Inf"}'


def test_format_l_value_length_mismatch():
    with pytest.raises(ValueError):
        format_l_value("m", None, ["a", "b"], ["1"])