"""Exception types raised by the metrics library."""

from __future__ import annotations


class MetricError(Exception):
    """Base class for all metric related errors."""

    default_message = "metric error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class IncorrectMetricTypeError(MetricError):
    """An operation was applied to a metric or sample of the wrong type."""

    default_message = "incorrect metric type"


class InvalidLabelNameError(MetricError, ValueError):
    """A label name is reserved or otherwise not allowed."""

    default_message = "invalid label name"


class InvalidMetricNameError(MetricError, ValueError):
    """A metric name does not match the allowed pattern."""

    default_message = "invalid metric name"


class InvalidBucketsError(MetricError, ValueError):
    """Histogram bucket bounds are malformed."""

    default_message = "invalid histogram buckets"


class DuplicateRegistrationError(MetricError):
    """A metric or collector with the same name is already registered."""

    default_message = "already registered"