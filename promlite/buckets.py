"""Histogram bucket upper bounds."""

from __future__ import annotations

from collections.abc import Iterator

from .errors import InvalidBucketsError

_DEFAULT_BOUNDS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)


class HistogramBuckets:
    """An immutable sequence of histogram bucket upper bounds."""

    __slots__ = ("upper_bounds",)

    def __init__(self, *args: float) -> None:
        if not args:
            raise InvalidBucketsError("at least one bucket is required")
        self.upper_bounds: tuple[float, ...] = tuple(float(bound) for bound in args)

    @classmethod
    def linear(cls, start: float, width: float, count: int) -> HistogramBuckets:
        """Return ``count`` buckets starting at ``start``, each ``width`` apart."""
        if count <= 1:
            raise InvalidBucketsError("count must be greater than 1")
        bounds = [float(start)]
        while len(bounds) < count:
            bounds.append(bounds[-1] + width)
        return cls(*bounds)

    @classmethod
    def exponential(cls, start: float, factor: float, count: int) -> HistogramBuckets:
        """Return ``count`` buckets starting at ``start``, each ``factor`` times the last."""
        if count < 1:
            raise InvalidBucketsError("count must be at least 1")
        if start <= 0:
            raise InvalidBucketsError("start must be greater than 0")
        if factor <= 1:
            raise InvalidBucketsError("factor must be greater than 1")
        bounds = [float(start)]
        while len(bounds) < count:
            bounds.append(bounds[-1] * factor)
        return cls(*bounds)

    @property
    def is_increasing(self) -> bool:
        """True if no bound is smaller than the one before it."""
        return all(a <= b for a, b in zip(self.upper_bounds, self.upper_bounds[1:]))

    def __len__(self) -> int:
        return len(self.upper_bounds)

    def __iter__(self) -> Iterator[float]:
        return iter(self.upper_bounds)

    def __getitem__(self, index: int) -> float:
        return self.upper_bounds[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HistogramBuckets):
            return NotImplemented
        return self.upper_bounds == other.upper_bounds

    def __hash__(self) -> int:
        return hash(self.upper_bounds)

    def __repr__(self) -> str:
        return f"HistogramBuckets{self.upper_bounds!r}"


_default: HistogramBuckets | None = None


def default_buckets() -> HistogramBuckets:
    """Return the shared default bucket set."""
    global _default
    if _default is None:
        _default = HistogramBuckets(*_DEFAULT_BOUNDS)
    return _default