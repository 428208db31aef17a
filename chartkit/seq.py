"""Sequences of floats with aggregate and statistical helpers."""

from __future__ import annotations

import math
from typing import Callable, Iterator

from chartkit.mathutil import round_places


def _nearest_int(value: float) -> int:
    return int(round_places(value, 0))


class Seq:
    """A wrapper over anything that has a length and yields values by index.

    The wrapped object is either a plain sequence of floats or an object
    with ``__len__`` and ``get_value(index)``.
    """

    def __init__(self, sequence):
        self._source = sequence

    def __len__(self) -> int:
        return len(self._source)

    def __iter__(self) -> Iterator[float]:
        return (self.get_value(i) for i in range(len(self)))

    def __repr__(self) -> str:
        return f"Seq({self._source!r})"

    def get_value(self, index: int) -> float:
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range")
        getter = getattr(self._source, "get_value", None)
        if getter is not None:
            return getter(index)
        return self._source[index]

    def values(self) -> list:
        """Enumerate the whole sequence into a list."""
        return list(self)

    def each(self, fn: Callable[[int, float], None]) -> None:
        """Call fn(index, value) for every value."""
        for index, value in enumerate(self):
            fn(index, value)

    def map(self, fn: Callable[[int, float], float]) -> "Seq":
        """A new sequence of fn(index, value)."""
        return Seq([fn(index, value) for index, value in enumerate(self)])

    def fold_left(self, fn: Callable[[int, float, float], float]) -> float:
        """Collapse left to right with fn(index, accumulated, value)."""
        length = len(self)
        if length == 0:
            return 0.0
        accumulated = self.get_value(0)
        for index in range(1, length):
            accumulated = fn(index, accumulated, self.get_value(index))
        return accumulated

    def fold_right(self, fn: Callable[[int, float, float], float]) -> float:
        """Collapse right to left with fn(index, accumulated, value)."""
        length = len(self)
        if length == 0:
            return 0.0
        accumulated = self.get_value(length - 1)
        for index in range(length - 2, -1, -1):
            accumulated = fn(index, accumulated, self.get_value(index))
        return accumulated

    def min(self) -> float:
        return min(self, default=0.0)

    def max(self) -> float:
        return max(self, default=0.0)

    def min_max(self) -> tuple:
        """(minimum, maximum); (0.0, 0.0) when empty."""
        values = self.values()
        if not values:
            return 0.0, 0.0
        return min(values), max(values)

    def sort(self) -> "Seq":
        """The values in ascending order."""
        if len(self) == 0:
            return self
        return Seq(sorted(self))

    def reverse(self) -> "Seq":
        if len(self) == 0:
            return self
        return Seq(self.values()[::-1])

    def median(self) -> float:
        """The middle value, or the mean of the two middle values."""
        length = len(self)
        if length == 0:
            return 0.0
        ordered = sorted(self)
        middle = length // 2
        if length % 2 == 0:
            return (ordered[middle - 1] + ordered[middle]) / 2
        return ordered[middle]

    def sum(self) -> float:
        return sum(self, 0.0)

    def average(self) -> float:
        length = len(self)
        if length == 0:
            return 0.0
        return self.sum() / length

    def variance(self) -> float:
        """Population variance."""
        length = len(self)
        if length == 0:
            return 0.0
        m = self.average()
        return sum((v - m) * (v - m) for v in self) / length

    def std_dev(self) -> float:
        if len(self) == 0:
            return 0.0
        return math.pow(self.variance(), 0.5)

    def percentile(self, percent: float) -> float:
        """Relative standing of a fraction in [0, 1] within the sorted values."""
        length = len(self)
        if length == 0:
            return 0.0
        if percent < 0 or percent > 1.0:
            raise ValueError("percent out of range [0.0, 1.0)")
        ordered = self.sort()
        index = percent * length
        i = _nearest_int(index)
        if index == float(int(index)):
            return (ordered.get_value(i - 1) + ordered.get_value(i)) / 2.0
        return ordered.get_value(i)

    def normalize(self) -> "Seq":
        """Map every value onto [0, 1]; NaN when all values are equal."""
        low, high = self.min_max()
        delta = high - low
        if delta == 0:
            return Seq([math.nan] * len(self))
        return Seq([(v - low) / delta for v in self])


def value_sequence(*args: float) -> Seq:
    """A sequence over the given values."""
    return Seq([float(v) for v in args])