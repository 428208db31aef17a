"""A sequence of random values with optional bounds and length."""

from __future__ import annotations

import random
import time
from typing import Optional

from chartkit.seq import Seq

_UNBOUNDED_LENGTH = 2**31 - 1


class RandomSequence:
    """Generates random floats; seeded from the current time unless given a seed."""

    def __init__(self, seed: Optional[int] = None):
        self._rnd = random.Random(int(time.time()) if seed is None else seed)
        self._min: Optional[float] = None
        self._max: Optional[float] = None
        self._len: Optional[int] = None

    def __len__(self) -> int:
        return self._len if self._len is not None else _UNBOUNDED_LENGTH

    def get_value(self, index: int) -> float:
        """A fresh random value; the index is ignored."""
        low, high = self._min, self._max
        if low is not None and high is not None:
            delta = abs(high - low)
            return low + self._rnd.random() * delta
        if high is not None:
            return self._rnd.random() * high
        if low is not None:
            return low + self._rnd.random()
        return self._rnd.random()

    @property
    def minimum(self) -> Optional[float]:
        return self._min

    @property
    def maximum(self) -> Optional[float]:
        return self._max

    def with_len(self, length: int) -> "RandomSequence":
        self._len = length
        return self

    def with_min(self, minimum: float) -> "RandomSequence":
        self._min = minimum
        return self

    def with_max(self, maximum: float) -> "RandomSequence":
        self._max = maximum
        return self


def random_values(count: int) -> list:
    """count random values in [0, 1)."""
    return Seq(RandomSequence().with_len(count)).values()


def random_values_with_max(count: int, maximum: float) -> list:
    """count random values in [0, maximum)."""
    return Seq(RandomSequence().with_max(maximum).with_len(count)).values()