"""Series that draw a flat line at the minimum or maximum of an inner series."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MinSeries:
    """A horizontal line at the minimum y value of the inner series."""

    name: str = ""
    inner_series: Optional[object] = None
    _min_value: Optional[float] = field(default=None, init=False, repr=False, compare=False)

    def __len__(self) -> int:
        self.validate()
        return len(self.inner_series)

    def get_values(self, index: int) -> tuple:
        self.validate()
        if self._min_value is None:
            ys = (self.inner_series.get_values(i)[1] for i in range(len(self.inner_series)))
            self._min_value = min(ys, default=sys.float_info.max)
        x, _ = self.inner_series.get_values(index)
        return x, self._min_value

    def validate(self) -> None:
        """Raise ValueError when the series is not usable."""
        if self.inner_series is None:
            raise ValueError("min series requires inner_series to be set")


@dataclass
class MaxSeries:
    """A horizontal line at the maximum y value of the inner series."""

    name: str = ""
    inner_series: Optional[object] = None
    _max_value: Optional[float] = field(default=None, init=False, repr=False, compare=False)

    def __len__(self) -> int:
        self.validate()
        return len(self.inner_series)

    def get_values(self, index: int) -> tuple:
        self.validate()
        if self._max_value is None:
            ys = (self.inner_series.get_values(i)[1] for i in range(len(self.inner_series)))
            self._max_value = max(ys, default=-sys.float_info.max)
        x, _ = self.inner_series.get_values(index)
        return x, self._max_value

    def validate(self) -> None:
        """Raise ValueError when the series is not usable."""
        if self.inner_series is None:
            raise ValueError("max series requires inner_series to be set")