"""Simple moving average over an inner series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD = 16


@dataclass
class SMASeries:
    """Averages each value with up to ``period`` values before it."""

    name: str = ""
    period: int = 0
    inner_series: Optional[object] = None

    def _inner_len(self) -> int:
        if self.inner_series is None:
            raise ValueError("sma series requires inner_series to be set")
        return len(self.inner_series)

    def __len__(self) -> int:
        return self._inner_len()

    def get_period(self, default: Optional[int] = None) -> int:
        """The window size, or the default when unset."""
        if self.period == 0:
            if default is not None:
                return default
            return DEFAULT_SIMPLE_MOVING_AVERAGE_PERIOD
        return self.period

    def _is_empty(self) -> bool:
        return self.inner_series is None or len(self.inner_series) == 0

    def get_values(self, index: int) -> tuple:
        if self._is_empty():
            return 0.0, 0.0
        x, _ = self.inner_series.get_values(index)
        return x, self._average(index)

    def get_first_values(self) -> tuple:
        return self.get_values(0)

    def get_last_values(self) -> tuple:
        if self._is_empty():
            return 0.0, 0.0
        return self.get_values(len(self.inner_series) - 1)

    def _average(self, index: int) -> float:
        floor = max(0, index - self.get_period())
        window = [self.inner_series.get_values(i)[1] for i in range(index, floor - 1, -1)]
        return sum(window) / len(window)

    def validate(self) -> None:
        """Raise ValueError when the series is not usable."""
        if self.inner_series is None:
            raise ValueError("sma series requires inner_series to be set")