"""Percentage change of an inner series relative to its first value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from chartkit.mathutil import percent_difference


@dataclass
class PercentChangeSeries:
    """Maps each y value to its fractional change from the first y value."""

    name: str = ""
    inner_series: Optional[object] = None

    def __len__(self) -> int:
        return len(self.inner_series)

    def get_first_values(self) -> tuple:
        return self.inner_series.get_first_values()

    def get_values(self, index: int) -> tuple:
        _, first_y = self.inner_series.get_first_values()
        x, y = self.inner_series.get_values(index)
        return x, percent_difference(first_y, y)

    def get_last_values(self) -> tuple:
        _, first_y = self.inner_series.get_first_values()
        x, y = self.inner_series.get_last_values()
        return x, percent_difference(first_y, y)

    def validate(self) -> None:
        """Raise ValueError when the series or its inner series is not usable."""
        if self.inner_series is None:
            raise ValueError("percent change series requires inner_series to be set")
        inner_validate = getattr(self.inner_series, "validate", None)
        if inner_validate is not None:
            inner_validate()