"""Polynomial regression fitted over a window of an inner series."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from chartkit.regression import poly


@dataclass
class PolynomialRegressionSeries:
    """Evaluates a least-squares polynomial fitted to the inner series."""

    name: str = ""
    limit: int = 0
    offset: int = 0
    degree: int = 0
    inner_series: Optional[object] = None

    _coeffs: Optional[List[float]] = field(default=None, init=False, repr=False, compare=False)

    def _inner_len(self) -> int:
        if self.inner_series is None:
            raise ValueError("polynomial regression series requires inner_series to be set")
        return len(self.inner_series)

    def __len__(self) -> int:
        return min(self.get_limit(), self._inner_len() - self.get_offset())

    def get_limit(self) -> int:
        """The window size; the whole inner series when unset."""
        if self.limit == 0:
            return self._inner_len()
        return self.limit

    def get_end_index(self) -> int:
        window_end = self.get_offset() + self.get_limit()
        return min(window_end, self._inner_len() - 1)

    def get_offset(self) -> int:
        return self.offset

    def validate(self) -> None:
        """Raise ValueError when the series or its window is not usable."""
        length = self._inner_len()
        end_index = self.get_end_index()
        if end_index >= length:
            raise ValueError(
                f"invalid window; inner series has length {length} but end index is {end_index}"
            )

    def _is_empty(self) -> bool:
        return self.inner_series is None or len(self.inner_series) == 0

    def _ensure_coefficients(self) -> None:
        if self._coeffs is None:
            start, end = self.get_offset(), self.get_end_index()
            points = [self.inner_series.get_values(i) for i in range(start, end)]
            self._coeffs = poly([x for x, _ in points], [y for _, y in points], self.degree)

    def _apply(self, value: float) -> float:
        return sum(coeff * math.pow(value, power) for power, coeff in enumerate(self._coeffs))

    def _evaluate_at(self, index: int) -> tuple:
        x, _ = self.inner_series.get_values(index)
        return x, self._apply(x)

    def get_values(self, index: int) -> tuple:
        if self._is_empty():
            return 0.0, 0.0
        self._ensure_coefficients()
        effective_index = min(index + self.get_offset(), len(self.inner_series))
        return self._evaluate_at(effective_index)

    def get_first_values(self) -> tuple:
        if self._is_empty():
            return 0.0, 0.0
        self._ensure_coefficients()
        return self._evaluate_at(0)

    def get_last_values(self) -> tuple:
        if self._is_empty():
            return 0.0, 0.0
        self._ensure_coefficients()
        return self._evaluate_at(self.get_end_index())