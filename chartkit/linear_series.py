"""A series that plots y = m * x + b over a set of x values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class LinearSeries:
    """Plots a line whose coefficients come from a coefficient provider."""

    name: str = ""
    xvalues: List[float] = field(default_factory=list)
    inner_series: Optional[object] = None

    _m: float = field(default=0.0, init=False, repr=False, compare=False)
    _b: float = field(default=0.0, init=False, repr=False, compare=False)
    _stdev: float = field(default=0.0, init=False, repr=False, compare=False)
    _avg: float = field(default=0.0, init=False, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.xvalues)

    def get_end_index(self) -> int:
        return len(self.xvalues) - 1

    def _ready(self) -> bool:
        if self.inner_series is None or not self.xvalues:
            return False
        if self.is_zero():
            self._m, self._b, self._stdev, self._avg = self.inner_series.coefficients()
        return True

    def get_values(self, index: int) -> tuple:
        if not self._ready():
            return 0.0, 0.0
        x = self.xvalues[index]
        return x, self._m * self._normalize(x) + self._b

    def get_first_values(self) -> tuple:
        return self.get_values(0)

    def get_last_values(self) -> tuple:
        return self.get_values(self.get_end_index())

    def validate(self) -> None:
        """Raise ValueError when the series is not usable."""
        if self.inner_series is None:
            raise ValueError("linear regression series requires inner_series to be set")

    def is_zero(self) -> bool:
        """True until non-zero coefficients have been computed."""
        return self._m == 0 and self._b == 0

    def _normalize(self, xvalue: float) -> float:
        if self._avg > 0 and self._stdev > 0:
            return (xvalue - self._avg) / self._stdev
        return xvalue