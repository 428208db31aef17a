"""Protocols for value providers and a simple list-backed provider."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class ValuesProvider(Protocol):
    """Anything with a length that yields (x, y) pairs by index."""

    def __len__(self) -> int:
        """Number of (x, y) pairs."""

    def get_values(self, index: int) -> tuple:
        """The (x, y) pair at index."""


@runtime_checkable
class FirstValuesProvider(Protocol):
    """A provider that can report its first (x, y) pair."""

    def get_first_values(self) -> tuple:
        """The first (x, y) pair."""


@runtime_checkable
class LastValuesProvider(Protocol):
    """A provider that can report its last (x, y) pair."""

    def get_last_values(self) -> tuple:
        """The last (x, y) pair."""


@runtime_checkable
class LinearCoefficientProvider(Protocol):
    """A provider of linear regression coefficients."""

    def coefficients(self) -> tuple:
        """Return (m, b, stdev, avg) for y = m * x + b."""


class ArrayValues:
    """Values provider backed by two lists of x and y values."""

    def __init__(self, xvalues: Iterable[float], yvalues: Iterable[float]):
        self.xvalues = [float(v) for v in xvalues]
        self.yvalues = [float(v) for v in yvalues]

    def __repr__(self) -> str:
        return f"ArrayValues({self.xvalues!r}, {self.yvalues!r})"

    def __len__(self) -> int:
        return min(len(self.xvalues), len(self.yvalues))

    def get_values(self, index: int) -> tuple:
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range")
        return self.xvalues[index], self.yvalues[index]

    def get_first_values(self) -> tuple:
        return self.get_values(0)

    def get_last_values(self) -> tuple:
        return self.get_values(len(self) - 1)