"""Polynomial least-squares regression."""

from __future__ import annotations

from typing import Sequence

from chartkit.matrix import Matrix, zero


def poly(xvalues: Sequence[float], yvalues: Sequence[float], degree: int) -> list:
    """Coefficients c with y ~ sum(c[i] * x**i), lowest power first."""
    if len(xvalues) != len(yvalues):
        raise ValueError("polynomial array inputs must be the same length")

    m = len(yvalues)
    n = degree + 1
    y = Matrix(m, 1, list(yvalues))
    x = zero(m, n)

    for i, xv in enumerate(xvalues):
        power = 1.0
        for j in range(n):
            x.set(i, j, power)
            power *= xv

    q, r = x.qr()
    qty = q.transpose().times(y)

    coeffs = [0.0] * n
    for i in range(n - 1, -1, -1):
        value = qty.get(i, 0)
        for j in range(i + 1, n):
            value -= coeffs[j] * r.get(i, j)
        coeffs[i] = value / r.get(i, i)
    return coeffs