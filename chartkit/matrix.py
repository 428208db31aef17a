"""Dense row-major matrices of floats with basic decompositions."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterator, Optional, Sequence

DEFAULT_EPSILON = 0.000001


class DimensionMismatchError(ValueError):
    """Raised when matrix or vector dimensions do not line up."""


class SingularValueError(ArithmeticError):
    """Raised when a matrix cannot be inverted or decomposed."""


def _format_float(value: float) -> str:
    """Shortest decimal form of a float, without an exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Matrix:
    """A two dimensional dense array of floats stored row by row."""

    def __init__(self, rows: int, cols: int, values: Optional[Sequence[float]] = None):
        elements = [0.0] * (rows * cols)
        if values:
            count = min(len(values), len(elements))
            elements[:count] = (float(v) for v in values[:count])
        self._elements = elements
        self._stride = cols
        self._epsilon = DEFAULT_EPSILON

    @classmethod
    def _from_elements(cls, elements: list, stride: int, epsilon: float) -> "Matrix":
        matrix = cls(0, stride)
        matrix._elements = elements
        matrix._epsilon = epsilon
        return matrix

    def __str__(self) -> str:
        rows, cols = self.size()
        lines = []
        for row in range(rows):
            cells = "".join(_format_float(self.get(row, col)) + " " for col in range(cols))
            lines.append(cells + "\n")
        return "".join(lines)

    def __repr__(self) -> str:
        rows, cols = self.size()
        return f"Matrix({rows}, {cols}, {self._elements!r})"

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._stride == other._stride and self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    @property
    def epsilon(self) -> float:
        """The precision used for rounding."""
        return self._epsilon

    def with_epsilon(self, epsilon: float) -> "Matrix":
        """Set the epsilon and return the matrix itself."""
        self._epsilon = epsilon
        return self

    def cells(self) -> Iterator[tuple]:
        """Yield (row, col, value) for every element, row by row."""
        rows, cols = self.size()
        for row in range(rows):
            for col in range(cols):
                yield row, col, self.get(row, col)

    def round(self) -> "Matrix":
        """Round every element to the matrix epsilon in place; return self."""
        self._elements = [math.nextafter(v, v) for v in self._elements]
        return self

    def arrays(self) -> list:
        """The matrix as a list of row lists."""
        rows, cols = self.size()
        return [[self.get(row, col) for col in range(cols)] for row in range(rows)]

    def size(self) -> tuple:
        """Return (rows, cols)."""
        return len(self._elements) // self._stride, self._stride

    def is_square(self) -> bool:
        return self._stride == len(self._elements) // self._stride

    def is_symmetric(self) -> bool:
        rows, cols = self.size()
        if rows != cols:
            return False
        return all(
            self.get(i, j) == self.get(j, i) for i in range(rows) for j in range(i)
        )

    def _index(self, row: int, col: int) -> int:
        index = self._stride * row + col
        if row < 0 or col < 0 or index >= len(self._elements):
            raise IndexError(f"matrix index ({row}, {col}) out of range")
        return index

    def get(self, row: int, col: int) -> float:
        return self._elements[self._index(row, col)]

    def set(self, row: int, col: int, value: float) -> None:
        self._elements[self._index(row, col)] = float(value)

    def col(self, col: int) -> list:
        rows, _ = self.size()
        return [self.get(row, col) for row in range(rows)]

    def row(self, row: int) -> list:
        _, cols = self.size()
        return [self.get(row, col) for col in range(cols)]

    def sub_matrix(self, i: int, j: int, rows: int, cols: int) -> "Matrix":
        """Return the rows x cols block whose top left corner is (i, j)."""
        own_rows, own_cols = self.size()
        if i < 0 or j < 0 or i + rows > own_rows or j + cols > own_cols:
            raise IndexError("sub matrix out of range")
        elements = [
            self.get(row, col) for row in range(i, i + rows) for col in range(j, j + cols)
        ]
        return Matrix._from_elements(elements, cols, self._epsilon)

    def scale_row(self, row: int, scale: float) -> None:
        """Multiply every element of a row by scale, in place."""
        start = row * self._stride
        for index in range(start, start + self._stride):
            self._elements[index] *= scale

    def _scale_add_row(self, dest: int, source: int, factor: float) -> None:
        d = dest * self._stride
        s = source * self._stride
        for offset in range(self._stride):
            self._elements[d + offset] += factor * self._elements[s + offset]

    def swap_rows(self, i: int, j: int) -> None:
        for col in range(self._stride):
            vi, vj = self.get(i, col), self.get(j, col)
            self.set(i, col, vj)
            self.set(j, col, vi)

    def augment(self, other: "Matrix") -> "Matrix":
        """Concatenate another matrix to the right of this one."""
        rows, cols = self.size()
        other_rows, other_cols = other.size()
        if rows != other_rows:
            raise DimensionMismatchError("dimension mismatch")
        result = zero(rows, cols + other_cols)
        for row in range(rows):
            for col in range(cols):
                result.set(row, col, self.get(row, col))
            for col in range(other_cols):
                result.set(row, cols + col, other.get(row, col))
        return result

    def copy(self) -> "Matrix":
        return Matrix._from_elements(list(self._elements), self._stride, self._epsilon)

    def diagonal_vector(self) -> list:
        rows, cols = self.size()
        return [self.get(index, index) for index in range(min(rows, cols))]

    def diagonal(self) -> "Matrix":
        rows, cols = self.size()
        rank = min(rows, cols)
        result = Matrix(rank, rank)
        for index in range(rank):
            result.set(index, index, self.get(index, index))
        return result

    def lower(self) -> "Matrix":
        """The matrix with zeros below the diagonal."""
        rows, cols = self.size()
        result = Matrix(rows, cols)
        for row in range(rows):
            for col in range(row, cols):
                result.set(row, col, self.get(row, col))
        return result

    def upper(self) -> "Matrix":
        """The matrix with zeros on and above the diagonal."""
        rows, cols = self.size()
        result = Matrix(rows, cols)
        for row in range(rows):
            for col in range(min(row, cols)):
                result.set(row, col, self.get(row, col))
        return result

    def multiply(self, other: "Matrix") -> "Matrix":
        """Matrix product; keeps this matrix's epsilon."""
        if self._stride * other._stride != len(other._elements):
            raise DimensionMismatchError("dimension mismatch")
        rows = len(self._elements) // self._stride
        result = Matrix(rows, other._stride).with_epsilon(self._epsilon)
        for row in range(rows):
            for col in range(other._stride):
                total = 0.0
                for k in range(self._stride):
                    total += self.get(row, k) * other.get(k, col)
                result.set(row, col, total)
        return result

    def pivotize(self) -> "Matrix":
        """Permutation matrix that moves the largest pivot of each column up."""
        n = self._stride
        pivots = list(range(n))
        for j in range(n):
            row = j
            best = self.get(j, j)
            for i in range(j, n):
                if self.get(i, j) > best:
                    best = self.get(i, j)
                    row = i
            if j != row:
                pivots[row], pivots[j] = pivots[j], pivots[row]
        result = zero(n, n)
        for r, c in enumerate(pivots):
            result.set(r, c, 1.0)
        return result

    def times(self, other: "Matrix") -> "Matrix":
        """Matrix product."""
        rows, cols = self.size()
        other_rows, other_cols = other.size()
        if cols != other_rows:
            raise DimensionMismatchError(
                f"cannot multiply ({rows}x{cols}) and ({other_rows}x{other_cols})"
            )
        result = zero(rows, other_cols)
        for i in range(rows):
            for k, a in enumerate(self.row(i)):
                for j, b in enumerate(other.row(k)):
                    result._elements[i * other_cols + j] += a * b
        return result

    def lu(self) -> tuple:
        """LU decomposition with pivoting; returns (l, u, p) with l*u == p*m."""
        n = self._stride
        lower = zero(n, n)
        upper = zero(n, n)
        perm = self.pivotize()
        permuted = perm.multiply(self)
        rows = len(permuted._elements) // n
        for j in range(n):
            lower.set(j, j, 1.0)
            for i in range(j + 1):
                total = 0.0
                for k in range(i):
                    total += upper.get(k, j) * lower.get(i, k)
                upper.set(i, j, permuted.get(i, j) - total)
            pivot = upper.get(j, j)
            for i in range(j, rows):
                total = 0.0
                for k in range(j):
                    total += upper.get(k, j) * lower.get(i, k)
                if pivot == 0:
                    raise SingularValueError("singular value")
                lower.set(i, j, (permuted.get(i, j) - total) / pivot)
        return lower, upper, perm

    def qr(self) -> tuple:
        """Householder QR decomposition; returns (q, r)."""
        rows, cols = self.size()
        work = self.copy()
        q = Matrix(rows, cols)
        r = Matrix(rows, cols)

        for k in range(cols):
            norm = 0.0
            for i in range(k, rows):
                norm = math.hypot(norm, work.get(i, k))
            if norm != 0:
                if work.get(k, k) < 0:
                    norm = -norm
                for i in range(k, rows):
                    work.set(i, k, work.get(i, k) / norm)
                work.set(k, k, work.get(k, k) + 1.0)
                for j in range(k + 1, cols):
                    s = 0.0
                    for i in range(k, rows):
                        s += work.get(i, k) * work.get(i, j)
                    s = -s / work.get(k, k)
                    for i in range(k, rows):
                        work.set(i, j, work.get(i, j) + s * work.get(i, k))
                        if i < j:
                            r.set(i, j, work.get(i, j))
            r.set(k, k, -norm)

        for k in range(cols - 1, -1, -1):
            q.set(k, k, 1.0)
            for j in range(k, cols):
                if work.get(k, k) != 0:
                    s = 0.0
                    for i in range(k, rows):
                        s += work.get(i, k) * q.get(i, j)
                    s = -s / work.get(k, k)
                    for i in range(k, rows):
                        q.set(i, j, q.get(i, j) + s * work.get(i, k))

        return q.round(), r.round()

    def transpose(self) -> "Matrix":
        rows, cols = self.size()
        result = zero(cols, rows)
        for row, col, value in self.cells():
            result.set(col, row, value)
        return result

    def inverse(self) -> "Matrix":
        """Gauss-Jordan inverse; only symmetric matrices are accepted."""
        if not self.is_symmetric():
            raise DimensionMismatchError("dimension mismatch")
        rows, cols = self.size()
        aug = self.augment(eye(rows))
        for i in range(rows):
            j = i
            for k in range(i, rows):
                if abs(aug.get(k, i)) > abs(aug.get(j, i)):
                    j = k
            if j != i:
                aug.swap_rows(i, j)
            if aug.get(i, i) == 0:
                raise SingularValueError("singular value")
            aug.scale_row(i, 1.0 / aug.get(i, i))
            for k in range(rows):
                if k != i:
                    aug._scale_add_row(k, i, -aug.get(k, i))
        return aug.sub_matrix(0, cols, rows, cols)


def identity(order: int) -> Matrix:
    """The identity matrix of a given order."""
    result = Matrix(order, order)
    for i in range(order):
        result.set(i, i, 1.0)
    return result


def zero(rows: int, cols: int) -> Matrix:
    """A zero-filled matrix."""
    return Matrix(rows, cols)


def ones(rows: int, cols: int) -> Matrix:
    """A matrix filled with ones."""
    return Matrix(rows, cols, [1.0] * (rows * cols))


def eye(n: int) -> Matrix:
    """The n x n matrix with ones on the diagonal."""
    result = zero(n, n)
    for index in range(0, n * n, n + 1):
        result._elements[index] = 1.0
    return result


def from_arrays(arrays: Sequence[Sequence[float]]) -> Matrix:
    """Build a matrix from a list of rows; the first row fixes the width."""
    if not arrays:
        raise ValueError("at least one row is required")
    cols = len(arrays[0])
    result = Matrix(len(arrays), cols)
    for row, values in enumerate(arrays):
        for col in range(cols):
            result.set(row, col, values[col])
    return result


def dot_product(first: Sequence[float], second: Sequence[float]) -> float:
    """Dot product of two equal-length vectors."""
    if len(first) != len(second):
        raise DimensionMismatchError("dimension mismatch")
    result = 0.0
    for a, b in zip(first, second):
        result += a * b
    return result