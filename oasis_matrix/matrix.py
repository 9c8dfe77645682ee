################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Dense fixed-size matrix of float64 values

The backing grid is owned by one Matrix only. Every constructor copies its
input and every accessor that exposes the grid returns a copy, so the only
way to change a Matrix is through the validated setters. All arithmetic
returns a new Matrix.

Setters mutate in place without locking. Concurrent readers are safe as long
as no thread is calling a setter on the same instance.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterator
from typing import Any

import numpy as np
from numpy.typing import NDArray

from oasis_matrix.config.matrix_config import MatrixConfig
from oasis_matrix.config.matrix_config import resolve_tolerance
from oasis_matrix.errors import InvalidArgumentError
from oasis_matrix.errors import NullInputError
from oasis_matrix.errors import ShapeMismatchError
from oasis_matrix.errors import WrongArityError
from oasis_matrix.math_utils import grid
from oasis_matrix.math_utils import kernels
from oasis_matrix.math_utils.grid import Grid
from oasis_matrix.math_utils.kernels import Operation


_MISSING: Any = object()


def _require_matrix(value: Any, name: str) -> Matrix:
    if value is None:
        raise NullInputError(f"{name} must not be None")
    if not isinstance(value, Matrix):
        raise InvalidArgumentError(f"{name} must be a Matrix")
    return value


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


class Matrix:
    """
    Dense rows x columns matrix of real numbers

    Matrix(rows, columns) builds a zero-filled matrix and Matrix(rows) a
    zero-filled column vector. Both dimensions must be at least one and never
    change afterwards.

    Equality is approximate: two matrices of the same shape are equal when
    every pair of cells differs by at most the equality tolerance. With a
    positive tolerance this is not transitive.
    """

    __slots__ = ("_rows", "_columns", "_data")

    # Mutable and compared with a threshold
    __hash__ = None  # type: ignore[assignment]

    # Make numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int | None = None) -> None:
        data: Grid = grid.zeros(rows, 1 if columns is None else columns)
        self._rows: int = data.shape[0]
        self._columns: int = data.shape[1]
        self._data: Grid = data

    @classmethod
    def _adopt(cls, data: Grid) -> Matrix:
        # Takes ownership of data, callers must pass a fresh grid
        matrix: Matrix = cls.__new__(cls)
        matrix._rows = data.shape[0]
        matrix._columns = data.shape[1]
        matrix._data = data
        return matrix

    ############################################################################
    # Construction
    ############################################################################

    @classmethod
    def create(cls, rows: int, columns: int) -> Matrix:
        """Return a zero-filled rows x columns matrix."""
        return cls(rows, columns)

    @classmethod
    def create_vector(cls, rows: int) -> Matrix:
        """Return a zero-filled column vector with the given number of rows."""
        return cls(rows, 1)

    @classmethod
    def from_grid(cls, data: Any) -> Matrix:
        """Return a matrix holding a deep copy of a rectangular grid.

        Args:
            data: Sequence of row sequences, a 2D numpy array, or a Matrix

        Raises:
            NullInputError: If data or any row is None
            InvalidShapeError: If data is empty, has an empty row, or is jagged
        """
        if isinstance(data, Matrix):
            return cls.clone(data)
        return cls._adopt(grid.as_grid(data))

    @classmethod
    def clone(cls, other: Matrix) -> Matrix:
        """Return a deep copy of another matrix."""
        source: Matrix = _require_matrix(other, "other")
        return cls._adopt(source._data.copy())

    def copy(self) -> Matrix:
        """Return a deep copy of this matrix."""
        return Matrix.clone(self)

    ############################################################################
    # Shape and element access
    ############################################################################

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    def is_vector(self) -> bool:
        """Return True for single-column matrices."""
        return self._columns == 1

    def _require_vector(self) -> None:
        if self._columns != 1:
            raise WrongArityError(
                "single-index access is only defined for matrices with one "
                f"column, this matrix has {self._columns}"
            )

    def get(self, row: int, column: int | None = None) -> float:
        """Return the value at (row, column).

        The column may be omitted for column vectors.

        Raises:
            IndexOutOfRangeError: If an index is outside the matrix
            WrongArityError: If column is omitted and the matrix has more than
                one column
        """
        if column is None:
            self._require_vector()
            column = 0
        r: int = grid.require_index(row, self._rows, "row")
        c: int = grid.require_index(column, self._columns, "column")
        return float(self._data[r, c])

    def set(self, row: int, column_or_value: Any, value: Any = _MISSING) -> float:
        """Overwrite one cell and return the value it held before.

        ``set(row, column, value)`` addresses any cell. ``set(row, value)`` is
        the column vector form.

        Raises:
            IndexOutOfRangeError: If an index is outside the matrix
            WrongArityError: If the vector form is used on a matrix with more
                than one column
            InvalidArgumentError: If value is not a real number
        """
        if value is _MISSING:
            self._require_vector()
            return self.exchange(row, 0, column_or_value)
        return self.exchange(row, column_or_value, value)

    def exchange(self, row: int, column: int, value: float) -> float:
        """Store value at (row, column) and return the previous value."""
        r: int = grid.require_index(row, self._rows, "row")
        c: int = grid.require_index(column, self._columns, "column")
        new_value: float = kernels.as_scalar(value, "value")
        previous: float = float(self._data[r, c])
        self._data[r, c] = new_value
        return previous

    def snapshot(self) -> list[list[float]]:
        """Return a nested list copy of the backing grid."""
        return grid.to_nested_list(self._data)

    def to_array(self) -> NDArray[np.float64]:
        """Return a numpy copy of the backing grid."""
        return self._data.copy()

    def rows_iter(self) -> Iterator[tuple[float, ...]]:
        """Yield a copy of each row as a tuple."""
        for row in self._data:
            yield tuple(float(value) for value in row)

    def __getitem__(self, key: Any) -> float:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise InvalidArgumentError("matrix index must be (row, column)")
            return self.get(key[0], key[1])
        return self.get(key)

    def __setitem__(self, key: Any, value: float) -> None:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise InvalidArgumentError("matrix index must be (row, column)")
            self.exchange(key[0], key[1], value)
        else:
            self.set(key, value)

    ############################################################################
    # Element-wise operations
    ############################################################################

    @staticmethod
    def element_wise(a: Matrix, b: Matrix, op: Operation | str) -> Matrix:
        """Apply op to each pair of same-position cells of a and b.

        Raises:
            NullInputError: If either operand is None
            ShapeMismatchError: If the shapes differ
            DivisionByZeroError: If op is DIVIDE and b holds a zero cell
        """
        left: Matrix = _require_matrix(a, "a")
        right: Matrix = _require_matrix(b, "b")
        return Matrix._adopt(kernels.element_wise(left._data, right._data, op))

    def add_matrix(self, other: Matrix) -> Matrix:
        return Matrix.element_wise(self, other, Operation.SUM)

    def sub_matrix(self, other: Matrix) -> Matrix:
        return Matrix.element_wise(self, other, Operation.SUBTRACT)

    def mul_matrix_element_wise(self, other: Matrix) -> Matrix:
        return Matrix.element_wise(self, other, Operation.MULTIPLY)

    def div_matrix_element_wise(self, other: Matrix) -> Matrix:
        return Matrix.element_wise(self, other, Operation.DIVIDE)

    ############################################################################
    # Matrix multiplication
    ############################################################################

    @staticmethod
    def multiply(a: Matrix, b: Matrix) -> Matrix:
        """Return the matrix product a x b with shape (a.rows, b.columns).

        Raises:
            NullInputError: If either operand is None
            ShapeMismatchError: If a.columns != b.rows
        """
        left: Matrix = _require_matrix(a, "a")
        right: Matrix = _require_matrix(b, "b")
        return Matrix._adopt(kernels.mat_mul(left._data, right._data))

    def mul(self, other: Matrix) -> Matrix:
        """Return self x other."""
        right: Matrix = _require_matrix(other, "other")
        if self._columns != right._rows:
            raise ShapeMismatchError(
                f"other must have {self._columns} rows, got {right._rows}"
            )
        return Matrix.multiply(self, right)

    ############################################################################
    # Scalar operations
    ############################################################################

    @staticmethod
    def scalar_op(m: Matrix, scalar: float, op: Operation | str) -> Matrix:
        """Apply op between every cell of m and scalar.

        Raises:
            NullInputError: If m is None
            DivisionByZeroError: If op is DIVIDE and scalar is zero
        """
        source: Matrix = _require_matrix(m, "m")
        return Matrix._adopt(kernels.scalar_op(source._data, scalar, op))

    def add_scalar(self, scalar: float) -> Matrix:
        return Matrix.scalar_op(self, scalar, Operation.SUM)

    def sub_scalar(self, scalar: float) -> Matrix:
        return Matrix.scalar_op(self, scalar, Operation.SUBTRACT)

    def mul_scalar(self, scalar: float) -> Matrix:
        return Matrix.scalar_op(self, scalar, Operation.MULTIPLY)

    def div_scalar(self, scalar: float) -> Matrix:
        return Matrix.scalar_op(self, scalar, Operation.DIVIDE)

    ############################################################################
    # Transpose
    ############################################################################

    @staticmethod
    def transpose_of(m: Matrix) -> Matrix:
        """Return a new matrix with shape (m.columns, m.rows)."""
        source: Matrix = _require_matrix(m, "m")
        return Matrix._adopt(kernels.transpose(source._data))

    def transpose(self) -> Matrix:
        return Matrix.transpose_of(self)

    ############################################################################
    # Equality
    ############################################################################

    def equals(
        self,
        other: Any,
        *,
        tolerance: float | None = None,
        config: MatrixConfig | None = None,
    ) -> bool:
        """Compare with another matrix cell by cell.

        Args:
            other: Object to compare with
            tolerance: Maximum per-cell absolute difference. Overrides config
            config: Configuration providing the tolerance. Defaults to the
                process-wide configuration

        Returns:
            True if other is this matrix, or a Matrix of the same shape whose
            cells each differ from this one by at most the tolerance

        Raises:
            InvalidArgumentError: If tolerance is negative or NaN and other
                is not this matrix
        """
        if other is self:
            return True
        delta: float = resolve_tolerance(tolerance, config)
        if not isinstance(other, Matrix):
            return False
        return kernels.all_close(self._data, other._data, delta)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        return not self.equals(other)

    ############################################################################
    # Operators
    ############################################################################

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.add_matrix(other)
        if _is_scalar(other):
            return self.add_scalar(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.add_scalar(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.sub_matrix(other)
        if _is_scalar(other):
            return self.sub_scalar(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.mul_scalar(-1.0).add_scalar(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.mul_matrix_element_wise(other)
        if _is_scalar(other):
            return self.mul_scalar(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.mul_scalar(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.div_matrix_element_wise(other)
        if _is_scalar(other):
            return self.div_scalar(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.mul(other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self.mul_scalar(-1.0)

    def __repr__(self) -> str:
        return f"Matrix({self.snapshot()!r})"
