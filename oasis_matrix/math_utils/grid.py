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
Grid coercion and index validation helpers

A grid is a rectangular 2D float64 numpy array with at least one row and one
column. Every helper that accepts external data returns a new array, so the
caller's object is never aliased.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from oasis_matrix.errors import IndexOutOfRangeError
from oasis_matrix.errors import InvalidShapeError
from oasis_matrix.errors import NullInputError


Grid = NDArray[np.float64]


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(
        value, (bool, np.bool_)
    )


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def require_dimension(value: Any, name: str) -> int:
    """Return a matrix dimension, requiring an integer of at least one.

    Raises:
        InvalidShapeError: If value is not an int or is less than one
    """
    if not _is_integer(value):
        raise InvalidShapeError(f"{name} must be an int")
    dimension: int = int(value)
    if dimension < 1:
        raise InvalidShapeError(f"{name} must be at least 1")
    return dimension


def require_index(index: Any, bound: int, name: str) -> int:
    """Return an index, requiring an integer in [0, bound).

    Raises:
        IndexOutOfRangeError: If index is not an int or is out of range
    """
    if not _is_integer(index):
        raise IndexOutOfRangeError(f"{name} index must be an int")
    value: int = int(index)
    if value < 0 or value >= bound:
        raise IndexOutOfRangeError(f"{name} index must be in [0, {bound}), got {value}")
    return value


def zeros(rows: int, columns: int) -> Grid:
    """Return a zero-filled grid after validating both dimensions."""
    return np.zeros(
        (require_dimension(rows, "rows"), require_dimension(columns, "columns")),
        dtype=np.float64,
    )


def as_grid(data: Any, name: str = "grid") -> Grid:
    """Deep-copy external data into a validated float64 grid.

    Args:
        data: Sequence of row sequences, or a 2D numpy array
        name: Argument name used in error messages

    Returns:
        A new rectangular float64 array

    Raises:
        NullInputError: If data or any row is None
        InvalidShapeError: If data is empty, any row is empty, rows have
            unequal lengths, or a cell is not a real number
    """
    if data is None:
        raise NullInputError(f"{name} must not be None")

    if isinstance(data, np.ndarray):
        return _array_as_grid(data, name)

    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise InvalidShapeError(f"{name} must be a sequence of rows")
    if len(data) < 1:
        raise InvalidShapeError(f"{name} must have at least one row")

    columns: int | None = None
    converted: list[list[float]] = []
    for row_index, row in enumerate(data):
        if row is None:
            raise NullInputError(f"{name} row {row_index} must not be None")
        if isinstance(row, np.ndarray):
            if row.ndim != 1:
                raise InvalidShapeError(f"{name} row {row_index} must be 1D")
        elif isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidShapeError(f"{name} row {row_index} must be a sequence")
        if len(row) < 1:
            raise InvalidShapeError(f"{name} row {row_index} must not be empty")
        if columns is None:
            columns = len(row)
        elif len(row) != columns:
            raise InvalidShapeError(f"{name} rows must all have length {columns}")
        converted_row: list[float] = []
        for value in row:
            if not _is_real(value):
                raise InvalidShapeError(f"{name} must contain only real numbers")
            try:
                converted_row.append(float(value))
            except OverflowError as exc:
                raise InvalidShapeError(
                    f"{name} values must fit in a 64-bit float"
                ) from exc
        converted.append(converted_row)

    return np.array(converted, dtype=np.float64)


def _array_as_grid(array: NDArray[Any], name: str) -> Grid:
    if array.ndim != 2:
        raise InvalidShapeError(f"{name} must be 2D")
    if array.shape[0] < 1 or array.shape[1] < 1:
        raise InvalidShapeError(f"{name} must have at least one row and column")
    if array.dtype.kind not in "iuf":
        raise InvalidShapeError(f"{name} must contain only real numbers")
    return np.array(array, dtype=np.float64, copy=True)


def to_nested_list(grid: Grid) -> list[list[float]]:
    """Return a nested list copy of a grid."""
    return [[float(value) for value in row] for row in grid]
