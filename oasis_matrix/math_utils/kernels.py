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
Arithmetic kernels over float64 grids

Kernels never modify their inputs and always return a new grid. All
preconditions are checked before any cell is computed, so a failure never
leaves a partial result behind. Floating-point results follow IEEE 754:
overflow yields infinities and NaN propagates without raising.
"""

from __future__ import annotations

import enum
import logging
import numbers
from typing import Any
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from oasis_matrix.errors import DivisionByZeroError
from oasis_matrix.errors import InvalidArgumentError
from oasis_matrix.errors import ShapeMismatchError
from oasis_matrix.math_utils.grid import Grid


_LOG: logging.Logger = logging.getLogger(__name__)


class Operation(enum.Enum):
    """
    Enumerates the arithmetic operations shared by element-wise and scalar
    kernels

    Attributes:
        SUM: a + b
        SUBTRACT: a - b
        MULTIPLY: a * b
        DIVIDE: a / b, rejected for zero divisors
    """

    SUM = "sum"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


_UFUNCS: dict[Operation, Callable[..., NDArray[np.float64]]] = {
    Operation.SUM: np.add,
    Operation.SUBTRACT: np.subtract,
    Operation.MULTIPLY: np.multiply,
    Operation.DIVIDE: np.divide,
}


def as_operation(op: Operation | str) -> Operation:
    """Return an Operation from an enum member or its string value.

    Raises:
        InvalidArgumentError: If op names no known operation
    """
    if isinstance(op, Operation):
        return op
    if isinstance(op, str):
        try:
            return Operation(op.lower())
        except ValueError:
            pass
    raise InvalidArgumentError(f"unknown operation: {op!r}")


def as_scalar(value: Any, name: str = "scalar") -> float:
    """Return a real scalar as float.

    Raises:
        InvalidArgumentError: If value is not a real number or overflows a
            64-bit float
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(f"{name} must be a real number")
    try:
        return float(value)
    except OverflowError as exc:
        raise InvalidArgumentError(f"{name} must fit in a 64-bit float") from exc


def element_wise(a: Grid, b: Grid, op: Operation | str) -> Grid:
    """Apply an operation to each pair of same-position cells.

    Args:
        a: Left grid
        b: Right grid with the same shape as ``a``
        op: Operation to apply

    Returns:
        Grid with ``result[i, j] = op(a[i, j], b[i, j])``

    Raises:
        ShapeMismatchError: If the shapes differ
        DivisionByZeroError: If op is DIVIDE and any cell of ``b`` is zero
    """
    operation: Operation = as_operation(op)
    if a.shape != b.shape:
        raise ShapeMismatchError(
            f"operand shapes must match, got {a.shape} and {b.shape}"
        )
    if operation is Operation.DIVIDE:
        zero_count: int = int(np.count_nonzero(b == 0.0))
        if zero_count:
            _LOG.debug("Rejecting element-wise divide with %d zero divisors", zero_count)
            raise DivisionByZeroError(
                "divisor matrix must not contain zero elements for division"
            )
    with np.errstate(all="ignore"):
        return np.asarray(_UFUNCS[operation](a, b), dtype=np.float64)


def scalar_op(a: Grid, scalar: float, op: Operation | str) -> Grid:
    """Apply an operation between every cell and a scalar.

    Raises:
        InvalidArgumentError: If scalar is not a real number
        DivisionByZeroError: If op is DIVIDE and scalar is zero
    """
    operation: Operation = as_operation(op)
    value: float = as_scalar(scalar)
    if operation is Operation.DIVIDE and value == 0.0:
        _LOG.debug("Rejecting scalar divide by zero")
        raise DivisionByZeroError("scalar must not be zero for division")
    with np.errstate(all="ignore"):
        return np.asarray(_UFUNCS[operation](a, value), dtype=np.float64)


def mat_mul(a: Grid, b: Grid) -> Grid:
    """Multiply two grids.

    Each cell is accumulated in ``k`` order starting from 0.0, matching the
    textbook triple loop rather than a blocked BLAS reduction.

    Args:
        a: Left grid with shape (n, m)
        b: Right grid with shape (m, p)

    Returns:
        Grid product with shape (n, p)

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    a_rows: int = a.shape[0]
    a_cols: int = a.shape[1]
    b_rows: int = b.shape[0]
    b_cols: int = b.shape[1]
    if a_cols != b_rows:
        raise ShapeMismatchError(
            f"left columns ({a_cols}) must match right rows ({b_rows})"
        )
    left: list[list[float]] = a.tolist()
    right: list[list[float]] = b.tolist()
    out: Grid = np.zeros((a_rows, b_cols), dtype=np.float64)
    for r in range(a_rows):
        row: list[float] = left[r]
        for c in range(b_cols):
            total: float = 0.0
            for k in range(a_cols):
                total += row[k] * right[k][c]
            out[r, c] = total
    return out


def transpose(a: Grid) -> Grid:
    """Return a new grid with rows and columns swapped."""
    return np.array(a.T, dtype=np.float64, copy=True)


def all_close(a: Grid, b: Grid, tolerance: float) -> bool:
    """Return True when shapes match and every cell differs by at most tolerance.

    Cells holding the same infinity compare equal. A NaN in either grid makes
    the comparison False.
    """
    if a.shape != b.shape:
        return False
    with np.errstate(all="ignore"):
        diff: Grid = np.abs(a - b)
    return bool(np.all((a == b) | (diff <= tolerance)))
