################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for matrix construction and deep-copy ownership."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_matrix import InvalidArgumentError
from oasis_matrix import InvalidShapeError
from oasis_matrix import Matrix
from oasis_matrix import NullInputError


@pytest.mark.parametrize("rows, columns", [(1, 1), (2, 3), (5, 1), (1, 7)])
def test_create_zero_filled(rows: int, columns: int) -> None:
    """create() should build a zero matrix of the requested shape."""
    matrix: Matrix = Matrix.create(rows, columns)
    assert matrix.rows == rows
    assert matrix.columns == columns
    assert matrix.shape == (rows, columns)
    assert matrix.snapshot() == [[0.0] * columns for _ in range(rows)]


@pytest.mark.parametrize("rows, columns", [(0, 1), (1, 0), (0, 0), (-3, 2)])
def test_create_rejects_small_shapes(rows: int, columns: int) -> None:
    """Dimensions below one should raise InvalidShapeError."""
    with pytest.raises(InvalidShapeError):
        Matrix.create(rows, columns)
    with pytest.raises(InvalidShapeError):
        Matrix(rows, columns)


def test_create_vector() -> None:
    """create_vector() and Matrix(rows) build column vectors."""
    vector: Matrix = Matrix.create_vector(4)
    assert vector.shape == (4, 1)
    assert vector.is_vector()
    assert Matrix(3).shape == (3, 1)
    with pytest.raises(InvalidShapeError):
        Matrix.create_vector(0)
    with pytest.raises(InvalidShapeError):
        Matrix(-1)


def test_from_grid() -> None:
    """from_grid() should take shape and values from the grid."""
    matrix: Matrix = Matrix.from_grid([[1, 2, 3], [4, 5, 6]])
    assert matrix.shape == (2, 3)
    assert matrix.snapshot() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def test_from_grid_numpy() -> None:
    """from_grid() should accept 2D numpy arrays."""
    array: NDArray[np.float64] = np.arange(6, dtype=np.float64).reshape(3, 2)
    matrix: Matrix = Matrix.from_grid(array)
    array[0, 0] = 42.0
    assert matrix.get(0, 0) == 0.0
    assert matrix.shape == (3, 2)


@pytest.mark.parametrize("grid", [[], [[]], [[1.0, 2.0], [3.0]], [[1.0], []]])
def test_from_grid_rejects_bad_shapes(grid: list[list[float]]) -> None:
    """Empty or jagged grids should raise InvalidShapeError."""
    with pytest.raises(InvalidShapeError):
        Matrix.from_grid(grid)


def test_from_grid_rejects_none() -> None:
    """Absent grids or rows should raise NullInputError."""
    with pytest.raises(NullInputError):
        Matrix.from_grid(None)
    with pytest.raises(NullInputError):
        Matrix.from_grid([[1.0, 2.0], None])


def test_grid_mutation_does_not_leak_in() -> None:
    """Changing the source grid after construction leaves the matrix alone."""
    grid: list[list[float]] = [[1.0, 2.0], [3.0, 4.0]]
    matrix: Matrix = Matrix.from_grid(grid)
    grid[1][1] = -4.0
    grid.append([5.0, 6.0])
    assert matrix.snapshot() == [[1.0, 2.0], [3.0, 4.0]]


def test_snapshot_mutation_does_not_leak_out() -> None:
    """Changing a snapshot or array copy leaves the matrix alone."""
    matrix: Matrix = Matrix.from_grid([[1.0, 2.0], [3.0, 4.0]])
    snapshot: list[list[float]] = matrix.snapshot()
    snapshot[0][0] = 100.0
    array: NDArray[np.float64] = matrix.to_array()
    array[1, 1] = 100.0
    assert matrix.snapshot() == [[1.0, 2.0], [3.0, 4.0]]


def test_clone_is_independent() -> None:
    """Clones share no storage with their source."""
    original: Matrix = Matrix.from_grid([[1.0, 2.0]])
    clone: Matrix = Matrix.clone(original)
    copy: Matrix = original.copy()
    from_matrix: Matrix = Matrix.from_grid(original)
    clone.set(0, 0, 9.0)
    copy.set(0, 1, 8.0)
    from_matrix.set(0, 0, 7.0)
    assert original.snapshot() == [[1.0, 2.0]]
    assert clone.snapshot() == [[9.0, 2.0]]
    assert copy.snapshot() == [[1.0, 8.0]]


def test_clone_rejects_none() -> None:
    """Cloning nothing should raise NullInputError."""
    with pytest.raises(NullInputError):
        Matrix.clone(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        Matrix.clone([[1.0]])  # type: ignore[arg-type]


def test_rows_iter_and_repr() -> None:
    """Rows iterate as tuples and repr shows the values."""
    matrix: Matrix = Matrix.from_grid([[1.0, 2.0], [3.0, 4.0]])
    assert list(matrix.rows_iter()) == [(1.0, 2.0), (3.0, 4.0)]
    assert repr(matrix) == "Matrix([[1.0, 2.0], [3.0, 4.0]])"


def test_unhashable() -> None:
    """Matrices are mutable and therefore unhashable."""
    with pytest.raises(TypeError):
        hash(Matrix(1, 1))


def test_from_grid_rejects_oversized_integers() -> None:
    """Cells that overflow float64 raise a matrix error."""
    with pytest.raises(InvalidShapeError):
        Matrix.from_grid([[10**400]])
