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
Exception types raised by the matrix value type

Every failure derives from MatrixError and also from the closest built-in
exception, so callers may catch either the specific kind or the generic
Python category (ValueError, IndexError, ...).
"""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for all matrix failures."""


class InvalidShapeError(MatrixError, ValueError):
    """Raised when dimensions are below one or a grid is not rectangular."""


class WrongArityError(InvalidShapeError):
    """Raised when a single-index accessor is used on a multi-column matrix."""


class NullInputError(MatrixError, TypeError):
    """Raised when a required matrix, grid or row argument is None."""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Raised when a row or column index falls outside [0, bound)."""


class ShapeMismatchError(MatrixError, ValueError):
    """Raised when operand shapes are incompatible for an operation."""


class InvalidArgumentError(MatrixError, ValueError):
    """Raised when a scalar or configuration argument is invalid."""


class DivisionByZeroError(InvalidArgumentError, ZeroDivisionError):
    """Raised when a division would use a zero divisor."""
