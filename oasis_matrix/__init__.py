################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense fixed-size matrices with validated access and arithmetic."""

from __future__ import annotations

from oasis_matrix.config.matrix_config import MatrixConfig
from oasis_matrix.config.matrix_config import equality_tolerance
from oasis_matrix.config.matrix_config import set_equality_tolerance
from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.errors import DivisionByZeroError
from oasis_matrix.errors import IndexOutOfRangeError
from oasis_matrix.errors import InvalidArgumentError
from oasis_matrix.errors import InvalidShapeError
from oasis_matrix.errors import MatrixError
from oasis_matrix.errors import NullInputError
from oasis_matrix.errors import ShapeMismatchError
from oasis_matrix.errors import WrongArityError
from oasis_matrix.math_utils.kernels import Operation
from oasis_matrix.matrix import Matrix


__all__ = [
    "DivisionByZeroError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidShapeError",
    "Matrix",
    "MatrixConfig",
    "MatrixError",
    "MatrixParams",
    "NullInputError",
    "Operation",
    "ShapeMismatchError",
    "WrongArityError",
    "equality_tolerance",
    "set_equality_tolerance",
]
