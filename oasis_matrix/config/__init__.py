################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for matrix comparisons."""

from __future__ import annotations

from oasis_matrix.config.matrix_config import MatrixConfig
from oasis_matrix.config.matrix_config import MatrixConfigError
from oasis_matrix.config.matrix_config import default_config
from oasis_matrix.config.matrix_config import equality_tolerance
from oasis_matrix.config.matrix_config import set_default_config
from oasis_matrix.config.matrix_config import set_equality_tolerance
from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.config.matrix_params import MatrixParamsError


__all__ = [
    "MatrixConfig",
    "MatrixConfigError",
    "MatrixParams",
    "MatrixParamsError",
    "default_config",
    "equality_tolerance",
    "set_default_config",
    "set_equality_tolerance",
]
