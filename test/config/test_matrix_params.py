################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for matrix parameter schema."""

from __future__ import annotations

import math

import pytest

from oasis_matrix.config.matrix_params import EQUALITY_TOLERANCE
from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.config.matrix_params import MatrixParamsError
from oasis_matrix.config.matrix_params import validate_tolerance
from oasis_matrix.errors import InvalidArgumentError


def test_defaults() -> None:
    """Default parameters should validate with a zero tolerance."""
    params: MatrixParams = MatrixParams.defaults()
    params.validate()
    assert params.equality_tolerance == EQUALITY_TOLERANCE == 0.0


def test_replace_returns_copy() -> None:
    """replace() should leave the original untouched."""
    params: MatrixParams = MatrixParams.defaults()
    changed: MatrixParams = params.replace(equality_tolerance=0.25)
    assert changed.equality_tolerance == 0.25
    assert params.equality_tolerance == 0.0


@pytest.mark.parametrize("value", [-1e-9, -1.0, -math.inf, math.nan, 10**400, True, "0.1", None])
def test_invalid_tolerance_rejected(value: object) -> None:
    """Negative, NaN, oversized and non-numeric tolerances should be rejected."""
    with pytest.raises(MatrixParamsError):
        validate_tolerance(value)


def test_params_error_is_invalid_argument() -> None:
    """Parameter errors should be catchable as invalid arguments."""
    with pytest.raises(InvalidArgumentError):
        MatrixParams(equality_tolerance=-0.5).validate()


def test_int_tolerance_coerced() -> None:
    """Integer tolerances should be accepted as floats."""
    result: float = validate_tolerance(2)
    assert isinstance(result, float)
    assert result == 2.0


def test_from_dict_roundtrip() -> None:
    """as_dict() output should rebuild equal parameters."""
    params: MatrixParams = MatrixParams(equality_tolerance=1e-6)
    rebuilt: MatrixParams = MatrixParams.from_dict(params.as_dict())
    assert rebuilt == params


def test_from_dict_missing_keys_use_defaults() -> None:
    """Missing keys should fall back to defaults."""
    assert MatrixParams.from_dict({}) == MatrixParams.defaults()


def test_from_dict_unknown_key() -> None:
    """Unknown keys should be rejected."""
    with pytest.raises(MatrixParamsError, match="unknown parameter: delta"):
        MatrixParams.from_dict({"delta": 0.1})


def test_from_dict_requires_mapping() -> None:
    """Non-mapping input should be rejected."""
    with pytest.raises(MatrixParamsError):
        MatrixParams.from_dict([("equality_tolerance", 0.1)])  # type: ignore[arg-type]


def test_infinite_tolerance_accepted() -> None:
    """An infinite tolerance is non-negative and therefore valid."""
    assert validate_tolerance(math.inf) == math.inf
    MatrixParams(equality_tolerance=math.inf).validate()
