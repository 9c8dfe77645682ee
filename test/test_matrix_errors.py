################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the matrix exception hierarchy."""

from __future__ import annotations

import pytest

from oasis_matrix import errors


@pytest.mark.parametrize(
    "error, bases",
    [
        (errors.InvalidShapeError, (errors.MatrixError, ValueError)),
        (errors.WrongArityError, (errors.InvalidShapeError, ValueError)),
        (errors.NullInputError, (errors.MatrixError, TypeError)),
        (errors.IndexOutOfRangeError, (errors.MatrixError, IndexError)),
        (errors.ShapeMismatchError, (errors.MatrixError, ValueError)),
        (errors.InvalidArgumentError, (errors.MatrixError, ValueError)),
        (
            errors.DivisionByZeroError,
            (errors.InvalidArgumentError, ZeroDivisionError, ArithmeticError),
        ),
    ],
)
def test_error_bases(error: type[Exception], bases: tuple[type[Exception], ...]) -> None:
    """Each error kind is catchable as its built-in category."""
    for base in bases:
        assert issubclass(error, base)


def test_errors_carry_messages() -> None:
    """Errors keep the message they were raised with."""
    with pytest.raises(errors.DivisionByZeroError, match="zero"):
        raise errors.DivisionByZeroError("scalar must not be zero for division")
