################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for matrix comparisons."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping

from oasis_matrix.errors import InvalidArgumentError


# Maximum per-cell absolute difference for two matrices to compare equal
EQUALITY_TOLERANCE: float = 0.0


class MatrixParamsError(InvalidArgumentError):
    """Raised when matrix parameter validation fails."""


def validate_tolerance(value: Any, name: str = "equality_tolerance") -> float:
    """Return a tolerance as a float, rejecting negative or NaN values.

    Infinity is accepted and makes every same-shaped pair of finite
    matrices compare equal.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MatrixParamsError(f"{name} must be a real number")
    try:
        tolerance: float = float(value)
    except OverflowError as exc:
        raise MatrixParamsError(f"{name} must fit in a 64-bit float") from exc
    if math.isnan(tolerance):
        raise MatrixParamsError(f"{name} must not be NaN")
    if tolerance < 0.0:
        raise MatrixParamsError(f"{name} must be non-negative")
    return tolerance


@dataclass(frozen=True)
class MatrixParams:
    """Parameters shared by matrix operations.

    Attributes:
        equality_tolerance: Maximum per-cell absolute difference accepted by
            approximate equality
    """

    # Maximum per-cell absolute difference for equality
    equality_tolerance: float = EQUALITY_TOLERANCE

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default parameter set."""
        return cls()

    @classmethod
    def _field_order(cls) -> tuple[str, ...]:
        return tuple(field.name for field in fields(cls))

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> MatrixParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise MatrixParamsError("params must be a mapping")
        unknown_keys: list[str] = sorted(set(params.keys()) - set(cls._field_order()))
        if unknown_keys:
            raise MatrixParamsError(f"unknown parameter: {unknown_keys[0]}")
        defaults: MatrixParams = cls.defaults()
        result: MatrixParams = cls(
            equality_tolerance=validate_tolerance(
                params.get("equality_tolerance", defaults.equality_tolerance)
            ),
        )
        return result

    def validate(self) -> None:
        """Validate parameter invariants."""
        validate_tolerance(self.equality_tolerance)

    def replace(self, **overrides: Any) -> MatrixParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "equality_tolerance": self.equality_tolerance,
        }
