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
High-level configuration wrapper for matrix comparisons

A single process-wide MatrixConfig serves as the default for approximate
equality. It is replaced, never mutated, when the tolerance changes. The
default is not synchronized: a thread changing it while another compares
matrices may observe either value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.config.matrix_params import MatrixParamsError
from oasis_matrix.config.matrix_params import validate_tolerance
from oasis_matrix.errors import InvalidArgumentError


_LOG: logging.Logger = logging.getLogger(__name__)


class MatrixConfigError(InvalidArgumentError):
    """Raised when matrix configuration validation fails."""


@dataclass(frozen=True)
class MatrixConfig:
    """Convenience wrapper around matrix parameters."""

    params: MatrixParams

    def __init__(self, params: MatrixParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def from_params(cls, params: MatrixParams | Mapping[str, object]) -> MatrixConfig:
        """Construct a configuration from parameters or a mapping."""
        if isinstance(params, Mapping):
            try:
                params_obj: MatrixParams = MatrixParams.from_dict(params)
            except MatrixParamsError as exc:
                raise MatrixConfigError(str(exc)) from exc
        elif isinstance(params, MatrixParams):
            params_obj = params
        else:
            raise MatrixConfigError("params must be MatrixParams or mapping")
        return cls(params_obj)

    @classmethod
    def defaults(cls) -> MatrixConfig:
        """Return a configuration built from default parameters."""
        return cls(MatrixParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants."""
        if not isinstance(self.params, MatrixParams):
            raise MatrixConfigError("params must be MatrixParams")
        try:
            self.params.validate()
        except MatrixParamsError as exc:
            raise MatrixConfigError(str(exc)) from exc

    def equality_tolerance(self) -> float:
        """Return the configured equality tolerance."""
        return self.params.equality_tolerance


_default_config: MatrixConfig = MatrixConfig.defaults()


def default_config() -> MatrixConfig:
    """Return the process-wide default configuration."""
    return _default_config


def set_default_config(config: MatrixConfig) -> MatrixConfig:
    """Replace the process-wide default configuration.

    Args:
        config: New default configuration

    Returns:
        The previous default configuration

    Raises:
        MatrixConfigError: If config is not a MatrixConfig
    """
    global _default_config

    if not isinstance(config, MatrixConfig):
        raise MatrixConfigError("config must be MatrixConfig")

    previous: MatrixConfig = _default_config
    _default_config = config
    if previous.equality_tolerance() != config.equality_tolerance():
        _LOG.info(
            "Default equality tolerance changed from %s to %s",
            previous.equality_tolerance(),
            config.equality_tolerance(),
        )
    return previous


def equality_tolerance() -> float:
    """Return the process-wide default equality tolerance."""
    return _default_config.equality_tolerance()


def set_equality_tolerance(value: float) -> float:
    """Set the process-wide default equality tolerance.

    Returns:
        The previous tolerance

    Raises:
        MatrixParamsError: If value is negative, NaN or not a real number
    """
    tolerance: float = validate_tolerance(value)
    params: MatrixParams = _default_config.params.replace(equality_tolerance=tolerance)
    previous: MatrixConfig = set_default_config(MatrixConfig(params))
    return previous.equality_tolerance()


def resolve_tolerance(
    tolerance: float | None = None,
    config: MatrixConfig | None = None,
) -> float:
    """Pick the tolerance for a comparison.

    An explicit tolerance wins over an explicit config, which wins over the
    process-wide default.
    """
    if tolerance is not None:
        return validate_tolerance(tolerance, "tolerance")
    if config is not None:
        if not isinstance(config, MatrixConfig):
            raise MatrixConfigError("config must be MatrixConfig")
        return config.equality_tolerance()
    return _default_config.equality_tolerance()
