"""
Contract enforcement helpers.

Every precondition check in the package reports failures through `violate`,
so the reporting policy (raise vs. abort) is decided in exactly one place.
"""

from __future__ import annotations

import logging
import os
from typing import NoReturn

from ..domain._errors import (
    EmptyInputError,
    PositionOutOfBoundsError,
    ShapeMismatchError,
    Tensor3DError,
)
from ..domain._shape import Position, Shape
from ._config import get_config

logger = logging.getLogger(__name__)


def violate(error: Tensor3DError) -> NoReturn:
    """
    Report a contract violation.

    In the default mode the error is raised so the caller can recover. In
    strict mode the violation is logged at CRITICAL and the process aborts.

    Parameters
    ----------
    error : Tensor3DError
        The violation to report.

    Raises
    ------
    Tensor3DError
        Always, unless strict mode aborted the process first.
    """
    if get_config().strict:
        logger.critical("tensor3d contract violation (strict mode): %s", error)
        os.abort()
    raise error


def check_same_shape(op: str, a: Shape, b: Shape) -> None:
    if a != b:
        violate(ShapeMismatchError(op, a, b))


def check_in_bounds(position: Position, shape: Shape) -> None:
    """
    Validate `position` against `shape` unless bounds checking is disabled.
    """
    if get_config().check_bounds and not shape.contains(position):
        violate(PositionOutOfBoundsError(position, shape))


def check_not_empty(op: str, shape: Shape) -> None:
    if shape.volume == 0:
        violate(EmptyInputError(op))
