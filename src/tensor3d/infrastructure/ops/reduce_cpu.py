"""
CPU reductions over all elements of a tensor (NumPy backend).

The min/max queries scan storage in depth-major, row-major, column-minor
order and keep the first occurrence of an extreme value: a later element only
replaces the running extreme when it is strictly smaller (min) or strictly
greater (max). NaN never compares strictly, so NaN elements never become an
extreme; a tensor holding only NaN reports ``(0, 0, 0)`` for both.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ...domain._shape import Position
from ...domain._tensor import ITensor
from .._contracts import check_not_empty
from .._indexing import position_of


def _min_max_indices(flat: np.ndarray) -> Tuple[int, int]:
    valid = np.flatnonzero(~np.isnan(flat))
    if valid.size == 0:
        return 0, 0
    candidates = flat[valid]
    # argmin/argmax return the first occurrence of the extreme.
    return int(valid[np.argmin(candidates)]), int(valid[np.argmax(candidates)])


def min_max_positions(tensor: ITensor) -> Tuple[Position, Position]:
    """
    Locate the minimum and maximum elements.

    Parameters
    ----------
    tensor : ITensor
        Input tensor with at least one element.

    Returns
    -------
    tuple[Position, Position]
        ``(min_position, max_position)``; ties resolve to the first
        occurrence in storage order.

    Raises
    ------
    EmptyInputError
        If the tensor has zero volume.
    """
    check_not_empty("min_max_positions", tensor.shape)
    i_min, i_max = _min_max_indices(tensor.as_flat_sequence())
    return position_of(tensor.shape, i_min), position_of(tensor.shape, i_max)


def max_position(tensor: ITensor) -> Position:
    return min_max_positions(tensor)[1]


def min_position(tensor: ITensor) -> Position:
    return min_max_positions(tensor)[0]


def min_max_values(tensor: ITensor) -> Tuple[float, float]:
    """
    Return ``(min_value, max_value)`` read at the positions found by
    `min_max_positions`.
    """
    pos_min, pos_max = min_max_positions(tensor)
    return tensor.get(pos_min), tensor.get(pos_max)


def max_value(tensor: ITensor) -> float:
    return tensor.get(max_position(tensor))


def min_value(tensor: ITensor) -> float:
    return tensor.get(min_position(tensor))


def sum_all(tensor: ITensor) -> float:
    """
    Sum every element.

    Accumulates in float64, so the result may differ from a float32 running
    sum in the least-significant bits. A zero-volume tensor sums to ``0.0``.
    """
    return float(np.sum(tensor.as_flat_sequence(), dtype=np.float64))
