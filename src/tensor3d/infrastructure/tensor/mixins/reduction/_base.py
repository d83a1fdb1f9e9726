"""
Reduction mixin defining the public Tensor reduction API.

This module declares :class:`TensorMixinReduction`, which exposes whole-tensor
reductions: the positions and values of the minimum and maximum elements, and
the sum of all elements. The scans are implemented in
``infrastructure.ops.reduce_cpu``.
"""

from __future__ import annotations

from abc import ABC
from typing import Tuple

from .....domain._shape import Position
from .....domain._tensor import ITensor
from ....ops import reduce_cpu as rd


class TensorMixinReduction(ABC):
    """
    Mixin providing reductions over all elements.

    Notes
    -----
    - Ties resolve to the first occurrence in depth-major, row-major,
      column-minor order.
    - Min/max queries raise `EmptyInputError` on a zero-volume tensor;
      `sum` returns ``0.0``.
    """

    def min_max_positions(self: ITensor) -> Tuple[Position, Position]:
        """
        Return the positions of the minimum and maximum elements.

        Returns
        -------
        tuple[Position, Position]
            ``(min_position, max_position)``.

        Raises
        ------
        EmptyInputError
            If the tensor has zero volume.
        """
        return rd.min_max_positions(self)

    def max_position(self: ITensor) -> Position:
        return rd.max_position(self)

    def min_position(self: ITensor) -> Position:
        """
        Position of the (first) minimum element.
        """
        return rd.min_position(self)

    def min_max_values(self: ITensor) -> Tuple[float, float]:
        return rd.min_max_values(self)

    def max_value(self: ITensor) -> float:
        return rd.max_value(self)

    def min_value(self: ITensor) -> float:
        return rd.min_value(self)

    def sum(self: ITensor) -> float:
        """
        Sum of all elements as a Python float.
        """
        return rd.sum_all(self)
