"""
Arithmetic mixin defining binary Tensor operations and operators.

This module declares :class:`TensorMixinArithmetic`, which exposes elementwise
addition and subtraction of same-shape tensors and the Python operators built
on them. Numerical work is delegated to the CPU kernels in
``infrastructure.ops.elementwise_cpu``.
"""

from __future__ import annotations

import numbers
from abc import ABC
from typing import Union

from .....domain._tensor import ITensor
from ....ops import elementwise_cpu as ew

Number = Union[int, float]


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class TensorMixinArithmetic(ABC):
    """
    Mixin providing elementwise binary arithmetic.

    Notes
    -----
    - Tensor-tensor operations require equal shapes; there is no broadcasting.
    - ``*`` and ``/`` accept a scalar on the tensor's right (``*`` also on its
      left). Any other operand combination returns ``NotImplemented`` so
      Python raises ``TypeError``.
    - Operators are sugar over the named methods and carry the same contracts.
    """

    def add(self: ITensor, other: ITensor) -> ITensor:
        """
        Elementwise sum.

        Parameters
        ----------
        other : ITensor
            Tensor with the same shape as ``self``.

        Returns
        -------
        ITensor
            New tensor holding ``self + other``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        return ew.add(self, other)

    def subtract(self: ITensor, other: ITensor) -> ITensor:
        """
        Elementwise difference ``self - other``.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        return ew.subtract(self, other)

    def abs_diff(self: ITensor, other: ITensor) -> ITensor:
        """
        Elementwise ``|self - other|``.
        """
        return ew.abs_diff(self, other)

    def __add__(self, other: object):
        if isinstance(other, TensorMixinArithmetic):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, TensorMixinArithmetic):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other: object):
        if _is_number(other):
            return ew.scale(self, other)
        return NotImplemented

    def __rmul__(self, other: object):
        # scaling is commutative
        return self.__mul__(other)

    def __truediv__(self, other: object):
        if _is_number(other):
            return ew.divide(self, other)
        return NotImplemented

    def __neg__(self):
        return ew.scale(self, -1)
