"""
Unary operation mixin defining elementwise Tensor transforms.

This module declares :class:`TensorMixinUnary`, which exposes the pointwise
operations that map a tensor to a new tensor of the same shape: a generic
callable transform, scalar scaling and division, and absolute value.
"""

from __future__ import annotations

from abc import ABC
from typing import Callable, Union

from .....domain._tensor import ITensor
from ....ops import elementwise_cpu as ew

Number = Union[int, float]


class TensorMixinUnary(ABC):
    """
    Mixin providing elementwise unary operations.

    Every method returns a new tensor with the receiver's shape; the receiver
    is never modified.
    """

    def transform(self: ITensor, f: Callable[[float], float]) -> ITensor:
        """
        Apply `f` to every element.

        Parameters
        ----------
        f : Callable[[float], float]
            Any callable mapping a float to a float (function, lambda,
            ``math.tanh``, a callable object, ...).

        Returns
        -------
        ITensor
            Tensor where each element equals ``f`` of the corresponding input
            element.
        """
        return ew.transform(f, self)

    def scale(self: ITensor, factor: Number) -> ITensor:
        """
        Multiply every element by `factor`.
        """
        return ew.scale(self, factor)

    def divide(self: ITensor, divisor: Number) -> ITensor:
        """
        Divide every element by `divisor`.

        Notes
        -----
        Implemented as scaling by ``1 / divisor``. A zero divisor produces
        infinities/NaN rather than raising.
        """
        return ew.divide(self, divisor)

    def abs(self: ITensor) -> ITensor:
        return ew.abs_values(self)

    def __abs__(self):
        return ew.abs_values(self)
