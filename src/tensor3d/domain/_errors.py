"""
Contract-violation exceptions for tensor3d.

This module defines the error taxonomy raised when a caller breaks one of the
tensor contracts: building a tensor from a value sequence of the wrong length,
combining tensors of different shapes, reducing an empty tensor, or indexing
outside a tensor's shape.

All errors derive from `Tensor3DError` so callers can catch the whole family,
and additionally from the closest built-in exception (`ValueError` or
`IndexError`) so generic handlers keep working.
"""

from __future__ import annotations

from typing import Any


class Tensor3DError(Exception):
    """
    Base class for all tensor3d contract violations.
    """


class InvalidArgumentError(Tensor3DError, ValueError):
    """
    Raised when an argument cannot describe a valid tensor.

    Typical causes are a value sequence whose length does not match the
    declared shape's volume, a negative dimension, or a reshape target whose
    volume differs from the source tensor.
    """


class ShapeMismatchError(Tensor3DError, ValueError):
    """
    Raised when two tensors combined elementwise have different shapes.

    Attributes
    ----------
    op : str
        Name of the operation that was attempted (e.g., "add").
    shape_a : Any
        Shape of the left-hand operand.
    shape_b : Any
        Shape of the right-hand operand.
    """

    def __init__(self, op: str, shape_a: Any, shape_b: Any) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        op : str
            The operation name.
        shape_a : Any
            Shape of the left-hand operand.
        shape_b : Any
            Shape of the right-hand operand.
        """
        super().__init__(f"{op} requires equal shapes, got {shape_a} and {shape_b}.")
        self.op = op
        self.shape_a = shape_a
        self.shape_b = shape_b


class EmptyInputError(Tensor3DError, ValueError):
    """
    Raised when a min/max reduction is requested on a zero-volume tensor.
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"{op} is undefined for a tensor with zero elements.")
        self.op = op


class PositionOutOfBoundsError(Tensor3DError, IndexError):
    """
    Raised when a position lies outside the shape of the tensor it indexes.

    Attributes
    ----------
    position : Any
        The offending position.
    shape : Any
        Shape of the indexed tensor.
    """

    def __init__(self, position: Any, shape: Any) -> None:
        super().__init__(f"Position {position} is out of bounds for shape {shape}.")
        self.position = position
        self.shape = shape
