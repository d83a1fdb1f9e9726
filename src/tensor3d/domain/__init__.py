"""
Domain layer: value types, error taxonomy, and the tensor protocol.
"""

from ._errors import (
    EmptyInputError,
    InvalidArgumentError,
    PositionOutOfBoundsError,
    ShapeMismatchError,
    Tensor3DError,
)
from ._shape import Position, Shape
from ._tensor import ITensor

__all__ = [
    EmptyInputError.__name__,
    InvalidArgumentError.__name__,
    PositionOutOfBoundsError.__name__,
    ShapeMismatchError.__name__,
    Tensor3DError.__name__,
    Position.__name__,
    Shape.__name__,
    ITensor.__name__,
]
