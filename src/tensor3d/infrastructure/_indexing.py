"""
Storage linearization for three-dimensional tensors.

A tensor stores its values in one contiguous buffer. A position ``(z, y, x)``
maps to the storage offset

    index(z, y, x) = z * height * width + y * width + x

so ``x`` varies fastest and ``z`` slowest (depth-major, row-major). This
mapping is a bijection from the valid positions of a shape onto
``[0, volume)``. Reshape reuses the flat buffer unchanged, so the formula must
stay fixed.
"""

from __future__ import annotations

from ..domain._errors import InvalidArgumentError
from ..domain._shape import Position, Shape


def linear_index(shape: Shape, position: Position) -> int:
    """
    Map a position to its offset in flat storage.

    Parameters
    ----------
    shape : Shape
        Shape the position indexes into.
    position : Position
        The position to linearize. Bounds are not checked here.

    Returns
    -------
    int
        Storage offset of `position`.
    """
    return (
        position.z * shape.height * shape.width + position.y * shape.width + position.x
    )


def position_of(shape: Shape, index: int) -> Position:
    """
    Map a storage offset back to its position (inverse of `linear_index`).

    Raises
    ------
    InvalidArgumentError
        If `index` is not in ``[0, shape.volume)``.
    """
    if not 0 <= index < shape.volume:
        raise InvalidArgumentError(
            f"Index {index} is out of range for shape {shape} (volume {shape.volume})"
        )
    plane = shape.height * shape.width
    z, rest = divmod(index, plane)
    y, x = divmod(rest, shape.width)
    return Position(z, y, x)
