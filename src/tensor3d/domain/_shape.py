"""
Shape and position value types.

This module defines the two immutable coordinate types every tensor operation
is expressed in:

- `Shape`: the (depth, height, width) extents of a tensor and its volume
- `Position`: a (z, y, x) coordinate addressing one element of a shape

Both are frozen dataclasses, so equality and hashing are structural. Neither
type knows about storage; the mapping from positions to storage offsets lives
in the infrastructure indexing helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from ._errors import InvalidArgumentError


def _as_dim(name: str, value: object) -> int:
    """
    Validate a single dimension/coordinate and return it as a plain int.

    Booleans and floats are rejected even though they compare like ints, since
    they almost always indicate a caller bug.
    """
    if isinstance(value, bool) or not hasattr(value, "__index__"):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        )
    return int(value.__index__())


@dataclass(frozen=True)
class Shape:
    """
    Extents of a three-dimensional tensor.

    Parameters
    ----------
    depth : int
        Number of depth slices (slowest-varying axis).
    height : int
        Number of rows per slice.
    width : int
        Number of columns per row (fastest-varying axis).

    Raises
    ------
    InvalidArgumentError
        If any dimension is not a non-negative integer.

    Notes
    -----
    `volume` is the single source of truth for the storage length required by
    a tensor of this shape.
    """

    depth: int
    height: int
    width: int

    def __post_init__(self) -> None:
        for name in ("depth", "height", "width"):
            dim = _as_dim(name, getattr(self, name))
            if dim < 0:
                raise InvalidArgumentError(
                    f"{name} must be non-negative, got {dim}"
                )
            object.__setattr__(self, name, dim)

    @property
    def volume(self) -> int:
        """
        Total number of elements described by this shape.

        Returns
        -------
        int
            ``depth * height * width``.
        """
        return self.depth * self.height * self.width

    @classmethod
    def coerce(cls, value: Union["Shape", Sequence[int]]) -> "Shape":
        """
        Convert a `Shape` or a 3-sequence of ints into a `Shape`.

        Parameters
        ----------
        value : Shape or Sequence[int]
            Either an existing shape (returned unchanged) or
            ``(depth, height, width)``.

        Returns
        -------
        Shape
            The normalized shape.

        Raises
        ------
        InvalidArgumentError
            If `value` is neither a Shape nor a sequence of exactly three ints.
        """
        if isinstance(value, cls):
            return value
        try:
            depth, height, width = value
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                f"Expected a Shape or (depth, height, width), got {value!r}"
            ) from e
        return cls(depth, height, width)

    def contains(self, position: "Position") -> bool:
        """
        Return whether `position` addresses an element inside this shape.
        """
        return (
            0 <= position.z < self.depth
            and 0 <= position.y < self.height
            and 0 <= position.x < self.width
        )

    def positions(self) -> Iterator["Position"]:
        """
        Iterate over every position of this shape.

        Yields
        ------
        Position
            Positions in depth-major, row-major, column-minor order, i.e. the
            same order as the tensor's flat storage.
        """
        for z in range(self.depth):
            for y in range(self.height):
                for x in range(self.width):
                    yield Position(z, y, x)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.depth, self.height, self.width)

    def __str__(self) -> str:
        return f"({self.depth}, {self.height}, {self.width})"


@dataclass(frozen=True)
class Position:
    """
    A (z, y, x) coordinate into a `Shape`.

    Parameters
    ----------
    z : int
        Depth index.
    y : int
        Row index.
    x : int
        Column index.

    Notes
    -----
    A position carries no shape of its own; it is validated against a shape
    only when used to index a tensor.
    """

    z: int
    y: int
    x: int

    def __post_init__(self) -> None:
        for name in ("z", "y", "x"):
            object.__setattr__(self, name, _as_dim(name, getattr(self, name)))

    @classmethod
    def coerce(cls, value: Union["Position", Sequence[int]]) -> "Position":
        """
        Convert a `Position` or a 3-sequence of ints into a `Position`.

        Raises
        ------
        InvalidArgumentError
            If `value` is neither a Position nor a sequence of exactly three ints.
        """
        if isinstance(value, cls):
            return value
        try:
            z, y, x = value
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                f"Expected a Position or (z, y, x), got {value!r}"
            ) from e
        return cls(z, y, x)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.z, self.y, self.x)

    def __str__(self) -> str:
        return f"({self.z}, {self.y}, {self.x})"
