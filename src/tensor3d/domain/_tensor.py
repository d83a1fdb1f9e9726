"""
Tensor interface definitions.

This module defines the domain-level interface for three-dimensional tensors
using structural typing. Consumers (layer code, model loaders, tests) can type
against `ITensor` without importing the NumPy-backed implementation.

Notes
-----
The protocol mirrors the public surface of the concrete `Tensor`: coordinate
access, flat-storage access, and the whole-tensor operations that return new
tensors.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Protocol, Union, runtime_checkable

from ._shape import Position, Shape

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Three-dimensional tensor interface.

    An `ITensor` stores ``shape.volume`` floats addressed by
    ``(z, y, x)`` positions. Every bulk operation returns a new tensor and
    leaves its inputs unchanged; `set` is the only mutating operation.
    """

    @property
    def shape(self) -> Shape:
        """
        Return the shape of the tensor.

        Returns
        -------
        Shape
            The tensor's (depth, height, width) extents.
        """
        ...

    def get(self, *coords: Any) -> float:
        """
        Read one element, addressed by a `Position` or by ``z, y, x``.
        """
        ...

    def set(self, *args: Any) -> None:
        """
        Write one element in place, addressed by a `Position` or ``z, y, x``,
        followed by the value.
        """
        ...

    def as_flat_sequence(self) -> Any:
        """
        Return a read-only view of the backing values in storage order.
        """
        ...

    def to_numpy(self) -> Any:
        """
        Return a writable ``(depth, height, width)`` copy of the values.
        """
        ...

    def positions(self) -> Iterator[Position]:
        ...

    def clone(self) -> "ITensor":
        ...

    def reshape(self, new_shape: Any) -> "ITensor":
        ...

    def transform(self, f: Callable[[float], float]) -> "ITensor":
        ...

    def scale(self, factor: Number) -> "ITensor":
        ...

    def divide(self, divisor: Number) -> "ITensor":
        ...

    def abs(self) -> "ITensor":
        ...

    def sum(self) -> float:
        ...

    def min_max_positions(self) -> tuple[Position, Position]:
        ...

    def min_max_values(self) -> tuple[float, float]:
        ...
