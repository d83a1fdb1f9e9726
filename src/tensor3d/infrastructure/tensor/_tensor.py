"""
Concrete Tensor implementation (NumPy backend).

This module provides `Tensor`, a dense three-dimensional float32 tensor that
satisfies the domain-level `ITensor` protocol. Values live in one contiguous
1-D NumPy buffer of length ``shape.volume``, addressed through the fixed
depth-major/row-major linearization in ``infrastructure._indexing``.

Design notes
------------
- Value semantics: a tensor exclusively owns its buffer. Construction copies
  the given values, and every bulk operation (transform, add, scale,
  reshape, ...) returns a new tensor. `set` is the only mutating method.
- Operations are contributed by mixins (arithmetic, unary, reduction,
  memory) that delegate to the CPU kernels in ``infrastructure.ops``.
- Contract violations are reported through ``_contracts.violate``, which
  raises a typed error by default and aborts in strict mode.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from ...domain._errors import InvalidArgumentError
from ...domain._shape import Position, Shape
from .._contracts import check_in_bounds, violate
from .._indexing import linear_index
from ._format import format_tensor
from .mixins import (
    TensorMixinArithmetic,
    TensorMixinMemory,
    TensorMixinReduction,
    TensorMixinUnary,
)

Number = Union[int, float]
ShapeLike = Union[Shape, Sequence[int]]


def _as_flat_values(values: Iterable[Number], shape: Shape) -> np.ndarray:
    """
    Copy `values` into a fresh float32 buffer and validate it against `shape`.

    Raises
    ------
    InvalidArgumentError
        If the values are not a flat numeric sequence of length
        ``shape.volume``.
    """
    try:
        if not isinstance(values, np.ndarray):
            values = list(values)
        arr = np.array(values, dtype=np.float32)
    except (TypeError, ValueError) as e:
        err = InvalidArgumentError(f"Tensor values must be a sequence of floats: {e}")
        err.__cause__ = e
        violate(err)

    if arr.ndim != 1:
        violate(
            InvalidArgumentError(
                f"Tensor values must be a flat sequence, got an array of shape {arr.shape}"
            )
        )
    if arr.size != shape.volume:
        violate(
            InvalidArgumentError(
                f"Tensor of shape {shape} needs {shape.volume} values, got {arr.size}"
            )
        )
    return arr


class Tensor(
    TensorMixinArithmetic,
    TensorMixinUnary,
    TensorMixinReduction,
    TensorMixinMemory,
):
    """
    Dense three-dimensional float32 tensor.

    Parameters
    ----------
    shape : Shape or Sequence[int]
        Tensor extents ``(depth, height, width)``.
    values : Iterable[float], optional
        Flat values in storage order (x fastest, z slowest). Must contain
        exactly ``shape.volume`` elements. If omitted, the tensor is
        zero-filled.

    Raises
    ------
    InvalidArgumentError
        If `shape` is invalid or `values` does not match its volume.

    Notes
    -----
    - Positions passed to `get`/`set` are bounds-checked unless the active
      config disables it (``configure(check_bounds=False)``). Unchecked
      out-of-range access may raise `IndexError` or silently address another
      element.
    - Concurrent reads are safe; concurrent `set` calls must be synchronized
      by the caller.
    """

    # make NumPy scalars defer to the Tensor operators (e.g. np.float32(2) * t)
    __array_ufunc__ = None

    def __init__(
        self, shape: ShapeLike, values: Optional[Iterable[Number]] = None
    ) -> None:
        self._shape = Shape.coerce(shape)
        if values is None:
            self._values = np.zeros(self._shape.volume, dtype=np.float32)
        else:
            self._values = _as_flat_values(values, self._shape)

    @classmethod
    def _wrap(cls, shape: Shape, values: np.ndarray) -> "Tensor":
        """
        Build a tensor that takes ownership of an already-validated buffer.

        Used by the CPU kernels to return freshly computed results without a
        second copy. `values` must be a 1-D float32 array of length
        ``shape.volume`` that nothing else references.
        """
        out = cls.__new__(cls)
        out._shape = shape
        out._values = np.ascontiguousarray(values, dtype=np.float32)
        return out

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def zeros(cls, shape: ShapeLike) -> "Tensor":
        return cls(shape)

    @classmethod
    def full(cls, shape: ShapeLike, value: Number) -> "Tensor":
        """
        Create a tensor with every element set to `value`.
        """
        target = Shape.coerce(shape)
        return cls._wrap(target, np.full(target.volume, value, dtype=np.float32))

    @classmethod
    def from_numpy(cls, array: Any) -> "Tensor":
        """
        Create a tensor from a 3-D array laid out as ``(depth, height, width)``.

        Parameters
        ----------
        array : array-like
            Three-dimensional numeric array. It is copied.

        Raises
        ------
        InvalidArgumentError
            If `array` is not three-dimensional.
        """
        arr = np.asarray(array, dtype=np.float32)
        if arr.ndim != 3:
            violate(
                InvalidArgumentError(
                    f"from_numpy expects a 3-D array, got shape {arr.shape}"
                )
            )
        return cls._wrap(Shape(*arr.shape), arr.reshape(-1).copy())

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Shape:
        return self._shape

    def as_flat_sequence(self) -> np.ndarray:
        """
        Return a read-only view of the backing values in storage order.

        Returns
        -------
        np.ndarray
            1-D float32 view of length ``shape.volume``. Writing to it raises
            ``ValueError``; it reflects later `set` calls on this tensor.
        """
        view = self._values.view()
        view.flags.writeable = False
        return view

    def positions(self) -> Iterator[Position]:
        return self._shape.positions()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    @staticmethod
    def _position_from(coords: Tuple[Any, ...]) -> Position:
        if len(coords) == 1:
            return Position.coerce(coords[0])
        if len(coords) == 3:
            return Position(*coords)
        raise TypeError(
            f"Expected a Position or three coordinates (z, y, x), got {len(coords)} arguments"
        )

    def get(self, *coords: Any) -> float:
        """
        Read one element.

        Parameters
        ----------
        *coords
            Either a single `Position` (or ``(z, y, x)`` tuple) or three ints
            ``z, y, x``.

        Returns
        -------
        float
            The stored value.

        Raises
        ------
        PositionOutOfBoundsError
            If the position lies outside the shape (bounds checking enabled).
        """
        position = self._position_from(coords)
        check_in_bounds(position, self._shape)
        return float(self._values[linear_index(self._shape, position)])

    def set(self, *args: Any) -> None:
        """
        Write one element in place.

        Accepts ``set(position, value)`` or ``set(z, y, x, value)``. The value
        is stored as float32.

        Raises
        ------
        PositionOutOfBoundsError
            If the position lies outside the shape (bounds checking enabled).
        """
        if len(args) < 2:
            raise TypeError("set() expects a position and a value")
        *coords, value = args
        position = self._position_from(tuple(coords))
        check_in_bounds(position, self._shape)
        self._values[linear_index(self._shape, position)] = value

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Tensor(shape={self._shape})"

    def __str__(self) -> str:
        return format_tensor(self)
