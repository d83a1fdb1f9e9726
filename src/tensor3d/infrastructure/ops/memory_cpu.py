"""
CPU storage operations: reshape and clone.

Both operations copy the flat buffer, so the result never aliases the source
tensor and a later `set` on one cannot be observed through the other.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

from ...domain._errors import InvalidArgumentError
from ...domain._shape import Shape
from ...domain._tensor import ITensor
from .._contracts import violate

logger = logging.getLogger(__name__)


def reshape(tensor: ITensor, new_shape: Union[Shape, Sequence[int]]) -> ITensor:
    """
    Reinterpret the flat values of `tensor` under `new_shape`.

    Parameters
    ----------
    tensor : ITensor
        Source tensor.
    new_shape : Shape or Sequence[int]
        Target shape; must have the same volume as ``tensor.shape``.

    Returns
    -------
    ITensor
        New tensor whose flat sequence equals the source's flat sequence.

    Raises
    ------
    InvalidArgumentError
        If the volumes differ.
    """
    target = Shape.coerce(new_shape)
    if target.volume != tensor.shape.volume:
        violate(
            InvalidArgumentError(
                f"Invalid reshape from {tensor.shape} (volume {tensor.shape.volume}) "
                f"to {target} (volume {target.volume})"
            )
        )
    logger.debug("reshape %s -> %s", tensor.shape, target)
    return type(tensor)._wrap(target, tensor.as_flat_sequence().copy())


def clone(tensor: ITensor) -> ITensor:
    return type(tensor)._wrap(tensor.shape, tensor.as_flat_sequence().copy())
