"""
Memory mixin defining storage-level Tensor operations.

This module declares :class:`TensorMixinMemory`: reshaping, cloning and
exporting the backing values. None of these methods mutate the receiver, and
none of the returned objects alias its storage.
"""

from __future__ import annotations

from abc import ABC
from typing import Sequence, Union

import numpy as np

from .....domain._shape import Shape
from .....domain._tensor import ITensor
from ....ops import memory_cpu as mem


class TensorMixinMemory(ABC):
    """
    Mixin providing reshape/clone and NumPy export.
    """

    def reshape(self: ITensor, new_shape: Union[Shape, Sequence[int]]) -> ITensor:
        """
        Return a tensor with the same flat values under `new_shape`.

        Parameters
        ----------
        new_shape : Shape or Sequence[int]
            Target shape. Its volume must equal this tensor's volume.

        Raises
        ------
        InvalidArgumentError
            If the volumes differ.
        """
        return mem.reshape(self, new_shape)

    def clone(self: ITensor) -> ITensor:
        return mem.clone(self)

    def to_numpy(self: ITensor) -> np.ndarray:
        """
        Return a writable copy of the values shaped ``(depth, height, width)``.

        Returns
        -------
        np.ndarray
            float32 array; modifying it does not affect the tensor.
        """
        return self.as_flat_sequence().reshape(self.shape.as_tuple()).copy()
