"""
tensor3d: a dense three-dimensional float32 tensor primitive.

Tensors are addressed by ``(z, y, x)`` positions within a
``(depth, height, width)`` shape and support elementwise transforms, binary
arithmetic, reshape, and whole-tensor reductions. Every bulk operation
returns a new tensor; `Tensor.set` is the only mutating operation.

The operations are available both as `Tensor` methods/operators and as free
functions re-exported here.
"""

import logging

from .domain import (
    EmptyInputError,
    InvalidArgumentError,
    ITensor,
    Position,
    PositionOutOfBoundsError,
    Shape,
    ShapeMismatchError,
    Tensor3DError,
)
from .infrastructure._config import TensorConfig, configure, get_config, set_config
from .infrastructure._indexing import linear_index, position_of
from .infrastructure.ops.elementwise_cpu import (
    abs_diff,
    abs_values,
    add,
    divide,
    scale,
    subtract,
    transform,
)
from .infrastructure.ops.memory_cpu import clone, reshape
from .infrastructure.ops.reduce_cpu import (
    max_position,
    max_value,
    min_max_positions,
    min_max_values,
    min_position,
    min_value,
    sum_all,
)
from .infrastructure.tensor import Tensor, format_tensor

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "EmptyInputError",
    "InvalidArgumentError",
    "ITensor",
    "Position",
    "PositionOutOfBoundsError",
    "Shape",
    "ShapeMismatchError",
    "Tensor3DError",
    "Tensor",
    "TensorConfig",
    "configure",
    "get_config",
    "set_config",
    "linear_index",
    "position_of",
    "transform",
    "add",
    "subtract",
    "scale",
    "divide",
    "abs_values",
    "abs_diff",
    "reshape",
    "clone",
    "min_max_positions",
    "max_position",
    "min_position",
    "min_max_values",
    "max_value",
    "min_value",
    "sum_all",
    "format_tensor",
]
