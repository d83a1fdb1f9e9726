from ._format import format_tensor
from ._tensor import Tensor

__all__ = [
    Tensor.__name__,
    format_tensor.__name__,
]
