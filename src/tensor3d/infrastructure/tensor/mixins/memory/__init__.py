"""
Memory mixin for the concrete Tensor.
"""

from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
