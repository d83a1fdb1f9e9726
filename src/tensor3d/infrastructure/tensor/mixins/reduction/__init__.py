"""
Reduction mixin for the concrete Tensor.
"""

from ._base import TensorMixinReduction

__all__ = [
    TensorMixinReduction.__name__,
]
