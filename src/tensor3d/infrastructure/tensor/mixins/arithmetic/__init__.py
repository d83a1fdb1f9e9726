"""
Arithmetic mixin for the concrete Tensor.
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
