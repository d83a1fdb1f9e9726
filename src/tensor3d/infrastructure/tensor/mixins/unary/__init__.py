"""
Unary mixin for the concrete Tensor.
"""

from ._base import TensorMixinUnary

__all__ = [
    TensorMixinUnary.__name__,
]
