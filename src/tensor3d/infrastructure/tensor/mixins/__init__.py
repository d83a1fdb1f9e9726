"""
Tensor mixins grouped by concern.

Each mixin contributes one slice of the public Tensor API and delegates the
numerical work to the CPU kernels in ``infrastructure.ops``.
"""

from .arithmetic import TensorMixinArithmetic
from .memory import TensorMixinMemory
from .reduction import TensorMixinReduction
from .unary import TensorMixinUnary

__all__ = [
    TensorMixinArithmetic.__name__,
    TensorMixinMemory.__name__,
    TensorMixinReduction.__name__,
    TensorMixinUnary.__name__,
]
