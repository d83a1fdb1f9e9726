"""
CPU implementations of elementwise tensor algebra (NumPy backend).

This module provides the elementwise operations every consumer builds on:

- `transform`: apply an arbitrary ``float -> float`` callable to each element
- `add` / `subtract`: elementwise combination of two same-shape tensors
- `scale` / `divide`: multiplication by a scalar (or its reciprocal)
- `abs_values` / `abs_diff`: absolute value and absolute difference

Design notes
------------
- Every function returns a new tensor; inputs are never modified.
- Result tensors are constructed via ``type(tensor)._wrap(...)`` so this
  module does not import the concrete `Tensor` class. `_wrap` takes ownership
  of the freshly computed buffer without copying it again.
- Storage is float32; scalars are rounded to float32 before use.
- Division by zero is not an error: it produces IEEE infinities/NaN.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

import numpy as np

from ...domain._tensor import ITensor
from .._contracts import check_same_shape

logger = logging.getLogger(__name__)

Number = Union[int, float]
"""Scalar types accepted by scale/divide."""


def transform(f: Callable[[float], float], tensor: ITensor) -> ITensor:
    """
    Apply a unary callable to every element.

    Parameters
    ----------
    f : Callable[[float], float]
        Pointwise function. Called once per element with a Python float, in
        storage order; it must not depend on other elements.
    tensor : ITensor
        Input tensor.

    Returns
    -------
    ITensor
        Tensor of the same shape where each element is ``f(input element)``.
    """
    flat = tensor.as_flat_sequence()
    out = np.fromiter(
        (f(float(v)) for v in flat), dtype=np.float32, count=int(flat.size)
    )
    return type(tensor)._wrap(tensor.shape, out)


def add(a: ITensor, b: ITensor) -> ITensor:
    """
    Elementwise sum of two tensors.

    Raises
    ------
    ShapeMismatchError
        If ``a.shape != b.shape``.
    """
    check_same_shape("add", a.shape, b.shape)
    with np.errstate(over="ignore", invalid="ignore"):
        out = np.add(a.as_flat_sequence(), b.as_flat_sequence(), dtype=np.float32)
    return type(a)._wrap(a.shape, out)


def scale(tensor: ITensor, factor: Number) -> ITensor:
    """
    Multiply every element by `factor`.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        k = np.float32(factor)
        out = np.multiply(tensor.as_flat_sequence(), k, dtype=np.float32)
    return type(tensor)._wrap(tensor.shape, out)


def subtract(a: ITensor, b: ITensor) -> ITensor:
    """
    Elementwise difference, defined as ``add(a, scale(b, -1))``.

    Raises
    ------
    ShapeMismatchError
        If ``a.shape != b.shape``.
    """
    check_same_shape("subtract", a.shape, b.shape)
    return add(a, scale(b, -1))


def divide(tensor: ITensor, divisor: Number) -> ITensor:
    """
    Divide every element by `divisor`, defined as ``scale(tensor, 1 / divisor)``.

    Notes
    -----
    A zero divisor yields ``inf`` (or ``nan`` for zero elements) following
    IEEE semantics. No exception is raised.
    """
    with np.errstate(divide="ignore", over="ignore"):
        reciprocal = np.float32(1.0) / np.float32(divisor)
    if divisor == 0:
        logger.debug("divide by zero on tensor of shape %s", tensor.shape)
    return scale(tensor, reciprocal)


def abs_values(tensor: ITensor) -> ITensor:
    """
    Elementwise absolute value.
    """
    out = np.abs(tensor.as_flat_sequence()).astype(np.float32, copy=False)
    return type(tensor)._wrap(tensor.shape, out)


def abs_diff(a: ITensor, b: ITensor) -> ITensor:
    """
    Elementwise absolute difference, ``abs_values(subtract(a, b))``.
    """
    check_same_shape("abs_diff", a.shape, b.shape)
    return abs_values(subtract(a, b))
