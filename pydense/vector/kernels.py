"""
Vector kernels.

Vectors are 1D float64 ndarrays. Inputs may be any indexable sequence of
numbers; outputs follow the same out convention as the matrix kernels.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from pydense.core.types import Vector


def vector_add(a: ArrayLike, b: ArrayLike, out: Vector | None = None) -> Vector:
    """Elementwise sum a + b, length of a."""
    n = len(a)
    if out is None:
        out = np.zeros(n, dtype=np.float64)
    np.add(a[:n], b[:n], out=out[:n])
    return out


def vector_sub(a: ArrayLike, b: ArrayLike, out: Vector | None = None) -> Vector:
    """Elementwise difference a - b, length of a."""
    n = len(a)
    if out is None:
        out = np.zeros(n, dtype=np.float64)
    np.subtract(a[:n], b[:n], out=out[:n])
    return out


def vector_argmax(a: ArrayLike) -> int:
    """
    Index of the largest element of a.

    Ties go to the first occurrence. NaN never wins a comparison, so it is
    skipped (unlike np.argmax); a vector with no value above -inf returns 0,
    as does an empty one.
    """
    best = -math.inf
    imax = 0
    for i in range(len(a)):
        if a[i] > best:
            best = a[i]
            imax = i
    return imax
