"""
Equality checks for vectors and matrices.

Iteration follows the shape of the first argument, the same way the
kernels do, so comparing against a smaller second operand raises
IndexError instead of returning False.
"""

from __future__ import annotations

import math

from numpy.typing import ArrayLike

from pydense.core.tolerances import ToleranceTier
from pydense.core.types import Matrix
from pydense.matrix.storage import shape


def _almost_equal(a: float, b: float, tol: float) -> bool:
    return math.fabs(a - b) <= tol


def vector_equal(a: ArrayLike, b: ArrayLike, tol: float = 0.0) -> bool:
    """
    Elementwise |a[i] - b[i]| <= tol over the length of a.

    NaN never compares equal, so a vector containing NaN is not equal
    to anything, itself included.
    """
    for i in range(len(a)):
        if not _almost_equal(a[i], b[i], tol):
            return False
    return True


def matrix_equal(A: Matrix, B: Matrix, tol: float = 0.0) -> bool:
    """Elementwise |A[i][j] - B[i][j]| <= tol over the shape of A."""
    m, n = shape(A)
    for i in range(m):
        for j in range(n):
            if not _almost_equal(A[i][j], B[i][j], tol):
                return False
    return True


def matrix_close(A: Matrix, B: Matrix, tier: ToleranceTier) -> bool:
    """
    Compare two matrices with a tolerance tier.

    Uses the asymmetric numpy.isclose rule |a - b| <= atol + rtol * |b|,
    B being the reference.

    Args:
        A: Matrix under test
        B: Reference matrix, at least as large as A
        tier: Tolerance tier supplying rtol and atol

    Returns:
        True if every element of A is within tolerance of B
    """
    m, n = shape(A)
    for i in range(m):
        for j in range(n):
            if not _almost_equal(A[i][j], B[i][j], tier.atol + tier.rtol * math.fabs(B[i][j])):
                return False
    return True
