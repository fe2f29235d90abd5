"""
Elementwise matrix kernels and transpose.

Every kernel takes an optional out matrix: None means allocate and
return, anything else is written in place (it must already have the
result's shape) and returned. Operands are not checked; numpy raises
on incompatible row lengths and broadcasts length-1 rows silently.
"""

from __future__ import annotations

import numpy as np

from pydense.core.types import Matrix
from pydense.matrix.storage import new_dense_matrix, shape


def mat_add(A: Matrix, B: Matrix, out: Matrix | None = None) -> Matrix:
    """Elementwise sum A + B, shape of A."""
    m, n = shape(A)
    if out is None:
        out = new_dense_matrix(m, n)
    for i in range(m):
        np.add(A[i], B[i], out=out[i])
    return out


def mat_sub(A: Matrix, B: Matrix, out: Matrix | None = None) -> Matrix:
    """Elementwise difference A - B, shape of A."""
    m, n = shape(A)
    if out is None:
        out = new_dense_matrix(m, n)
    for i in range(m):
        np.subtract(A[i], B[i], out=out[i])
    return out


def mat_transpose(A: Matrix, out: Matrix | None = None) -> Matrix:
    """
    Transpose (m x n) matrix A into (n x m) matrix out.

    out[j][i] = A[i][j]. out must not share storage with A.
    """
    m, n = shape(A)
    if out is None:
        out = new_dense_matrix(n, m)
    for j in range(n):
        # Column j of A, gathered across the row views
        out[j][:m] = [A[i][j] for i in range(m)]
    return out
