"""
Matrix-matrix and matrix-vector products.

Both kernels overwrite their output completely, so a reused out buffer
never needs zeroing by the caller.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pydense.core.types import Matrix, Vector
from pydense.matrix.storage import new_dense_matrix


def mat_mul(A: Matrix, B: Matrix, out: Matrix | None = None) -> Matrix:
    """
    Matrix product C = AB for (n x m) A and (m x p) B.

    Parameters
    ----------
    A : Matrix
        Left operand, (n x m).
    B : Matrix
        Right operand, (m x p).
    out : Matrix or None
        Pre-sized (n x p) result buffer, or None to allocate one. Its
        prior contents are ignored. It must not share rows with A or B.
        One length-p temporary row is allocated per call, even when out
        is supplied.

    Returns
    -------
    Matrix
        out, holding C[i][j] = sum_k A[i][k] * B[k][j].
    """
    n = len(A)
    m = len(A[0])
    p = len(B[0])
    if out is None:
        out = new_dense_matrix(n, p)
    tmp = np.empty(p, dtype=np.float64)
    for i in range(n):
        a_row = A[i]
        c_row = out[i][:p]
        c_row[:] = 0.0
        # C[i] is a linear combination of the rows of B
        for k in range(m):
            np.multiply(B[k][:p], a_row[k], out=tmp)
            c_row += tmp
    return out


def mat_vec_prod(A: Matrix, x: ArrayLike, out: Vector | None = None) -> Vector:
    """
    Matrix-vector product Ax for (m x n) A and length-n x.

    Parameters
    ----------
    A : Matrix
        (m x n) matrix.
    x : array-like
        Vector of length n.
    out : Vector or None
        Pre-sized length-m result, or None to allocate one. Prior contents
        are ignored.

    Returns
    -------
    Vector
        out, holding out[i] = sum_j A[i][j] * x[j].
    """
    n = len(x)
    m = len(A)
    if out is None:
        out = np.zeros(m, dtype=np.float64)
    for i in range(m):
        out[i] = np.dot(A[i][:n], x[:n])
    return out
