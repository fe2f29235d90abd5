"""
Square matrix inversion by Gauss-Jordan elimination.

The routine augments A with the identity, [A | I], and reduces it with
row operations to [I | inv(A)]:

1. Augment: scratch is rewritten completely, A on the left, I on the right
2. Row exchange: a single bottom-up pass over column 0 only, swapping
   adjacent rows (alias mode) whenever the upper value is smaller. It is
   not re-evaluated per pivot, so this is not partial pivoting
3. Eliminate: for each pivot row i, subtract (row_j[i] / row_i[i]) * row_i
   from every other row j, across all 2n columns
4. Normalize: divide each row by its diagonal element
5. Extract: the right-hand n x n block is inv(A)

Singularity is not detected. A zero pivot yields inf/nan which propagate
through the remaining rows and into the result, without a warning. The
column-0 exchange can also meet a zero pivot on some non-singular inputs.
"""

from __future__ import annotations

import numpy as np

from pydense.core.types import Matrix
from pydense.matrix.permutation import swap_rows
from pydense.matrix.storage import new_dense_matrix


def _augment(A: Matrix, scratch: Matrix, n: int) -> None:
    for i in range(n):
        row = scratch[i]
        row[:n] = A[i][:n]
        row[n:] = 0.0
        row[n + i] = 1.0


def _exchange_rows(scratch: Matrix, n: int) -> None:
    for i in range(n - 1, 0, -1):
        if scratch[i - 1][0] < scratch[i][0]:
            swap_rows(scratch, i, i - 1, mode='alias')


def _eliminate(scratch: Matrix, n: int, tmp: np.ndarray) -> None:
    for i in range(n):
        pivot_row = scratch[i]
        for j in range(n):
            if i != j:
                row = scratch[j]
                factor = row[i] / pivot_row[i]
                np.multiply(pivot_row, factor, out=tmp)
                row -= tmp


def _normalize(scratch: Matrix, n: int) -> None:
    for i in range(n):
        row = scratch[i]
        row /= row[i]


def mat_invert_square(
    A: Matrix,
    scratch: Matrix | None = None,
    out: Matrix | None = None,
) -> Matrix:
    """
    Invert square matrix A.

    Parameters
    ----------
    A : Matrix
        (n x n) matrix to invert. Not modified.
    scratch : Matrix or None
        (n x 2n) working matrix, or None to allocate one. Its prior contents
        are ignored. On return its rows have been reduced to [I | inv(A)]
        and may have been reordered by relabelling (alias-mode swaps), so it
        is generally no longer contiguous; it can still be reused as scratch.
        One length-2n temporary row is allocated per call for the row
        updates, even when scratch is supplied.
    out : Matrix or None
        (n x n) result buffer, or None to allocate one.

    Returns
    -------
    Matrix
        out, holding inv(A). Contains inf/nan when a zero pivot was met.
    """
    n = len(A)
    n2 = 2 * n
    if out is None:
        out = new_dense_matrix(n, n)
    if scratch is None:
        scratch = new_dense_matrix(n, n2)

    _augment(A, scratch, n)
    _exchange_rows(scratch, n)

    with np.errstate(all='ignore'):
        _eliminate(scratch, n, np.empty(n2, dtype=np.float64))
        _normalize(scratch, n)

    for i in range(n):
        out[i][:n] = scratch[i][n:n2]
    return out
