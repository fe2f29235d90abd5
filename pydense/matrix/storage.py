"""
Dense matrix storage.

A matrix is a list of row views into one contiguous float64 buffer of
length rows*cols, row i occupying buffer[i*cols:(i+1)*cols]. Row-wise
traversal therefore walks memory linearly, and whole-row arithmetic
(as used by Gauss-Jordan elimination) operates on adjacent elements.

Nothing here checks shapes except the conversion helpers from_array,
which accept arbitrary user input.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.types import Matrix
from pydense.core.validation import check_array, check_2d


def new_dense_matrix(
    rows: int,
    cols: int,
    data: ArrayLike | None = None,
) -> Matrix:
    """
    Create a (rows x cols) matrix backed by contiguous data.

    If data is None the backing buffer is zero-filled. A float64 ndarray
    that flattens without a copy (1D, or C-contiguous of any rank) is
    adopted as the backing buffer directly, so the matrix aliases the
    caller's memory. Any other ndarray (a transposed or Fortran-ordered
    view, another dtype) and any other array-like are copied into a new
    float64 buffer in row-major order. A strided 1D array is adopted as
    is, giving strided rows that is_contiguous reports as such.

    data must hold exactly rows*cols values. This is not checked: a short
    buffer produces short (or empty) trailing rows, and the first access
    past their end raises IndexError.

    Args:
        rows: Number of rows
        cols: Number of columns (row length)
        data: Optional flat row-major values

    Returns:
        List of rows, each a view into the backing buffer
    """
    if data is None:
        buffer = np.zeros(rows * cols, dtype=np.float64)
    else:
        buffer = np.asarray(data, dtype=np.float64).reshape(-1)
    return [buffer[i * cols:(i + 1) * cols] for i in range(rows)]


def eye(n: int) -> Matrix:
    """Identity matrix of size n."""
    out = new_dense_matrix(n, n)
    for i in range(n):
        out[i][i] = 1.0
    return out


def shape(A: Matrix) -> tuple[int, int]:
    """
    Number of rows and columns of A.

    Columns are read from the first row, so a matrix with no rows raises
    IndexError.
    """
    return len(A), len(A[0])


def mat_copy(A: Matrix) -> Matrix:
    """Copy of A with an independent backing buffer."""
    m, n = shape(A)
    out = new_dense_matrix(m, n)
    mat_copy_to(A, out)
    return out


def mat_copy_to(A: Matrix, B: Matrix) -> Matrix:
    """
    Copy every element of A into pre-sized B.

    B must have the shape of A. Fewer rows in B raise IndexError, shorter
    rows raise ValueError, a larger B is only partially overwritten.

    Returns:
        B
    """
    m, n = shape(A)
    for i in range(m):
        B[i][:n] = A[i]
    return B


def from_array(X: ArrayLike) -> Matrix:
    """
    Build a dense matrix from any 2D array-like.

    Unlike new_dense_matrix this validates its input and always copies,
    so later writes to X never show through.

    Args:
        X: 2D numeric array-like (nested lists, ndarray)

    Returns:
        New matrix holding the values of X

    Raises:
        ValidationError: If X is not numeric
        DimensionError: If X is not 2D
    """
    arr = check_array(X, "X")
    check_2d(arr, "X")
    m, n = arr.shape
    return new_dense_matrix(m, n, arr.ravel().copy())


def to_array(A: Matrix) -> NDArray[np.float64]:
    """
    Gather A into a new (rows, cols) ndarray.

    Rows are taken in their current logical order, so the result reflects
    alias-mode swaps even though the backing buffer was not reordered.
    """
    m, n = shape(A)
    out = np.empty((m, n), dtype=np.float64)
    for i in range(m):
        out[i] = A[i]
    return out


def _address(row: NDArray[np.float64]) -> int:
    return row.__array_interface__['data'][0]


def is_contiguous(A: Matrix) -> bool:
    """
    Check that the row-major layout invariant still holds.

    True when every row i starts exactly i*cols elements after row 0, i.e.
    the rows tile one buffer in order. Fresh matrices satisfy this; an
    alias-mode swap_rows breaks it.
    """
    m, n = shape(A)
    first = A[0]
    if not first.flags.c_contiguous:
        return False
    base = _address(first)
    for i in range(1, m):
        row = A[i]
        if len(row) != n or not row.flags.c_contiguous:
            return False
        if _address(row) != base + i * n * row.itemsize:
            return False
    return True
