"""
Dense matrix kernels.

Matrices are lists of row views into one contiguous float64 buffer.
Kernels that produce a result accept an optional out (and, for inversion,
scratch) argument: None allocates, a pre-sized buffer is filled in place.

Public API:
    new_dense_matrix(r, c)  - Zero or caller-backed (r x c) matrix
    eye(n)                  - Identity
    shape(A)                - (rows, cols)
    mat_copy / mat_copy_to  - Deep copy / copy into existing storage
    from_array / to_array   - Validated conversion from / to ndarray
    is_contiguous(A)        - Row-major layout still intact
    mat_add / mat_sub       - Elementwise sum / difference
    mat_transpose(A)        - Transpose
    mat_mul(A, B)           - Matrix product
    mat_vec_prod(A, x)      - Matrix-vector product
    swap_rows / swap_cols   - In-place permutation
    mat_norm_l2(A)          - Squared Frobenius norm
    mat_invert_square(A)    - Gauss-Jordan inverse
"""

from pydense.matrix.storage import (
    new_dense_matrix,
    eye,
    shape,
    mat_copy,
    mat_copy_to,
    from_array,
    to_array,
    is_contiguous,
)
from pydense.matrix.elementwise import mat_add, mat_sub, mat_transpose
from pydense.matrix.products import mat_mul, mat_vec_prod
from pydense.matrix.permutation import swap_rows, swap_cols
from pydense.matrix.norms import mat_norm_l2
from pydense.matrix.inverse import mat_invert_square

__all__ = [
    # Storage
    "new_dense_matrix",
    "eye",
    "shape",
    "mat_copy",
    "mat_copy_to",
    "from_array",
    "to_array",
    "is_contiguous",
    # Elementwise
    "mat_add",
    "mat_sub",
    "mat_transpose",
    # Products
    "mat_mul",
    "mat_vec_prod",
    # Permutation
    "swap_rows",
    "swap_cols",
    # Reductions
    "mat_norm_l2",
    # Inversion
    "mat_invert_square",
]
