"""
pydense: small dense linear algebra on plain numpy buffers.

Operates only on 1D vectors and 2D matrices of doubles, for real-time work
on small data (state-space control, Kalman filtering) where a full LAPACK
stack is unavailable or uneconomic. No container types are defined: a
vector is a float64 ndarray, a matrix is a list of row views into one
contiguous float64 buffer.

Every kernel that produces a result takes an optional out buffer (and
inversion a scratch buffer). None means "allocate and return"; a pre-sized
buffer means "fill this and return it", which lets a hot loop run without
allocating. Shapes are never checked by the kernels.

Submodules:
    matrix: Storage, elementwise, product, permutation, norm, inversion
    vector: Vector add/sub/argmax
    core: Types, exceptions, validation, tolerances, comparison
"""

__version__ = "0.1.0"

from pydense.core.comparison import vector_equal, matrix_equal, matrix_close
from pydense.core.exceptions import PyDenseError, ValidationError, DimensionError
from pydense.matrix import (
    new_dense_matrix,
    eye,
    shape,
    mat_copy,
    mat_copy_to,
    from_array,
    to_array,
    is_contiguous,
    mat_add,
    mat_sub,
    mat_transpose,
    mat_mul,
    mat_vec_prod,
    swap_rows,
    swap_cols,
    mat_norm_l2,
    mat_invert_square,
)
from pydense.vector import vector_add, vector_sub, vector_argmax

__all__ = [
    "__version__",
    # Matrix
    "new_dense_matrix",
    "eye",
    "shape",
    "mat_copy",
    "mat_copy_to",
    "from_array",
    "to_array",
    "is_contiguous",
    "mat_add",
    "mat_sub",
    "mat_transpose",
    "mat_mul",
    "mat_vec_prod",
    "swap_rows",
    "swap_cols",
    "mat_norm_l2",
    "mat_invert_square",
    # Vector
    "vector_add",
    "vector_sub",
    "vector_argmax",
    # Comparison
    "vector_equal",
    "matrix_equal",
    "matrix_close",
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "DimensionError",
]
