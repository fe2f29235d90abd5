"""
Matrix norms.
"""

from __future__ import annotations

import numpy as np

from pydense.core.types import Matrix
from pydense.matrix.storage import shape


def mat_norm_l2(A: Matrix) -> float:
    """
    Squared Frobenius norm of A.

    Returns the sum of A[i][j]**2 over all elements, without the final
    square root. Callers that need ||A||_F take np.sqrt of the result.
    """
    m, n = shape(A)
    out = 0.0
    for i in range(m):
        row = A[i][:n]
        out += float(np.dot(row, row))
    return out
