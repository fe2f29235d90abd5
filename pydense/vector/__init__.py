"""
Vector kernels.

Public API:
    vector_add(a, b)   - Elementwise sum
    vector_sub(a, b)   - Elementwise difference
    vector_argmax(a)   - Index of the first maximum
"""

from pydense.vector.kernels import vector_add, vector_sub, vector_argmax

__all__ = [
    "vector_add",
    "vector_sub",
    "vector_argmax",
]
