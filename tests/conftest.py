"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydense import new_dense_matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def matrix_2x3():
    """[[1, 2, 3], [4, 5, 6]] backed by its own buffer."""
    return new_dense_matrix(2, 3, np.array([
        1.0, 2.0, 3.0,
        4.0, 5.0, 6.0,
    ]))


@pytest.fixture
def well_conditioned(rng):
    """
    Diagonally dominant matrices whose first column is non-increasing.

    The column-0 row exchange leaves these untouched, and elimination
    without pivoting is stable on diagonally dominant input.
    """
    matrices = []
    for n in (1, 2, 3, 4, 6):
        X = rng.uniform(-1.0, 1.0, size=(n, n)) + 2.0 * n * np.eye(n)
        X[1:, 0] = 0.5 - 0.1 * np.arange(1, n)
        matrices.append(X)
    return matrices
