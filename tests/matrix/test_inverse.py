"""
Tests for Gauss-Jordan inversion.

Validates:
    - Known inverses and A @ inv(A) == I on well-conditioned input
    - Agreement with scipy.linalg.inv
    - The out / scratch buffer contract
    - The column-0 row exchange (alias-mode swaps on scratch)
    - Silent inf/nan propagation for singular input and zero pivots
"""

import warnings

import numpy as np
import pytest
from scipy import linalg

from pydense import (
    eye,
    mat_invert_square,
    mat_mul,
    matrix_close,
    matrix_equal,
    new_dense_matrix,
    to_array,
)
from pydense.core.tolerances import INVERSE_FP64, select_tolerance


def _as_matrix(X):
    n, p = X.shape
    return new_dense_matrix(n, p, X.ravel().copy())


# ═══════════════════════════════════════════════════════════════════════
# Correctness
# ═══════════════════════════════════════════════════════════════════════


class TestKnownInverses:

    def test_2x2(self):
        A = new_dense_matrix(2, 2, [
            1, 2,
            3, 4,
        ])
        expected = new_dense_matrix(2, 2, [
            -2, 1,
            1.5, -0.5,
        ])
        assert matrix_close(mat_invert_square(A), expected, INVERSE_FP64)

    def test_1x1(self):
        A = new_dense_matrix(1, 1, [4.0])
        assert mat_invert_square(A)[0][0] == 0.25

    def test_identity(self):
        assert matrix_equal(mat_invert_square(eye(4)), eye(4))

    def test_diagonal(self):
        A = new_dense_matrix(3, 3, [
            4, 0, 0,
            0, 2, 0,
            0, 0, 8,
        ])
        expected = new_dense_matrix(3, 3, [
            0.25, 0, 0,
            0, 0.5, 0,
            0, 0, 0.125,
        ])
        assert matrix_equal(mat_invert_square(A), expected)

    def test_3x3_with_row_exchange(self):
        X = np.array([
            [1.0, 2.0, 0.0],
            [3.0, 1.0, 1.0],
            [0.0, 1.0, 2.0],
        ])
        inv = mat_invert_square(_as_matrix(X))
        reference = _as_matrix(linalg.inv(X))
        assert matrix_close(inv, reference, INVERSE_FP64)

    def test_input_not_modified(self):
        A = new_dense_matrix(2, 2, [1, 2, 3, 4])
        rows = list(A)
        mat_invert_square(A)
        assert all(a is b for a, b in zip(rows, A))
        np.testing.assert_array_equal(to_array(A), [[1, 2], [3, 4]])


class TestProductWithInverse:
    """A @ inv(A) is the identity within 1e-9 on well-conditioned input."""

    def test_left_and_right_identity(self, well_conditioned):
        for X in well_conditioned:
            n = X.shape[0]
            A = _as_matrix(X)
            inv = mat_invert_square(A)
            assert matrix_close(mat_mul(A, inv), eye(n), INVERSE_FP64)
            assert matrix_close(mat_mul(inv, A), eye(n), INVERSE_FP64)

    def test_matches_scipy(self, well_conditioned):
        tier = select_tolerance('mat_invert_square')
        for X in well_conditioned:
            inv = mat_invert_square(_as_matrix(X))
            assert matrix_close(inv, _as_matrix(linalg.inv(X)), tier)


# ═══════════════════════════════════════════════════════════════════════
# Buffer contract
# ═══════════════════════════════════════════════════════════════════════


class TestBuffers:

    def test_out_returned(self):
        A = new_dense_matrix(2, 2, [1, 2, 3, 4])
        out = new_dense_matrix(2, 2)
        assert mat_invert_square(A, out=out) is out
        assert out[0][0] == pytest.approx(-2.0, abs=1e-12)

    def test_out_rows_written_in_place(self):
        A = new_dense_matrix(2, 2, [1, 2, 3, 4])
        out = new_dense_matrix(2, 2)
        rows = list(out)
        mat_invert_square(A, out=out)
        assert all(a is b for a, b in zip(rows, out))

    def test_scratch_rows_are_reused(self):
        A = new_dense_matrix(3, 3, [1, 2, 0, 3, 1, 1, 0, 1, 2])
        scratch = new_dense_matrix(3, 6)
        before = list(scratch)
        mat_invert_square(A, scratch=scratch)
        assert len(scratch) == 3
        assert all(any(row is old for old in before) for row in scratch)

    def test_scratch_prior_contents_ignored(self):
        A = new_dense_matrix(2, 2, [1, 2, 3, 4])
        scratch = new_dense_matrix(2, 4, np.full(8, 99.0))
        inv = mat_invert_square(A, scratch=scratch)
        assert matrix_close(inv, mat_invert_square(A), INVERSE_FP64)

    def test_scratch_holds_reduced_augmentation(self):
        A = new_dense_matrix(2, 2, [1, 2, 3, 4])
        scratch = new_dense_matrix(2, 4)
        inv = mat_invert_square(A, scratch=scratch)
        for i in range(2):
            np.testing.assert_allclose(scratch[i][:2], eye(2)[i], atol=1e-12)
            np.testing.assert_allclose(scratch[i][2:], inv[i], atol=0.0)

    def test_scratch_reusable(self, well_conditioned):
        X = well_conditioned[2]
        n = X.shape[0]
        A = _as_matrix(X)
        scratch = new_dense_matrix(n, 2 * n)
        out = new_dense_matrix(n, n)
        first = to_array(mat_invert_square(A, scratch=scratch, out=out))
        mat_invert_square(A, scratch=scratch, out=out)
        np.testing.assert_array_equal(to_array(out), first)


# ═══════════════════════════════════════════════════════════════════════
# Row exchange
# ═══════════════════════════════════════════════════════════════════════


class TestRowExchange:
    """Single bottom-up pass on column 0, performed by relabelling rows."""

    def test_scratch_rows_relabelled(self):
        A = new_dense_matrix(2, 2, [1, 2, 3, 4])
        scratch = new_dense_matrix(2, 4)
        before = list(scratch)
        mat_invert_square(A, scratch=scratch)
        assert scratch[0] is before[1]
        assert scratch[1] is before[0]

    def test_no_exchange_when_column_0_descends(self):
        A = new_dense_matrix(2, 2, [4, 3, 2, 1])
        scratch = new_dense_matrix(2, 4)
        before = list(scratch)
        mat_invert_square(A, scratch=scratch)
        assert scratch[0] is before[0]
        assert scratch[1] is before[1]

    def test_largest_column_0_bubbles_to_top(self):
        A = new_dense_matrix(3, 3, [
            1, 0, 0,
            2, 1, 0,
            5, 0, 1,
        ])
        scratch = new_dense_matrix(3, 6)
        before = list(scratch)
        mat_invert_square(A, scratch=scratch)
        assert scratch[0] is before[2]

    def test_zero_pivot_on_nonsingular_input(self):
        """
        Column-0 exchange is not partial pivoting: this non-singular matrix
        (det = 30) reaches a zero pivot and yields non-finite values.
        """
        X = np.array([
            [2.0, 0.0, 0.0],
            [0.0, 3.0, 0.0],
            [4.0, 0.0, 5.0],
        ])
        assert np.linalg.det(X) == pytest.approx(30.0)
        inv = to_array(mat_invert_square(_as_matrix(X)))
        assert not np.all(np.isfinite(inv))


# ═══════════════════════════════════════════════════════════════════════
# Singular input
# ═══════════════════════════════════════════════════════════════════════


class TestSingular:

    def test_returns_non_finite(self):
        A = new_dense_matrix(2, 2, [1, 2, 2, 4])
        inv = to_array(mat_invert_square(A))
        assert not np.all(np.isfinite(inv))

    def test_zero_matrix(self):
        inv = to_array(mat_invert_square(new_dense_matrix(3, 3)))
        assert np.all(np.isnan(inv))

    def test_no_warning_emitted(self):
        A = new_dense_matrix(2, 2, [1, 2, 2, 4])
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            mat_invert_square(A)
