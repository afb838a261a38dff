"""
Tests for the closed-form eigen solver.

Eigenvalues are checked against numpy where all of them are real, and the
eigenvectors by A v = λ v plus the unit-length / sign convention.
"""

import math

import numpy as np
import pytest

from vectorlab.eigen import (
    EigenPair,
    characteristic_coefficients,
    eigen_decomposition,
    eigenvalues,
    is_defective,
    null_space,
)
from vectorlab.errors import DimensionError
from vectorlab.matrix_algebra import Matrix


def assert_eigenpair(A, pair):
    A = np.asarray(A, dtype=float)
    v = np.array(pair.eigenvector)
    np.testing.assert_allclose(A @ v, pair.eigenvalue * v, atol=1e-8)
    assert np.linalg.norm(v) == pytest.approx(1.0)
    first = next(x for x in v if abs(x) > 1e-10)
    assert first > 0


class TestTwoByTwo:
    """Quadratic characteristic polynomial."""

    def test_diagonal(self):
        pairs = eigen_decomposition([[2, 0], [0, 3]])
        assert [p.eigenvalue for p in pairs] == pytest.approx([3.0, 2.0])
        assert pairs[0].eigenvector == pytest.approx((0.0, 1.0))
        assert pairs[1].eigenvector == pytest.approx((1.0, 0.0))

    def test_symmetric(self):
        pairs = eigen_decomposition([[2, 1], [1, 2]])
        s = 1 / math.sqrt(2)
        assert [p.eigenvalue for p in pairs] == pytest.approx([3.0, 1.0])
        assert pairs[0].eigenvector == pytest.approx((s, s))
        assert pairs[1].eigenvector == pytest.approx((s, -s))

    def test_rotation_has_no_real_eigenvalues(self):
        assert eigenvalues([[0, -1], [1, 0]]) == []
        assert eigen_decomposition([[0, -1], [1, 0]]) == []

    def test_shear_is_defective(self):
        A = [[1, 1], [0, 1]]
        pairs = eigen_decomposition(A)
        assert [p.eigenvalue for p in pairs] == pytest.approx([1.0, 1.0])
        # One eigenvector per returned eigenvalue, reused
        assert pairs[0].eigenvector == pytest.approx((1.0, 0.0))
        assert pairs[1].eigenvector == pytest.approx((1.0, 0.0))
        assert is_defective(A)

    def test_scalar_matrix_keeps_both_eigenvectors(self):
        pairs = eigen_decomposition([[2, 0], [0, 2]])
        assert [p.eigenvector for p in pairs] == [(1.0, 0.0), (0.0, 1.0)]
        assert not is_defective([[2, 0], [0, 2]])

    def test_general_matrix(self):
        A = [[4, 1], [2, 3]]
        pairs = eigen_decomposition(A)
        assert [p.eigenvalue for p in pairs] == pytest.approx([5.0, 2.0])
        for pair in pairs:
            assert_eigenpair(A, pair)


class TestThreeByThree:
    """Cubic characteristic polynomial."""

    def test_identity(self):
        pairs = eigen_decomposition(Matrix.identity("3x3"))
        assert [p.eigenvalue for p in pairs] == [1.0, 1.0, 1.0]
        assert [p.eigenvector for p in pairs] == [
            (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0),
        ]

    def test_distinct_diagonal(self):
        pairs = eigen_decomposition([[1, 0, 0], [0, 2, 0], [0, 0, 3]])
        assert [p.eigenvalue for p in pairs] == pytest.approx([3.0, 2.0, 1.0])
        assert pairs[0].eigenvector == pytest.approx((0.0, 0.0, 1.0))
        assert pairs[1].eigenvector == pytest.approx((0.0, 1.0, 0.0))
        assert pairs[2].eigenvector == pytest.approx((1.0, 0.0, 0.0))

    def test_repeated_diagonal(self):
        A = [[2, 0, 0], [0, 2, 0], [0, 0, 3]]
        values = eigenvalues(A)
        assert values == pytest.approx([3.0, 2.0, 2.0])
        assert values[1] == values[2]
        pairs = eigen_decomposition(A)
        assert pairs[1].eigenvector == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)
        assert pairs[2].eigenvector == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
        assert not is_defective(A)

    def test_random_symmetric_matches_numpy(self):
        rng = np.random.default_rng(3)
        for _ in range(25):
            B = rng.normal(size=(3, 3))
            A = B + B.T
            expected = sorted(np.linalg.eigvalsh(A), reverse=True)
            assert eigenvalues(A) == pytest.approx(expected, abs=1e-8)
            for pair in eigen_decomposition(A):
                assert_eigenpair(A, pair)

    def test_upper_triangular_real_roots(self):
        A = [[4, 1, 2], [0, 3, 1], [0, 0, -1]]
        pairs = eigen_decomposition(A)
        assert [p.eigenvalue for p in pairs] == pytest.approx([4.0, 3.0, -1.0])
        for pair in pairs:
            assert_eigenpair(A, pair)

    def test_rotation_reports_only_the_real_root(self):
        A = [[0, -1, 0], [1, 0, 0], [0, 0, 1]]
        pairs = eigen_decomposition(A)
        assert len(pairs) == 1
        assert pairs[0].eigenvalue == pytest.approx(1.0)
        assert pairs[0].eigenvector == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)

    def test_jordan_block_is_defective(self):
        A = [[2, 1, 0], [0, 2, 0], [0, 0, 3]]
        assert eigenvalues(A) == pytest.approx([3.0, 2.0, 2.0])
        assert is_defective(A)
        pairs = eigen_decomposition(A)
        assert len(pairs) == 3
        assert pairs[1].eigenvector == pairs[2].eigenvector

    def test_small_rotation_keeps_complex_pair_out(self):
        # Small entries must not pass for a triple real root
        A = [[0, -0.02, 0], [0.02, 0, 0], [0, 0, 0]]
        assert eigenvalues(A) == pytest.approx([0.0], abs=1e-12)
        pairs = eigen_decomposition(A)
        assert len(pairs) == 1
        assert pairs[0].eigenvector == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)
        assert not is_defective(A)

    @pytest.mark.parametrize("theta", [1e-3, 0.01, 0.05, 0.3])
    def test_small_angle_rotation_about_z(self, theta):
        c, s = math.cos(theta), math.sin(theta)
        A = [[c, -s, 0], [s, c, 0], [0, 0, 1]]
        values = eigenvalues(A)
        assert len(values) == 1
        assert values[0] == pytest.approx(1.0, abs=1e-6)

    def test_scaled_down_matrix_keeps_distinct_roots(self):
        A = np.diag([3e-3, 2e-3, 1e-3])
        assert eigenvalues(A) == pytest.approx([3e-3, 2e-3, 1e-3], abs=1e-12)

    def test_characteristic_coefficients(self):
        p, q, r = characteristic_coefficients([[1, 0, 0], [0, 2, 0], [0, 0, 3]])
        assert (p, q, r) == pytest.approx((-6.0, 11.0, -6.0))


class TestHelpers:

    def test_non_square_rejected(self):
        with pytest.raises(DimensionError):
            eigenvalues([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(DimensionError):
            eigen_decomposition([[1, 2], [3, 4], [5, 6]])

    def test_null_space(self):
        basis = null_space([[1, 1, 0], [0, 0, 1], [1, 1, 1]])
        assert len(basis) == 1
        np.testing.assert_allclose(basis[0], [-1.0, 1.0, 0.0])

    def test_eigenpair_is_a_value(self):
        assert EigenPair(1.0, (1.0, 0.0)) == EigenPair(1.0, (1.0, 0.0))
