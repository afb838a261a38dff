"""
Tests for singular values from the Gram matrix.
"""

import math

import numpy as np
import pytest

from vectorlab.matrix_algebra import Matrix, is_symmetric
from vectorlab.singular_values import condition_number, gram_matrix, singular_values


class TestGramMatrix:

    def test_shape_follows_columns(self):
        assert gram_matrix([[1, 2, 3], [4, 5, 6]]).dimension == "3x3"
        assert gram_matrix([[1, 2], [3, 4], [5, 6]]).dimension == "2x2"

    def test_symmetric(self):
        rng = np.random.default_rng(5)
        assert is_symmetric(gram_matrix(rng.normal(size=(3, 3))))


class TestSingularValues:

    def test_diagonal(self):
        assert singular_values([[3, 0], [0, -2]]) == pytest.approx([3.0, 2.0])

    def test_orthogonal_matrix_has_unit_singular_values(self):
        c, s = math.cos(1.1), math.sin(1.1)
        rotation = Matrix([[c, -s, 0], [s, c, 0], [0, 0, 1]])
        assert singular_values(rotation) == pytest.approx([1.0, 1.0, 1.0])

    def test_matches_numpy(self):
        rng = np.random.default_rng(11)
        for shape in [(2, 2), (3, 3), (2, 3), (3, 2)]:
            for _ in range(10):
                A = rng.normal(size=shape)
                s = singular_values(A)
                expected = list(np.linalg.svd(A, compute_uv=False))
                expected += [0.0] * (A.shape[1] - len(expected))
                assert s == pytest.approx(expected, abs=1e-6)

    def test_non_negative_and_descending(self):
        rng = np.random.default_rng(2)
        for _ in range(20):
            s = singular_values(rng.normal(size=(3, 3)))
            assert all(x >= 0 for x in s)
            assert s == sorted(s, reverse=True)

    def test_rank_deficient(self):
        s = singular_values([[1, 2], [2, 4]])
        assert s[0] == pytest.approx(5.0)
        assert s[1] == pytest.approx(0.0, abs=1e-7)

    def test_wide_matrix_has_a_zero_singular_value(self):
        s = singular_values([[1, 0, 0], [0, 2, 0]])
        assert s == pytest.approx([2.0, 1.0, 0.0], abs=1e-7)

    def test_condition_number(self):
        assert condition_number([[4, 0], [0, 2]]) == pytest.approx(2.0)
        assert condition_number([[1, 0], [0, 0]]) == math.inf
