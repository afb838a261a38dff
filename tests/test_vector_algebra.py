"""
Tests for the vector helpers.
"""

import math

import pytest

from vectorlab.errors import DimensionError
from vectorlab.vector_algebra import (
    angle_between,
    cross_product,
    distance,
    dot_product,
    magnitude,
    require_same_length,
)


class TestVectorAlgebra:

    def test_unit_axes(self):
        v1, v2 = [1, 0, 0], [0, 1, 0]
        assert dot_product(v1, v2) == 0.0
        assert cross_product(v1, v2) == [0.0, 0.0, 1.0]
        assert angle_between(v1, v2) == pytest.approx(math.pi / 2)

    def test_magnitude(self):
        assert magnitude([3, 4]) == 5.0
        assert magnitude([0, 0, 0]) == 0.0

    def test_mismatched_lengths_give_none(self):
        assert dot_product([1, 2], [1, 2, 3]) is None
        assert distance([1, 2], [1, 2, 3]) is None
        assert angle_between([1, 2], [1, 2, 3]) is None

    def test_cross_product_needs_3d(self):
        assert cross_product([1, 0], [0, 1]) is None
        assert cross_product([1, 0, 0], [0, 1]) is None

    def test_distance(self):
        assert distance([1, 1, 1], [4, 5, 1]) == pytest.approx(5.0)

    def test_angle_with_zero_vector(self):
        assert angle_between([0, 0], [1, 0]) is None

    def test_angle_is_clamped(self):
        v = [0.1, 0.2, 0.3]
        assert angle_between(v, v) == pytest.approx(0.0, abs=1e-7)
        assert angle_between(v, [-x for x in v]) == pytest.approx(math.pi)

    def test_require_same_length(self):
        with pytest.raises(DimensionError):
            require_same_length([1, 2], [1, 2, 3])
