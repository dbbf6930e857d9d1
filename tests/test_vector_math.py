"""Tests for vector primitives."""

from __future__ import annotations

import numpy as np
import pytest

from nutrivec.engine.models import DimensionMismatchError
from nutrivec.engine.vector_math import add, cosine_similarity, scale


class TestAdd:
    """Tests for element-wise addition."""

    def test_adds_elementwise(self):
        assert add([1.0, 2.0, 3.0], [0.5, -2.0, 1.0]).tolist() == [1.5, 0.0, 4.0]

    def test_commutative(self):
        a, b = [0.3, -1.2, 4.0], [2.5, 0.1, -0.7]
        np.testing.assert_allclose(add(a, b), add(b, a))

    def test_associative(self):
        a, b, c = [0.3, -1.2], [2.5, 0.1], [-1.0, 7.5]
        np.testing.assert_allclose(add(add(a, b), c), add(a, add(b, c)))

    def test_dimension_mismatch(self):
        """Unequal lengths fail instead of truncating."""
        with pytest.raises(DimensionMismatchError) as exc_info:
            add([1.0, 2.0], [1.0, 2.0, 3.0])
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    def test_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            add([1.0], [1.0, 2.0])

    def test_scale_by_sign(self):
        assert scale([1.0, -2.0], -1).tolist() == [-1.0, 2.0]


class TestCosineSimilarity:
    """Tests for cosine similarity."""

    def test_self_similarity_is_one(self):
        v = [0.3, -4.0, 2.2, 1.0]
        assert cosine_similarity(v, v) == pytest.approx(1.0)

    def test_orthogonal_is_zero(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_opposite_is_minus_one(self):
        assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)

    def test_scale_invariant(self):
        assert cosine_similarity([1.0, 2.0], [10.0, 20.0]) == pytest.approx(1.0)

    def test_zero_vector_gives_zero(self):
        """Zero magnitude on either side gives 0.0, not NaN."""
        assert cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]) == 0.0
        assert cosine_similarity([1.0, 2.0, 3.0], [0.0, 0.0, 0.0]) == 0.0
        assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0

    def test_returns_python_float(self):
        assert isinstance(cosine_similarity([1.0, 1.0], [1.0, 0.0]), float)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0])
