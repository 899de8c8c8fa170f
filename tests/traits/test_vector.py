"""
Tests for 1-D arrays as vectors: Vector, Normed, InnerProduct,
VectorProduct.
"""

import numpy as np
import pytest

from pylinalg import (
    Matrix,
    Norm,
    Row,
    add_vec,
    cross,
    dot,
    mul_scalar,
    norm,
    normalize,
    outer,
    sub_vec,
)
from pylinalg.core.exceptions import (
    DegenerateNormError,
    DimensionError,
    UnsupportedDimensionError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Vector
# ═══════════════════════════════════════════════════════════════════════


class TestVectorOps:

    def test_add(self):
        np.testing.assert_array_equal(add_vec(np.array([1.0, 2.0]), [3, 4]), [4.0, 6.0])

    def test_sub(self):
        np.testing.assert_array_equal(sub_vec(np.array([1.0, 2.0]), [3, 4]), [-2.0, -2.0])

    def test_mul_scalar(self):
        np.testing.assert_array_equal(mul_scalar(np.array([1.0, -2.0]), 3), [3.0, -6.0])

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="add_vec: length mismatch"):
            add_vec(np.ones(2), np.ones(3))

    def test_int_arrays_promoted(self):
        result = add_vec(np.array([1, 2]), np.array([1, 1]))
        assert result.dtype == np.float64

    def test_inputs_untouched(self):
        a = np.array([1.0, 2.0])
        mul_scalar(a, 10)
        np.testing.assert_array_equal(a, [1.0, 2.0])

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="does not implement Vector"):
            add_vec("abc", "def")

    def test_2d_array_rejected(self):
        with pytest.raises(DimensionError):
            add_vec(np.ones((2, 2)), np.ones((2, 2)))


# ═══════════════════════════════════════════════════════════════════════
# Normed
# ═══════════════════════════════════════════════════════════════════════


class TestNorms:

    v = np.array([3.0, -4.0])

    def test_l1(self):
        assert norm(self.v, Norm.L1) == 7.0

    def test_l2(self):
        assert norm(self.v, Norm.L2) == 5.0

    def test_default_is_l2(self):
        assert norm(self.v) == 5.0

    def test_linf(self):
        assert norm(self.v, Norm.LInf) == 4.0

    def test_lp(self):
        expected = (27.0 + 64.0) ** (1.0 / 3.0)
        assert norm(self.v, Norm.Lp(3)) == pytest.approx(expected, rel=1e-14)

    def test_lp_two_matches_l2(self, rng):
        v = rng.standard_normal(10)
        assert norm(v, Norm.Lp(2)) == pytest.approx(norm(v, Norm.L2), rel=1e-12)

    def test_lp_one_matches_l1(self, rng):
        v = rng.standard_normal(10)
        assert norm(v, Norm.Lp(1)) == pytest.approx(norm(v, Norm.L1), rel=1e-12)

    def test_lp_infinite_is_linf(self):
        assert norm(self.v, Norm.Lp(float("inf"))) == 4.0

    def test_empty_vector(self):
        assert norm(np.array([]), Norm.LInf) == 0.0

    @pytest.mark.parametrize("kind", [Norm.F, Norm.Lpq(2, 2)])
    def test_matrix_norm_rejected(self, kind):
        with pytest.raises(ValidationError, match="matrix norm"):
            norm(self.v, kind)

    def test_norm_is_float(self):
        assert type(norm(self.v, Norm.L1)) is float


class TestNormalize:

    @pytest.mark.parametrize("kind", [Norm.L1, Norm.L2, Norm.Lp(3), Norm.LInf])
    def test_unit_norm(self, kind, rng):
        v = rng.standard_normal(6)
        assert norm(normalize(v, kind), kind) == pytest.approx(1.0, rel=1e-12)

    def test_direction_kept(self):
        np.testing.assert_allclose(normalize(np.array([3.0, -4.0])), [0.6, -0.8], rtol=1e-15)

    def test_zero_vector_fails(self):
        with pytest.raises(DegenerateNormError, match="zero vector"):
            normalize(np.zeros(3), Norm.L2)


# ═══════════════════════════════════════════════════════════════════════
# InnerProduct / VectorProduct
# ═══════════════════════════════════════════════════════════════════════


class TestDot:

    def test_dot(self):
        assert dot(np.array([1.0, 2.0, 3.0]), [4, 5, 6]) == 32.0

    def test_dot_self_is_squared_norm(self, rng):
        v = rng.standard_normal(5)
        assert dot(v, v) == pytest.approx(norm(v, Norm.L2) ** 2, rel=1e-12)

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            dot(np.ones(2), np.ones(3))


class TestCross:

    def test_basis(self):
        x, y, z = np.eye(3)
        np.testing.assert_array_equal(cross(x, y), z)
        np.testing.assert_array_equal(cross(y, z), x)
        np.testing.assert_array_equal(cross(z, x), y)

    def test_anticommutative(self, rng):
        a, b = rng.standard_normal(3), rng.standard_normal(3)
        np.testing.assert_allclose(cross(a, b), -cross(b, a), rtol=1e-14)

    def test_orthogonal(self, rng):
        a, b = rng.standard_normal(3), rng.standard_normal(3)
        c = cross(a, b)
        assert dot(c, a) == pytest.approx(0.0, abs=1e-12)
        assert dot(c, b) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("n", [2, 4])
    def test_other_dimensions_unsupported(self, n):
        with pytest.raises(UnsupportedDimensionError) as exc_info:
            cross(np.ones(n), np.ones(n))
        assert exc_info.value.dimension == n
        assert exc_info.value.supported == (3,)


class TestOuter:

    def test_values_and_dims(self):
        result = outer(np.array([1.0, 2.0]), np.array([3.0, 4.0, 5.0]))
        assert isinstance(result, Matrix)
        assert result.dims == (2, 3)
        assert result.shape is Row
        np.testing.assert_array_equal(result.to_array(), [[3, 4, 5], [6, 8, 10]])

    def test_unequal_lengths_allowed(self):
        assert outer(np.ones(1), np.ones(4)).dims == (1, 4)
