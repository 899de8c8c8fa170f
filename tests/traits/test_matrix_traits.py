"""
Tests for Matrix as Vector, Normed, InnerProduct, LinearOp and
MatrixProduct, through both methods and the generic functions.
"""

import numpy as np
import pytest

from pylinalg import (
    Col,
    InnerProduct,
    LinearOp,
    Matrix,
    MatrixProduct,
    Norm,
    Normed,
    Row,
    Vector,
    VectorProduct,
    add_vec,
    apply,
    dot,
    hadamard,
    kronecker,
    mul_scalar,
    norm,
    normalize,
    sub_vec,
)
from pylinalg.core.exceptions import (
    DegenerateNormError,
    DimensionError,
    ValidationError,
)


LOGICAL = np.array([[1.0, -2.0, 3.0], [-4.0, 5.0, -6.0]])


@pytest.fixture
def m(shape):
    return Matrix.from_array(LOGICAL, shape)


# ═══════════════════════════════════════════════════════════════════════
# Protocol conformance
# ═══════════════════════════════════════════════════════════════════════


class TestProtocols:

    def test_matrix_satisfies(self, m):
        assert isinstance(m, Vector)
        assert isinstance(m, Normed)
        assert isinstance(m, InnerProduct)
        assert isinstance(m, LinearOp)
        assert isinstance(m, MatrixProduct)

    def test_matrix_has_no_vector_product(self, m):
        assert not isinstance(m, VectorProduct)

    def test_float_is_not_structural_vector(self):
        assert not isinstance(1.0, Vector)


# ═══════════════════════════════════════════════════════════════════════
# Vector
# ═══════════════════════════════════════════════════════════════════════


class TestVectorOps:

    def test_generic_add_dispatches(self, m):
        other = Matrix.from_array(LOGICAL, Col)
        np.testing.assert_array_equal(add_vec(m, other).to_array(), 2 * LOGICAL)

    def test_generic_sub_dispatches(self, m):
        assert sub_vec(m, m) == Matrix(np.zeros(6), 2, 3)

    def test_generic_mul_scalar(self, m):
        np.testing.assert_array_equal(mul_scalar(m, -1).to_array(), -LOGICAL)

    def test_result_keeps_left_layout(self, m):
        other = m.change_shape()
        assert add_vec(m, other).shape is m.shape

    def test_type_mismatch(self, m):
        with pytest.raises(TypeError, match="expected Matrix"):
            m.add_vec(np.ones(6))


# ═══════════════════════════════════════════════════════════════════════
# Normed
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixNorms:

    def test_frobenius(self, m):
        assert m.norm(Norm.F) == pytest.approx(np.sqrt(91.0), rel=1e-15)

    def test_default_method_norm_is_frobenius(self, m):
        assert m.norm() == m.norm(Norm.F)

    def test_lpq_2_2_is_frobenius(self, m):
        assert m.norm(Norm.Lpq(2, 2)) == pytest.approx(m.norm(Norm.F), rel=1e-14)

    def test_lpq_is_column_wise(self, m):
        # columns: |1|+|4|, |2|+|5|, |3|+|6| -> (5^2 + 7^2 + 9^2)^(1/2)
        assert m.norm(Norm.Lpq(1, 2)) == pytest.approx(np.sqrt(155.0), rel=1e-14)

    def test_l1_max_column_sum(self, m):
        assert m.norm(Norm.L1) == 9.0

    def test_linf_max_row_sum(self, m):
        assert m.norm(Norm.LInf) == 15.0

    def test_l2_spectral(self, m):
        expected = np.linalg.norm(LOGICAL, 2)
        assert norm(m, Norm.L2) == pytest.approx(expected, rel=1e-12)

    def test_lpq_infinite_p_takes_column_max(self):
        m = Matrix.from_array([[3.0, 0.0], [4.0, 0.0]], Col)
        assert m.norm(Norm.Lpq(float("inf"), 1)) == 4.0

    def test_lpq_infinite_q_takes_max_over_columns(self, shape):
        m = Matrix.from_array([[3.0, 0.0], [4.0, 0.0]], shape)
        assert m.norm(Norm.Lpq(2, float("inf"))) == 5.0

    def test_lpq_both_infinite_is_max_abs(self, m):
        assert m.norm(Norm.Lpq(float("inf"), float("inf"))) == 6.0

    def test_lpq_large_p_approaches_max(self, m):
        assert m.norm(Norm.Lpq(200, 1)) == pytest.approx(
            m.norm(Norm.Lpq(float("inf"), 1)), rel=1e-2
        )

    def test_lp_rejected(self, m):
        with pytest.raises(ValidationError, match="not defined for matrices"):
            m.norm(Norm.Lp(3))

    def test_layout_independent(self, random_matrix):
        other = random_matrix.change_shape()
        for kind in (Norm.F, Norm.L1, Norm.LInf, Norm.L2, Norm.Lpq(3, 1)):
            assert random_matrix.norm(kind) == pytest.approx(other.norm(kind), rel=1e-14)

    def test_empty(self):
        assert Matrix([], 0, 2).norm(Norm.F) == 0.0

    def test_normalize(self, m):
        unit = normalize(m, Norm.F)
        assert unit.norm(Norm.F) == pytest.approx(1.0, rel=1e-14)
        assert unit.shape is m.shape

    def test_normalize_zero(self, shape):
        with pytest.raises(DegenerateNormError, match="zero matrix"):
            Matrix(np.zeros(4), 2, 2, shape).normalize(Norm.F)


# ═══════════════════════════════════════════════════════════════════════
# InnerProduct / LinearOp
# ═══════════════════════════════════════════════════════════════════════


class TestDot:

    def test_frobenius_inner_product(self, m):
        assert dot(m, m) == pytest.approx(91.0, rel=1e-15)

    def test_mixed_layouts(self):
        a = Matrix.from_array([[1, 2], [3, 4]], Row)
        b = Matrix.from_array([[1, 0], [0, 1]], Col)
        assert a.dot(b) == 5.0

    def test_dim_mismatch(self, m):
        with pytest.raises(DimensionError):
            dot(m, m.T)


class TestApply:

    def test_apply(self, m):
        v = np.array([1.0, 1.0, 1.0])
        np.testing.assert_array_equal(apply(m, v), LOGICAL @ v)

    def test_length_mismatch(self, m):
        with pytest.raises(DimensionError, match="apply"):
            m.apply(np.ones(2))


# ═══════════════════════════════════════════════════════════════════════
# MatrixProduct
# ═══════════════════════════════════════════════════════════════════════


class TestHadamard:

    def test_values(self, m):
        other = Matrix.from_array(LOGICAL, Col)
        np.testing.assert_array_equal(hadamard(m, other).to_array(), LOGICAL * LOGICAL)

    def test_dim_mismatch(self, m):
        with pytest.raises(DimensionError, match="hadamard") as exc_info:
            hadamard(m, m.T)
        assert exc_info.value.expected == (2, 3)
        assert exc_info.value.actual == (3, 2)


class TestKronecker:

    def test_dims_multiply(self, m):
        b = Matrix(np.ones(20), 4, 5, Col)
        assert kronecker(m, b).dims == (8, 15)

    def test_values(self):
        a = Matrix.from_array([[1, 2], [3, 4]], Col)
        b = Matrix.from_array([[0, 1], [1, 0]], Row)
        result = kronecker(a, b)
        assert result.shape is Col
        np.testing.assert_array_equal(
            result.to_array(),
            [[0, 1, 0, 2], [1, 0, 2, 0], [0, 3, 0, 4], [3, 0, 4, 0]],
        )

    def test_with_identity_1x1(self, m):
        assert kronecker(m, Matrix([1.0], 1, 1)) == m

    def test_non_matrix_rejected(self):
        with pytest.raises(TypeError, match="does not implement MatrixProduct"):
            kronecker(np.ones(3), np.ones(3))
