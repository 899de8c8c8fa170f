"""
Generic trait functions.

Each function dispatches on its first argument so scalars, vectors and
matrices share one numeric vocabulary:

    - real scalars act as a 1-dimensional vector space over themselves
      (every norm is abs(), normalize is the sign)
    - 1-D numpy arrays are dense vectors
    - anything satisfying the protocols in pylinalg.traits.protocols
      (Matrix in particular) is delegated to its own methods

Errors:
    DimensionError for length mismatches, UnsupportedDimensionError for
    cross products outside 3-D, DegenerateNormError when normalizing a
    zero value, TypeError when a value implements none of the traits.
"""

from __future__ import annotations

from functools import singledispatch
from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import (
    DegenerateNormError,
    UnsupportedDimensionError,
    ValidationError,
)
from pylinalg.core.validation import check_shared_dim, check_vector
from pylinalg.traits.norm import Norm, NormKind
from pylinalg.traits.protocols import (
    InnerProduct,
    LinearOp,
    MatrixProduct,
    Normed,
    Vector,
    VectorProduct,
)


def _unsupported(operation: str, value: Any, trait: type) -> TypeError:
    return TypeError(
        f"{operation}: {type(value).__name__} does not implement {trait.__name__}"
    )


def _same_length(a: NDArray, b: NDArray, operation: str) -> None:
    check_shared_dim(a.shape[0], b.shape[0], 'length', operation)


# ═══════════════════════════════════════════════════════════════════════
# Vector
# ═══════════════════════════════════════════════════════════════════════


@singledispatch
def add_vec(value, rhs):
    """self + rhs, same type returned."""
    if isinstance(value, Vector):
        return value.add_vec(rhs)
    raise _unsupported('add_vec', value, Vector)


@add_vec.register(Real)
def _(value, rhs) -> float:
    return float(value) + float(rhs)


@add_vec.register(np.ndarray)
def _(value, rhs) -> NDArray[np.floating[Any]]:
    a = check_vector(value, 'value')
    b = check_vector(rhs, 'rhs')
    _same_length(a, b, 'add_vec')
    return a + b


@singledispatch
def sub_vec(value, rhs):
    """self - rhs, same type returned."""
    if isinstance(value, Vector):
        return value.sub_vec(rhs)
    raise _unsupported('sub_vec', value, Vector)


@sub_vec.register(Real)
def _(value, rhs) -> float:
    return float(value) - float(rhs)


@sub_vec.register(np.ndarray)
def _(value, rhs) -> NDArray[np.floating[Any]]:
    a = check_vector(value, 'value')
    b = check_vector(rhs, 'rhs')
    _same_length(a, b, 'sub_vec')
    return a - b


@singledispatch
def mul_scalar(value, scalar: float):
    """Scale by a scalar, same type returned."""
    if isinstance(value, Vector):
        return value.mul_scalar(scalar)
    raise _unsupported('mul_scalar', value, Vector)


@mul_scalar.register(Real)
def _(value, scalar: float) -> float:
    return float(value) * float(scalar)


@mul_scalar.register(np.ndarray)
def _(value, scalar: float) -> NDArray[np.floating[Any]]:
    return check_vector(value, 'value') * float(scalar)


# ═══════════════════════════════════════════════════════════════════════
# Normed
# ═══════════════════════════════════════════════════════════════════════


@singledispatch
def norm(value, kind: Norm = Norm.L2) -> float:
    """
    Compute a norm of a scalar, vector or matrix.

    Args:
        value: Scalar, 1-D array, or Normed object
        kind: Norm variant (default L2)

    Returns:
        Non-negative float

    Raises:
        ValidationError: If the variant does not apply to the value
    """
    if isinstance(value, Normed):
        return value.norm(kind)
    raise _unsupported('norm', value, Normed)


@norm.register(Real)
def _(value, kind: Norm = Norm.L2) -> float:
    return abs(float(value))


@norm.register(np.ndarray)
def _(value, kind: Norm = Norm.L2) -> float:
    return vector_norm(check_vector(value, 'value'), kind)


def vector_norm(v: NDArray[np.floating[Any]], kind: Norm) -> float:
    """Norm of a 1-D float array. Matrix variants are rejected."""
    if not kind.is_vector_norm:
        raise ValidationError(f"{kind!r} is a matrix norm, not defined for vectors")
    if v.shape[0] == 0:
        return 0.0

    a = np.abs(v)
    if kind.kind is NormKind.L1:
        return float(np.sum(a))
    if kind.kind is NormKind.L2:
        return float(np.linalg.norm(v))
    if kind.kind is NormKind.LINF:
        return float(np.max(a))
    if np.isinf(kind.p):
        return float(np.max(a))
    return float(np.sum(a ** kind.p) ** (1.0 / kind.p))


@singledispatch
def normalize(value, kind: Norm = Norm.L2):
    """
    Scale to unit norm, same type returned.

    Raises:
        DegenerateNormError: If the norm is zero
    """
    if isinstance(value, Normed):
        return value.normalize(kind)
    raise _unsupported('normalize', value, Normed)


@normalize.register(Real)
def _(value, kind: Norm = Norm.L2) -> float:
    x = float(value)
    if x == 0:
        raise DegenerateNormError("cannot normalize zero scalar", kind=kind)
    return x / abs(x)


@normalize.register(np.ndarray)
def _(value, kind: Norm = Norm.L2) -> NDArray[np.floating[Any]]:
    v = check_vector(value, 'value')
    n = vector_norm(v, kind)
    if n == 0:
        raise DegenerateNormError(f"cannot normalize zero vector under {kind!r}", kind=kind)
    return v / n


# ═══════════════════════════════════════════════════════════════════════
# InnerProduct
# ═══════════════════════════════════════════════════════════════════════


@singledispatch
def dot(value, rhs) -> float:
    """Inner product."""
    if isinstance(value, InnerProduct):
        return value.dot(rhs)
    raise _unsupported('dot', value, InnerProduct)


@dot.register(Real)
def _(value, rhs) -> float:
    return float(value) * float(rhs)


@dot.register(np.ndarray)
def _(value, rhs) -> float:
    a = check_vector(value, 'value')
    b = check_vector(rhs, 'rhs')
    _same_length(a, b, 'dot')
    return float(np.dot(a, b))


# ═══════════════════════════════════════════════════════════════════════
# LinearOp
# ═══════════════════════════════════════════════════════════════════════


@singledispatch
def apply(op, rhs):
    """Apply a linear map to a vector."""
    if isinstance(op, LinearOp):
        return op.apply(rhs)
    raise _unsupported('apply', op, LinearOp)


@apply.register(Real)
def _(op, rhs):
    # scalar multiplication is the linear map x -> op * x
    return mul_scalar(rhs, op)


# ═══════════════════════════════════════════════════════════════════════
# VectorProduct
# ═══════════════════════════════════════════════════════════════════════


@singledispatch
def cross(value, other):
    """Cross product of two 3-dimensional vectors."""
    if isinstance(value, VectorProduct):
        return value.cross(other)
    raise _unsupported('cross', value, VectorProduct)


@cross.register(np.ndarray)
def _(value, other) -> NDArray[np.floating[Any]]:
    a = check_vector(value, 'value')
    b = check_vector(other, 'other')
    for v in (a, b):
        if v.shape[0] != 3:
            raise UnsupportedDimensionError(
                f"cross: defined for 3-dimensional vectors only, got length {v.shape[0]}",
                dimension=v.shape[0],
                supported=(3,),
            )
    return np.cross(a, b)


@singledispatch
def outer(value, other):
    """Outer product; returns a Matrix."""
    if isinstance(value, VectorProduct):
        return value.outer(other)
    raise _unsupported('outer', value, VectorProduct)


@outer.register(np.ndarray)
def _(value, other):
    from pylinalg.structure.matrix import Matrix, Row

    a = check_vector(value, 'value')
    b = check_vector(other, 'other')
    return Matrix(np.multiply.outer(a, b).ravel(), a.shape[0], b.shape[0], Row)


# ═══════════════════════════════════════════════════════════════════════
# MatrixProduct
# ═══════════════════════════════════════════════════════════════════════


def kronecker(value, other):
    """Kronecker product; dimensions multiply."""
    if isinstance(value, MatrixProduct):
        return value.kronecker(other)
    raise _unsupported('kronecker', value, MatrixProduct)


def hadamard(value, other):
    """Element-wise product of equally sized matrices."""
    if isinstance(value, MatrixProduct):
        return value.hadamard(other)
    raise _unsupported('hadamard', value, MatrixProduct)
