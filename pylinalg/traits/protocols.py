"""
Algebraic capability protocols for PyLinAlg.

These define the structural interfaces that scalars, vectors and
matrices satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so that a type participates simply by providing the
methods; nothing has to inherit from a base class.

Refinement chain:
    Vector -> Normed -> InnerProduct

Implementers are responsible for the vector-space axioms (associativity
and commutativity of addition, distributivity of scalar multiplication).
The protocols only fix the signatures.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from pylinalg.structure.matrix import Matrix
    from pylinalg.traits.norm import Norm

T = TypeVar('T')
S = TypeVar('S', covariant=True)
V = TypeVar('V', contravariant=True)


@runtime_checkable
class Vector(Protocol):
    """
    Closed under addition, subtraction and scalar multiplication.
    """

    def add_vec(self: T, rhs: T) -> T:
        """self + rhs"""
        ...

    def sub_vec(self: T, rhs: T) -> T:
        """self - rhs"""
        ...

    def mul_scalar(self: T, rhs: float) -> T:
        """self * rhs for a scalar rhs"""
        ...


@runtime_checkable
class Normed(Vector, Protocol):
    """
    Vector with a norm.

    norm() always returns a non-negative float, even for signed scalars.
    """

    def norm(self, kind: Norm) -> float:
        """
        Compute the requested norm variant.

        Raises:
            ValidationError: If the variant does not apply to this type
        """
        ...

    def normalize(self: T, kind: Norm) -> T:
        """
        Scale to unit norm under the given variant.

        Raises:
            DegenerateNormError: If the norm is zero
        """
        ...


@runtime_checkable
class InnerProduct(Normed, Protocol):
    """Normed vector with an inner product."""

    def dot(self: T, rhs: T) -> float:
        ...


@runtime_checkable
class LinearOp(Protocol[V, S]):
    """
    Linear map from one vector space to another.

    Type Parameters:
        V: Domain vector type
        S: Codomain vector type
    """

    def apply(self, rhs: V) -> S:
        ...


@runtime_checkable
class VectorProduct(Vector, Protocol):
    """Cross and outer products."""

    def cross(self: T, other: T) -> T:
        """
        Cross product, defined for 3-dimensional vectors only.

        Raises:
            UnsupportedDimensionError: For any other dimension
        """
        ...

    def outer(self: T, other: T) -> Matrix:
        ...


@runtime_checkable
class MatrixProduct(Protocol):
    """Kronecker and Hadamard products."""

    def kronecker(self: T, other: T) -> Matrix:
        """Result is (r1*r2) x (c1*c2)."""
        ...

    def hadamard(self: T, other: T) -> Matrix:
        """
        Element-wise product.

        Raises:
            DimensionError: If dimensions differ
        """
        ...
