"""
Algebraic traits.

Capability protocols (Vector, Normed, InnerProduct, LinearOp,
VectorProduct, MatrixProduct), the Norm selector, and generic functions
that dispatch over scalars, 1-D arrays and Matrix.
"""

from pylinalg.traits.norm import Norm, NormKind
from pylinalg.traits.protocols import (
    Vector,
    Normed,
    InnerProduct,
    LinearOp,
    VectorProduct,
    MatrixProduct,
)
from pylinalg.traits.ops import (
    add_vec,
    sub_vec,
    mul_scalar,
    norm,
    normalize,
    dot,
    apply,
    cross,
    outer,
    kronecker,
    hadamard,
)

__all__ = [
    # Selectors
    "Norm",
    "NormKind",
    # Protocols
    "Vector",
    "Normed",
    "InnerProduct",
    "LinearOp",
    "VectorProduct",
    "MatrixProduct",
    # Generic functions
    "add_vec",
    "sub_vec",
    "mul_scalar",
    "norm",
    "normalize",
    "dot",
    "apply",
    "cross",
    "outer",
    "kronecker",
    "hadamard",
]
