"""
PyLinAlg: dense linear algebra with explicit memory layout.

MATLAB/R/NumPy-like ergonomics with value semantics: a Matrix that
tracks whether it is stored row-major or column-major, a small set of
algebraic traits shared by scalars, vectors and matrices, and the usual
construction helpers.

Submodules:
    core: exceptions, validation, precision utilities
    structure: Shape, Matrix
    traits: Norm, capability protocols, generic trait functions
    util: seq/linspace/logspace, zeros/eye/rand, cbind/rbind
"""

__version__ = "0.1.0"

from pylinalg.traits import (
    Norm,
    Vector,
    Normed,
    InnerProduct,
    LinearOp,
    VectorProduct,
    MatrixProduct,
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
from pylinalg.structure import Shape, Row, Col, Matrix, matrix, py_matrix, ml_matrix
from pylinalg.util import (
    seq,
    seq_with_precision,
    linspace,
    linspace_with_precision,
    logspace,
    concat,
    cat,
    zeros,
    zeros_shape,
    eye,
    eye_shape,
    rand,
    cbind,
    rbind,
)

__all__ = [
    "__version__",
    # Structure
    "Shape",
    "Row",
    "Col",
    "Matrix",
    "matrix",
    "py_matrix",
    "ml_matrix",
    # Traits
    "Norm",
    "Vector",
    "Normed",
    "InnerProduct",
    "LinearOp",
    "VectorProduct",
    "MatrixProduct",
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
    # Utilities
    "seq",
    "seq_with_precision",
    "linspace",
    "linspace_with_precision",
    "logspace",
    "concat",
    "cat",
    "zeros",
    "zeros_shape",
    "eye",
    "eye_shape",
    "rand",
    "cbind",
    "rbind",
]
