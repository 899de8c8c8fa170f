"""
Data structures.

Matrix is a dense float64 matrix that tracks its physical layout (Shape)
explicitly; all element access is layout-transparent.
"""

from pylinalg.structure.matrix import (
    Shape,
    Row,
    Col,
    Matrix,
    matrix,
    py_matrix,
    ml_matrix,
)

__all__ = [
    "Shape",
    "Row",
    "Col",
    "Matrix",
    "matrix",
    "py_matrix",
    "ml_matrix",
]
