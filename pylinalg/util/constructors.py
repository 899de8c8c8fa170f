"""
MATLAB/R-style matrix builders.

Every builder writes elements through Matrix.set / change_shape, so none
of them assumes a physical layout.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.validation import check_count, check_shared_dim
from pylinalg.structure.matrix import Col, Matrix, Row, Shape


def zeros(r: int, c: int) -> Matrix:
    """r x c zero matrix, Row-shaped."""
    return zeros_shape(r, c, Row)


def zeros_shape(r: int, c: int, shape: Shape) -> Matrix:
    """r x c zero matrix in the given layout."""
    r = check_count(r, 'r')
    c = check_count(c, 'c')
    return Matrix(np.zeros(r * c), r, c, shape)


def eye(n: int) -> Matrix:
    """
    n x n identity, Row-shaped.

    Examples:
        >>> eye(2) == Matrix([1, 0, 0, 1], 2, 2)
        True
    """
    return eye_shape(n, Row)


def eye_shape(n: int, shape: Shape) -> Matrix:
    """n x n identity in the given layout."""
    m = zeros_shape(n, n, shape)
    for i in range(m.row):
        m[i, i] = 1.0
    return m


def rand(r: int, c: int, rng: np.random.Generator | None = None) -> Matrix:
    """
    r x c Row-shaped matrix of independent uniform [0, 1) draws.

    Args:
        r: Number of rows
        c: Number of columns
        rng: Source of randomness; a fresh default_rng() when None
    """
    if rng is None:
        rng = np.random.default_rng()
    m = zeros(r, c)
    draws = rng.random((m.row, m.col))
    for i in range(m.row):
        for j in range(m.col):
            m[i, j] = draws[i, j]
    return m


def cbind(m1: Matrix, m2: Matrix) -> Matrix:
    """
    R-like cbind: place m2's columns after m1's.

    Both inputs are brought to Col layout, where appending the buffers
    is exactly block concatenation. The inputs are not modified.

    Returns:
        Col-shaped Matrix, row x (c1 + c2)

    Raises:
        DimensionError: If row counts differ

    Examples:
        >>> a = matrix([1, 2, 3, 4], 2, 2, Col)
        >>> b = matrix([5, 6, 7, 8], 2, 2, Col)
        >>> cbind(a, b) == matrix(range(1, 9), 2, 4, Col)
        True
    """
    check_shared_dim(m1.row, m2.row, 'row count', 'cbind')
    a = m1 if m1.shape is Col else m1.change_shape()
    b = m2 if m2.shape is Col else m2.change_shape()
    return Matrix(np.concatenate((a.data, b.data)), a.row, a.col + b.col, Col)


def rbind(m1: Matrix, m2: Matrix) -> Matrix:
    """
    R-like rbind: place m2's rows below m1's.

    Returns:
        Row-shaped Matrix, (r1 + r2) x col

    Raises:
        DimensionError: If column counts differ
    """
    check_shared_dim(m1.col, m2.col, 'col count', 'rbind')
    a = m1 if m1.shape is Row else m1.change_shape()
    b = m2 if m2.shape is Row else m2.change_shape()
    return Matrix(np.concatenate((a.data, b.data)), a.row + b.row, a.col, Row)
