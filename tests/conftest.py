"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Col, Matrix, Row


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def logical_2x3():
    """Logical values [[1, 2, 3], [4, 5, 6]]."""
    return np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def row_2x3(logical_2x3):
    return Matrix(logical_2x3.ravel(), 2, 3, Row)


@pytest.fixture
def col_2x3(logical_2x3):
    return Matrix(logical_2x3.ravel(order='F'), 2, 3, Col)


@pytest.fixture(params=[Row, Col], ids=['row', 'col'])
def shape(request):
    """Run a test once per layout."""
    return request.param


@pytest.fixture
def random_matrix(rng, shape):
    """4x3 random matrix in the parametrized layout."""
    return Matrix.from_array(rng.standard_normal((4, 3)), shape)
