"""
Core infrastructure for PyLinAlg.

This module provides the shared error taxonomy, input validators and
precision utilities used by the structure, traits and util subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Machine epsilon, decimal rounding, closeness checks
"""

from pylinalg.core.exceptions import (
    PyLinAlgError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    InvalidRangeError,
    UnsupportedDimensionError,
    NumericalError,
    DegenerateNormError,
    PrecisionWarning,
)
from pylinalg.core.precision import round_with_precision, is_close

__all__ = [
    # Exceptions
    "PyLinAlgError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "InvalidRangeError",
    "UnsupportedDimensionError",
    "NumericalError",
    "DegenerateNormError",
    "PrecisionWarning",
    # Precision
    "round_with_precision",
    "is_close",
]
