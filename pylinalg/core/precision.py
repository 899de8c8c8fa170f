"""
Numerical precision constants and utilities.

Provides machine epsilon, decimal rounding, and closeness checks used by
the sequence builders and by Matrix comparison.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pylinalg.core.exceptions import ValidationError


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.
    
    Args:
        dtype: NumPy dtype or type
        
    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def round_with_precision(
    value: float | NDArray[np.floating[Any]],
    digits: int
) -> float | NDArray[np.floating[Any]]:
    """
    Round to a fixed number of decimal digits, halves away from zero.
    
    Stepping by 1e-3 nine times lands on 0.009000000000000001, not
    0.009; rounding to 3 digits recovers the decimal value exactly.
    
    Args:
        value: Scalar or array to round
        digits: Number of decimal digits to keep (>= 0)
        
    Returns:
        Rounded value, same kind as the input (float for scalars)
        Values whose scaled magnitude overflows are returned unchanged.
        
    Raises:
        ValidationError: If digits is negative or not an integer
    """
    if isinstance(digits, bool) or not isinstance(digits, (int, np.integer)):
        raise ValidationError(f"digits: expected int, got {type(digits).__name__}")
    if digits < 0:
        raise ValidationError(f"digits: must be non-negative, got {digits}")
    
    x = np.asarray(value, dtype=np.float64)
    with np.errstate(over='ignore', invalid='ignore'):
        factor = np.power(np.float64(10.0), float(digits))
        scaled = np.abs(x) * factor
        # values too large to scale already carry fewer decimals than requested
        rounded = np.where(
            np.isfinite(scaled),
            np.sign(x) * np.floor(scaled + 0.5) / factor,
            x,
        )
    
    if rounded.ndim == 0:
        return float(rounded)
    return rounded


def is_close(
    a: float | NDArray[np.floating[Any]], 
    b: float | NDArray[np.floating[Any]], 
    rtol: float = DEFAULT_RTOL, 
    atol: float = DEFAULT_ATOL
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.
    
    Uses the formula: |a - b| <= atol + rtol * |b|
    
    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance
        
    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)
