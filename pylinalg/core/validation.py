"""
Input validation utilities for PyLinAlg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No clamping, wrapping, or broadcasting
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    InvalidRangeError,
)


def check_count(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer count (rows, cols, lengths).
    
    Args:
        value: Value to check
        name: Parameter name for error messages
        
    Returns:
        The value as a plain int
        
    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected non-negative int, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_index(i: int, j: int, row: int, col: int) -> None:
    """
    Verify (i, j) lies inside a row x col grid.
    
    Negative indices are rejected rather than wrapped.
    Coordinates must be ints; floats are never truncated.
    
    Args:
        i: Row coordinate
        j: Column coordinate
        row: Number of rows
        col: Number of columns
        
    Raises:
        ValidationError: If a coordinate is not an integer
        IndexOutOfBoundsError: If the coordinate is outside the grid
    """
    for name, value in (('i', i), ('j', j)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(
                f"index {name}: expected int, got {type(value).__name__}"
            )
    if not (0 <= i < row and 0 <= j < col):
        raise IndexOutOfBoundsError(
            f"index ({i}, {j}) out of bounds for {row}x{col} matrix",
            index=(i, j),
            bounds=(row, col),
        )


def check_same_dims(
    a: tuple[int, int],
    b: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two (row, col) pairs are identical.
    
    Args:
        a: Dimensions of the left operand
        b: Dimensions of the right operand
        operation: Operation name for error messages
        
    Raises:
        DimensionError: If dimensions differ
    """
    if tuple(a) != tuple(b):
        raise DimensionError(
            f"{operation}: dimension mismatch, {a[0]}x{a[1]} vs {b[0]}x{b[1]}",
            expected=tuple(a),
            actual=tuple(b),
            operation=operation,
        )


def check_shared_dim(
    left: int,
    right: int,
    what: str,
    operation: str,
) -> None:
    """
    Verify the dimension two operands must share agrees.
    
    Args:
        left: Dimension of the left operand
        right: Dimension of the right operand
        what: Which dimension ('row count', 'col count', 'length')
        operation: Operation name for error messages
        
    Raises:
        DimensionError: If the dimensions differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: {what} mismatch ({left} vs {right})",
            expected=left,
            actual=right,
            operation=operation,
        )


def check_range(start: float, end: float, name: str) -> None:
    """
    Verify both endpoints are finite and end >= start.
    
    Args:
        start: Range start
        end: Range end
        name: Calling function for error messages
        
    Raises:
        InvalidRangeError: If an endpoint is non-finite or end < start
    """
    check_finite_bounds(start, end, name)
    if not end >= start:
        raise InvalidRangeError(
            f"{name}: end ({end}) must be >= start ({start})",
            start=start,
            end=end,
        )


def check_positive_step(step: float, name: str) -> None:
    """
    Verify a sequence step is strictly positive and finite.
    
    Args:
        step: Step size
        name: Calling function for error messages
        
    Raises:
        ValidationError: If step <= 0 or non-finite
    """
    if not np.isfinite(step) or step <= 0:
        raise ValidationError(f"{name}: step must be positive and finite, got {step}")


def check_vector(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a 1-D float64 array.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        1-D numpy.ndarray of float64
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If the result is not 1-D
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {result.ndim}D with shape {result.shape}",
            expected=1,
            actual=result.ndim,
        )

    return result.astype(np.float64, copy=False)


def check_finite_bounds(start: float, end: float, name: str) -> None:
    """
    Verify both range endpoints are finite.
    
    Args:
        start: Range start
        end: Range end
        name: Calling function for error messages
        
    Raises:
        InvalidRangeError: If either endpoint is NaN or infinite
    """
    if not (np.isfinite(start) and np.isfinite(end)):
        raise InvalidRangeError(
            f"{name}: endpoints must be finite, got start={start}, end={end}",
            start=start,
            end=end,
        )
