"""
R/MATLAB/NumPy-style sequence builders.

All functions are pure and return new 1-D float64 arrays (concat/cat
return the container kind they were given).

Precision variants round every produced value to a fixed number of
decimal digits right after it is computed, because repeated float
stepping drifts: 0 + 9 * 1e-3 is 0.009000000000000001, not 0.009.
"""

from __future__ import annotations

import warnings
from typing import Any, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import InvalidRangeError, PrecisionWarning, ValidationError
from pylinalg.core.precision import round_with_precision
from pylinalg.core.validation import (
    check_count,
    check_finite_bounds,
    check_positive_step,
    check_range,
)

T = TypeVar('T')


def _seq_length(start: float, end: float, step: float, name: str) -> int:
    check_range(start, end, name)
    check_positive_step(step, name)
    factor = (end - start) / step
    if not np.isfinite(factor):
        raise ValidationError(f"{name}: step {step} is too small for range [{start}, {end}]")
    return int(np.floor(factor)) + 1


def _linspace_step(start: float, end: float, length: int, name: str) -> float:
    """
    Spacing for a `length`-point grid from start to end.

    A single point is only meaningful when start == end.
    """
    check_finite_bounds(start, end, name)
    if length == 0:
        raise ValidationError(f"{name}: length must be >= 1, got 0")
    if length == 1:
        if start != end:
            raise InvalidRangeError(
                f"{name}: length 1 cannot hold both start ({start}) and end ({end})",
                start=start,
                end=end,
            )
        return 0.0
    return (end - start) / (length - 1)


def _warn_if_collapsed(v: NDArray[np.floating[Any]], precision: int, name: str) -> None:
    if v.shape[0] > 1 and np.any(np.diff(v) == 0):
        warnings.warn(
            f"{name}: rounding to {precision} digits produced repeated values",
            PrecisionWarning,
            stacklevel=3,
        )


def seq(start: float, end: float, step: float) -> NDArray[np.floating[Any]]:
    """
    R-like seq.

    Starts at `start` and adds `step` while the value does not exceed
    `end`; the last element is end itself only if step divides the range.

    Raises:
        InvalidRangeError: If end < start
        ValidationError: If step <= 0

    Examples:
        >>> seq(1, 10, 2).tolist()
        [1.0, 3.0, 5.0, 7.0, 9.0]
        >>> seq(1, 1, 1).tolist()
        [1.0]
    """
    s, e, h = float(start), float(end), float(step)
    n = _seq_length(s, e, h, 'seq')
    return s + h * np.arange(n, dtype=np.float64)


def seq_with_precision(
    start: float,
    end: float,
    step: float,
    precision: int,
) -> NDArray[np.floating[Any]]:
    """
    seq() with each value rounded to `precision` decimal digits.

    Examples:
        >>> seq_with_precision(0, 1e-2, 1e-3, 3)[9]
        0.009
    """
    s, e, h = float(start), float(end), float(step)
    n = _seq_length(s, e, h, 'seq_with_precision')
    v = round_with_precision(s + h * np.arange(n, dtype=np.float64), precision)
    _warn_if_collapsed(v, precision, 'seq_with_precision')
    return v


def linspace(start: float, end: float, length: int) -> NDArray[np.floating[Any]]:
    """
    MATLAB-like linspace: exactly `length` evenly spaced values with
    start first and end last.

    Raises:
        ValidationError: If length is 0
        InvalidRangeError: If length is 1 and start != end

    Examples:
        >>> linspace(0, 1, 5).tolist()
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    s, e = float(start), float(end)
    length = check_count(length, 'length')
    step = _linspace_step(s, e, length, 'linspace')

    v = s + step * np.arange(length, dtype=np.float64)
    v[-1] = e
    return v


def linspace_with_precision(
    start: float,
    end: float,
    length: int,
    precision: int,
) -> NDArray[np.floating[Any]]:
    """linspace() with each value rounded to `precision` decimal digits."""
    s, e = float(start), float(end)
    length = check_count(length, 'length')
    step = _linspace_step(s, e, length, 'linspace_with_precision')

    first = round_with_precision(s, precision)
    v = round_with_precision(first + step * np.arange(length, dtype=np.float64), precision)
    v[-1] = round_with_precision(e, precision)
    _warn_if_collapsed(v, precision, 'linspace_with_precision')
    return v


def logspace(
    start: float,
    end: float,
    length: int,
    base: float = 10.0,
) -> NDArray[np.floating[Any]]:
    """
    NumPy-like logspace: linspace over exponents, mapped through base**x.

    Raises:
        InvalidRangeError: If end < start, or length is 1 and start != end
        ValidationError: If length is 0 or base <= 0

    Examples:
        >>> logspace(0, 3, 4, 2).tolist()
        [1.0, 2.0, 4.0, 8.0]
    """
    s, e, b = float(start), float(end), float(base)
    check_range(s, e, 'logspace')
    if not b > 0:
        raise ValidationError(f"logspace: base must be positive, got {b}")
    length = check_count(length, 'length')
    step = _linspace_step(s, e, length, 'logspace')

    return np.power(b, s + step * np.arange(length, dtype=np.float64))


def concat(v1: Sequence[T], v2: Sequence[T]) -> Sequence[T]:
    """
    New sequence holding v1 followed by v2.

    Arrays in, array out; any other sequences produce a list.
    """
    if isinstance(v1, np.ndarray) or isinstance(v2, np.ndarray):
        return np.concatenate((np.asarray(v1), np.asarray(v2)))
    return [*v1, *v2]


def cat(value: T, v: Sequence[T]) -> Sequence[T]:
    """New sequence with value prepended to v."""
    if isinstance(v, np.ndarray):
        return np.concatenate((np.asarray([value], dtype=v.dtype), v))
    return [value, *v]
