"""
Exception hierarchy for PyLinAlg.

All exceptions inherit from PyLinAlgError to allow catching any
library-specific error. Conditions that also have a natural builtin
counterpart (IndexError, ZeroDivisionError) inherit from it as well,
so generic handlers keep working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinAlgError(Exception):
    """Base exception for all PyLinAlg errors."""
    pass


class ValidationError(PyLinAlgError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Row/column counts are incompatible for the requested operation.
    
    Raised by binary operations (cbind, rbind, hadamard, elementwise
    arithmetic, matrix products) when the shared dimensions disagree,
    and when flat data does not fill the declared row x col grid.
    Never silently truncated or broadcast.
    
    Attributes:
        expected: Expected dimension(s)
        actual: Dimension(s) actually received
        operation: Name of the operation that failed
    """
    
    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.operation = operation


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Coordinate access outside [0, row) x [0, col).
    
    No clamping and no negative wrap-around.
    
    Attributes:
        index: The offending (i, j) coordinate
        bounds: The (row, col) dimensions of the matrix
    """
    
    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        bounds: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class InvalidRangeError(ValidationError):
    """
    Sequence range is invalid (end < start, or an unrepresentable
    single-point range).
    
    Checked before any allocation happens.
    
    Attributes:
        start: Requested start value
        end: Requested end value
    """
    
    def __init__(
        self,
        message: str,
        start: float | None = None,
        end: float | None = None
    ):
        super().__init__(message)
        self.start = start
        self.end = end


class UnsupportedDimensionError(ValidationError):
    """
    Operation is only defined for specific vector dimensions.
    
    Attributes:
        dimension: Dimension that was received
        supported: Dimensions the operation accepts
    """
    
    def __init__(
        self,
        message: str,
        dimension: int | None = None,
        supported: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.dimension = dimension
        self.supported = supported


class NumericalError(PyLinAlgError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateNormError(NumericalError, ZeroDivisionError):
    """
    Normalization requested on a value whose norm is zero.
    
    Attributes:
        kind: The Norm variant that evaluated to zero
    """
    
    def __init__(self, message: str, kind: object | None = None):
        super().__init__(message)
        self.kind = kind


class PrecisionWarning(UserWarning):
    """Rounding to the requested precision merged distinct values."""
    pass
