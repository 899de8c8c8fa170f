"""
Construction utilities.

Public API:
    seq, seq_with_precision         - stepped ranges
    linspace, linspace_with_precision, logspace - fixed-length grids
    concat, cat                     - sequence joins
    zeros, zeros_shape, eye, eye_shape, rand - matrix builders
    cbind, rbind                    - matrix concatenation
"""

from pylinalg.util.sequences import (
    seq,
    seq_with_precision,
    linspace,
    linspace_with_precision,
    logspace,
    concat,
    cat,
)
from pylinalg.util.constructors import (
    zeros,
    zeros_shape,
    eye,
    eye_shape,
    rand,
    cbind,
    rbind,
)

__all__ = [
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
