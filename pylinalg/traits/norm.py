"""
Norm selectors.

A Norm is a pure tag passed by value to norm-computing operations. It
owns no state beyond the exponents of the parameterised variants.

Vector norms:
    L1, L2, Lp(p), LInf
Matrix norms:
    F (Frobenius), Lpq(p, q) (element-wise pq)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

import numpy as np

from pylinalg.core.exceptions import ValidationError


class NormKind(Enum):
    """Variant tag of a Norm."""
    L1 = 'l1'
    L2 = 'l2'
    LP = 'lp'
    LINF = 'linf'
    F = 'frobenius'
    LPQ = 'lpq'


_VECTOR_KINDS = frozenset({NormKind.L1, NormKind.L2, NormKind.LP, NormKind.LINF})
_MATRIX_KINDS = frozenset({NormKind.F, NormKind.LPQ})


@dataclass(frozen=True)
class Norm:
    """
    Immutable norm selector.

    Use the singletons ``Norm.L1``, ``Norm.L2``, ``Norm.LInf``, ``Norm.F``
    or the factories ``Norm.Lp(p)`` and ``Norm.Lpq(p, q)``. Exponents
    must be >= 1.

    Examples:
        >>> Norm.Lp(3).p
        3.0
        >>> Norm.Lpq(2, 2) == Norm.Lpq(2.0, 2.0)
        True
    """
    kind: NormKind
    p: float | None = None
    q: float | None = None

    L1: ClassVar[Norm]
    L2: ClassVar[Norm]
    LInf: ClassVar[Norm]
    F: ClassVar[Norm]

    def __post_init__(self):
        if self.kind is NormKind.LP:
            object.__setattr__(self, 'p', _check_exponent(self.p, 'p'))
            if self.q is not None:
                raise ValidationError("Lp norm takes a single exponent, got q")
        elif self.kind is NormKind.LPQ:
            object.__setattr__(self, 'p', _check_exponent(self.p, 'p'))
            object.__setattr__(self, 'q', _check_exponent(self.q, 'q'))
        elif self.p is not None or self.q is not None:
            raise ValidationError(f"{self.kind.name} norm takes no exponents")

    @classmethod
    def Lp(cls, p: float) -> Norm:
        """Vector p-norm, (sum |x_i|^p)^(1/p)."""
        return cls(NormKind.LP, p=p)

    @classmethod
    def Lpq(cls, p: float, q: float) -> Norm:
        """Element-wise matrix norm, (sum_j (sum_i |a_ij|^p)^(q/p))^(1/q)."""
        return cls(NormKind.LPQ, p=p, q=q)

    @property
    def is_vector_norm(self) -> bool:
        return self.kind in _VECTOR_KINDS

    @property
    def is_matrix_norm(self) -> bool:
        return self.kind in _MATRIX_KINDS

    def __repr__(self) -> str:
        if self.kind is NormKind.LP:
            return f"Norm.Lp({self.p:g})"
        if self.kind is NormKind.LPQ:
            return f"Norm.Lpq({self.p:g}, {self.q:g})"
        return f"Norm.{_SINGLETON_NAMES[self.kind]}"


def _check_exponent(value: float | None, name: str) -> float:
    if value is None:
        raise ValidationError(f"{name}: exponent is required")
    value = float(value)
    if np.isnan(value) or value < 1:
        raise ValidationError(f"{name}: exponent must be >= 1, got {value}")
    return value


_SINGLETON_NAMES = {
    NormKind.L1: 'L1',
    NormKind.L2: 'L2',
    NormKind.LINF: 'LInf',
    NormKind.F: 'F',
}

Norm.L1 = Norm(NormKind.L1)
Norm.L2 = Norm(NormKind.L2)
Norm.LInf = Norm(NormKind.LINF)
Norm.F = Norm(NormKind.F)
