"""
Dense matrix with explicit memory layout.

A Matrix owns a flat float64 buffer plus (row, col, shape). The Shape
tag decides how a logical coordinate (i, j) maps to a physical offset:

    Row: offset = i * col + j
    Col: offset = j * row + i

_offset() is the only place that formula lives. Every element read or
write, including the vectorised ones used by change_shape() and
to_array(), goes through it, so no algorithm depends on the layout.

Matrices have value semantics: constructors copy their input buffers
and every operation returns a new Matrix unless it is documented as
in-place (set, __setitem__).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import svdvals

from pylinalg.core.exceptions import (
    DegenerateNormError,
    DimensionError,
    ValidationError,
)
from pylinalg.core.precision import DEFAULT_ATOL, DEFAULT_RTOL, is_close
from pylinalg.core.validation import (
    check_count,
    check_index,
    check_same_dims,
    check_shared_dim,
    check_vector,
)
from pylinalg.traits.norm import Norm, NormKind


class Shape(Enum):
    """Physical storage order of a Matrix."""
    Row = 'row'
    Col = 'col'

    def flip(self) -> Shape:
        return Shape.Col if self is Shape.Row else Shape.Row


Row = Shape.Row
Col = Shape.Col


def _offset(i, j, row: int, col: int, shape: Shape):
    """
    Physical offset of logical (i, j).

    Works element-wise on integer arrays as well as on plain ints.
    """
    if shape is Shape.Row:
        return i * col + j
    return j * row + i


class Matrix:
    """
    Dense row x col matrix of float64 values.

    Attributes:
        data: Flat physical buffer, length row * col
        row: Number of rows
        col: Number of columns
        shape: Physical layout (Row or Col)

    Construction:
        Matrix(data, row, col, shape)
        Matrix.from_array(array2d, shape)
        matrix(data, row, col, shape)

    Examples:
        >>> a = Matrix([1, 2, 3, 4], 2, 2, Row)
        >>> a.at(0, 1)
        2.0
        >>> a.change_shape().data.tolist()
        [1.0, 3.0, 2.0, 4.0]
    """

    __slots__ = ('data', 'row', 'col', 'shape')

    # numpy scalars defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(
        self,
        data: ArrayLike,
        row: int,
        col: int,
        shape: Shape = Row,
    ):
        row = check_count(row, 'row')
        col = check_count(col, 'col')
        if not isinstance(shape, Shape):
            raise ValidationError(f"shape: expected Shape, got {type(shape).__name__}")

        try:
            buffer = np.array(data, dtype=np.float64).ravel()
        except (ValueError, TypeError) as e:
            raise ValidationError(f"data: cannot convert to float array: {e}") from e

        if buffer.shape[0] != row * col:
            raise DimensionError(
                f"data: length {buffer.shape[0]} does not fill a {row}x{col} matrix",
                expected=row * col,
                actual=buffer.shape[0],
                operation='matrix',
            )

        self.data: NDArray[np.floating[Any]] = buffer
        self.row = row
        self.col = col
        self.shape = shape

    @classmethod
    def from_array(cls, array: ArrayLike, shape: Shape = Row) -> Matrix:
        """
        Build from a 2-D array-like of logical values.

        Args:
            array: 2-D array-like (nested lists, numpy array)
            shape: Layout of the new Matrix

        Raises:
            DimensionError: If the input is not 2-D
        """
        a = np.asarray(array, dtype=np.float64)
        if a.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {a.ndim}D with shape {a.shape}",
                expected=2,
                actual=a.ndim,
                operation='from_array',
            )
        r, c = a.shape
        data = a.ravel(order='C' if shape is Row else 'F')
        return cls(data, r, c, shape)

    # ─── Layout-transparent access ─────────────────────────────────────

    def at(self, i: int, j: int) -> float:
        """
        Read logical element (i, j).

        Raises:
            IndexOutOfBoundsError: If (i, j) is outside the matrix
        """
        check_index(i, j, self.row, self.col)
        return float(self.data[_offset(i, j, self.row, self.col, self.shape)])

    def set(self, i: int, j: int, value: float) -> None:
        """
        Write logical element (i, j) in place.

        Raises:
            IndexOutOfBoundsError: If (i, j) is outside the matrix
        """
        check_index(i, j, self.row, self.col)
        self.data[_offset(i, j, self.row, self.col, self.shape)] = value

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = _unpack_index(index)
        return self.at(i, j)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = _unpack_index(index)
        self.set(i, j, value)

    def _physical(self, shape: Shape) -> NDArray[np.floating[Any]]:
        """Buffer reordered into ``shape`` (no copy when already there)."""
        if shape is self.shape:
            return self.data
        ii, jj = np.indices((self.row, self.col))
        out = np.empty_like(self.data)
        out[_offset(ii, jj, self.row, self.col, shape)] = \
            self.data[_offset(ii, jj, self.row, self.col, self.shape)]
        return out

    def change_shape(self) -> Matrix:
        """
        Same logical matrix in the opposite layout.

        Materializes a fully reordered buffer. Converting twice
        reproduces the original buffer exactly.
        """
        target = self.shape.flip()
        return Matrix(self._physical(target), self.row, self.col, target)

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Logical values as a new (row, col) numpy array."""
        return self._physical(Row).reshape(self.row, self.col).copy()

    def to_vec(self) -> NDArray[np.floating[Any]]:
        """Logical values flattened in row-major order."""
        return self._physical(Row).copy()

    # ─── Structure ─────────────────────────────────────────────────────

    @property
    def dims(self) -> tuple[int, int]:
        """(row, col)"""
        return (self.row, self.col)

    def copy(self) -> Matrix:
        return Matrix(self.data, self.row, self.col, self.shape)

    def row_at(self, i: int) -> NDArray[np.floating[Any]]:
        """Row i as a 1-D array."""
        check_index(i, 0, self.row, max(self.col, 1))
        return self.data[_offset(i, np.arange(self.col), self.row, self.col, self.shape)]

    def col_at(self, j: int) -> NDArray[np.floating[Any]]:
        """Column j as a 1-D array."""
        check_index(0, j, max(self.row, 1), self.col)
        return self.data[_offset(np.arange(self.row), j, self.row, self.col, self.shape)]

    def diag(self) -> NDArray[np.floating[Any]]:
        """Main diagonal as a 1-D array."""
        k = np.arange(min(self.row, self.col))
        return self.data[_offset(k, k, self.row, self.col, self.shape)]

    def transpose(self) -> Matrix:
        """
        Transpose without moving data.

        A Row-major r x c buffer read as Col-major is the c x r transpose.
        """
        return Matrix(self.data, self.col, self.row, self.shape.flip())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def submat(self, start: tuple[int, int], end: tuple[int, int]) -> Matrix:
        """
        Sub-block between two corners, both inclusive.

        Args:
            start: Top-left (i, j)
            end: Bottom-right (i, j)

        Returns:
            Matrix of size (end_i - start_i + 1) x (end_j - start_j + 1)
            in this matrix's layout

        Raises:
            IndexOutOfBoundsError: If either corner is outside the matrix
            ValidationError: If end precedes start
        """
        check_index(*start, self.row, self.col)
        check_index(*end, self.row, self.col)
        (i0, j0), (i1, j1) = start, end
        if i1 < i0 or j1 < j0:
            raise ValidationError(f"submat: end {end} precedes start {start}")

        r, c = i1 - i0 + 1, j1 - j0 + 1
        ii, jj = np.indices((r, c))
        block = self.data[_offset(ii + i0, jj + j0, self.row, self.col, self.shape)]
        return Matrix.from_array(block, self.shape)

    # ─── Vector / Normed / InnerProduct ────────────────────────────────

    def _aligned(self, other: Matrix, operation: str) -> NDArray[np.floating[Any]]:
        """other's buffer in self's layout, after a dimension check."""
        if not isinstance(other, Matrix):
            raise TypeError(f"{operation}: expected Matrix, got {type(other).__name__}")
        check_same_dims(self.dims, other.dims, operation)
        return other._physical(self.shape)

    def add_vec(self, rhs: Matrix) -> Matrix:
        return Matrix(self.data + self._aligned(rhs, 'add_vec'), self.row, self.col, self.shape)

    def sub_vec(self, rhs: Matrix) -> Matrix:
        return Matrix(self.data - self._aligned(rhs, 'sub_vec'), self.row, self.col, self.shape)

    def mul_scalar(self, rhs: float) -> Matrix:
        return Matrix(self.data * float(rhs), self.row, self.col, self.shape)

    def norm(self, kind: Norm = Norm.F) -> float:
        """
        Matrix norm.

        F      sqrt of the sum of squares
        Lpq    (sum_j (sum_i |a_ij|^p)^(q/p))^(1/q); an infinite p or q
               takes the max over rows or columns instead
        L1     max absolute column sum
        LInf   max absolute row sum
        L2     spectral norm (largest singular value)

        Raises:
            ValidationError: For Lp, which has no closed form on matrices
        """
        if self.data.shape[0] == 0:
            return 0.0

        a = np.abs(self.to_array())
        if kind.kind is NormKind.F:
            return float(np.sqrt(np.sum(a * a)))
        if kind.kind is NormKind.LPQ:
            if np.isinf(kind.p):
                col_norms = np.max(a, axis=0)
            else:
                col_norms = np.sum(a ** kind.p, axis=0) ** (1.0 / kind.p)
            if np.isinf(kind.q):
                return float(np.max(col_norms))
            return float(np.sum(col_norms ** kind.q) ** (1.0 / kind.q))
        if kind.kind is NormKind.L1:
            return float(np.max(np.sum(a, axis=0)))
        if kind.kind is NormKind.LINF:
            return float(np.max(np.sum(a, axis=1)))
        if kind.kind is NormKind.L2:
            return float(svdvals(self.to_array())[0])
        raise ValidationError(f"{kind!r} is not defined for matrices")

    def normalize(self, kind: Norm = Norm.F) -> Matrix:
        """
        Scale to unit norm.

        Raises:
            DegenerateNormError: If the norm is zero
        """
        n = self.norm(kind)
        if n == 0:
            raise DegenerateNormError(f"cannot normalize zero matrix under {kind!r}", kind=kind)
        return self.mul_scalar(1.0 / n)

    def dot(self, rhs: Matrix) -> float:
        """Frobenius inner product, sum of a_ij * b_ij."""
        return float(np.dot(self.data, self._aligned(rhs, 'dot')))

    # ─── LinearOp / MatrixProduct ──────────────────────────────────────

    def apply(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Matrix-vector product.

        Raises:
            DimensionError: If len(rhs) != col
        """
        v = check_vector(rhs, 'rhs')
        check_shared_dim(self.col, v.shape[0], 'col count vs vector length', 'apply')
        return self.to_array() @ v

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product, result in self's layout.

        Raises:
            DimensionError: If self.col != other.row
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"matmul: expected Matrix, got {type(other).__name__}")
        check_shared_dim(self.col, other.row, 'inner dimension', 'matmul')
        return Matrix.from_array(self.to_array() @ other.to_array(), self.shape)

    def kronecker(self, other: Matrix) -> Matrix:
        """Kronecker product, (r1*r2) x (c1*c2), in self's layout."""
        if not isinstance(other, Matrix):
            raise TypeError(f"kronecker: expected Matrix, got {type(other).__name__}")
        return Matrix.from_array(np.kron(self.to_array(), other.to_array()), self.shape)

    def hadamard(self, other: Matrix) -> Matrix:
        """
        Element-wise product.

        Raises:
            DimensionError: If dimensions differ
        """
        return Matrix(self.data * self._aligned(other, 'hadamard'), self.row, self.col, self.shape)

    # ─── Operators ─────────────────────────────────────────────────────

    def __add__(self, other: Matrix) -> Matrix:
        return self.add_vec(other)

    def __sub__(self, other: Matrix) -> Matrix:
        return self.sub_vec(other)

    def __neg__(self) -> Matrix:
        return self.mul_scalar(-1.0)

    def __mul__(self, other: float) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self.mul_scalar(other)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self.matmul(other)
        return self.apply(other)

    def __eq__(self, other: object) -> bool:
        """Logical equality; layouts may differ."""
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.dims != other.dims:
            return False
        return bool(np.array_equal(self.data, other._physical(self.shape)))

    __hash__ = None

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """Logical closeness within tolerance; False on dimension mismatch."""
        if not isinstance(other, Matrix):
            raise TypeError(f"allclose: expected Matrix, got {type(other).__name__}")
        if self.dims != other.dims:
            return False
        return bool(np.all(is_close(self.data, other._physical(self.shape), rtol, atol)))

    def __repr__(self) -> str:
        return (
            f"Matrix({self.to_array().tolist()!r}, "
            f"row={self.row}, col={self.col}, shape={self.shape.name})"
        )


def _unpack_index(index: Any) -> tuple[int, int]:
    if not (isinstance(index, tuple) and len(index) == 2):
        raise ValidationError(f"index: expected (i, j) tuple, got {index!r}")
    return index


def matrix(
    data: ArrayLike,
    row: int,
    col: int,
    shape: Shape = Row,
) -> Matrix:
    """
    R-like matrix constructor.

    Examples:
        >>> matrix([1, 2, 3, 4], 2, 2, Col).at(0, 1)
        3.0
    """
    return Matrix(data, row, col, shape)


def py_matrix(rows: Sequence[Iterable[float]]) -> Matrix:
    """
    Row-shaped Matrix from nested row sequences.

    Raises:
        DimensionError: If rows have unequal lengths
    """
    rows = [list(r) for r in rows]
    if not rows:
        return Matrix([], 0, 0, Row)
    width = len(rows[0])
    for k, r in enumerate(rows):
        check_shared_dim(width, len(r), f'length of row {k}', 'py_matrix')
    return Matrix([x for r in rows for x in r], len(rows), width, Row)


def ml_matrix(text: str) -> Matrix:
    """
    MATLAB-like literal: rows separated by ';', entries by whitespace
    or commas.

    Examples:
        >>> ml_matrix("1 2; 3 4").at(1, 0)
        3.0
    """
    rows = []
    for chunk in text.strip().split(';'):
        tokens = chunk.replace(',', ' ').split()
        if not tokens:
            continue
        try:
            rows.append([float(t) for t in tokens])
        except ValueError as e:
            raise ValidationError(f"ml_matrix: cannot parse {chunk.strip()!r}: {e}") from e
    return py_matrix(rows)
