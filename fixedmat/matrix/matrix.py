"""
Matrix: fixed-dimension matrix of a fundamental numeric type.

Extents and element type are fixed at construction and never change.
Elements live in one contiguous row-major buffer, element (row, col) at
offset row * cols + col. Matrices have value semantics: every copy is
deep and no two matrices share storage.

Operations that depend on shape check it first and raise DimensionError;
square-only operations (determinant, inverse, complements, identity)
reject non-square matrices the same way.
"""

from __future__ import annotations

import io
import sys
import warnings
from typing import Any, Callable, Iterator, TextIO

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from fixedmat.core.compute.precision import (
    divide,
    is_integral,
    one_of,
    round_half_away,
    to_element,
    zero_of,
)
from fixedmat.core.compute.tolerances import select_tolerance
from fixedmat.core.exceptions import DimensionError, SingularMatrixError, ValidationError
from fixedmat.core.validation import (
    check_dtype,
    check_extent,
    check_index,
    check_integer_range,
    check_minor_shape,
    check_range,
    check_same_shape,
    check_scalar,
    check_size,
    check_square,
)
from fixedmat.matrix import _cofactor
from fixedmat.matrix.settings import DEFAULT_PRINT_SETTINGS, PrintSettings


class Matrix:
    """
    Fixed-dimension matrix with value semantics.

    Construction:
        Matrix(rows, cols, value=None, dtype=np.float64)
        Matrix.from_values(rows, cols, values, dtype=None)
        Matrix.from_array(array2d, dtype=None)

    Supported element types are NumPy signed/unsigned integers and floats.
    All arithmetic happens in the element type: integral matrices divide
    with truncation and wrap on overflow.

    Examples:
        >>> a = Matrix.from_values(2, 2, [1, 2, 3, 4])
        >>> a.determinant()
        np.int64(-2)
        >>> (a * a.identity()) == a
        True
    """

    __slots__ = ('_rows', '_cols', '_data')
    __hash__ = None  # mutable
    # NumPy scalars on the left defer to __radd__/__rmul__
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        value: Any = None,
        *,
        dtype: DTypeLike = np.float64,
    ):
        """
        Fill-construct a rows x cols matrix.

        Args:
            rows: Row extent, at least 1
            cols: Column extent, at least 1
            value: Initial value of every element; None means zero
            dtype: Element type

        Raises:
            ValidationError: On zero extents, unsupported dtype or a
                non-numeric fill value
        """
        self._rows = check_extent(rows, "rows")
        self._cols = check_extent(cols, "cols")
        dtype = check_dtype(dtype)
        if value is None:
            fill = zero_of(dtype)
        else:
            check_scalar(value, "value")
            fill = to_element(value, dtype)
        self._data: NDArray[Any] = np.full(self._rows * self._cols, fill, dtype=dtype)

    @classmethod
    def _wrap(cls, data: NDArray[Any], rows: int, cols: int) -> Matrix:
        """Adopt a freshly built flat buffer without copying or checks."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._data = np.ascontiguousarray(data).reshape(rows * cols)
        return obj

    @classmethod
    def from_values(
        cls,
        rows: int,
        cols: int,
        values: ArrayLike,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Bulk-construct from a flat sequence in row-major order.

        Args:
            rows: Row extent, at least 1
            cols: Column extent, at least 1
            values: Exactly rows * cols numbers
            dtype: Element type; None infers it from values

        Raises:
            SizeMismatchError: If len(values) != rows * cols
            DimensionError: If values is not flat
            ValidationError: On zero extents or non-numeric values
        """
        rows = check_extent(rows, "rows")
        cols = check_extent(cols, "cols")
        array = np.asarray(values)
        if array.ndim != 1:
            raise DimensionError(
                f"values: expected a flat sequence, got {array.ndim}D with shape {array.shape}"
            )
        check_size(array.size, rows, cols, "values")

        source_dtype = check_dtype(array.dtype, "values")
        target = source_dtype if dtype is None else check_dtype(dtype)
        return cls._wrap(array.astype(target), rows, cols)

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
        """
        Construct from a 2-D array; its shape fixes the extents.

        Args:
            array: 2-D array-like (nested lists, numpy array)
            dtype: Element type; None keeps the array's dtype

        Raises:
            DimensionError: If the input is not 2-D
            ValidationError: On an empty axis or non-numeric data
        """
        source = np.asarray(array)
        if source.ndim != 2:
            raise DimensionError(
                f"array: expected 2D input, got {source.ndim}D with shape {source.shape}"
            )
        rows = check_extent(source.shape[0], "rows")
        cols = check_extent(source.shape[1], "cols")

        source_dtype = check_dtype(source.dtype, "array")
        target = source_dtype if dtype is None else check_dtype(dtype)
        return cls._wrap(source.astype(target), rows, cols)

    # --- Extents ---

    @property
    def rows(self) -> int:
        """Row extent."""
        return self._rows

    @property
    def cols(self) -> int:
        """Column extent."""
        return self._cols

    @property
    def size(self) -> int:
        """Number of elements, rows * cols."""
        return self._rows * self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._data.dtype

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    # --- Element access ---

    def element(self, row: int, col: int) -> np.generic:
        """
        Unchecked read of element (row, col).

        The offset row * cols + col is used as is. Indices outside the
        extents give unspecified results (another element, or an
        IndexError from the buffer); validating them is the caller's job.
        Use at() for checked access.
        """
        return self._data[row * self._cols + col]

    def set_element(self, row: int, col: int, value: Any) -> None:
        """Unchecked write of element (row, col); see element()."""
        self._data[row * self._cols + col] = to_element(value, self.dtype)

    def at(self, row: int, col: int) -> np.generic:
        """
        Checked read of element (row, col).

        Raises:
            OutOfBoundsError: If row >= rows, col >= cols or either is negative
        """
        check_index(row, col, self._rows, self._cols)
        return self._data[row * self._cols + col]

    def set_at(self, row: int, col: int, value: Any) -> None:
        """
        Checked write of element (row, col).

        Raises:
            OutOfBoundsError: If row >= rows, col >= cols or either is negative
        """
        check_index(row, col, self._rows, self._cols)
        self._data[row * self._cols + col] = to_element(value, self.dtype)

    def __getitem__(self, key: tuple[int, int]) -> np.generic:
        row, col = key
        return self.at(row, col)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        self.set_at(row, col, value)

    def __iter__(self) -> Iterator[np.generic]:
        """Elements in row-major order."""
        return iter(self._data)

    def __len__(self) -> int:
        return self.size

    # --- Value semantics ---

    def copy(self) -> Matrix:
        """Deep copy."""
        return self._wrap(self._data.copy(), self._rows, self._cols)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def is_close(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Element-wise approximate equality.

        Tolerances default to the tier for the wider of the two element
        types (exact for integers). Matrices of different extents are
        never close.
        """
        _require_matrix(other, "is_close")
        if self.shape != other.shape:
            return False
        tier = select_tolerance(np.result_type(self.dtype, other.dtype))
        return bool(np.allclose(
            self._data,
            other._data,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    # --- Element-wise primitives ---

    def transform(self, op: Callable[[Any], Any]) -> Matrix:
        """Replace every element with op(element), row-major, in place."""
        dtype = self.dtype
        for i in range(self._data.size):
            self._data[i] = to_element(op(self._data[i]), dtype)
        return self

    def transform_with(self, other: Matrix, op: Callable[[Any, Any], Any]) -> Matrix:
        """
        Replace element i with op(self[i], other[i]), in place.

        other's elements are converted to this matrix's element type first.

        Raises:
            DimensionError: If the extents differ
        """
        _require_matrix(other, "transform_with")
        check_same_shape(self.shape, other.shape, "transform_with")
        dtype = self.dtype
        rhs = other._data.astype(dtype)
        for i in range(self._data.size):
            self._data[i] = to_element(op(self._data[i], rhs[i]), dtype)
        return self

    def generate(self, op: Callable[[], Any]) -> Matrix:
        """Replace every element with successive op() results, row-major."""
        dtype = self.dtype
        for i in range(self._data.size):
            self._data[i] = to_element(op(), dtype)
        return self

    def fill(self, value: Any) -> Matrix:
        """Set every element to value."""
        check_scalar(value, "value")
        element = to_element(value, self.dtype)
        return self.generate(lambda: element)

    def fill_random(self, lo: Any, hi: Any, seed: int | None = None) -> Matrix:
        """
        Fill with independent uniform draws from [lo, hi].

        Integral matrices draw the integers in [lo, hi] with both ends
        inclusive; floating matrices draw reals. A fresh generator is seeded
        from OS entropy on every call unless seed is given.

        Raises:
            ValidationError: If lo > hi, or for integral matrices if no
                integer lies in [lo, hi] or a bound is outside the element
                type's range
        """
        rng = np.random.default_rng(seed)
        if is_integral(self.dtype):
            low, high = check_integer_range(lo, hi, self.dtype)
            draws = rng.integers(low, high, size=self.size, dtype=self.dtype, endpoint=True)
        else:
            check_range(lo, hi)
            draws = rng.uniform(float(lo), float(hi), size=self.size)
        values = iter(draws)
        return self.generate(lambda: next(values))

    def to_round(self) -> Matrix:
        """Round every element to nearest, halves away from zero, in place."""
        if not is_integral(self.dtype):
            self._data[:] = round_half_away(self._data)
        return self

    def round(self) -> Matrix:
        return self.copy().to_round()

    def to_floor(self) -> Matrix:
        if not is_integral(self.dtype):
            np.floor(self._data, out=self._data)
        return self

    def floor(self) -> Matrix:
        return self.copy().to_floor()

    def to_ceil(self) -> Matrix:
        if not is_integral(self.dtype):
            np.ceil(self._data, out=self._data)
        return self

    def ceil(self) -> Matrix:
        return self.copy().to_ceil()

    def to_zero(self) -> Matrix:
        """Reset every element to zero in place."""
        return self.fill(0)

    def zero(self) -> Matrix:
        """A zero matrix of the same extents and element type."""
        return self.copy().to_zero()

    # Scalar arithmetic: the scalar is converted to the element type first

    def mul(self, value: Any) -> Matrix:
        """Multiply every element by a scalar, in place."""
        check_scalar(value, "value")
        self._data *= to_element(value, self.dtype)
        return self

    def add(self, value: Any) -> Matrix:
        """Add a scalar to every element, in place."""
        check_scalar(value, "value")
        self._data += to_element(value, self.dtype)
        return self

    def sub(self, value: Any) -> Matrix:
        """Subtract a scalar from every element, in place."""
        check_scalar(value, "value")
        self._data -= to_element(value, self.dtype)
        return self

    def div(self, value: Any) -> Matrix:
        """
        Divide every element by a scalar, in place.

        Zero divisors are not guarded: floating types produce inf/nan,
        integral types follow NumPy (zero with a RuntimeWarning).
        """
        check_scalar(value, "value")
        dtype = self.dtype
        self._data[:] = divide(self._data, to_element(value, dtype), dtype)
        return self

    def sum(self) -> np.generic:
        """Left fold of + over the elements in row-major order, from zero."""
        total = zero_of(self.dtype)
        for value in self._data:
            total = total + value
        return total

    # --- Element-wise matrix combination ---

    def mul_by_element(self, rhs: Matrix) -> Matrix:
        """Hadamard product; rhs is converted to this element type."""
        _require_matrix(rhs, "mul_by_element")
        check_same_shape(self.shape, rhs.shape, "mul_by_element")
        result = self._data * rhs._data.astype(self.dtype)
        return self._wrap(result, self._rows, self._cols)

    def div_by_element(self, rhs: Matrix) -> Matrix:
        """Hadamard quotient; rhs is converted to this element type."""
        _require_matrix(rhs, "div_by_element")
        check_same_shape(self.shape, rhs.shape, "div_by_element")
        dtype = self.dtype
        result = divide(self._data, rhs._data.astype(dtype), dtype)
        return self._wrap(result, self._rows, self._cols)

    def add_matrix(self, rhs: Matrix) -> Matrix:
        """Element-wise sum as a new matrix."""
        _require_matrix(rhs, "add_matrix")
        check_same_shape(self.shape, rhs.shape, "add_matrix")
        result = self._data + rhs._data.astype(self.dtype)
        return self._wrap(result, self._rows, self._cols)

    def sub_matrix(self, rhs: Matrix) -> Matrix:
        """Element-wise difference as a new matrix."""
        _require_matrix(rhs, "sub_matrix")
        check_same_shape(self.shape, rhs.shape, "sub_matrix")
        result = self._data - rhs._data.astype(self.dtype)
        return self._wrap(result, self._rows, self._cols)

    # --- Structural transforms ---

    def transpose(self) -> Matrix:
        """cols x rows matrix with element (r, c) moved to (c, r)."""
        transposed = self._as_2d().T.copy()
        return self._wrap(transposed, self._cols, self._rows)

    def minor(self, row: int, col: int) -> Matrix:
        """
        Submatrix with the given row and column deleted.

        Raises:
            DimensionError: If either extent is 1
            OutOfBoundsError: If row or col is outside the extents
        """
        check_minor_shape(self.shape)
        check_index(row, col, self._rows, self._cols)
        result = _cofactor.minor(self._as_2d(), row, col)
        return self._wrap(result, self._rows - 1, self._cols - 1)

    def minor_item(self, row: int, col: int) -> np.generic:
        """Determinant of minor(row, col), before the cofactor sign."""
        return self.minor(row, col).determinant()

    def identity(self) -> Matrix:
        """Identity matrix of the same extents and element type."""
        return self.copy().to_identity()

    def to_identity(self) -> Matrix:
        """
        Overwrite with the identity in place.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self.shape, "identity")
        self._data.fill(zero_of(self.dtype))
        self._data[::self._cols + 1] = one_of(self.dtype)
        return self

    def convert_to(self, dtype: DTypeLike) -> Matrix:
        """Same-shape matrix with every element cast to dtype."""
        target = check_dtype(dtype)
        return self._wrap(self._data.astype(target), self._rows, self._cols)

    def to_array(self, dtype: DTypeLike | None = None) -> NDArray[Any]:
        """Flat row-major copy of the elements, optionally cast to dtype."""
        target = self.dtype if dtype is None else check_dtype(dtype)
        return self._data.astype(target)

    def to_numpy(self) -> NDArray[Any]:
        """(rows, cols) copy of the elements."""
        return self._as_2d().copy()

    def tolist(self) -> list[list[Any]]:
        """Nested Python lists, one per row."""
        return self._as_2d().tolist()

    def _as_2d(self) -> NDArray[Any]:
        # Read-only view; callers must not write through it
        return self._data.reshape(self._rows, self._cols)

    # --- Determinant, cofactors, inverse ---

    def determinant(self) -> np.generic:
        """
        Determinant by cofactor expansion along the first row.

        Computed in the element type, so integral matrices give exact
        integral results.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self.shape, "determinant")
        return _cofactor.determinant(self._as_2d())

    def calc_complements(self) -> Matrix:
        """
        Cofactor matrix: minor_item(r, c) with sign (-1)^(r + c).

        A 1x1 matrix has the single cofactor 1 (the determinant of the
        empty minor).

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self.shape, "calc_complements")
        if self._rows == 1:
            return self.copy().fill(1)
        result = _cofactor.complements(self._as_2d())
        return self._wrap(result, self._rows, self._cols)

    def inverse(self) -> Matrix:
        """
        Inverse via the adjugate: transpose(complements) * (1 / det).

        A matrix whose determinant is exactly zero yields the zero matrix;
        check determinant() first, or use inverse_strict(), to tell that
        apart from a genuine result. 1 / det is computed in the element
        type, so integral matrices truncate; convert_to(np.float64) first.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self.shape, "inverse")
        det = self.determinant()
        if det == 0:
            return self.zero()
        return self._adjugate_scaled(det)

    def inverse_strict(self) -> Matrix:
        """
        Inverse that refuses singular matrices.

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly zero
        """
        check_square(self.shape, "inverse")
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError(
                f"{self._rows}x{self._cols} matrix is singular (determinant is 0)",
                matrix_name=f"{self._rows}x{self._cols} {self.dtype} matrix",
                determinant=det,
            )
        return self._adjugate_scaled(det)

    def _adjugate_scaled(self, det: np.generic) -> Matrix:
        dtype = self.dtype
        if is_integral(dtype):
            warnings.warn(
                f"inverse of an integral ({dtype}) matrix truncates 1/det to an integer; "
                f"convert_to(np.float64) first for a meaningful result",
                RuntimeWarning,
                stacklevel=3,
            )
        factor = divide(one_of(dtype), det, dtype)
        return self.calc_complements().transpose().mul(factor)

    # --- Printing ---

    def print(self, out: TextIO | None = None, settings: PrintSettings | None = None) -> None:
        """
        Render row by row onto out (default sys.stdout).

        Each element is right-aligned to settings.width; floating values use
        settings.precision significant digits. Elements of a row are joined
        by settings.separator and every row ends with settings.end; one more
        end follows the last row when settings.is_double_end is set.
        """
        out = sys.stdout if out is None else out
        settings = DEFAULT_PRINT_SETTINGS if settings is None else settings
        integral = is_integral(self.dtype)

        for row in self._as_2d():
            cells = [_format_element(value, settings, integral) for value in row]
            out.write(settings.separator.join(cells))
            out.write(settings.end)
        if settings.is_double_end:
            out.write(settings.end)

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.print(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols}, dtype={self.dtype}, {self.tolist()})"

    # --- Operators (see fixedmat.matrix.operators) ---

    def __add__(self, other: Any) -> Matrix:
        if not operators.is_operand(other):
            return NotImplemented
        return operators.add(self, other)

    def __radd__(self, other: Any) -> Matrix:
        if not operators.is_scalar(other):
            return NotImplemented
        return operators.add(self, other)

    def __iadd__(self, other: Any) -> Matrix:
        if not operators.is_operand(other):
            return NotImplemented
        return operators.add_assign(self, other)

    def __sub__(self, other: Any) -> Matrix:
        if not operators.is_operand(other):
            return NotImplemented
        return operators.subtract(self, other)

    def __isub__(self, other: Any) -> Matrix:
        if not operators.is_operand(other):
            return NotImplemented
        return operators.subtract_assign(self, other)

    def __mul__(self, other: Any) -> Matrix:
        if not operators.is_operand(other):
            return NotImplemented
        return operators.multiply(self, other)

    def __rmul__(self, other: Any) -> Matrix:
        if not operators.is_scalar(other):
            return NotImplemented
        return operators.multiply(self, other)

    def __imul__(self, other: Any) -> Matrix:
        # matrix *= matrix can change the extents, so it falls back to __mul__
        if not operators.is_scalar(other):
            return NotImplemented
        return operators.multiply_assign(self, other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return operators.matmul(self, other)

    def __truediv__(self, other: Any) -> Matrix:
        if not operators.is_scalar(other):
            return NotImplemented
        return operators.divide(self, other)

    def __itruediv__(self, other: Any) -> Matrix:
        if not operators.is_scalar(other):
            return NotImplemented
        return operators.divide_assign(self, other)


def _require_matrix(value: Any, operation: str) -> None:
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{operation}: expected a Matrix operand, got {type(value).__name__}"
        )


def _format_element(value: np.generic, settings: PrintSettings, integral: bool) -> str:
    width = settings.width if settings.width > 0 else ""
    if integral:
        return f"{int(value):>{width}d}"
    return f"{float(value):>{width}.{settings.precision}g}"


# operators needs Matrix at import time
from fixedmat.matrix import operators  # noqa: E402
