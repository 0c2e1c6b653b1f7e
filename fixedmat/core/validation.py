"""
Input validation utilities for fixedmat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion beyond converting a scalar to the element type
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from fixedmat.core.exceptions import (
    DimensionError,
    OutOfBoundsError,
    SizeMismatchError,
    ValidationError,
)


# Signed integer, unsigned integer, floating point
SUPPORTED_DTYPE_KINDS = frozenset({'i', 'u', 'f'})


def check_dtype(dtype: DTypeLike, name: str = "dtype") -> np.dtype:
    """
    Validate and normalize an element type.

    Accepts anything NumPy understands as a dtype (np.int32, 'float64',
    int, float) and rejects everything that is not a fundamental numeric
    type: bool, complex, object, string and datetime dtypes.

    Args:
        dtype: Element type to validate
        name: Parameter name for error messages

    Returns:
        The normalized numpy dtype

    Raises:
        ValidationError: If dtype is not a supported numeric type
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a dtype: {dtype!r}") from e

    if result.kind not in SUPPORTED_DTYPE_KINDS:
        raise ValidationError(
            f"{name}: unsupported element type {result}, "
            f"expected a signed/unsigned integer or floating point type"
        )

    return result


def check_extent(value: Any, name: str) -> int:
    """
    Verify a row or column extent is a positive integer.

    Args:
        value: Extent to check
        name: Parameter name for error messages

    Returns:
        The extent as a Python int

    Raises:
        ValidationError: If the extent is not an integer or is below 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer extent, got {value!r}")

    extent = int(value)
    if extent < 1:
        raise ValidationError(f"{name}: extent must be at least 1, got {extent}")

    return extent


def check_size(actual: int, rows: int, cols: int, name: str) -> None:
    """
    Verify a flat sequence holds exactly rows * cols values.

    Args:
        actual: Number of values supplied
        rows: Row extent
        cols: Column extent
        name: Parameter name for error messages

    Raises:
        SizeMismatchError: If the count differs from rows * cols
    """
    expected = rows * cols
    if actual != expected:
        raise SizeMismatchError(
            f"{name}: expected {expected} values for a {rows}x{cols} matrix, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_index(row: int, col: int, rows: int, cols: int) -> None:
    """
    Verify (row, col) addresses an element inside a rows x cols matrix.

    Negative indices are rejected; there is no wrap-around.

    Raises:
        OutOfBoundsError: If either index is outside its extent
    """
    if not 0 <= row < rows:
        raise OutOfBoundsError(
            f"row index {row} out of range for matrix with {rows} rows",
            row=row, col=col, rows=rows, cols=cols,
        )
    if not 0 <= col < cols:
        raise OutOfBoundsError(
            f"column index {col} out of range for matrix with {cols} columns",
            row=row, col=col, rows=rows, cols=cols,
        )


def check_same_shape(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands share identical extents.

    Raises:
        DimensionError: If the shapes differ
    """
    if lhs_shape != rhs_shape:
        raise DimensionError(
            f"{operation}: operands must have identical extents, "
            f"got {lhs_shape[0]}x{lhs_shape[1]} and {rhs_shape[0]}x{rhs_shape[1]}"
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{operation}: requires a square matrix, got {rows}x{cols}"
        )


def check_product_shape(
    lhs_shape: tuple[int, int],
    rhs_shape: tuple[int, int],
) -> None:
    """
    Verify lhs.cols == rhs.rows for a matrix product.

    Raises:
        DimensionError: If the inner extents differ
    """
    if lhs_shape[1] != rhs_shape[0]:
        raise DimensionError(
            f"matrix product: left operand has {lhs_shape[1]} columns "
            f"but right operand has {rhs_shape[0]} rows "
            f"({lhs_shape[0]}x{lhs_shape[1]} * {rhs_shape[0]}x{rhs_shape[1]})"
        )


def check_minor_shape(shape: tuple[int, int]) -> None:
    """
    Verify a minor can be taken: both extents at least 2.

    Raises:
        DimensionError: If either extent is 1
    """
    rows, cols = shape
    if rows < 2 or cols < 2:
        raise DimensionError(
            f"minor: requires at least 2 rows and 2 columns, got {rows}x{cols}"
        )


def check_scalar(value: Any, name: str) -> None:
    """
    Verify a value is a real numeric scalar.

    Python and NumPy ints and floats are accepted; bool and complex are not.

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real numeric scalar, got {value!r}")


def check_range(lo: Any, hi: Any) -> None:
    """
    Verify [lo, hi] is a non-empty closed range.

    Raises:
        ValidationError: If lo > hi
    """
    check_scalar(lo, "lo")
    check_scalar(hi, "hi")
    if lo > hi:
        raise ValidationError(f"empty range: lo={lo} is greater than hi={hi}")


def check_integer_range(lo: Any, hi: Any, dtype: DTypeLike) -> tuple[int, int]:
    """
    Narrow [lo, hi] to the integers it contains for an integral dtype.

    Args:
        lo: Lower bound, inclusive
        hi: Upper bound, inclusive
        dtype: Integral element type the draws must fit

    Returns:
        (ceil(lo), floor(hi)) as Python ints

    Raises:
        ValidationError: If lo > hi, a bound is not finite, no integer lies
            in [lo, hi], or a bound falls outside the range of dtype
    """
    check_range(lo, hi)
    dtype = np.dtype(dtype)

    bounds = {}
    for name, value, rounding in (("lo", lo, math.ceil), ("hi", hi, math.floor)):
        if isinstance(value, numbers.Integral):
            bounds[name] = int(value)
        elif not math.isfinite(value):
            raise ValidationError(f"{name}: must be finite for {dtype} elements, got {value}")
        else:
            bounds[name] = rounding(value)

    low, high = bounds["lo"], bounds["hi"]
    if low > high:
        raise ValidationError(f"empty range: no integer lies in [{lo}, {hi}]")

    info = np.iinfo(dtype)
    if low < info.min:
        raise ValidationError(f"lo: {lo} is below the minimum {info.min} of {dtype}")
    if high > info.max:
        raise ValidationError(f"hi: {hi} is above the maximum {info.max} of {dtype}")
    return low, high
