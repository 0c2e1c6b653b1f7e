"""
Element-type arithmetic constants and utilities.

Every matrix computes in its own element type. These helpers produce the
additive and multiplicative identities of a dtype and reproduce C-style
integer division and rounding, which NumPy does not provide directly.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


def zero_of(dtype: np.dtype) -> np.generic:
    """The additive identity of an element type."""
    return dtype.type(0)


def one_of(dtype: np.dtype) -> np.generic:
    """The multiplicative identity of an element type."""
    return dtype.type(1)


def to_element(value: Any, dtype: np.dtype) -> np.generic:
    """
    Convert a scalar to an element type the way a C cast would.

    Floats truncate toward zero when converted to integers and
    out-of-range integers wrap, instead of raising like dtype.type(value).
    """
    return np.asarray(value).astype(dtype)[()]


def is_integral(dtype: np.dtype) -> bool:
    """True for signed and unsigned integer element types."""
    return dtype.kind in ('i', 'u')


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Integral types have no rounding error, so their epsilon is 0.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    dtype = np.dtype(dtype)
    if is_integral(dtype):
        return 0.0
    return float(np.finfo(dtype).eps)


def divide(
    numerator: NDArray[Any] | np.generic,
    denominator: NDArray[Any] | np.generic,
    dtype: np.dtype,
) -> NDArray[Any] | np.generic:
    """
    Divide in the element type's native semantics.

    Floating types use IEEE division (inf/nan on zero denominators).
    Integral types truncate toward zero like C integer division; NumPy's
    floor division is corrected where the signs differ. Division by zero
    is not guarded for either.

    Args:
        numerator: Dividend, scalar or array of dtype
        denominator: Divisor, scalar or array of dtype
        dtype: Element type of the result

    Returns:
        Quotient in dtype
    """
    if not is_integral(dtype):
        return np.true_divide(numerator, denominator, dtype=dtype)

    quotient = np.floor_divide(numerator, denominator)
    remainder = np.remainder(numerator, denominator)
    if dtype.kind == 'i':
        # Floor and truncation differ when the exact quotient is negative
        needs_fix = (remainder != 0) & ((np.sign(numerator) * np.sign(denominator)) < 0)
        quotient = np.where(needs_fix, quotient + 1, quotient)
    return np.asarray(quotient, dtype=dtype)[()]


def round_half_away(values: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Round to nearest, halves away from zero.

    np.round rounds halves to even; C's round() moves them away from zero.
    The fractional part is compared directly, since adding 0.5 first can
    itself round up (0.49999999999999994 + 0.5 == 1.0).

    Args:
        values: Floating point array

    Returns:
        Rounded array of the same dtype
    """
    whole = np.trunc(values)
    with np.errstate(invalid='ignore'):
        # inf - inf is nan, which compares False and keeps inf
        rounded = np.where(np.abs(values - whole) >= 0.5, whole + np.sign(values), whole)
    return rounded.astype(values.dtype)
