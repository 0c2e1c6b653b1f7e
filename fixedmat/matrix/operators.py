"""
Free arithmetic operators for Matrix.

Each operator lowers to Matrix member operations:

    matrix (+|-) scalar    -> copy, then add/sub
    matrix (*|/) scalar    -> copy, then mul/div
    matrix (+|-) matrix    -> add_matrix/sub_matrix (identical extents)
    matrix  *    matrix    -> matmul (lhs.cols == rhs.rows)

The compound forms (+=, -=, *=, /=) mutate the left operand instead of
copying it. Scalars are converted to the left operand's element type; the
result always has the left operand's element type.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any

import numpy as np

from fixedmat.core.compute.precision import zero_of
from fixedmat.core.validation import check_product_shape
from fixedmat.matrix.matrix import Matrix


def is_scalar(value: Any) -> bool:
    """True for real numbers usable as scalar operands (bool excluded)."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def is_operand(value: Any) -> bool:
    """True for values an arithmetic operator accepts: matrices and scalars."""
    return isinstance(value, Matrix) or is_scalar(value)


def add(lhs: Matrix, rhs: Matrix | float) -> Matrix:
    """lhs + rhs as a new matrix."""
    if isinstance(rhs, Matrix):
        return lhs.add_matrix(rhs)
    return lhs.copy().add(rhs)


def subtract(lhs: Matrix, rhs: Matrix | float) -> Matrix:
    """lhs - rhs as a new matrix."""
    if isinstance(rhs, Matrix):
        return lhs.sub_matrix(rhs)
    return lhs.copy().sub(rhs)


def multiply(lhs: Matrix, rhs: Matrix | float) -> Matrix:
    """Matrix product for a matrix rhs, scaling for a scalar rhs."""
    if isinstance(rhs, Matrix):
        return matmul(lhs, rhs)
    return lhs.copy().mul(rhs)


def divide(lhs: Matrix, rhs: float) -> Matrix:
    """lhs / scalar as a new matrix."""
    return lhs.copy().div(rhs)


def add_assign(lhs: Matrix, rhs: Matrix | float) -> Matrix:
    """lhs += rhs; returns lhs."""
    if isinstance(rhs, Matrix):
        return lhs.transform_with(rhs, operator.add)
    return lhs.add(rhs)


def subtract_assign(lhs: Matrix, rhs: Matrix | float) -> Matrix:
    """lhs -= rhs; returns lhs."""
    if isinstance(rhs, Matrix):
        return lhs.transform_with(rhs, operator.sub)
    return lhs.sub(rhs)


def multiply_assign(lhs: Matrix, rhs: float) -> Matrix:
    """lhs *= scalar; returns lhs."""
    return lhs.mul(rhs)


def divide_assign(lhs: Matrix, rhs: float) -> Matrix:
    """lhs /= scalar; returns lhs."""
    return lhs.div(rhs)


def matmul(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    Standard matrix product.

    result(i, j) = Σ_k lhs(i, k) · rhs(k, j), accumulated from zero in
    increasing k in lhs's element type; rhs is converted to it first.

    Args:
        lhs: (m, n) matrix
        rhs: (n, p) matrix

    Returns:
        (m, p) matrix of lhs's element type

    Raises:
        DimensionError: If lhs.cols != rhs.rows
    """
    check_product_shape(lhs.shape, rhs.shape)
    dtype = lhs.dtype
    a = lhs.to_numpy()
    b = rhs.to_numpy().astype(dtype)
    rows, inner = a.shape
    cols = b.shape[1]

    result = Matrix(rows, cols, dtype=dtype)
    for i in range(rows):
        for j in range(cols):
            total = zero_of(dtype)
            for k in range(inner):
                total = total + a[i, k] * b[k, j]
            result.set_element(i, j, total)

    return result
