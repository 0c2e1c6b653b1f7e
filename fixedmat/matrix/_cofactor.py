"""
Determinant, minor and cofactor kernels.

Direct Laplace (cofactor) expansion along the first row:

    det(A) = Σ_j (-1)^j · a_0j · det(M_0j)

where M_0j is A with row 0 and column j removed. Cost is O(n!), which is
acceptable only for the small fixed extents this library targets; there is
no pivoting or LU path. All arithmetic stays in the array's own dtype, so
integral matrices produce exact integral determinants (modulo overflow).

The kernels take and return plain 2-D arrays. Shape preconditions are
checked by the Matrix methods that call them.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def minor(a: NDArray, row: int, col: int) -> NDArray:
    """Return ``a`` with ``row`` and ``col`` removed.

    Destination indices run over 0..R-2 and 0..C-2. The source offset
    becomes 1 once the destination index reaches the deleted one.

    Parameters
    ----------
    a : NDArray
        (R, C) source, R >= 2 and C >= 2.
    row, col : int
        Row and column to delete.

    Returns
    -------
    NDArray
        (R-1, C-1) array of the same dtype.
    """
    rows, cols = a.shape
    result = np.empty((rows - 1, cols - 1), dtype=a.dtype)

    skip_row = 0
    for i in range(rows - 1):
        if i == row:
            skip_row = 1
        skip_col = 0
        for j in range(cols - 1):
            if j == col:
                skip_col = 1
            result[i, j] = a[i + skip_row, j + skip_col]

    return result


def determinant(a: NDArray) -> np.generic:
    """Determinant of a square array by cofactor expansion along row 0.

    1x1 and 2x2 use closed forms; larger sizes recurse on minors with the
    sign alternating +, -, +, ... across the first row.
    """
    n = a.shape[0]
    if n == 1:
        return a[0, 0]
    if n == 2:
        return a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]

    result = a.dtype.type(0)
    positive = True
    for col in range(n):
        term = a[0, col] * determinant(minor(a, 0, col))
        # Add/subtract rather than multiply by -1 so unsigned types wrap
        # the same way the closed forms do
        result = result + term if positive else result - term
        positive = not positive

    return result


def minor_item(a: NDArray, row: int, col: int) -> np.generic:
    """Determinant of ``minor(a, row, col)``, before the cofactor sign."""
    return determinant(minor(a, row, col))


def complements(a: NDArray) -> NDArray:
    """Cofactor matrix: minor items with the (-1)^(row+col) checkerboard.

    Parameters
    ----------
    a : NDArray
        (n, n) source, n >= 2.

    Returns
    -------
    NDArray
        (n, n) cofactor array of the same dtype.
    """
    n = a.shape[0]
    zero = a.dtype.type(0)
    result = np.empty_like(a)

    for row in range(n):
        for col in range(n):
            item = minor_item(a, row, col)
            result[row, col] = zero - item if (row + col) % 2 else item

    return result
