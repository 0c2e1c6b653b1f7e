"""
fixedmat: fixed-dimension matrices for fundamental numeric types.

Small matrices (think 2x2 to 8x8) with value semantics, exact arithmetic in
their own element type, and the classic cofactor algorithms: determinant
by Laplace expansion, cofactor matrix, adjugate inverse.

Submodules:
    matrix: The Matrix type, print settings and free operators
    printing: Generic print dispatch for matrices and plain objects
    core: Exceptions, validation and numeric helpers
"""

__version__ = "0.1.0"

from fixedmat.core.exceptions import (
    FixedMatError,
    ValidationError,
    DimensionError,
    SizeMismatchError,
    OutOfBoundsError,
    NumericalError,
    SingularMatrixError,
)
from fixedmat.matrix import Matrix, PrintSettings
from fixedmat.printing import print_objects

__all__ = [
    "__version__",
    "Matrix",
    "PrintSettings",
    "print_objects",
    "FixedMatError",
    "ValidationError",
    "DimensionError",
    "SizeMismatchError",
    "OutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
]
