"""
Exception hierarchy for fixedmat.

All exceptions inherit from FixedMatError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class FixedMatError(Exception):
    """Base exception for all fixedmat errors."""
    pass


class ValidationError(FixedMatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: zero extents,
    unsupported element types, non-numeric scalars, empty random ranges.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix extents are incorrect or inconsistent.

    Raised when two operands do not share the extents an operation
    requires, or when a square-only operation receives a non-square matrix.
    """
    pass


class SizeMismatchError(DimensionError):
    """
    Bulk construction received the wrong number of values.

    Attributes:
        expected: Number of values required (rows * cols)
        actual: Number of values supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class OutOfBoundsError(ValidationError, IndexError):
    """
    Checked element access outside the matrix extents.

    Also an IndexError so that generic sequence code handles it naturally.

    Attributes:
        row: Requested row index
        col: Requested column index
        rows: Row extent of the matrix
        cols: Column extent of the matrix
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        rows: int | None = None,
        cols: int | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class NumericalError(FixedMatError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by the strict inverse when the determinant is exactly zero.
    The lenient inverse returns a zero matrix instead.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was found to be zero
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
