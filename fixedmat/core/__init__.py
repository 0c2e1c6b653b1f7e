"""
Core infrastructure for fixedmat.

This module provides the shared abstractions and utilities the matrix type
is built on.

Key components:
    protocols: Printable protocol used by the print dispatcher
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Element-type arithmetic and tolerance tiers
"""

from fixedmat.core.protocols import Printable
from fixedmat.core.exceptions import (
    FixedMatError,
    ValidationError,
    DimensionError,
    SizeMismatchError,
    OutOfBoundsError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Printable",
    # Exceptions
    "FixedMatError",
    "ValidationError",
    "DimensionError",
    "SizeMismatchError",
    "OutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
]
