"""
Fixed-dimension matrix module.

Public API:
    Matrix          - Fixed-extent matrix of a fundamental numeric type
    PrintSettings   - Formatting options for Matrix.print
    add, subtract, multiply, divide, matmul
                    - Free operators behind +, -, *, / and @
"""

from fixedmat.matrix.settings import DEFAULT_PRINT_SETTINGS, PrintSettings
from fixedmat.matrix.matrix import Matrix
from fixedmat.matrix.operators import (
    add,
    subtract,
    multiply,
    divide,
    matmul,
)

__all__ = [
    "Matrix",
    "PrintSettings",
    "DEFAULT_PRINT_SETTINGS",
    "add",
    "subtract",
    "multiply",
    "divide",
    "matmul",
]
