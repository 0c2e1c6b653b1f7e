"""
Print settings for matrix rendering.
"""

from __future__ import annotations

from dataclasses import dataclass

from fixedmat.core.exceptions import ValidationError


@dataclass(frozen=True)
class PrintSettings:
    """
    Formatting options consumed by Matrix.print.

    Attributes:
        width: Minimum field width; values are right-aligned within it
        precision: Significant digits for floating point values
        separator: Written between elements of a row
        end: Written after every row
        is_double_end: Write one extra ``end`` after the last row
    """
    width: int = 3
    precision: int = 3
    separator: str = " "
    end: str = "\n"
    is_double_end: bool = False

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValidationError(f"width: must be non-negative, got {self.width}")
        if self.precision < 0:
            raise ValidationError(f"precision: must be non-negative, got {self.precision}")


DEFAULT_PRINT_SETTINGS = PrintSettings()
