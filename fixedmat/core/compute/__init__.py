"""
Shared numeric infrastructure for fixedmat.

Submodules:
    precision: Element-type identities, C-style division and rounding
    tolerances: Tolerance tiers for approximate comparison
"""

from fixedmat.core.compute.precision import (
    divide,
    is_integral,
    machine_epsilon,
    one_of,
    round_half_away,
    zero_of,
)
from fixedmat.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Precision
    "divide",
    "is_integral",
    "machine_epsilon",
    "one_of",
    "round_half_away",
    "zero_of",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
