"""
Tolerance tiers for numerical comparison.

Defines precision expectations per element type:
- Integral types: exact comparison
- float32: relaxed for single-precision arithmetic
- float64 (and wider): near machine precision

Used by Matrix.is_close and the test suite.
"""

from dataclasses import dataclass

from numpy.typing import DTypeLike

from fixedmat.core.compute.precision import machine_epsilon


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integers: any difference is a real difference
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integral element types, bit-for-bit equality',
)

# Half precision has roughly three significant digits
FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='Half precision',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)

# Cofactor expansion accumulates a handful of roundings per level
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, machine precision up to expansion error',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier for an element type by its machine epsilon."""
    eps = machine_epsilon(dtype)
    if eps == 0.0:
        return EXACT
    # float16 eps ~9.8e-4, float32 eps ~1.2e-7
    if eps > 1e-4:
        return FP16
    if eps > 1e-10:
        return FP32
    return FP64
