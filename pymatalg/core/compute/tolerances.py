"""
Tolerance tiers for numerical comparison.

Defines precision expectations per scalar type:
- FP64: double precision (float64, complex128)
- FP32: single precision (float32, complex64)
- EXACT: integer dtypes compare exactly

Used by MatrixExpression.allclose(), the test suite, and the LU pivot check.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)

FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='Half precision',
)

EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer arithmetic, exact comparison',
)


def select_tolerance(dtype: np.dtype) -> ToleranceTier:
    """Select the tolerance tier for a scalar type."""
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        return EXACT
    eps = np.finfo(dtype).eps
    if eps <= np.finfo(np.float64).eps:
        return FP64
    if eps <= np.finfo(np.float32).eps:
        return FP32
    return FP16


def pivot_threshold(dtype: np.dtype, n: int, scale: float) -> float:
    """
    Magnitude below which a pivot is treated as zero.

    Mirrors the usual rank tolerance: n * eps * scale, where scale is
    the largest absolute entry of the factored matrix.
    """
    return n * float(np.finfo(np.dtype(dtype)).eps) * scale
