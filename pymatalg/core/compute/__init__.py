"""
Shared compute infrastructure for pymatalg.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers per scalar type
"""

from pymatalg.core.compute.timing import Timer
from pymatalg.core.compute.tolerances import (
    ToleranceTier,
    pivot_threshold,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
    "pivot_threshold",
]
