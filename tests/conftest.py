"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def M22():
    """2x2 float64 matrix type."""
    return Matrix[np.float64, 2, 2]


@pytest.fixture
def diagonally_dominant(rng):
    """Random strictly diagonally dominant 5x5 system (A, b) as numpy arrays."""
    n = 5
    A = rng.uniform(-1.0, 1.0, (n, n))
    A += np.diag(np.abs(A).sum(axis=1) + 1.0)
    b = rng.standard_normal((n, 1))
    return A, b
