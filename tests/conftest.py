"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from fixedmat import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a2():
    """A = [[1, 2], [3, 4]] (int64)."""
    return Matrix.from_values(2, 2, [1, 2, 3, 4])


@pytest.fixture
def b2():
    """B = [[5, 6], [7, 8]] (int64)."""
    return Matrix.from_values(2, 2, [5, 6, 7, 8])


@pytest.fixture
def invertible3():
    """Well-conditioned 3x3 float matrix with determinant -306."""
    return Matrix.from_values(3, 3, [6.0, 1.0, 1.0, 4.0, -2.0, 5.0, 2.0, 8.0, 7.0])


@pytest.fixture
def random_square(rng):
    """Factory for random float64 n x n matrices (diagonally dominant)."""
    def make(n):
        values = rng.uniform(-1.0, 1.0, size=(n, n)) + n * np.eye(n)
        return Matrix.from_array(values)
    return make
