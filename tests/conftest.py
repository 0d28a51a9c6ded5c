"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def identity3():
    """3x3 identity built element by element."""
    E = Matrix(3, 3)
    E.set(1.0, 0, 0)
    E.set(1.0, 1, 1)
    E.set(1.0, 2, 2)
    return E


@pytest.fixture
def random_system(rng):
    """Diagonally dominant 6x6 system with a known solution."""
    n = 6
    A = rng.uniform(-1.0, 1.0, (n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return Matrix.from_rows(A), Matrix.from_values(b), x_true
