"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_matrices(rng):
    """Random square float matrices of order 1..4, three of each order."""
    return [
        rng.uniform(-5.0, 5.0, size=(n, n))
        for n in (1, 2, 3, 4)
        for _ in range(3)
    ]


@pytest.fixture
def euler_angles(rng):
    """Random Euler angle triples in [-2pi, 2pi]."""
    return rng.uniform(-2 * np.pi, 2 * np.pi, size=(20, 3))
