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
def scores():
    """Small integer sample with a single repeated value."""
    return [10, 20, 20, 30, 40]


@pytest.fixture
def messy_values():
    """Loosely typed input as it arrives from text files and untyped columns."""
    return ["10", 20, " 20 ", "abc", None, "", "30.0", True, 40.0, "1e3"]


@pytest.fixture
def random_samples(rng):
    """A spread of random samples: sizes, scales and shapes."""
    return [
        rng.standard_normal(7),
        rng.standard_normal(100) * 50 + 1000,
        rng.exponential(2.0, 51),
        rng.integers(-5, 5, 40).astype(np.float64),
        rng.uniform(-1e-3, 1e-3, 12),
    ]
