"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from mlnutils import set_domain_policy


@pytest.fixture(autouse=True)
def default_domain_policy():
    """Every test starts and ends with the propagating policy."""
    set_domain_policy("propagate")
    yield
    set_domain_policy("propagate")


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(42)


@pytest.fixture
def interior_probabilities():
    """Probabilities spread across the open unit interval."""
    return [0.01, 0.1, 0.3, 0.5, 0.7, 0.9, 0.99]


@pytest.fixture
def probability_grid(rng):
    """Sorted random probabilities strictly inside (0, 1)."""
    return np.sort(rng.uniform(1e-6, 1 - 1e-6, size=500))
