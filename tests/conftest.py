"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from statsengine.datasets import toothgrowth


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def tg():
    """The 60-observation ToothGrowth dataset."""
    return toothgrowth()


@pytest.fixture
def vc_low():
    """ToothGrowth VC at dose 0.5."""
    return np.array([4.2, 11.5, 7.3, 5.8, 6.4, 10.0, 11.2, 11.2, 5.2, 7.0])


@pytest.fixture
def oj_low():
    """ToothGrowth OJ at dose 0.5."""
    return np.array([15.2, 21.5, 17.6, 9.7, 14.5, 10.0, 8.2, 9.4, 16.5, 9.7])


@pytest.fixture
def vc_mid():
    """ToothGrowth VC at dose 1."""
    return np.array([16.5, 16.5, 15.2, 17.3, 22.5, 17.3, 13.6, 14.5, 18.8, 15.5])


@pytest.fixture
def sp_stats():
    """scipy.stats for cross-checks; skips only the tests that request it."""
    return pytest.importorskip("scipy.stats")


@pytest.fixture
def sp_special():
    return pytest.importorskip("scipy.special")
