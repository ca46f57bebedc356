import sys, pathlib
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from datetime import date

import numpy as np
import pytest


class FixedRng:
    """Stands in for numpy's Generator: uniform() returns a fixed point in [low, high]."""

    def __init__(self, frac: float = 0.5):
        self.frac = frac
        self.calls = 0

    def uniform(self, low=0.0, high=1.0):
        self.calls += 1
        return low + (high - low) * self.frac


@pytest.fixture
def today():
    return date(2024, 3, 15)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def up_rng():
    # every step is the maximum move up
    return FixedRng(1.0)


@pytest.fixture
def down_rng():
    return FixedRng(0.0)


@pytest.fixture
def mid_rng():
    # warm-up readings land exactly on 50
    return FixedRng(0.5)


@pytest.fixture
def universe(rng, today):
    from market.instruments import build_universe
    return build_universe(rng=rng, today=today)
