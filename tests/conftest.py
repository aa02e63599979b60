"""Shared fixtures for world generation tests."""

import pytest

from py_worldgen.core.body import OrbitContext
from py_worldgen.core.random_source import RandomSource
from py_worldgen.core.star import Star


class FixedPRNG:
    """PRNG stub returning the same value forever."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class SequencePRNG:
    """PRNG stub cycling through a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.index = 0

    def random(self) -> float:
        value = self.values[self.index % len(self.values)]
        self.index += 1
        return value


def fixed_rng(value: float) -> RandomSource:
    """Random source whose every roll lands at the same point of its range."""
    return RandomSource(prng=FixedPRNG(value))


@pytest.fixture
def sol():
    """A Sun-like star."""
    return Star(name="Sol")


@pytest.fixture
def orbit(sol):
    """Orbit context for the first body around Sol."""
    return OrbitContext.first(sol)


@pytest.fixture
def rng():
    """Deterministic seeded random source."""
    return RandomSource(seed="test")
