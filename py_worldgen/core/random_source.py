"""
Dice-style random source used by every generator and mapper.

The underlying generator is Johannes Baagøe's Alea algorithm, which gives
reproducible sequences from a string or numeric seed. Anything exposing a
``random()`` method returning floats in [0, 1) can be injected instead,
which is how tests pin down individual rolls.
"""

import time
from typing import Any, Optional

from ..config import settings
from ..exceptions import InvalidArgumentError


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Alea's seed hashing function."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * 0x100000000  # 2^32
        return _uint32(self.n) * 2.3283064365386963e-10  # 2^-32


class AleaPRNG:
    """Alea pseudo random number generator."""

    def __init__(self, seed):
        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        seeds = seed if isinstance(seed, (list, tuple)) else [seed]
        for part in seeds:
            self.s0 -= mash(part)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(part)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(part)
            if self.s2 < 0:
                self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2


class RandomSource:
    """
    Uniform integer rolls in the shape of polyhedral dice.

    Args:
        seed: Seed for a fresh Alea generator. Ignored if prng is given.
        prng: Any object with a random() method returning [0, 1).
    """

    def __init__(self, seed: Optional[Any] = None, prng: Optional[Any] = None):
        if prng is None:
            if seed is None:
                seed = settings.default_seed
            if seed is None:
                seed = time.time_ns()
            prng = AleaPRNG(seed)
        self._prng = prng

    def random(self) -> float:
        return self._prng.random()

    def roll(self, size: int, count: int = 1) -> int:
        """Sum of count rolls, each uniform in [1, size]."""
        size = int(size)
        if size < 1:
            raise InvalidArgumentError(f"Die size must be positive, got {size}")
        if count < 0:
            raise InvalidArgumentError(f"Die count must not be negative, got {count}")
        total = 0
        for _ in range(count):
            total += int(self._prng.random() * size) + 1
        return total

    def variance(self, size: int) -> int:
        """Signed roll with a mean of zero."""
        if size < 1:
            return 0
        return self.roll(size) - self.roll(size)

    def roll_zero(self, size: int) -> int:
        """Uniform integer in [0, size)."""
        size = int(size)
        if size < 1:
            raise InvalidArgumentError(f"Range must be positive, got {size}")
        return int(self._prng.random() * size)

    def d2(self, count: int = 1) -> int:
        return self.roll(2, count)

    def d3(self, count: int = 1) -> int:
        return self.roll(3, count)

    def d4(self, count: int = 1) -> int:
        return self.roll(4, count)

    def d6(self, count: int = 1) -> int:
        return self.roll(6, count)

    def d8(self, count: int = 1) -> int:
        return self.roll(8, count)

    def d10(self, count: int = 1) -> int:
        return self.roll(10, count)

    def d12(self, count: int = 1) -> int:
        return self.roll(12, count)

    def d20(self, count: int = 1) -> int:
        return self.roll(20, count)

    def d100(self, count: int = 1) -> int:
        return self.roll(100, count)


def random_source_for(name: str) -> RandomSource:
    """A source seeded from a name, giving stable results per body."""
    return RandomSource(seed=name)
