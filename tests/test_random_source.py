"""Tests for dice rolls and the Alea generator."""

import pytest

from py_worldgen.core.random_source import AleaPRNG, RandomSource, random_source_for
from py_worldgen.exceptions import InvalidArgumentError

from conftest import fixed_rng


class TestRandomSource:
    """Test dice rolls."""

    def test_lowest_and_highest_rolls(self):
        """Test rolls at either end of the generator's range."""
        assert fixed_rng(0.0).roll(6) == 1
        assert fixed_rng(0.9999).roll(6) == 6
        assert fixed_rng(0.9999).d6(3) == 18
        assert fixed_rng(0.0).d100(4) == 4

    def test_roll_zero(self):
        """Test zero based rolls."""
        assert fixed_rng(0.0).roll_zero(10) == 0
        assert fixed_rng(0.5).roll_zero(10) == 5
        assert fixed_rng(0.9999).roll_zero(10) == 9

    def test_variance_is_centred(self):
        """Test that a constant generator gives zero variance."""
        assert fixed_rng(0.3).variance(20) == 0
        assert fixed_rng(0.3).variance(0) == 0

    def test_invalid_rolls(self):
        """Test that impossible dice are rejected."""
        rng = fixed_rng(0.5)
        with pytest.raises(InvalidArgumentError):
            rng.roll(0)
        with pytest.raises(InvalidArgumentError):
            rng.roll(6, -1)
        with pytest.raises(InvalidArgumentError):
            rng.roll_zero(0)

    def test_invalid_argument_is_value_error(self):
        """Test that callers can catch the standard exception."""
        with pytest.raises(ValueError):
            fixed_rng(0.5).roll(-3)

    def test_zero_dice(self):
        """Test that rolling no dice totals zero."""
        assert fixed_rng(0.5).roll(6, 0) == 0

    def test_rolls_within_range(self, rng):
        """Test that sums of dice stay within their bounds."""
        for _ in range(500):
            assert 3 <= rng.d6(3) <= 18
            assert 1 <= rng.d20() <= 20
            assert -5 <= rng.variance(6) <= 5

    def test_every_face_appears(self, rng):
        """Test that a d6 produces every face."""
        faces = {rng.d6() for _ in range(600)}
        assert faces == {1, 2, 3, 4, 5, 6}

    def test_seeded_sources_repeat(self):
        """Test that equal seeds give equal sequences."""
        a = RandomSource(seed="Alpha")
        b = RandomSource(seed="Alpha")
        assert [a.d100() for _ in range(50)] == [b.d100() for _ in range(50)]

    def test_different_seeds_differ(self):
        """Test that different seeds give different sequences."""
        a = RandomSource(seed="Alpha")
        b = RandomSource(seed="Beta")
        assert [a.d100() for _ in range(50)] != [b.d100() for _ in range(50)]

    def test_source_for_name(self):
        """Test that named sources are seeded from the name."""
        a = random_source_for("Earth")
        b = RandomSource(seed="Earth")
        assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]


class TestAleaPRNG:
    """Test the underlying generator."""

    def test_unit_interval(self):
        """Test that values lie in [0, 1)."""
        prng = AleaPRNG("interval")
        for _ in range(1000):
            value = prng.random()
            assert 0.0 <= value < 1.0

    def test_list_seed(self):
        """Test that a list seed is accepted and deterministic."""
        a = AleaPRNG(["a", 1])
        b = AleaPRNG(["a", 1])
        assert a.random() == b.random()

    def test_numeric_seed(self):
        """Test that numeric and string seeds of the same text agree."""
        assert AleaPRNG(42).random() == AleaPRNG("42").random()
