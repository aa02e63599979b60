"""Tests for terrain tiles."""

import pytest

from py_worldgen.core.image import PixelBuffer
from py_worldgen.core.random_source import RandomSource
from py_worldgen.core.tiles import Cratered, Rough, Tile

from conftest import SequencePRNG, fixed_rng


class TestTile:
    """Test tile colours and identity."""

    @pytest.fixture
    def land(self):
        return Tile("Land", "#806040", random=0)

    def test_equal_by_name(self, land):
        """Test that tiles with the same name are the same terrain."""
        assert land == Tile("Land", "#000000")
        assert land != Tile("Sea", "#806040")
        assert land != "Land"
        assert len({land, Tile("Land", "#FFFFFF")}) == 1

    def test_shaded(self, land):
        """Test scaling a tile's brightness."""
        dark = land.shaded(50)
        assert dark.rgb == "#403020"
        assert dark == land

    def test_shaded_clamped(self, land):
        """Test that channels stay within 1 and 254."""
        assert land.shaded(0).rgb == "#010101"
        assert land.shaded(400).rgb == "#fefefe"

    def test_variant(self, land):
        """Test shifting every channel."""
        assert land.variant(16).rgb == "#907050"
        assert land.variant(-16).rgb == "#705030"

    def test_mix(self, land):
        """Test averaging two colours."""
        mixed = land.mix(Tile("Other", "#A08060"))
        assert mixed.rgb == "#907050"
        assert mixed.name == "Land"

    def test_derived_tiles_keep_properties(self):
        """Test that shading keeps water and noise settings."""
        water = Tile("Water", "#4040A0", is_water=True, random=5)
        shaded = water.shaded(80)
        assert shaded.is_water
        assert shaded.random == 5

    def test_grey(self):
        """Test height map greys."""
        assert Tile.grey(128).rgb == "#808080"
        assert Tile.grey(0).rgb == "#010101"
        assert Tile.grey(300).rgb == "#fefefe"
        assert Tile.grey(10) != Tile.grey(20)

    def test_colour_without_noise(self, land, rng):
        """Test the drawn colour of a tile without noise."""
        assert land.colour(rng) == "#806040"

    def test_colour_noise(self, rng):
        """Test that noise varies each channel within its range."""
        tile = Tile("Noisy", "#808080", random=4)
        for _ in range(100):
            colour = tile.colour(rng)
            for i in (1, 3, 5):
                assert 0x80 - 3 <= int(colour[i:i + 2], 16) <= 0x80 + 3

    def test_colour_opacity(self, rng):
        """Test that translucent tiles carry an alpha channel."""
        tile = Tile("Cloud", "#FFFFFF", random=0, opacity=128)
        assert tile.colour(rng) == "#fefefe80"
        assert len(Tile("Solid", "#FFFFFF").colour(rng)) == 7


class TestDetailedTiles:
    """Test tiles that paint extra detail."""

    @pytest.fixture
    def rock(self):
        return Tile("Rock", "#808080", random=0)

    def test_cratered_keeps_name(self, rock, rng):
        """Test that craters do not change the terrain."""
        cratered = Cratered(rock, rng)
        assert cratered == rock
        assert cratered.rgb == "#808080"

    def test_cratered_detail(self, rock, rng):
        """Test that craters are painted inside the tile."""
        image = PixelBuffer(60, 60)
        Cratered(rock, rng).add_detail(image, 0, 10, 20, 35, rng)
        alpha = image.to_array()[:, :, 3]
        assert alpha.sum() > 0

    def test_single_crater_centred(self, rock):
        """Test that one crater sits in the middle of the tile."""
        rng = fixed_rng(0.0)
        image = PixelBuffer(60, 60)
        Cratered(rock, rng).add_detail(image, 0, 10, 20, 30, rng)
        pixels = image.to_array()
        # Centre of the tile is the crater floor, darker than the rock
        assert tuple(pixels[25, 20][:3]) == (0x6C, 0x6C, 0x6C)
        assert pixels[0, 0][3] == 0

    def test_overlapping_craters_show_floors(self, rock):
        """Test that no crater wall covers the floor of another crater."""
        cratered = Cratered(rock, fixed_rng(0.5))
        rng = RandomSource(prng=SequencePRNG([0.99, 0.1, 0.7, 0.3, 0.9, 0.5, 0.2, 0.8]))
        image = PixelBuffer(80, 80)
        cratered.add_detail(image, 0, 0, 40, 40, rng)

        # Three craters, radius 5 at (34, 23), 9 at (34, 14) and 13 at (39, 14)
        floor = (0x6C, 0x6C, 0x6C, 255)
        walls = (0x8C, 0x8C, 0x8C, 255)
        for cx, cy in [(34, 23), (34, 14), (39, 14)]:
            assert image.get_pixel(cx, cy) == floor
        assert (image.to_array() == walls).all(axis=2).any()

    def test_rough_keeps_name(self, rock):
        """Test that rough tiles keep the base tile's identity."""
        rough = Rough(rock)
        assert rough == rock
        assert rough.rgb == rock.rgb

    @pytest.mark.parametrize("h", [12, -12])
    def test_rough_detail(self, rock, rng, h):
        """Test that rough tiles dapple their triangle pointing either way."""
        image = PixelBuffer(40, 40)
        y = 5 if h > 0 else 30
        Rough(rock).add_detail(image, 5, y, 10, h, rng)
        alpha = image.to_array()[:, :, 3]
        assert alpha.sum() > 0
        rows = alpha.nonzero()[0]
        if h > 0:
            assert rows.min() >= y
        else:
            assert rows.max() <= y

    def test_flat_rough_tile(self, rock, rng):
        """Test that a zero height tile paints nothing."""
        image = PixelBuffer(20, 20)
        Rough(rock).add_detail(image, 0, 0, 10, 0, rng)
        assert image.to_array()[:, :, 3].sum() == 0
