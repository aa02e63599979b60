"""Tests for the RGBA pixel buffer."""

import numpy as np
import pytest
from PIL import Image

from py_worldgen.core.image import (
    BACKGROUND,
    PixelBuffer,
    darker,
    lighter,
    parse_colour,
    to_hex,
)
from py_worldgen.exceptions import InvalidArgumentError


class TestColours:
    """Test colour parsing and adjustment."""

    @pytest.mark.parametrize("colour,expected", [
        ("#FF8000", (255, 128, 0, 255)),
        ("#ff800040", (255, 128, 0, 64)),
        ("102030", (16, 32, 48, 255)),
        ((1, 2, 3), (1, 2, 3, 255)),
        ((1, 2, 3, 4), (1, 2, 3, 4)),
    ])
    def test_parse(self, colour, expected):
        """Test the accepted colour forms."""
        assert parse_colour(colour) == expected

    @pytest.mark.parametrize("colour", ["#FFF", "#GGGGGG", "", (1, 2), "#1234567"])
    def test_malformed(self, colour):
        """Test that malformed colours are rejected."""
        with pytest.raises(InvalidArgumentError):
            parse_colour(colour)

    def test_to_hex(self):
        """Test formatting with and without alpha."""
        assert to_hex((16, 32, 48, 255)) == "#102030"
        assert to_hex((16, 32, 48, 0)) == "#10203000"

    def test_darker_and_lighter(self):
        """Test adjusting brightness, clamped to the channel range."""
        assert darker("#808080", 16) == "#707070"
        assert darker("#050505", 16) == "#000000"
        assert lighter("#808080", 16) == "#909090"
        assert lighter("#F8F8F8", 16) == "#ffffff"
        assert darker("#80808040", 16) == "#70707040"


class TestPixelBuffer:
    """Test drawing primitives."""

    @pytest.fixture
    def image(self):
        return PixelBuffer(20, 10)

    def test_background(self, image):
        """Test that new images are transparent."""
        assert (image.width, image.height) == (20, 10)
        assert image.get_pixel(5, 5) == BACKGROUND

    def test_invalid_size(self):
        """Test that an image needs at least one pixel."""
        with pytest.raises(InvalidArgumentError):
            PixelBuffer(0, 10)
        with pytest.raises(InvalidArgumentError):
            PixelBuffer(10, -1)

    def test_set_pixel(self, image):
        """Test setting single pixels."""
        image.set_pixel(3, 4, "#102030")
        image.dot(4, 4, "#40506080")
        assert image.get_pixel(3, 4) == (16, 32, 48, 255)
        assert image.get_pixel(4, 4) == (64, 80, 96, 128)

    def test_pixels_off_image_ignored(self, image):
        """Test that drawing outside the image is harmless."""
        image.set_pixel(-1, 0, "#FFFFFF")
        image.set_pixel(20, 0, "#FFFFFF")
        image.set_pixel(0, 10, "#FFFFFF")
        assert (image.to_array()[:, :, 3] == 0).all()

    def test_circle(self):
        """Test filled circles."""
        image = PixelBuffer(21, 21)
        image.circle(10, 10, 5, "#FF0000")
        assert image.get_pixel(10, 10) == (255, 0, 0, 255)
        assert image.get_pixel(10, 14) == (255, 0, 0, 255)
        assert image.get_pixel(0, 0) == BACKGROUND

    def test_circle_outline(self):
        """Test that outlines leave the centre empty."""
        image = PixelBuffer(21, 21)
        image.circle_outline(10, 10, 6, "#00FF00")
        assert image.get_pixel(10, 10) == BACKGROUND
        assert image.get_pixel(10, 4) == (0, 255, 0, 255)

    def test_negative_radius(self, image):
        """Test that circles with negative radius draw nothing."""
        image.circle(5, 5, -1, "#FFFFFF")
        image.circle_outline(5, 5, -2, "#FFFFFF")
        assert (image.to_array()[:, :, 3] == 0).all()

    def test_triangle_fill(self):
        """Test a filled triangle pointing down."""
        image = PixelBuffer(30, 20)
        image.triangle_fill(0, 0, 10, 15, "#0000FF")
        assert image.get_pixel(10, 5) == (0, 0, 255, 255)
        assert image.get_pixel(10, 14) == (0, 0, 255, 255)
        assert image.get_pixel(25, 15) == BACKGROUND

    def test_triangle_pointing_up(self):
        """Test a triangle with negative height."""
        image = PixelBuffer(30, 20)
        image.triangle_fill(0, 19, 10, -15, "#0000FF")
        assert image.get_pixel(10, 10) == (0, 0, 255, 255)
        assert image.get_pixel(1, 5) == BACKGROUND

    def test_blend(self):
        """Test compositing a translucent layer."""
        base = PixelBuffer(4, 4, "#000000")
        layer = PixelBuffer(2, 2, "#FFFFFF80")
        base.blend(layer, 1, 1)
        r, g, b, a = base.get_pixel(1, 1)
        assert 120 <= r <= 136
        assert a == 255
        assert base.get_pixel(0, 0) == (0, 0, 0, 255)

    def test_resize(self, image):
        """Test scaling to a new size."""
        image.set_pixel(0, 0, "#FF0000")
        resized = image.resize(40, 20)
        assert (resized.width, resized.height) == (40, 20)
        assert resized.get_pixel(1, 1) == (255, 0, 0, 255)

    def test_array_round_trip(self, image):
        """Test conversion to and from numpy arrays."""
        image.set_pixel(2, 3, "#102030")
        pixels = image.to_array()
        assert pixels.shape == (10, 20, 4)
        assert pixels.dtype == np.uint8
        copy = PixelBuffer.from_array(pixels)
        assert copy.get_pixel(2, 3) == (16, 32, 48, 255)

    def test_save(self, image, tmp_path):
        """Test saving as a PNG."""
        image.set_pixel(1, 1, "#102030")
        path = tmp_path / "map.png"
        image.save(path)
        with Image.open(path) as saved:
            assert saved.size == (20, 10)
            assert saved.convert("RGBA").getpixel((1, 1)) == (16, 32, 48, 255)
