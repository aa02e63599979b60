"""
RGBA pixel buffer used as the drawing target for surface maps.

A thin wrapper over a Pillow image exposing the primitives the grid and
tile painters need: pixels, circles, triangles, blending and saving.
Colours are "#RRGGBB" or "#RRGGBBAA" strings, or RGBA tuples.
"""

from typing import Tuple, Union

import numpy as np
from PIL import Image, ImageDraw

from ..exceptions import InvalidArgumentError

Colour = Union[str, Tuple[int, ...]]
RGBA = Tuple[int, int, int, int]

# Fully transparent white
BACKGROUND: RGBA = (255, 255, 255, 0)


def parse_colour(colour: Colour) -> RGBA:
    """Convert a hex string or RGB(A) tuple to an RGBA tuple."""
    if isinstance(colour, tuple):
        if len(colour) == 3:
            return (colour[0], colour[1], colour[2], 255)
        if len(colour) == 4:
            return tuple(colour)
        raise InvalidArgumentError(f"Colour tuple must have 3 or 4 channels, got {colour}")

    value = colour.lstrip("#")
    if len(value) not in (6, 8):
        raise InvalidArgumentError(f"Malformed colour '{colour}'")
    try:
        channels = [int(value[i:i + 2], 16) for i in range(0, len(value), 2)]
    except ValueError as e:
        raise InvalidArgumentError(f"Malformed colour '{colour}'") from e
    if len(channels) == 3:
        channels.append(255)
    return tuple(channels)


def to_hex(colour: RGBA) -> str:
    r, g, b, a = colour
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def darker(colour: Colour, amount: int) -> str:
    r, g, b, a = parse_colour(colour)
    return to_hex((max(0, r - amount), max(0, g - amount), max(0, b - amount), a))


def lighter(colour: Colour, amount: int) -> str:
    r, g, b, a = parse_colour(colour)
    return to_hex((min(255, r + amount), min(255, g + amount), min(255, b + amount), a))


class PixelBuffer:
    """
    A drawable RGBA image.

    Args:
        width: Width in pixels
        height: Height in pixels
        background: Initial fill colour
    """

    def __init__(self, width: int, height: int, background: Colour = BACKGROUND):
        if width < 1 or height < 1:
            raise InvalidArgumentError(f"Image must be at least 1x1, got {width}x{height}")
        self.image = Image.new("RGBA", (width, height), parse_colour(background))
        self._draw = ImageDraw.Draw(self.image)

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        buffer = cls.__new__(cls)
        buffer.image = image.convert("RGBA")
        buffer._draw = ImageDraw.Draw(buffer.image)
        return buffer

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "PixelBuffer":
        """Build from an (height, width, 4) uint8 array."""
        return cls.from_image(Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)))

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def to_array(self) -> np.ndarray:
        return np.array(self.image, dtype=np.uint8)

    def get_pixel(self, x: int, y: int) -> RGBA:
        return self.image.getpixel((x, y))

    def set_pixel(self, x: int, y: int, colour: Colour) -> None:
        """Set one pixel, ignoring coordinates outside the image."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.image.putpixel((x, y), parse_colour(colour))

    dot = set_pixel

    def circle(self, cx: int, cy: int, radius: int, colour: Colour) -> None:
        if radius < 0:
            return
        self._draw.ellipse(
            [cx - radius, cy - radius, cx + radius, cy + radius],
            fill=parse_colour(colour),
        )

    def circle_outline(
        self, cx: int, cy: int, radius: int, colour: Colour, thickness: int = 1
    ) -> None:
        if radius < 0:
            return
        self._draw.ellipse(
            [cx - radius, cy - radius, cx + radius, cy + radius],
            outline=parse_colour(colour),
            width=max(1, thickness),
        )

    def _triangle_points(self, x: int, y: int, w: int, h: int):
        return [(x, y), (x + 2 * w, y), (x + w, y + h)]

    def triangle_fill(self, x: int, y: int, w: int, h: int, colour: Colour) -> None:
        """Filled triangle with base from (x, y) to (x + 2w, y) and apex h pixels away."""
        self._draw.polygon(self._triangle_points(x, y, w, h), fill=parse_colour(colour))

    def triangle(self, x: int, y: int, w: int, h: int, colour: Colour) -> None:
        self._draw.polygon(self._triangle_points(x, y, w, h), outline=parse_colour(colour))

    def blend(self, other: "PixelBuffer", x: int = 0, y: int = 0) -> None:
        """Alpha composite another buffer over this one."""
        self.image.alpha_composite(other.image, dest=(x, y))

    def resize(self, width: int, height: int) -> "PixelBuffer":
        return PixelBuffer.from_image(
            self.image.resize((width, height), Image.Resampling.NEAREST)
        )

    def save(self, path) -> None:
        self.image.save(path)
