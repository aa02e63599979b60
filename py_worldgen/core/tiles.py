"""
Terrain tiles painted onto geodesic grids.

A tile is a named colour. Tiles compare equal by name, so shaded or
randomised variants of a tile still count as that tile when grids are
flooded or counted. Subclasses add fine detail at render time.
"""

from typing import Optional

from .image import PixelBuffer
from .random_source import RandomSource


def _clamp(value: int) -> int:
    return max(1, min(254, int(value)))


def _hex(value: int) -> str:
    return f"{_clamp(value):02x}"


class Tile:
    """
    A terrain type and its colour.

    Args:
        name: Tile name, which defines equality
        rgb: Base colour as "#RRGGBB"
        is_water: Whether climate algorithms treat the tile as water
        random: Size of the per-channel colour noise when drawn
        opacity: Alpha channel, 255 for opaque
    """

    def __init__(
        self,
        name: str,
        rgb: str,
        is_water: bool = False,
        random: int = 3,
        opacity: int = 0xFF,
    ):
        self.name = name
        self.is_water = is_water
        self.random = random
        self.opacity = opacity
        self.r = int(rgb[1:3], 16)
        self.g = int(rgb[3:5], 16)
        self.b = int(rgb[5:7], 16)

    @classmethod
    def grey(cls, level: int) -> "Tile":
        """Unvarying grey tile, used for height maps."""
        return cls(f"G{level}", "#" + _hex(level) * 3, random=0)

    @property
    def rgb(self) -> str:
        return "#" + _hex(self.r) + _hex(self.g) + _hex(self.b)

    def _derive(self, r: int, g: int, b: int, opacity: Optional[int] = None) -> "Tile":
        rgb = "#" + _hex(r) + _hex(g) + _hex(b)
        return Tile(self.name, rgb, self.is_water, self.random, self.opacity if opacity is None else opacity)

    def shaded(self, percentage: int) -> "Tile":
        """Same tile scaled to a percentage of its brightness."""
        return self._derive(
            self.r * percentage // 100,
            self.g * percentage // 100,
            self.b * percentage // 100,
        )

    def variant(self, delta: int) -> "Tile":
        return self._derive(self.r + delta, self.g + delta, self.b + delta, 0xFF)

    def mix(self, other: "Tile") -> "Tile":
        """Average of this tile's colour and another's, keeping this tile's name."""
        return self._derive(
            (self.r + other.r) // 2,
            (self.g + other.g) // 2,
            (self.b + other.b) // 2,
            0xFF,
        )

    def colour(self, rng: RandomSource, noise: Optional[int] = None) -> str:
        """
        Colour to draw the tile with, each channel jittered independently.

        Returns:
            "#RRGGBB", or "#RRGGBBAA" for translucent tiles
        """
        noise = self.random if noise is None else noise
        channels = []
        for base in (self.r, self.g, self.b):
            if noise > 0:
                base += rng.roll(noise) - rng.roll(noise)
            channels.append(_hex(base))
        colour = "#" + "".join(channels)
        if self.opacity != 0xFF:
            colour += f"{max(0, min(255, self.opacity)):02x}"
        return colour

    def shifted_colour(self, factor: float) -> str:
        return (
            "#"
            + _hex(int(self.r * factor))
            + _hex(int(self.g * factor))
            + _hex(int(self.b * factor))
        )

    def add_detail(
        self, image: PixelBuffer, x: int, y: int, w: int, h: int, rng: RandomSource
    ) -> None:
        """Paint detail inside the tile's triangle. Plain tiles have none."""

    def __eq__(self, other) -> bool:
        return isinstance(other, Tile) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.rgb!r})"


class Cratered(Tile):
    """A tile pocked with one to three craters."""

    def __init__(self, tile: Tile, rng: RandomSource):
        super().__init__(tile.name, tile.colour(rng)[:7], tile.is_water, tile.random, tile.opacity)

    def add_detail(self, image, x, y, w, h, rng):
        floor = self.shifted_colour(0.85)
        walls = self.shifted_colour(1.1)
        var = max(2, w // 5)

        roll = rng.d6()
        if roll <= 3:
            number = 1
        elif roll <= 5:
            number = 2
        else:
            number = 3

        craters = []
        for _ in range(number):
            radius = w // 4 + rng.variance(var)
            cx = x + w + rng.variance(var + number // 2)
            cy = y + h // 2 + rng.variance(var + number // 2)
            craters.append((cx, cy, radius))

        # Every wall before any floor
        for cx, cy, radius in craters:
            image.circle(cx, cy, radius, walls)
        for cx, cy, radius in craters:
            image.circle(cx, cy, radius - 1, floor)


class Rough(Tile):
    """A tile dappled with darker and lighter pixels."""

    def __init__(self, tile: Tile):
        super().__init__(tile.name, tile.rgb, tile.is_water, tile.random, tile.opacity)

    def add_detail(self, image, x, y, w, h, rng):
        dark = self.shifted_colour(0.9)
        light = self.shifted_colour(1.1)
        height = abs(h)
        if height == 0:
            return
        step = 1 if h > 0 else -1

        for yy in range(height):
            width = int(w * (height - yy) / height)
            for xx in range(-width, width):
                roll = rng.d3()
                if roll == 1:
                    colour = dark
                elif roll == 2:
                    colour = light
                else:
                    colour = self.colour(rng)
                image.dot(x + xx + w, y + step * yy, colour)
