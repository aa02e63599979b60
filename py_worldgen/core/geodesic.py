"""
Geodesic planetary grid built from an unwrapped icosahedron.

The world is split into five faces along the top, ten across the equator
and five along the bottom, each subdivided into triangular tiles. The
grid is indexed by row (north to south) and by position within the row.
Rows narrow towards the poles, so callers always iterate using
``width_at(y)``.

This module contains:
- Icosahedron: height and tile state per cell, neighbour lookups
- Fractal height generation from a lower resolution parent grid
- Flood fills used by the surface mappers
- Projection to a PixelBuffer and stretching to a rectangular texture
"""

import math
from typing import Iterable, List, Optional, Tuple

import numpy as np
import structlog

from ..exceptions import InvalidArgumentError
from .image import BACKGROUND, PixelBuffer
from .random_source import RandomSource
from .tiles import Tile

logger = structlog.get_logger()

ROOT3 = math.sqrt(3.0)

DEFAULT_TILE = Tile("Grey", "#777777")
DEFAULT_HEIGHT = 50


class Icosahedron:
    """
    A tile grid over an icosahedron.

    Args:
        face_size: Number of tile rows in each face; the grid has three
            times this many rows
        rng: Random source for fractal heights and floods
    """

    FACES = 5

    def __init__(self, face_size: int, rng: Optional[RandomSource] = None):
        if face_size < 1:
            raise InvalidArgumentError(f"Face size must be positive, got {face_size}")

        self.face_size = face_size
        self.num_rows = face_size * 3
        self.rng = rng or RandomSource()

        self._widths: List[int] = []
        self._xpos: List[List[int]] = []
        self._vdir: List[List[int]] = []
        self._calculate_dimensions()

        self.heights = [np.full(w, DEFAULT_HEIGHT, dtype=np.int16) for w in self._widths]
        self.tiles = [[DEFAULT_TILE] * w for w in self._widths]

    def _calculate_dimensions(self) -> None:
        """Row widths, column positions and facing of every tile."""
        f = self.face_size

        w = 1
        for row in range(self.num_rows):
            if row < f:
                self._widths.append(w * self.FACES)
                w += 2
            elif row < 2 * f:
                self._widths.append(2 * f * self.FACES)
            else:
                w -= 2
                self._widths.append(w * self.FACES)

        # -1 points up, +1 points down
        for row, width in enumerate(self._widths):
            per_face = width // self.FACES
            xpos = []
            vdir = []
            for face in range(self.FACES):
                if row < 2 * f:
                    start = (face + 1) * 2 * f - row
                    direction = -1
                else:
                    start = (face + 1) * 2 * f + (row - 3 * f) - f + 1
                    direction = 1
                for x in range(per_face):
                    xpos.append(start + x)
                    vdir.append(direction)
                    direction = -direction
            self._xpos.append(xpos)
            self._vdir.append(vdir)

    @property
    def total_tiles(self) -> int:
        return sum(self._widths)

    @property
    def max_columns(self) -> int:
        """Largest column position used by any tile."""
        return max(xpos[-1] for xpos in self._xpos)

    def width_at(self, y: int) -> int:
        if y < 0 or y >= self.num_rows:
            raise InvalidArgumentError(
                f"Row {y} is outside bounds 0 - {self.num_rows - 1}"
            )
        return self._widths[y]

    def direction(self, x: int, y: int) -> int:
        return self._vdir[y][x]

    def _clamp_row(self, y: int) -> int:
        return max(0, min(self.num_rows - 1, y))

    def get_height(self, x: int, y: int) -> int:
        y = self._clamp_row(y)
        width = self._widths[y]
        if x < 0:
            x += width
        if x >= width:
            x -= width
        return int(self.heights[y][x])

    def set_height(self, x: int, y: int, height: int) -> None:
        """Set a height, capped to 1..100. Rows are clamped and columns wrap."""
        y = self._clamp_row(y)
        self.heights[y][x % self._widths[y]] = max(1, min(100, int(height)))

    def get_tile(self, x: int, y: int) -> Tile:
        y = self._clamp_row(y)
        return self.tiles[y][x % self._widths[y]]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        if tile is None:
            raise InvalidArgumentError("Cannot set tile to None")
        y = self._clamp_row(y)
        self.tiles[y][x % self._widths[y]] = tile

    def cells(self) -> Iterable[Tuple[int, int]]:
        """Every (x, y) on the grid, row by row."""
        for y, width in enumerate(self._widths):
            for x in range(width):
                yield x, y

    def latitude(self, y: int) -> int:
        """Degrees from the equator, 0 at the equator and nearly 90 at the poles."""
        rows = self.num_rows
        if y < rows / 2:
            return int(90 * (1 - 2 * y / rows))
        return int(90 * (1 - 2 * (rows - y) / rows))

    def west(self, x: int, y: int) -> int:
        return x - 1 if x > 0 else self._widths[y] - 1

    def east(self, x: int, y: int) -> int:
        return x + 1 if x + 1 < self._widths[y] else 0

    def _vertical(self, x: int, y: int, d: int, sign: int) -> Tuple[int, int]:
        """Neighbour across the horizontal edge, d is the row step."""
        f = self.face_size
        ny = y + d
        nx = x
        if ny < 0 or ny >= self.num_rows:
            # Pointing off the pole
            return x, y

        if y >= 2 * f or y < f:
            org = self._widths[y] // self.FACES
            new = self._widths[ny] // self.FACES
            segment = x // org
            nx -= (org - new) * segment
            nx -= int((org - new) / 2)
        elif y == f and ny == f - 1:
            nx -= nx // (2 * f) + 1
        elif y == 2 * f - 1 and ny == 2 * f:
            nx += sign * (nx // (2 * f))
        else:
            nx += sign * self._vdir[y][x]

        return nx % self._widths[ny], ny

    def up_down(self, x: int, y: int) -> Tuple[int, int]:
        """The tile sharing this tile's flat edge; north for up tiles, south for down."""
        return self._vertical(x, y, -self._vdir[y][x], -1)

    def opposite(self, x: int, y: int) -> Tuple[int, int]:
        """The tile beyond this tile's point."""
        return self._vertical(x, y, self._vdir[y][x], 1)

    def fractal(self, parent: Optional["Icosahedron"] = None, variation: int = 0) -> "Icosahedron":
        """
        Fill the height map.

        Without a parent every height is a uniform d100. With a parent each
        height averages the parent heights around it and adds a variance of
        the given size. Successive calls on grids of doubling size with
        halving variation build up fractal terrain.

        Returns:
            This grid, for chaining
        """
        rng = self.rng
        if parent is None:
            for x, y in self.cells():
                self.set_height(x, y, rng.d100())
            return self

        if parent.num_rows >= self.num_rows:
            raise InvalidArgumentError("Parent map must be smaller than this map")

        for x, y in self.cells():
            ux, uy = self.up_down(x, y)
            h = (
                self._parent_height(parent, x, y)
                + self._parent_height(parent, ux, uy)
                + self._parent_height(parent, x - 1, y)
                + self._parent_height(parent, x + 1, y)
            ) // 4 + rng.variance(variation)
            self.set_height(x, y, h)
        return self

    def _parent_height(self, parent: "Icosahedron", x: int, y: int) -> int:
        py = y * parent.num_rows // self.num_rows
        px = int(x / (self._widths[y] / parent.width_at(py)))
        return parent.get_height(px, py)

    def copy_heights(self, source: "Icosahedron") -> None:
        if source.num_rows != self.num_rows:
            raise InvalidArgumentError("Source must be the same size")
        self.heights = [row.copy() for row in source.heights]

    def sea_level(self, percentage: int) -> int:
        """Height below which the given percentage of tiles lie."""
        counts = np.zeros(101, dtype=np.int64)
        for row in self.heights:
            counts += np.bincount(row, minlength=101)[:101]

        cover = self.total_tiles * percentage // 100
        height = 0
        while cover > 0 and height < 100:
            cover -= counts[height]
            height += 1
        return height

    def count_tiles(self, tile: Tile) -> int:
        return sum(1 for row in self.tiles for t in row if t == tile)

    def _snapshot(self) -> List[List[Tile]]:
        return [list(row) for row in self.tiles]

    def grow_border(self, tile: Tile, neighbours: int, thickness: int) -> None:
        """
        Grow a tile type evenly outwards.

        A tile converts when at least `neighbours` of its three neighbours
        were of the type at the start of the pass. Repeated `thickness`
        times.
        """
        if neighbours < 1 or neighbours > 3:
            raise InvalidArgumentError("Number of neighbours must be between 1 and 3")

        for _ in range(thickness):
            before = self._snapshot()
            for x, y in self.cells():
                if before[y][x] == tile:
                    continue
                ux, uy = self.up_down(x, y)
                count = (
                    (before[y][self.west(x, y)] == tile)
                    + (before[y][self.east(x, y)] == tile)
                    + (before[uy][ux] == tile)
                )
                if count >= neighbours:
                    self.tiles[y][x] = tile

    def _random_neighbour(self, x: int, y: int) -> Tuple[int, int]:
        roll = self.rng.d3()
        if roll == 1:
            return self.west(x, y), y
        if roll == 2:
            return self.east(x, y), y
        return self.up_down(x, y)

    def flood(self, tile: Tile, iterations: int) -> None:
        """Each tile of the type spreads into one random neighbour per iteration."""
        for _ in range(iterations):
            before = self._snapshot()
            for x, y in self.cells():
                if before[y][x] == tile:
                    nx, ny = self._random_neighbour(x, y)
                    self.tiles[ny][nx] = tile

    def flood_to_percentage(self, tile: Tile, percentage: int, use_heights: bool = False) -> None:
        """
        Spread a tile type until it covers more than a percentage of the map.

        With use_heights, spreading into a tile succeeds with a chance equal
        to that tile's height, so floods follow high ground.
        """
        required = self.total_tiles * percentage // 100
        flooded = self.count_tiles(tile)
        if flooded == 0:
            logger.warning("Nothing to flood from", tile=tile.name)
            return
        if percentage >= 100:
            for x, y in self.cells():
                self.tiles[y][x] = tile
            return

        rng = self.rng
        while flooded <= required:
            before = self._snapshot()
            for x, y in self.cells():
                if flooded > required:
                    break
                if before[y][x] != tile:
                    continue
                nx, ny = self._random_neighbour(x, y)
                if use_heights and rng.d100() > self.heights[ny][nx]:
                    continue
                if self.tiles[ny][nx] != tile:
                    self.tiles[ny][nx] = tile
                    flooded += 1
            flooded = self.count_tiles(tile)

    def _tile_width(self, width: int) -> int:
        """Half-width of a tile; narrow images crop the eastern columns."""
        if width < 1:
            raise InvalidArgumentError(f"Map width must be positive, got {width}")
        return max(1, width // (self.max_columns + 1))

    def draw(
        self,
        width: int,
        tiles: Optional[List[List[Tile]]] = None,
        faces: Optional[Iterable[int]] = None,
    ) -> PixelBuffer:
        """
        Project the grid onto an image exactly `width` pixels wide.

        Args:
            width: Image width in pixels
            tiles: Tile rows to draw instead of the grid's own
            faces: Only draw tiles on these faces (0-4)

        Returns:
            The rendered image
        """
        tiles = tiles or self.tiles
        tile_w = self._tile_width(width)
        rise = tile_w * ROOT3
        image = PixelBuffer(width, max(1, int(self.num_rows * rise)), BACKGROUND)
        face_set = None if faces is None else set(faces)
        base_y = int(rise)

        for y, row in enumerate(tiles):
            per_face = self._widths[y] // self.FACES
            for x, tile in enumerate(row):
                if face_set is not None and x // per_face not in face_set:
                    continue
                direction = self._vdir[y][x]
                px = (self._xpos[y][x] - 1) * tile_w
                py = int(y * rise)
                if direction > 0:
                    py -= rise
                py = base_y + int(py)
                h = int(rise * direction)

                colour = tile.colour(self.rng)
                image.triangle_fill(px, py, tile_w, h, colour)
                image.triangle(px, py, tile_w, h, colour)
                tile.add_detail(image, px, py, tile_w, h, self.rng)

        return image

    def draw_heights(self, width: int) -> PixelBuffer:
        """Greyscale image of the height map."""
        tiles = [[Tile.grey(int(h) * 2) for h in row] for row in self.heights]
        return self.draw(width, tiles)

    def draw_transparency(self, colour: str, width: int) -> PixelBuffer:
        """Single colour image whose opacity follows the height map."""
        tiles = [
            [Tile("T", colour, random=2, opacity=int(int(h) * 2.5)) for h in row]
            for row in self.heights
        ]
        return self.draw(width, tiles)


def stretch_image(image: PixelBuffer, size: int) -> PixelBuffer:
    """
    Distort an unwrapped grid into a rectangle 2 * size by size.

    The slanted right edge is first folded back onto the left, then each
    row's drawn pixels are stretched to fill the row, so the result wraps
    cleanly around a sphere.
    """
    pixels = image.to_array()
    height, width = pixels.shape[:2]

    shift = width // 11
    if shift > 0:
        right = pixels[:, width - shift:]
        drawn = right[:, :, 3] > 0
        left = pixels[:, :shift]
        left[drawn] = right[drawn]
        right[drawn] = BACKGROUND

    for y in range(height):
        row = pixels[y]
        drawn = row[row[:, 3] > 0]
        if len(drawn) == 0:
            continue
        index = (np.arange(width) * len(drawn)) // width
        pixels[y] = drawn[index]

    stretched = PixelBuffer.from_array(pixels)
    return stretched.resize(size * 2, size)
