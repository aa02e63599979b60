"""
Base class for surface mappers.

A mapper populates a geodesic grid from a body description in generate(),
then renders it with the draw methods. Capability flags say which maps a
mapper can draw; asking for a map it does not have is an error.
"""

from typing import List, Optional

import structlog

from ...config import settings
from ...exceptions import UnsupportedError
from ..body import BodyDescription
from ..geodesic import Icosahedron
from ..image import PixelBuffer
from ..random_source import RandomSource, random_source_for
from ..tiles import Tile

logger = structlog.get_logger()


class PlanetMapper:
    """
    Populates and draws the surface of one body.

    Args:
        body: Body to map
        grid: Grid to populate, a new one of the mapper's face size if omitted
        rng: Random source, seeded from the body name if omitted
        face_size: Face size of the new grid
    """

    DEFAULT_FACE_SIZE: Optional[int] = None
    CRATER_HEIGHT = 10

    has_main_map = True
    has_height_map = False
    has_cloud_map = False
    has_orbit_map = False
    has_deform_map = False

    def __init__(
        self,
        body: BodyDescription,
        grid: Optional[Icosahedron] = None,
        rng: Optional[RandomSource] = None,
        face_size: Optional[int] = None,
    ):
        self.body = body
        self.rng = rng or random_source_for(body.name)
        if grid is None:
            grid = Icosahedron(
                face_size or self.DEFAULT_FACE_SIZE or settings.default_face_size,
                self.rng,
            )
        self.grid = grid

    @property
    def face_size(self) -> int:
        return self.grid.face_size

    def generate(self) -> None:
        """Fractal terrain with no further detail."""
        self.generate_height_map(24)

    def generate_height_map(self, variation: int, parent: Optional[Icosahedron] = None) -> None:
        """
        Build a fractal height map on the grid.

        Starting from a random face size 3 grid (or the given parent), the
        size doubles while it stays under half the grid's face size, halving
        the variation at each step. The last level is then sampled onto the
        grid itself, whatever its face size.
        """
        grid = self.grid
        if parent is None:
            parent = Icosahedron(3, self.rng).fractal()

        size = parent.face_size
        while size * 2 < grid.face_size:
            size *= 2
            parent = Icosahedron(size, self.rng).fractal(parent, variation)
            variation //= 2

        if parent.num_rows < grid.num_rows:
            grid.fractal(parent, variation)
        elif parent.num_rows == grid.num_rows:
            grid.copy_heights(parent)
        else:
            grid.fractal()
        self.has_height_map = True

    def _crater(self, x: int, y: int) -> None:
        grid = self.grid
        tile = grid.get_tile(x, y)
        if not tile.is_water and grid.get_height(x, y) != self.CRATER_HEIGHT:
            grid.set_height(x, y, self.CRATER_HEIGHT)
            grid.set_tile(x, y, tile.shaded(85))

    def _crater_line(self, x: int, y: int, span: int) -> None:
        for dx in range(-span, span + 1):
            self._crater(x + dx, y)

    def _small_crater(self, x: int, y: int) -> None:
        self._crater(x, y)

    def _medium_crater(self, x: int, y: int) -> None:
        self._crater_line(x, y, 1)
        ox, oy = self.grid.opposite(x, y)
        self._crater_line(ox, oy, 1)

    def _large_crater(self, x: int, y: int) -> None:
        grid = self.grid
        self._crater_line(x, y, 3)
        ox, oy = grid.opposite(x, y)
        self._crater_line(ox, oy, 3)
        self._crater_line(*grid.up_down(ox, oy), 2)
        self._crater_line(*grid.up_down(x, y), 2)

    def create_craters(self, size: int, number: int) -> None:
        """
        Stamp craters onto land between the polar fifths of the map.

        Args:
            size: Modifier to the d6 size roll
            number: Number of craters
        """
        grid = self.grid
        rows = grid.num_rows
        for _ in range(number):
            y = rows // 5 + self.rng.roll_zero(rows * 3 // 5)
            x = 2 + self.rng.roll_zero(grid.width_at(y) - 4)

            roll = self.rng.d6() + size
            if roll <= 1:
                self._small_crater(x, y)
            elif roll <= 5:
                self._medium_crater(x, y)
            else:
                self._large_crater(x, y)

    def add_rift(self, tile: Tile, length: int) -> None:
        """A meandering line of low tiles running roughly east."""
        grid = self.grid
        rows = grid.num_rows
        y = rows // 4 + self.rng.roll(max(1, rows // 2))
        x = self.rng.roll_zero(grid.width_at(y))

        for _ in range(length):
            if self.rng.d3() == 1:
                x = grid.west(x, y)
                x, y = grid.up_down(x, y)
            grid.set_tile(x, y, tile)
            grid.set_height(x, y, self.CRATER_HEIGHT)
            x = grid.east(x, y)

    def _require(self, flag: bool, name: str) -> None:
        if not flag:
            raise UnsupportedError(f"{type(self).__name__} has no {name} map")

    def draw(self, width: int) -> PixelBuffer:
        self._require(self.has_main_map, "main")
        return self.grid.draw(width)

    def draw_heights(self, width: int) -> PixelBuffer:
        self._require(self.has_height_map, "height")
        return self.grid.draw_heights(width)

    def draw_deform(self, width: int) -> PixelBuffer:
        """Height map used to deform the shape of irregular bodies."""
        self._require(self.has_deform_map, "deform")
        return self.grid.draw_heights(width)

    def draw_clouds(self, width: int) -> List[PixelBuffer]:
        """Cloud layers, lowest first."""
        self._require(self.has_cloud_map, "cloud")
        return self.cloud_layers(width)

    def cloud_layers(self, width: int) -> List[PixelBuffer]:
        raise UnsupportedError(f"{type(self).__name__} has no cloud map")

    def draw_orbit(self, image: PixelBuffer, cx: int, cy: int, km_per_pixel: int) -> None:
        """Draw the body's orbit onto a system map centred on its star."""
        self._require(self.has_orbit_map, "orbit")
        self.paint_orbit(image, cx, cy, km_per_pixel)

    def paint_orbit(self, image: PixelBuffer, cx: int, cy: int, km_per_pixel: int) -> None:
        raise UnsupportedError(f"{type(self).__name__} has no orbit map")
