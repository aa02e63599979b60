"""
Mappers for asteroids and other small irregular bodies.

Small bodies have no meaningful relief map. Their fractal heights are used
instead to deform a sphere into a lumpy shape, so larger bodies get their
heights flattened further towards round.
"""

import structlog

from ..tiles import Rough, Tile
from .base import PlanetMapper

logger = structlog.get_logger()


class SmallBodyMapper(PlanetMapper):
    """Fractal deform map with no surface detail."""

    DEFAULT_FACE_SIZE = 12

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper=type(self).__name__)
        self.generate_height_map(12)
        self.has_height_map = False
        self.has_deform_map = True

    def _smooth_heights(self, divisor: int) -> None:
        """Replace each height with its row neighbourhood sum over divisor, in place."""
        grid = self.grid
        for x, y in grid.cells():
            h = grid.get_height(x - 1, y) + grid.get_height(x, y) + grid.get_height(x + 1, y)
            grid.set_height(x, y, h // divisor)


class AggregateMapper(SmallBodyMapper):
    pass


class GelidaceousMapper(SmallBodyMapper):
    pass


class CarbonaceousMapper(SmallBodyMapper):
    """Dark carbon-rich rubble."""

    CARBON = Tile("Carbon", "#606060", True)

    def generate(self) -> None:
        super().generate()
        grid = self.grid
        for x, y in grid.cells():
            grid.set_tile(x, y, self.CARBON.shaded(25 + grid.get_height(x, y) // 2))

        radius = self.body.radius
        self._smooth_heights(1 + radius // 100 if radius > 300 else 3)


class SilicaceousMapper(SmallBodyMapper):
    """Stony asteroids with a dappled surface."""

    SILICATES = Tile("Silicates", "#A09070", True)

    def generate(self) -> None:
        super().generate()
        grid = self.grid
        for x, y in grid.cells():
            shade = 50 + grid.get_height(x, y) // 2
            grid.set_tile(x, y, Rough(self.SILICATES.shaded(shade)))

        radius = self.body.radius
        self._smooth_heights(1 + radius // 80 if radius > 240 else 3)
