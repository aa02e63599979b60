"""
Cloud band mappers for gas giants.

Bands are chosen in two passes. The first pass picks an anchor colour for
every other row, each usually a small variant of the one before and
occasionally a fresh pick from the planet's palette. The second pass
paints anchor rows with their anchor and the rows between with a blend
of the anchors either side.
"""

from typing import List

import structlog

from ..codes import JovianFeature
from ..tiles import Tile
from .base import PlanetMapper

logger = structlog.get_logger()


class JovianMapper(PlanetMapper):
    """Latitude banding shared by the gas giant mappers."""

    DEFAULT_FACE_SIZE = 12

    def palette(self) -> Tile:
        """A fresh band colour."""
        raise NotImplementedError

    def next_anchor(self, previous: Tile) -> Tile:
        if self.rng.d4() == 1:
            return self.palette()
        return previous.variant(self.rng.d8() - self.rng.d8())

    def band_anchors(self, count: int) -> List[Tile]:
        anchors = [self.palette()]
        while len(anchors) < count:
            anchors.append(self.next_anchor(anchors[-1]))
        return anchors

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper=type(self).__name__)
        grid = self.grid
        rows = grid.num_rows
        anchors = self.band_anchors(rows // 2 + 1)

        for y in range(rows):
            band = anchors[y // 2]
            if y % 2:
                band = band.mix(anchors[y // 2 + 1])
            for x in range(grid.width_at(y)):
                grid.set_tile(x, y, band)


class JovicMapper(JovianMapper):
    """Jupiter-like giants banded in creams and browns."""

    CREAM = Tile("Cream", "#DDDDAA", False, 6)
    YELLOW = Tile("Yellow", "#CCCC99", False, 6)
    LIGHT_BROWN = Tile("Light Brown", "#D3AD6E", False, 4)
    DARK_BROWN = Tile("Dark Brown", "#C69E60", False, 4)

    def palette(self) -> Tile:
        roll = self.rng.d6()
        if roll == 1:
            return self.CREAM
        if roll <= 3:
            return self.YELLOW
        if roll <= 5:
            return self.LIGHT_BROWN
        return self.DARK_BROWN


class JunicMapper(JovicMapper):
    """Low density giants, coloured as Jovic worlds."""


class SaturnianMapper(JovianMapper):
    """Pale giants whose palette follows their dominant cloud chemistry."""

    PALE_CREAM = Tile("Pale Cream", "#EEEECC", False, 2)
    LIGHT_CREAM = Tile("Cream", "#DDDDAA", False, 5)
    DARK_CREAM = Tile("Dark Cream", "#CCCC99", False, 3)
    LIGHT_BROWN = Tile("Light Brown", "#D3AD6E", False, 3)
    YELLOW = Tile("Yellow", "#CCCC99", False, 4)

    def palette(self) -> Tile:
        rng = self.rng
        if self.body.has_feature(JovianFeature.AMMONIA_CLOUDS):
            roll = rng.d4(2)
            if roll == 2:
                return self.YELLOW
            if roll <= 5:
                return self.LIGHT_CREAM
            if roll == 6:
                return self.DARK_CREAM
            return self.LIGHT_BROWN

        if self.body.has_feature(JovianFeature.WATER_CLOUDS):
            roll = rng.d6()
            if roll <= 2:
                return self.PALE_CREAM
            if roll <= 5:
                return self.LIGHT_CREAM
            return self.DARK_CREAM

        return (self.PALE_CREAM, self.LIGHT_CREAM, self.DARK_CREAM)[rng.d3() - 1]
