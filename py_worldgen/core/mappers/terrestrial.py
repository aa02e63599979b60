"""
Surface mappers for terrestrial worlds.

Terrestrial worlds start with a global ocean. Continents are seeded at
random and flooded outwards along high ground, polar ice is laid down by
temperature, and the atmosphere is drawn from a separate cloud grid.
"""

from typing import List

import structlog

from ...config import settings
from ..codes import TerrestrialFeature
from ..geodesic import Icosahedron, stretch_image
from ..image import PixelBuffer
from ..physics import STANDARD_PRESSURE
from ..tiles import Tile
from .base import PlanetMapper

logger = structlog.get_logger()


class TerrestrialMapper(PlanetMapper):
    """Oceans, continents and ice caps shared by the terrestrial mappers."""

    DEFAULT_FACE_SIZE = 24

    WATER = Tile("Water", "#7070C0", True, 2)
    LAND = Tile("Land", "#807050", False, 3)
    LAND_ICE = Tile("Glacier", "#C0C0C0", False, 2)
    SEA_ICE = Tile("Sea Ice", "#D0D0D0", True, 2)

    def __init__(self, body, grid=None, rng=None, face_size=None):
        super().__init__(body, grid, rng, face_size)
        self.cloud_face_size = settings.cloud_face_size

    def set_water(self) -> None:
        grid = self.grid
        for x, y in grid.cells():
            grid.set_tile(x, y, self.WATER)

    def create_continents(self, number: int) -> None:
        """
        Seed continents and flood them across 30% of the surface.

        Seeds avoid the two rows nearest each pole. Growth is weighted by
        height so coastlines follow the fractal terrain.
        """
        grid = self.grid
        rows = grid.num_rows
        for _ in range(number):
            y = self.rng.roll_zero(rows - 4) + 2
            x = self.rng.roll_zero(grid.width_at(y))
            grid.set_tile(x, y, self.LAND)

        grid.flood_to_percentage(self.LAND, 30, True)
        logger.debug("Created continents", body=self.body.name, seeds=number)

    def set_sea_level(self, hydrographics: int) -> None:
        """Flood everything at or below the height covering `hydrographics` percent."""
        grid = self.grid
        sea = grid.sea_level(hydrographics)
        for x, y in grid.cells():
            h = grid.get_height(x, y)
            if h <= sea:
                shade = (h + 200) // 3 - grid.latitude(y) // 9
                grid.set_tile(x, y, self.WATER.shaded(shade))
            else:
                grid.set_tile(x, y, self.LAND.shaded((h + 100) // 2))

    def ice_line(self) -> int:
        """Latitude score above which ice forms; warmer worlds push it polewards."""
        temperature = self.body.temperature
        if temperature > 250:
            return int((temperature - 250) * 1.5)
        return 0

    def set_ice_caps(self) -> None:
        grid = self.grid
        line = self.ice_line()
        for x, y in grid.cells():
            tile = grid.get_tile(x, y)
            h = grid.get_height(x, y)
            lat = grid.latitude(y)
            if tile.is_water:
                if lat + h // 10 > line:
                    grid.set_tile(x, y, self.SEA_ICE)
            elif lat + h // 5 > line:
                grid.set_tile(x, y, self.LAND_ICE)

    def cloud_layer(self) -> Icosahedron:
        """
        A fractal height field for clouds, independent of the surface.

        Returns:
            Grid of cloud_face_size whose heights are cloud density
        """
        target = self.cloud_face_size
        size = min(12, target)
        cloud = Icosahedron(size, self.rng).fractal()
        variation = 48
        while size < target:
            size = min(size * 2, target)
            cloud = Icosahedron(size, self.rng).fractal(cloud, variation)
            variation //= 2
        return cloud

    def _cloud_image(self, cloud: Icosahedron, colour: str, width: int) -> PixelBuffer:
        return stretch_image(cloud.draw_transparency(colour, width), width // 2)


class MesoGaianMapper(TerrestrialMapper):
    """Earth-like worlds whose oceans cover the body's hydrographic percentage."""

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper="MesoGaian")
        super().generate()
        self.set_sea_level(self.body.hydrographics)
        self.set_ice_caps()
        self.has_cloud_map = True

    def cloud_layers(self, width: int) -> List[PixelBuffer]:
        cloud = self.cloud_layer()
        limit = 100 - self.body.hydrographics // 2
        for x, y in cloud.cells():
            if cloud.get_height(x, y) < limit:
                cloud.set_height(x, y, 0)
        return [self._cloud_image(cloud, "#F0F0F0", width)]


class CythereanMapper(TerrestrialMapper):
    """Venus-like worlds hidden beneath thick cloud."""

    LAND = Tile("Land", "#A07050", False, 2)

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper="Cytherean")
        super().generate()

        grid = self.grid
        for x, y in grid.cells():
            grid.set_tile(x, y, self.LAND.shaded((grid.get_height(x, y) + 100) // 2))

        # Flatten to three levels for the bump map
        for x, y in grid.cells():
            h = grid.get_height(x, y)
            if h < 50:
                h = 25
            elif h < 90:
                h = 50
            else:
                h = 100
            grid.set_height(x, y, h)

        self.has_cloud_map = True

    def _pressure_layer(self, transform, colour: str, width: int) -> PixelBuffer:
        cloud = self.cloud_layer()
        modifier = self.body.pressure // STANDARD_PRESSURE
        for x, y in cloud.cells():
            cloud.set_height(x, y, transform(modifier, cloud.get_height(x, y)))
        return self._cloud_image(cloud, colour, width)

    def cloud_layers(self, width: int) -> List[PixelBuffer]:
        lower = self._pressure_layer(lambda m, h: m + h // 2, "#CFC1A4", width)
        upper = self._pressure_layer(lambda m, h: (m + h) // 3, "#B0B8BA", width)
        return [lower, upper]


class EoGaianMapper(TerrestrialMapper):
    """Young worlds of shallow seas, bare rock and microbial life."""

    BACTERIAL_MAT = Tile("Bacterial Mat", "#203020", True)

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper="EoGaian")
        super().generate()
        self.set_water()
        self.create_continents(4 + self.rng.d6())

        grid = self.grid
        for x, y in grid.cells():
            tile = grid.get_tile(x, y)
            h = grid.get_height(x, y)
            if tile.is_water:
                grid.set_tile(x, y, tile.shaded((h + 200) // 3))
            else:
                grid.set_tile(x, y, tile.shaded((h + 100) // 2))

        self.set_ice_caps()

        for x, y in grid.cells():
            if grid.get_tile(x, y).is_water:
                grid.set_height(x, y, 0)
            elif grid.get_height(x, y) < 90:
                grid.set_height(x, y, 50)
            else:
                grid.set_height(x, y, 100)

        self.create_craters(0, 50)

        if self.body.has_feature(TerrestrialFeature.BACTERIAL_MATS):
            self._add_bacterial_mats()

        self.has_cloud_map = True

    def _add_bacterial_mats(self) -> None:
        grid = self.grid
        for x, y in grid.cells():
            if grid.get_tile(x, y).is_water and grid.get_height(x, y) + grid.latitude(y) < 60:
                grid.set_tile(x, y, self.BACTERIAL_MAT)

    def cloud_limit(self) -> int:
        if self.body.has_feature(TerrestrialFeature.DRY):
            return 75
        if self.body.has_feature(TerrestrialFeature.WET):
            return 30
        return 50

    def cloud_colour(self) -> str:
        if self.body.has_feature(TerrestrialFeature.VOLCANOES) or self.body.has_feature(
            TerrestrialFeature.VOLCANIC_FLATS
        ):
            return "#808080"
        return "#F0F0F0"

    def cloud_layers(self, width: int) -> List[PixelBuffer]:
        cloud = self.cloud_layer()
        limit = self.cloud_limit()
        for x, y in cloud.cells():
            if cloud.get_height(x, y) < limit:
                cloud.set_height(x, y, 0)
        return [self._cloud_image(cloud, self.cloud_colour(), width)]
