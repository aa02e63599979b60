"""
Surface mappers for dwarf terrestrial worlds.

Most dwarfs are painted by scattering a weighted mix of three shades,
flooding the darkest and lightest outwards into patches, and pocking the
result with craters. Features rolled by the generators (rifts, polar
craters, metallic seas) are drawn over the top.
"""

from typing import Callable

import structlog

from ..codes import Atmosphere, DwarfFeature
from ..geodesic import Icosahedron
from ..tiles import Cratered, Tile
from .base import PlanetMapper

logger = structlog.get_logger()


class DwarfMapper(PlanetMapper):
    """Shared helpers for the dwarf world mappers."""

    DEFAULT_FACE_SIZE = 24

    RIFT = Tile("Rift", "#404040", False, 1)

    def paint(self, choose: Callable[[int, int], Tile]) -> None:
        """Set every tile to choose(x, y)."""
        grid = self.grid
        for x, y in grid.cells():
            grid.set_tile(x, y, choose(x, y))

    def crater_where(self, afflicted: Callable[[Tile], bool]) -> None:
        """Replace tiles for which afflicted(tile) is true with cratered versions."""
        grid = self.grid
        for x, y in grid.cells():
            tile = grid.get_tile(x, y)
            if afflicted(tile):
                grid.set_tile(x, y, Cratered(tile, self.rng))

    def add_broken_rifts(self) -> None:
        for _ in range(6 + self.rng.d4(2)):
            self.add_rift(self.RIFT, 6 + self.rng.d4(2))

    def features(self):
        """The body's dwarf features in a stable order."""
        return [f for f in DwarfFeature if self.body.has_feature(f)]

    def add_features(self) -> None:
        for feature in self.features():
            logger.debug("Adding surface feature", body=self.body.name, feature=feature.value)
            self.add_feature(feature)

    def add_feature(self, feature: DwarfFeature) -> None:
        """Draw one feature. Features a mapper does not draw are ignored."""


class AreanMapper(DwarfMapper):
    """Cold desert worlds with polar ice, darkest in the low southern basins."""

    DARK_RED = Tile("Dark Red", "#906045", False, 2)
    MID_RED = Tile("Mid Red", "#D08055", False, 3)
    LIGHT_RED = Tile("Light Red", "#F09050", False, 2)
    ICE = Tile("Ice", "#E0E0E0", False, 2)
    RIFT = Tile("Rift", "#D08040", False, 1)

    def _parent_map(self) -> Icosahedron:
        """Random face size 3 grid with the southern rows pushed down."""
        parent = Icosahedron(3, self.rng).fractal()
        modifier = 1.0
        for y in range(parent.face_size * 2 - 1, parent.num_rows):
            modifier *= 0.5
            for x in range(parent.width_at(y)):
                parent.set_height(x, y, int(parent.get_height(x, y) * modifier))
        return parent

    def _colour(self, x: int, y: int) -> Tile:
        h = self.grid.get_height(x, y)
        if h < 15:
            return self.DARK_RED.shaded(75 + h)
        if h < 75:
            return self.LIGHT_RED.shaded(100 - h // 5)
        return self.MID_RED.shaded(85 + (h - 75) // 2)

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper=type(self).__name__)
        rng = self.rng
        grid = self.grid
        self.generate_height_map(24, self._parent_map())
        self.paint(self._colour)

        grid.flood(self.DARK_RED, 6)
        for x, y in grid.cells():
            if grid.get_tile(x, y) == self.DARK_RED:
                grid.set_tile(x, y, self.DARK_RED.shaded(75 + grid.get_height(x, y)))

        for x, y in grid.cells():
            tile = grid.get_tile(x, y)
            score = grid.latitude(y) + grid.get_height(x, y) // 5
            if score > 85:
                grid.set_tile(x, y, self.ICE)
            elif score > 80:
                grid.set_tile(x, y, tile.mix(self.ICE).mix(self.ICE))
            elif tile == self.LIGHT_RED:
                if rng.d20() == 1:
                    grid.set_tile(x, y, Cratered(tile, rng))
            elif tile == self.MID_RED:
                if rng.d6() == 1:
                    grid.set_tile(x, y, Cratered(tile, rng))
            elif rng.d12() == 1:
                grid.set_tile(x, y, Cratered(tile, rng))


class EuAreanMapper(AreanMapper):
    """Mars-like worlds, with rifts where the generator rolled them."""

    def generate(self) -> None:
        super().generate()
        self.add_features()

    def add_feature(self, feature: DwarfFeature) -> None:
        if feature == DwarfFeature.GREAT_RIFT:
            self.add_rift(self.RIFT, 24 + self.rng.d12(3))
            self.grid.flood(self.RIFT, 1)
        elif feature == DwarfFeature.BROKEN_RIFTS:
            self.add_broken_rifts()


class FerrinianMapper(DwarfMapper):
    """Iron-rich airless worlds in mottled greys."""

    CRATER = Tile("Polar Crater", "#505050", False, 4)
    DARK_GREY = Tile("Dark Grey", "#707270", False, 3)
    MID_GREY = Tile("Mid Grey", "#747674", False, 3)
    LIGHT_GREY = Tile("Light Grey", "#7B7B78", False, 3)

    def _colour(self, x: int, y: int) -> Tile:
        roll = self.rng.d6(2)
        if roll <= 3:
            return self.LIGHT_GREY
        if roll <= 8:
            return self.MID_GREY
        return self.DARK_GREY

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper="Ferrinian")
        rng = self.rng
        grid = self.grid
        self.generate_height_map(24)
        self.paint(self._colour)

        grid.flood(self.DARK_GREY, 4)
        grid.flood(self.LIGHT_GREY, 6)
        self.crater_where(
            lambda tile: rng.d4() == 1 if tile == self.LIGHT_GREY else rng.d3() == 1
        )

        rows = grid.num_rows
        if self.body.has_feature(DwarfFeature.NORTH_CRATER):
            size = rows // 3 - rng.d4()
            for y in range(max(0, size)):
                for x in range(grid.width_at(y)):
                    if y < size - rng.d2():
                        grid.set_tile(x, y, self.CRATER)
        elif self.body.has_feature(DwarfFeature.SOUTH_CRATER):
            size = rows * 2 // 3 + rng.d4()
            for y in range(rows - 1, size, -1):
                for x in range(grid.width_at(y)):
                    if y > size + rng.d2():
                        grid.set_tile(x, y, self.CRATER)


class HermianMapper(DwarfMapper):
    """Mercury-like worlds: heavily cratered, sometimes with pools of molten metal."""

    DARK_GREY = Tile("Dark Grey", "#808280", False, 2)
    MID_GREY = Tile("Mid Grey", "#848684", False, 2)
    LIGHT_GREY = Tile("Light Grey", "#8B8B88", False, 2)
    SILVER = Tile("Silver", "#D0D0D0", True, 1)
    CRATER_RIDGE = Tile("Ridge", "#A0A0A0", False, 2)
    CRATER_FLOOR = Tile("Floor", "#606060", False, 5)

    @property
    def re_melted(self) -> bool:
        return self.body.has_feature(DwarfFeature.RE_MELTED)

    def _colour(self, x: int, y: int) -> Tile:
        rng = self.rng
        if self.re_melted:
            return self.LIGHT_GREY if rng.d6(2) == 2 else self.DARK_GREY

        roll = rng.d4(2) + self.grid.get_height(x, y) // 24
        if roll == 2:
            return self.LIGHT_GREY
        if roll <= 9:
            return self.MID_GREY
        return self.DARK_GREY

    def _afflicted(self, tile: Tile) -> bool:
        rng = self.rng
        if tile == self.LIGHT_GREY:
            return rng.d3() == 1
        if rng.d2() == 1 and not self.re_melted:
            return True
        return rng.d6() == 1

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper="Hermian")
        grid = self.grid
        self.generate_height_map(24)
        self.paint(self._colour)

        if self.re_melted:
            grid.flood(self.DARK_GREY, 1)
            grid.flood(self.LIGHT_GREY, 3)
        else:
            grid.flood(self.DARK_GREY, 3)
            grid.flood(self.LIGHT_GREY, 7)
        self.crater_where(self._afflicted)

        for x, y in grid.cells():
            h = grid.get_height(x, y)
            if h < 21:
                h = 10
            elif h < 90:
                h = 50
            else:
                h = 100
            grid.set_height(x, y, h)

        self.create_craters(0, 250)
        self.add_features()

    def add_feature(self, feature: DwarfFeature) -> None:
        rng = self.rng
        grid = self.grid
        if feature == DwarfFeature.GREAT_RIFT:
            self.add_rift(self.RIFT, 8 + rng.d6(2))
        elif feature == DwarfFeature.BROKEN_RIFTS:
            self.add_broken_rifts()
        elif feature == DwarfFeature.METALLIC_SEA:
            y = grid.num_rows // 2 + rng.variance(3)
            x = grid.width_at(y) // 2 + rng.variance(2)
            grid.set_tile(x, y, self.SILVER)
            grid.flood(self.SILVER, 7)
        elif feature in (DwarfFeature.NORTH_CRATER, DwarfFeature.SOUTH_CRATER):
            self.major_crater(feature == DwarfFeature.NORTH_CRATER)

    def _fill_row(self, y: int, choose: Callable[[], Tile]) -> None:
        grid = self.grid
        for x in range(grid.width_at(y)):
            grid.set_tile(x, y, choose())

    def major_crater(self, north: bool) -> None:
        """
        A basin covering a third of the world around one pole.

        The basin has a ridge at the pole and at its rim, a cratered floor
        between, and sometimes a ring of hills halfway out.
        """
        rng = self.rng
        grid = self.grid
        rows = grid.num_rows
        start, direction = (0, 1) if north else (rows - 1, -1)

        self._fill_row(start, lambda: self.CRATER_RIDGE)

        edge = start + (rows // 3 + rng.variance(3)) * direction
        edge = max(0, min(rows - 1, edge))
        y = start
        while y != edge:
            y += direction
            for x in range(grid.width_at(y)):
                tile = self.CRATER_FLOOR
                if rng.d6() == 1:
                    tile = Cratered(tile, rng)
                grid.set_tile(x, y, tile)

        self._fill_row(y, lambda: self.LIGHT_GREY if rng.d6() == 1 else self.CRATER_RIDGE)

        if rng.d2() == 1:
            mid = (start + y) // 2 + rng.variance(2)
            mid = max(0, min(rows - 1, mid))
            self._fill_row(mid, lambda: self.DARK_GREY if rng.d3() == 1 else self.MID_GREY)


class JanianMapper(DwarfMapper):
    """
    Tidally locked worlds.

    The sub-stellar point sits at the centre of the map, so tiles are
    lighter towards the middle of each row and darkest at the edges.
    """

    DARK_GREY = Tile("Dark Grey", "#808280", False, 2)
    MID_GREY = Tile("Mid Grey", "#848684", False, 2)
    LIGHT_GREY = Tile("Light Grey", "#908B88", False, 2)
    SILVER = Tile("Silver", "#1E1F12", True, 1)
    ICE = Tile("Ice", "#E0E0E0", False, 1)

    # Upper bounds as a fraction of the row midpoint, and the modifier
    # applied to the colour roll below each.
    DAYSIDE_BANDS = (
        (0.2, -2),
        (0.4, -1),
        (0.6, 0),
        (0.8, 1),
        (1.2, 2),
        (1.4, 1),
        (1.6, 0),
        (1.8, -1),
    )

    def _modifier(self, x: int, y: int) -> int:
        mid = self.grid.width_at(y) // 2
        for bound, modifier in self.DAYSIDE_BANDS:
            if x < mid * bound:
                return modifier
        return -2

    def _colour(self, x: int, y: int) -> Tile:
        roll = self.rng.d6(2) + self._modifier(x, y)
        if roll <= 4:
            return self.DARK_GREY
        if roll <= 9:
            return self.MID_GREY
        return self.LIGHT_GREY

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper="Janian")
        rng = self.rng
        grid = self.grid
        self.paint(self._colour)
        grid.flood(self.DARK_GREY, 2)
        grid.flood(self.LIGHT_GREY, 2)

        if self.body.has_feature(DwarfFeature.NIGHTSIDE_ICE):
            y = grid.num_rows // 2
            grid.set_tile(grid.width_at(y) // 2, y, self.ICE)
            grid.flood(self.ICE, 8)
            if self.body.atmosphere == Atmosphere.OXYGEN:
                grid.flood(self.ICE, 4)

        self.crater_where(
            lambda tile: rng.d3() == 1 if tile == self.LIGHT_GREY else rng.d6() == 1
        )
        self.add_features()

    def add_feature(self, feature: DwarfFeature) -> None:
        rng = self.rng
        grid = self.grid
        if feature == DwarfFeature.GREAT_RIFT:
            self.add_rift(self.RIFT, 8 + rng.d6(2))
        elif feature == DwarfFeature.BROKEN_RIFTS:
            self.add_broken_rifts()
        elif feature == DwarfFeature.METALLIC_SEA:
            y = grid.num_rows // 2 + rng.variance(3)
            grid.set_tile(rng.variance(4), y, self.SILVER)
            grid.flood(self.SILVER, 7)


class MesoAreanMapper(DwarfMapper):
    """Mars-like worlds that still hold shallow seas."""

    DARK_RED = Tile("Dark Red", "#A07055", False, 3)
    MID_RED = Tile("Mid Red", "#E07040", False, 2)
    LIGHT_RED = Tile("Light Red", "#F08050", False, 2)
    RIFT = Tile("Rift", "#604040", False, 1)
    WATER = Tile("Water", "#6666AA", True, 3)

    def _colour(self, x: int, y: int) -> Tile:
        roll = self.rng.d6(2)
        if roll <= 5:
            return self.LIGHT_RED
        if roll <= 11:
            return self.MID_RED
        return self.DARK_RED

    def _afflicted(self, tile: Tile) -> bool:
        rng = self.rng
        if tile == self.LIGHT_RED:
            return rng.d12() == 1
        if tile == self.MID_RED:
            return rng.d6() == 1
        if tile == self.DARK_RED:
            return rng.d3() != 1
        return False

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper="MesoArean")
        rng = self.rng
        grid = self.grid
        self.paint(self._colour)
        grid.flood(self.DARK_RED, 4)
        grid.flood(self.LIGHT_RED, 3)
        self.crater_where(self._afflicted)

        hydrographics = self.body.hydrographics
        if hydrographics > 0:
            seeds = 1 + grid.total_tiles * hydrographics // 1000
            for _ in range(seeds):
                y = rng.roll_zero(grid.num_rows)
                grid.set_tile(rng.roll_zero(grid.width_at(y)), y, self.WATER)
            grid.flood_to_percentage(self.WATER, hydrographics)

        self.add_features()

    def add_feature(self, feature: DwarfFeature) -> None:
        if feature == DwarfFeature.GREAT_RIFT:
            self.add_rift(self.RIFT, 8 + self.rng.d6(2))


class SelenianMapper(DwarfMapper):
    """Moon-like worlds of dark maria and pale highlands."""

    MARIA = Tile("Seas", "#404040", False, 2)
    HIGHLANDS = Tile("Highlands", "#8B8B88", False, 2)

    def generate(self) -> None:
        logger.info("Mapping surface", body=self.body.name, mapper="Selenian")
        grid = self.grid
        self.generate_height_map(24)

        sea = grid.sea_level(5)
        for x, y in grid.cells():
            h = grid.get_height(x, y)
            if h <= sea:
                grid.set_tile(x, y, self.MARIA)
            else:
                grid.set_tile(x, y, self.HIGHLANDS.shaded(50 + h // 2))

        grid.flood_to_percentage(self.MARIA, 20, False)
        grid.grow_border(self.MARIA, 2, 2)

        for x, y in grid.cells():
            if grid.get_tile(x, y) == self.MARIA:
                grid.set_tile(x, y, self.MARIA.shaded(75 + grid.get_height(x, y) // 2))
