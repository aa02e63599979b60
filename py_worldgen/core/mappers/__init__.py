"""
Surface mappers and the registry that picks one for a body.

A body's own type is looked up first, then its group. Types with neither
have no surface mapper.
"""

from typing import Dict, Optional, Type

import structlog

from ...config import settings
from ...exceptions import UnsupportedError
from ..body import BodyDescription
from ..codes import PlanetGroup, PlanetType
from ..geodesic import Icosahedron, stretch_image
from ..image import PixelBuffer
from ..random_source import RandomSource
from .base import PlanetMapper
from .belt import DustDiscMapper
from .dwarf import (
    AreanMapper,
    DwarfMapper,
    EuAreanMapper,
    FerrinianMapper,
    HermianMapper,
    JanianMapper,
    MesoAreanMapper,
    SelenianMapper,
)
from .jovian import JovianMapper, JovicMapper, JunicMapper, SaturnianMapper
from .small_body import (
    AggregateMapper,
    CarbonaceousMapper,
    GelidaceousMapper,
    SilicaceousMapper,
    SmallBodyMapper,
)
from .terrestrial import CythereanMapper, EoGaianMapper, MesoGaianMapper, TerrestrialMapper

logger = structlog.get_logger()

TYPE_MAPPERS: Dict[PlanetType, Type[PlanetMapper]] = {
    PlanetType.CARBONACEOUS: CarbonaceousMapper,
    PlanetType.SILICACEOUS: SilicaceousMapper,
    PlanetType.AGGREGATE: AggregateMapper,
    PlanetType.GELIDACEOUS: GelidaceousMapper,
    PlanetType.EO_AREAN: AreanMapper,
    PlanetType.AREAN_LACUSTRIC: AreanMapper,
    PlanetType.EU_AREAN: EuAreanMapper,
    PlanetType.MESO_AREAN: MesoAreanMapper,
    PlanetType.FERRINIAN: FerrinianMapper,
    PlanetType.HERMIAN: HermianMapper,
    PlanetType.JANIAN: JanianMapper,
    PlanetType.SELENIAN: SelenianMapper,
    PlanetType.JOVIC: JovicMapper,
    PlanetType.SUPER_JOVIC: JovicMapper,
    PlanetType.JUNIC: JunicMapper,
    PlanetType.SUPER_JUNIC: JunicMapper,
    PlanetType.SATURNIAN: SaturnianMapper,
    PlanetType.CYTHEREAN: CythereanMapper,
    PlanetType.EO_GAIAN: EoGaianMapper,
    PlanetType.MESO_GAIAN: MesoGaianMapper,
}

GROUP_MAPPERS: Dict[PlanetGroup, Type[PlanetMapper]] = {
    PlanetGroup.BELT: DustDiscMapper,
    PlanetGroup.SMALL_BODY: SmallBodyMapper,
    PlanetGroup.DWARF: DwarfMapper,
    PlanetGroup.TERRESTRIAL: MesoGaianMapper,
}


def mapper_for(
    body: BodyDescription,
    grid: Optional[Icosahedron] = None,
    rng: Optional[RandomSource] = None,
    face_size: Optional[int] = None,
) -> PlanetMapper:
    """
    Create the mapper for a body.

    Raises:
        UnsupportedError: If neither the body's type nor its group has a mapper
    """
    body_type = body.body_type
    cls = TYPE_MAPPERS.get(body_type) or GROUP_MAPPERS.get(body_type.group)
    if cls is None:
        raise UnsupportedError(f"No surface mapper for {body_type.name}")
    return cls(body, grid=grid, rng=rng, face_size=face_size)


def populate_surface(
    body: BodyDescription,
    grid: Optional[Icosahedron] = None,
    rng: Optional[RandomSource] = None,
    face_size: Optional[int] = None,
) -> PlanetMapper:
    """Generate a body's surface and return the mapper holding it."""
    mapper = mapper_for(body, grid, rng, face_size)
    logger.info(
        "Populating surface",
        body=body.name,
        body_type=body.body_type.name,
        mapper=type(mapper).__name__,
    )
    mapper.generate()
    return mapper


def render_maps(
    body: BodyDescription,
    width: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    face_size: Optional[int] = None,
) -> Dict[str, PixelBuffer]:
    """
    Generate and draw every map a body has.

    Each map is stretched to a rectangular texture `width` pixels wide and
    half as tall, ready to wrap around a sphere.

    Args:
        body: Body to map
        width: Texture width, settings.planet_map_resolution if omitted
        rng: Random source, seeded from the body name if omitted
        face_size: Surface grid face size, the mapper's default if omitted

    Returns:
        Textures keyed "main", "height", "deform" and "clouds-0", "clouds-1"...
        for whichever maps the body has
    """
    width = width or settings.planet_map_resolution
    size = width // 2
    mapper = populate_surface(body, rng=rng, face_size=face_size)

    maps: Dict[str, PixelBuffer] = {}
    if mapper.has_main_map:
        maps["main"] = stretch_image(mapper.draw(width), size)
    if mapper.has_height_map:
        maps["height"] = stretch_image(mapper.draw_heights(width), size)
    if mapper.has_deform_map:
        maps["deform"] = stretch_image(mapper.draw_deform(width), size)
    if mapper.has_cloud_map:
        for i, layer in enumerate(mapper.draw_clouds(width)):
            maps[f"clouds-{i}"] = layer

    logger.info("Rendered maps", body=body.name, maps=sorted(maps))
    return maps


__all__ = [
    "AggregateMapper",
    "AreanMapper",
    "CarbonaceousMapper",
    "CythereanMapper",
    "DustDiscMapper",
    "DwarfMapper",
    "EoGaianMapper",
    "EuAreanMapper",
    "FerrinianMapper",
    "GelidaceousMapper",
    "GROUP_MAPPERS",
    "HermianMapper",
    "JanianMapper",
    "JovianMapper",
    "JovicMapper",
    "JunicMapper",
    "MesoAreanMapper",
    "MesoGaianMapper",
    "PlanetMapper",
    "SaturnianMapper",
    "SelenianMapper",
    "SilicaceousMapper",
    "SmallBodyMapper",
    "TYPE_MAPPERS",
    "TerrestrialMapper",
    "mapper_for",
    "populate_surface",
    "render_maps",
]
