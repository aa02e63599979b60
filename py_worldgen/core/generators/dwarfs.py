"""
Generators for dwarf terrestrial worlds.

Dwarfs range from airless moons to small Mars-like worlds with thin
carbon dioxide atmospheres. Surface markings (rifts, polar craters,
metallic seas) are rolled here and painted later by the mappers.
"""

from ..body import BodyDescription
from ..codes import (
    Atmosphere,
    CommodityName,
    DwarfFeature,
    MagneticField,
    MoonFeature,
    PlanetGroup,
    PlanetType,
    Pressure,
    Temperature,
)
from ..random_source import RandomSource
from .base import (
    GenerationContext,
    body_generator,
    define_body,
    group_generator,
    lookup,
)

# Surface features on 2d6
AREAN_FEATURES = (
    (4, None),
    (5, DwarfFeature.SOUTH_CRATER),
    (6, DwarfFeature.EQUATORIAL_RIDGE),
    (7, DwarfFeature.GREAT_RIFT),
    (8, DwarfFeature.NORTH_CRATER),
    (9, DwarfFeature.BROKEN_RIFTS),
)

MESO_AREAN_FEATURES = AREAN_FEATURES[:-1]

HERMIAN_FEATURES = (
    (4, None),
    (5, DwarfFeature.SOUTH_CRATER),
    (6, DwarfFeature.EQUATORIAL_RIDGE),
    (7, None),
    (8, DwarfFeature.GREAT_RIFT),
    (9, DwarfFeature.NORTH_CRATER),
    (10, DwarfFeature.BROKEN_RIFTS),
    (11, DwarfFeature.RE_MELTED),
)

# Surface features on 3d6
FERRINIAN_FEATURES = (
    (7, None),
    (8, DwarfFeature.BROKEN_RIFTS),
    (9, DwarfFeature.GREAT_RIFT),
    (10, DwarfFeature.NORTH_CRATER),
    (11, DwarfFeature.SOUTH_CRATER),
    (12, DwarfFeature.NATURAL_HONEY_COMB),
    (13, DwarfFeature.ARTIFICIAL_HONEY_COMB),
)

# Magnetic field on 3d6
FERRINIAN_FIELDS = (
    (3, MagneticField.WEAK),
    (5, MagneticField.VERY_WEAK),
    (8, MagneticField.MINIMAL),
)

HERMIAN_FIELDS = (
    (4, MagneticField.VERY_WEAK),
    (7, MagneticField.MINIMAL),
)

JANIAN_FIELDS = (
    (3, MagneticField.WEAK),
    (5, MagneticField.VERY_WEAK),
    (7, MagneticField.MINIMAL),
)


def determine_pressure(rng: RandomSource, modifier: int) -> Pressure:
    roll = rng.d6() + modifier
    if roll < 2:
        return Pressure.TRACE
    if roll < 6:
        return Pressure.VERY_THIN
    return Pressure.THIN


def _add_rolled_feature(body: BodyDescription, table, roll: int) -> None:
    feature = lookup(table, roll)
    if feature is not None:
        body.add_feature(feature)


def _add_hermian_features(body: BodyDescription, rng) -> None:
    """Molten metal on very hot worlds, otherwise a roll on the terrain table."""
    if body.temperature > Temperature.LEAD_MELTS:
        roll = rng.d6()
        if roll == 1:
            body.add_feature(DwarfFeature.METALLIC_SEA)
            return
        if roll <= 3:
            body.add_feature(DwarfFeature.METALLIC_LAKES)
            return
    _add_rolled_feature(body, HERMIAN_FEATURES, rng.d6(2))


@group_generator(PlanetGroup.DWARF)
def generate_dwarf(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    body = define_body(ctx, name, body_type)
    body.radius = ctx.rng.d6(3) * 100
    return body


@body_generator(PlanetType.EU_AREAN)
def generate_eu_arean(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 2800 + rng.roll(500, 2)
    body.atmosphere = Atmosphere.CARBON_DIOXIDE
    body.pressure = determine_pressure(rng, -2)
    body.magnetic_field = MagneticField.NONE

    _add_rolled_feature(body, AREAN_FEATURES, rng.d6(2))

    res = ctx.resources
    res.primary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.SILICATE_CRYSTALS)
    res.tertiary(body, CommodityName.FERRIC_ORE)
    res.trace(body, CommodityName.WATER)

    return body


@body_generator(PlanetType.MESO_AREAN)
def generate_meso_arean(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 2800 + rng.roll(500, 2)
    body.atmosphere = Atmosphere.CARBON_DIOXIDE
    body.pressure = determine_pressure(rng, 0)
    body.magnetic_field = MagneticField.MINIMAL

    if body.pressure < 1000:
        body.hydrographics = 0
    elif body.pressure < 10_000:
        body.hydrographics = rng.d4()
    elif body.pressure < 30_000:
        body.magnetic_field = MagneticField.VERY_WEAK
        body.hydrographics = rng.d6(3)
    else:
        body.hydrographics = rng.d8(3)

    _add_rolled_feature(body, MESO_AREAN_FEATURES, rng.d6(2))

    res = ctx.resources
    res.primary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.SILICATE_CRYSTALS)
    res.tertiary(body, CommodityName.FERRIC_ORE)
    res.tertiary(body, CommodityName.WATER)

    return body


@body_generator(PlanetType.FERRINIAN)
def generate_ferrinian(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 1500 + rng.roll(400, 2)
    body.atmosphere = Atmosphere.VACUUM
    body.pressure = Pressure.NONE
    body.magnetic_field = lookup(FERRINIAN_FIELDS, rng.d6(3), MagneticField.NONE)

    _add_rolled_feature(body, FERRINIAN_FEATURES, rng.d6(3))

    res = ctx.resources
    res.primary(body, CommodityName.SILICATE_ORE)
    res.primary(body, CommodityName.FERRIC_ORE)
    res.primary(body, CommodityName.HEAVY_METALS)
    res.tertiary(body, CommodityName.SILICATE_CRYSTALS)
    res.secondary(body, CommodityName.RADIOACTIVES)
    res.secondary(body, CommodityName.PRECIOUS_METALS)

    return body


@body_generator(PlanetType.HERMIAN)
def generate_hermian(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    """Mercury-like worlds, hot enough near their star for pools of molten metal."""
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 2000 + rng.roll(500, 2)
    body.atmosphere = Atmosphere.VACUUM
    body.pressure = Pressure.NONE

    field = lookup(HERMIAN_FIELDS, rng.d6(3), MagneticField.NONE)
    body.magnetic_field = field
    if field == MagneticField.VERY_WEAK and rng.d3() == 1:
        body.atmosphere = Atmosphere.INERT_GASES
        body.pressure = 50 + rng.roll(100)

    _add_hermian_features(body, rng)

    molten = body.has_feature(DwarfFeature.METALLIC_SEA) or body.has_feature(
        DwarfFeature.METALLIC_LAKES
    )
    if molten and rng.d2() == 1:
        body.atmosphere = Atmosphere.EXOTIC
        body.pressure = 50 + rng.roll(100, 2)

    res = ctx.resources
    res.primary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.SILICATE_CRYSTALS)
    res.secondary(body, CommodityName.FERRIC_ORE)
    if molten:
        res.primary(body, CommodityName.HEAVY_METALS)
    else:
        res.secondary(body, CommodityName.HEAVY_METALS)
    res.tertiary(body, CommodityName.RADIOACTIVES)
    res.tertiary(body, CommodityName.PRECIOUS_METALS)

    return body


@body_generator(PlanetType.JANIAN)
def generate_janian(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    """Tidally locked to their star, one face baked and the other frozen."""
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 1500 + rng.roll(800, 3)
    body.atmosphere = Atmosphere.VACUUM
    body.pressure = Pressure.NONE

    roll = rng.d6(3)
    body.magnetic_field = lookup(JANIAN_FIELDS, roll, MagneticField.NONE)
    if roll <= 3 and rng.d2() == 1:
        body.atmosphere = Atmosphere.INERT_GASES
        body.pressure = Pressure.TRACE
    elif 3 < roll <= 5 and rng.d3() == 1:
        body.atmosphere = Atmosphere.INERT_GASES
        body.pressure = Pressure.TRACE

    body.day_length = ctx.star.period_at(ctx.orbital_distance)

    if rng.d2() == 1:
        body.add_feature(DwarfFeature.NIGHTSIDE_ICE)
        if rng.d2() == 1:
            body.atmosphere = Atmosphere.WATER_VAPOUR
            body.pressure = Pressure.TRACE

    res = ctx.resources
    res.primary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.SILICATE_CRYSTALS)
    res.secondary(body, CommodityName.FERRIC_ORE)
    res.secondary(body, CommodityName.HEAVY_METALS)
    res.tertiary(body, CommodityName.RADIOACTIVES)
    res.tertiary(body, CommodityName.PRECIOUS_METALS)
    res.tertiary(body, CommodityName.WATER)

    return body


@body_generator(PlanetType.SELENIAN)
def generate_selenian(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 1200 + rng.roll(600)
    body.atmosphere = Atmosphere.VACUUM
    body.pressure = Pressure.NONE
    body.magnetic_field = MagneticField.NONE

    if body.has_feature(MoonFeature.SMALL_MOON):
        body.radius //= 2
    elif body.has_feature(MoonFeature.LARGE_MOON):
        body.radius = int(body.radius * 1.5)

    ctx.resources.secondary(body, CommodityName.SILICATE_ORE)
    ctx.resources.tertiary(body, CommodityName.SILICATE_CRYSTALS)

    return body
