"""
Generators for Earth-sized rocky worlds.

This module contains:
- Shared terrestrial properties (radius, pressure, magnetic field)
- Cytherean: greenhouse worlds with crushing carbon dioxide atmospheres
- EoGaian: young ocean worlds where life is only just starting
- Moons of terrestrial worlds
"""

from typing import List

import structlog

from ..body import BodyDescription
from ..codes import (
    Atmosphere,
    CommodityName,
    Life,
    MagneticField,
    MoonFeature,
    PlanetGroup,
    PlanetType,
    Pressure,
    TerrestrialFeature,
    Tier,
)
from ..physics import STANDARD_PRESSURE
from .base import (
    GenerationContext,
    body_generator,
    define_body,
    generate_body,
    group_generator,
    lookup,
    moon_generator,
)

logger = structlog.get_logger()

# (pressure, temperature multiplier) on 2d6 + radius/1000 - 6
PRESSURES = (
    (1, (Pressure.VERY_THIN, 1.01)),
    (4, (Pressure.THIN, 1.03)),
    (9, (Pressure.STANDARD, 1.05)),
)
DENSE_PRESSURE = (Pressure.DENSE, 1.10)

TERRESTRIAL_FIELDS = (
    (2, MagneticField.MINIMAL),
    (4, MagneticField.VERY_WEAK),
    (7, MagneticField.WEAK),
    (12, MagneticField.STANDARD),
)

# (day length base, day length roll, field) on d6
CYTHEREAN_ROTATION = (
    (3, (72_000, (14_400, 2), MagneticField.STANDARD)),
    (5, (36_000, (28_800, 1), MagneticField.STRONG)),
    (6, (86_400, (864_000, 1), MagneticField.WEAK)),
)

# Life stage and the tier of each early biological commodity on 2d6.
# Every commodity in a row is assigned together.
EO_GAIAN_LIFE = (
    (3, (Life.NONE, {
        CommodityName.ORGANIC_CHEMICALS: Tier.PRIMARY,
    })),
    (5, (Life.ORGANIC, {
        CommodityName.ORGANIC_CHEMICALS: Tier.PRIMARY,
        CommodityName.PROTOBIONTS: Tier.SECONDARY,
    })),
    (7, (Life.ORGANIC, {
        CommodityName.ORGANIC_CHEMICALS: Tier.SECONDARY,
        CommodityName.PROTOBIONTS: Tier.PRIMARY,
    })),
    (9, (Life.ORGANIC, {
        CommodityName.ORGANIC_CHEMICALS: Tier.SECONDARY,
        CommodityName.PROTOBIONTS: Tier.PRIMARY,
        CommodityName.PROKARYOTES: Tier.TRACE,
    })),
    (10, (Life.ARCHAEAN, {
        CommodityName.ORGANIC_CHEMICALS: Tier.TERTIARY,
        CommodityName.PROTOBIONTS: Tier.SECONDARY,
        CommodityName.PROKARYOTES: Tier.PRIMARY,
    })),
    (11, (Life.ARCHAEAN, {
        CommodityName.ORGANIC_CHEMICALS: Tier.TERTIARY,
        CommodityName.PROTOBIONTS: Tier.TERTIARY,
        CommodityName.PROKARYOTES: Tier.PRIMARY,
        CommodityName.CYANOBACTERIA: Tier.TRACE,
    })),
    (12, (Life.ARCHAEAN, {
        CommodityName.PROTOBIONTS: Tier.TERTIARY,
        CommodityName.PROKARYOTES: Tier.PRIMARY,
        CommodityName.CYANOBACTERIA: Tier.TERTIARY,
    })),
)

EO_GAIAN_FEATURES = (
    (2, None),
    (4, TerrestrialFeature.BACTERIAL_MATS),
    (5, TerrestrialFeature.BORDERED_IN_BLACK),
    (6, TerrestrialFeature.BORDERED_IN_GREEN),
    (7, TerrestrialFeature.VOLCANIC_FLATS),
)


def set_terrestrial_properties(ctx: GenerationContext, body: BodyDescription) -> None:
    """Radius, nitrogen atmosphere, pressure and field of a typical terrestrial world."""
    rng = ctx.rng
    body.radius = 5500 + rng.roll(1000, 2)
    body.atmosphere = Atmosphere.NITROGEN_COMPOUNDS
    body.day_length = 20 * 3600 + rng.roll(7200, 4)

    pressure, warming = lookup(PRESSURES, rng.d6(2) + body.radius // 1000 - 6, DENSE_PRESSURE)
    body.pressure = pressure
    body.temperature = body.temperature * warming

    body.magnetic_field = lookup(TERRESTRIAL_FIELDS, rng.d6(2))


@group_generator(PlanetGroup.TERRESTRIAL)
def generate_terrestrial(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    body = define_body(ctx, name, body_type)
    body.radius = 5500 + ctx.rng.roll(1000, 2)
    return body


@body_generator(PlanetType.CYTHEREAN)
def generate_cytherean(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    naive = body.temperature
    set_terrestrial_properties(ctx, body)

    # Greenhouse heating replaces the usual pressure warming
    body.temperature = naive * 2
    body.hydrographics = 0
    body.pressure = STANDARD_PRESSURE * (70 + rng.d20(2))
    body.atmosphere = Atmosphere.CARBON_DIOXIDE

    base, (size, count), field = lookup(CYTHEREAN_ROTATION, rng.d6())
    body.day_length = base + rng.roll(size, count)
    body.magnetic_field = field

    res = ctx.resources
    res.secondary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.SILICATE_CRYSTALS)
    res.tertiary(body, CommodityName.CARBONIC_ORE)
    res.tertiary(body, CommodityName.FERRIC_ORE)

    return body


@body_generator(PlanetType.EO_GAIAN)
def generate_eo_gaian(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    set_terrestrial_properties(ctx, body)

    body.temperature *= 1.05
    body.hydrographics = rng.d20(2)

    life, profile = lookup(EO_GAIAN_LIFE, rng.d6(2))
    body.life = life
    logger.debug("Life stage", body=body.name, life=life.name)

    feature = lookup(EO_GAIAN_FEATURES, rng.d6(3))
    if feature is not None:
        body.add_feature(feature)

    res = ctx.resources
    res.secondary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.SILICATE_CRYSTALS)
    res.secondary(body, CommodityName.CARBONIC_ORE)
    res.tertiary(body, CommodityName.FERRIC_ORE)
    res.primary(body, CommodityName.ORGANIC_GASES)
    res.primary(body, CommodityName.WATER)
    for commodity, tier in profile.items():
        res.add(body, commodity, tier)

    return body


@moon_generator(PlanetType.CYTHEREAN, PlanetType.EO_GAIAN, PlanetType.MESO_GAIAN)
def terrestrial_moons(ctx: GenerationContext, planet: BodyDescription) -> List[BodyDescription]:
    """At most one moon, close in and tidally locked to its planet."""
    rng = ctx.rng
    roll = rng.d6()
    if roll <= 3:
        return []

    if roll <= 5:
        distance = (150 + rng.roll(50, 2)) * 1000 + rng.roll(1000)
        lock = MoonFeature.TIDALLY_LOCKED
    else:
        distance = (300 + rng.roll(100, 2)) * 1000 + rng.roll(1000)
        lock = MoonFeature.ALMOST_LOCKED if rng.d3() == 1 else MoonFeature.TIDALLY_LOCKED

    features = [lock]
    if roll <= 5:
        features.append(MoonFeature.SMALL_MOON)

    moon = generate_body(
        ctx.orbit,
        distance,
        f"{planet.name}a",
        PlanetType.SELENIAN,
        rng=rng,
        features=features,
    )
    return [moon]
