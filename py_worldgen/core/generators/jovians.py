"""Generators for gas giants."""

from ..body import BodyDescription
from ..codes import (
    Atmosphere,
    CommodityName,
    JovianFeature,
    MagneticField,
    PlanetGroup,
    PlanetType,
    Pressure,
    Temperature,
)
from ..physics import STANDARD_DAY
from .base import (
    GenerationContext,
    body_generator,
    define_body,
    group_generator,
    lookup,
)

# Magnetic field on 2d6
JOVIC_FIELDS = (
    (4, MagneticField.STRONG),
    (11, MagneticField.VERY_STRONG),
    (12, MagneticField.INTENSE),
)

SATURNIAN_FIELDS = (
    (3, MagneticField.STANDARD),
    (11, MagneticField.STRONG),
    (12, MagneticField.VERY_STRONG),
)


def _giant_radius(ctx: GenerationContext) -> int:
    return 45_000 + ctx.rng.roll(5000, 4)


def _saturnian_body(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = _giant_radius(ctx)
    body.atmosphere = Atmosphere.HYDROGEN
    body.pressure = Pressure.SUPER_DENSE
    body.magnetic_field = lookup(SATURNIAN_FIELDS, rng.d6(2))
    body.day_length = 10 * STANDARD_DAY + rng.roll(3600, 2)
    return body


def _saturnian_resources(ctx: GenerationContext, body: BodyDescription) -> None:
    res = ctx.resources
    res.primary(body, CommodityName.HYDROGEN)
    res.tertiary(body, CommodityName.HELIUM)
    res.tertiary(body, CommodityName.ORGANIC_GASES)
    res.tertiary(body, CommodityName.WATER)


@group_generator(PlanetGroup.JOVIAN)
def generate_jovian(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = rng.d6(3) * 5000
    body.atmosphere = Atmosphere.HYDROGEN
    body.pressure = Pressure.SUPER_DENSE
    body.day_length = 9 * STANDARD_DAY + rng.roll(3600, 2)

    ctx.resources.primary(body, CommodityName.HYDROGEN)
    ctx.resources.tertiary(body, CommodityName.HELIUM)

    return body


@body_generator(PlanetType.JOVIC)
def generate_jovic(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = _giant_radius(ctx)
    body.atmosphere = Atmosphere.HYDROGEN
    body.pressure = Pressure.SUPER_DENSE
    body.magnetic_field = lookup(JOVIC_FIELDS, rng.d6(2))
    body.day_length = 9 * STANDARD_DAY + rng.roll(3600, 2)

    if rng.d4() == 1:
        body.add_feature(JovianFeature.WATER_CLOUDS)
    else:
        body.add_feature(JovianFeature.AMMONIA_CLOUDS)

    res = ctx.resources
    res.primary(body, CommodityName.HYDROGEN)
    res.secondary(body, CommodityName.HELIUM)
    res.tertiary(body, CommodityName.ORGANIC_GASES)
    res.tertiary(body, CommodityName.WATER)

    return body


@body_generator(PlanetType.SATURNIAN)
def generate_saturnian(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    body = _saturnian_body(ctx, name, body_type)

    if body.temperature < Temperature.COOL:
        body.add_feature(JovianFeature.AMMONIA_CLOUDS)
    elif body.temperature < Temperature.VERY_HOT:
        body.add_feature(JovianFeature.WATER_CLOUDS)
    else:
        body.add_feature(JovianFeature.CLOUDLESS)

    _saturnian_resources(ctx, body)
    return body


@body_generator(PlanetType.SOKARIAN)
def generate_sokarian(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    """Hot jupiter whose silicate clouds need the atmosphere above their melting point."""
    body = _saturnian_body(ctx, name, body_type)

    if body.temperature < Temperature.SILICATES_MELT:
        body.temperature = Temperature.SILICATES_MELT
    body.add_feature(JovianFeature.SILICATE_CLOUDS)

    _saturnian_resources(ctx, body)
    return body
