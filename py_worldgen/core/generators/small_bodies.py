"""
Generators for asteroids and other small bodies.

Resources follow temperature: hot bodies keep their metals, cold ones
their water and carbon compounds.
"""

from ..body import BodyDescription
from ..codes import CommodityName, PlanetGroup, PlanetType, SmallBodyFeature
from ..random_source import RandomSource
from .base import (
    GenerationContext,
    body_generator,
    define_body,
    group_generator,
    require_type,
)


def size_radius(body: BodyDescription, rng: RandomSource) -> int:
    """Radius in km from the body's size feature, medium by default."""
    if body.has_feature(SmallBodyFeature.TINY):
        return 3 + rng.d6()
    if body.has_feature(SmallBodyFeature.SMALL):
        return 10 + rng.d8(2)
    if body.has_feature(SmallBodyFeature.LARGE):
        return 100 + rng.d100(2)
    if body.has_feature(SmallBodyFeature.HUGE):
        return 300 + rng.roll(300, 2)
    if body.has_feature(SmallBodyFeature.GIGANTIC):
        return 1000 + rng.roll(500)
    return 30 + rng.d20(3)


def _short_day(rng: RandomSource, count: int = 2) -> int:
    return 3600 + rng.roll(3600, count)


def _water_by_temperature(ctx: GenerationContext, body: BodyDescription) -> None:
    if body.temperature < 300:
        ctx.resources.tertiary(body, CommodityName.WATER)
    elif body.temperature < 350:
        ctx.resources.trace(body, CommodityName.WATER)


@group_generator(PlanetGroup.SMALL_BODY)
def generate_small_body(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    body = define_body(ctx, name, body_type)
    body.radius = ctx.rng.d10(3)
    return body


@body_generator(PlanetType.AGGREGATE)
def generate_aggregate(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    require_type(body_type, PlanetType.AGGREGATE)
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 10 + rng.d6(3)
    body.day_length = 18_000 + rng.roll(3600, 5)

    res = ctx.resources
    res.secondary(body, CommodityName.SILICATE_ORE)
    t = body.temperature
    if t > 500:
        res.secondary(body, CommodityName.FERRIC_ORE)
        res.tertiary(body, CommodityName.CARBONIC_ORE)
        res.trace(body, CommodityName.RADIOACTIVES)
    elif t > 400:
        res.secondary(body, CommodityName.CARBONIC_ORE)
        res.tertiary(body, CommodityName.FERRIC_ORE)
    elif t > 300:
        res.secondary(body, CommodityName.CARBONIC_ORE)
        res.tertiary(body, CommodityName.FERRIC_ORE)
        res.trace(body, CommodityName.WATER)
    elif t > 200:
        res.secondary(body, CommodityName.WATER)
        res.tertiary(body, CommodityName.CARBONIC_ORE)
        res.trace(body, CommodityName.FERRIC_ORE)
    elif t > 100:
        res.secondary(body, CommodityName.WATER)
        res.trace(body, CommodityName.CARBONIC_ORE)

    return body


@body_generator(PlanetType.CARBONACEOUS)
def generate_carbonaceous(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    require_type(body_type, PlanetType.CARBONACEOUS)
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 100 + rng.d100(4)
    body.day_length = _short_day(rng)

    res = ctx.resources
    res.secondary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.CARBONIC_ORE)
    res.secondary(body, CommodityName.CARBONIC_CRYSTALS)
    if body.temperature > 500:
        res.tertiary(body, CommodityName.FERRIC_ORE)
    _water_by_temperature(ctx, body)

    return body


@body_generator(PlanetType.GELIDACEOUS)
def generate_gelidaceous(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 50 + rng.d20(3)
    body.day_length = _short_day(rng)

    res = ctx.resources
    res.primary(body, CommodityName.WATER)
    res.secondary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.CARBONIC_ORE)
    crystals = rng.d8()
    if crystals <= 2:
        res.trace(body, CommodityName.EXOTIC_CRYSTALS)
    elif crystals <= 4:
        res.trace(body, CommodityName.SILICATE_CRYSTALS)
    elif crystals <= 6:
        res.trace(body, CommodityName.CARBONIC_CRYSTALS)

    return body


@body_generator(PlanetType.METALLIC)
def generate_metallic(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = 10 + rng.d10(3)
    body.day_length = _short_day(rng, 3)

    res = ctx.resources
    res.primary(body, CommodityName.FERRIC_ORE)
    res.secondary(body, CommodityName.HEAVY_METALS)
    # Independent coin flips
    if rng.d2() == 1:
        res.secondary(body, CommodityName.RARE_METALS)
    if rng.d2() == 1:
        res.secondary(body, CommodityName.PRECIOUS_METALS)
    if rng.d2() == 1:
        res.tertiary(body, CommodityName.RADIOACTIVES)

    return body


@body_generator(PlanetType.SILICACEOUS)
def generate_silicaceous(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    require_type(body_type, PlanetType.SILICACEOUS)
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = size_radius(body, rng)
    body.day_length = _short_day(rng)

    res = ctx.resources
    res.primary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.SILICATE_CRYSTALS)
    res.secondary(body, CommodityName.FERRIC_ORE)
    res.secondary(body, CommodityName.RARE_METALS)
    if body.temperature > 500:
        res.tertiary(body, CommodityName.FERRIC_ORE)
    _water_by_temperature(ctx, body)

    return body


@body_generator(PlanetType.VULCANIAN)
def generate_vulcanian(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)
    body.radius = rng.d10(3)
    body.day_length = _short_day(rng)

    res = ctx.resources
    res.secondary(body, CommodityName.FERRIC_ORE)
    res.secondary(body, CommodityName.HEAVY_METALS)
    res.secondary(body, CommodityName.RARE_METALS)
    res.secondary(body, CommodityName.PRECIOUS_METALS)

    return body
