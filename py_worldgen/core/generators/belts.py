"""
Generators for circumstellar belts and discs.

A belt's radius is the width of the ring rather than the size of a single
body. Asteroid and ice belts may roll a ring feature that rescales their
width and density, and both can carry oversized members generated as
moons.
"""

from typing import Callable, List, Tuple

import structlog

from ..body import BodyDescription
from ..codes import BeltFeature, CommodityName, PlanetGroup, PlanetType, SmallBodyFeature
from ..physics import MKM, round_significant
from ..random_source import RandomSource
from .base import (
    GenerationContext,
    body_generator,
    check_distance,
    define_body,
    generate_body,
    group_generator,
    lookup,
    moon_generator,
)

logger = structlog.get_logger()

ASTEROID_BELT_FEATURES = (
    (4, BeltFeature.THIN_RING),
    (6, BeltFeature.WIDE_SPARSE_RING),
    (8, BeltFeature.PLANETOIDS),
)

ICE_BELT_FEATURES = (
    (3, BeltFeature.THIN_RING),
    (8, BeltFeature.WIDE_SPARSE_RING),
    (16, None),
    (18, BeltFeature.PLANETOIDS),
)

ASTEROID_MOON_SIZES = (
    (1, SmallBodyFeature.GIGANTIC),
    (5, SmallBodyFeature.HUGE),
)

ICE_MOON_SIZES = (
    (0, SmallBodyFeature.GIGANTIC),
    (4, SmallBodyFeature.HUGE),
)


def _roll_ring_feature(body: BodyDescription, table, roll: int) -> None:
    feature = lookup(table, roll)
    if feature is not None:
        logger.debug("Belt feature", body=body.name, feature=feature.name, roll=roll)
        body.add_feature(feature)


def _apply_ring_feature(
    ctx: GenerationContext,
    body: BodyDescription,
    thin_width: int,
    spread: int,
    planetoid_divisor: int,
) -> None:
    """
    Rescale a belt for its ring feature.

    A thin ring narrows to a fixed small range and becomes ten times as
    dense. A wide sparse ring moves outwards by spread times its width
    and becomes a tenth as dense. Planetoids sweep up half the belt.
    """
    if body.has_feature(BeltFeature.THIN_RING):
        body.radius = thin_width + ctx.rng.roll(100_000, 3)
        body.density *= 10
    elif body.has_feature(BeltFeature.WIDE_SPARSE_RING):
        ctx.distance += body.radius * spread
        body.distance = ctx.distance
        body.density //= 10
    elif body.has_feature(BeltFeature.PLANETOIDS):
        body.radius //= 2
        body.density //= planetoid_divisor


@group_generator(PlanetGroup.BELT)
def generate_belt(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)

    radius = rng.d6(3) * MKM
    if ctx.distance < 10 * MKM:
        radius //= 2
    elif ctx.distance < 25 * MKM:
        pass
    elif ctx.distance < 100 * MKM:
        radius = radius * 3 + rng.d3() * MKM
    else:
        radius = radius * 5 + rng.d10() * MKM
    check_distance(ctx, body, radius)

    return body


@body_generator(PlanetType.ASTEROID_BELT)
def generate_asteroid_belt(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)

    radius = rng.d6(20) * MKM
    body.density = 1000 + rng.variance(250)
    _roll_ring_feature(body, ASTEROID_BELT_FEATURES, rng.d6(3))
    check_distance(ctx, body, radius)
    _apply_ring_feature(ctx, body, 20_000, 5, 3)

    res = ctx.resources
    res.primary(body, CommodityName.SILICATE_ORE)
    res.primary(body, CommodityName.CARBONIC_ORE)
    res.secondary(body, CommodityName.FERRIC_ORE)
    res.tertiary(body, CommodityName.WATER)
    res.tertiary(body, CommodityName.HEAVY_METALS)
    res.tertiary(body, CommodityName.PRECIOUS_METALS)

    return body


@body_generator(PlanetType.ICE_BELT)
def generate_ice_belt(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)

    radius = rng.d6(20) * MKM
    body.density = 750 + rng.variance(250)
    _roll_ring_feature(body, ICE_BELT_FEATURES, rng.d6(3))
    check_distance(ctx, body, radius)
    _apply_ring_feature(ctx, body, 25_000, 6, 2)

    res = ctx.resources
    res.primary(body, CommodityName.WATER)
    res.tertiary(body, CommodityName.SILICATE_ORE)
    res.trace(body, CommodityName.CARBONIC_ORE)

    return body


@body_generator(PlanetType.DUST_DISC)
def generate_dust_disc(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)

    radius = check_distance(ctx, body, ctx.distance // 3)
    body.radius = round_significant(radius, 4)

    res = ctx.resources
    res.tertiary(body, CommodityName.HYDROGEN)
    if body.temperature < 300 and rng.d2() == 1:
        res.secondary(body, CommodityName.WATER)
    elif body.temperature < 400 and rng.d2() == 1:
        res.tertiary(body, CommodityName.WATER)
    elif body.temperature < 400:
        res.trace(body, CommodityName.WATER)
    if rng.d3() == 1:
        res.trace(body, CommodityName.SILICATE_ORE)
    if rng.d6() == 1:
        res.trace(body, CommodityName.CARBONIC_ORE)

    return body


@body_generator(PlanetType.PLANETESIMAL_DISC)
def generate_planetesimal_disc(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    body = define_body(ctx, name, body_type)
    check_distance(ctx, body, ctx.distance // 3)

    res = ctx.resources
    res.secondary(body, CommodityName.SILICATE_ORE)
    res.secondary(body, CommodityName.CARBONIC_ORE)
    if body.temperature < 400:
        res.tertiary(body, CommodityName.WATER)

    return body


@body_generator(PlanetType.VULCANIAN_BELT)
def generate_vulcanian_belt(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    rng = ctx.rng
    body = define_body(ctx, name, body_type)

    radius = rng.d6(3) * MKM
    if ctx.distance < 10 * MKM:
        radius = rng.d4(2) * MKM
        if radius > ctx.distance:
            ctx.distance = radius + rng.d2() * MKM
    elif ctx.distance < 25 * MKM:
        radius = rng.d6(3) * MKM
    elif ctx.distance < 100 * MKM:
        radius = rng.d6(4) * MKM
    check_distance(ctx, body, radius)

    res = ctx.resources
    res.primary(body, CommodityName.SILICATE_ORE)
    res.primary(body, CommodityName.CARBONIC_ORE)
    res.secondary(body, CommodityName.FERRIC_ORE)
    res.secondary(body, CommodityName.HEAVY_METALS)
    res.tertiary(body, CommodityName.PRECIOUS_METALS)
    res.tertiary(body, CommodityName.RADIOACTIVES)

    return body


def moon_offsets(rng: RandomSource, radius: int, count: int) -> List[int]:
    """
    Offsets of belt members from the belt's centre line, innermost first.

    A single member sits anywhere across the belt with little jitter, two
    members share the inner side, and larger swarms are spread evenly from
    the inner edge with jitter of a fifth of the spacing.
    """
    if count < 1:
        return []

    radius = max(1, radius)
    spacing = radius // count
    start = -radius
    if count == 1:
        start = rng.variance(radius)
        spacing = radius // 100
    elif count == 2:
        start = -rng.roll(radius)
        spacing = radius // 2

    offsets = []
    for _ in range(count):
        offsets.append(start + rng.variance(spacing // 5))
        start += spacing
    return offsets


def _belt_moons(
    ctx: GenerationContext,
    belt: BodyDescription,
    count: int,
    pick: Callable[[], Tuple[SmallBodyFeature, PlanetType]],
) -> List[BodyDescription]:
    moons = []
    for i, offset in enumerate(moon_offsets(ctx.rng, belt.radius, count)):
        size, moon_type = pick()
        moons.append(
            generate_body(
                ctx.orbit,
                offset,
                f"{belt.name} {i + 1}",
                moon_type,
                rng=ctx.rng,
                features=(size,),
            )
        )
    return moons


@moon_generator(PlanetType.ASTEROID_BELT)
def asteroid_belt_moons(ctx: GenerationContext, belt: BodyDescription) -> List[BodyDescription]:
    rng = ctx.rng
    planetoids = belt.has_feature(BeltFeature.PLANETOIDS)
    count = rng.d4() - 1
    if planetoids:
        count += rng.d4(3)

    def pick():
        roll = rng.d6(2) - (2 if planetoids else 0)
        size = lookup(ASTEROID_MOON_SIZES, roll, SmallBodyFeature.LARGE)
        moon_type = PlanetType.CARBONACEOUS if rng.d6() <= 3 else PlanetType.SILICACEOUS
        return size, moon_type

    return _belt_moons(ctx, belt, count, pick)


@moon_generator(PlanetType.ICE_BELT)
def ice_belt_moons(ctx: GenerationContext, belt: BodyDescription) -> List[BodyDescription]:
    rng = ctx.rng
    planetoids = belt.has_feature(BeltFeature.PLANETOIDS)
    count = rng.d4() - 1
    if planetoids:
        count += rng.d3(2)

    def pick():
        roll = rng.d6(2) - (2 if planetoids else 0)
        size = lookup(ICE_MOON_SIZES, roll, SmallBodyFeature.LARGE)
        moon_type = PlanetType.SILICACEOUS if rng.d6() == 1 else PlanetType.GELIDACEOUS
        return size, moon_type

    return _belt_moons(ctx, belt, count, pick)
