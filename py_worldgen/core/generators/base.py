"""
Shared scaffolding for body generators.

Every body type maps to one generator function taking a GenerationContext,
a name and the type, and returning a populated BodyDescription. Generators
register themselves by type; a group-level fallback covers types with no
dedicated generator. Moon generators are registered separately and run
after the primary body exists.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import structlog

from ...exceptions import InvalidArgumentError, UnsupportedError
from ..body import BodyDescription, OrbitContext
from ..codes import Atmosphere, Life, MagneticField, PlanetGroup, PlanetType, Pressure
from ..physics import STANDARD_DAY, orbit_temperature
from ..random_source import RandomSource
from ..resources import ResourceTable

logger = structlog.get_logger()

Generator = Callable[["GenerationContext", str, PlanetType], BodyDescription]
MoonGenerator = Callable[["GenerationContext", BodyDescription], List[BodyDescription]]

_TYPE_GENERATORS: Dict[PlanetType, Generator] = {}
_GROUP_GENERATORS: Dict[PlanetGroup, Generator] = {}
_MOON_GENERATORS: Dict[PlanetType, MoonGenerator] = {}


@dataclass
class GenerationContext:
    """State for one generation call."""

    orbit: OrbitContext
    distance: int
    rng: RandomSource
    features: Tuple = ()
    resources: ResourceTable = field(init=False)

    def __post_init__(self):
        self.resources = ResourceTable(self.rng)

    @property
    def star(self):
        return self.orbit.star

    @property
    def orbital_distance(self) -> int:
        """Distance from the star, including the parent's for moons."""
        return self.orbit.parent_distance + self.distance


def body_generator(*types: PlanetType):
    """Register a generator for one or more body types."""

    def decorator(func: Generator) -> Generator:
        for body_type in types:
            _TYPE_GENERATORS[body_type] = func
        return func

    return decorator


def group_generator(group: PlanetGroup):
    """Register the fallback generator for a group."""

    def decorator(func: Generator) -> Generator:
        _GROUP_GENERATORS[group] = func
        return func

    return decorator


def moon_generator(*types: PlanetType):
    """Register a moon generator for one or more primary body types."""

    def decorator(func: MoonGenerator) -> MoonGenerator:
        for body_type in types:
            _MOON_GENERATORS[body_type] = func
        return func

    return decorator


def generator_for(body_type: PlanetType) -> Generator:
    """Dedicated generator for a type, else its group fallback."""
    if body_type in _TYPE_GENERATORS:
        return _TYPE_GENERATORS[body_type]
    if body_type.group in _GROUP_GENERATORS:
        return _GROUP_GENERATORS[body_type.group]
    raise UnsupportedError(f"No generator for body type {body_type.name}")


def lookup(table, roll: int, default=None):
    """
    Pick from a roll table.

    Args:
        table: (upper bound, value) pairs in ascending order of bound
        roll: The dice result
        default: Value when the roll exceeds every bound

    Returns:
        The value of the first entry whose bound is not below roll
    """
    for bound, value in table:
        if roll <= bound:
            return value
    return default


def require_type(body_type: PlanetType, expected: PlanetType) -> None:
    """Guard for generators that support a single type."""
    if body_type != expected:
        raise InvalidArgumentError(
            f"Generator for {expected.name} cannot create {body_type.name}"
        )


def adjust_day_length(body: BodyDescription) -> None:
    """Slow rotation stretches days longer than a standard day."""
    if body.day_length > STANDARD_DAY:
        body.day_length = int(
            (math.sqrt(body.day_length / STANDARD_DAY) / 10 + 1) * body.day_length
        )


def define_body(ctx: GenerationContext, name: str, body_type: PlanetType) -> BodyDescription:
    """
    Create a body with defaults every generator starts from.

    The temperature is the naive equilibrium temperature at the body's
    distance from the star; generators override it where their class
    demands.
    """
    rng = ctx.rng
    body = BodyDescription(name=name, body_type=body_type, distance=ctx.distance)

    body.radius = 500 + rng.d100() * 10
    body.temperature = orbit_temperature(ctx.star, ctx.orbital_distance)
    body.atmosphere = Atmosphere.VACUUM
    body.pressure = Pressure.NONE
    body.magnetic_field = MagneticField.NONE
    body.life = Life.NONE
    body.day_length = STANDARD_DAY * (36 + rng.d12(4))
    adjust_day_length(body)
    body.density = int(1000 * body_type.density)

    for feature in ctx.features:
        body.add_feature(feature)

    return body


def check_distance(ctx: GenerationContext, body: BodyDescription, radius: int) -> int:
    """
    Keep a body clear of the previous one.

    The body is pushed out so its inner edge clears the previous body's
    outer edge by 30% of its radius, and the radius is then capped at a
    third of the distance. Both are written to the body.

    Returns:
        The possibly reduced radius
    """
    minimum = ctx.orbit.outer_edge + int(radius * 1.3)
    if minimum > ctx.distance:
        logger.debug("Pushing body outwards", body=body.name, distance=ctx.distance, to=minimum)
        ctx.distance = minimum
    if radius > ctx.distance / 3:
        radius = ctx.distance // 3

    body.distance = ctx.distance
    body.radius = radius
    return radius


def generate_body(
    orbit: OrbitContext,
    distance: int,
    name: str,
    body_type: PlanetType,
    rng: Optional[RandomSource] = None,
    features: Iterable = (),
) -> BodyDescription:
    """
    Generate one body of the given type.

    Args:
        orbit: Star and previous body placement
        distance: Proposed distance in km, an offset from the parent for moons
        name: Body name
        body_type: Type to generate
        rng: Random source, a fresh one if omitted
        features: Features the body must have

    Returns:
        The populated body

    Raises:
        UnsupportedError: If neither the type nor its group has a generator
        InvalidArgumentError: If the arguments are out of range
    """
    generator = generator_for(body_type)
    ctx = GenerationContext(orbit, distance, rng or RandomSource(), tuple(features))

    logger.info("Generating body", name=name, body_type=body_type.name, distance=distance)
    body = generator(ctx, name, body_type)
    logger.debug(
        "Generated body",
        name=name,
        radius=body.radius,
        temperature=body.temperature,
        features=sorted(f.name for f in body.features),
    )
    return body


def generate_moons(
    primary: BodyDescription,
    orbit: OrbitContext,
    rng: Optional[RandomSource] = None,
) -> List[BodyDescription]:
    """Moons of a body, in orbital order. Types without moons get none."""
    moon_gen = _MOON_GENERATORS.get(primary.body_type)
    if moon_gen is None:
        return []

    ctx = GenerationContext(orbit.for_moons_of(primary), 0, rng or RandomSource())
    moons = moon_gen(ctx, primary)
    for moon in moons:
        moon.moon_of = primary.name
    logger.info("Generated moons", primary=primary.name, count=len(moons))
    return moons
