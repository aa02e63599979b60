"""Entry point creating a body together with its moons."""

from typing import Iterable, List, Optional

import structlog

from ..body import BodyDescription, OrbitContext
from ..codes import PlanetType
from ..random_source import RandomSource
from .base import generate_body, generate_moons

logger = structlog.get_logger()


def create_planet(
    orbit: OrbitContext,
    distance: int,
    name: str,
    body_type: PlanetType,
    rng: Optional[RandomSource] = None,
    features: Iterable = (),
) -> List[BodyDescription]:
    """
    Generate a body and any moons it has.

    Args:
        orbit: Star and previous body placement
        distance: Proposed distance from the star in km
        name: Name of the body, moons are named after it
        body_type: Type of the body
        rng: Random source shared by the body and its moons
        features: Features the body must have

    Returns:
        The body followed by its moons in orbital order
    """
    rng = rng or RandomSource()
    logger.info("Creating planet", name=name, body_type=body_type.name)

    planet = generate_body(orbit, distance, name, body_type, rng=rng, features=features)
    moons = generate_moons(planet, orbit, rng=rng)

    return [planet, *moons]
