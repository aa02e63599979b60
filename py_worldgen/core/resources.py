"""
Resource assignment by abundance tier.

Each tier draws its density from its own roll so that primary deposits
are denser than trace ones on average. Entries are appended as given;
adding the same commodity twice creates two entries.
"""

from typing import Callable, Dict, Union

import structlog

from ..exceptions import InvalidArgumentError, NotFoundError
from .body import BodyDescription, Resource
from .codes import CommodityName, Tier
from .random_source import RandomSource

logger = structlog.get_logger()


TIER_DENSITY: Dict[Tier, Callable[[RandomSource], int]] = {
    Tier.PRIMARY: lambda rng: 800 + rng.d100(4),
    Tier.SECONDARY: lambda rng: 400 + rng.d100(2),
    Tier.TERTIARY: lambda rng: 200 + rng.d100(),
    Tier.TRACE: lambda rng: 100 + rng.d20(2),
}


def commodity(name: Union[str, CommodityName]) -> CommodityName:
    """
    Look up a commodity by enum member, member name or display name.

    Raises:
        InvalidArgumentError: If name is empty
        NotFoundError: If no commodity has that name
    """
    if isinstance(name, CommodityName):
        return name
    if not name:
        raise InvalidArgumentError("Commodity name must not be empty")
    for member in CommodityName:
        if name in (member.value, member.name):
            return member
    raise NotFoundError(f"No commodity named '{name}'")


class ResourceTable:
    """Adds tiered resources to bodies using one random source."""

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def density(self, tier: Tier) -> int:
        return max(1, TIER_DENSITY[tier](self.rng))

    def add(
        self,
        body: BodyDescription,
        name: Union[str, CommodityName],
        tier: Tier,
    ) -> Resource:
        """
        Append a resource to a body.

        Args:
            body: Body receiving the resource
            name: Commodity, by enum or name
            tier: Abundance tier, which decides the density roll

        Returns:
            The appended entry
        """
        if tier not in TIER_DENSITY:
            raise InvalidArgumentError(f"Unknown tier {tier!r}")
        resource = Resource(commodity(name), tier, self.density(tier))
        body.add_resource(resource)
        logger.debug(
            "Added resource",
            body=body.name,
            commodity=resource.commodity.value,
            tier=tier.value,
            density=resource.density,
        )
        return resource

    def primary(self, body: BodyDescription, name) -> Resource:
        return self.add(body, name, Tier.PRIMARY)

    def secondary(self, body: BodyDescription, name) -> Resource:
        return self.add(body, name, Tier.SECONDARY)

    def tertiary(self, body: BodyDescription, name) -> Resource:
        return self.add(body, name, Tier.TERTIARY)

    def trace(self, body: BodyDescription, name) -> Resource:
        return self.add(body, name, Tier.TRACE)
