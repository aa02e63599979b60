"""
Data model for bodies under construction.

This module contains:
- Resource: one (commodity, tier, density) entry of a body
- OrbitContext: placement of the previously generated body
- BodyDescription: the record a generator fills in
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import InvalidArgumentError
from .codes import (
    Atmosphere,
    CommodityName,
    Life,
    MagneticField,
    PlanetType,
    Tier,
)
from .physics import STANDARD_DAY
from .star import Star


@dataclass(frozen=True)
class Resource:
    """A natural resource present on a body."""

    commodity: CommodityName
    tier: Tier
    density: int

    def __post_init__(self):
        if self.density < 1:
            raise InvalidArgumentError(
                f"Resource density must be at least 1, got {self.density}"
            )


@dataclass(frozen=True)
class OrbitContext:
    """
    Where the previous body sits, so the next one can keep clear of it.

    Moons carry their parent's orbital distance in parent_distance; their own
    distance is then an offset from the parent.
    """

    star: Star
    previous_distance: int = 0
    previous_radius: int = 0
    parent_distance: int = 0

    @property
    def outer_edge(self) -> int:
        return self.previous_distance + self.previous_radius

    @classmethod
    def first(cls, star: Star) -> "OrbitContext":
        return cls(star=star)

    @classmethod
    def after(cls, star: Star, body: "BodyDescription") -> "OrbitContext":
        return cls(
            star=star,
            previous_distance=body.distance,
            previous_radius=body.radius,
        )

    def for_moons_of(self, body: "BodyDescription") -> "OrbitContext":
        return OrbitContext(star=self.star, parent_distance=body.distance)


class BodyDescription(BaseModel):
    """
    Physical description of a planet, moon, belt or disc.

    Numeric fields are truncated to integers when set. Temperature never
    drops below deep space, hydrographics is clamped to 0-100, and radius,
    density and pressure are never negative.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(description="Body name")
    body_type: PlanetType = Field(description="Body type tag")
    moon_of: Optional[str] = Field(default=None, description="Name of the parent body")

    distance: int = Field(default=0, description="Distance from star or parent in km")
    radius: int = Field(default=0, description="Radius in km, ring width for belts")
    density: int = Field(default=0, description="Density in kg/m3")

    temperature: int = Field(default=3, description="Surface temperature in K")
    atmosphere: Atmosphere = Field(default=Atmosphere.VACUUM)
    pressure: int = Field(default=0, description="Surface pressure in Pa")
    magnetic_field: MagneticField = Field(default=MagneticField.NONE)
    day_length: int = Field(default=STANDARD_DAY, description="Length of day in seconds")
    hydrographics: int = Field(default=0, description="Percentage of surface water")
    life: Life = Field(default=Life.NONE)

    features: Set[Any] = Field(default_factory=set)
    resources: List[Resource] = Field(default_factory=list)
    description: str = Field(default="Unexplored.")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Body name must not be empty")
        return value

    @field_validator(
        "distance", "radius", "density", "temperature", "pressure",
        "day_length", "hydrographics",
        mode="before",
    )
    @classmethod
    def _truncate(cls, value):
        return int(value)

    @field_validator("radius", "density", "pressure")
    @classmethod
    def _not_negative(cls, value: int) -> int:
        return max(0, value)

    @field_validator("temperature")
    @classmethod
    def _above_deep_space(cls, value: int) -> int:
        return max(3, value)

    @field_validator("hydrographics")
    @classmethod
    def _percentage(cls, value: int) -> int:
        return min(100, max(0, value))

    @property
    def is_moon(self) -> bool:
        return self.moon_of is not None

    def add_feature(self, feature) -> None:
        self.features.add(feature)

    def has_feature(self, feature) -> bool:
        return feature in self.features

    def add_resource(self, resource: Resource) -> None:
        self.resources.append(resource)

    def resources_of(self, commodity: CommodityName) -> List[Resource]:
        """All entries for a commodity, in the order they were added."""
        return [r for r in self.resources if r.commodity == commodity]
