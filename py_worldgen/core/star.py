"""
Star records consumed by the body generators.

Stars are produced elsewhere; generators only read their radius, surface
temperature and mass.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import InvalidArgumentError
from .physics import AU, SOL_RADIUS, STANDARD_YEAR

# Surface temperature of the coolest star in each spectral class (subtype
# 9) and the increase per subtype towards 0.
SPECTRAL_TEMPERATURES = {
    "O": (30_000, 5_000),
    "B": (10_000, 2_000),
    "A": (7_500, 250),
    "F": (6_000, 150),
    "G": (5_200, 80),
    "K": (3_700, 150),
    "M": (2_000, 170),
    "L": (1_300, 70),
    "T": (600, 70),
    "Y": (300, 60),
}


def spectral_temperature(spectral_type: str) -> int:
    """
    Surface temperature for a two character spectral type such as 'G2'.

    Args:
        spectral_type: Class letter followed by a subtype digit 0-9

    Returns:
        Temperature in Kelvin
    """
    if not spectral_type or len(spectral_type) != 2 or not spectral_type[1].isdigit():
        raise InvalidArgumentError(f"Malformed spectral type '{spectral_type}'")
    letter = spectral_type[0].upper()
    if letter not in SPECTRAL_TEMPERATURES:
        raise InvalidArgumentError(f"Unknown spectral class '{letter}'")

    base, step = SPECTRAL_TEMPERATURES[letter]
    return base + (9 - int(spectral_type[1])) * step


class Star(BaseModel):
    """A star that bodies orbit."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Star name")
    spectral_type: str = Field(default="G2", description="Spectral class and subtype")
    luminosity: str = Field(default="V", description="Luminosity class")
    radius: int = Field(default=SOL_RADIUS, gt=0, description="Radius in km")
    surface_temperature: int = Field(default=5760, gt=0, description="Surface temperature in K")
    mass: float = Field(default=1.0, gt=0, description="Mass in solar masses")

    @classmethod
    def from_spectral_type(
        cls,
        name: str,
        spectral_type: str,
        luminosity: str = "V",
        radius: Optional[int] = None,
        mass: float = 1.0,
    ) -> "Star":
        """Build a star whose temperature follows its spectral type."""
        return cls(
            name=name,
            spectral_type=spectral_type,
            luminosity=luminosity,
            radius=radius or SOL_RADIUS,
            surface_temperature=spectral_temperature(spectral_type),
            mass=mass,
        )

    def period_at(self, distance_km: int) -> int:
        """Orbital period in seconds of a body at this distance."""
        return int(STANDARD_YEAR * math.pow(distance_km / AU, 1.5) / math.sqrt(self.mass))
