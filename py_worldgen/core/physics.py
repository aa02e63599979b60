"""
Physical constants and formulas shared by the body generators.

All distances are kilometres unless a function says otherwise. The
formulas are stateless and deterministic.
"""

import math

from ..exceptions import InvalidArgumentError

# Sol
SOL_RADIUS = 695_700  # km
SOL_MASS = 2e30  # kg
SOLAR_SURFACE_TEMPERATURE = 5760  # K, a G2 main sequence star

G = 6.67408e-11

STANDARD_DAY = 86_400  # seconds
STANDARD_YEAR = 31_557_600  # seconds
STANDARD_PRESSURE = 100_000  # Pa

# Distances
AU = 150_000_000  # km
MKM = 1_000_000  # km
SNOW_DISTANCE = 400 * MKM
OUTER_DISTANCE = 250 * MKM
INNER_DISTANCE = 100 * MKM
MINIMUM_DISTANCE = 25 * MKM


def round_significant(number: int, digits: int = 4) -> int:
    """
    Round an integer to a number of significant digits.

    Rounding is half up on the discarded remainder, applied to the
    magnitude so that the sign is preserved. Numbers no larger than
    10**digits are returned unchanged.

    Args:
        number: Value to round
        digits: Significant digits to keep, at least 1

    Returns:
        Rounded integer with the sign of number
    """
    if digits < 1:
        raise InvalidArgumentError(f"Significant digits must be at least 1, got {digits}")

    number = int(number)
    sign = -1 if number < 0 else 1
    number = abs(number)

    if number <= 10 ** digits:
        return sign * number

    magnitude = int(math.log10(number))
    unit = 10 ** (1 + magnitude - digits)
    number += unit // 2
    number -= number % unit

    return sign * number


def stellar_constant(star) -> float:
    """Luminosity of a star relative to Sol, from radius and temperature."""
    radius = star.radius / SOL_RADIUS
    temperature = star.surface_temperature / SOLAR_SURFACE_TEMPERATURE
    return radius ** 2 * temperature ** 4


def equilibrium_temperature(constant: float, distance_au: float) -> int:
    """
    Black body temperature of a body orbiting a star.

    Args:
        constant: Stellar constant, 1.0 for Sol
        distance_au: Orbital distance in AU, must be positive

    Returns:
        Temperature in Kelvin
    """
    if distance_au <= 0:
        raise InvalidArgumentError(f"Orbital distance must be positive, got {distance_au}")
    return int(280 * math.pow(constant / (distance_au ** 2), 0.25))


def orbit_temperature(star, distance_km: int) -> int:
    """Equilibrium temperature at distance_km from star."""
    return equilibrium_temperature(stellar_constant(star), distance_km / AU)


def orbital_period(total_mass_kg: float, distance_m: float) -> int:
    """Kepler's third law, period in seconds."""
    if total_mass_kg <= 0:
        raise InvalidArgumentError(f"Mass must be positive, got {total_mass_kg}")
    return int(2 * math.pi * math.sqrt(math.pow(distance_m, 3) / (G * total_mass_kg)))
