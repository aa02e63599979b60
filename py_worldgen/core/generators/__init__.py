"""
Body generators, one per body type, grouped by family.

Importing this package registers every generator.
"""

from .base import (
    GenerationContext,
    check_distance,
    define_body,
    generate_body,
    generate_moons,
    generator_for,
)
from . import belts, dwarfs, jovians, small_bodies, terrestrials
from .factory import create_planet

__all__ = [
    "GenerationContext",
    "check_distance",
    "define_body",
    "generate_body",
    "generate_moons",
    "generator_for",
    "create_planet",
    "belts",
    "dwarfs",
    "jovians",
    "small_bodies",
    "terrestrials",
]
