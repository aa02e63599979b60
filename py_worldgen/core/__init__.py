"""
Core body and surface generation functionality.
"""

from .random_source import AleaPRNG, RandomSource, random_source_for
from .star import Star
from .body import BodyDescription, OrbitContext, Resource
from .codes import PlanetGroup, PlanetClass, PlanetType
from .generators import create_planet, generate_body, generate_moons
from .geodesic import Icosahedron, stretch_image
from .image import PixelBuffer
from .tiles import Tile, Cratered, Rough
from .mappers import mapper_for, populate_surface, render_maps

__all__ = ['AleaPRNG', 'RandomSource', 'random_source_for', 'Star',
           'BodyDescription', 'OrbitContext', 'Resource',
           'PlanetGroup', 'PlanetClass', 'PlanetType',
           'create_planet', 'generate_body', 'generate_moons',
           'Icosahedron', 'stretch_image', 'PixelBuffer',
           'Tile', 'Cratered', 'Rough',
           'mapper_for', 'populate_surface', 'render_maps']
