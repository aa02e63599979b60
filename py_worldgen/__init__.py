"""
Procedural generation of planets, moons and belts, and of the surface
maps used to draw them.
"""

__version__ = "0.1.0"
