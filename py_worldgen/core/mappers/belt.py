"""
Mappers for belts and discs.

Belts have no surface of their own. They are drawn onto a star system
map as a spread of concentric rings around the star.
"""

import structlog

from ..image import PixelBuffer, darker, lighter
from ..random_source import random_source_for
from .base import PlanetMapper

logger = structlog.get_logger()


class DustDiscMapper(PlanetMapper):
    """Thin concentric rings of dust, shaded at random."""

    has_main_map = False
    has_orbit_map = True

    def generate(self) -> None:
        pass

    def paint_orbit(self, image: PixelBuffer, cx: int, cy: int, km_per_pixel: int) -> None:
        """
        Draw rings from the inner to the outer edge of the disc.

        The same body always draws the same rings, whatever the random
        source used to map its surface.

        Args:
            image: System map to draw onto
            cx: Pixel position of the star
            cy: Pixel position of the star
            km_per_pixel: Map scale
        """
        body = self.body
        rng = random_source_for(body.name)
        distance = body.distance
        radius = body.radius
        logger.info(
            "Drawing orbit",
            body=body.name,
            distance=distance,
            km_per_pixel=km_per_pixel,
        )

        d = distance - radius
        while d < distance + radius:
            colour = body.body_type.colour
            shade = rng.roll_zero(3)
            if shade == 0:
                colour = darker(colour, 6 + rng.roll_zero(6))
            elif shade == 1:
                colour = lighter(colour, 6 + rng.roll_zero(6))

            thickness = 1 + rng.roll_zero(max(1, radius // (km_per_pixel * 10)))
            image.circle_outline(cx, cy, d // km_per_pixel, colour, thickness)
            d += 1 + rng.roll_zero(max(1, radius // 10))
