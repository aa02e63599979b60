#!/usr/bin/env python3
"""
Demo script generating a handful of bodies and saving their surface maps.
"""

from pathlib import Path

from py_worldgen.core import (
    OrbitContext,
    PixelBuffer,
    RandomSource,
    Star,
    create_planet,
    mapper_for,
    render_maps,
)
from py_worldgen.core.codes import PlanetType
from py_worldgen.core.physics import AU
from py_worldgen.exceptions import UnsupportedError
from py_worldgen.utils.log import configure_logging

OUTPUT_DIR = Path("demo_maps")

SYSTEM = [
    ("Vulcan", PlanetType.HERMIAN, AU // 3),
    ("Venera", PlanetType.CYTHEREAN, AU * 7 // 10),
    ("Terra", PlanetType.EO_GAIAN, AU),
    ("Ares", PlanetType.EU_AREAN, AU * 3 // 2),
    ("Belt", PlanetType.ASTEROID_BELT, AU * 11 // 4),
    ("Zeus", PlanetType.JOVIC, AU * 5),
    ("Kronos", PlanetType.SATURNIAN, AU * 9),
]


def main():
    """Generate a small star system and draw every map it has."""
    configure_logging(level="WARNING")
    OUTPUT_DIR.mkdir(exist_ok=True)

    print("Py-WorldGen Planet Map Demo")
    print("=" * 40)

    star = Star(name="Sol")
    rng = RandomSource(seed="demo123")
    orbit = OrbitContext.first(star)
    system_map = PixelBuffer(800, 800, "#000000")
    km_per_pixel = AU * 10 // 400

    for name, body_type, distance in SYSTEM:
        bodies = create_planet(orbit, distance, name, body_type, rng=rng)
        planet = bodies[0]
        orbit = OrbitContext.after(star, planet)

        for body in bodies:
            print(f"\n{body.name} ({body.body_type.name})")
            print("-" * 30)
            print(f"  Radius: {body.radius:,} km")
            print(f"  Temperature: {body.temperature} K")
            print(f"  Resources: {', '.join(r.commodity.value for r in body.resources)}")

            try:
                maps = render_maps(body, width=1024)
            except UnsupportedError as e:
                print(f"  No surface map: {e}")
                continue

            for key, image in maps.items():
                path = OUTPUT_DIR / f"{body.name.lower()}-{key}.png"
                image.save(path)
                print(f"  Saved {path}")

        mapper = mapper_for(planet)
        if mapper.has_orbit_map:
            mapper.draw_orbit(system_map, 400, 400, km_per_pixel)

    system_map.save(OUTPUT_DIR / "system.png")
    print(f"\nSystem map saved to {OUTPUT_DIR / 'system.png'}")


if __name__ == "__main__":
    main()
