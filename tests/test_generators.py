"""Tests for body generators and the planet factory."""

import pytest

from py_worldgen.core.body import BodyDescription, OrbitContext
from py_worldgen.core.codes import (
    Atmosphere,
    BeltFeature,
    CommodityName,
    DwarfFeature,
    JovianFeature,
    Life,
    MagneticField,
    MoonFeature,
    PlanetGroup,
    PlanetType,
    Pressure,
    SmallBodyFeature,
    Temperature,
    Tier,
)
from py_worldgen.core.generators import (
    GenerationContext,
    check_distance,
    create_planet,
    generate_body,
    generate_moons,
    generator_for,
)
from py_worldgen.core.generators import base
from py_worldgen.core.generators.base import adjust_day_length
from py_worldgen.core.generators.belts import moon_offsets
from py_worldgen.core.generators.dwarfs import _add_hermian_features
from py_worldgen.core.generators.small_bodies import generate_silicaceous
from py_worldgen.core.physics import (
    AU,
    MKM,
    STANDARD_DAY,
    STANDARD_PRESSURE,
    STANDARD_YEAR,
    orbit_temperature,
)
from py_worldgen.core.random_source import RandomSource
from py_worldgen.exceptions import InvalidArgumentError, UnsupportedError

from conftest import fixed_rng

# Close enough to Sol for a naive temperature well above 500K
HOT_DISTANCE = AU // 10


def seeded(i):
    return RandomSource(seed=f"seed-{i}")


class TestSharedScaffolding:
    """Test the defaults and placement rules every generator uses."""

    def test_generic_dwarf(self, orbit):
        """Test a type with no generator of its own falling back to its group."""
        body = generate_body(orbit, AU, "Vesta", PlanetType.VESTIAN, rng=seeded(1))
        assert body.body_type == PlanetType.VESTIAN
        assert 300 <= body.radius <= 1800
        assert body.temperature == orbit_temperature(orbit.star, AU)
        assert body.atmosphere == Atmosphere.VACUUM
        assert body.density == 4000
        assert body.day_length > 40 * STANDARD_DAY

    def test_requested_features_applied(self, orbit):
        """Test that features passed in are on the finished body."""
        body = generate_body(
            orbit, AU, "Locked", PlanetType.VESTIAN,
            rng=seeded(2), features=(MoonFeature.TIDALLY_LOCKED,),
        )
        assert body.has_feature(MoonFeature.TIDALLY_LOCKED)

    def test_no_generator(self, orbit, monkeypatch):
        """Test that a type without any generator is unsupported."""
        monkeypatch.delitem(base._GROUP_GENERATORS, PlanetGroup.JOVIAN)
        with pytest.raises(UnsupportedError):
            generator_for(PlanetType.NEPTUNIAN)
        with pytest.raises(NotImplementedError):
            generate_body(orbit, AU, "Blue", PlanetType.NEPTUNIAN)

    def test_single_type_generator_rejects_other_types(self, orbit):
        """Test that a dedicated generator refuses a different type."""
        ctx = GenerationContext(orbit, AU, seeded(3))
        with pytest.raises(InvalidArgumentError):
            generate_silicaceous(ctx, "Wrong", PlanetType.CARBONACEOUS)

    def test_check_distance_pushes_out(self, sol):
        """Test that a body is moved clear of the previous one."""
        orbit = OrbitContext(star=sol, previous_distance=100 * MKM, previous_radius=10 * MKM)
        ctx = GenerationContext(orbit, 50 * MKM, seeded(4))
        body = BodyDescription(name="Pushed", body_type=PlanetType.ASTEROID_BELT)

        radius = check_distance(ctx, body, MKM)

        assert radius == MKM
        assert ctx.distance == 111_300_000
        assert body.distance == 111_300_000
        assert body.radius == MKM

    def test_check_distance_caps_radius(self, orbit):
        """Test that a body is never wider than a third of its distance."""
        ctx = GenerationContext(orbit, 3 * MKM, seeded(5))
        body = BodyDescription(name="Capped", body_type=PlanetType.DUST_DISC)

        assert check_distance(ctx, body, 2 * MKM) == MKM
        assert body.radius == MKM
        assert body.distance == 3 * MKM

    def test_adjust_day_length(self):
        """Test that only long days are stretched."""
        body = BodyDescription(name="Day", body_type=PlanetType.SELENIAN)
        body.day_length = STANDARD_DAY
        adjust_day_length(body)
        assert body.day_length == STANDARD_DAY

        body.day_length = 4 * STANDARD_DAY
        adjust_day_length(body)
        assert abs(body.day_length - 414_720) <= 1


class TestBelts:
    """Test belt and disc generators."""

    def test_thin_ring(self, orbit):
        """Test that a thin ring narrows and becomes ten times as dense."""
        body = generate_body(
            orbit, 3 * AU, "Thin", PlanetType.ASTEROID_BELT,
            rng=fixed_rng(0.5), features=(BeltFeature.THIN_RING,),
        )
        # Every roll lands mid-range, so the belt's own density is exactly 1000
        assert body.density == 10 * 1000
        assert 20_000 + 3 <= body.radius <= 20_000 + 300_000
        assert body.distance == 3 * AU

    def test_thin_ring_any_seed(self, orbit):
        """Test the thin ring width table over many seeds."""
        for i in range(20):
            body = generate_body(
                orbit, 3 * AU, "Thin", PlanetType.ICE_BELT,
                rng=seeded(i), features=(BeltFeature.THIN_RING,),
            )
            assert 25_000 + 3 <= body.radius <= 25_000 + 300_000
            assert body.density % 10 == 0

    def test_wide_sparse_ring(self, orbit):
        """Test that a wide sparse ring moves out by five widths."""
        body = generate_body(
            orbit, 3 * AU, "Wide", PlanetType.ASTEROID_BELT,
            rng=fixed_rng(0.5), features=(BeltFeature.WIDE_SPARSE_RING,),
        )
        assert body.radius == 80 * MKM
        assert body.distance == 3 * AU + 5 * 80 * MKM
        assert body.density == 100

    def test_belt_resources(self, orbit):
        """Test the resources of an asteroid belt."""
        body = generate_body(orbit, 3 * AU, "Rocks", PlanetType.ASTEROID_BELT, rng=seeded(6))
        commodities = [r.commodity for r in body.resources]
        assert CommodityName.SILICATE_ORE in commodities
        assert CommodityName.CARBONIC_ORE in commodities
        assert all(r.density >= 1 for r in body.resources)

    def test_dust_disc(self, orbit):
        """Test that a dust disc is a third as wide as it is distant."""
        body = generate_body(orbit, AU, "Dust", PlanetType.DUST_DISC, rng=seeded(7))
        assert body.radius == 50_000_000
        assert body.resources_of(CommodityName.HYDROGEN)

    def test_generic_belt(self, orbit):
        """Test a belt type without a dedicated generator."""
        body = generate_body(orbit, 3 * AU, "Oort", PlanetType.OORT_CLOUD, rng=seeded(8))
        assert 3 * 5 * MKM + MKM <= body.radius <= 18 * 5 * MKM + 10 * MKM

    def test_vulcanian_belt_close_in(self, orbit):
        """Test that a belt inside 10 Mkm is narrow."""
        body = generate_body(orbit, 5 * MKM, "Hot", PlanetType.VULCANIAN_BELT, rng=seeded(9))
        assert body.radius <= body.distance // 3
        assert body.resources_of(CommodityName.HEAVY_METALS)


class TestBeltMoons:
    """Test planetoids generated inside belts."""

    @pytest.mark.parametrize("count", [1, 2, 3, 5, 10])
    def test_offsets_strictly_increasing(self, count):
        """Test that members are placed innermost first without overlap."""
        for i in range(20):
            offsets = moon_offsets(seeded(i), 5 * MKM, count)
            assert len(offsets) == count
            assert all(a < b for a, b in zip(offsets, offsets[1:]))

    def test_no_offsets(self):
        """Test that an empty swarm has no offsets."""
        assert moon_offsets(seeded(0), 5 * MKM, 0) == []

    def test_moons_named_after_belt(self, orbit):
        """Test belt moon names, parents and types."""
        moons = []
        for i in range(20):
            rng = seeded(i)
            belt = generate_body(
                orbit, 3 * AU, "Belt", PlanetType.ASTEROID_BELT,
                rng=rng, features=(BeltFeature.PLANETOIDS,),
            )
            moons = generate_moons(belt, orbit, rng=rng)
            if moons:
                break

        assert moons
        assert [m.name for m in moons] == [f"Belt {i + 1}" for i in range(len(moons))]
        for moon in moons:
            assert moon.moon_of == "Belt"
            assert moon.body_type in (PlanetType.CARBONACEOUS, PlanetType.SILICACEOUS)
        distances = [m.distance for m in moons]
        assert distances == sorted(distances)

    def test_planetoids_give_more_moons(self, orbit):
        """Test that planetoid swarms have more members on average."""

        def total_moons(features):
            total = 0
            for i in range(30):
                rng = seeded(i)
                belt = generate_body(
                    orbit, 3 * AU, "Belt", PlanetType.ICE_BELT, rng=rng, features=features
                )
                moons = generate_moons(belt, orbit, rng=rng)
                total += len(moons)
            return total

        assert total_moons((BeltFeature.PLANETOIDS,)) > total_moons(())


class TestSmallBodies:
    """Test asteroid generators."""

    @pytest.mark.parametrize("body_type", [PlanetType.AGGREGATE, PlanetType.SILICACEOUS])
    def test_hot_rock_has_ferric_ore(self, orbit, body_type):
        """Test that hot rocky bodies always carry substantial ferric ore."""
        for i in range(10):
            body = generate_body(orbit, HOT_DISTANCE, "Hot", body_type, rng=seeded(i))
            assert body.temperature > 500
            ferric = body.resources_of(CommodityName.FERRIC_ORE)
            assert any(r.tier in (Tier.PRIMARY, Tier.SECONDARY) for r in ferric)

    @pytest.mark.parametrize("feature,low,high", [
        (None, 33, 90),
        ("TINY", 4, 9),
        ("HUGE", 302, 900),
        ("GIGANTIC", 1001, 1500),
    ])
    def test_size_features(self, orbit, feature, low, high):
        """Test the silicaceous radius for each size feature."""
        features = () if feature is None else (SmallBodyFeature[feature],)
        for i in range(10):
            body = generate_body(
                orbit, AU, "Rock", PlanetType.SILICACEOUS, rng=seeded(i), features=features
            )
            assert low <= body.radius <= high

    def test_cold_carbonaceous_has_water(self, orbit):
        """Test that cold carbonaceous bodies hold water."""
        body = generate_body(orbit, 5 * AU, "Cold", PlanetType.CARBONACEOUS, rng=seeded(1))
        assert body.temperature < 300
        assert body.resources_of(CommodityName.WATER)
        assert body.day_length <= 3600 + 7200

    def test_metallic(self, orbit):
        """Test metallic asteroids."""
        body = generate_body(orbit, AU, "Iron", PlanetType.METALLIC, rng=seeded(2))
        primary = [r.commodity for r in body.resources if r.tier == Tier.PRIMARY]
        assert primary == [CommodityName.FERRIC_ORE]


class TestJovians:
    """Test gas giant generators."""

    def test_sokarian_temperature_floor(self, orbit):
        """Test that the hottest giants are never below silicate melting point."""
        for distance in (5 * AU, AU, HOT_DISTANCE, AU // 100):
            body = generate_body(orbit, distance, "Hot", PlanetType.SOKARIAN, rng=seeded(1))
            assert body.temperature >= Temperature.SILICATES_MELT
            assert body.has_feature(JovianFeature.SILICATE_CLOUDS)

    def test_sokarian_floor_exact(self, orbit):
        """Test that a cold orbit is raised to exactly the floor."""
        body = generate_body(orbit, 5 * AU, "Hot", PlanetType.SOKARIAN, rng=seeded(1))
        assert body.temperature == Temperature.SILICATES_MELT

    def test_jovic(self, orbit):
        """Test Jupiter-like giants."""
        body = generate_body(orbit, 5 * AU, "Big", PlanetType.JOVIC, rng=seeded(2))
        assert 45_004 <= body.radius <= 65_000
        assert body.atmosphere == Atmosphere.HYDROGEN
        assert body.pressure == Pressure.SUPER_DENSE
        assert body.magnetic_field in (
            MagneticField.STRONG, MagneticField.VERY_STRONG, MagneticField.INTENSE
        )
        assert body.has_feature(JovianFeature.AMMONIA_CLOUDS) or body.has_feature(
            JovianFeature.WATER_CLOUDS
        )

    def test_saturnian_clouds_follow_temperature(self, orbit):
        """Test that cold Saturnians have ammonia clouds."""
        body = generate_body(orbit, 5 * AU, "Ringed", PlanetType.SATURNIAN, rng=seeded(3))
        assert body.has_feature(JovianFeature.AMMONIA_CLOUDS)

    def test_generic_jovian(self, orbit):
        """Test a giant without a dedicated generator."""
        body = generate_body(orbit, 10 * AU, "Ice", PlanetType.NEPTUNIAN, rng=seeded(4))
        assert 15_000 <= body.radius <= 90_000
        assert body.resources_of(CommodityName.HYDROGEN)


class TestTerrestrials:
    """Test terrestrial generators."""

    def test_cytherean(self, orbit):
        """Test greenhouse worlds."""
        body = generate_body(orbit, AU * 7 // 10, "Venus", PlanetType.CYTHEREAN, rng=seeded(1))
        assert body.atmosphere == Atmosphere.CARBON_DIOXIDE
        assert 72 * STANDARD_PRESSURE <= body.pressure <= 110 * STANDARD_PRESSURE
        assert body.hydrographics == 0
        assert body.temperature == 2 * orbit_temperature(orbit.star, AU * 7 // 10)
        assert 5502 <= body.radius <= 7500

    def test_eo_gaian(self, orbit):
        """Test young ocean worlds."""
        for i in range(10):
            body = generate_body(orbit, AU, "Young", PlanetType.EO_GAIAN, rng=seeded(i))
            assert 2 <= body.hydrographics <= 40
            assert body.life in (Life.NONE, Life.ORGANIC, Life.ARCHAEAN)
            assert body.resources_of(CommodityName.WATER)
            assert 5_502 <= body.radius <= 7_500

    def test_eo_gaian_life_commodities(self, orbit):
        """Test that archaean worlds carry prokaryotes."""
        for i in range(40):
            body = generate_body(orbit, AU, "Young", PlanetType.EO_GAIAN, rng=seeded(i))
            if body.life == Life.ARCHAEAN:
                assert body.resources_of(CommodityName.PROKARYOTES)
            if body.life == Life.NONE:
                assert not body.resources_of(CommodityName.PROTOBIONTS)

    def test_terrestrial_moon(self, orbit):
        """Test that a terrestrial world's moon is a Selenian named after it."""
        found = None
        for i in range(30):
            bodies = create_planet(orbit, AU, "Terra", PlanetType.EO_GAIAN, rng=seeded(i))
            if len(bodies) > 1:
                found = bodies
                break

        assert found is not None
        planet, moon = found
        assert planet.name == "Terra"
        assert moon.name == "Terraa"
        assert moon.body_type == PlanetType.SELENIAN
        assert moon.moon_of == "Terra"
        assert moon.has_feature(MoonFeature.TIDALLY_LOCKED) or moon.has_feature(
            MoonFeature.ALMOST_LOCKED
        )
        assert 150_000 <= moon.distance <= 600_000 + 1000

    def test_create_planet_without_moons(self, orbit):
        """Test that types without moons return only themselves."""
        bodies = create_planet(orbit, AU, "Lonely", PlanetType.HERMIAN, rng=seeded(1))
        assert len(bodies) == 1
        assert bodies[0].name == "Lonely"


class TestDwarfs:
    """Test dwarf world generators."""

    def test_small_moon(self, orbit):
        """Test that small Selenian moons are half size."""
        for i in range(10):
            body = generate_body(
                orbit, AU, "Moon", PlanetType.SELENIAN,
                rng=seeded(i), features=(MoonFeature.SMALL_MOON,),
            )
            assert 600 <= body.radius <= 900

    def test_large_moon(self, orbit):
        """Test that large Selenian moons are half as large again."""
        body = generate_body(
            orbit, AU, "Moon", PlanetType.SELENIAN,
            rng=seeded(1), features=(MoonFeature.LARGE_MOON,),
        )
        assert 1801 <= body.radius <= 2700

    def test_janian_is_tidally_locked(self, orbit):
        """Test that a Janian's day is its year."""
        body = generate_body(orbit, AU, "Locked", PlanetType.JANIAN, rng=seeded(1))
        assert body.day_length == STANDARD_YEAR

    def test_hot_hermian(self, orbit):
        """Test that hot Hermians without molten metal roll the terrain table."""
        features = set()
        for i in range(40):
            body = generate_body(orbit, AU // 20, "Hot", PlanetType.HERMIAN, rng=seeded(i))
            assert body.temperature > Temperature.LEAD_MELTS
            assert len(body.features) <= 1
            features |= body.features
        assert features & {DwarfFeature.METALLIC_SEA, DwarfFeature.METALLIC_LAKES}
        assert features - {DwarfFeature.METALLIC_SEA, DwarfFeature.METALLIC_LAKES}

    @pytest.mark.parametrize("value,expected", [
        (0.0, DwarfFeature.METALLIC_SEA),
        (0.4, DwarfFeature.METALLIC_LAKES),
        # d6 of 5 gives no molten metal, then 2d6 of 10
        (0.75, DwarfFeature.BROKEN_RIFTS),
    ])
    def test_hot_hermian_features(self, value, expected):
        """Test each branch of the hot Hermian feature roll."""
        body = BodyDescription(name="Hot", body_type=PlanetType.HERMIAN, temperature=800)
        _add_hermian_features(body, fixed_rng(value))
        assert body.features == {expected}

    def test_cool_hermian_features(self):
        """Test that cooler Hermians go straight to the terrain table."""
        body = BodyDescription(name="Cool", body_type=PlanetType.HERMIAN, temperature=400)
        # 2d6 of 2 is below every entry
        _add_hermian_features(body, fixed_rng(0.0))
        assert body.features == set()

    def test_meso_arean_water_follows_pressure(self, orbit):
        """Test that thin atmospheres hold little water."""
        for i in range(20):
            body = generate_body(orbit, AU * 3 // 2, "Red", PlanetType.MESO_AREAN, rng=seeded(i))
            assert body.atmosphere == Atmosphere.CARBON_DIOXIDE
            if body.pressure == Pressure.TRACE:
                assert 1 <= body.hydrographics <= 4
            else:
                assert 3 <= body.hydrographics <= 24

    def test_ferrinian(self, orbit):
        """Test iron-rich dwarfs."""
        body = generate_body(orbit, AU, "Iron", PlanetType.FERRINIAN, rng=seeded(1))
        primary = {r.commodity for r in body.resources if r.tier == Tier.PRIMARY}
        assert CommodityName.HEAVY_METALS in primary
        assert body.pressure == 0

    def test_eu_arean(self, orbit):
        """Test Mars-like worlds."""
        body = generate_body(orbit, AU * 3 // 2, "Mars", PlanetType.EU_AREAN, rng=seeded(1))
        assert body.atmosphere == Atmosphere.CARBON_DIOXIDE
        assert 2_802 <= body.radius <= 3_800
        assert body.pressure in (Pressure.TRACE, Pressure.VERY_THIN, Pressure.THIN)
