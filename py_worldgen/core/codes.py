"""
Closed enumerations describing celestial bodies.

This module contains:
- Body taxonomy: PlanetGroup, PlanetClass and PlanetType
- Environment tags: Atmosphere, Pressure, MagneticField, Life, Temperature
- Per-family feature sets, each a distinct enumeration
- Commodity names used by resource tables
"""

from enum import Enum, IntEnum


class PlanetGroup(Enum):
    """Top level family of a body."""

    BELT = "Belt"
    SMALL_BODY = "SmallBody"
    DWARF = "Dwarf"
    TERRESTRIAL = "Terrestrial"
    HELIAN = "Helian"
    JOVIAN = "Jovian"
    PLANEMO = "Planemo"
    CONSTRUCT = "Construct"


class PlanetClass(Enum):
    """Physical class of a body within its group."""

    CIRCUMSTELLAR = "Circumstellar"
    PLANETARY_RING = "PlanetaryRing"
    VULCANOIDAL = "Vulcanoidal"
    ASTEROIDAL = "Asteroidal"
    COMETARY = "Cometary"
    PROTOTHERMIC = "Protothermic"
    GEO_PASSIVE = "GeoPassive"
    GEO_THERMIC = "GeoThermic"
    GEO_TIDAL = "GeoTidal"
    GEO_CYCLIC = "GeoCyclic"
    SUB_JOVIAN = "SubJovian"
    DWARF_JOVIAN = "DwarfJovian"
    MESO_JOVIAN = "MesoJovian"
    SUPER_JOVIAN = "SuperJovian"
    CHTHONIAN = "Chthonian"
    PROTO_ACTIVE = "ProtoActive"
    EPISTELLAR = "Epistellar"
    TELLURIC = "Telluric"
    ARID = "Arid"
    TECTONIC = "Tectonic"
    BDO = "BDO"

    @property
    def group(self) -> PlanetGroup:
        return _CLASS_GROUPS[self]


_CLASS_GROUPS = {
    PlanetClass.CIRCUMSTELLAR: PlanetGroup.BELT,
    PlanetClass.PLANETARY_RING: PlanetGroup.BELT,
    PlanetClass.VULCANOIDAL: PlanetGroup.SMALL_BODY,
    PlanetClass.ASTEROIDAL: PlanetGroup.SMALL_BODY,
    PlanetClass.COMETARY: PlanetGroup.SMALL_BODY,
    PlanetClass.PROTOTHERMIC: PlanetGroup.DWARF,
    PlanetClass.GEO_PASSIVE: PlanetGroup.DWARF,
    PlanetClass.GEO_THERMIC: PlanetGroup.DWARF,
    PlanetClass.GEO_TIDAL: PlanetGroup.DWARF,
    PlanetClass.GEO_CYCLIC: PlanetGroup.DWARF,
    PlanetClass.SUB_JOVIAN: PlanetGroup.JOVIAN,
    PlanetClass.DWARF_JOVIAN: PlanetGroup.JOVIAN,
    PlanetClass.MESO_JOVIAN: PlanetGroup.JOVIAN,
    PlanetClass.SUPER_JOVIAN: PlanetGroup.JOVIAN,
    PlanetClass.CHTHONIAN: PlanetGroup.JOVIAN,
    PlanetClass.PROTO_ACTIVE: PlanetGroup.TERRESTRIAL,
    PlanetClass.EPISTELLAR: PlanetGroup.TERRESTRIAL,
    PlanetClass.TELLURIC: PlanetGroup.TERRESTRIAL,
    PlanetClass.ARID: PlanetGroup.TERRESTRIAL,
    PlanetClass.TECTONIC: PlanetGroup.TERRESTRIAL,
    PlanetClass.BDO: PlanetGroup.CONSTRUCT,
}


class PlanetType(Enum):
    """
    Body type tag, one per generator.

    Each member carries its class, a mean density relative to water and a
    display colour used for orbit rendering.
    """

    def __new__(cls, planet_class, density, colour):
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__) + 1
        obj.planet_class = planet_class
        obj.density = density
        obj.colour = colour
        return obj

    @property
    def group(self) -> PlanetGroup:
        return self.planet_class.group

    # Belts
    ASTEROID_BELT = (PlanetClass.CIRCUMSTELLAR, 0.0, "#777777")
    VULCANIAN_BELT = (PlanetClass.CIRCUMSTELLAR, 0.0, "#775555")
    METALLIC_BELT = (PlanetClass.CIRCUMSTELLAR, 0.0, "#555555")
    ICE_BELT = (PlanetClass.CIRCUMSTELLAR, 0.0, "#aaaaaa")
    OORT_CLOUD = (PlanetClass.CIRCUMSTELLAR, 0.0, "#aaaaaa")
    DUST_DISC = (PlanetClass.CIRCUMSTELLAR, 0.0, "#ddbbbb")
    PLANETESIMAL_DISC = (PlanetClass.CIRCUMSTELLAR, 0.0, "#997777")
    ICE_RING = (PlanetClass.PLANETARY_RING, 0.0, "#aaaaaa")

    # Small bodies
    VULCANIAN = (PlanetClass.VULCANOIDAL, 7.5, "#777777")
    METALLIC = (PlanetClass.ASTEROIDAL, 8.5, "#777777")
    SILICACEOUS = (PlanetClass.ASTEROIDAL, 4.0, "#777777")
    CARBONACEOUS = (PlanetClass.ASTEROIDAL, 4.0, "#777777")
    GELIDACEOUS = (PlanetClass.ASTEROIDAL, 2.0, "#777777")
    AGGREGATE = (PlanetClass.ASTEROIDAL, 2.0, "#777777")

    # Dwarf terrestrials
    FERRINIAN = (PlanetClass.GEO_PASSIVE, 7.0, "#777777")
    JANIAN = (PlanetClass.GEO_PASSIVE, 6.0, "#777777")
    HERMIAN = (PlanetClass.GEO_PASSIVE, 6.0, "#777777")
    VESTIAN = (PlanetClass.GEO_PASSIVE, 4.0, "#777777")
    SELENIAN = (PlanetClass.GEO_PASSIVE, 3.0, "#777777")
    CEREAN = (PlanetClass.GEO_PASSIVE, 2.0, "#777777")
    EO_AREAN = (PlanetClass.GEO_CYCLIC, 5.0, "#777777")
    MESO_AREAN = (PlanetClass.GEO_CYCLIC, 5.0, "#777777")
    EU_AREAN = (PlanetClass.GEO_CYCLIC, 5.0, "#777777")
    AREAN_LACUSTRIC = (PlanetClass.GEO_CYCLIC, 5.0, "#777777")

    # Jovians
    SOKARIAN = (PlanetClass.SUB_JOVIAN, 1.0, "#777777")
    POSEIDONIC = (PlanetClass.SUB_JOVIAN, 1.0, "#777777")
    NEPTUNIAN = (PlanetClass.SUB_JOVIAN, 1.5, "#777777")
    OSIRIAN = (PlanetClass.DWARF_JOVIAN, 2.0, "#777777")
    BRAMMIAN = (PlanetClass.DWARF_JOVIAN, 1.5, "#777777")
    SATURNIAN = (PlanetClass.DWARF_JOVIAN, 1.0, "#777777")
    JUNIC = (PlanetClass.MESO_JOVIAN, 0.5, "#777777")
    JOVIC = (PlanetClass.MESO_JOVIAN, 2.0, "#777777")
    SUPER_JUNIC = (PlanetClass.SUPER_JOVIAN, 0.5, "#777777")
    SUPER_JOVIC = (PlanetClass.SUPER_JOVIAN, 2.0, "#777777")
    CHTHONIAN = (PlanetClass.CHTHONIAN, 4.0, "#777777")

    # Terrestrials
    CYTHEREAN = (PlanetClass.TELLURIC, 5.5, "#777777")
    EO_GAIAN = (PlanetClass.TECTONIC, 5.5, "#777777")
    MESO_GAIAN = (PlanetClass.TECTONIC, 5.5, "#777777")


class Atmosphere(Enum):
    VACUUM = "Vacuum"
    STANDARD = "Standard"
    CHLORINE = "Chlorine"
    FLOURINE = "Flourine"
    OXYGEN = "Oxygen"
    SULPHUR_COMPOUNDS = "SulphurCompounds"
    NITROGEN_COMPOUNDS = "NitrogenCompounds"
    ORGANIC_TOXINS = "OrganicToxins"
    LOW_OXYGEN = "LowOxygen"
    POLLUTANTS = "Pollutants"
    HIGH_CARBON_DIOXIDE = "HighCarbonDioxide"
    HIGH_OXYGEN = "HighOxygen"
    INERT_GASES = "InertGases"
    HYDROGEN = "Hydrogen"
    PRIMORDIAL = "Primordial"
    WATER_VAPOUR = "WaterVapour"
    CARBON_DIOXIDE = "CarbonDioxide"
    TAINTED = "Tainted"
    EXOTIC = "Exotic"


class Pressure(IntEnum):
    """Named surface pressures in pascals."""

    NONE = 0
    TRACE = 5_000
    VERY_THIN = 20_000
    THIN = 45_000
    STANDARD = 100_000
    DENSE = 150_000
    VERY_DENSE = 500_000
    SUPER_DENSE = 2_500_000


class MagneticField(Enum):
    NONE = "None"
    MINIMAL = "Minimal"
    VERY_WEAK = "VeryWeak"
    WEAK = "Weak"
    STANDARD = "Standard"
    STRONG = "Strong"
    VERY_STRONG = "VeryStrong"
    INTENSE = "Intense"


class Life(Enum):
    NONE = "None"
    ORGANIC = "Organic"
    ARCHAEAN = "Archaean"
    AEROBIC = "Aerobic"
    COMPLEX_OCEAN = "ComplexOcean"
    SIMPLE_LAND = "SimpleLand"
    COMPLEX_LAND = "ComplexLand"
    EXTENSIVE = "Extensive"


class Temperature(IntEnum):
    """Reference temperatures in Kelvin."""

    DEEP_SPACE = 3
    WATER_FREEZES = 273
    COOL = 280
    VERY_HOT = 350
    WATER_BOILS = 373
    LEAD_MELTS = 750
    SILICATES_MELT = 1500
    STELLAR_SURFACE = 6500


class Tier(Enum):
    """Abundance tier of a resource."""

    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    TERTIARY = "Tertiary"
    TRACE = "Trace"


class CommodityName(Enum):
    HYDROGEN = "Hydrogen"
    HELIUM = "Helium"
    ORGANIC_GASES = "Organic Gases"
    CORROSIVE_GASES = "Corrosive Gases"
    EXOTIC_GASES = "Exotic Gases"
    SILICATE_ORE = "Silicate Ore"
    CARBONIC_ORE = "Carbonic Ore"
    FERRIC_ORE = "Ferric Ore"
    HEAVY_METALS = "Heavy Metals"
    RADIOACTIVES = "Radioactives"
    RARE_METALS = "Rare Metals"
    PRECIOUS_METALS = "Precious Metals"
    SILICATE_CRYSTALS = "Silicate Crystals"
    EXOTIC_CRYSTALS = "Exotic Crystals"
    CARBONIC_CRYSTALS = "Carbonic Crystals"
    WATER = "Water"
    OXYGEN = "Oxygen"
    ORGANIC_CHEMICALS = "Organic Chemicals"
    PROTOBIONTS = "Protobionts"
    PROKARYOTES = "Prokaryotes"
    CYANOBACTERIA = "Cyanobacteria"
    ALGAE = "Algae"
    METAZOA = "Metazoa"
    PLANKTON = "Plankton"
    ECHINODERMS = "Echinoderms"
    UNOBTANIUM = "Unobtanium"


class Feature(Enum):
    """Base of the per-family feature enumerations."""


class BeltFeature(Feature):
    THIN_RING = "ThinRing"
    WIDE_SPARSE_RING = "WideSparseRing"
    PLANETOIDS = "Planetoids"


class SmallBodyFeature(Feature):
    TINY = "Tiny"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    HUGE = "Huge"
    GIGANTIC = "Gigantic"
    OBLONG = "Oblong"
    EGG = "Egg"


class JovianFeature(Feature):
    METHANE_CLOUDS = "MethaneClouds"
    AMMONIA_CLOUDS = "AmmoniaClouds"
    WATER_CLOUDS = "WaterClouds"
    CLOUDLESS = "Cloudless"
    ALKALI_METALS = "AlkaliMetals"
    SILICATE_CLOUDS = "SilicateClouds"


class TerrestrialFeature(Feature):
    VOLCANIC_FLATS = "VolcanicFlats"
    PANGAEA = "Pangaea"
    EQUATORIAL_OCEAN = "EquatorialOcean"
    MANY_ISLANDS = "ManyIslands"
    RED_ICE = "RedIce"
    BACTERIAL_MATS = "BacterialMats"
    BORDERED_IN_BLACK = "BorderedInBlack"
    BORDERED_IN_GREEN = "BorderedInGreen"
    DRY = "Dry"
    WET = "Wet"
    VOLCANOES = "Volcanoes"


class DwarfFeature(Feature):
    GREAT_RIFT = "GreatRift"
    BROKEN_RIFTS = "BrokenRifts"
    METALLIC_SEA = "MetallicSea"
    METALLIC_LAKES = "MetallicLakes"
    NATURAL_HONEY_COMB = "NaturalHoneyComb"
    ARTIFICIAL_HONEY_COMB = "ArtificialHoneyComb"
    NORTH_CRATER = "NorthCrater"
    SOUTH_CRATER = "SouthCrater"
    EQUATORIAL_RIDGE = "EquatorialRidge"
    NIGHTSIDE_ICE = "NightsideIce"
    RE_MELTED = "ReMelted"


class MoonFeature(Feature):
    SMALL_MOON = "SmallMoon"
    LARGE_MOON = "LargeMoon"
    TIDALLY_LOCKED = "TidallyLocked"
    ALMOST_LOCKED = "AlmostLocked"
