"""Conversion factors of every supported unit relative to its dimension's base SI unit.

Each class below holds the constants for a single dimension. A constant is the number of
base units in one unit of the named kind: ``LengthFactors.Foot == 0.3048`` reads
"1 ft = 0.3048 m". Unit enumerations in `py_quantify.unit` are declared from these values
and derive their full pairwise factor tables from them once, at import time.

All values follow international standard definitions (SI brochure, NIST SP 811,
CODATA 2018) where applicable.
"""

from math import pi

# Third-party imports
from typing_extensions import Final

__all__ = (
    'AccelerationFactors',
    'AngleFactors',
    'AngularVelocityFactors',
    'AreaFactors',
    'CurrentFactors',
    'DensityFactors',
    'ElectricChargeFactors',
    'EnergyFactors',
    'ForceFactors',
    'FrequencyFactors',
    'LengthFactors',
    'LuminousIntensityFactors',
    'MassFactors',
    'MolarFactors',
    'PowerFactors',
    'PressureFactors',
    'SolidAngleFactors',
    'SpecificEnergyFactors',
    'SpeedFactors',
    'TemperatureDeltaFactors',
    'TimeFactors',
    'VolumeFactors',
)

# =============================================================================
# Mechanics
# =============================================================================


class LengthFactors:
    """Meters per unit."""

    Meter: Final[float] = 1.0
    Kilometer: Final[float] = 1_000.0
    Hectometer: Final[float] = 100.0
    Decameter: Final[float] = 10.0
    Decimeter: Final[float] = 0.1
    Centimeter: Final[float] = 0.01
    Millimeter: Final[float] = 0.001
    Micrometer: Final[float] = 1e-6
    Nanometer: Final[float] = 1e-9
    Picometer: Final[float] = 1e-12
    Femtometer: Final[float] = 1e-15
    Angstrom: Final[float] = 1e-10
    Inch: Final[float] = 0.0254
    Foot: Final[float] = 0.3048
    Yard: Final[float] = 0.9144
    Mile: Final[float] = 1_609.344
    NauticalMile: Final[float] = 1_852.0
    AstronomicalUnit: Final[float] = 149_597_870_700.0  # IAU 2012, exact
    LightYear: Final[float] = 9_460_730_472_580_800.0  # Julian year * c
    Parsec: Final[float] = 3.0856775814913673e16


class AreaFactors:
    """Square meters per unit."""

    SquareMeter: Final[float] = 1.0
    SquareDecimeter: Final[float] = 0.01
    SquareCentimeter: Final[float] = 0.0001
    SquareMillimeter: Final[float] = 0.000001
    SquareMicrometer: Final[float] = 1e-12
    SquareDecameter: Final[float] = 100.0
    SquareHectometer: Final[float] = 10_000.0
    Hectare: Final[float] = 10_000.0
    SquareKilometer: Final[float] = 1_000_000.0
    SquareMegameter: Final[float] = 1e12
    SquareInch: Final[float] = 0.00064516
    SquareFoot: Final[float] = 0.09290304
    SquareYard: Final[float] = 0.83612736
    SquareMile: Final[float] = 2_589_988.110336
    Acre: Final[float] = 4_046.8564224


class VolumeFactors:
    """Cubic meters per unit.

    US customary liquid units derive from the exact cubic inch (2.54 cm)³.
    """

    CubicMeter: Final[float] = 1.0
    CubicDecameter: Final[float] = 1e3
    CubicHectometer: Final[float] = 1e6
    CubicKilometer: Final[float] = 1e9
    CubicDecimeter: Final[float] = 1e-3
    CubicCentimeter: Final[float] = 1e-6
    CubicMillimeter: Final[float] = 1e-9
    Kiloliter: Final[float] = 1.0
    Megaliter: Final[float] = 1e3
    Gigaliter: Final[float] = 1e6
    Teraliter: Final[float] = 1e9
    Liter: Final[float] = 1e-3
    Centiliter: Final[float] = 1e-5
    Milliliter: Final[float] = 1e-6
    Microliter: Final[float] = 1e-9
    CubicInch: Final[float] = 1.6387064e-5
    CubicFoot: Final[float] = CubicInch * 1_728.0
    CubicMile: Final[float] = CubicFoot * 147_197_952_000.0
    Gallon: Final[float] = CubicInch * 231.0
    Quart: Final[float] = Gallon / 4.0
    Pint: Final[float] = Quart / 2.0
    FluidOunce: Final[float] = Pint / 16.0
    Tablespoon: Final[float] = FluidOunce / 2.0
    Teaspoon: Final[float] = Tablespoon / 3.0


class MassFactors:
    """Kilograms per unit."""

    Kilogram: Final[float] = 1.0
    Hectogram: Final[float] = 0.1
    Decagram: Final[float] = 0.01
    Gram: Final[float] = 0.001
    Decigram: Final[float] = 0.0001
    Centigram: Final[float] = 0.00001
    Milligram: Final[float] = 1e-6
    Microgram: Final[float] = 1e-9
    Nanogram: Final[float] = 1e-12
    Megagram: Final[float] = 1_000.0
    Gigagram: Final[float] = 1e6
    Tonne: Final[float] = 1_000.0
    Pound: Final[float] = 0.45359237  # international avoirdupois pound, exact
    Ounce: Final[float] = Pound / 16.0
    Stone: Final[float] = Pound * 14.0
    Grain: Final[float] = Pound / 7_000.0
    Slug: Final[float] = 14.5939029372
    ShortTon: Final[float] = Pound * 2_000.0
    LongTon: Final[float] = Pound * 2_240.0
    AtomicMassUnit: Final[float] = 1.66053906660e-27
    Carat: Final[float] = 0.0002


class TimeFactors:
    """Seconds per unit."""

    Second: Final[float] = 1.0
    Millisecond: Final[float] = 0.001
    Microsecond: Final[float] = 1e-6
    Nanosecond: Final[float] = 1e-9
    Picosecond: Final[float] = 1e-12
    Minute: Final[float] = 60.0
    Hour: Final[float] = 3_600.0
    Day: Final[float] = 86_400.0
    Week: Final[float] = 604_800.0
    Month: Final[float] = 2_629_800.0  # Julian year / 12
    Year: Final[float] = 31_557_600.0  # Julian year, 365.25 d


class SpeedFactors:
    """Meters per second per unit."""

    MeterPerSecond: Final[float] = 1.0
    KilometerPerHour: Final[float] = 1_000.0 / 3_600.0
    MilePerHour: Final[float] = 1_609.344 / 3_600.0
    Knot: Final[float] = 1_852.0 / 3_600.0
    FootPerSecond: Final[float] = 0.3048


class AccelerationFactors:
    """Meters per second squared per unit."""

    MeterPerSecondSquared: Final[float] = 1.0
    StandardGravity: Final[float] = 9.80665  # exact by convention (CGPM 1901)
    KilometerPerHourPerSecond: Final[float] = 1_000.0 / 3_600.0
    MilePerHourPerSecond: Final[float] = 1_609.344 / 3_600.0
    KnotPerSecond: Final[float] = 1_852.0 / 3_600.0
    FootPerSecondSquared: Final[float] = 0.3048
    Gal: Final[float] = 0.01


class ForceFactors:
    """Newtons per unit."""

    Newton: Final[float] = 1.0
    Kilonewton: Final[float] = 1_000.0
    Meganewton: Final[float] = 1e6
    Millinewton: Final[float] = 0.001
    PoundForce: Final[float] = 4.4482216152605
    Dyne: Final[float] = 1e-5
    KilogramForce: Final[float] = 9.80665
    GramForce: Final[float] = 0.00980665
    Poundal: Final[float] = 0.138254954376


class DensityFactors:
    """Kilograms per cubic meter per unit."""

    KilogramPerCubicMeter: Final[float] = 1.0
    GramPerCubicMeter: Final[float] = 0.001
    GramPerCubicCentimeter: Final[float] = 1_000.0
    GramPerMilliliter: Final[float] = 1_000.0
    KilogramPerLiter: Final[float] = 1_000.0
    PoundPerCubicFoot: Final[float] = MassFactors.Pound / VolumeFactors.CubicFoot


class PressureFactors:
    """Pascals per unit."""

    Pascal: Final[float] = 1.0
    Atmosphere: Final[float] = 101_325.0
    Bar: Final[float] = 100_000.0
    Psi: Final[float] = 6_894.757293168361
    Torr: Final[float] = Atmosphere / 760.0
    MillimeterOfMercury: Final[float] = 133.322387415
    InchOfMercury: Final[float] = MillimeterOfMercury * 25.4
    Megapascal: Final[float] = 1e6
    Kilopascal: Final[float] = 1_000.0
    Hectopascal: Final[float] = 100.0
    Millibar: Final[float] = 100.0
    CentimeterOfWater: Final[float] = 98.0665  # conventional, 4 °C
    InchOfWater: Final[float] = 249.08891  # conventional, 4 °C


# =============================================================================
# Energy and power
# =============================================================================


class EnergyFactors:
    """Joules per unit."""

    Joule: Final[float] = 1.0
    Megajoule: Final[float] = 1e6
    Kilojoule: Final[float] = 1_000.0
    Calorie: Final[float] = 4.184  # thermochemical
    CalorieIT: Final[float] = 4.1868  # International Steam Table
    Kilocalorie: Final[float] = 4_184.0
    KilocalorieIT: Final[float] = 4_186.8
    KilowattHour: Final[float] = 3.6e6
    Electronvolt: Final[float] = 1.602176634e-19
    Btu: Final[float] = 1_055.056  # International Table
    FootPound: Final[float] = 1.3558179483314004


class PowerFactors:
    """Watts per unit."""

    Watt: Final[float] = 1.0
    Milliwatt: Final[float] = 0.001
    Kilowatt: Final[float] = 1_000.0
    Megawatt: Final[float] = 1e6
    Gigawatt: Final[float] = 1e9
    Horsepower: Final[float] = 745.69987158227022  # mechanical
    MetricHorsepower: Final[float] = 735.49875
    BtuPerHour: Final[float] = EnergyFactors.Btu / 3_600.0
    ErgPerSecond: Final[float] = 1e-7


class SpecificEnergyFactors:
    """Joules per kilogram per unit."""

    JoulePerKilogram: Final[float] = 1.0
    KilojoulePerKilogram: Final[float] = 1_000.0
    WattHourPerKilogram: Final[float] = 3_600.0
    KilowattHourPerKilogram: Final[float] = 3.6e6


# =============================================================================
# Rotation and geometry
# =============================================================================


class AngleFactors:
    """Radians per unit."""

    Radian: Final[float] = 1.0
    Revolution: Final[float] = 2 * pi
    Degree: Final[float] = Revolution / 360.0
    Gradian: Final[float] = Revolution / 400.0
    Arcminute: Final[float] = Degree / 60.0
    Arcsecond: Final[float] = Arcminute / 60.0
    Milliradian: Final[float] = 0.001


class AngularVelocityFactors:
    """Radians per second per unit."""

    RadianPerSecond: Final[float] = 1.0
    DegreePerSecond: Final[float] = AngleFactors.Degree
    RevolutionPerMinute: Final[float] = AngleFactors.Revolution / 60.0
    RevolutionPerSecond: Final[float] = AngleFactors.Revolution


class SolidAngleFactors:
    """Steradians per unit."""

    Steradian: Final[float] = 1.0
    SquareDegree: Final[float] = (pi / 180.0) * (pi / 180.0)
    Spat: Final[float] = 4 * pi


class FrequencyFactors:
    """Hertz per unit."""

    Hertz: Final[float] = 1.0
    Terahertz: Final[float] = 1e12
    Gigahertz: Final[float] = 1e9
    Megahertz: Final[float] = 1e6
    Kilohertz: Final[float] = 1e3
    RevolutionPerMinute: Final[float] = 1.0 / 60.0
    BeatPerMinute: Final[float] = 1.0 / 60.0
    RadianPerSecond: Final[float] = 1.0 / (2 * pi)
    DegreePerSecond: Final[float] = 1.0 / 360.0


# =============================================================================
# Electromagnetism, photometry, chemistry, thermodynamics
# =============================================================================


class CurrentFactors:
    """Amperes per unit."""

    Ampere: Final[float] = 1.0
    Milliampere: Final[float] = 0.001
    Microampere: Final[float] = 1e-6
    Nanoampere: Final[float] = 1e-9
    Kiloampere: Final[float] = 1_000.0
    Statampere: Final[float] = 3.3356409519815204e-10
    Abampere: Final[float] = 10.0


class ElectricChargeFactors:
    """Coulombs per unit."""

    Coulomb: Final[float] = 1.0
    Millicoulomb: Final[float] = 1e-3
    Microcoulomb: Final[float] = 1e-6
    Nanocoulomb: Final[float] = 1e-9
    ElementaryCharge: Final[float] = 1.602176634e-19  # exact since the 2019 SI redefinition
    AmpereHour: Final[float] = 3_600.0
    MilliampereHour: Final[float] = 3.6
    Statcoulomb: Final[float] = 3.3356409519815204e-10
    Abcoulomb: Final[float] = 10.0


class LuminousIntensityFactors:
    """Candelas per unit."""

    Candela: Final[float] = 1.0
    Millicandela: Final[float] = 0.001
    Kilocandela: Final[float] = 1_000.0


class MolarFactors:
    """Moles per unit."""

    Mole: Final[float] = 1.0
    Millimole: Final[float] = 0.001
    Micromole: Final[float] = 1e-6
    Nanomole: Final[float] = 1e-9
    Picomole: Final[float] = 1e-12
    Kilomole: Final[float] = 1_000.0


class TemperatureDeltaFactors:
    """Kelvin (interval) per unit.

    Only temperature *differences* scale multiplicatively; absolute temperatures are
    affine and handled by `py_quantify.dimensions.Temperature`.
    """

    Kelvin: Final[float] = 1.0
    Celsius: Final[float] = 1.0
    Fahrenheit: Final[float] = 5.0 / 9.0
    Rankine: Final[float] = 5.0 / 9.0
