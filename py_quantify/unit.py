"""Unit enumerations for every supported physical dimension.

Every dimension (length, mass, density, ...) owns a closed `Enum` of units derived from the
common [`Unit`][py_quantify.unit.Unit] base. A member is declared with its factor relative to
the dimension's base SI unit (see `py_quantify.factors`) and its display symbol. The
[`factor_table`][py_quantify.unit.factor_table] decorator then precomputes the direct factor
from every member to every sibling, so a conversion is a single multiplication and never
round-trips through the base unit.

Key Features:
    * Closed, per-dimension unit sets: a `LengthUnit` can never be mixed with a `MassUnit`
    * Precomputed pairwise factor tables: `value_in_target = value * unit.factor_to(target)`
    * Units are callable factories: `LengthUnit.Meter(5)` builds a `Length`
    * String parsing and unit alias resolution
    * Default `PreferredUnits` configuration

Examples:
    >>> LengthUnit.Kilometer.factor_to(LengthUnit.Meter)
    1000.0
    >>> LengthUnit.Meter.symbol
    'm'
    >>> LengthUnit.Kilometer(1.5)
    <Length: 1.5 km (1500.0)>
    >>> parse_unit('kg/m³')
    KilogramPerCubicMeter

Supported Dimensions:
    * Acceleration, Angle, AngularVelocity, Area, Current, Density, ElectricCharge, Energy,
      Force, Frequency, Length, LuminousIntensity, Mass, Molar, Power, Pressure, SolidAngle,
      SpecificEnergy, Speed, Temperature, TemperatureDelta, Time, Volume
"""

# Standard library imports
from __future__ import annotations
from dataclasses import dataclass, fields, MISSING
from enum import Enum
from types import MappingProxyType
import re
from typing import Any, Callable, Dict, Generator, Iterable, Mapping, Optional, Sequence, Tuple, \
    Type, TypeVar, Union

from typing_extensions import Self, TypeAlias

# Local imports
from py_quantify.exceptions import UnitTypeError, UnitConversionError
from py_quantify.factors import (
    AccelerationFactors, AngleFactors, AngularVelocityFactors, AreaFactors, CurrentFactors,
    DensityFactors, ElectricChargeFactors, EnergyFactors, ForceFactors, FrequencyFactors,
    LengthFactors, LuminousIntensityFactors, MassFactors, MolarFactors, PowerFactors,
    PressureFactors, SolidAngleFactors, SpecificEnergyFactors, SpeedFactors,
    TemperatureDeltaFactors, TimeFactors, VolumeFactors,
)
from py_quantify.logger import logger

Number: TypeAlias = Union[float, int]
MAX_ITERATIONS: int = 1_000_000  # Prevent runaway Unit.counter()

_UnitType = TypeVar('_UnitType', bound=Type['Unit'])

# Unit enum class -> quantity class, filled in by GenericQuantity.__init_subclass__
_QUANTITY_CLASSES: Dict[Type['Unit'], type] = {}


def counter(start: Number = 0, step: Number = 1, end: Optional[Number] = None) -> Iterable[Number]:
    """Generate a sequence of numbers with optional bounds.

    Args:
        start: Initial value for the sequence. Defaults to 0.
        step: Increment/decrement step value. Cannot be 0 for infinite iteration.
        end: Final value (exclusive) for bounded sequences. If None, creates an infinite sequence.

    Yields:
        Number: The next value in the arithmetic sequence.

    Raises:
        ValueError: If 'step' is 0 for infinite iteration, or if 'step' has the wrong sign
                    for the given 'start' and 'end' range.

    Examples:
        >>> list(counter(0, 1, 5))
        [0, 1, 2, 3, 4]
        >>> list(counter(10, -2, 0))
        [10, 8, 6, 4, 2]
    """
    if step == 0:
        if end is None:
            raise ValueError("For infinite iteration, 'step' cannot be zero.")
        yield start
        return

    current = start
    if end is None:
        while True:
            yield current
            current += step
    else:
        if step > 0:
            if start > end:
                raise ValueError("For an incremental step (step > 0), 'start' cannot be greater than 'end'.")
            while current < end:
                yield current
                current += step
        else:  # step < 0
            if start < end:
                raise ValueError("For a decrementing step (step < 0), 'start' cannot be less than 'end'.")
            while current > end:
                yield current
                current += step


def iterator(items: Sequence[Number], /, *,
             sort: bool = False,
             key: Optional[Callable[[Number], Any]] = None,
             reverse: bool = False) -> Generator[Number, None, None]:
    """Create a generator from a sequence of numbers with optional sorting.

    Examples:
        >>> list(iterator([3, 1, 4, 2], sort=True))
        [1, 2, 3, 4]
        >>> list(iterator([-3, 1, -4, 2], sort=True, key=abs))
        [1, 2, -3, -4]
    """
    if sort:
        items = sorted(items, key=key, reverse=reverse)
    for v in items:
        yield v


class Unit(Enum):
    """Base class of all unit enumerations.

    A unit member knows its display `symbol` and the direct multiplicative factor to every
    other member of the same enumeration. Subclasses declare members as
    ``Name = (factor_to_base, symbol)`` and must be decorated with `factor_table`.
    The first declared member is the dimension's base SI unit.

    Each unit can be used as a callable constructor for the quantity of its dimension:

    Examples:
        >>> distance = LengthUnit.Meter(100)
        >>> mass = MassUnit.Pound(2.5)
    """

    def __init__(self, factor_to_base: float, symbol: str):
        self._factor_to_base: float = float(factor_to_base)
        self._symbol: str = symbol
        self._factors: Mapping[Unit, float] = MappingProxyType({})

    @property
    def symbol(self) -> str:
        """Short display symbol of the unit (e.g. 'kg/m³')."""
        return self._symbol

    @property
    def key(self) -> str:
        """Readable name of the unit of measure."""
        return re.sub(r'(?<!^)(?=[A-Z])', ' ', self.name).lower()

    @property
    def factor_to_base(self) -> float:
        """Number of base units in one of this unit."""
        return self._factor_to_base

    def factor_to(self, target: Unit) -> float:
        """Direct conversion factor from this unit to `target`.

        The conversion is `value_in_target = value_in_self * self.factor_to(target)`.

        Raises:
            TypeError: If `target` is not a Unit.
            UnitConversionError: If `target` belongs to another dimension.
        """
        try:
            return self._factors[target]
        except KeyError:
            if not isinstance(target, Unit):
                raise TypeError(f"Type expected: {Unit.__name__}; got: {type(target).__name__} ({target})")
            raise UnitConversionError(
                f"{type(self).__name__}: cannot convert {self.name} to {type(target).__name__}.{target.name}"
            ) from None

    @classmethod
    def base_unit(cls) -> Self:
        """Base SI unit of this dimension (the first declared member)."""
        return next(iter(cls))

    @classmethod
    def quantity_class(cls) -> type:
        """Quantity type whose values are measured in this unit enumeration."""
        try:
            return _QUANTITY_CLASSES[cls]
        except KeyError:
            raise UnitTypeError(f"{cls.__name__} has no quantity type registered") from None

    @classmethod
    def from_alias(cls, alias: str) -> Optional[Self]:
        """Find a member of this enumeration by symbol, member name or registered alias.

        Symbols are matched case-sensitively ('Mg' is a megagram, 'mg' a milligram);
        names and aliases case-insensitively. Whitespace is ignored and a trailing 's'
        is tried as a plural of a name or alias, never of a symbol.

        Raises:
            TypeError: If `alias` is not a string.

        Examples:
            >>> MassUnit.from_alias('Mg')
            Megagram
            >>> LengthUnit.from_alias(' Yards ')
            Yard
            >>> LengthUnit.from_alias('kg') is None
            True
        """
        if not isinstance(alias, str):
            raise TypeError(f"String expected, got {type(alias)=}, {alias=}")
        text = re.sub(r"\s+", "", alias)
        if (unit := cls._find_by_symbol(text)) is not None:
            return unit
        lowered = text.lower()
        if (unit := cls._find_by_name(lowered)) is not None:
            return unit
        # Plurals of names and aliases only: 'ms' is not a plural of 'm'
        if lowered.endswith('s'):
            return cls._find_by_name(lowered[:-1], match_symbols=False)
        return None

    @classmethod
    def _find_by_symbol(cls, text: str) -> Optional[Self]:
        for unit in cls:
            if text == unit.symbol.replace(' ', ''):
                return unit
        return None

    @classmethod
    def _find_by_name(cls, lowered: str, match_symbols: bool = True) -> Optional[Self]:
        for unit in cls:
            if lowered == unit.name.lower():
                return unit
        for aliases_tuple, unit in UnitAliases.items():
            if isinstance(unit, cls) and lowered in (each.lower() for each in aliases_tuple):
                return unit
        if not match_symbols:
            return None
        # Symbols last: 'ml' is an alias of mL and must not fall through to ML
        for unit in cls:
            if lowered == unit.symbol.replace(' ', '').lower():
                return unit
        return None

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.symbol

    def __call__(self, value: Any) -> Any:
        """Create a quantity in this unit using dot syntax.

        Args:
            value: Numeric value of the quantity, or an existing quantity of the same
                   dimension (which is converted to this unit).

        Returns:
            An instance of the quantity class bound to this unit's dimension.
        """
        quantity_class = type(self).quantity_class()
        if isinstance(value, quantity_class):
            return value.convert(self)
        return quantity_class(value, self)

    def counter(self, start: Number, step: Number,
                end: Optional[Number] = None, include_end: bool = True) -> Generator[Any, None, None]:
        """Generate a finite or infinite sequence of quantities in this unit.

        Args:
            start: The starting value for the sequence.
            step: The increment/decrement step. Must not be 0 for an infinite sequence.
            end: The value at which the sequence stops. If `None`, the sequence is infinite.
            include_end: If `True` and `end` is provided, `end` is included in the sequence.

        Raises:
            ValueError: If `step` is 0 for an infinite sequence, has the wrong direction for
                        the range, or if the iteration limit (`MAX_ITERATIONS`) is reached.

        Examples:
            >>> list(TimeUnit.Millisecond.counter(start=0, step=10, end=20))
            [<Time: 0.0 ms (0.0)>, <Time: 10.0 ms (0.01)>, <Time: 20.0 ms (0.02)>]
        """
        if end is not None and include_end:
            end += step
        for i, value in enumerate(counter(start, step, end)):
            yield self(value)
            if i == MAX_ITERATIONS:
                raise ValueError("Reached generator limit %d" % MAX_ITERATIONS)

    def iterator(self, items: Sequence[Number], /, *,
                 sort: bool = False,
                 reverse: bool = False) -> Generator[Any, None, None]:
        """Create a sequence of quantities in this unit from raw numeric values.

        Examples:
            >>> list(LengthUnit.Foot.iterator([5, 1, 2], sort=True))
            [<Length: 1.0 ft (0.3048)>, <Length: 2.0 ft (0.6096)>, <Length: 5.0 ft (1.524)>]
        """
        for v in iterator(items, sort=sort, reverse=reverse):
            yield self(v)


def factor_table(cls: _UnitType) -> _UnitType:
    """Class decorator computing the pairwise factor table of a unit enumeration.

    For every pair of members `a`, `b` stores `a.factor_to_base / b.factor_to_base` on `a`.
    The tables are read-only mappings and are built exactly once, when the enum is declared.

    Raises:
        ValueError: If the first member (the base unit) does not have a factor of 1.
    """
    members = list(cls)
    if members[0].factor_to_base != 1.0:
        raise ValueError(f"{cls.__name__}: base unit {members[0].name} must have a factor of 1")
    for unit in members:
        unit._factors = MappingProxyType({
            target: (1.0 if target is unit else unit.factor_to_base / target.factor_to_base)
            for target in members
        })
    return cls


# =============================================================================
# Mechanics
# =============================================================================


@factor_table
class LengthUnit(Unit):
    """Units of length. Base unit is the meter."""

    Meter = (LengthFactors.Meter, 'm')
    Kilometer = (LengthFactors.Kilometer, 'km')
    Hectometer = (LengthFactors.Hectometer, 'hm')
    Decameter = (LengthFactors.Decameter, 'dam')
    Decimeter = (LengthFactors.Decimeter, 'dm')
    Centimeter = (LengthFactors.Centimeter, 'cm')
    Millimeter = (LengthFactors.Millimeter, 'mm')
    Micrometer = (LengthFactors.Micrometer, 'µm')
    Nanometer = (LengthFactors.Nanometer, 'nm')
    Picometer = (LengthFactors.Picometer, 'pm')
    Femtometer = (LengthFactors.Femtometer, 'fm')
    Angstrom = (LengthFactors.Angstrom, 'Å')
    Inch = (LengthFactors.Inch, 'in')
    Foot = (LengthFactors.Foot, 'ft')
    Yard = (LengthFactors.Yard, 'yd')
    Mile = (LengthFactors.Mile, 'mi')
    NauticalMile = (LengthFactors.NauticalMile, 'nmi')
    AstronomicalUnit = (LengthFactors.AstronomicalUnit, 'AU')
    LightYear = (LengthFactors.LightYear, 'ly')
    Parsec = (LengthFactors.Parsec, 'pc')


@factor_table
class AreaUnit(Unit):
    """Units of area. Base unit is the square meter."""

    SquareMeter = (AreaFactors.SquareMeter, 'm²')
    SquareDecimeter = (AreaFactors.SquareDecimeter, 'dm²')
    SquareCentimeter = (AreaFactors.SquareCentimeter, 'cm²')
    SquareMillimeter = (AreaFactors.SquareMillimeter, 'mm²')
    SquareMicrometer = (AreaFactors.SquareMicrometer, 'µm²')
    SquareDecameter = (AreaFactors.SquareDecameter, 'dam²')
    SquareHectometer = (AreaFactors.SquareHectometer, 'hm²')
    Hectare = (AreaFactors.Hectare, 'ha')
    SquareKilometer = (AreaFactors.SquareKilometer, 'km²')
    SquareMegameter = (AreaFactors.SquareMegameter, 'Mm²')
    SquareInch = (AreaFactors.SquareInch, 'in²')
    SquareFoot = (AreaFactors.SquareFoot, 'ft²')
    SquareYard = (AreaFactors.SquareYard, 'yd²')
    SquareMile = (AreaFactors.SquareMile, 'mi²')
    Acre = (AreaFactors.Acre, 'ac')


@factor_table
class VolumeUnit(Unit):
    """Units of volume. Base unit is the cubic meter."""

    CubicMeter = (VolumeFactors.CubicMeter, 'm³')
    CubicDecameter = (VolumeFactors.CubicDecameter, 'dam³')
    CubicHectometer = (VolumeFactors.CubicHectometer, 'hm³')
    CubicKilometer = (VolumeFactors.CubicKilometer, 'km³')
    CubicDecimeter = (VolumeFactors.CubicDecimeter, 'dm³')
    CubicCentimeter = (VolumeFactors.CubicCentimeter, 'cm³')
    CubicMillimeter = (VolumeFactors.CubicMillimeter, 'mm³')
    Kiloliter = (VolumeFactors.Kiloliter, 'kL')
    Megaliter = (VolumeFactors.Megaliter, 'ML')
    Gigaliter = (VolumeFactors.Gigaliter, 'GL')
    Teraliter = (VolumeFactors.Teraliter, 'TL')
    Liter = (VolumeFactors.Liter, 'L')
    Centiliter = (VolumeFactors.Centiliter, 'cL')
    Milliliter = (VolumeFactors.Milliliter, 'mL')
    Microliter = (VolumeFactors.Microliter, 'µL')
    CubicInch = (VolumeFactors.CubicInch, 'in³')
    CubicFoot = (VolumeFactors.CubicFoot, 'ft³')
    CubicMile = (VolumeFactors.CubicMile, 'mi³')
    Gallon = (VolumeFactors.Gallon, 'gal')
    Quart = (VolumeFactors.Quart, 'qt')
    Pint = (VolumeFactors.Pint, 'pt')
    FluidOunce = (VolumeFactors.FluidOunce, 'fl oz')
    Tablespoon = (VolumeFactors.Tablespoon, 'tbsp')
    Teaspoon = (VolumeFactors.Teaspoon, 'tsp')


@factor_table
class MassUnit(Unit):
    """Units of mass. Base unit is the kilogram."""

    Kilogram = (MassFactors.Kilogram, 'kg')
    Hectogram = (MassFactors.Hectogram, 'hg')
    Decagram = (MassFactors.Decagram, 'dag')
    Gram = (MassFactors.Gram, 'g')
    Decigram = (MassFactors.Decigram, 'dg')
    Centigram = (MassFactors.Centigram, 'cg')
    Milligram = (MassFactors.Milligram, 'mg')
    Microgram = (MassFactors.Microgram, 'µg')
    Nanogram = (MassFactors.Nanogram, 'ng')
    Megagram = (MassFactors.Megagram, 'Mg')
    Gigagram = (MassFactors.Gigagram, 'Gg')
    Tonne = (MassFactors.Tonne, 't')
    Pound = (MassFactors.Pound, 'lb')
    Ounce = (MassFactors.Ounce, 'oz')
    Stone = (MassFactors.Stone, 'st')
    Grain = (MassFactors.Grain, 'gr')
    Slug = (MassFactors.Slug, 'slug')
    ShortTon = (MassFactors.ShortTon, 'short ton')
    LongTon = (MassFactors.LongTon, 'long ton')
    AtomicMassUnit = (MassFactors.AtomicMassUnit, 'u')
    Carat = (MassFactors.Carat, 'ct')


@factor_table
class TimeUnit(Unit):
    """Units of time. Base unit is the second."""

    Second = (TimeFactors.Second, 's')
    Millisecond = (TimeFactors.Millisecond, 'ms')
    Microsecond = (TimeFactors.Microsecond, 'µs')
    Nanosecond = (TimeFactors.Nanosecond, 'ns')
    Picosecond = (TimeFactors.Picosecond, 'ps')
    Minute = (TimeFactors.Minute, 'min')
    Hour = (TimeFactors.Hour, 'h')
    Day = (TimeFactors.Day, 'd')
    Week = (TimeFactors.Week, 'wk')
    Month = (TimeFactors.Month, 'mo')
    Year = (TimeFactors.Year, 'yr')


@factor_table
class SpeedUnit(Unit):
    """Units of speed. Base unit is the meter per second."""

    MeterPerSecond = (SpeedFactors.MeterPerSecond, 'm/s')
    KilometerPerHour = (SpeedFactors.KilometerPerHour, 'km/h')
    MilePerHour = (SpeedFactors.MilePerHour, 'mph')
    Knot = (SpeedFactors.Knot, 'kn')
    FootPerSecond = (SpeedFactors.FootPerSecond, 'ft/s')


@factor_table
class AccelerationUnit(Unit):
    """Units of acceleration. Base unit is the meter per second squared."""

    MeterPerSecondSquared = (AccelerationFactors.MeterPerSecondSquared, 'm/s²')
    StandardGravity = (AccelerationFactors.StandardGravity, 'g₀')
    KilometerPerHourPerSecond = (AccelerationFactors.KilometerPerHourPerSecond, 'km/h/s')
    MilePerHourPerSecond = (AccelerationFactors.MilePerHourPerSecond, 'mph/s')
    KnotPerSecond = (AccelerationFactors.KnotPerSecond, 'kn/s')
    FootPerSecondSquared = (AccelerationFactors.FootPerSecondSquared, 'ft/s²')
    Gal = (AccelerationFactors.Gal, 'Gal')


@factor_table
class ForceUnit(Unit):
    """Units of force. Base unit is the newton."""

    Newton = (ForceFactors.Newton, 'N')
    Kilonewton = (ForceFactors.Kilonewton, 'kN')
    Meganewton = (ForceFactors.Meganewton, 'MN')
    Millinewton = (ForceFactors.Millinewton, 'mN')
    PoundForce = (ForceFactors.PoundForce, 'lbf')
    Dyne = (ForceFactors.Dyne, 'dyn')
    KilogramForce = (ForceFactors.KilogramForce, 'kgf')
    GramForce = (ForceFactors.GramForce, 'gf')
    Poundal = (ForceFactors.Poundal, 'pdl')


@factor_table
class DensityUnit(Unit):
    """Units of density. Base unit is the kilogram per cubic meter."""

    KilogramPerCubicMeter = (DensityFactors.KilogramPerCubicMeter, 'kg/m³')
    GramPerCubicMeter = (DensityFactors.GramPerCubicMeter, 'g/m³')
    GramPerCubicCentimeter = (DensityFactors.GramPerCubicCentimeter, 'g/cm³')
    GramPerMilliliter = (DensityFactors.GramPerMilliliter, 'g/mL')
    KilogramPerLiter = (DensityFactors.KilogramPerLiter, 'kg/L')
    PoundPerCubicFoot = (DensityFactors.PoundPerCubicFoot, 'lb/ft³')


@factor_table
class PressureUnit(Unit):
    """Units of pressure. Base unit is the pascal."""

    Pascal = (PressureFactors.Pascal, 'Pa')
    Atmosphere = (PressureFactors.Atmosphere, 'atm')
    Bar = (PressureFactors.Bar, 'bar')
    Psi = (PressureFactors.Psi, 'psi')
    Torr = (PressureFactors.Torr, 'Torr')
    MillimeterOfMercury = (PressureFactors.MillimeterOfMercury, 'mmHg')
    InchOfMercury = (PressureFactors.InchOfMercury, 'inHg')
    Megapascal = (PressureFactors.Megapascal, 'MPa')
    Kilopascal = (PressureFactors.Kilopascal, 'kPa')
    Hectopascal = (PressureFactors.Hectopascal, 'hPa')
    Millibar = (PressureFactors.Millibar, 'mbar')
    CentimeterOfWater = (PressureFactors.CentimeterOfWater, 'cmH₂O')
    InchOfWater = (PressureFactors.InchOfWater, 'inH₂O')


# =============================================================================
# Energy and power
# =============================================================================


@factor_table
class EnergyUnit(Unit):
    """Units of energy. Base unit is the joule."""

    Joule = (EnergyFactors.Joule, 'J')
    Megajoule = (EnergyFactors.Megajoule, 'MJ')
    Kilojoule = (EnergyFactors.Kilojoule, 'kJ')
    Calorie = (EnergyFactors.Calorie, 'cal')
    CalorieIT = (EnergyFactors.CalorieIT, 'cal_IT')
    Kilocalorie = (EnergyFactors.Kilocalorie, 'kcal')
    KilocalorieIT = (EnergyFactors.KilocalorieIT, 'kcal_IT')
    KilowattHour = (EnergyFactors.KilowattHour, 'kWh')
    Electronvolt = (EnergyFactors.Electronvolt, 'eV')
    Btu = (EnergyFactors.Btu, 'Btu')
    FootPound = (EnergyFactors.FootPound, 'ft·lbf')


@factor_table
class PowerUnit(Unit):
    """Units of power. Base unit is the watt."""

    Watt = (PowerFactors.Watt, 'W')
    Milliwatt = (PowerFactors.Milliwatt, 'mW')
    Kilowatt = (PowerFactors.Kilowatt, 'kW')
    Megawatt = (PowerFactors.Megawatt, 'MW')
    Gigawatt = (PowerFactors.Gigawatt, 'GW')
    Horsepower = (PowerFactors.Horsepower, 'hp')
    MetricHorsepower = (PowerFactors.MetricHorsepower, 'PS')
    BtuPerHour = (PowerFactors.BtuPerHour, 'Btu/h')
    ErgPerSecond = (PowerFactors.ErgPerSecond, 'erg/s')


@factor_table
class SpecificEnergyUnit(Unit):
    """Units of specific energy. Base unit is the joule per kilogram."""

    JoulePerKilogram = (SpecificEnergyFactors.JoulePerKilogram, 'J/kg')
    KilojoulePerKilogram = (SpecificEnergyFactors.KilojoulePerKilogram, 'kJ/kg')
    WattHourPerKilogram = (SpecificEnergyFactors.WattHourPerKilogram, 'Wh/kg')
    KilowattHourPerKilogram = (SpecificEnergyFactors.KilowattHourPerKilogram, 'kWh/kg')


# =============================================================================
# Rotation and geometry
# =============================================================================


@factor_table
class AngleUnit(Unit):
    """Units of plane angle. Base unit is the radian."""

    Radian = (AngleFactors.Radian, 'rad')
    Degree = (AngleFactors.Degree, '°')
    Gradian = (AngleFactors.Gradian, 'grad')
    Revolution = (AngleFactors.Revolution, 'rev')
    Arcminute = (AngleFactors.Arcminute, "'")
    Arcsecond = (AngleFactors.Arcsecond, '"')
    Milliradian = (AngleFactors.Milliradian, 'mrad')


@factor_table
class AngularVelocityUnit(Unit):
    """Units of angular velocity. Base unit is the radian per second."""

    RadianPerSecond = (AngularVelocityFactors.RadianPerSecond, 'rad/s')
    DegreePerSecond = (AngularVelocityFactors.DegreePerSecond, '°/s')
    RevolutionPerMinute = (AngularVelocityFactors.RevolutionPerMinute, 'rpm')
    RevolutionPerSecond = (AngularVelocityFactors.RevolutionPerSecond, 'rps')


@factor_table
class SolidAngleUnit(Unit):
    """Units of solid angle. Base unit is the steradian."""

    Steradian = (SolidAngleFactors.Steradian, 'sr')
    SquareDegree = (SolidAngleFactors.SquareDegree, 'deg²')
    Spat = (SolidAngleFactors.Spat, 'sp')


@factor_table
class FrequencyUnit(Unit):
    """Units of frequency. Base unit is the hertz."""

    Hertz = (FrequencyFactors.Hertz, 'Hz')
    Terahertz = (FrequencyFactors.Terahertz, 'THz')
    Gigahertz = (FrequencyFactors.Gigahertz, 'GHz')
    Megahertz = (FrequencyFactors.Megahertz, 'MHz')
    Kilohertz = (FrequencyFactors.Kilohertz, 'kHz')
    RevolutionPerMinute = (FrequencyFactors.RevolutionPerMinute, 'rpm')
    BeatPerMinute = (FrequencyFactors.BeatPerMinute, 'bpm')
    RadianPerSecond = (FrequencyFactors.RadianPerSecond, 'rad/s')
    DegreePerSecond = (FrequencyFactors.DegreePerSecond, '°/s')


# =============================================================================
# Electromagnetism, photometry, chemistry
# =============================================================================


@factor_table
class CurrentUnit(Unit):
    """Units of electric current. Base unit is the ampere."""

    Ampere = (CurrentFactors.Ampere, 'A')
    Milliampere = (CurrentFactors.Milliampere, 'mA')
    Microampere = (CurrentFactors.Microampere, 'µA')
    Nanoampere = (CurrentFactors.Nanoampere, 'nA')
    Kiloampere = (CurrentFactors.Kiloampere, 'kA')
    Statampere = (CurrentFactors.Statampere, 'statA')
    Abampere = (CurrentFactors.Abampere, 'abA')


@factor_table
class ElectricChargeUnit(Unit):
    """Units of electric charge. Base unit is the coulomb."""

    Coulomb = (ElectricChargeFactors.Coulomb, 'C')
    Millicoulomb = (ElectricChargeFactors.Millicoulomb, 'mC')
    Microcoulomb = (ElectricChargeFactors.Microcoulomb, 'µC')
    Nanocoulomb = (ElectricChargeFactors.Nanocoulomb, 'nC')
    ElementaryCharge = (ElectricChargeFactors.ElementaryCharge, 'e')
    AmpereHour = (ElectricChargeFactors.AmpereHour, 'Ah')
    MilliampereHour = (ElectricChargeFactors.MilliampereHour, 'mAh')
    Statcoulomb = (ElectricChargeFactors.Statcoulomb, 'statC')
    Abcoulomb = (ElectricChargeFactors.Abcoulomb, 'abC')


@factor_table
class LuminousIntensityUnit(Unit):
    """Units of luminous intensity. Base unit is the candela."""

    Candela = (LuminousIntensityFactors.Candela, 'cd')
    Millicandela = (LuminousIntensityFactors.Millicandela, 'mcd')
    Kilocandela = (LuminousIntensityFactors.Kilocandela, 'kcd')


@factor_table
class MolarUnit(Unit):
    """Units of amount of substance. Base unit is the mole."""

    Mole = (MolarFactors.Mole, 'mol')
    Millimole = (MolarFactors.Millimole, 'mmol')
    Micromole = (MolarFactors.Micromole, 'µmol')
    Nanomole = (MolarFactors.Nanomole, 'nmol')
    Picomole = (MolarFactors.Picomole, 'pmol')
    Kilomole = (MolarFactors.Kilomole, 'kmol')


# =============================================================================
# Temperature
# =============================================================================


@factor_table
class TemperatureDeltaUnit(Unit):
    """Units of temperature difference. Base unit is the kelvin."""

    Kelvin = (TemperatureDeltaFactors.Kelvin, 'K')
    Celsius = (TemperatureDeltaFactors.Celsius, '°C')
    Fahrenheit = (TemperatureDeltaFactors.Fahrenheit, '°F')
    Rankine = (TemperatureDeltaFactors.Rankine, '°R')


class TemperatureUnit(Unit):
    """Units of absolute temperature.

    Absolute temperature scales are affine (they have offsets), so these units have no
    multiplicative factors. Conversions are done by `Temperature.get_in`.
    """

    Kelvin = 'K'
    Celsius = '°C'
    Fahrenheit = '°F'
    Rankine = '°R'

    def __init__(self, symbol: str):  # pylint: disable=super-init-not-called
        self._symbol = symbol
        self._factors = MappingProxyType({})

    @property
    def factor_to_base(self) -> float:
        raise UnitConversionError("Temperature scales are affine and have no factor to a base unit")

    def factor_to(self, target: Unit) -> float:
        """Always raises: use `Temperature.get_in` or `Temperature.convert`."""
        raise UnitConversionError(
            "Direct multiplicative factor conversion is not supported for temperature units "
            "due to their affine nature (offsets); use Temperature.get_in() or Temperature.convert()"
        )

    @property
    def delta_unit(self) -> TemperatureDeltaUnit:
        """Temperature-difference unit with the same degree size."""
        return TemperatureDeltaUnit[self.name]


#: All unit enumerations, in the order `parse_unit` searches them.
UNIT_TYPES: Tuple[Type[Unit], ...] = (
    LengthUnit, MassUnit, TimeUnit, AreaUnit, VolumeUnit, SpeedUnit, AccelerationUnit,
    ForceUnit, DensityUnit, PressureUnit, EnergyUnit, PowerUnit, SpecificEnergyUnit,
    AngleUnit, AngularVelocityUnit, SolidAngleUnit, FrequencyUnit, CurrentUnit,
    ElectricChargeUnit, LuminousIntensityUnit, MolarUnit, TemperatureUnit, TemperatureDeltaUnit,
)

UnitAliasesType: TypeAlias = Mapping[Tuple[str, ...], Unit]

#: Additional spellings accepted by `Unit.from_alias` besides member names and symbols.
UnitAliases: UnitAliasesType = {
    ('metre', 'meter'): LengthUnit.Meter,
    ('kilometre',): LengthUnit.Kilometer,
    ('centimetre',): LengthUnit.Centimeter,
    ('millimetre',): LengthUnit.Millimeter,
    ('micron', 'um'): LengthUnit.Micrometer,
    ('inches', '"'): LengthUnit.Inch,
    ('feet', "'"): LengthUnit.Foot,
    ('nauticalmiles',): LengthUnit.NauticalMile,
    ('m2', 'sqm'): AreaUnit.SquareMeter,
    ('ft2', 'sqft'): AreaUnit.SquareFoot,
    ('acres',): AreaUnit.Acre,
    ('m3',): VolumeUnit.CubicMeter,
    ('cm3', 'cc'): VolumeUnit.CubicCentimeter,
    ('litre', 'l'): VolumeUnit.Liter,
    ('millilitre', 'ml'): VolumeUnit.Milliliter,
    ('floz', 'fl-oz', 'fluidounce'): VolumeUnit.FluidOunce,
    ('kilogramme',): MassUnit.Kilogram,
    ('gramme',): MassUnit.Gram,
    ('lbs', 'lbm'): MassUnit.Pound,
    ('grn',): MassUnit.Grain,
    ('metricton', 'ton'): MassUnit.Tonne,
    ('sec',): TimeUnit.Second,
    ('hr', 'hour'): TimeUnit.Hour,
    ('mps', 'meter/second', 'm/sec'): SpeedUnit.MeterPerSecond,
    ('kmh', 'kph', 'km/hr'): SpeedUnit.KilometerPerHour,
    ('mi/h',): SpeedUnit.MilePerHour,
    ('kt', 'knots'): SpeedUnit.Knot,
    ('fps', 'ft/sec'): SpeedUnit.FootPerSecond,
    ('m/s2', 'm/s^2', 'mps2'): AccelerationUnit.MeterPerSecondSquared,
    ('g0', 'gee', 'gravity'): AccelerationUnit.StandardGravity,
    ('ft/s2', 'ft/s^2'): AccelerationUnit.FootPerSecondSquared,
    ('lb-f', 'lbs-force'): ForceUnit.PoundForce,
    ('kg/m3',): DensityUnit.KilogramPerCubicMeter,
    ('g/m3',): DensityUnit.GramPerCubicMeter,
    ('g/cm3', 'g/cc'): DensityUnit.GramPerCubicCentimeter,
    ('g/ml',): DensityUnit.GramPerMilliliter,
    ('lb/ft3', 'pcf'): DensityUnit.PoundPerCubicFoot,
    ('lbf/in2', 'lbf/in²'): PressureUnit.Psi,
    ('mmhg',): PressureUnit.MillimeterOfMercury,
    ('"hg', 'inhg'): PressureUnit.InchOfMercury,
    ('hectopascal',): PressureUnit.Hectopascal,
    ('footpound', 'foot-pound', 'ft⋅lbf', 'ft*lbf', 'ft*lb', 'ft·lb'): EnergyUnit.FootPound,
    ('kwh', 'kw-h'): EnergyUnit.KilowattHour,
    ('ev',): EnergyUnit.Electronvolt,
    ('deg',): AngleUnit.Degree,
    ('moa',): AngleUnit.Arcminute,
    ('mil', 'mils'): AngleUnit.Milliradian,
    ('deg/s',): AngularVelocityUnit.DegreePerSecond,
    ('sqdeg', 'deg2'): SolidAngleUnit.SquareDegree,
    ('hz', 'cps'): FrequencyUnit.Hertz,
    ('amp', 'amps'): CurrentUnit.Ampere,
    ('degc', 'centigrade'): TemperatureUnit.Celsius,
    ('degf',): TemperatureUnit.Fahrenheit,
    ('degk', '°k'): TemperatureUnit.Kelvin,
    ('degr', 'rankin'): TemperatureUnit.Rankine,
}


def parse_unit(input_: str) -> Optional[Unit]:
    """Parse a unit of any dimension from a string.

    Attempts, in order:
    1. A `PreferredUnits` attribute name ('density' -> the preferred density unit)
    2. An exact, case-sensitive unit symbol in any enumeration ('PS' is metric horsepower,
       'ps' a picosecond)
    3. Each unit enumeration in `UNIT_TYPES` via `Unit.from_alias`

    Returns:
        The first matching unit, or None.

    Raises:
        TypeError: If input is not a string.

    Examples:
        >>> parse_unit('meter')
        Meter
        >>> parse_unit('g')
        Gram
        >>> parse_unit('oops') is None
        True
    """
    if not isinstance(input_, str):
        raise TypeError(f"String expected, got {type(input_)=}, {input_=}")
    text = re.sub(r"\s+", "", input_)
    if text.lower() in PreferredUnits.__dataclass_fields__:
        return getattr(PreferredUnits, text.lower())
    for unit_type in UNIT_TYPES:
        if (unit := unit_type._find_by_symbol(text)) is not None:
            return unit
    for unit_type in UNIT_TYPES:
        if (unit := unit_type.from_alias(text)) is not None:
            return unit
    return None


class PreferredUnitsMeta(type):
    """Provide representation method for static dataclasses."""

    def __repr__(cls):
        return '\n'.join(f'{field} = {getattr(cls, field)!r}'
                         for field in getattr(cls, '__dataclass_fields__'))


@dataclass
class PreferredUnits(metaclass=PreferredUnitsMeta):  # pylint: disable=too-many-instance-attributes
    """Default units used when a quantity is built or parsed from a bare number.

    `GenericQuantity.of(5)` and `parse('5', 'length')` interpret the number in the unit stored
    here for the quantity's dimension. Defaults are the SI base units, except temperature
    which defaults to Celsius.

    Examples:
        >>> PreferredUnits.length = LengthUnit.Foot
        >>> PreferredUnits.restore_defaults()
        >>> PreferredUnits.set(length='km', mass='lb')
        >>> PreferredUnits.restore_defaults()

    Note:
        Changing preferred units affects all subsequent quantity creation from bare numbers.
    """

    # Defaults
    acceleration: Unit = AccelerationUnit.MeterPerSecondSquared
    angle: Unit = AngleUnit.Radian
    angular_velocity: Unit = AngularVelocityUnit.RadianPerSecond
    area: Unit = AreaUnit.SquareMeter
    current: Unit = CurrentUnit.Ampere
    density: Unit = DensityUnit.KilogramPerCubicMeter
    electric_charge: Unit = ElectricChargeUnit.Coulomb
    energy: Unit = EnergyUnit.Joule
    force: Unit = ForceUnit.Newton
    frequency: Unit = FrequencyUnit.Hertz
    length: Unit = LengthUnit.Meter
    luminous_intensity: Unit = LuminousIntensityUnit.Candela
    mass: Unit = MassUnit.Kilogram
    molar: Unit = MolarUnit.Mole
    power: Unit = PowerUnit.Watt
    pressure: Unit = PressureUnit.Pascal
    solid_angle: Unit = SolidAngleUnit.Steradian
    specific_energy: Unit = SpecificEnergyUnit.JoulePerKilogram
    speed: Unit = SpeedUnit.MeterPerSecond
    temperature: Unit = TemperatureUnit.Celsius
    temperature_delta: Unit = TemperatureDeltaUnit.Kelvin
    time: Unit = TimeUnit.Second
    volume: Unit = VolumeUnit.CubicMeter

    @classmethod
    def restore_defaults(cls):
        """Reset all preferred units to their default values.

        Examples:
            >>> PreferredUnits.length = LengthUnit.Foot
            >>> PreferredUnits.restore_defaults()
            >>> PreferredUnits.length
            Meter
        """
        for f in fields(cls):
            if f.default is not MISSING:
                setattr(cls, f.name, f.default)

    @classmethod
    def set(cls, **kwargs: Union[Unit, str]):
        """Set preferred units from keyword arguments.

        Values may be units or (string) aliases resolved within the attribute's dimension.
        Unknown attributes, unresolvable aliases and units of the wrong dimension are
        logged as warnings and skipped.

        Examples:
            >>> PreferredUnits.set(length=LengthUnit.Foot, mass='lb', temperature='°F')
        """
        for attribute, value in kwargs.items():
            if attribute not in cls.__dataclass_fields__:
                logger.warning(f"{attribute=} not found in preferred_units")
                continue
            unit_type = type(cls.__dataclass_fields__[attribute].default)
            if isinstance(value, Unit):
                if isinstance(value, unit_type):
                    setattr(cls, attribute, value)
                else:
                    logger.warning(f"{value=} is not a {unit_type.__name__}, {attribute=} unchanged")
            elif isinstance(value, str):
                if (_unit := unit_type.from_alias(value)) is not None:
                    setattr(cls, attribute, _unit)
                else:
                    logger.warning(f"{value=} not a member of {unit_type.__name__}")
            else:
                logger.warning(f"type of {value=} have not been converted to a member of {unit_type.__name__}")


__all__ = (
    'Number',
    'counter',
    'iterator',
    'Unit',
    'factor_table',
    'parse_unit',
    'UNIT_TYPES',
    'UnitAliases',
    'PreferredUnits',
    'AccelerationUnit',
    'AngleUnit',
    'AngularVelocityUnit',
    'AreaUnit',
    'CurrentUnit',
    'DensityUnit',
    'ElectricChargeUnit',
    'EnergyUnit',
    'ForceUnit',
    'FrequencyUnit',
    'LengthUnit',
    'LuminousIntensityUnit',
    'MassUnit',
    'MolarUnit',
    'PowerUnit',
    'PressureUnit',
    'SolidAngleUnit',
    'SpecificEnergyUnit',
    'SpeedUnit',
    'TemperatureDeltaUnit',
    'TemperatureUnit',
    'TimeUnit',
    'VolumeUnit',
)
