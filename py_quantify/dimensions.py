"""Concrete physical quantities.

One [`GenericQuantity`][py_quantify.quantity.GenericQuantity] subclass per dimension. Each class
exposes its units as class attributes, so ``Length.Meter(3)`` and ``Length(3, LengthUnit.Meter)``
build the same value.

Cross-dimension factories (``Density.from_mass_volume``, ``Force.acceleration_of``, ...) encode
the physical formulas that relate dimensions. Inputs are normalised to base SI units and the
result is tagged with the result dimension's base unit. A zero divisor raises
[`InvalidArgumentError`][py_quantify.exceptions.InvalidArgumentError].

Examples:
    >>> Density.from_mass_volume(Mass.Kilogram(1000), Volume.CubicMeter(1))
    <Density: 1000.0 kg/m³ (1000.0)>
    >>> force = Force.from_mass_acceleration(Mass.Kilogram(10), Acceleration.MeterPerSecondSquared(2))
    >>> force >> Force.Newton
    20.0
    >>> Temperature.Celsius(25) - Temperature.Celsius(20)
    <TemperatureDelta: 5.0 °C (5.0)>
"""

from __future__ import annotations

import math
from typing import Final

from py_quantify.exceptions import InvalidArgumentError, UnitConversionError
from py_quantify.quantity import GenericQuantity
from py_quantify.unit import (
    AccelerationUnit, AngleUnit, AngularVelocityUnit, AreaUnit, CurrentUnit, DensityUnit,
    ElectricChargeUnit, EnergyUnit, ForceUnit, FrequencyUnit, LengthUnit, LuminousIntensityUnit,
    MassUnit, MolarUnit, PowerUnit, PressureUnit, SolidAngleUnit, SpecificEnergyUnit, SpeedUnit,
    TemperatureDeltaUnit, TemperatureUnit, TimeUnit, VolumeUnit,
)

__all__ = (
    'Acceleration',
    'Angle',
    'AngularVelocity',
    'Area',
    'Current',
    'Density',
    'ElectricCharge',
    'Energy',
    'Force',
    'Frequency',
    'Length',
    'LuminousIntensity',
    'Mass',
    'Molar',
    'Power',
    'Pressure',
    'SolidAngle',
    'SpecificEnergy',
    'Speed',
    'Temperature',
    'TemperatureDelta',
    'Time',
    'Volume',
)


def _nonzero(value: float, argument: str, quantity: GenericQuantity, message: str) -> float:
    if value == 0:
        raise InvalidArgumentError(message, argument, quantity)
    return value


class Length(GenericQuantity[LengthUnit]):
    """Length measurements. Base unit is the meter."""

    __slots__ = ()
    _unit_type = LengthUnit
    _preferred = 'length'

    # Length.* unit aliases
    Meter: Final = LengthUnit.Meter
    Kilometer: Final = LengthUnit.Kilometer
    Hectometer: Final = LengthUnit.Hectometer
    Decameter: Final = LengthUnit.Decameter
    Decimeter: Final = LengthUnit.Decimeter
    Centimeter: Final = LengthUnit.Centimeter
    Millimeter: Final = LengthUnit.Millimeter
    Micrometer: Final = LengthUnit.Micrometer
    Nanometer: Final = LengthUnit.Nanometer
    Picometer: Final = LengthUnit.Picometer
    Femtometer: Final = LengthUnit.Femtometer
    Angstrom: Final = LengthUnit.Angstrom
    Inch: Final = LengthUnit.Inch
    Foot: Final = LengthUnit.Foot
    Yard: Final = LengthUnit.Yard
    Mile: Final = LengthUnit.Mile
    NauticalMile: Final = LengthUnit.NauticalMile
    AstronomicalUnit: Final = LengthUnit.AstronomicalUnit
    LightYear: Final = LengthUnit.LightYear
    Parsec: Final = LengthUnit.Parsec


class Area(GenericQuantity[AreaUnit]):
    """Area measurements. Base unit is the square meter."""

    __slots__ = ()
    _unit_type = AreaUnit
    _preferred = 'area'

    SquareMeter: Final = AreaUnit.SquareMeter
    SquareDecimeter: Final = AreaUnit.SquareDecimeter
    SquareCentimeter: Final = AreaUnit.SquareCentimeter
    SquareMillimeter: Final = AreaUnit.SquareMillimeter
    SquareMicrometer: Final = AreaUnit.SquareMicrometer
    SquareDecameter: Final = AreaUnit.SquareDecameter
    SquareHectometer: Final = AreaUnit.SquareHectometer
    Hectare: Final = AreaUnit.Hectare
    SquareKilometer: Final = AreaUnit.SquareKilometer
    SquareMegameter: Final = AreaUnit.SquareMegameter
    SquareInch: Final = AreaUnit.SquareInch
    SquareFoot: Final = AreaUnit.SquareFoot
    SquareYard: Final = AreaUnit.SquareYard
    SquareMile: Final = AreaUnit.SquareMile
    Acre: Final = AreaUnit.Acre


class Volume(GenericQuantity[VolumeUnit]):
    """Volume measurements. Base unit is the cubic meter."""

    __slots__ = ()
    _unit_type = VolumeUnit
    _preferred = 'volume'

    CubicMeter: Final = VolumeUnit.CubicMeter
    CubicDecameter: Final = VolumeUnit.CubicDecameter
    CubicHectometer: Final = VolumeUnit.CubicHectometer
    CubicKilometer: Final = VolumeUnit.CubicKilometer
    CubicDecimeter: Final = VolumeUnit.CubicDecimeter
    CubicCentimeter: Final = VolumeUnit.CubicCentimeter
    CubicMillimeter: Final = VolumeUnit.CubicMillimeter
    Kiloliter: Final = VolumeUnit.Kiloliter
    Megaliter: Final = VolumeUnit.Megaliter
    Gigaliter: Final = VolumeUnit.Gigaliter
    Teraliter: Final = VolumeUnit.Teraliter
    Liter: Final = VolumeUnit.Liter
    Centiliter: Final = VolumeUnit.Centiliter
    Milliliter: Final = VolumeUnit.Milliliter
    Microliter: Final = VolumeUnit.Microliter
    CubicInch: Final = VolumeUnit.CubicInch
    CubicFoot: Final = VolumeUnit.CubicFoot
    CubicMile: Final = VolumeUnit.CubicMile
    Gallon: Final = VolumeUnit.Gallon
    Quart: Final = VolumeUnit.Quart
    Pint: Final = VolumeUnit.Pint
    FluidOunce: Final = VolumeUnit.FluidOunce
    Tablespoon: Final = VolumeUnit.Tablespoon
    Teaspoon: Final = VolumeUnit.Teaspoon


class Mass(GenericQuantity[MassUnit]):
    """Mass measurements. Base unit is the kilogram."""

    __slots__ = ()
    _unit_type = MassUnit
    _preferred = 'mass'

    Kilogram: Final = MassUnit.Kilogram
    Hectogram: Final = MassUnit.Hectogram
    Decagram: Final = MassUnit.Decagram
    Gram: Final = MassUnit.Gram
    Decigram: Final = MassUnit.Decigram
    Centigram: Final = MassUnit.Centigram
    Milligram: Final = MassUnit.Milligram
    Microgram: Final = MassUnit.Microgram
    Nanogram: Final = MassUnit.Nanogram
    Megagram: Final = MassUnit.Megagram
    Gigagram: Final = MassUnit.Gigagram
    Tonne: Final = MassUnit.Tonne
    Pound: Final = MassUnit.Pound
    Ounce: Final = MassUnit.Ounce
    Stone: Final = MassUnit.Stone
    Grain: Final = MassUnit.Grain
    Slug: Final = MassUnit.Slug
    ShortTon: Final = MassUnit.ShortTon
    LongTon: Final = MassUnit.LongTon
    AtomicMassUnit: Final = MassUnit.AtomicMassUnit
    Carat: Final = MassUnit.Carat


class Time(GenericQuantity[TimeUnit]):
    """Time measurements. Base unit is the second."""

    __slots__ = ()
    _unit_type = TimeUnit
    _preferred = 'time'

    Second: Final = TimeUnit.Second
    Millisecond: Final = TimeUnit.Millisecond
    Microsecond: Final = TimeUnit.Microsecond
    Nanosecond: Final = TimeUnit.Nanosecond
    Picosecond: Final = TimeUnit.Picosecond
    Minute: Final = TimeUnit.Minute
    Hour: Final = TimeUnit.Hour
    Day: Final = TimeUnit.Day
    Week: Final = TimeUnit.Week
    Month: Final = TimeUnit.Month
    Year: Final = TimeUnit.Year


class Speed(GenericQuantity[SpeedUnit]):
    """Speed measurements. Base unit is the meter per second."""

    __slots__ = ()
    _unit_type = SpeedUnit
    _preferred = 'speed'

    MeterPerSecond: Final = SpeedUnit.MeterPerSecond
    KilometerPerHour: Final = SpeedUnit.KilometerPerHour
    MilePerHour: Final = SpeedUnit.MilePerHour
    Knot: Final = SpeedUnit.Knot
    FootPerSecond: Final = SpeedUnit.FootPerSecond

    @classmethod
    def from_distance_time(cls, distance: Length, time: Time) -> Speed:
        """Average speed covering `distance` in `time`: ``v = d / t``.

        Raises:
            InvalidArgumentError: If `time` is zero.

        Examples:
            >>> Speed.from_distance_time(Length.Kilometer(1), Time.Second(100))
            <Speed: 10.0 m/s (10.0)>
        """
        seconds = _nonzero(time.get_in(TimeUnit.Second), 'time', time,
                           "Time must not be zero to compute a speed")
        return cls(distance.get_in(LengthUnit.Meter) / seconds, SpeedUnit.MeterPerSecond)

    def distance_over(self, time: Time) -> Length:
        """Distance covered at this speed during `time`: ``d = v * t``."""
        return Length(self.get_in(SpeedUnit.MeterPerSecond) * time.get_in(TimeUnit.Second), LengthUnit.Meter)


class Acceleration(GenericQuantity[AccelerationUnit]):
    """Acceleration measurements. Base unit is the meter per second squared."""

    __slots__ = ()
    _unit_type = AccelerationUnit
    _preferred = 'acceleration'

    MeterPerSecondSquared: Final = AccelerationUnit.MeterPerSecondSquared
    StandardGravity: Final = AccelerationUnit.StandardGravity
    KilometerPerHourPerSecond: Final = AccelerationUnit.KilometerPerHourPerSecond
    MilePerHourPerSecond: Final = AccelerationUnit.MilePerHourPerSecond
    KnotPerSecond: Final = AccelerationUnit.KnotPerSecond
    FootPerSecondSquared: Final = AccelerationUnit.FootPerSecondSquared
    Gal: Final = AccelerationUnit.Gal

    @classmethod
    def from_speed_time(cls, speed: Speed, time: Time) -> Acceleration:
        """Constant acceleration that gains `speed` in `time`: ``a = Δv / t``.

        Raises:
            InvalidArgumentError: If `time` is zero.
        """
        seconds = _nonzero(time.get_in(TimeUnit.Second), 'time', time,
                           "Time must not be zero to compute an acceleration")
        return cls(speed.get_in(SpeedUnit.MeterPerSecond) / seconds, AccelerationUnit.MeterPerSecondSquared)

    def speed_gained_over(self, time: Time) -> Speed:
        """Speed gained at this acceleration during `time`: ``Δv = a * t``."""
        return Speed(self.get_in(AccelerationUnit.MeterPerSecondSquared) * time.get_in(TimeUnit.Second),
                     SpeedUnit.MeterPerSecond)


class Force(GenericQuantity[ForceUnit]):
    """Force measurements. Base unit is the newton."""

    __slots__ = ()
    _unit_type = ForceUnit
    _preferred = 'force'

    Newton: Final = ForceUnit.Newton
    Kilonewton: Final = ForceUnit.Kilonewton
    Meganewton: Final = ForceUnit.Meganewton
    Millinewton: Final = ForceUnit.Millinewton
    PoundForce: Final = ForceUnit.PoundForce
    Dyne: Final = ForceUnit.Dyne
    KilogramForce: Final = ForceUnit.KilogramForce
    GramForce: Final = ForceUnit.GramForce
    Poundal: Final = ForceUnit.Poundal

    @classmethod
    def from_mass_acceleration(cls, mass: Mass, acceleration: Acceleration) -> Force:
        """Newton's second law: ``F = m * a``.

        Examples:
            >>> Force.from_mass_acceleration(Mass.Kilogram(10), Acceleration.MeterPerSecondSquared(2))
            <Force: 20.0 N (20.0)>
        """
        return cls(mass.get_in(MassUnit.Kilogram) * acceleration.get_in(AccelerationUnit.MeterPerSecondSquared),
                   ForceUnit.Newton)

    def acceleration_of(self, mass: Mass) -> Acceleration:
        """Acceleration this force gives to `mass`: ``a = F / m``.

        Raises:
            InvalidArgumentError: If `mass` is zero.
        """
        kilograms = _nonzero(mass.get_in(MassUnit.Kilogram), 'mass', mass,
                             "Mass must not be zero to compute an acceleration")
        return Acceleration(self.get_in(ForceUnit.Newton) / kilograms, AccelerationUnit.MeterPerSecondSquared)

    def mass_from(self, acceleration: Acceleration) -> Mass:
        """Mass that this force accelerates at `acceleration`: ``m = F / a``.

        Raises:
            InvalidArgumentError: If `acceleration` is zero.
        """
        mps2 = _nonzero(acceleration.get_in(AccelerationUnit.MeterPerSecondSquared), 'acceleration',
                        acceleration, "Acceleration must not be zero to compute a mass")
        return Mass(self.get_in(ForceUnit.Newton) / mps2, MassUnit.Kilogram)


class Density(GenericQuantity[DensityUnit]):
    """Density measurements. Base unit is the kilogram per cubic meter."""

    __slots__ = ()
    _unit_type = DensityUnit
    _preferred = 'density'

    KilogramPerCubicMeter: Final = DensityUnit.KilogramPerCubicMeter
    GramPerCubicMeter: Final = DensityUnit.GramPerCubicMeter
    GramPerCubicCentimeter: Final = DensityUnit.GramPerCubicCentimeter
    GramPerMilliliter: Final = DensityUnit.GramPerMilliliter
    KilogramPerLiter: Final = DensityUnit.KilogramPerLiter
    PoundPerCubicFoot: Final = DensityUnit.PoundPerCubicFoot

    @classmethod
    def from_mass_volume(cls, mass: Mass, volume: Volume) -> Density:
        """Density of `mass` filling `volume`: ``ρ = m / V``.

        Raises:
            InvalidArgumentError: If `volume` is zero.
        """
        cubic_meters = _nonzero(volume.get_in(VolumeUnit.CubicMeter), 'volume', volume,
                                "Volume must not be zero to compute a density")
        return cls(mass.get_in(MassUnit.Kilogram) / cubic_meters, DensityUnit.KilogramPerCubicMeter)

    def mass_of(self, volume: Volume) -> Mass:
        """Mass of `volume` of this material: ``m = ρ * V``.

        Examples:
            >>> Density.GramPerCubicCentimeter(1).mass_of(Volume.Liter(2))
            <Mass: 2.0 kg (2.0)>
        """
        return Mass(self.get_in(DensityUnit.KilogramPerCubicMeter) * volume.get_in(VolumeUnit.CubicMeter),
                    MassUnit.Kilogram)


class Pressure(GenericQuantity[PressureUnit]):
    """Pressure measurements. Base unit is the pascal."""

    __slots__ = ()
    _unit_type = PressureUnit
    _preferred = 'pressure'

    Pascal: Final = PressureUnit.Pascal
    Atmosphere: Final = PressureUnit.Atmosphere
    Bar: Final = PressureUnit.Bar
    Psi: Final = PressureUnit.Psi
    Torr: Final = PressureUnit.Torr
    MillimeterOfMercury: Final = PressureUnit.MillimeterOfMercury
    InchOfMercury: Final = PressureUnit.InchOfMercury
    Megapascal: Final = PressureUnit.Megapascal
    Kilopascal: Final = PressureUnit.Kilopascal
    Hectopascal: Final = PressureUnit.Hectopascal
    Millibar: Final = PressureUnit.Millibar
    CentimeterOfWater: Final = PressureUnit.CentimeterOfWater
    InchOfWater: Final = PressureUnit.InchOfWater


class Energy(GenericQuantity[EnergyUnit]):
    """Energy measurements. Base unit is the joule."""

    __slots__ = ()
    _unit_type = EnergyUnit
    _preferred = 'energy'

    Joule: Final = EnergyUnit.Joule
    Megajoule: Final = EnergyUnit.Megajoule
    Kilojoule: Final = EnergyUnit.Kilojoule
    Calorie: Final = EnergyUnit.Calorie
    CalorieIT: Final = EnergyUnit.CalorieIT
    Kilocalorie: Final = EnergyUnit.Kilocalorie
    KilocalorieIT: Final = EnergyUnit.KilocalorieIT
    KilowattHour: Final = EnergyUnit.KilowattHour
    Electronvolt: Final = EnergyUnit.Electronvolt
    Btu: Final = EnergyUnit.Btu
    FootPound: Final = EnergyUnit.FootPound


class Power(GenericQuantity[PowerUnit]):
    """Power measurements. Base unit is the watt."""

    __slots__ = ()
    _unit_type = PowerUnit
    _preferred = 'power'

    Watt: Final = PowerUnit.Watt
    Milliwatt: Final = PowerUnit.Milliwatt
    Kilowatt: Final = PowerUnit.Kilowatt
    Megawatt: Final = PowerUnit.Megawatt
    Gigawatt: Final = PowerUnit.Gigawatt
    Horsepower: Final = PowerUnit.Horsepower
    MetricHorsepower: Final = PowerUnit.MetricHorsepower
    BtuPerHour: Final = PowerUnit.BtuPerHour
    ErgPerSecond: Final = PowerUnit.ErgPerSecond


class SpecificEnergy(GenericQuantity[SpecificEnergyUnit]):
    """Specific energy (energy per unit mass). Base unit is the joule per kilogram."""

    __slots__ = ()
    _unit_type = SpecificEnergyUnit
    _preferred = 'specific_energy'

    JoulePerKilogram: Final = SpecificEnergyUnit.JoulePerKilogram
    KilojoulePerKilogram: Final = SpecificEnergyUnit.KilojoulePerKilogram
    WattHourPerKilogram: Final = SpecificEnergyUnit.WattHourPerKilogram
    KilowattHourPerKilogram: Final = SpecificEnergyUnit.KilowattHourPerKilogram

    @classmethod
    def from_energy_mass(cls, energy: Energy, mass: Mass) -> SpecificEnergy:
        """Energy per unit mass: ``e = E / m``.

        Raises:
            InvalidArgumentError: If `mass` is zero.
        """
        kilograms = _nonzero(mass.get_in(MassUnit.Kilogram), 'mass', mass,
                             "Mass must not be zero to compute a specific energy")
        return cls(energy.get_in(EnergyUnit.Joule) / kilograms, SpecificEnergyUnit.JoulePerKilogram)

    def energy_in(self, mass: Mass) -> Energy:
        """Total energy stored in `mass`: ``E = e * m``."""
        return Energy(self.get_in(SpecificEnergyUnit.JoulePerKilogram) * mass.get_in(MassUnit.Kilogram),
                      EnergyUnit.Joule)


class Angle(GenericQuantity[AngleUnit]):
    """Plane angle measurements. Base unit is the radian.

    Angles are not normalised: ``Angle.Degree(370)`` stays 370°.
    """

    __slots__ = ()
    _unit_type = AngleUnit
    _preferred = 'angle'

    Radian: Final = AngleUnit.Radian
    Degree: Final = AngleUnit.Degree
    Gradian: Final = AngleUnit.Gradian
    Revolution: Final = AngleUnit.Revolution
    Arcminute: Final = AngleUnit.Arcminute
    Arcsecond: Final = AngleUnit.Arcsecond
    Milliradian: Final = AngleUnit.Milliradian


class AngularVelocity(GenericQuantity[AngularVelocityUnit]):
    """Angular velocity measurements. Base unit is the radian per second."""

    __slots__ = ()
    _unit_type = AngularVelocityUnit
    _preferred = 'angular_velocity'

    RadianPerSecond: Final = AngularVelocityUnit.RadianPerSecond
    DegreePerSecond: Final = AngularVelocityUnit.DegreePerSecond
    RevolutionPerMinute: Final = AngularVelocityUnit.RevolutionPerMinute
    RevolutionPerSecond: Final = AngularVelocityUnit.RevolutionPerSecond

    def total_angle_over(self, time: Time) -> Angle:
        """Angle swept at this angular velocity during `time`: ``θ = ω * t``."""
        return Angle(self.get_in(AngularVelocityUnit.RadianPerSecond) * time.get_in(TimeUnit.Second),
                     AngleUnit.Radian)

    def as_frequency(self) -> Frequency:
        """The same rate as a `Frequency`, keeping the magnitude.

        Revolutions per second become hertz; the other units have a frequency twin.

        Examples:
            >>> AngularVelocity.RevolutionPerMinute(3000).as_frequency() >> Frequency.Hertz
            50.0
        """
        return Frequency(self._value, _ANGULAR_VELOCITY_TO_FREQUENCY[self._unit])


class SolidAngle(GenericQuantity[SolidAngleUnit]):
    """Solid angle measurements. Base unit is the steradian."""

    __slots__ = ()
    _unit_type = SolidAngleUnit
    _preferred = 'solid_angle'

    Steradian: Final = SolidAngleUnit.Steradian
    SquareDegree: Final = SolidAngleUnit.SquareDegree
    Spat: Final = SolidAngleUnit.Spat


class Frequency(GenericQuantity[FrequencyUnit]):
    """Frequency measurements. Base unit is the hertz."""

    __slots__ = ()
    _unit_type = FrequencyUnit
    _preferred = 'frequency'

    Hertz: Final = FrequencyUnit.Hertz
    Terahertz: Final = FrequencyUnit.Terahertz
    Gigahertz: Final = FrequencyUnit.Gigahertz
    Megahertz: Final = FrequencyUnit.Megahertz
    Kilohertz: Final = FrequencyUnit.Kilohertz
    RevolutionPerMinute: Final = FrequencyUnit.RevolutionPerMinute
    BeatPerMinute: Final = FrequencyUnit.BeatPerMinute
    RadianPerSecond: Final = FrequencyUnit.RadianPerSecond
    DegreePerSecond: Final = FrequencyUnit.DegreePerSecond

    @classmethod
    def from_period(cls, time: Time) -> Frequency:
        """Frequency of an event repeating every `time`: ``f = 1 / T``.

        Raises:
            InvalidArgumentError: If `time` is zero.

        Examples:
            >>> Frequency.from_period(Time.Millisecond(20))
            <Frequency: 50.0 Hz (50.0)>
        """
        seconds = _nonzero(time.get_in(TimeUnit.Second), 'time', time,
                           "Period must not be zero to compute a frequency")
        return cls(1 / seconds, FrequencyUnit.Hertz)

    @property
    def period(self) -> Time:
        """Duration of one cycle: ``T = 1 / f``.

        Raises:
            ZeroDivisionError: If the frequency is zero.
        """
        hertz = self.get_in(FrequencyUnit.Hertz)
        if hertz == 0:
            raise ZeroDivisionError("Frequency is zero, its period is infinite")
        return Time(1 / hertz, TimeUnit.Second)

    def as_angular_velocity(self) -> AngularVelocity:
        """The same rate as an `AngularVelocity`, keeping the magnitude.

        Only rotational units convert: rad/s, °/s, rpm, and hertz read as revolutions per second.

        Raises:
            UnitConversionError: For non-rotational units such as bpm or kHz.
        """
        try:
            unit = _FREQUENCY_TO_ANGULAR_VELOCITY[self._unit]
        except KeyError:
            raise UnitConversionError(
                f"Cannot convert a Frequency in {self._unit.symbol} to an AngularVelocity; "
                f"only rotational units (rpm, rad/s, °/s, Hz as rps) are supported"
            ) from None
        return AngularVelocity(self._value, unit)


_ANGULAR_VELOCITY_TO_FREQUENCY: Final = {
    AngularVelocityUnit.RadianPerSecond: FrequencyUnit.RadianPerSecond,
    AngularVelocityUnit.DegreePerSecond: FrequencyUnit.DegreePerSecond,
    AngularVelocityUnit.RevolutionPerMinute: FrequencyUnit.RevolutionPerMinute,
    AngularVelocityUnit.RevolutionPerSecond: FrequencyUnit.Hertz,
}
_FREQUENCY_TO_ANGULAR_VELOCITY: Final = {v: k for k, v in _ANGULAR_VELOCITY_TO_FREQUENCY.items()}


class Current(GenericQuantity[CurrentUnit]):
    """Electric current measurements. Base unit is the ampere."""

    __slots__ = ()
    _unit_type = CurrentUnit
    _preferred = 'current'

    Ampere: Final = CurrentUnit.Ampere
    Milliampere: Final = CurrentUnit.Milliampere
    Microampere: Final = CurrentUnit.Microampere
    Nanoampere: Final = CurrentUnit.Nanoampere
    Kiloampere: Final = CurrentUnit.Kiloampere
    Statampere: Final = CurrentUnit.Statampere
    Abampere: Final = CurrentUnit.Abampere


class ElectricCharge(GenericQuantity[ElectricChargeUnit]):
    """Electric charge measurements. Base unit is the coulomb."""

    __slots__ = ()
    _unit_type = ElectricChargeUnit
    _preferred = 'electric_charge'

    Coulomb: Final = ElectricChargeUnit.Coulomb
    Millicoulomb: Final = ElectricChargeUnit.Millicoulomb
    Microcoulomb: Final = ElectricChargeUnit.Microcoulomb
    Nanocoulomb: Final = ElectricChargeUnit.Nanocoulomb
    ElementaryCharge: Final = ElectricChargeUnit.ElementaryCharge
    AmpereHour: Final = ElectricChargeUnit.AmpereHour
    MilliampereHour: Final = ElectricChargeUnit.MilliampereHour
    Statcoulomb: Final = ElectricChargeUnit.Statcoulomb
    Abcoulomb: Final = ElectricChargeUnit.Abcoulomb

    @classmethod
    def from_current_time(cls, current: Current, time: Time) -> ElectricCharge:
        """Charge moved by a steady `current` during `time`: ``Q = I * t``.

        Examples:
            >>> ElectricCharge.from_current_time(Current.Ampere(2), Time.Hour(1)) >> ElectricCharge.AmpereHour
            2.0
        """
        return cls(current.get_in(CurrentUnit.Ampere) * time.get_in(TimeUnit.Second), ElectricChargeUnit.Coulomb)

    def current_over(self, time: Time) -> Current:
        """Steady current that moves this charge in `time`: ``I = Q / t``.

        Raises:
            InvalidArgumentError: If `time` is zero.
        """
        seconds = _nonzero(time.get_in(TimeUnit.Second), 'time', time,
                           "Time must not be zero to compute a current")
        return Current(self.get_in(ElectricChargeUnit.Coulomb) / seconds, CurrentUnit.Ampere)

    def time_for(self, current: Current) -> Time:
        """Time a steady `current` needs to move this charge: ``t = Q / I``.

        Raises:
            InvalidArgumentError: If `current` is zero.
        """
        amperes = _nonzero(current.get_in(CurrentUnit.Ampere), 'current', current,
                           "Current must not be zero to compute a time")
        return Time(self.get_in(ElectricChargeUnit.Coulomb) / amperes, TimeUnit.Second)


class LuminousIntensity(GenericQuantity[LuminousIntensityUnit]):
    """Luminous intensity measurements. Base unit is the candela."""

    __slots__ = ()
    _unit_type = LuminousIntensityUnit
    _preferred = 'luminous_intensity'

    Candela: Final = LuminousIntensityUnit.Candela
    Millicandela: Final = LuminousIntensityUnit.Millicandela
    Kilocandela: Final = LuminousIntensityUnit.Kilocandela


class Molar(GenericQuantity[MolarUnit]):
    """Amount of substance. Base unit is the mole."""

    __slots__ = ()
    _unit_type = MolarUnit
    _preferred = 'molar'

    Mole: Final = MolarUnit.Mole
    Millimole: Final = MolarUnit.Millimole
    Micromole: Final = MolarUnit.Micromole
    Nanomole: Final = MolarUnit.Nanomole
    Picomole: Final = MolarUnit.Picomole
    Kilomole: Final = MolarUnit.Kilomole


class TemperatureDelta(GenericQuantity[TemperatureDeltaUnit]):
    """Temperature difference. Base unit is the kelvin.

    A kelvin and a degree Celsius are the same size of step, as are a degree Fahrenheit
    and a degree Rankine, so differences convert by plain factors.
    """

    __slots__ = ()
    _unit_type = TemperatureDeltaUnit
    _preferred = 'temperature_delta'

    Kelvin: Final = TemperatureDeltaUnit.Kelvin
    Celsius: Final = TemperatureDeltaUnit.Celsius
    Fahrenheit: Final = TemperatureDeltaUnit.Fahrenheit
    Rankine: Final = TemperatureDeltaUnit.Rankine

    def add_to(self, temperature: Temperature) -> Temperature:
        """Shift `temperature` by this difference, keeping the temperature's unit."""
        return temperature + self


class Temperature(GenericQuantity[TemperatureUnit]):
    """Absolute temperature. Base unit is the kelvin.

    Temperature scales are affine, so conversions use offsets instead of factors.
    Only differences are additive: subtracting two temperatures gives a
    `TemperatureDelta`, and a delta can be added to or subtracted from a temperature.
    Multiplying by a scalar, adding two temperatures and negation are not supported.
    Dividing two temperatures gives their ratio in the left operand's scale.
    """

    __slots__ = ()
    _unit_type = TemperatureUnit
    _preferred = 'temperature'

    KELVIN_OFFSET: Final[float] = 273.15
    FAHRENHEIT_SCALE: Final[float] = 1.8
    FAHRENHEIT_OFFSET: Final[float] = 32.0

    # Temperature.* unit aliases
    Kelvin: Final = TemperatureUnit.Kelvin
    Celsius: Final = TemperatureUnit.Celsius
    Fahrenheit: Final = TemperatureUnit.Fahrenheit
    Rankine: Final = TemperatureUnit.Rankine

    @classmethod
    def _to_celsius(cls, value: float, unit: TemperatureUnit) -> float:
        if unit is TemperatureUnit.Celsius:
            return value
        if unit is TemperatureUnit.Kelvin:
            return value - cls.KELVIN_OFFSET
        if unit is TemperatureUnit.Fahrenheit:
            return (value - cls.FAHRENHEIT_OFFSET) / cls.FAHRENHEIT_SCALE
        return value / cls.FAHRENHEIT_SCALE - cls.KELVIN_OFFSET  # Rankine

    @classmethod
    def _from_celsius(cls, celsius: float, unit: TemperatureUnit) -> float:
        if unit is TemperatureUnit.Celsius:
            return celsius
        if unit is TemperatureUnit.Kelvin:
            return celsius + cls.KELVIN_OFFSET
        if unit is TemperatureUnit.Fahrenheit:
            return celsius * cls.FAHRENHEIT_SCALE + cls.FAHRENHEIT_OFFSET
        return (celsius + cls.KELVIN_OFFSET) * cls.FAHRENHEIT_SCALE  # Rankine

    def get_in(self, unit: TemperatureUnit) -> float:
        """Temperature expressed in `unit`, applying the scale offsets.

        Examples:
            >>> Temperature.Celsius(20).get_in(Temperature.Fahrenheit)
            68.0
        """
        if unit is self._unit:
            return self._value
        self._validate_unit_type(unit)
        return self._from_celsius(self._to_celsius(self._value, self._unit), unit)

    get_value = get_in
    __rshift__ = get_in

    def __add__(self, other: object):  # type: ignore[override]
        """Shift by a `TemperatureDelta`; result in this temperature's unit."""
        if isinstance(other, TemperatureDelta):
            return Temperature(self._value + other.get_in(self._unit.delta_unit), self._unit)
        if isinstance(other, Temperature):
            raise TypeError("Temperature does not support adding two temperatures, add a TemperatureDelta")
        return NotImplemented

    def __radd__(self, other: object):
        """`TemperatureDelta + Temperature`."""
        if isinstance(other, TemperatureDelta):
            return self.__add__(other)
        return NotImplemented

    def __sub__(self, other: object):  # type: ignore[override]
        """Temperature difference, or shift by a negative `TemperatureDelta`.

        Returns:
            - Temperature - Temperature: `TemperatureDelta` in the delta unit matching this scale.
            - Temperature - TemperatureDelta: `Temperature` in this unit.
        """
        delta_unit = self._unit.delta_unit
        if isinstance(other, Temperature):
            return TemperatureDelta(self._value - other.get_in(self._unit), delta_unit)
        if isinstance(other, TemperatureDelta):
            return Temperature(self._value - other.get_in(delta_unit), self._unit)
        return NotImplemented

    def __mul__(self, other: object):  # type: ignore[override]
        """Disallow multiplication for Temperature."""
        raise TypeError("Temperature does not support multiplication")

    def __rmul__(self, other: object):  # type: ignore[override]
        """Disallow multiplication for Temperature."""
        raise TypeError("Temperature does not support multiplication")

    def __truediv__(self, other: object):  # type: ignore[override]
        """Ratio of two temperatures in this temperature's scale.

        Raises:
            InvalidArgumentError: If `other` is zero in this scale and this temperature is not.
            ZeroDivisionError: If `other` is the number zero.
            TypeError: If `other` is any other number or a non-temperature object.
        """
        if isinstance(other, Temperature):
            divisor = other.get_in(self._unit)
            if divisor == 0:
                if self._value == 0:
                    return math.nan
                raise InvalidArgumentError("Cannot divide a non-zero temperature by a zero temperature",
                                           'other', other)
            return self._value / divisor
        if isinstance(other, (int, float)):
            if other == 0:
                raise ZeroDivisionError("Temperature division by zero")
            raise TypeError("Temperature does not support division by a scalar")
        raise TypeError(f"Temperature does not support division by {type(other).__name__}")

    def __neg__(self):  # type: ignore[override]
        """Disallow negation for Temperature."""
        raise TypeError("Temperature does not support negation")
