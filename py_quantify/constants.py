"""Physical, astronomical and engineering constants.

Dimensioned constants are pre-built quantities; constants whose dimension has no quantity type
here (e.g. J/K, m³/(kg·s²)) are plain floats in SI units with the unit noted beside them.
The helper functions at the end combine these constants into common formulas.

Constant Categories:
    - Physical constants: CODATA 2018 fundamental constants and particle properties
    - Astronomical constants: IAU nominal values for the Sun, planets and cosmology
    - Engineering constants: reference conditions and typical material properties

References:
    - CODATA: https://physics.nist.gov/cuu/Constants/
    - IAU 2015 Resolution B3 (nominal solar and planetary values)
"""

import math

from typing_extensions import Final

from py_quantify.dimensions import (
    Acceleration, Area, Density, ElectricCharge, Energy, Force, Frequency, Length, Mass, Power,
    Pressure, Speed, Temperature, TemperatureDelta, Time,
)
from py_quantify.exceptions import InvalidArgumentError
from py_quantify.unit import (
    AccelerationUnit, AreaUnit, DensityUnit, ElectricChargeUnit, EnergyUnit, ForceUnit, FrequencyUnit,
    LengthUnit, MassUnit, PowerUnit, PressureUnit, SpeedUnit, TemperatureDeltaUnit, TemperatureUnit,
    TimeUnit,
)

# =============================================================================
# Physical Constants
# =============================================================================

SPEED_OF_LIGHT: Final[Speed] = Speed(299792458, SpeedUnit.MeterPerSecond)
"""Speed of light in vacuum (exact)"""

PLANCK_CONSTANT: Final[float] = 6.62607015e-34  # J·s
REDUCED_PLANCK_CONSTANT: Final[float] = 1.054571817e-34  # J·s

ELEMENTARY_CHARGE: Final[ElectricCharge] = ElectricCharge(1.602176634e-19, ElectricChargeUnit.Coulomb)
"""Elementary charge (exact)"""

AVOGADRO_CONSTANT: Final[float] = 6.02214076e23  # mol⁻¹
BOLTZMANN_CONSTANT: Final[float] = 1.380649e-23  # J/K
GAS_CONSTANT: Final[float] = 8.314462618  # J/(mol·K)
FARADAY_CONSTANT: Final[float] = 96485.33212  # C/mol
GRAVITATIONAL_CONSTANT: Final[float] = 6.67430e-11  # m³/(kg·s²)
FINE_STRUCTURE_CONSTANT: Final[float] = 7.2973525693e-3
VACUUM_PERMEABILITY: Final[float] = 4.0e-7 * math.pi  # H/m
VACUUM_PERMITTIVITY: Final[float] = 8.8541878128e-12  # F/m
BOHR_MAGNETON: Final[float] = 9.2740100783e-24  # J/T
NUCLEAR_MAGNETON: Final[float] = 5.0507837461e-27  # J/T

ELECTRON_MASS: Final[Mass] = Mass(9.1093837015e-31, MassUnit.Kilogram)
PROTON_MASS: Final[Mass] = Mass(1.67262192369e-27, MassUnit.Kilogram)
NEUTRON_MASS: Final[Mass] = Mass(1.67492749804e-27, MassUnit.Kilogram)
DEUTERON_MASS: Final[Mass] = Mass(3.3435837724e-27, MassUnit.Kilogram)
ALPHA_PARTICLE_MASS: Final[Mass] = Mass(6.6446573357e-27, MassUnit.Kilogram)
ATOMIC_MASS_CONSTANT: Final[Mass] = Mass(1.66053906660e-27, MassUnit.Kilogram)

ELECTRON_CHARGE_TO_MASS_RATIO: Final[float] = 1.75882001076e11  # C/kg
PROTON_CHARGE_TO_MASS_RATIO: Final[float] = 9.5788331560e7  # C/kg

CLASSICAL_ELECTRON_RADIUS: Final[Length] = Length(2.8179403262e-15, LengthUnit.Meter)
BOHR_RADIUS: Final[Length] = Length(5.29177210903e-11, LengthUnit.Meter)
ELECTRON_COMPTON_WAVELENGTH: Final[Length] = Length(2.42631023867e-12, LengthUnit.Meter)

ELECTRON_VOLT: Final[Energy] = Energy(1.602176634e-19, EnergyUnit.Joule)
RYDBERG_ENERGY: Final[Energy] = Energy(2.1798723611035e-18, EnergyUnit.Joule)
ELECTRON_REST_ENERGY: Final[Energy] = Energy(8.1871057769e-14, EnergyUnit.Joule)
PROTON_REST_ENERGY: Final[Energy] = Energy(1.50327759787e-10, EnergyUnit.Joule)

STEFAN_BOLTZMANN_CONSTANT: Final[float] = 5.670374419e-8  # W/(m²·K⁴)
WIEN_DISPLACEMENT_CONSTANT: Final[float] = 2.897771955e-3  # m·K
FIRST_RADIATION_CONSTANT: Final[float] = 3.741771852e-16  # W·m²
SECOND_RADIATION_CONSTANT: Final[float] = 1.438776877e-2  # m·K

# =============================================================================
# Astronomical Constants
# =============================================================================

ASTRONOMICAL_UNIT: Final[Length] = Length(149597870700, LengthUnit.Meter)
LIGHT_YEAR: Final[Length] = Length(1, LengthUnit.LightYear)
PARSEC: Final[Length] = Length(1, LengthUnit.Parsec)

SOLAR_MASS: Final[Mass] = Mass(1.98847e30, MassUnit.Kilogram)
SOLAR_RADIUS: Final[Length] = Length(695700000, LengthUnit.Meter)
SOLAR_LUMINOSITY: Final[Power] = Power(3.828e26, PowerUnit.Watt)
SOLAR_EFFECTIVE_TEMPERATURE: Final[Temperature] = Temperature(5778, TemperatureUnit.Kelvin)
SOLAR_CONSTANT: Final[float] = 1361.0  # W/m²

EARTH_MASS: Final[Mass] = Mass(5.9722e24, MassUnit.Kilogram)
EARTH_RADIUS: Final[Length] = Length(6378140, LengthUnit.Meter)
EARTH_POLAR_RADIUS: Final[Length] = Length(6356750, LengthUnit.Meter)
MOON_MASS: Final[Mass] = Mass(7.342e22, MassUnit.Kilogram)
MOON_RADIUS: Final[Length] = Length(1737000, LengthUnit.Meter)
EARTH_MOON_DISTANCE: Final[Length] = Length(384400000, LengthUnit.Meter)

MERCURY_MASS: Final[Mass] = Mass(3.301e23, MassUnit.Kilogram)
MERCURY_RADIUS: Final[Length] = Length(2439700, LengthUnit.Meter)
VENUS_MASS: Final[Mass] = Mass(4.867e24, MassUnit.Kilogram)
VENUS_RADIUS: Final[Length] = Length(6051800, LengthUnit.Meter)
MARS_MASS: Final[Mass] = Mass(6.39e23, MassUnit.Kilogram)
MARS_RADIUS: Final[Length] = Length(3389500, LengthUnit.Meter)
JUPITER_MASS: Final[Mass] = Mass(1.898e27, MassUnit.Kilogram)
JUPITER_RADIUS: Final[Length] = Length(71492000, LengthUnit.Meter)
SATURN_MASS: Final[Mass] = Mass(5.683e26, MassUnit.Kilogram)
SATURN_RADIUS: Final[Length] = Length(60268000, LengthUnit.Meter)
URANUS_MASS: Final[Mass] = Mass(8.681e25, MassUnit.Kilogram)
URANUS_RADIUS: Final[Length] = Length(25559000, LengthUnit.Meter)
NEPTUNE_MASS: Final[Mass] = Mass(1.024e26, MassUnit.Kilogram)
NEPTUNE_RADIUS: Final[Length] = Length(24764000, LengthUnit.Meter)

MILKY_WAY_MASS: Final[Mass] = Mass(2.98e42, MassUnit.Kilogram)
GALACTIC_CENTER_DISTANCE: Final[Length] = Length(2.615e20, LengthUnit.Meter)
HUBBLE_CONSTANT: Final[Frequency] = Frequency(2.18e-18, FrequencyUnit.Hertz)
"""Hubble constant, about 67.4 km/s/Mpc"""
CRITICAL_DENSITY: Final[Density] = Density(9.47e-27, DensityUnit.KilogramPerCubicMeter)
OBSERVABLE_UNIVERSE_RADIUS: Final[Length] = Length(4.40e26, LengthUnit.Meter)
AGE_OF_UNIVERSE: Final[Time] = Time(4.35e17, TimeUnit.Second)
CMB_TEMPERATURE: Final[Temperature] = Temperature(2.72548, TemperatureUnit.Kelvin)

CHANDRASEKHAR_LIMIT: Final[Mass] = Mass(2.785e30, MassUnit.Kilogram)
PLANCK_MASS: Final[Mass] = Mass(2.176434e-8, MassUnit.Kilogram)
PLANCK_LENGTH: Final[Length] = Length(1.616255e-35, LengthUnit.Meter)
PLANCK_TIME: Final[Time] = Time(5.391247e-44, TimeUnit.Second)

STANDARD_GRAVITY: Final[Acceleration] = Acceleration(1, AccelerationUnit.StandardGravity)
SIDEREAL_DAY: Final[Time] = Time(86164.0905, TimeUnit.Second)
SIDEREAL_YEAR: Final[Time] = Time(31558150, TimeUnit.Second)
EARTH_ORBITAL_VELOCITY: Final[Speed] = Speed(29780, SpeedUnit.MeterPerSecond)
EARTH_ESCAPE_VELOCITY: Final[Speed] = Speed(11190, SpeedUnit.MeterPerSecond)
GEOSTATIONARY_ORBIT_RADIUS: Final[Length] = Length(42164000, LengthUnit.Meter)

# =============================================================================
# Engineering Constants
# =============================================================================

STANDARD_TEMPERATURE: Final[Temperature] = Temperature(273.15, TemperatureUnit.Kelvin)
"""IUPAC standard temperature (0 °C)"""
STANDARD_PRESSURE: Final[Pressure] = Pressure(100000, PressureUnit.Pascal)
"""IUPAC standard pressure (1 bar)"""
STANDARD_ATMOSPHERE: Final[Pressure] = Pressure(1, PressureUnit.Atmosphere)
NORMAL_TEMPERATURE: Final[Temperature] = Temperature(293.15, TemperatureUnit.Kelvin)
ROOM_TEMPERATURE: Final[Temperature] = Temperature(295.15, TemperatureUnit.Kelvin)

WATER_DENSITY_MAX: Final[Density] = Density(999.97, DensityUnit.KilogramPerCubicMeter)
"""Density of water at 4 °C"""
AIR_DENSITY_STP: Final[Density] = Density(1.225, DensityUnit.KilogramPerCubicMeter)
"""ISA sea-level air density"""

SOUND_SPEED_AIR_20C: Final[Speed] = Speed(343.2, SpeedUnit.MeterPerSecond)
SOUND_SPEED_WATER_25C: Final[Speed] = Speed(1497, SpeedUnit.MeterPerSecond)

WATER_VISCOSITY_20C: Final[float] = 1.002e-3  # Pa·s
AIR_VISCOSITY_20C: Final[float] = 1.81e-5  # Pa·s
COPPER_THERMAL_CONDUCTIVITY: Final[float] = 401.0  # W/(m·K)
WATER_SPECIFIC_HEAT: Final[float] = 4184.0  # J/(kg·K)
WATER_LATENT_HEAT_VAPORIZATION: Final[float] = 2.26e6  # J/kg
WATER_LATENT_HEAT_FUSION: Final[float] = 3.34e5  # J/kg
COPPER_RESISTIVITY: Final[float] = 1.68e-8  # Ω·m

STEEL_YOUNGS_MODULUS: Final[Pressure] = Pressure(200e9, PressureUnit.Pascal)
ALUMINUM_YOUNGS_MODULUS: Final[Pressure] = Pressure(70e9, PressureUnit.Pascal)
CONCRETE_YOUNGS_MODULUS: Final[Pressure] = Pressure(30e9, PressureUnit.Pascal)
STEEL_TENSILE_STRENGTH: Final[Pressure] = Pressure(400, PressureUnit.Megapascal)
STEEL_YIELD_STRENGTH: Final[Pressure] = Pressure(250, PressureUnit.Megapascal)
STEEL_POISSONS_RATIO: Final[float] = 0.29
ALUMINUM_POISSONS_RATIO: Final[float] = 0.33
CONCRETE_POISSONS_RATIO: Final[float] = 0.20
STEEL_THERMAL_EXPANSION: Final[float] = 1.2e-5  # K⁻¹

METHANE_HEATING_VALUE: Final[float] = 5.0e7  # J/kg
GASOLINE_AIR_FUEL_RATIO: Final[float] = 14.7
NUCLEAR_BINDING_ENERGY_PER_NUCLEON: Final[Energy] = Energy(1.28e-12, EnergyUnit.Joule)
"""Typical binding energy per nucleon, about 8 MeV (1.28e-12 J)"""

WATER_FREEZING_POINT: Final[Temperature] = Temperature(0, TemperatureUnit.Celsius)
WATER_BOILING_POINT: Final[Temperature] = Temperature(100, TemperatureUnit.Celsius)
BODY_TEMPERATURE: Final[Temperature] = Temperature(37, TemperatureUnit.Celsius)


# =============================================================================
# Formulas
# =============================================================================

def light_speed_distance(time: Time) -> Length:
    """Distance light travels in vacuum during `time`."""
    return SPEED_OF_LIGHT.distance_over(time)


def mass_energy_equivalence(mass: Mass) -> Energy:
    """Rest energy of `mass`: ``E = m c²``."""
    c = SPEED_OF_LIGHT.get_in(SpeedUnit.MeterPerSecond)
    return Energy(mass.get_in(MassUnit.Kilogram) * c * c, EnergyUnit.Joule)


def thermal_energy(temperature: Temperature) -> Energy:
    """Characteristic thermal energy at `temperature`: ``E = k T``."""
    return Energy(BOLTZMANN_CONSTANT * temperature.get_in(TemperatureUnit.Kelvin), EnergyUnit.Joule)


def gravitational_force(mass1: Mass, mass2: Mass, distance: Length) -> Force:
    """Newtonian attraction between two masses: ``F = G m₁ m₂ / r²``.

    Raises:
        InvalidArgumentError: If `distance` is zero.
    """
    r = distance.get_in(LengthUnit.Meter)
    if r == 0:
        raise InvalidArgumentError("Distance must not be zero to compute a gravitational force",
                                   'distance', distance)
    return Force(GRAVITATIONAL_CONSTANT * mass1.get_in(MassUnit.Kilogram) * mass2.get_in(MassUnit.Kilogram)
                 / (r * r), ForceUnit.Newton)


def photon_energy(wavelength: Length) -> Energy:
    """Energy of a photon of `wavelength`: ``E = h c / λ``.

    Raises:
        InvalidArgumentError: If `wavelength` is zero.
    """
    lambda_m = wavelength.get_in(LengthUnit.Meter)
    if lambda_m == 0:
        raise InvalidArgumentError("Wavelength must not be zero to compute a photon energy",
                                   'wavelength', wavelength)
    return Energy(PLANCK_CONSTANT * SPEED_OF_LIGHT.get_in(SpeedUnit.MeterPerSecond) / lambda_m, EnergyUnit.Joule)


def de_broglie_wavelength(mass: Mass, speed: Speed) -> Length:
    """Matter wavelength of a particle: ``λ = h / (m v)``.

    Raises:
        InvalidArgumentError: If the momentum is zero.
    """
    momentum = mass.get_in(MassUnit.Kilogram) * speed.get_in(SpeedUnit.MeterPerSecond)
    if momentum == 0:
        raise InvalidArgumentError("Cannot calculate de Broglie wavelength for a particle with zero momentum",
                                   'speed', speed)
    return Length(PLANCK_CONSTANT / momentum, LengthUnit.Meter)


def _positive_radius(radius: Length) -> float:
    r = radius.get_in(LengthUnit.Meter)
    if r <= 0:
        raise InvalidArgumentError("Radius must be positive", 'radius', radius)
    return r


def surface_gravity(body_mass: Mass, body_radius: Length) -> Acceleration:
    """Gravitational acceleration at the surface of a body: ``g = G M / r²``.

    Examples:
        >>> round(surface_gravity(EARTH_MASS, EARTH_RADIUS) >> Acceleration.MeterPerSecondSquared, 2)
        9.8
    """
    r = _positive_radius(body_radius)
    return Acceleration(GRAVITATIONAL_CONSTANT * body_mass.get_in(MassUnit.Kilogram) / (r * r),
                        AccelerationUnit.MeterPerSecondSquared)


def escape_velocity(body_mass: Mass, body_radius: Length) -> Speed:
    """Escape velocity from the surface of a body: ``v = √(2 G M / r)``."""
    r = _positive_radius(body_radius)
    return Speed(math.sqrt(2.0 * GRAVITATIONAL_CONSTANT * body_mass.get_in(MassUnit.Kilogram) / r),
                 SpeedUnit.MeterPerSecond)


def orbital_velocity(central_mass: Mass, orbital_radius: Length) -> Speed:
    """Speed of a circular orbit: ``v = √(G M / r)``."""
    r = _positive_radius(orbital_radius)
    return Speed(math.sqrt(GRAVITATIONAL_CONSTANT * central_mass.get_in(MassUnit.Kilogram) / r),
                 SpeedUnit.MeterPerSecond)


def schwarzschild_radius(mass: Mass) -> Length:
    """Event-horizon radius of `mass`: ``r = 2 G M / c²``."""
    c = SPEED_OF_LIGHT.get_in(SpeedUnit.MeterPerSecond)
    return Length(2.0 * GRAVITATIONAL_CONSTANT * mass.get_in(MassUnit.Kilogram) / (c * c), LengthUnit.Meter)


def orbital_period(semi_major_axis: Length, central_mass: Mass) -> Time:
    """Kepler's third law: ``T = 2π √(a³ / G M)``.

    Raises:
        InvalidArgumentError: If the axis or the mass is not positive.
    """
    a = semi_major_axis.get_in(LengthUnit.Meter)
    m = central_mass.get_in(MassUnit.Kilogram)
    if a <= 0 or m <= 0:
        raise InvalidArgumentError("Central mass and semi-major axis must be positive")
    return Time(2 * math.pi * math.sqrt(a ** 3 / (GRAVITATIONAL_CONSTANT * m)), TimeUnit.Second)


def thermal_expansion(original_length: Length, expansion_coefficient: float,
                      temperature_change: TemperatureDelta) -> Length:
    """Linear thermal expansion: ``ΔL = L₀ α ΔT``."""
    return Length(original_length.get_in(LengthUnit.Meter) * expansion_coefficient
                  * temperature_change.get_in(TemperatureDeltaUnit.Kelvin), LengthUnit.Meter)


def conductive_heat_transfer(thermal_conductivity: float, area: Area, thickness: Length,
                             temperature_difference: TemperatureDelta) -> Power:
    """Heat flow by conduction through a slab: ``q = k A ΔT / Δx``.

    Raises:
        InvalidArgumentError: If `thickness` is zero.
    """
    dx = thickness.get_in(LengthUnit.Meter)
    if dx == 0:
        raise InvalidArgumentError("Thickness must not be zero to compute a heat flow", 'thickness', thickness)
    return Power(thermal_conductivity * area.get_in(AreaUnit.SquareMeter)
                 * temperature_difference.get_in(TemperatureDeltaUnit.Kelvin) / dx, PowerUnit.Watt)


def mechanical_stress(force: Force, area: Area) -> Pressure:
    """Stress of `force` spread over `area`: ``σ = F / A``.

    Raises:
        InvalidArgumentError: If `area` is zero.
    """
    a = area.get_in(AreaUnit.SquareMeter)
    if a == 0:
        raise InvalidArgumentError("Area must not be zero to compute a stress", 'area', area)
    return Pressure(force.get_in(ForceUnit.Newton) / a, PressureUnit.Pascal)


def mechanical_strain(stress: Pressure, youngs_modulus: Pressure) -> float:
    """Dimensionless strain under `stress`: ``ε = σ / E``.

    Raises:
        InvalidArgumentError: If `youngs_modulus` is zero.
    """
    e = youngs_modulus.get_in(PressureUnit.Pascal)
    if e == 0:
        raise InvalidArgumentError("Young's modulus must not be zero", 'youngs_modulus', youngs_modulus)
    return stress.get_in(PressureUnit.Pascal) / e
