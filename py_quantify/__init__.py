"""Type-safe physical quantities with unit conversion, arithmetic and comparison."""

import importlib.metadata

__version__ = importlib.metadata.version("py_quantify")

# Standard library imports
import importlib.resources
import os
import sys

# Third-party imports
from typing_extensions import Dict, Optional, Union

# Local imports
from .logger import logger as log
from .unit import Unit, PreferredUnits

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

_CONFIG_FILENAMES = ('.pyquantify.toml', 'pyquantify.toml')
_CONFIG_SECTION = 'pyquantify'


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load preferred units from a .pyquantify.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pyquantify.toml or pyquantify.toml
            from the working directory upwards, then from the package directory.
        suppress_warnings: If True, suppress warning messages about missing sections.
    """
    def find_config_toml(start_dir: Optional[str] = None) -> Optional[str]:
        """Search for a config file starting from `start_dir` (default: cwd) and walking up to the root.

        Returns:
            The absolute path to the config file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir or os.getcwd())
        while True:
            for config_path in (os.path.join(current_dir, name) for name in _CONFIG_FILENAMES):
                if os.path.exists(config_path):
                    return os.path.abspath(config_path)

            parent_dir = os.path.dirname(current_dir)
            # Reached the root directory
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_config_toml()) is None:
            filepath = find_config_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

        if _section := _config.get(_CONFIG_SECTION):
            if preferred_units := _section.get('preferred_units'):
                PreferredUnits.set(**preferred_units)
            elif not suppress_warnings:
                log.warning(f"Config has no `{_CONFIG_SECTION}.preferred_units` section")
        elif not suppress_warnings:
            log.warning(f"Config has no `{_CONFIG_SECTION}` section")

    log.debug("PreferredUnits load success")


def _basic_config(filename: Optional[str] = None,
                  preferred_units: Optional[Dict[str, Union[Unit, str]]] = None,
                  suppress_warnings: bool = False) -> None:
    """Load preferred units from file or Mapping.

    Args:
        filename: Configuration file path
        preferred_units: Dictionary of preferred units, e.g. ``{'length': LengthUnit.Foot, 'mass': 'lb'}``
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and preferred_units are provided
    """
    if filename and preferred_units:
        raise ValueError("Can't use preferred_units and config file at same time")
    if not filename and preferred_units:
        PreferredUnits.set(**preferred_units)
    else:
        # trying to load definitions from pyquantify.toml
        _load_config(filename, suppress_warnings)


def _resolve_resource_path(path: str) -> str:
    """Resolve a resource path relative to the package."""
    return str(importlib.resources.files('py_quantify').joinpath(path))


def _load_imperial_units() -> None:
    """Load imperial unit preferences."""
    _basic_config(_resolve_resource_path('assets/.pyquantify-imperial.toml'), suppress_warnings=True)


def _load_metric_units() -> None:
    """Load metric unit preferences."""
    _basic_config(_resolve_resource_path('assets/.pyquantify-metric.toml'), suppress_warnings=True)


loadImperialUnits = _load_imperial_units
loadMetricUnits = _load_metric_units

basicConfig = _basic_config

basicConfig()


from .exceptions import UnitTypeError, UnitConversionError, UnitAliasError, InvalidArgumentError
from .logger import logger, enable_file_logging, disable_file_logging
from .unit import (Unit, counter, iterator, factor_table, parse_unit, UnitAliases, UNIT_TYPES, PreferredUnits,
                   AccelerationUnit, AngleUnit, AngularVelocityUnit, AreaUnit, CurrentUnit, DensityUnit,
                   ElectricChargeUnit, EnergyUnit, ForceUnit, FrequencyUnit, LengthUnit, LuminousIntensityUnit,
                   MassUnit, MolarUnit, PowerUnit, PressureUnit, SolidAngleUnit, SpecificEnergyUnit, SpeedUnit,
                   TemperatureDeltaUnit, TemperatureUnit, TimeUnit, VolumeUnit)
from .quantity import Comparable, Measurable, GenericQuantity, parse
from .dimensions import (Acceleration, Angle, AngularVelocity, Area, Current, Density, ElectricCharge, Energy,
                         Force, Frequency, Length, LuminousIntensity, Mass, Molar, Power, Pressure, SolidAngle,
                         SpecificEnergy, Speed, Temperature, TemperatureDelta, Time, Volume)
from . import constants

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib",
    # Skip typing helpers and the internal logger alias
    "Dict", "Optional", "Union", "log",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
