"""Generic physical quantity.

[`GenericQuantity`][py_quantify.quantity.GenericQuantity] pairs a float magnitude with a member of
one dimension's unit enumeration. The magnitude is stored exactly as given (it is never
normalised to the base unit), and every operation returns a new instance.

Equality and ordering differ:

* ``==`` is *representational*: two quantities are equal only if they have the same type,
  the same magnitude and the same unit.
* ``<``, ``<=``, ``>``, ``>=`` and `compare_to` are *physical*: the left operand is converted
  into the right operand's unit before comparing.

So ``Length(1, Length.Kilometer) == Length(1000, Length.Meter)`` is False, while
``Length(1, Length.Kilometer).compare_to(Length(1000, Length.Meter))`` is 0.
Use `isclose` to ask whether two quantities describe the same physical amount.

Examples:
    >>> d = Length.Yard(100)
    >>> d.convert(Length.Meter)      # Conversion method -> Length
    <Length: 91.44 m (91.44)>
    >>> d << Length.Foot             # Conversion operator -> Length
    <Length: 300.0 ft (91.44)>
    >>> d.get_in(Length.Foot)        # Conversion method -> float
    300.0
    >>> d >> Length.Inch             # Conversion operator -> float
    3600.0
    >>> d + Length.Foot(3)
    <Length: 101.0 yd (92.3544)>
    >>> 3 * d
    <Length: 300.0 yd (274.32)>
    >>> d / Length.Foot(3)
    100.0
"""

from __future__ import annotations

import math
import re
from types import NotImplementedType
from collections.abc import Hashable
from typing import Any, ClassVar, Generic, Optional, Protocol, Type, TypeVar, Union, runtime_checkable, \
    SupportsFloat

from typing_extensions import Self

from py_quantify.exceptions import UnitTypeError, UnitConversionError, UnitAliasError
from py_quantify.unit import Number, Unit, PreferredUnits, parse_unit, _QUANTITY_CLASSES

__all__ = (
    'Comparable',
    'Measurable',
    'GenericQuantity',
    'parse',
)

_U = TypeVar('_U', bound=Unit)

_NUMBER_RE = r'[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?'


@runtime_checkable
class Comparable(Protocol):
    def __eq__(self, other: object) -> bool: ...

    def __lt__(self, other: Self) -> bool: ...

    def __gt__(self, other: Self) -> bool: ...

    def __le__(self, other: Self) -> bool: ...

    def __ge__(self, other: Self) -> bool: ...


@runtime_checkable
class Measurable(SupportsFloat, Hashable, Comparable, Protocol):
    _value: float
    _unit: Unit
    __slots__ = ('_value', '_unit')

    def __init__(self, value: Number, unit: Unit): ...

    def __str__(self) -> str: ...

    def __repr__(self) -> str: ...

    def __rshift__(self, unit: Unit) -> float: ...

    def __lshift__(self, unit: Unit) -> Self: ...

    def convert(self, unit: Unit) -> Self: ...

    def get_in(self, unit: Unit) -> float: ...

    def compare_to(self, other: Self) -> int: ...

    @property
    def unit(self) -> Unit: ...

    @property
    def value(self) -> float: ...

    @property
    def raw_value(self) -> float: ...


class GenericQuantity(Generic[_U]):
    """Base class of all physical quantities.

    A subclass binds itself to one unit enumeration by setting `_unit_type`, and names its
    `PreferredUnits` attribute in `_preferred`. Binding registers the subclass so that
    `Unit.__call__` can build it:

    Examples:
        >>> class Length(GenericQuantity[LengthUnit]):
        ...     __slots__ = ()
        ...     _unit_type = LengthUnit
        ...     _preferred = 'length'
        >>> LengthUnit.Meter(5)
        <Length: 5.0 m (5.0)>

    Attributes:
        _value: Magnitude, in `_unit`.
        _unit: The unit this instance was created with.
    """

    _value: float
    _unit: _U
    __slots__ = ('_value', '_unit')
    _unit_type: ClassVar[Type[Unit]] = Unit
    _preferred: ClassVar[str] = ''

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        unit_type = cls.__dict__.get('_unit_type')
        if unit_type is not None:
            _QUANTITY_CLASSES[unit_type] = cls

    def __init__(self, value: Number, unit: _U):
        """Initialize a quantity.

        Args:
            value: Magnitude in `unit`. Coerced to float.
            unit: Member of this quantity's unit enumeration.

        Raises:
            TypeError: If `value` is not a real number or `unit` is not a Unit.
            UnitConversionError: If `unit` belongs to another dimension.
        """
        if not isinstance(value, (int, float)):
            raise TypeError(f"Number expected for {self.__class__.__name__} value, got {type(value).__name__}")
        self._validate_unit_type(unit)
        self._value = float(value)
        self._unit = unit

    @classmethod
    def _validate_unit_type(cls, unit: Unit):
        """Validate that `unit` is a member of this quantity's unit enumeration.

        Raises:
            TypeError: If `unit` is not a Unit at all.
            UnitConversionError: If `unit` belongs to another dimension.
        """
        if not isinstance(unit, Unit):
            err_msg = f"Type expected: {cls._unit_type.__name__}; got: {type(unit).__name__} ({unit})"
            raise TypeError(err_msg)
        if not isinstance(unit, cls._unit_type):
            raise UnitConversionError(f'{cls.__name__}: unit {type(unit).__name__}.{unit.name} is not supported')

    @classmethod
    def preferred_unit(cls) -> _U:
        """Unit configured in `PreferredUnits` for this dimension."""
        return getattr(PreferredUnits, cls._preferred)

    @classmethod
    def of(cls, value: Union[Self, Number, None]) -> Optional[Self]:
        """Coerce a value into this quantity.

        A quantity of this type is returned as is; a bare number is interpreted in the
        preferred unit for this dimension; `None` stays `None`.

        Raises:
            TypeError: For any other type.

        Examples:
            >>> Length.of(3)  # PreferredUnits.length == Meter
            <Length: 3.0 m (3.0)>
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, (int, float)):
            return cls(value, cls.preferred_unit())
        raise TypeError(f"{cls.__name__}, int or float expected, got {type(value).__name__}")

    @classmethod
    def parse(cls, text: Union[str, Number], preferred: Optional[Union[_U, str]] = None) -> Self:
        """Parse a quantity of this dimension from a string such as ``'12.5 km'``.

        Unit text is resolved within this dimension first, so ``Frequency.parse('60 rpm')``
        and ``AngularVelocity.parse('60 rpm')`` both succeed. A bare number is read in
        `preferred`, or in the preferred unit for this dimension.

        Raises:
            UnitAliasError: If the text cannot be parsed into this dimension.
        """
        if preferred is None:
            preferred = cls.preferred_unit()
        if isinstance(text, str):
            input_string = re.sub(r"\s+", "", text)
            if not re.match(f'^{_NUMBER_RE}$', input_string) and \
                    (match := re.match(f'^({_NUMBER_RE})(.+)$', input_string)):
                value, alias = match.groups()
                if (unit := cls._unit_type.from_alias(alias)) is not None:
                    return cls(float(value), unit)
        result = parse(text, preferred)
        if not isinstance(result, cls):
            raise UnitAliasError(f"{text!r} is not a {cls.__name__}")
        return result

    def __str__(self) -> str:
        """Magnitude followed by the unit symbol, e.g. ``'1.5 km'``."""
        return self.format()

    def __repr__(self) -> str:
        """Class name, display string and base-unit magnitude, e.g. ``<Length: 1.5 km (1500.0)>``."""
        return f'<{self.__class__.__name__}: {self} ({round(self.raw_value, 4)})>'

    def format(self, target_unit: Optional[_U] = None, fraction_digits: Optional[int] = None,
               show_unit_symbol: bool = True, unit_symbol_separator: str = ' ') -> str:
        """Format the quantity as text.

        Args:
            target_unit: Unit to express the magnitude in. Defaults to the quantity's unit.
            fraction_digits: Fixed number of digits after the decimal point. When None, the
                             shortest float representation is used.
            show_unit_symbol: Append the unit symbol.
            unit_symbol_separator: Text between magnitude and symbol.

        Examples:
            >>> Length.Kilometer(1.23456).format(fraction_digits=2)
            '1.23 km'
            >>> Length.Kilometer(1.5).format(Length.Meter, 0, unit_symbol_separator='')
            '1500m'
        """
        unit = self._unit if target_unit is None else target_unit
        value = self.get_in(unit)
        text = str(value) if fraction_digits is None else f'{value:.{fraction_digits}f}'
        if show_unit_symbol:
            return f'{text}{unit_symbol_separator}{unit.symbol}'
        return text

    def __float__(self) -> float:
        return self.raw_value

    def __eq__(self, other: object) -> bool:
        """Representational equality: same type, same magnitude and same unit.

        Not physical equality; see `compare_to` and `isclose`.
        """
        if not isinstance(other, GenericQuantity):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value and self._unit is other._unit

    def __hash__(self) -> int:
        return hash((self.__class__, self._value, self._unit))

    def compare_to(self, other: Self) -> int:
        """Compare physical magnitudes.

        Converts this quantity into `other`'s unit and compares the magnitudes.

        Returns:
            -1, 0 or 1.

        Raises:
            UnitTypeError: If `other` is not a quantity of the same dimension.
        """
        if not isinstance(other, self.__class__):
            raise UnitTypeError(f"Cannot compare {self.__class__.__name__} with {type(other).__name__}")
        a = self.get_in(other._unit)
        b = other._value
        return (a > b) - (a < b)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.compare_to(other) > 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.compare_to(other) >= 0

    def isclose(self, other: Self, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        """Whether `other` describes (almost) the same physical amount, whatever its unit.

        Examples:
            >>> Length.Kilometer(1).isclose(Length.Meter(1000))
            True
        """
        if not isinstance(other, self.__class__):
            raise UnitTypeError(f"Cannot compare {self.__class__.__name__} with {type(other).__name__}")
        return math.isclose(self.get_in(other._unit), other._value, rel_tol=rel_tol, abs_tol=abs_tol)

    def get_in(self, unit: _U) -> float:
        """Magnitude of this quantity expressed in `unit`.

        Returns the stored magnitude unchanged when `unit` is the quantity's own unit.

        Raises:
            UnitConversionError: If `unit` belongs to another dimension.

        Examples:
            >>> Length.Meter(100).get_in(Length.Centimeter)
            10000.0
        """
        if unit is self._unit:
            return self._value
        self._validate_unit_type(unit)
        return self._value * self._unit.factor_to(unit)

    def convert(self, unit: _U) -> Self:
        """This quantity expressed in `unit`.

        Returns `self` (the same instance) when `unit` is the quantity's own unit.

        Raises:
            UnitConversionError: If `unit` belongs to another dimension.
        """
        if unit is self._unit:
            return self
        return self.__class__(self.get_in(unit), unit)

    get_value = get_in
    convert_to = convert

    @property
    def value(self) -> float:
        """Magnitude in the quantity's own unit."""
        return self._value

    @property
    def unit(self) -> _U:
        """The unit this quantity was created with."""
        return self._unit

    @property
    def raw_value(self) -> float:
        """Magnitude in the dimension's base SI unit."""
        return self.get_in(self._unit_type.base_unit())

    # operators: non-mutating
    __rshift__ = get_in

    def __lshift__(self, unit: _U) -> Self:
        """Return a new instance converted to the given unit without mutating self.

        Example:
            d2 = d << Length.Foot  # d remains unchanged
        """
        return self.convert(unit)

    #region GenericQuantity arithmetic operators
    def __add__(self, other: Self) -> Self | NotImplementedType:
        """Add a quantity of the same dimension: `this + other`.

        `other` is converted into this quantity's unit; the result keeps this unit.
        """
        if isinstance(other, self.__class__):
            return self.__class__(self._value + other.get_in(self._unit), self._unit)
        return NotImplemented

    def __sub__(self, other: Self) -> Self | NotImplementedType:
        """Subtract a quantity of the same dimension: `this - other`, in this unit."""
        if isinstance(other, self.__class__):
            return self.__class__(self._value - other.get_in(self._unit), self._unit)
        return NotImplemented

    def __mul__(self, other: Number) -> Self | NotImplementedType:
        """Multiply this quantity by a dimensionless number: `this * other`."""
        if isinstance(other, (int, float)):
            return self.__class__(self._value * other, self._unit)
        return NotImplemented

    def __rmul__(self, other: Number) -> Self | NotImplementedType:
        """Right-hand multiplication by a number (commutative): `other * this`."""
        return self.__mul__(other)

    def __truediv__(self, other: Union[Number, Self]) -> Self | float | NotImplementedType:
        """Divide this quantity: `this / other`.

        Returns:
            - By a number: same dimension and unit, scaled by 1/other.
            - By the same dimension: the dimensionless float ratio.

        Raises:
            ZeroDivisionError: If dividing by exactly zero, or by a zero-valued quantity.
        """
        if isinstance(other, (int, float)):
            if other == 0:
                raise ZeroDivisionError(f"{self.__class__.__name__} division by zero")
            return self.__class__(self._value / other, self._unit)
        if isinstance(other, self.__class__):
            divisor = other.get_in(self._unit)
            if divisor == 0:
                raise ZeroDivisionError(f"{self.__class__.__name__} division by zero")
            return self._value / divisor
        return NotImplemented

    def __neg__(self) -> Self:
        return self.__class__(-self._value, self._unit)

    def __abs__(self) -> Self:
        return self.__class__(abs(self._value), self._unit)
    #endregion GenericQuantity arithmetic operators


def parse(input_: Union[str, Number],
          preferred: Optional[Union[Unit, str]] = None) -> GenericQuantity[Any]:
    """Parse a value with optional unit specification into a quantity.

    Args:
        input_: Value to parse - a number, or a string with an optional unit.
        preferred: Unit for unit-less input, either a Unit, a unit alias, or a
                   `PreferredUnits` attribute name such as ``'density'``.

    Returns:
        The parsed quantity.

    Raises:
        TypeError: If input type is not supported.
        UnitAliasError: If the unit cannot be resolved.

    Examples:
        >>> parse(100, LengthUnit.Meter)
        <Length: 100.0 m (100.0)>
        >>> parse('2yd')
        <Length: 2.0 yd (1.8288)>
        >>> parse(5, 'density')
        <Density: 5.0 kg/m³ (5.0)>
    """

    def create_as_preferred(value_):
        if isinstance(preferred, Unit):
            return preferred(float(value_))
        if isinstance(preferred, str):
            if units_ := parse_unit(preferred):
                return units_(float(value_))
        raise UnitAliasError(f"Unsupported {preferred=} unit alias")

    if isinstance(input_, (float, int)):
        return create_as_preferred(input_)

    if not isinstance(input_, str):
        raise TypeError(f"type, [str, float, int] expected for 'input_', got {type(input_)}")

    input_string = re.sub(r"\s+", "", input_)
    if match := re.match(f'^{_NUMBER_RE}$', input_string):
        return create_as_preferred(match.group())

    if match := re.match(f'^({_NUMBER_RE})(.+)$', input_string):
        value, alias = match.groups()
        if units := parse_unit(alias):
            return units(float(value))
        raise UnitAliasError(f"Unsupported unit {alias=}")

    raise UnitAliasError(f"Can't parse unit {input_=}")
