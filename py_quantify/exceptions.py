"""py_quantify exception types.

This module provides the exception hierarchy for the error conditions that can occur
while constructing, converting and combining physical quantities.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── TypeError
│   └── UnitTypeError
│       └── UnitConversionError
├── ValueError
│   ├── UnitAliasError
│   └── InvalidArgumentError
└── ArithmeticError
    └── ZeroDivisionError (built-in, not redefined)

Exception Types
---------------

Unit-Related Exceptions:

- UnitTypeError: Base class for unit-related type errors. Raised when a unit of the wrong
  kind is passed to a quantity or a conversion.

- UnitConversionError: Raised when a conversion between two units is impossible. Occurs when
  mixing units of different dimensions (e.g. asking a `Length` for its value in kilograms),
  when asking an affine temperature unit for a multiplicative factor, or when a frequency
  unit has no rotational counterpart.

- UnitAliasError: Raised when unit alias parsing fails. Occurs when a unit string or a
  quantity string such as ``"12 furlongs"`` cannot be resolved.

Argument Exceptions:

- InvalidArgumentError: Raised by cross-dimension factories when a physical precondition
  is violated, e.g. a zero volume when computing a density, or a zero mass when computing
  an acceleration from a force.

Scalar division by exactly zero raises the built-in `ZeroDivisionError`.
"""
from __future__ import annotations

__all__ = (
    'UnitTypeError',
    'UnitConversionError',
    'UnitAliasError',
    'InvalidArgumentError',
)


class UnitTypeError(TypeError):
    """Unit type error."""


class UnitConversionError(UnitTypeError):
    """Unit conversion error."""


class UnitAliasError(ValueError):
    """Unit alias error."""


class InvalidArgumentError(ValueError):
    """Exception for violated physical preconditions in cross-dimension factories.

    Contains:
    - The name of the offending argument
    - The offending quantity (if one was given)
    """

    def __init__(self, message: str, argument: str = "", quantity: object = None):
        """
        Parameters:
        - message: Human-readable description of the violated precondition
        - argument: Name of the argument that violated it
        - quantity: The offending quantity
        """
        self.argument: str = argument
        self.quantity: object = quantity
        if quantity is not None:
            message = f"{message} (got {quantity})"
        super().__init__(message)
