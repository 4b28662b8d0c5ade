"""py_quantities exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── TypeError
│   └── QuantityTypeError
│       ├── QuantityConversionError
│       └── UnitUnsetError
└── ValueError
    └── UnitAliasError

- QuantityTypeError: Raised when an object that is not a unit (does not expose
  `conversion_factor` and `symbol`) is used where a unit is expected.

- QuantityConversionError: Raised when converting or comparing across two
  different quantity families, e.g. meters to kilograms.

- UnitUnsetError: Raised when a placeholder `QuantityValue()` without a unit
  is converted, compared or formatted.

- UnitAliasError: Raised when a unit alias string cannot be resolved.
"""

__all__ = (
    'QuantityTypeError',
    'QuantityConversionError',
    'UnitUnsetError',
    'UnitAliasError',
)


class QuantityTypeError(TypeError):
    """Unit type error."""


class QuantityConversionError(QuantityTypeError):
    """Quantity family mismatch."""


class UnitUnsetError(QuantityTypeError):
    """Operation on a value that has no unit."""

    def __init__(self, operation: str = ""):
        self.operation: str = operation
        msg = "QuantityValue has no unit"
        if operation:
            msg += f", can't {operation}"
        super().__init__(msg)


class UnitAliasError(ValueError):
    """Unit alias error."""
