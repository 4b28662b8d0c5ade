"""Scalar physical quantity tagged with its unit.

A [`QuantityValue`][py_quantities.value.QuantityValue] pairs a float magnitude with
a unit of one quantity family. The pair always describes one real quantity: the only
operations that change the unit without rescaling the magnitude are the explicitly
raw ones (`replace_unit_unsafe` and the `value` setter).

Instances carry no synchronization. Code sharing one instance between threads must
hold its own lock around `convert_in_place` and around any read of the
(value, unit) pair.

Examples:
    >>> # ----------------- Creation and conversion -----------------
    >>> d = QuantityValue(5., Distance.Kilometer)
    >>> d.converted_value(Distance.Meter)
    5000.0
    >>> d.converted_quantity(Distance.Meter)
    <QuantityValue: value=5000.0, unit=meter>
    >>> d.base_value()
    5000.0
    >>> # ----------------------- Comparison -----------------------
    >>> d.compare_to(Distance.Meter(4999))
    1
    >>> d == Distance.Meter(5000)
    True
    >>> # ----------------------- Formatting -----------------------
    >>> Distance.Meter(1234.5).as_string()
    '1,234.50 m'
    >>> Distance.Meter(1234.5).as_string(0)
    '1,234 m'
"""

# Standard library imports
from __future__ import annotations
import math
import re
from typing import Generic, Optional, TypeVar, Union

from typing_extensions import Self

# Local imports
from py_quantities.exceptions import QuantityTypeError, QuantityConversionError, UnitUnsetError, UnitAliasError
from py_quantities.logger import logger
from py_quantities.settings import Settings
from py_quantities.unit import Number, Quantity, QuantityUnit, PreferredUnits, Distance, Mass, Time

INT32_MAX: int = 2 ** 31 - 1
INT32_MIN: int = -2 ** 31

Q = TypeVar('Q', bound=Quantity)


class QuantityValue(Generic[Q]):
    """A magnitude expressed in a unit of a quantity family.

    Attributes:
        _value: Magnitude in `_unit`.
        _unit: Unit of the magnitude, None for a placeholder instance.

    A value built without arguments is a placeholder (`0.0`, no unit); any operation
    that needs the unit raises [`UnitUnsetError`][py_quantities.exceptions.UnitUnsetError].

    Values are mutable, so they are not hashable.
    """

    _value: float
    _unit: Optional[Q]
    __slots__ = ('_value', '_unit')

    def __init__(self, value: Number = 0., unit: Optional[Q] = None):
        """Initialize a quantity value.  No validation is performed.

        Args:
            value: Magnitude in the given unit.
            unit: Unit of the magnitude.
        """
        self._value = float(value)
        self._unit = unit

    def __repr__(self) -> str:
        """Diagnostic representation with the raw magnitude and unit,
        e.g. `<QuantityValue: value=5.0, unit=kilometer>`."""
        return f'<{self.__class__.__name__}: value={self._value!r}, unit={self._unit!r}>'

    def __str__(self) -> str:
        if self._unit is None:
            return repr(self)
        return self.as_string()

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuantityValue):
            return NotImplemented
        if self._unit is None or other._unit is None:
            return self._unit is other._unit and self._value == other._value
        if type(self._unit) is not type(other._unit):
            return False
        return self.base_value() == other.base_value()

    def __lt__(self, other: QuantityValue[Q]) -> bool:
        if not isinstance(other, QuantityValue):
            return NotImplemented
        return self._delta(other) < 0

    def __gt__(self, other: QuantityValue[Q]) -> bool:
        if not isinstance(other, QuantityValue):
            return NotImplemented
        return self._delta(other) > 0

    def __le__(self, other: QuantityValue[Q]) -> bool:
        if not isinstance(other, QuantityValue):
            return NotImplemented
        return self._delta(other) <= 0

    def __ge__(self, other: QuantityValue[Q]) -> bool:
        if not isinstance(other, QuantityValue):
            return NotImplemented
        return self._delta(other) >= 0

    @property
    def value(self) -> float:
        """Magnitude in the current unit."""
        return self._value

    @value.setter
    def value(self, value: Number) -> None:
        """Replace the magnitude.  The unit is left unchanged."""
        self._value = float(value)

    @property
    def unit(self) -> Optional[Q]:
        """Unit the magnitude is expressed in, None for a placeholder."""
        return self._unit

    def replace_unit_unsafe(self, unit: Optional[Q]) -> None:
        """Replace the unit WITHOUT rescaling the magnitude.

        `Distance.Meter(5).replace_unit_unsafe(Distance.Kilometer)` yields 5 km, a
        different quantity. Use [`convert_in_place`][py_quantities.value.QuantityValue.convert_in_place]
        to keep the quantity and change its unit.

        Args:
            unit: New unit, taken as is.
        """
        self._unit = unit

    def _require_unit(self, operation: str) -> Q:
        if self._unit is None:
            raise UnitUnsetError(operation)
        return self._unit

    @staticmethod
    def _validate_unit_type(unit: Q, target: object) -> None:
        """Check that `target` is a unit of the same family as `unit`.

        Raises:
            QuantityTypeError: If `target` is not a unit.
            QuantityConversionError: If `target` belongs to another family.
        """
        if not isinstance(target, Quantity):
            raise QuantityTypeError(f"Unit expected, got: {type(target).__name__} ({target!r})")
        if type(target) is not type(unit):
            raise QuantityConversionError(
                f"Can't convert {type(unit).__name__} unit {unit!r} "
                f"to {type(target).__name__} unit {target!r}")

    def converted_value(self, target: Q) -> float:
        """Get the magnitude expressed in another unit of the same family.

        Args:
            target: Unit to express the magnitude in.

        Returns:
            `value * (unit.conversion_factor / target.conversion_factor)`.

        Raises:
            UnitUnsetError: If this value has no unit.
            QuantityTypeError: If `target` is not a unit.
            QuantityConversionError: If `target` belongs to another family.
            ZeroDivisionError: If `target` declares a zero conversion factor.

        Examples:
            >>> QuantityValue(5., Distance.Kilometer).converted_value(Distance.Meter)
            5000.0
        """
        unit = self._require_unit("convert")
        self._validate_unit_type(unit, target)
        result = self._value * (unit.conversion_factor / target.conversion_factor)
        if not math.isfinite(result) and math.isfinite(self._value):
            logger.warning(f"Converting {self!r} to {target!r} overflowed to {result}")
        return result

    def converted_quantity(self, target: Q) -> QuantityValue[Q]:
        """Get a new value expressed in `target`.  This value is left unchanged.

        Examples:
            >>> Distance.Meter(1500).converted_quantity(Distance.Kilometer)
            <QuantityValue: value=1.5, unit=kilometer>
        """
        return self.__class__(self.converted_value(target), target)

    def convert_in_place(self, target: Q) -> Self:
        """Convert this value to `target`, rescaling the magnitude.

        The new magnitude is computed before either field changes, and both
        fields are then assigned together; a failed conversion leaves the value untouched.

        Returns:
            This instance, for chaining.

        Examples:
            >>> d = QuantityValue(5000., Distance.Meter)
            >>> d.convert_in_place(Distance.Kilometer)
            <QuantityValue: value=5.0, unit=kilometer>
        """
        value = self.converted_value(target)
        self._value, self._unit = value, target
        return self

    convert_to = convert_in_place

    def base_value(self) -> float:
        """Get the magnitude expressed in the family's base unit.

        Raises:
            UnitUnsetError: If this value has no unit.
        """
        unit = self._require_unit("compute base value")
        return self._value * unit.conversion_factor

    def _delta(self, other: QuantityValue[Q]) -> float:
        if not isinstance(other, QuantityValue):
            raise QuantityTypeError(f"QuantityValue expected, got: {type(other).__name__}")
        unit = self._require_unit("compare")
        other_unit = other._require_unit("compare")
        if type(unit) is not type(other_unit):
            raise QuantityConversionError(
                f"Can't compare {type(unit).__name__} with {type(other_unit).__name__}")
        return self.base_value() - other.base_value()

    def compare_to(self, other: QuantityValue[Q]) -> int:
        """Three-way comparison by base-unit value.

        Returns:
            -1, 0 or 1 when this value is less than, equal to or greater than `other`.
            NaN magnitudes compare as 0.

        Raises:
            UnitUnsetError: If either value has no unit.
            QuantityConversionError: If the values belong to different families.

        Examples:
            >>> Distance.Kilometer(1).compare_to(Distance.Meter(1000))
            0
            >>> Distance.Millimeter(1).compare_to(Distance.Millimeter(2))
            -1
        """
        delta = self._delta(other)
        return (delta > 0) - (delta < 0)

    def compare_to_saturated(self, other: QuantityValue[Q]) -> int:
        """Legacy comparison returning the base-unit difference as a 32-bit int.

        The difference is truncated toward zero and clamped to
        [`INT32_MIN`, `INT32_MAX`], so differences smaller than one base unit
        compare as 0 and every difference beyond the bounds collapses to the bound.
        Prefer [`compare_to`][py_quantities.value.QuantityValue.compare_to].

        Examples:
            >>> Distance.Kilometer(1).compare_to_saturated(Distance.Meter(1))
            999
            >>> Distance.LightYear(1).compare_to_saturated(Distance.Meter(0))
            2147483647
        """
        delta = self._delta(other)
        if math.isnan(delta):
            return 0
        if delta > INT32_MAX:
            return INT32_MAX
        if delta < INT32_MIN:
            return INT32_MIN
        return int(delta)

    def as_string(self, precision: Optional[int] = None) -> str:
        """Format for display: grouped thousands, exactly `precision` decimals,
        a space and the unit symbol.

        Args:
            precision: Number of decimal digits; defaults to `Settings.DEFAULT_PRECISION` (2).

        Raises:
            TypeError: If `precision` is not an int.
            ValueError: If `precision` is negative.
            UnitUnsetError: If this value has no unit.

        Examples:
            >>> Mass.Kilogram(1234567.891).as_string(1)
            '1,234,567.9 kg'
        """
        if precision is None:
            precision = Settings.get_default_precision()
        Settings.validate_precision(precision)
        unit = self._require_unit("format")
        return f'{self._value:,.{precision}f} {unit.symbol}'

    def in_preferred(self) -> QuantityValue[Q]:
        """Get a new value expressed in the family's `PreferredUnits` unit.

        Raises:
            UnitUnsetError: If this value has no unit.
            QuantityConversionError: If no preferred unit is configured for the family.
        """
        unit = self._require_unit("convert")
        preferred = PreferredUnits.for_family(type(unit))
        if preferred is None:
            raise QuantityConversionError(f"No preferred unit for {type(unit).__name__}")
        return self.converted_quantity(preferred)  # type: ignore[arg-type]

    @classmethod
    def parse(cls, input_: Union[str, Number],
              preferred: Optional[Union[QuantityUnit, str]] = None) -> QuantityValue:
        """Parse a number or a string with an optional unit into a value.

        Args:
            input_: Number, or string such as `'5 km'`, `'1,234.5m'` or `'12'`.
            preferred: Unit for inputs without one: a unit, an alias,
                       or a `PreferredUnits` field name such as `'distance'`.
                       When it is a unit, embedded aliases are resolved within its family.

        Raises:
            TypeError: If input type is not supported.
            UnitAliasError: If a unit alias can't be resolved or no unit is available.

        Examples:
            >>> QuantityValue.parse('5 km')
            <QuantityValue: value=5.0, unit=kilometer>
            >>> QuantityValue.parse(12, 'distance')
            <QuantityValue: value=12.0, unit=meter>
            >>> QuantityValue.parse('-0.5', Time.Hour)
            <QuantityValue: value=-0.5, unit=hour>
        """

        def resolve_preferred() -> QuantityUnit:
            if isinstance(preferred, QuantityUnit):
                return preferred
            if isinstance(preferred, str):
                if isinstance(unit_ := getattr(PreferredUnits, preferred, None), QuantityUnit):
                    return unit_
                if unit_ := QuantityUnit.parse_unit(preferred):
                    return unit_
            raise UnitAliasError(f"Unsupported {preferred=} unit alias")

        if isinstance(input_, (float, int)) and not isinstance(input_, bool):
            return cls(input_, resolve_preferred())

        if not isinstance(input_, str):
            raise TypeError(f"type, [str, float, int] expected for 'input_', got {type(input_)}")

        input_string = re.sub(r"[\s,]", "", input_)
        if match := re.match(r'^-?(?:\d+\.\d*|\.\d+|\d+\.?)$', input_string):
            return cls(float(match.group()), resolve_preferred())

        if match := re.match(r'(^-?(?:\d+\.\d*|\.\d+|\d+\.?))(.*$)', input_string):
            value, alias = match.groups()
            family = type(preferred) if isinstance(preferred, QuantityUnit) else QuantityUnit
            if unit := family.parse_unit(alias):
                return cls(float(value), unit)
            raise UnitAliasError(f"Unsupported unit {alias=}")

        raise UnitAliasError(f"Can't parse quantity {input_=}")


__all__ = (
    'QuantityValue',
    'INT32_MAX',
    'INT32_MIN',
)
