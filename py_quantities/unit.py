"""Units of measure and quantity families.

A quantity family is a closed set of units measuring the same physical dimension
(e.g. length) that are mutually convertible through a shared base unit. Each family
is an enumeration derived from [`QuantityUnit`][py_quantities.unit.QuantityUnit];
each member carries a readable key, its conversion factor to the family's base unit
and a display symbol.

Any object exposing `conversion_factor` and `symbol` satisfies the
[`Quantity`][py_quantities.unit.Quantity] protocol and can be used as a unit of a
[`QuantityValue`][py_quantities.value.QuantityValue].

Examples:
    >>> Distance.Kilometer.conversion_factor
    1000.0
    >>> Distance.Kilometer.symbol
    'km'
    >>> Distance.Kilometer(5)
    <QuantityValue: value=5.0, unit=kilometer>
    >>> Distance.parse_unit('feet')
    foot
    >>> QuantityUnit.parse_unit('km/h')
    kilometer/hour

Supported Families:
    * Distance (base: meter): `mm`, `cm`, `m`, `km`, `in`, `ft`, `yd`, `mi`, `nmi`, `au`, `ly`
    * Mass (base: kilogram): `mg`, `g`, `kg`, `t`, `oz`, `lb`
    * Time (base: second): `ms`, `s`, `min`, `h`, `d`
    * Velocity (base: meter/second): `m/s`, `km/h`, `ft/s`, `mph`, `kt`
"""

# Standard library imports
from __future__ import annotations
from dataclasses import dataclass, fields, MISSING
from enum import Enum, unique
import re
from typing import NamedTuple, Optional, Tuple, Mapping, Protocol, runtime_checkable, Union, TYPE_CHECKING

from typing_extensions import TypeAlias

# Local imports
from py_quantities.logger import logger

if TYPE_CHECKING:
    from py_quantities.value import QuantityValue

Number: TypeAlias = Union[float, int]


@runtime_checkable
class Quantity(Protocol):
    """Capability every unit of a quantity family provides."""

    @property
    def conversion_factor(self) -> float:
        """Multiplier converting one of this unit to the family's base unit."""
        ...

    @property
    def symbol(self) -> str:
        """Short display symbol."""
        ...


class UnitProps(NamedTuple):
    """Properties of a unit of measure.

    Attributes:
        name: Human-readable name of the unit (e.g., 'meter', 'kilometer/hour').
        conversion_factor: Multiplier to the family's base unit.
        symbol: Standard symbol or abbreviation for the unit (e.g., 'm', 'km/h').
    """

    name: str
    conversion_factor: float
    symbol: str


class QuantityUnit(Enum):
    """Base class of the unit enumerations.

    Members are declared as `(name, conversion_factor, symbol)` tuples.
    The conversion factor must be strictly positive; a family declaring
    a non-positive factor fails when its class is created.

    Examples:
        >>> class Angle(QuantityUnit):
        ...     Radian = ('radian', 1., 'rad')
        ...     Turn = ('turn', 6.283185307179586, 'tr')
        >>> Angle.Turn.conversion_factor
        6.283185307179586
    """

    def __init__(self, name: str, conversion_factor: Number, symbol: str):
        if not conversion_factor > 0:
            raise ValueError(f"{self.__class__.__name__}: conversion factor of {name!r} "
                             f"must be positive, got {conversion_factor}")
        self._props = UnitProps(name, float(conversion_factor), symbol)

    @property
    def props(self) -> UnitProps:
        return self._props

    @property
    def key(self) -> str:
        """Readable name of the unit of measure."""
        return self._props.name

    @property
    def conversion_factor(self) -> float:
        """Multiplier converting one of this unit to the family's base unit."""
        return self._props.conversion_factor

    @property
    def symbol(self) -> str:
        """Short symbol of the unit of measure."""
        return self._props.symbol

    def __repr__(self) -> str:
        return self._props.name

    def __call__(self, value: Union[Number, QuantityValue]) -> QuantityValue:
        """Create a new QuantityValue in this unit using dot syntax.

        Args:
            value: Magnitude in this unit, or an existing QuantityValue to convert.

        Returns:
            QuantityValue expressed in this unit.

        Examples:
            >>> Distance.Meter(Distance.Kilometer(2))
            <QuantityValue: value=2000.0, unit=meter>
        """
        from py_quantities.value import QuantityValue

        if isinstance(value, QuantityValue):
            return value.converted_quantity(self)
        return QuantityValue(value, self)

    @classmethod
    def parse_unit(cls, input_: str) -> Optional[QuantityUnit]:
        """Resolve a unit alias.

        The search is limited to the family `parse_unit` is called on;
        called on `QuantityUnit` itself, every family is searched.

        Args:
            input_: Alias, symbol, readable name or member name of a unit.

        Returns:
            The unit if a match is found, None otherwise.

        Raises:
            TypeError: If input is not a string.

        Examples:
            >>> Distance.parse_unit(' Meters ')
            meter
            >>> Mass.parse_unit('m') is None
            True
            >>> Distance.parse_unit('ms') is None
            True
        """
        if not isinstance(input_, str):
            raise TypeError(f"String expected, got {type(input_)=}, {input_=}")
        input_ = re.sub(r"\s+", "", input_.strip())
        if cls is not QuantityUnit and input_ in cls.__members__:
            return cls[input_]
        input_ = input_.lower()
        if (unit := cls._find_unit_by_alias(input_)) is not None:
            return unit
        # Plurals of full names only: meters, hours, knots; never ms -> m
        if input_.endswith('s'):
            return cls._find_unit_by_alias(input_[:-1], full_name_only=True)
        return None

    @classmethod
    def _find_unit_by_alias(cls, string_to_find: str, full_name_only: bool = False) -> Optional[QuantityUnit]:
        for aliases_tuple, unit in UnitAliases.items():
            if not isinstance(unit, cls):
                continue
            candidates = aliases_tuple[:1] if full_name_only else aliases_tuple
            if string_to_find in (each.lower() for each in candidates):
                return unit
        return None


@unique
class Distance(QuantityUnit):
    """Distance units.  Base unit is meter."""

    Millimeter = ('millimeter', 1. / 1_000, 'mm')
    Centimeter = ('centimeter', 1. / 100, 'cm')
    Meter = ('meter', 1., 'm')
    Kilometer = ('kilometer', 1_000., 'km')
    Inch = ('inch', 0.0254, 'in')
    Foot = ('foot', 0.3048, 'ft')
    Yard = ('yard', 0.9144, 'yd')
    Mile = ('mile', 1_609.344, 'mi')
    NauticalMile = ('nautical mile', 1_852., 'nmi')
    AstronomicalUnit = ('astronomical unit', 149_597_870_700., 'au')
    LightYear = ('light-year', 9_460_730_472_580_800., 'ly')


@unique
class Mass(QuantityUnit):
    """Mass units.  Base unit is kilogram."""

    Milligram = ('milligram', 1. / 1_000_000, 'mg')
    Gram = ('gram', 1. / 1_000, 'g')
    Kilogram = ('kilogram', 1., 'kg')
    Tonne = ('tonne', 1_000., 't')
    Ounce = ('ounce', 0.028349523125, 'oz')
    Pound = ('pound', 0.45359237, 'lb')


@unique
class Time(QuantityUnit):
    """Time units.  Base unit is second."""

    Millisecond = ('millisecond', 1. / 1_000, 'ms')
    Second = ('second', 1., 's')
    Minute = ('minute', 60., 'min')
    Hour = ('hour', 3_600., 'h')
    Day = ('day', 86_400., 'd')


@unique
class Velocity(QuantityUnit):
    """Velocity units.  Base unit is meter per second."""

    MPS = ('meter/second', 1., 'm/s')
    KMH = ('kilometer/hour', 1. / 3.6, 'km/h')
    FPS = ('foot/second', 0.3048, 'ft/s')
    MPH = ('mile/hour', 0.44704, 'mph')
    KT = ('knot', 1_852. / 3_600, 'kt')


UnitAliasesType: TypeAlias = Mapping[Tuple[str, ...], QuantityUnit]

UnitAliases: UnitAliasesType = {
    ('millimeter', 'millimetre', 'mm'): Distance.Millimeter,
    ('centimeter', 'centimetre', 'cm'): Distance.Centimeter,
    ('meter', 'metre', 'm'): Distance.Meter,
    ('kilometer', 'kilometre', 'km'): Distance.Kilometer,
    ('inch', 'inches', 'in'): Distance.Inch,
    ('foot', 'feet', 'ft'): Distance.Foot,
    ('yard', 'yd'): Distance.Yard,
    ('mile', 'mi', 'mi.'): Distance.Mile,
    ('nauticalmile', 'nmi'): Distance.NauticalMile,
    ('astronomicalunit', 'au'): Distance.AstronomicalUnit,
    ('lightyear', 'light-year', 'ly'): Distance.LightYear,

    ('milligram', 'mg'): Mass.Milligram,
    ('gram', 'g'): Mass.Gram,
    ('kilogram', 'kilogramme', 'kg'): Mass.Kilogram,
    ('tonne', 'ton', 't'): Mass.Tonne,
    ('ounce', 'oz'): Mass.Ounce,
    ('pound', 'lb', 'lbs'): Mass.Pound,

    ('millisecond', 'ms'): Time.Millisecond,
    ('second', 's', 'sec'): Time.Second,
    ('minute', 'min'): Time.Minute,
    ('hour', 'h', 'hr'): Time.Hour,
    ('day', 'd'): Time.Day,

    ('meter/second', 'm/s', 'meter/s', 'm/second', 'mps'): Velocity.MPS,
    ('kilometer/hour', 'km/h', 'kilometer/h', 'km/hour', 'kmh', 'kph'): Velocity.KMH,
    ('foot/second', 'feet/second', 'ft/s', 'foot/s', 'feet/s', 'ft/second', 'fps'): Velocity.FPS,
    ('mile/hour', 'mi/h', 'mile/h', 'mi/hour', 'mph'): Velocity.MPH,
    ('knot', 'kn', 'kt'): Velocity.KT,
}


class PreferredUnitsMeta(type):
    """Provide representation method for static dataclasses."""

    def __repr__(cls):
        return '\n'.join(f'{field} = {getattr(cls, field)!r}'
                         for field in getattr(cls, '__dataclass_fields__'))


@dataclass
class PreferredUnits(metaclass=PreferredUnitsMeta):
    """Default unit of each bundled quantity family.

    Used when a value is parsed from a bare number and when a value is
    converted for display with `QuantityValue.in_preferred()`.

    Examples:
        >>> PreferredUnits.distance = Distance.Kilometer
        >>> PreferredUnits.restore_defaults()
        >>> PreferredUnits.set(distance='km', velocity='kph')
        >>> PreferredUnits.velocity
        kilometer/hour
        >>> PreferredUnits.restore_defaults()
    """

    distance: QuantityUnit = Distance.Meter
    mass: QuantityUnit = Mass.Kilogram
    time: QuantityUnit = Time.Second
    velocity: QuantityUnit = Velocity.MPS

    @classmethod
    def restore_defaults(cls):
        """Reset all preferred units to their default values."""
        for f in fields(cls):
            if f.default is not MISSING:
                setattr(cls, f.name, f.default)

    @classmethod
    def for_family(cls, family: type) -> Optional[QuantityUnit]:
        """Preferred unit of a family, or None for a family without a preference."""
        for f in fields(cls):
            unit = getattr(cls, f.name)
            if type(unit) is family:
                return unit
        return None

    @classmethod
    def set(cls, **kwargs: Union[QuantityUnit, str]):
        """Set preferred units from keyword arguments.

        Values may be units or alias strings; an alias is resolved within the
        family of the attribute it is assigned to. Invalid attributes or values
        are logged as warnings but do not raise exceptions.

        Examples:
            >>> PreferredUnits.set(distance=Distance.Kilometer, mass='lb')
            >>> PreferredUnits.restore_defaults()
        """
        for attribute, value in kwargs.items():
            if not hasattr(PreferredUnits, attribute):
                logger.warning(f"{attribute=} not found in preferred_units")
                continue
            family = type(getattr(PreferredUnits, attribute))
            if isinstance(value, QuantityUnit):
                if isinstance(value, family):
                    setattr(PreferredUnits, attribute, value)
                else:
                    logger.warning(f"{value=} is not a {family.__name__} unit")
            elif isinstance(value, str):
                if _unit := family.parse_unit(value):
                    setattr(PreferredUnits, attribute, _unit)
                else:
                    logger.warning(f"{value=} not a member of {family.__name__}")
            else:
                logger.warning(f"type of {value=} have not been converted to a member of {family.__name__}")


__all__ = (
    'Number',
    'Quantity',
    'QuantityUnit',
    'UnitProps',
    'UnitAliases',
    'Distance',
    'Mass',
    'Time',
    'Velocity',
    'PreferredUnits',
)
