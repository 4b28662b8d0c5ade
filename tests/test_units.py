from enum import Enum

import pytest

from py_quantities.unit import *


class TestUnitFamilies:

    @pytest.mark.parametrize("family", [Distance, Mass, Time, Velocity], ids=lambda f: f.__name__)
    def test_factors_positive(self, family):
        for unit in family:
            assert unit.conversion_factor > 0
            assert unit.symbol
            assert isinstance(unit, Quantity)

    @pytest.mark.parametrize(
        "unit, base",
        [
            (Distance.Meter, 1.),
            (Mass.Kilogram, 1.),
            (Time.Second, 1.),
            (Velocity.MPS, 1.),
            (Distance.Kilometer, 1000.),
            (Time.Hour, 3600.),
            (Velocity.KMH, 1 / 3.6),
        ],
        ids=lambda u: repr(u)
    )
    def test_conversion_factors(self, unit, base):
        assert unit.conversion_factor == pytest.approx(base)

    def test_props(self):
        assert Distance.Kilometer.props == UnitProps('kilometer', 1000., 'km')
        assert Distance.Kilometer.key == 'kilometer'
        assert repr(Distance.Kilometer) == 'kilometer'

    def test_non_positive_factor_rejected(self):
        with pytest.raises((ValueError, RuntimeError)) as excinfo:
            class Broken(QuantityUnit):
                Nothing = ('nothing', 0., '-')
        err = excinfo.value
        if isinstance(err, RuntimeError):  # wrapped by __set_name__ before Python 3.12
            err = err.__cause__
        assert isinstance(err, ValueError)
        assert "must be positive" in str(err)

    def test_custom_family(self):
        class Angle(QuantityUnit):
            Radian = ('radian', 1., 'rad')
            Degree = ('degree', 0.017453292519943295, '°')

        assert Angle.Degree(180).converted_value(Angle.Radian) == pytest.approx(3.141592653589793)

    def test_call_creates_value(self):
        d = Distance.Kilometer(5)
        assert d.value == 5.
        assert d.unit is Distance.Kilometer

    def test_call_converts_value(self):
        d = Distance.Meter(Distance.Kilometer(2))
        assert d.value == pytest.approx(2000.)
        assert d.unit is Distance.Meter

    def test_protocol_rejects_plain_objects(self):
        assert not isinstance(object(), Quantity)
        assert not isinstance(1.0, Quantity)


class TestUnitsParser:

    @pytest.mark.parametrize(
        "alias, expected",
        [
            ('m', Distance.Meter),
            ('Meters', Distance.Meter),
            (' Ft ', Distance.Foot),
            ('feet', Distance.Foot),
            ('inches', Distance.Inch),
            ('Kilometer', Distance.Kilometer),
            ('LightYear', Distance.LightYear),
        ]
    )
    def test_parse_distance(self, alias, expected):
        assert Distance.parse_unit(alias) is expected

    @pytest.mark.parametrize(
        "alias, expected",
        [
            ('km/h', Velocity.KMH),
            ('  m / s ', Velocity.MPS),
            ('ms', Time.Millisecond),
            ('hours', Time.Hour),
            ('lbs', Mass.Pound),
            ('kt', Velocity.KT),
        ]
    )
    def test_parse_any_family(self, alias, expected):
        assert QuantityUnit.parse_unit(alias) is expected

    def test_parse_restricted_to_family(self):
        assert Mass.parse_unit('m') is None
        assert Time.parse_unit('km') is None

    @pytest.mark.parametrize("alias", ['ms', 'Ms', 'fts', 'ins'])
    def test_plural_fallback_needs_full_name(self, alias):
        assert Distance.parse_unit(alias) is None

    @pytest.mark.parametrize(
        "family, alias, expected",
        [
            (Distance, 'meters', Distance.Meter),
            (Distance, 'Nautical Miles', Distance.NauticalMile),
            (Time, 'hours', Time.Hour),
            (Time, 'milliseconds', Time.Millisecond),
            (Velocity, 'knots', Velocity.KT),
        ]
    )
    def test_plural_of_full_name(self, family, alias, expected):
        assert family.parse_unit(alias) is expected

    def test_parse_unknown_returns_none(self):
        assert QuantityUnit.parse_unit('nonesuch') is None

    def test_parse_requires_string(self):
        with pytest.raises(TypeError):
            QuantityUnit.parse_unit(5)  # type: ignore

    def test_aliases_are_unique(self):
        seen = {}
        for aliases, unit in UnitAliases.items():
            for alias in aliases:
                assert alias.lower() not in seen, f"{alias} maps to {seen.get(alias.lower())} and {unit}"
                seen[alias.lower()] = unit


class TestPreferredUnits:

    def test_defaults(self):
        assert PreferredUnits.distance is Distance.Meter
        assert PreferredUnits.mass is Mass.Kilogram
        assert PreferredUnits.time is Time.Second
        assert PreferredUnits.velocity is Velocity.MPS

    def test_set_units_and_aliases(self):
        PreferredUnits.set(distance=Distance.Kilometer, mass='lb', velocity='kph')
        assert PreferredUnits.distance is Distance.Kilometer
        assert PreferredUnits.mass is Mass.Pound
        assert PreferredUnits.velocity is Velocity.KMH
        PreferredUnits.restore_defaults()
        assert PreferredUnits.distance is Distance.Meter

    def test_set_invalid_is_logged(self, caplog):
        with caplog.at_level('WARNING', logger='py_quantities'):
            PreferredUnits.set(distance=Mass.Gram, mass='furlong', color='red', time=3)
        assert PreferredUnits.distance is Distance.Meter
        assert PreferredUnits.mass is Mass.Kilogram
        assert PreferredUnits.time is Time.Second
        assert len(caplog.records) == 4

    def test_for_family(self):
        assert PreferredUnits.for_family(Time) is Time.Second

        class Angle(QuantityUnit):
            Radian = ('radian', 1., 'rad')

        assert PreferredUnits.for_family(Angle) is None

    def test_repr(self):
        assert 'distance = meter' in repr(PreferredUnits)

    def test_enum_base(self):
        assert issubclass(Distance, Enum)
