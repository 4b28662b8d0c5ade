import pytest

from py_quantities.exceptions import QuantityTypeError, QuantityConversionError, UnitUnsetError, UnitAliasError


def test_hierarchy():
    assert issubclass(QuantityTypeError, TypeError)
    assert issubclass(QuantityConversionError, QuantityTypeError)
    assert issubclass(UnitUnsetError, QuantityTypeError)
    assert issubclass(UnitAliasError, ValueError)


def test_unit_unset_error_message():
    err = UnitUnsetError("convert")
    assert err.operation == "convert"
    assert "can't convert" in str(err)
    assert str(UnitUnsetError()) == "QuantityValue has no unit"


def test_unit_unset_error_is_type_error():
    with pytest.raises(TypeError):
        raise UnitUnsetError("format")
