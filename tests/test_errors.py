import pytest

from ethabi.errors import AbiError, InvalidDataError, InvalidNameError, ParseIntError
from ethabi.param_type import param_types_from_json, read_param_type


def test_invalid_name_keeps_name():
    err = InvalidNameError("address)")
    assert err.name == "address)"
    assert isinstance(err, AbiError)


def test_parse_int_error_is_value_error():
    err = ParseIntError("x")
    assert err.text == "x"
    assert isinstance(err, ValueError)
    assert isinstance(err, AbiError)


def test_invalid_data_is_abi_error():
    with pytest.raises(AbiError) as info:
        param_types_from_json([1, "address"])
    assert isinstance(info.value, InvalidDataError)


def test_reader_raises_invalid_name():
    with pytest.raises(InvalidNameError) as info:
        read_param_type("address)")
    assert info.value.name == "address)"


def test_reader_raises_parse_int():
    with pytest.raises(ParseIntError):
        read_param_type("uintx")