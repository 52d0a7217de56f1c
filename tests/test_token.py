import pytest

from ethabi.errors import InvalidDataError
from ethabi.param_type import (
    AddressType,
    ArrayType,
    BoolType,
    FixedArrayType,
    FixedBytesType,
    IntType,
    TupleType,
    UintType,
)
from ethabi.token import (
    AddressToken,
    ArrayToken,
    BoolToken,
    BytesToken,
    FixedArrayToken,
    FixedBytesToken,
    IntToken,
    StringToken,
    TupleToken,
    UintToken,
    types_check,
)


@pytest.mark.parametrize(
    "tokens, param_types",
    [
        ([UintToken(0), BoolToken(False)], [UintType(256), BoolType()]),
        ([UintToken(0), BoolToken(False)], [UintType(32), BoolType()]),
        ([FixedBytesToken(b"\x00" * 4)], [FixedBytesType(4)]),
        ([FixedBytesToken(b"\x00" * 3)], [FixedBytesType(4)]),
        ([ArrayToken([BoolToken(False), BoolToken(True)])], [ArrayType(BoolType())]),
        (
            [FixedArrayToken([BoolToken(False), BoolToken(True)])],
            [FixedArrayType(BoolType(), 2)],
        ),
    ],
)
def test_type_check_accepts(tokens, param_types):
    assert types_check(tokens, param_types) is True


@pytest.mark.parametrize(
    "tokens, param_types",
    [
        ([UintToken(0)], [UintType(32), BoolType()]),
        ([UintToken(0), BoolToken(False)], [UintType(32)]),
        ([BoolToken(False), UintToken(0)], [UintType(32), BoolType()]),
        ([FixedBytesToken(b"\x00" * 4)], [FixedBytesType(3)]),
        ([ArrayToken([BoolToken(False), UintToken(0)])], [ArrayType(BoolType())]),
        ([ArrayToken([BoolToken(False), BoolToken(True)])], [ArrayType(AddressType())]),
        (
            [FixedArrayToken([BoolToken(False), BoolToken(True)])],
            [FixedArrayType(BoolType(), 3)],
        ),
        (
            [FixedArrayToken([BoolToken(False), UintToken(0)])],
            [FixedArrayType(BoolType(), 2)],
        ),
        (
            [FixedArrayToken([BoolToken(False), BoolToken(True)])],
            [FixedArrayType(AddressType(), 2)],
        ),
    ],
)
def test_type_check_rejects(tokens, param_types):
    assert types_check(tokens, param_types) is False


def test_int_and_uint_do_not_mix():
    assert IntToken(1).type_check(IntType(8)) is True
    assert IntToken(1).type_check(UintType(8)) is False
    assert UintToken(1).type_check(IntType(8)) is False


def test_tuple_type_check():
    kind = TupleType([AddressType(), BoolType()])
    assert TupleToken([AddressToken(b"\x11" * 20), BoolToken(True)]).type_check(kind) is True
    assert TupleToken([BoolToken(True), BoolToken(True)]).type_check(kind) is False
    assert TupleToken([BoolToken(True)]).type_check(TupleType([])) is False


@pytest.mark.parametrize(
    "token, expected",
    [
        (AddressToken(bytes.fromhex("00" * 20)), False),
        (BytesToken(b"\x00" * 4), True),
        (FixedBytesToken(b"\x00" * 4), False),
        (UintToken(0), False),
        (IntToken(0), False),
        (BoolToken(False), False),
        (StringToken(""), True),
        (ArrayToken([BoolToken(False)]), True),
        (FixedArrayToken([UintToken(0)]), False),
        (FixedArrayToken([StringToken("")]), True),
        (FixedArrayToken([ArrayToken([BoolToken(False)])]), True),
    ],
)
def test_is_dynamic(token, expected):
    assert token.is_dynamic() is expected


def test_display():
    assert str(BoolToken(True)) == "true"
    assert str(StringToken("foo")) == "foo"
    assert str(AddressToken(b"\x11" * 20)) == "11" * 20
    assert str(BytesToken(b"\x12\x34")) == "1234"
    assert str(UintToken(255)) == "ff"
    assert str(ArrayToken([BoolToken(True), BoolToken(False)])) == "[true,false]"
    assert str(TupleToken([UintToken(1), StringToken("a")])) == "(1,a)"


def test_equality_distinguishes_kinds():
    assert IntToken(5) == IntToken(5)
    assert IntToken(5) != UintToken(5)
    assert ArrayToken([BoolToken(True)]) == ArrayToken((BoolToken(True),))


def test_address_length_is_checked():
    with pytest.raises(InvalidDataError):
        AddressToken(b"\x11" * 19)


def test_integer_range_is_checked():
    with pytest.raises(ValueError):
        UintToken(1 << 256)
    with pytest.raises(ValueError):
        UintToken(-1)