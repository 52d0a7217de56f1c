import pytest

from ethabi.errors import InvalidDataError
from ethabi.function import Function, function_from_json
from ethabi.param_type import AddressType, BoolType, FixedBytesType, StringType, UintType
from ethabi.params import Param
from ethabi.signature import short_signature
from ethabi.state_mutability import StateMutability


def _baz():
    return Function(
        name="baz",
        inputs=[Param("a", UintType(32)), Param("b", BoolType())],
        outputs=[],
        constant=False,
        state_mutability=StateMutability.PAYABLE,
    )


def test_function_selector():
    assert _baz().selector() == bytes.fromhex("cdcd77c0")


def test_selector_matches_short_signature():
    func = _baz()
    assert func.selector() == short_signature(func.name, func.input_param_types())


def test_param_types():
    func = Function("f", [Param("a", AddressType())], [Param("r", StringType())])
    assert func.input_param_types() == [AddressType()]
    assert func.output_param_types() == [StringType()]


@pytest.mark.parametrize(
    ("inputs", "outputs", "expected"),
    [
        ([], [], "functionName()"),
        ([], [UintType(256)], "functionName():(uint256)"),
        ([BoolType()], [UintType(256), StringType()], "functionName(bool):(uint256,string)"),
        (
            [UintType(256), FixedBytesType(32)],
            [StringType(), UintType(256)],
            "functionName(uint256,bytes32):(string,uint256)",
        ),
    ],
)
def test_signature(inputs, outputs, expected):
    func = Function(
        "functionName",
        [Param(f"i{n}", kind) for n, kind in enumerate(inputs)],
        [Param(f"o{n}", kind) for n, kind in enumerate(outputs)],
    )
    assert func.signature() == expected


def test_function_from_json_defaults():
    s = """{
        "type": "function",
        "inputs": [{"name": "a", "type": "address"}],
        "name": "foo",
        "outputs": []
    }"""
    assert function_from_json(s) == Function(
        name="foo",
        inputs=[Param("a", AddressType())],
        outputs=[],
        constant=False,
        state_mutability=StateMutability.NON_PAYABLE,
    )


def test_function_from_json_state_mutability():
    func = function_from_json(
        {"name": "get", "inputs": [], "outputs": [], "stateMutability": "view", "constant": True}
    )
    assert func.state_mutability is StateMutability.VIEW
    assert func.constant is True


def test_function_from_json_bad_state_mutability():
    with pytest.raises(InvalidDataError):
        function_from_json({"name": "f", "inputs": [], "outputs": [], "stateMutability": "cheap"})


def test_function_from_json_missing_outputs():
    with pytest.raises(InvalidDataError, match="outputs"):
        function_from_json('{"name": "f", "inputs": []}')


def test_function_from_json_missing_name():
    with pytest.raises(InvalidDataError, match="name"):
        function_from_json('{"inputs": [], "outputs": []}')