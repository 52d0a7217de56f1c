import pytest

from ethabi.state_mutability import StateMutability, parse_state_mutability


@pytest.mark.parametrize(
    "text, expected",
    [
        ("pure", StateMutability.PURE),
        ("view", StateMutability.VIEW),
        ("payable", StateMutability.PAYABLE),
        ("nonpayable", StateMutability.NON_PAYABLE),
    ],
)
def test_parse(text, expected):
    assert parse_state_mutability(text) is expected


def test_round_trip():
    for member in StateMutability:
        assert parse_state_mutability(member.value) is member


@pytest.mark.parametrize("text", ["constant", "", "Pure"])
def test_unknown_variant(text):
    with pytest.raises(ValueError):
        parse_state_mutability(text)