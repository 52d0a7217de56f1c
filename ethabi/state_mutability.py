"""Whether a function reads or modifies blockchain state."""

from enum import Enum


class StateMutability(Enum):
    """State mutability of a contract function; NON_PAYABLE is the default."""

    PURE = "pure"
    VIEW = "view"
    NON_PAYABLE = "nonpayable"
    PAYABLE = "payable"


def parse_state_mutability(value: str) -> StateMutability:
    """Parse the JSON ABI spelling of a state mutability."""
    try:
        return StateMutability(value)
    except ValueError:
        expected = ", ".join(repr(m.value) for m in StateMutability)
        raise ValueError(f"unknown variant {value!r}, expected one of {expected}") from None