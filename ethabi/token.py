"""Ethereum ABI values and their type checks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .errors import InvalidDataError
from .param_type import (
    AddressType,
    ArrayType,
    BoolType,
    BytesType,
    FixedArrayType,
    FixedBytesType,
    IntType,
    ParamType,
    StringType,
    TupleType,
    UintType,
)

ADDRESS_LENGTH = 20
_U256_LIMIT = 1 << 256


class Token:
    """Base class of all ABI values."""

    def type_check(self, param_type: ParamType) -> bool:
        """Whether this value can be encoded as ``param_type``.

        Integers match an integer type of any size; fixed bytes match a
        fixed-bytes type at least as long as the value.
        """
        match self:
            case AddressToken():
                return isinstance(param_type, AddressType)
            case BytesToken():
                return isinstance(param_type, BytesType)
            case IntToken():
                return isinstance(param_type, IntType)
            case UintToken():
                return isinstance(param_type, UintType)
            case BoolToken():
                return isinstance(param_type, BoolType)
            case StringToken():
                return isinstance(param_type, StringType)
            case FixedBytesToken(value=value):
                return isinstance(param_type, FixedBytesType) and param_type.size >= len(value)
            case ArrayToken(items=items):
                return isinstance(param_type, ArrayType) and all(
                    item.type_check(param_type.inner) for item in items
                )
            case FixedArrayToken(items=items):
                return (
                    isinstance(param_type, FixedArrayType)
                    and param_type.size == len(items)
                    and all(item.type_check(param_type.inner) for item in items)
                )
            case TupleToken(items=items):
                if not isinstance(param_type, TupleType):
                    return False
                if len(items) > len(param_type.params):
                    return False
                return all(item.type_check(p) for item, p in zip(items, param_type.params))
        return False

    def is_dynamic(self) -> bool:
        """Whether this value uses the offset-prefixed encoding."""
        return False

    def __str__(self) -> str:
        match self:
            case BoolToken(value=value):
                return "true" if value else "false"
            case StringToken(value=value):
                return value
            case AddressToken(value=value) | BytesToken(value=value) | FixedBytesToken(value=value):
                return value.hex()
            case UintToken(value=value) | IntToken(value=value):
                return format(value, "x")
            case ArrayToken(items=items) | FixedArrayToken(items=items):
                return "[" + ",".join(str(item) for item in items) + "]"
            case TupleToken(items=items):
                return "(" + ",".join(str(item) for item in items) + ")"
        return repr(self)


def _set(obj: object, name: str, value: object) -> None:
    object.__setattr__(obj, name, value)


def _check_word(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected an integer, got {value!r}")
    if not 0 <= value < _U256_LIMIT:
        raise ValueError(f"value does not fit in 256 bits: {value}")
    return value


@dataclass(frozen=True, eq=True)
class AddressToken(Token):
    """A 20-byte address."""

    value: bytes

    def __post_init__(self) -> None:
        value = bytes(self.value)
        if len(value) != ADDRESS_LENGTH:
            raise InvalidDataError(f"address must be {ADDRESS_LENGTH} bytes, got {len(value)}")
        _set(self, "value", value)

    __str__ = Token.__str__


@dataclass(frozen=True, eq=True)
class FixedBytesToken(Token):
    """Bytes of a size known from the type."""

    value: bytes

    def __post_init__(self) -> None:
        _set(self, "value", bytes(self.value))

    __str__ = Token.__str__


@dataclass(frozen=True, eq=True)
class BytesToken(Token):
    """Bytes of any length."""

    value: bytes

    def __post_init__(self) -> None:
        _set(self, "value", bytes(self.value))

    def is_dynamic(self) -> bool:
        return True

    __str__ = Token.__str__


@dataclass(frozen=True, eq=True)
class IntToken(Token):
    """Signed integer, held as its 256-bit two's complement word."""

    value: int

    def __post_init__(self) -> None:
        _check_word(self.value)

    __str__ = Token.__str__


@dataclass(frozen=True, eq=True)
class UintToken(Token):
    """Unsigned 256-bit integer."""

    value: int

    def __post_init__(self) -> None:
        _check_word(self.value)

    __str__ = Token.__str__


@dataclass(frozen=True, eq=True)
class BoolToken(Token):
    """Boolean."""

    value: bool

    __str__ = Token.__str__


@dataclass(frozen=True, eq=True)
class StringToken(Token):
    """UTF-8 string."""

    value: str

    def is_dynamic(self) -> bool:
        return True

    __str__ = Token.__str__


@dataclass(frozen=True, eq=True)
class FixedArrayToken(Token):
    """Array whose length is fixed by its type."""

    items: tuple[Token, ...] = field(default=())

    def __post_init__(self) -> None:
        _set(self, "items", tuple(self.items))

    def is_dynamic(self) -> bool:
        return any(item.is_dynamic() for item in self.items)

    __str__ = Token.__str__


@dataclass(frozen=True, eq=True)
class ArrayToken(Token):
    """Array of any length."""

    items: tuple[Token, ...] = field(default=())

    def __post_init__(self) -> None:
        _set(self, "items", tuple(self.items))

    def is_dynamic(self) -> bool:
        return True

    __str__ = Token.__str__


@dataclass(frozen=True, eq=True)
class TupleToken(Token):
    """Tuple of differently typed values."""

    items: tuple[Token, ...] = field(default=())

    def __post_init__(self) -> None:
        _set(self, "items", tuple(self.items))

    def is_dynamic(self) -> bool:
        return any(item.is_dynamic() for item in self.items)

    __str__ = Token.__str__


def types_check(tokens: Sequence[Token] | Iterable[Token], param_types: Sequence[ParamType] | Iterable[ParamType]) -> bool:
    """Whether every token matches the parameter type at the same position."""
    tokens = list(tokens)
    param_types = list(param_types)
    return len(tokens) == len(param_types) and all(
        token.type_check(param_type) for token, param_type in zip(tokens, param_types)
    )