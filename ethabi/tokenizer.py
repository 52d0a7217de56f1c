"""Parsing of textual values into tokens."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

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
from .token import (
    AddressToken,
    ArrayToken,
    BoolToken,
    BytesToken,
    FixedArrayToken,
    FixedBytesToken,
    IntToken,
    StringToken,
    Token,
    TupleToken,
    UintToken,
)


def _split_items(value: str, opening: str, closing: str) -> Iterator[str]:
    """Yield the top-level items of a bracketed list, honouring quoted text."""
    if not value.startswith(opening) or not value.endswith(closing):
        raise InvalidDataError()
    if len(value) == 2:
        return
    nested = 0
    ignore = False
    last_item = 1
    for pos, char in enumerate(value):
        if char == opening and not ignore:
            nested += 1
        elif char == closing and not ignore:
            nested -= 1
            if nested < 0:
                raise InvalidDataError()
            if nested == 0:
                yield value[last_item:pos]
                last_item = pos + 1
        elif char == '"':
            ignore = not ignore
        elif char == "," and nested == 1 and not ignore:
            yield value[last_item:pos]
            last_item = pos + 1
    if ignore:
        raise InvalidDataError()


class Tokenizer(ABC):
    """Turns strings into tokens of a given type.

    Subclasses decide how the scalar values are spelled; arrays and tuples
    are split here.
    """

    def tokenize(self, param: ParamType, value: str) -> Token:
        """Parse ``value`` as a token of type ``param``."""
        match param:
            case AddressType():
                return AddressToken(self.tokenize_address(value))
            case StringType():
                return StringToken(self.tokenize_string(value))
            case BoolType():
                return BoolToken(self.tokenize_bool(value))
            case BytesType():
                return BytesToken(self.tokenize_bytes(value))
            case FixedBytesType(size=size):
                return FixedBytesToken(self.tokenize_fixed_bytes(value, size))
            case UintType():
                return UintToken(self.tokenize_uint(value))
            case IntType():
                return IntToken(self.tokenize_int(value))
            case ArrayType(inner=inner):
                return ArrayToken(self.tokenize_array(value, inner))
            case FixedArrayType(inner=inner, size=size):
                return FixedArrayToken(self.tokenize_fixed_array(value, inner, size))
            case TupleType(params=params):
                return TupleToken(self.tokenize_struct(value, params))
        raise TypeError(f"not a parameter type: {param!r}")

    def tokenize_fixed_array(self, value: str, param: ParamType, length: int) -> list[Token]:
        """Parse ``value`` as an array of exactly ``length`` items."""
        result = self.tokenize_array(value, param)
        if len(result) != length:
            raise InvalidDataError()
        return result

    def tokenize_struct(self, value: str, params: Sequence[ParamType]) -> list[Token]:
        """Parse ``value`` as a parenthesised tuple of the given member types."""
        remaining = iter(params)
        result = []
        for item in _split_items(value, "(", ")"):
            param = next(remaining, None)
            if param is None:
                raise InvalidDataError()
            result.append(self.tokenize(param, item))
        return result

    def tokenize_array(self, value: str, param: ParamType) -> list[Token]:
        """Parse ``value`` as a bracketed array of ``param`` items."""
        return [self.tokenize(param, item) for item in _split_items(value, "[", "]")]

    @abstractmethod
    def tokenize_address(self, value: str) -> bytes:
        """Parse a 20-byte address."""

    @abstractmethod
    def tokenize_string(self, value: str) -> str:
        """Parse a string."""

    @abstractmethod
    def tokenize_bool(self, value: str) -> bool:
        """Parse a boolean."""

    @abstractmethod
    def tokenize_bytes(self, value: str) -> bytes:
        """Parse bytes of any length."""

    @abstractmethod
    def tokenize_fixed_bytes(self, value: str, length: int) -> bytes:
        """Parse bytes of the given length."""

    @abstractmethod
    def tokenize_uint(self, value: str) -> int:
        """Parse an unsigned integer as a 256-bit word."""

    @abstractmethod
    def tokenize_int(self, value: str) -> int:
        """Parse a signed integer as a 256-bit two's complement word."""