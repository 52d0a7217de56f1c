"""Function and event parameter types, with their textual form."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidDataError, InvalidNameError, ParseIntError

_USIZE_MAX = 2**64 - 1
_DECIMAL = re.compile(r"\+?[0-9]+")


class ParamType:
    """Base class of all ABI parameter types."""

    def is_dynamic(self) -> bool:
        """Whether values of this type use the offset-prefixed encoding."""
        return False

    def is_empty_bytes_valid_encoding(self) -> bool:
        """Whether a zero-length byte string is a valid encoding of this type."""
        return False

    def __str__(self) -> str:
        return write_param_type(self)


@dataclass(frozen=True)
class AddressType(ParamType):
    """Address."""


@dataclass(frozen=True)
class BytesType(ParamType):
    """Bytes of unknown length."""

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class IntType(ParamType):
    """Signed integer of ``size`` bits."""

    size: int


@dataclass(frozen=True)
class UintType(ParamType):
    """Unsigned integer of ``size`` bits."""

    size: int


@dataclass(frozen=True)
class BoolType(ParamType):
    """Boolean."""


@dataclass(frozen=True)
class StringType(ParamType):
    """UTF-8 string."""

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class ArrayType(ParamType):
    """Array of unknown length."""

    inner: ParamType

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class FixedBytesType(ParamType):
    """Bytes of fixed length ``size``."""

    size: int

    def is_empty_bytes_valid_encoding(self) -> bool:
        return self.size == 0


@dataclass(frozen=True)
class FixedArrayType(ParamType):
    """Array of fixed length ``size``."""

    inner: ParamType
    size: int

    def is_dynamic(self) -> bool:
        return self.inner.is_dynamic()

    def is_empty_bytes_valid_encoding(self) -> bool:
        return self.size == 0


@dataclass(frozen=True)
class TupleType(ParamType):
    """Tuple of differently typed members."""

    params: tuple[ParamType, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))

    def is_dynamic(self) -> bool:
        return any(param.is_dynamic() for param in self.params)


def _parse_usize(text: str) -> int:
    if not _DECIMAL.fullmatch(text):
        raise ParseIntError(text)
    value = int(text)
    if value > _USIZE_MAX:
        raise ParseIntError(text)
    return value


def _read_tuple(name: str) -> TupleType:
    subtypes: list[ParamType] = []
    subtuples: list[list[ParamType]] = []
    nested = 0
    top_level_paren_open = 0
    last_item = 1
    length = len(name)
    pos = 0
    while pos < length:
        char = name[pos]
        if char == "(":
            top_level_paren_open = pos
            nested += 1
            if nested > 1:
                subtuples.append([])
                last_item = pos + 1
        elif char == ")":
            nested -= 1
            if nested < 0:
                raise InvalidNameError(name)
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 0:
                subtypes.append(read_param_type(name[last_item:pos]))
                last_item = pos + 1
            else:
                # pull in trailing array brackets belonging to the inner tuple
                while pos + 1 < length and name[pos + 1] not in ",)":
                    pos += 1
                subtype = read_param_type(name[top_level_paren_open : pos + 1])
                if nested > 1:
                    level = subtuples[nested - 2]
                    level.append(subtype)
                    subtypes.append(TupleType(level))
                    subtuples[nested - 2] = []
                else:
                    subtypes.append(subtype)
                last_item = pos + 1
        elif char == ",":
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 1:
                subtypes.append(read_param_type(name[last_item:pos]))
                last_item = pos + 1
            elif nested > 1:
                subtuples[nested - 2].append(read_param_type(name[last_item:pos]))
                last_item = pos + 1
        pos += 1
    return TupleType(subtypes)


def _read_array(name: str) -> ParamType:
    body = name[:-1]
    bracket = body.rfind("[")
    num = body[bracket + 1 :]
    if not num:
        if len(name) < 2:
            raise InvalidNameError(name)
        return ArrayType(read_param_type(name[:-2]))
    size = _parse_usize(num)
    end = len(name) - len(num) - 2
    if end < 0:
        raise InvalidNameError(name)
    return FixedArrayType(read_param_type(name[:end]), size)


_SIMPLE_TYPES = {
    "address": AddressType,
    "bytes": BytesType,
    "bool": BoolType,
    "string": StringType,
}


def read_param_type(name: str) -> ParamType:
    """Parse a type name such as ``uint256[]`` or ``(address,bool)``."""
    if name.endswith(")"):
        if not name.startswith("("):
            raise InvalidNameError(name)
        return _read_tuple(name)
    if name.endswith("]"):
        return _read_array(name)

    simple = _SIMPLE_TYPES.get(name)
    if simple is not None:
        return simple()
    if name == "int":
        return IntType(256)
    if name == "uint":
        return UintType(256)
    if name == "tuple":
        return TupleType()
    if name.startswith("int"):
        return IntType(_parse_usize(name[3:]))
    if name.startswith("uint"):
        return UintType(_parse_usize(name[4:]))
    if name.startswith("bytes"):
        return FixedBytesType(_parse_usize(name[5:]))
    raise InvalidNameError(name)


def write_param_type(param: ParamType) -> str:
    """Return the canonical textual form of a parameter type."""
    match param:
        case AddressType():
            return "address"
        case BytesType():
            return "bytes"
        case FixedBytesType(size=size):
            return f"bytes{size}"
        case IntType(size=size):
            return f"int{size}"
        case UintType(size=size):
            return f"uint{size}"
        case BoolType():
            return "bool"
        case StringType():
            return "string"
        case FixedArrayType(inner=inner, size=size):
            return f"{write_param_type(inner)}[{size}]"
        case ArrayType(inner=inner):
            return f"{write_param_type(inner)}[]"
        case TupleType(params=params):
            return "(" + ",".join(write_param_type(p) for p in params) + ")"
    raise TypeError(f"not a parameter type: {param!r}")


def param_types_from_json(values: str | Iterable[Any]) -> list[ParamType]:
    """Read a list of type names, given as JSON text or as already decoded JSON."""
    items = json.loads(values) if isinstance(values, str) else values
    if isinstance(items, (str, dict)) or not isinstance(items, Iterable):
        raise InvalidDataError("expected a list of type names")
    result = []
    for item in items:
        if not isinstance(item, str):
            raise InvalidDataError(f"expected a type name, got {item!r}")
        result.append(read_param_type(item))
    return result