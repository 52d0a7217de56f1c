"""Function parameters and tuple components, as read from a JSON ABI."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import InvalidDataError
from .param_type import ArrayType, FixedArrayType, ParamType, TupleType, read_param_type

_UNIQUE_FIELDS = ("name", "type", "components")


@dataclass(frozen=True)
class Param:
    """A named function parameter."""

    name: str
    kind: ParamType


@dataclass(frozen=True)
class TupleParam:
    """A tuple component; its name is optional."""

    name: str | None
    kind: ParamType


def _unique_fields(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result and key in _UNIQUE_FIELDS:
            raise InvalidDataError(f"duplicate field `{key}`")
        result[key] = value
    return result


def _load_json(data: Any) -> Any:
    """Decode JSON text, rejecting repeated parameter fields; pass decoded data through."""
    if isinstance(data, (str, bytes, bytearray)):
        return json.loads(data, object_pairs_hook=_unique_fields)
    return data


def with_tuple_components(kind: ParamType, components: Iterable[TupleParam] | None) -> ParamType:
    """Fill the innermost tuple of ``kind`` (through any arrays) with the component types.

    Types that hold no tuple are returned unchanged. A tuple without components
    raises InvalidDataError.
    """
    match kind:
        case ArrayType(inner=inner):
            return ArrayType(with_tuple_components(inner, components))
        case FixedArrayType(inner=inner, size=size):
            return FixedArrayType(with_tuple_components(inner, components), size)
        case TupleType(params=params):
            if components is None:
                raise InvalidDataError("missing field `components`")
            return TupleType(params + tuple(component.kind for component in components))
    return kind


def _read_kind(obj: Mapping[str, Any]) -> ParamType:
    if "type" not in obj:
        raise InvalidDataError("missing field `kind`")
    type_name = obj["type"]
    if not isinstance(type_name, str):
        raise InvalidDataError(f"expected a type name, got {type_name!r}")
    kind = read_param_type(type_name)

    components = None
    if "components" in obj:
        raw = obj["components"]
        if isinstance(raw, (str, Mapping)) or not isinstance(raw, Iterable):
            raise InvalidDataError("expected a list of tuple components")
        components = [tuple_param_from_json(item) for item in raw]
    return with_tuple_components(kind, components)


def _as_mapping(data: Any, what: str) -> Mapping[str, Any]:
    obj = _load_json(data)
    if not isinstance(obj, Mapping):
        raise InvalidDataError(f"expected {what}")
    return obj


def param_from_json(data: Any) -> Param:
    """Read a parameter from JSON text or an already decoded JSON object."""
    obj = _as_mapping(data, "a valid event parameter spec")
    if "name" not in obj:
        raise InvalidDataError("missing field `name`")
    name = obj["name"]
    if not isinstance(name, str):
        raise InvalidDataError(f"expected a parameter name, got {name!r}")
    return Param(name, _read_kind(obj))


def tuple_param_from_json(data: Any) -> TupleParam:
    """Read a tuple component from JSON text or an already decoded JSON object."""
    obj = _as_mapping(data, "a valid tuple parameter spec")
    name = obj.get("name")
    if name is not None and not isinstance(name, str):
        raise InvalidDataError(f"expected a parameter name, got {name!r}")
    return TupleParam(name, _read_kind(obj))