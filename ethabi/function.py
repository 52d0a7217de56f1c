"""Contract function specification."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidDataError
from .param_type import ParamType, write_param_type
from .params import Param, _load_json, param_from_json
from .signature import short_signature
from .state_mutability import StateMutability, parse_state_mutability


@dataclass
class Function:
    """A contract function with its inputs and outputs.

    ``constant`` is the pre-0.5.0 Solidity attribute; newer ABIs use
    ``state_mutability`` instead.
    """

    name: str
    inputs: list[Param] = field(default_factory=list)
    outputs: list[Param] = field(default_factory=list)
    constant: bool = False
    state_mutability: StateMutability = StateMutability.NON_PAYABLE

    def input_param_types(self) -> list[ParamType]:
        """Types of all inputs, in order."""
        return [param.kind for param in self.inputs]

    def output_param_types(self) -> list[ParamType]:
        """Types of all outputs, in order."""
        return [param.kind for param in self.outputs]

    def signature(self) -> str:
        """A text that uniquely identifies this function, e.g. ``f(bool):(uint256,string)``."""
        inputs = ",".join(write_param_type(kind) for kind in self.input_param_types())
        outputs = ",".join(write_param_type(kind) for kind in self.output_param_types())
        if not outputs:
            return f"{self.name}({inputs})"
        return f"{self.name}({inputs}):({outputs})"

    def selector(self) -> bytes:
        """The 4-byte selector that prefixes an encoded call."""
        return short_signature(self.name, self.input_param_types())


def _params(obj: Mapping[str, Any], key: str) -> list[Param]:
    if key not in obj:
        raise InvalidDataError(f"missing field `{key}`")
    raw = obj[key]
    if isinstance(raw, (str, Mapping)) or not isinstance(raw, Iterable):
        raise InvalidDataError(f"expected a list for `{key}`")
    return [param_from_json(item) for item in raw]


def function_from_json(data: Any) -> Function:
    """Read a function from JSON text or an already decoded JSON object."""
    obj = _load_json(data)
    if not isinstance(obj, Mapping):
        raise InvalidDataError("expected a function object")
    if "name" not in obj:
        raise InvalidDataError("missing field `name`")
    name = obj["name"]
    if not isinstance(name, str):
        raise InvalidDataError(f"expected a function name, got {name!r}")

    constant = obj.get("constant", False)
    if not isinstance(constant, bool):
        raise InvalidDataError(f"expected a boolean for `constant`, got {constant!r}")

    mutability = StateMutability.NON_PAYABLE
    if "stateMutability" in obj:
        raw = obj["stateMutability"]
        if not isinstance(raw, str):
            raise InvalidDataError(f"expected a string for `stateMutability`, got {raw!r}")
        try:
            mutability = parse_state_mutability(raw)
        except ValueError as exc:
            raise InvalidDataError(str(exc)) from exc

    return Function(
        name=name,
        inputs=_params(obj, "inputs"),
        outputs=_params(obj, "outputs"),
        constant=constant,
        state_mutability=mutability,
    )