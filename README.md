# ethabi

This package provides building blocks for working with Ethereum contract ABIs in Python:

- Parse and format Solidity type strings, such as `uint256`, `bool[][3]` and `(address,bytes32)[]`.
- Typed ABI values (tokens), with type checking.
- A base class for parsing written values into tokens.
- Keccak-256 function selectors and event signature hashes.
- Log topic filters that serialise to the JSON-RPC shape.
- Reading function parameters and function descriptions from ABI JSON.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Type strings (`ethabi.param_type`)

```python
from ethabi.param_type import read_param_type, write_param_type

kind = read_param_type("(uint256,bytes32)[]")
write_param_type(kind)   # "(uint256,bytes32)[]"
str(kind)                # same text
kind.is_dynamic()        # True
```

The types are frozen dataclasses that derive from `ParamType`:

- `AddressType`
- `BytesType`
- `IntType(size)`
- `UintType(size)`
- `BoolType`
- `StringType`
- `ArrayType(inner)`
- `FixedBytesType(size)`
- `FixedArrayType(inner, size)`
- `TupleType(params)`

Some names are shorthand. `int` and `uint` are read as 256 bits, and `tuple` is read as an empty tuple.

`param_types_from_json` reads a list of type names. It accepts JSON text or a decoded list.

Errors from reading type names:

- A name that cannot be read raises `InvalidNameError`.
- A bad number inside a type, as in `uint25x`, raises `ParseIntError`.

Both errors come from `ethabi.errors`. They are subclasses of `AbiError`, and `ParseIntError` is also a `ValueError`.

## Tokens (`ethabi.token`)

```python
from ethabi.param_type import BoolType, UintType
from ethabi.token import BoolToken, UintToken, types_check

types_check([UintToken(69), BoolToken(True)], [UintType(32), BoolType()])   # True
```

The token classes are:

- `AddressToken`, which holds exactly 20 bytes.
- `FixedBytesToken`
- `BytesToken`
- `IntToken`, which holds the 256-bit two's complement word.
- `UintToken`
- `BoolToken`
- `StringToken`
- `FixedArrayToken`
- `ArrayToken`
- `TupleToken`

`Token.type_check` has two lenient rules:

- An integer token matches an integer type of any size.
- Fixed bytes match a fixed-bytes type that is at least as long as the value.

`Token.is_dynamic` tells whether the value uses the offset-prefixed encoding.

## Parsing written values (`ethabi.tokenizer`)

`Tokenizer` is an abstract base class. It splits bracketed arrays (`[a,b]`) and parenthesised tuples (`(a,b)`), and it honours double-quoted text. A malformed value raises `InvalidDataError`.

To use it, subclass it and implement the scalar parsers:

- `tokenize_address`
- `tokenize_string`
- `tokenize_bool`
- `tokenize_bytes`
- `tokenize_fixed_bytes`
- `tokenize_uint`
- `tokenize_int`

Then call `tokenize(param, value)`. The package itself ships no concrete tokenizer.

## Signatures (`ethabi.signature`)

```python
from ethabi.param_type import BoolType, UintType
from ethabi.signature import short_signature

short_signature("baz", [UintType(32), BoolType()]).hex()   # "cdcd77c0"
```

`long_signature` returns the full 32-byte Keccak-256 hash.

## Parameters and functions from ABI JSON

Both readers take JSON text or an already decoded object. Malformed entries raise `InvalidDataError`.

- `ethabi.params.param_from_json` reads a `Param`.
- `ethabi.params.tuple_param_from_json` reads a `TupleParam`.

Tuple `components` are filled into the innermost tuple type, including tuples nested inside arrays.

```python
from ethabi.function import function_from_json

func = function_from_json({
    "type": "function",
    "name": "baz",
    "inputs": [{"name": "a", "type": "uint32"}, {"name": "b", "type": "bool"}],
    "outputs": [],
    "stateMutability": "payable",
})
func.signature()        # "baz(uint32,bool)"
func.selector().hex()   # "cdcd77c0"
```

A function description must have the `name`, `inputs` and `outputs` fields. `stateMutability` is optional and defaults to `StateMutability.NON_PAYABLE`; its values are defined in `ethabi.state_mutability`.

## Topic filters (`ethabi.filter`)

```python
from ethabi.filter import TopicFilter, any_topic, this_topic

event_hash = bytes.fromhex("a9" * 32)
topic_filter = TopicFilter(topic0=this_topic(event_hash), topic1=any_topic())
topic_filter.to_json_string()
```

In the output, a topic is written as follows:

- A topic that matches anything is written as `null`.
- A topic with a single value is written as a `0x` hex string.
- A topic with several values is written as a list of those strings.

Every value written this way must be 32 bytes.

`topic_from` builds a topic from its argument:

- `None` gives a topic that matches anything.
- A list or tuple gives a topic that matches any of its items.
- Anything else gives a topic that matches only that value.

Indexing a topic that holds no value at that position raises `IndexError("Topic unavailable")`.

## Logs and helpers

`ethabi.log` holds three containers:

- `RawLog`, which has topics and data, and can be built with `RawLog.from_tuple((topics, data))`.
- `LogParam`
- `Log`

`ethabi.util.pad_u32` returns an unsigned 32-bit value as a right-aligned 32-byte word.

## What this package does not do

This package does not encode token values into ABI call data, and it does not decode call data or return data back into tokens. It reads function descriptions from ABI JSON, but it does not read whole contract ABIs, constructors or events. It also does not decode event logs against an event description. `Function` gives you the selector and the parameter types, and the actual encoding is left to the caller.