"""Topic filters for contract event logs."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import InvalidDataError

HASH_LENGTH = 32


class TopicKind(Enum):
    """How a topic position is matched."""

    ANY = "any"
    ONE_OF = "one_of"
    THIS = "this"


@dataclass(frozen=True)
class Topic:
    """Acceptable values for one topic position; the default matches anything."""

    kind: TopicKind = TopicKind.ANY
    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if self.kind is TopicKind.ANY and values:
            raise ValueError("a wildcard topic holds no values")
        if self.kind is TopicKind.THIS and len(values) != 1:
            raise ValueError("a single-value topic holds exactly one value")
        object.__setattr__(self, "values", values)

    def map(self, func: Callable[[Any], Any]) -> Topic:
        """Apply ``func`` to every value, keeping the kind."""
        return Topic(self.kind, tuple(func(value) for value in self.values))

    def is_any(self) -> bool:
        """Whether this topic matches anything."""
        return self.kind is TopicKind.ANY

    def to_list(self) -> list[Any]:
        """The values as a list: empty for a wildcard."""
        return list(self.values)

    def to_json(self) -> None | str | list[str]:
        """JSON form of a topic of 32-byte hashes."""
        if self.kind is TopicKind.ANY:
            return None
        if self.kind is TopicKind.THIS:
            return _hash_hex(self.values[0])
        return [_hash_hex(value) for value in self.values]

    def __getitem__(self, index: int) -> Any:
        if self.kind is TopicKind.ONE_OF:
            return self.values[index]
        if self.kind is TopicKind.THIS and index == 0:
            return self.values[0]
        raise IndexError("Topic unavailable")


def _hash_hex(value: Any) -> str:
    raw = bytes(value)
    if len(raw) != HASH_LENGTH:
        raise InvalidDataError(f"topic hash must be {HASH_LENGTH} bytes, got {len(raw)}")
    return "0x" + raw.hex()


def any_topic() -> Topic:
    """A topic that matches anything."""
    return Topic()


def this_topic(value: Any) -> Topic:
    """A topic that matches only ``value``."""
    return Topic(TopicKind.THIS, (value,))


def one_of_topic(values: Any) -> Topic:
    """A topic that matches any of ``values``."""
    return Topic(TopicKind.ONE_OF, tuple(values))


def topic_from(value: Any) -> Topic:
    """Build a topic: None matches anything, a list any of its items, else just the value."""
    if value is None:
        return any_topic()
    if isinstance(value, (list, tuple)):
        return one_of_topic(value)
    return this_topic(value)


@dataclass
class RawTopicFilter:
    """Topic filter over token values."""

    topic0: Topic = field(default_factory=any_topic)
    topic1: Topic = field(default_factory=any_topic)
    topic2: Topic = field(default_factory=any_topic)


@dataclass
class TopicFilter:
    """Topic filter over hashes; topic0 is usually the event signature."""

    topic0: Topic = field(default_factory=any_topic)
    topic1: Topic = field(default_factory=any_topic)
    topic2: Topic = field(default_factory=any_topic)
    topic3: Topic = field(default_factory=any_topic)

    def to_json(self) -> list[Any]:
        """The four topics in JSON form."""
        return [topic.to_json() for topic in (self.topic0, self.topic1, self.topic2, self.topic3)]

    def to_json_string(self) -> str:
        """Compact JSON text of the filter."""
        return json.dumps(self.to_json(), separators=(",", ":"))