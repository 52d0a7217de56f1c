"""Raw and decoded event logs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .token import Token


@dataclass
class RawLog:
    """A log as emitted: indexed params as topics, the rest as plain data."""

    topics: list[bytes] = field(default_factory=list)
    data: bytes = b""

    def __post_init__(self) -> None:
        self.topics = [bytes(topic) for topic in self.topics]
        self.data = bytes(self.data)

    @classmethod
    def from_tuple(cls, raw: tuple[Iterable[bytes], bytes]) -> RawLog:
        """Build a log from a ``(topics, data)`` pair."""
        topics, data = raw
        return cls(list(topics), data)


@dataclass(frozen=True)
class LogParam:
    """A decoded log parameter."""

    name: str
    value: Token


@dataclass
class Log:
    """A decoded log."""

    params: list[LogParam] = field(default_factory=list)