"""Descriptor primitives.

Defines the parsed, immutable view of a contract interface:
- `Parameter`: one typed input (with `indexed` flag for events)
- `Method` / `Event`: callable and emittable members, keyed by selector / topic
- `InterfaceDescriptor`: a named set of members with selector and topic lookups
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Parameter:
    """One declared input: name, canonical ABI type, and (events only) indexing."""

    name: str
    type: str  # canonical, e.g. "address", "uint256[]", "(address,uint256)"
    indexed: bool = False


@dataclass(frozen=True)
class Method:
    name: str
    signature: str
    selector: bytes  # 4 bytes
    inputs: tuple[Parameter, ...] = ()

    @property
    def input_types(self) -> list[str]:
        return [p.type for p in self.inputs]


@dataclass(frozen=True)
class Event:
    name: str
    signature: str
    topic: bytes  # 32 bytes
    inputs: tuple[Parameter, ...] = ()
    anonymous: bool = False

    @property
    def indexed_inputs(self) -> tuple[Parameter, ...]:
        return tuple(p for p in self.inputs if p.indexed)

    @property
    def data_inputs(self) -> tuple[Parameter, ...]:
        return tuple(p for p in self.inputs if not p.indexed)


Member = Method | Event


@dataclass(frozen=True)
class InterfaceDescriptor:
    """A named contract interface.

    Lookups are built once; on a selector/topic collision inside one
    descriptor the first declared member wins. Anonymous events are kept in
    `events` but never indexed by topic (their logs carry no topic hash).
    """

    name: str
    methods: tuple[Method, ...] = ()
    events: tuple[Event, ...] = ()
    _by_selector: dict[bytes, Method] = field(init=False, repr=False, compare=False)
    _by_topic: dict[bytes, Event] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_selector: dict[bytes, Method] = {}
        for m in self.methods:
            by_selector.setdefault(m.selector, m)
        by_topic: dict[bytes, Event] = {}
        for e in self.events:
            if not e.anonymous:
                by_topic.setdefault(e.topic, e)
        object.__setattr__(self, "_by_selector", by_selector)
        object.__setattr__(self, "_by_topic", by_topic)

    def method_by_selector(self, selector: bytes) -> Method | None:
        return self._by_selector.get(bytes(selector))

    def event_by_topic(self, topic: bytes) -> Event | None:
        return self._by_topic.get(bytes(topic))


def get_selectors(methods: Iterable[Method]) -> list[str]:
    return ["0x" + m.selector.hex() for m in methods]


def get_topics(events: Iterable[Event]) -> list[str]:
    return ["0x" + e.topic.hex() for e in events if not e.anonymous]
