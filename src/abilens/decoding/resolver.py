"""Selector resolution: map a selector / topic hash to a loaded member."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from abilens.abi.specs import Event, InterfaceDescriptor, Method
from abilens.core.errors import MemberNotFound, NoTopics, PayloadTooShort
from abilens.decoding.registry import DescriptorRegistry

logger = logging.getLogger(__name__)

SELECTOR_SIZE = 4


def resolve_method(data: bytes, registry: DescriptorRegistry) -> tuple[Method, InterfaceDescriptor]:
    """Find the method whose selector prefixes `data`; first descriptor wins."""
    if len(data) < SELECTOR_SIZE:
        raise PayloadTooShort(
            f"transaction data too short ({len(data)} bytes, need at least {SELECTOR_SIZE})"
        )

    selector = data[:SELECTOR_SIZE]
    for descriptor in registry:
        method = descriptor.method_by_selector(selector)
        if method is not None:
            logger.debug("selector 0x%s -> %s.%s", selector.hex(), descriptor.name, method.signature)
            return method, descriptor

    logger.debug("selector 0x%s not found in %d descriptors", selector.hex(), len(registry))
    raise MemberNotFound(f"method 0x{selector.hex()} not found in any loaded contract ABI")


def resolve_event(topics: Sequence[bytes], registry: DescriptorRegistry) -> tuple[Event, InterfaceDescriptor]:
    """Find the event whose topic hash is `topics[0]`; first descriptor wins."""
    if not topics:
        raise NoTopics("no topics in log")

    topic0 = topics[0]
    for descriptor in registry:
        event = descriptor.event_by_topic(topic0)
        if event is not None:
            logger.debug("topic 0x%s -> %s.%s", topic0.hex(), descriptor.name, event.signature)
            return event, descriptor

    logger.debug("topic 0x%s not found in %d descriptors", topic0.hex(), len(registry))
    raise MemberNotFound(f"event 0x{topic0.hex()} not found in any loaded contract ABI")
