"""Descriptor registry and loader.

This module exposes:
- `DescriptorRegistry` → ordered, immutable sequence of `InterfaceDescriptor`
- `descriptor_from_abi(abi, name)` → parse an ABI JSON array / file
- `load_descriptor(path, name)` → read and parse one descriptor file
- `load_registry(contracts)` → load every configured descriptor, in order

The registry is built once at startup and passed explicitly to the resolver.
Resolution walks descriptors in insertion order and the first match wins, so
selector/topic collisions across descriptors are settled by load order.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from abilens.abi import AbiSpec, make_descriptor_from_abi
from abilens.abi.specs import InterfaceDescriptor, get_selectors, get_topics
from abilens.core.config import ContractConfig, DecoderConfig
from abilens.core.errors import DescriptorLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DescriptorRegistry:
    """Read-only, ordered collection of descriptors."""

    descriptors: tuple[InterfaceDescriptor, ...] = ()

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[InterfaceDescriptor]) -> DescriptorRegistry:
        """Build a registry; a repeated name replaces the earlier descriptor in place."""
        by_name: dict[str, InterfaceDescriptor] = {}
        for d in descriptors:
            by_name[d.name] = d
        return cls(descriptors=tuple(by_name.values()))

    def __iter__(self) -> Iterator[InterfaceDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    def __contains__(self, name: object) -> bool:
        return any(d.name == name for d in self.descriptors)

    def names(self) -> list[str]:
        return [d.name for d in self.descriptors]

    def get(self, name: str) -> InterfaceDescriptor | None:
        for d in self.descriptors:
            if d.name == name:
                return d
        return None


def descriptor_from_abi(abi: AbiSpec, name: str) -> InterfaceDescriptor:
    """Parse an ABI (JSON array, JSON text, or path) into a descriptor."""
    try:
        return make_descriptor_from_abi(abi, name)
    except (ValidationError, ValueError, TypeError) as e:
        # json.JSONDecodeError is a ValueError
        raise DescriptorLoadError(f"failed to parse ABI for contract {name}: {e}") from e


def load_descriptor(path: Path | str, name: str) -> InterfaceDescriptor:
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise DescriptorLoadError(f"failed to read ABI file {path}: {e}") from e

    try:
        abi = json.loads(text)
    except json.JSONDecodeError as e:
        raise DescriptorLoadError(f"failed to parse ABI for contract {name} ({path}): {e}") from e

    descriptor = descriptor_from_abi(abi, name)
    logger.info(
        "loaded ABI %s from %s: %d methods, %d events",
        name,
        path,
        len(descriptor.methods),
        len(descriptor.events),
    )
    logger.debug("%s selectors: %s", name, ", ".join(get_selectors(descriptor.methods)))
    logger.debug("%s topics: %s", name, ", ".join(get_topics(descriptor.events)))
    return descriptor


def load_registry(contracts: Iterable[ContractConfig] | DecoderConfig) -> DescriptorRegistry:
    """Load all configured descriptors; any failure aborts the whole load."""
    if isinstance(contracts, DecoderConfig):
        contracts = contracts.contracts
    registry = DescriptorRegistry.from_descriptors(
        load_descriptor(c.path, c.name) for c in contracts
    )
    logger.info("descriptor registry ready: %s", ", ".join(registry.names()) or "<empty>")
    return registry
