from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from abilens.core.errors import ConfigError


@dataclass(frozen=True)
class ContractConfig:
    """One descriptor source: an ABI JSON file and the name it is registered under."""

    path: Path
    name: str


@dataclass(frozen=True)
class DecoderConfig:
    """Configuration for building the descriptor registry."""

    contracts: tuple[ContractConfig, ...] = ()


def _contract_from_mapping(entry: Any, base_dir: Path, position: int) -> ContractConfig:
    if not isinstance(entry, Mapping):
        raise ConfigError(f"contracts[{position}] must be a mapping with 'path' and 'name'")
    path = entry.get("path")
    name = entry.get("name")
    if not path or not isinstance(path, str):
        raise ConfigError(f"contracts[{position}] is missing a 'path'")
    if not name or not isinstance(name, str):
        raise ConfigError(f"contracts[{position}] is missing a 'name'")
    p = Path(path)
    if not p.is_absolute():
        p = base_dir / p
    return ContractConfig(path=p, name=name)


def config_from_mapping(raw: Mapping[str, Any], *, base_dir: Path = Path(".")) -> DecoderConfig:
    """Build a `DecoderConfig` from parsed YAML.

    Only the `contracts` key is read; keys used by outer plumbing (server
    address, node host) are ignored.
    """
    entries = raw.get("contracts") or []
    if not isinstance(entries, list):
        raise ConfigError("'contracts' must be a list")
    return DecoderConfig(
        contracts=tuple(_contract_from_mapping(e, base_dir, i) for i, e in enumerate(entries))
    )


def load_config(path: Path | str) -> DecoderConfig:
    """Load a YAML config file; relative descriptor paths resolve against its directory."""
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text())
    except OSError as e:
        raise ConfigError(f"failed to open config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to decode yaml {path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"config file {path} must contain a mapping")
    return config_from_mapping(raw, base_dir=path.parent)
