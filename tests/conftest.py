from pathlib import Path

import pytest

from abilens.core.config import ContractConfig
from abilens.decoding.registry import DescriptorRegistry, load_registry

ABI_DIR = Path(__file__).parent / "abi"


@pytest.fixture
def erc20_abi_path() -> Path:
    return ABI_DIR / "erc20_abi.json"


@pytest.fixture
def router_abi_path() -> Path:
    return ABI_DIR / "router_abi.json"


@pytest.fixture
def registry(erc20_abi_path: Path, router_abi_path: Path) -> DescriptorRegistry:
    return load_registry(
        [
            ContractConfig(path=erc20_abi_path, name="Token"),
            ContractConfig(path=router_abi_path, name="Router"),
        ]
    )
