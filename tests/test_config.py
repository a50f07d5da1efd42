from pathlib import Path

import pytest

from abilens.core.config import ContractConfig, config_from_mapping, load_config
from abilens.core.errors import ConfigError


def test_load_config_resolves_relative_paths(tmp_path: Path) -> None:
    cfg = tmp_path / "app.yaml"
    cfg.write_text(
        "server_addr: 127.0.0.1:8080\n"
        "network_host: http://127.0.0.1:8545\n"
        "contracts:\n"
        "  - path: abi/token.json\n"
        "    name: Token\n"
        "  - path: /opt/abi/router.json\n"
        "    name: Router\n"
    )

    config = load_config(cfg)

    assert config.contracts == (
        ContractConfig(path=tmp_path / "abi" / "token.json", name="Token"),
        ContractConfig(path=Path("/opt/abi/router.json"), name="Router"),
    )


def test_load_config_empty_file(tmp_path: Path) -> None:
    cfg = tmp_path / "app.yaml"
    cfg.write_text("")

    assert load_config(cfg).contracts == ()


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed to open config file"):
        load_config(tmp_path / "missing.yaml")


def test_load_config_bad_yaml(tmp_path: Path) -> None:
    cfg = tmp_path / "app.yaml"
    cfg.write_text("contracts: [unclosed\n")

    with pytest.raises(ConfigError, match="failed to decode yaml"):
        load_config(cfg)


@pytest.mark.parametrize(
    "raw",
    [
        {"contracts": {"path": "a.json", "name": "A"}},
        {"contracts": ["a.json"]},
        {"contracts": [{"name": "A"}]},
        {"contracts": [{"path": "a.json"}]},
    ],
)
def test_malformed_contract_entries(raw: dict) -> None:
    with pytest.raises(ConfigError):
        config_from_mapping(raw)
