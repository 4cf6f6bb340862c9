"""Shared test fixtures and sample data."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from axelar_helpers import ChainConfig, FileChainRegistry, Settings

# Hardhat development accounts
MNEMONIC = "test test test test test test test test test test test junk"
MNEMONIC_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
PRIVATE_KEY = "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d"
PRIVATE_KEY_ADDRESS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


# ---------------------------------------------------------------------------
# Registry data
# ---------------------------------------------------------------------------


def _testnet_entry(name: str, gas_service: str, chain_id: int, symbol: str) -> dict:
    return {
        "name": name,
        "chainId": chain_id,
        "rpc": f"https://rpc.{name.lower()}.example.com",
        "tokenSymbol": symbol,
        "gateway": "0xGATEWAY",
        "AxelarGasService": {"address": gas_service, "implementation": "0xIMPL"},
    }


@pytest.fixture()
def testnet_entries() -> list[dict]:
    return [
        _testnet_entry("Ethereum", "0xEEE", 5, "ETH"),
        _testnet_entry("Avalanche", "0xAAA", 43113, "AVAX"),
        _testnet_entry("Fantom", "0xFFF", 4002, "FTM"),
        _testnet_entry("Polygon", "0xPPP", 80001, "MATIC"),
    ]


@pytest.fixture()
def local_entries() -> list[dict]:
    return [
        {
            "name": "Ethereum",
            "chainId": 2500,
            "rpc": "http://localhost:8500/0",
            "gateway": "0xLOCALGW0",
            "gasService": "0xLOCALGS0",
            "tokenName": "Ether",
            "tokenSymbol": "ETH",
        },
        {
            "name": "Avalanche",
            "chainId": 2501,
            "rpc": "http://localhost:8500/1",
            "gateway": "0xLOCALGW1",
            "gasService": "0xLOCALGS1",
            "tokenName": "Avax",
            "tokenSymbol": "AVAX",
        },
    ]


@pytest.fixture()
def config_dir(tmp_path: Path, local_entries: list[dict]) -> Path:
    """Config directory with local.json only."""
    directory = tmp_path / "chain-config"
    directory.mkdir()
    (directory / "local.json").write_text(json.dumps(local_entries))
    return directory


@pytest.fixture()
def config_dir_with_testnet(config_dir: Path, testnet_entries: list[dict]) -> Path:
    (config_dir / "testnet.json").write_text(json.dumps(testnet_entries))
    return config_dir


@pytest.fixture()
def registry(config_dir_with_testnet: Path) -> FileChainRegistry:
    return FileChainRegistry(config_dir_with_testnet)


# ---------------------------------------------------------------------------
# Chain descriptors and settings
# ---------------------------------------------------------------------------


@pytest.fixture()
def avalanche() -> ChainConfig:
    return ChainConfig(
        name="Avalanche",
        rpc="https://api.avax-test.network/ext/bc/C/rpc",
        gas_service="0xbE406F0189A0B4cf3A05C286473D23791Dd44Cc6",
        chain_id=43113,
        token_symbol="AVAX",
    )


@pytest.fixture()
def fantom() -> ChainConfig:
    return ChainConfig(
        name="Fantom",
        rpc="https://rpc.testnet.fantom.network",
        gas_service="0xbE406F0189A0B4cf3A05C286473D23791Dd44Cc6",
        chain_id=4002,
        token_symbol="FTM",
    )


@pytest.fixture()
def key_settings() -> Settings:
    return Settings(evm_private_key=PRIVATE_KEY)


@pytest.fixture()
def mnemonic_settings() -> Settings:
    return Settings(evm_mnemonic=MNEMONIC)
