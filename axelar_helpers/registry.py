import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

import requests

from ._paths import BUNDLED_TESTNET_REGISTRY
from .enums import Environment, resolve_environment
from .interfaces import ChainRegistry
from .models import ChainConfig
from .settings import DEFAULT_CHAIN_CONFIG_DIR, Settings
from .utils import load_json

logger = logging.getLogger(__name__)

DEFAULT_TESTNET_CHAINS = ("Avalanche", "Fantom")
TESTNET_REGISTRY_URL = "https://raw.githubusercontent.com/axelarnetwork/axelar-cgp-solidity/main/info/testnet.json"


class FileChainRegistry:
    """
    Reads chain records from ``<config_dir>/local.json`` and ``<config_dir>/testnet.json``.
    The testnet file is optional; without it the bundled registry is used.
    """

    def __init__(self, config_dir: Path | str = DEFAULT_CHAIN_CONFIG_DIR):
        self.config_dir = Path(config_dir)

    def __repr__(self):
        return f"{self.__class__.__name__}(config_dir={self.config_dir})"

    @property
    def local_path(self) -> Path:
        return self.config_dir / "local.json"

    @property
    def testnet_path(self) -> Path:
        return self.config_dir / "testnet.json"

    def local_entries(self) -> list[dict[str, Any]]:
        return load_json(self.local_path)

    def testnet_entries(self) -> list[dict[str, Any]]:
        path = self.testnet_path
        if not path.exists():
            path = BUNDLED_TESTNET_REGISTRY
        logger.debug("Loading testnet registry from %s", path)
        return load_json(path)


@lru_cache
def request_testnet_registry(url: str = TESTNET_REGISTRY_URL) -> tuple[dict[str, Any], ...]:
    response = requests.get(url)
    response.raise_for_status()
    return tuple(response.json())


class RemoteChainRegistry(FileChainRegistry):
    """Testnet records from the published axelar-cgp-solidity registry; local records from files."""

    def __init__(self, config_dir: Path | str = DEFAULT_CHAIN_CONFIG_DIR, url: str = TESTNET_REGISTRY_URL):
        super().__init__(config_dir)
        self.url = url

    def testnet_entries(self) -> list[dict[str, Any]]:
        logger.debug("Requesting testnet registry from %s", self.url)
        return list(request_testnet_registry(self.url))


def resolve_chains(
        env: Environment | str,
        requested_names: Iterable[str] = None,
        *,
        registry: ChainRegistry = None,
) -> list[ChainConfig]:
    """
    :param env: "local" or "testnet"
    :param requested_names: Testnet chain names to keep (exact match), ("Avalanche", "Fantom") by default.
        A single name may be passed as a string. Ignored for "local". Names missing from the registry are skipped.
    :param registry: Source of chain records, files under AXELAR_CHAIN_CONFIG_DIR by default
    :return: Chain descriptors in registry order
    """
    env = resolve_environment(env)
    registry = registry or FileChainRegistry(Settings.from_env().chain_config_dir)

    if env is Environment.LOCAL:
        return [ChainConfig.model_validate(entry) for entry in registry.local_entries()]

    if requested_names is None:
        requested_names = DEFAULT_TESTNET_CHAINS
    elif isinstance(requested_names, str):
        requested_names = (requested_names,)
    names = set(requested_names)
    chains = [
        ChainConfig.from_registry_entry(entry)
        for entry in registry.testnet_entries()
        if entry.get("name") in names
    ]
    logger.debug("Resolved testnet chains: %s", [chain.name for chain in chains])
    return chains
