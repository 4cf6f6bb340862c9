"""Capability interfaces for the external services the helpers delegate to."""
from typing import Any, Protocol


class ChainRegistry(Protocol):
    """Source of raw chain records."""

    def local_entries(self) -> list[dict[str, Any]]: ...

    def testnet_entries(self) -> list[dict[str, Any]]: ...


class AssetTransferService(Protocol):
    """Cross-chain asset transfer: deposit address generation."""

    async def get_deposit_address(
        self, source_chain: str, destination_chain: str, destination_address: str, asset: str
    ) -> str: ...


class LocalDepositService(Protocol):
    """Deposit address generation on the local development network."""

    async def get_deposit_address(
        self,
        source_chain: str,
        destination_chain: str,
        destination_address: str,
        symbol: str,
        argument: int,
    ) -> str: ...


class FeeEstimationService(Protocol):
    """Cross-chain gas fee estimation."""

    async def estimate_gas_fee(
        self,
        source_chain: str,
        destination_chain: str,
        source_token_symbol: str,
        gas_limit: int | None = None,
        gas_multiplier: float = 1.5,
    ) -> int: ...
