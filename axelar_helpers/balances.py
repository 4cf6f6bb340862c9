import asyncio
import logging
from typing import Iterable

from eth_typing import ChecksumAddress

from .chain import Chain
from .models import ChainConfig

logger = logging.getLogger(__name__)


async def _native_balance(config: ChainConfig, address: ChecksumAddress | str) -> str:
    chain = Chain.from_config(config)
    try:
        balance = await chain.get_native_balance(address)
    finally:
        await chain.disconnect()
    logger.debug("[%s] %s balance: %s", config.name, address, balance)
    return str(balance)


async def get_balances(
        chains: Iterable[ChainConfig],
        address: ChecksumAddress | str,
) -> dict[str, str]:
    """
    Queries the native balance of ``address`` on every chain concurrently.

    :return: {chain name: balance in wei as a decimal string}
    :raises: the first error of any query; no partial result is returned
    """
    chains = list(chains)
    balances = await asyncio.gather(*(_native_balance(chain, address) for chain in chains))
    return {chain.name: balance for chain, balance in zip(chains, balances)}
