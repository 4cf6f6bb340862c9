import logging

import aiohttp

from .interfaces import FeeEstimationService
from .models import ChainConfig

logger = logging.getLogger(__name__)

AXELARSCAN_TESTNET_URL = "https://testnet.api.axelarscan.io"
DEFAULT_GAS_MULTIPLIER = 1.5


class AxelarQueryAPI:
    def __init__(self, session: aiohttp.ClientSession, url: str = AXELARSCAN_TESTNET_URL):
        self.session = session
        self.url = url

    @staticmethod
    def _handle_fee(data) -> int:
        if isinstance(data, dict):
            data = data["result"]
        return int(data)

    async def estimate_gas_fee(
            self,
            source_chain: str,
            destination_chain: str,
            source_token_symbol: str,
            gas_limit: int | None = None,
            gas_multiplier: float = DEFAULT_GAS_MULTIPLIER,
    ) -> int:
        """
        :return: Fee in wei of the source chain native token
        """
        payload = {
            "sourceChain": source_chain,
            "destinationChain": destination_chain,
            "sourceTokenSymbol": source_token_symbol,
            "gasMultiplier": gas_multiplier,
        }
        if gas_limit is not None:
            payload["gasLimit"] = gas_limit

        response = await self.session.post(f"{self.url}/gmp/estimateGasFee", json=payload)
        response.raise_for_status()
        data = await response.json()
        return self._handle_fee(data)


async def calculate_bridge_fee(
        source: ChainConfig,
        destination: ChainConfig,
        *,
        gas_limit: int = None,
        gas_multiplier: float = None,
        symbol: str = None,
        fee_service: FeeEstimationService = None,
) -> int:
    """
    Estimates the gas fee of relaying a message from ``source`` to ``destination``.

    :param symbol: Token to pay the fee in, the source chain's native token by default
    :param gas_multiplier: 1.5 by default
    """
    args = (
        source.name,
        destination.name,
        symbol or source.token_symbol,
        gas_limit,
        gas_multiplier or DEFAULT_GAS_MULTIPLIER,
    )
    logger.debug("Estimating bridge fee %s -> %s", source.name, destination.name)

    if fee_service is not None:
        return await fee_service.estimate_gas_fee(*args)
    async with aiohttp.ClientSession() as session:
        return await AxelarQueryAPI(session).estimate_gas_fee(*args)
