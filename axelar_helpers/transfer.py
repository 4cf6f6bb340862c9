import logging

import aiohttp

from .enums import Environment, resolve_environment
from .interfaces import AssetTransferService, LocalDepositService
from .models import ChainConfig
from .wallet import Wallet

logger = logging.getLogger(__name__)

TESTNET_RESOURCE_URL = "https://nest-server-testnet.axelar.dev"
LOCAL_HOST = "http://localhost"

# Testnet denominations of the assets whose symbol differs from the Axelar denom
DENOM_LISTING: dict[str, str] = {
    "aUSDC": "uausdc",
}

# Passed to the local network unchanged; origin undocumented
LOCAL_DEPOSIT_ARGUMENT = 8500


def chain_name(chain: ChainConfig | str) -> str:
    return chain.name if isinstance(chain, ChainConfig) else chain


def to_denom(symbol: str) -> str:
    return DENOM_LISTING.get(symbol, symbol)


class AxelarAssetTransfer:
    """
    Deposit address client for the Axelar transfer API.
    A throwaway wallet signs the one-time validation message, as the JS SDK does.
    """

    def __init__(self, session: aiohttp.ClientSession, url: str = TESTNET_RESOURCE_URL):
        self.session = session
        self.url = url

    async def _get_validation_message(self, public_address: str) -> str:
        response = await self.session.get(f"{self.url}/otc", params={"publicAddress": public_address})
        response.raise_for_status()
        data = await response.json()
        return data["validationMsg"]

    async def get_deposit_address(
            self,
            source_chain: str,
            destination_chain: str,
            destination_address: str,
            asset: str,
    ) -> str:
        signer = Wallet.generate()
        validation_message = await self._get_validation_message(signer.address)
        payload = {
            "fromChain": source_chain,
            "toChain": destination_chain,
            "destinationAddress": destination_address,
            "asset": asset,
            "publicAddress": signer.address,
            "signature": signer.sign_message(validation_message),
        }
        response = await self.session.post(f"{self.url}/transfer/link", json=payload)
        response.raise_for_status()
        data = await response.json()
        return data["depositAddress"]


class LocalAssetTransfer:
    """Deposit address client for the local development network relayer."""

    def __init__(self, session: aiohttp.ClientSession, host: str = LOCAL_HOST):
        self.session = session
        self.host = host

    async def get_deposit_address(
            self,
            source_chain: str,
            destination_chain: str,
            destination_address: str,
            symbol: str,
            argument: int,
    ) -> str:
        url = (f"{self.host}:{argument}/getDepositAddress"
               f"/{source_chain}/{destination_chain}/{destination_address}/{symbol}")
        response = await self.session.get(url)
        response.raise_for_status()
        return await response.json()


async def _testnet_deposit_address(
        service: AssetTransferService | None,
        *args,
) -> str:
    if service is not None:
        return await service.get_deposit_address(*args)
    async with aiohttp.ClientSession() as session:
        return await AxelarAssetTransfer(session).get_deposit_address(*args)


async def _local_deposit_address(
        service: LocalDepositService | None,
        *args,
) -> str:
    if service is not None:
        return await service.get_deposit_address(*args)
    async with aiohttp.ClientSession() as session:
        return await LocalAssetTransfer(session).get_deposit_address(*args)


async def get_deposit_address(
        env: Environment | str,
        source: ChainConfig | str,
        destination: ChainConfig | str,
        destination_address: str,
        symbol: str,
        *,
        transfer_service: AssetTransferService = None,
        local_service: LocalDepositService = None,
) -> str:
    """
    :param env: "local" or "testnet"
    :param source: Source chain descriptor or name
    :param destination: Destination chain descriptor or name
    :param destination_address: Recipient on the destination chain
    :param symbol: Token symbol; on testnet translated through DENOM_LISTING, unlisted symbols pass through
    :return: Deposit address on the source chain
    """
    env = resolve_environment(env)
    source_chain, destination_chain = chain_name(source), chain_name(destination)

    if env is Environment.TESTNET:
        denom = to_denom(symbol)
        logger.debug("Requesting testnet deposit address %s -> %s (%s) for %s",
                     source_chain, destination_chain, denom, destination_address)
        return await _testnet_deposit_address(
            transfer_service, source_chain, destination_chain, destination_address, denom)

    logger.debug("Requesting local deposit address %s -> %s (%s) for %s",
                 source_chain, destination_chain, symbol, destination_address)
    return await _local_deposit_address(
        local_service, source_chain, destination_chain, destination_address, symbol, LOCAL_DEPOSIT_ARGUMENT)
