import asyncio

from eth_utils import from_wei

from axelar_helpers import resolve_chains, calculate_bridge_fee, get_deposit_address
from axelar_helpers.logging_setup import configure_logging


async def main():
    avalanche, fantom = resolve_chains("testnet", ["Avalanche", "Fantom"])

    fee = await calculate_bridge_fee(avalanche, fantom, gas_limit=700_000)
    print(f"{avalanche} -> {fantom}: {from_wei(fee, 'ether')} {avalanche.token_symbol}")

    deposit_address = await get_deposit_address(
        "testnet", avalanche, fantom, "0x780afe4a82Ed3B46eA6bA94a1BB8F7b977298722", "aUSDC")
    print(f"Send aUSDC on {avalanche} to {deposit_address}")


if __name__ == '__main__':
    configure_logging("DEBUG")
    asyncio.run(main())
