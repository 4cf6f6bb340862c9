import asyncio
import sys

from eth_utils import from_wei

from axelar_helpers import FileChainRegistry, Settings, resolve_chains, resolve_wallet, get_balances
from axelar_helpers.logging_setup import configure_logging


async def main(env: str):
    settings = Settings.from_env()
    registry = FileChainRegistry(settings.chain_config_dir)
    chains = resolve_chains(env, ["Avalanche", "Fantom", "Polygon"], registry=registry)
    wallet = resolve_wallet(settings)

    balances = await get_balances(chains, wallet.address)
    for chain in chains:
        balance = from_wei(int(balances[chain.name]), "ether")
        print(f"[{wallet.short_address}] ({chain}) {round(balance, 4)} {chain.token_symbol}")
    """output:
    [0x78**8722] (Avalanche) 2.4512 AVAX
    [0x78**8722] (Fantom) 9.9817 FTM
    [0x78**8722] (Polygon) 0.5000 MATIC
    """


if __name__ == '__main__':
    configure_logging("INFO")
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
