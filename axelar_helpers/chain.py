from better_proxy import Proxy
from eth_typing import ChecksumAddress
from web3 import AsyncWeb3, AsyncHTTPProvider
from web3.middleware import ExtraDataToPOAMiddleware
from web3.types import BlockIdentifier, Wei

from .models import ChainConfig
from .utils import to_checksum


class Chain(AsyncWeb3):
    provider: AsyncHTTPProvider

    def __init__(
            self,
            rpc: str,
            *,
            name: str = None,
            chain_id: int = None,
            token_symbol: str = None,
            # Connection settings
            provider_timeout: int = 15,
            proxy: str | Proxy = None,
            # Middleware
            use_poa_middleware: bool = True,
    ):
        self.name = name
        self.chain_id = chain_id
        self.token_symbol = token_symbol

        http_provider = AsyncHTTPProvider(
            rpc,
            request_kwargs={"timeout": provider_timeout},
        )
        http_provider.cache_allowed_requests = True
        super().__init__(provider=http_provider)

        # Avalanche, Fantom and Polygon return POA-sized extraData
        if use_poa_middleware:
            self.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

        self._proxy = None
        self.proxy = proxy

    def __str__(self):
        return f"{self.name}"

    def __repr__(self):
        return f"{self.__class__.__name__}(rpc={self.provider.endpoint_uri}, name={self.name})"

    @classmethod
    def from_config(cls, config: ChainConfig, **chain_kwargs) -> "Chain":
        return cls(
            config.rpc,
            name=config.name,
            chain_id=config.chain_id,
            token_symbol=config.token_symbol,
            **chain_kwargs,
        )

    @property
    def proxy(self) -> Proxy | None:
        return self._proxy

    @proxy.setter
    def proxy(self, proxy: str | Proxy | None):
        if proxy is None:
            self._proxy = None
            self.provider._request_kwargs.pop("proxy", None)
            return

        self._proxy = Proxy.from_str(proxy) if isinstance(proxy, str) else proxy
        self.provider._request_kwargs["proxy"] = self._proxy.as_url

    async def get_native_balance(
            self,
            address: ChecksumAddress | str,
            block_identifier: BlockIdentifier = "latest",
    ) -> Wei:
        return await self.eth.get_balance(to_checksum(address), block_identifier)

    async def disconnect(self):
        await self.provider.disconnect()
