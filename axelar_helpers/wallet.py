import logging
from functools import cached_property

from eth_account.account import Account
from eth_account.signers.local import LocalAccount
from eth_typing import ChecksumAddress, HexStr

from .exceptions import MissingCredentialsError
from .settings import Settings
from .utils import sign_message

Account.enable_unaudited_hdwallet_features()

logger = logging.getLogger(__name__)


class Wallet:
    def __init__(self, eth_account: LocalAccount):
        self.eth_account = eth_account

    def __str__(self) -> str:
        return self.address

    def __repr__(self):
        return f"{self.__class__.__name__}(address={self.address})"

    @classmethod
    def generate(cls, extra_entropy: str = "") -> "Wallet":
        eth_account = Account.create(extra_entropy)
        return cls(eth_account)

    @classmethod
    def from_key(cls, private_key: str) -> "Wallet":
        eth_account = Account.from_key(private_key)
        return cls(eth_account)

    @classmethod
    def from_mnemonic(cls, mnemonic: str, passphrase: str = "") -> "Wallet":
        eth_account = Account.from_mnemonic(mnemonic, passphrase)
        return cls(eth_account)

    @cached_property
    def address(self) -> ChecksumAddress:
        return self.eth_account.address

    @cached_property
    def short_address(self) -> str:
        start = self.address[:4]
        end = self.address[-4:]
        return f"{start}**{end}"

    def sign_message(self, message: str) -> HexStr:
        return sign_message(message, self.eth_account)


def check_wallet(settings: Settings):
    if not settings.has_credentials:
        raise MissingCredentialsError()


def resolve_wallet(settings: Settings) -> Wallet:
    """
    Builds the wallet from EVM_PRIVATE_KEY if it is set, otherwise from EVM_MNEMONIC.

    :raises MissingCredentialsError: if neither is set
    """
    check_wallet(settings)
    if settings.evm_private_key:
        wallet = Wallet.from_key(settings.evm_private_key)
        source = "private key"
    else:
        wallet = Wallet.from_mnemonic(settings.evm_mnemonic)
        source = "mnemonic"
    logger.debug("Wallet %s loaded from %s", wallet.short_address, source)
    return wallet
