from .balances import get_balances
from .chain import Chain
from .enums import Environment, resolve_environment
from .events import sanitize_event_args, event_arg_pairs
from .exceptions import AxelarHelpersError, MissingCredentialsError, InvalidEnvironmentError
from .fees import calculate_bridge_fee, AxelarQueryAPI
from .models import ChainConfig, GasServiceInfo, EventArg
from .registry import resolve_chains, FileChainRegistry, RemoteChainRegistry
from .settings import Settings
from .transfer import get_deposit_address, AxelarAssetTransfer, LocalAssetTransfer
from .utils import get_example_path
from .wallet import Wallet, resolve_wallet


__all__ = [
    "get_balances",
    "Chain",
    "Environment",
    "resolve_environment",
    "sanitize_event_args",
    "event_arg_pairs",
    "AxelarHelpersError",
    "MissingCredentialsError",
    "InvalidEnvironmentError",
    "calculate_bridge_fee",
    "AxelarQueryAPI",
    "ChainConfig",
    "GasServiceInfo",
    "EventArg",
    "resolve_chains",
    "FileChainRegistry",
    "RemoteChainRegistry",
    "Settings",
    "get_deposit_address",
    "AxelarAssetTransfer",
    "LocalAssetTransfer",
    "get_example_path",
    "Wallet",
    "resolve_wallet",
]
