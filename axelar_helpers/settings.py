"""Process-level settings, read from the environment once at start-up."""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CHAIN_CONFIG_DIR = Path("chain-config")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    evm_private_key: str | None = Field(default=None, repr=False)
    evm_mnemonic: str | None = Field(default=None, repr=False)
    chain_config_dir: Path = DEFAULT_CHAIN_CONFIG_DIR

    @field_validator("evm_private_key", "evm_mnemonic")
    @classmethod
    def _empty_is_unset(cls, value: str | None) -> str | None:
        return value or None

    @classmethod
    def from_env(cls, dotenv_path: Path | str = None) -> "Settings":
        """
        Loads ``.env`` (without overriding variables already set) and reads
        EVM_PRIVATE_KEY, EVM_MNEMONIC and AXELAR_CHAIN_CONFIG_DIR.
        Empty values count as unset.
        """
        load_dotenv(dotenv_path)
        settings = cls(
            evm_private_key=os.environ.get("EVM_PRIVATE_KEY"),
            evm_mnemonic=os.environ.get("EVM_MNEMONIC"),
            chain_config_dir=os.environ.get("AXELAR_CHAIN_CONFIG_DIR") or DEFAULT_CHAIN_CONFIG_DIR,
        )
        logger.debug("Settings loaded (chain config dir: %s)", settings.chain_config_dir)
        return settings

    @property
    def has_credentials(self) -> bool:
        return bool(self.evm_private_key or self.evm_mnemonic)
