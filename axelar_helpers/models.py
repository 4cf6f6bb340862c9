from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class GasServiceInfo(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    address: str
    implementation: str | None = None


class ChainConfig(BaseModel):
    """
    Chain descriptor. Registry keys are camelCase; unknown keys are kept as extra fields.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    name: str
    rpc: str
    gas_service: str = Field(alias="gasService")
    chain_id: int | None = Field(default=None, alias="chainId")
    gateway: str | None = None
    token_name: str | None = Field(default=None, alias="tokenName")
    token_symbol: str | None = Field(default=None, alias="tokenSymbol")

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_registry_entry(cls, entry: dict[str, Any]) -> "ChainConfig":
        """
        Builds a descriptor from a testnet registry record,
        taking ``gas_service`` from the nested ``AxelarGasService`` record.
        """
        gas_service = GasServiceInfo(**entry["AxelarGasService"])
        return cls.model_validate({**entry, "gasService": gas_service.address})


class EventArg(NamedTuple):
    name: str
    value: Any
