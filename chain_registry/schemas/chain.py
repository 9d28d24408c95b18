"""Models for the `chain.json` file in each chain's directory of the registry."""

from typing import List, Optional

from pydantic import Field

from chain_registry.schemas._base import RegistryModel


class Genesis(RegistryModel):
    """Where to download the chain's genesis file."""

    genesis_url: str = ""


class Binaries(RegistryModel):
    """Download URLs of the node binary per platform."""

    linux_amd_64: str = Field("", alias="linux/amd64")
    linux_arm_64: str = Field("", alias="linux/arm64")
    darwin_amd_64: str = Field("", alias="darwin/amd64")
    darwin_arm_64: str = Field("", alias="darwin/arm64")
    windows_amd_64: str = Field("", alias="windows/amd64")


class Codebase(RegistryModel):
    """Source repository and version information of the node software."""

    git_repo: str = ""
    recommended_version: str = ""
    compatible_versions: List[str] = Field(default_factory=list)
    binaries: Binaries = Field(default_factory=Binaries)
    cosmos_sdk_version: str = ""
    tendermint_version: str = ""
    cosmwasm_version: str = ""
    cosmwasm_enabled: bool = False


class Seed(RegistryModel):
    """A seed node."""

    id: str = ""
    address: str = ""
    provider: Optional[str] = None


class PersistentPeer(RegistryModel):
    """A persistent peer node."""

    id: str
    address: str


class Peers(RegistryModel):
    """Seed and persistent peer lists."""

    seeds: List[Seed] = Field(default_factory=list)
    persistent_peers: List[PersistentPeer] = Field(default_factory=list)


class Endpoint(RegistryModel):
    """A public API endpoint and who operates it."""

    address: str = ""
    provider: Optional[str] = None


class Rpc(Endpoint):
    """Tendermint RPC endpoint."""


class Rest(Endpoint):
    """LCD / REST endpoint."""


class Grpc(Endpoint):
    """gRPC endpoint."""


class Apis(RegistryModel):
    """Public endpoints grouped by protocol."""

    rpc: List[Rpc] = Field(default_factory=list)
    rest: List[Rest] = Field(default_factory=list)
    grpc: List[Grpc] = Field(default_factory=list)


class FeeToken(RegistryModel):
    """A denom accepted for fees and its gas prices."""

    denom: str = ""
    fixed_min_gas_price: float = 0.0
    low_gas_price: float = 0.0
    average_gas_price: float = 0.0
    high_gas_price: float = 0.0


class Fees(RegistryModel):
    """Fee configuration."""

    fee_tokens: List[FeeToken] = Field(default_factory=list)


class StakingToken(RegistryModel):
    """A denom that can be staked."""

    denom: str = ""


class Staking(RegistryModel):
    """Staking configuration."""

    staking_tokens: List[StakingToken] = Field(default_factory=list)


class Explorer(RegistryModel):
    """A block explorer and its URL templates."""

    kind: str = ""
    url: str = ""
    tx_page: str = ""
    account_page: str = ""


class ChainInfo(RegistryModel):
    """Deserialized `chain.json` of a single chain."""

    schema_: str = Field("", alias="$schema")
    chain_name: str = ""
    status: str = ""
    network_type: str = ""
    pretty_name: str = ""
    chain_id: str = ""
    bech32_prefix: str = ""
    daemon_name: str = ""
    node_home: str = ""
    slip44: int = 0
    genesis: Genesis = Field(default_factory=Genesis)
    codebase: Codebase = Field(default_factory=Codebase)
    peers: Peers = Field(default_factory=Peers)
    apis: Apis = Field(default_factory=Apis)
    fees: Fees = Field(default_factory=Fees)
    staking: Staking = Field(default_factory=Staking)
    website: str = ""
    update_link: str = ""
    key_algos: List[str] = Field(default_factory=list)
    explorers: List[Explorer] = Field(default_factory=list)
