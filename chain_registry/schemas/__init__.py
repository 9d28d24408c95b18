"""Schemas for chain registry documents."""

from chain_registry.schemas.assets import (
    Asset,
    AssetList,
    DenomUnit,
    IbcOrigin,
    LogoURIs,
    Trace,
    TraceChain,
    TraceCounterparty,
)
from chain_registry.schemas.chain import (
    Apis,
    Binaries,
    ChainInfo,
    Codebase,
    Explorer,
    Fees,
    FeeToken,
    Genesis,
    Grpc,
    Peers,
    PersistentPeer,
    Rest,
    Rpc,
    Seed,
    Staking,
    StakingToken,
)
from chain_registry.schemas.listing import DirectoryEntry, DirectoryEntryType
from chain_registry.schemas.paths import Channel, ChannelEnd, IBCPath, PathChain, Tags

__all__ = [
    "Apis",
    "Asset",
    "AssetList",
    "Binaries",
    "ChainInfo",
    "Channel",
    "ChannelEnd",
    "Codebase",
    "DenomUnit",
    "DirectoryEntry",
    "DirectoryEntryType",
    "Explorer",
    "FeeToken",
    "Fees",
    "Genesis",
    "Grpc",
    "IBCPath",
    "IbcOrigin",
    "LogoURIs",
    "PathChain",
    "Peers",
    "PersistentPeer",
    "Rest",
    "Rpc",
    "Seed",
    "Staking",
    "StakingToken",
    "Tags",
    "Trace",
    "TraceChain",
    "TraceCounterparty",
]
