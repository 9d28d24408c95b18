"""Typed async access to the Cosmos chain registry.

Usage:
    from chain_registry import Dex, PathCache, RegistryClient, RepoConfig, RepoRef

    async with RegistryClient(RepoConfig(ref=RepoRef.latest())) as registry:
        osmosis = await registry.get_chain("osmosis")
        hub_osmo = await registry.get_path("osmosis", "cosmoshub")

    # One request per path in the registry, then no further I/O
    cache = await PathCache.build()
    osmosis_dex = cache.filter(Dex("osmosis"))
"""

from chain_registry.core.constants import VERSION
from chain_registry.core.exceptions import (
    ChainRegistryException,
    RegistryDecodeError,
    RegistryHTTPError,
    RegistryTransportError,
)
from chain_registry.domains.paths import (
    CachedPath,
    ChannelMatch,
    Dex,
    PathCache,
    PathCacheBuildError,
    Preferred,
    Properties,
    Status,
    Tag,
)
from chain_registry.domains.registry import (
    RegistryClient,
    RegistryClientProtocol,
    RepoConfig,
    RepoRef,
)
from chain_registry.registry import get_assets, get_chain, get_path, list_chains, list_paths
from chain_registry.schemas import AssetList, ChainInfo, IBCPath

__version__ = VERSION

__all__ = [
    "AssetList",
    "CachedPath",
    "ChainInfo",
    "ChainRegistryException",
    "ChannelMatch",
    "Dex",
    "IBCPath",
    "PathCache",
    "PathCacheBuildError",
    "Preferred",
    "Properties",
    "RegistryClient",
    "RegistryClientProtocol",
    "RegistryDecodeError",
    "RegistryHTTPError",
    "RegistryTransportError",
    "RepoConfig",
    "RepoRef",
    "Status",
    "Tag",
    "get_assets",
    "get_chain",
    "get_path",
    "list_chains",
    "list_paths",
]
