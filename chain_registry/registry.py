"""Module-level shortcuts reading the registry revision configured in settings.

Each call builds a fresh RegistryClient. Use RegistryClient directly to share a
connection pool or to target another revision.
"""

from typing import List, Optional

from chain_registry.domains.registry.client import RegistryClient
from chain_registry.schemas import AssetList, ChainInfo, IBCPath


async def list_chains() -> List[str]:
    """Get a list of chain names from the registry."""
    return await RegistryClient().list_chains()


async def list_paths() -> List[str]:
    """Get a list of path names from the registry in the form <chain_a>-<chain_b>."""
    return await RegistryClient().list_paths()


async def get_chain(name: str) -> Optional[ChainInfo]:
    """Get a chain's `chain.json`, or None if it has none."""
    return await RegistryClient().get_chain(name)


async def get_assets(name: str) -> Optional[AssetList]:
    """Get a chain's `assetlist.json`, or None if it has none."""
    return await RegistryClient().get_assets(name)


async def get_path(chain_a: str, chain_b: str) -> Optional[IBCPath]:
    """Get the IBC path between two chains, or None if there is none."""
    return await RegistryClient().get_path(chain_a, chain_b)
