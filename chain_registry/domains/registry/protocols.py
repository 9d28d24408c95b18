"""Protocols for registry access."""

from typing import List, Optional, Protocol

from chain_registry.schemas import AssetList, ChainInfo, IBCPath


class RegistryClientProtocol(Protocol):
    """Read access to one revision of the chain registry.

    Single-resource lookups return None when the file does not exist at the
    revision and raise ChainRegistryException subclasses on any other failure.
    Listings never return None; a missing directory is an error.
    """

    async def list_chains(self) -> List[str]:
        """List chain directory names."""
        ...

    async def list_paths(self) -> List[str]:
        """List IBC path names in the form <chain_a>-<chain_b>."""
        ...

    async def get_chain(self, name: str) -> Optional[ChainInfo]:
        """Get a chain's `chain.json`."""
        ...

    async def get_assets(self, name: str) -> Optional[AssetList]:
        """Get a chain's `assetlist.json`."""
        ...

    async def get_path(self, chain_a: str, chain_b: str) -> Optional[IBCPath]:
        """Get the IBC path between two chains, in either order."""
        ...
