"""Fake registry client for testing."""

from __future__ import annotations

from typing import Optional

from chain_registry.domains.registry.locator import path_name
from chain_registry.schemas import AssetList, ChainInfo, IBCPath


class FakeRegistryClient:
    """Test implementation of RegistryClientProtocol.

    Stores documents in dicts and serves them without I/O. Populate via the
    seed_* helpers; make individual lookups fail via fail_path().

    Usage:
        fake = FakeRegistryClient()
        fake.seed_path(cosmoshub_osmosis)
        fake.fail_path("juno", "osmosis", RegistryTransportError(url, "refused"))

        assert await fake.get_path("osmosis", "cosmoshub") == cosmoshub_osmosis
    """

    def __init__(self) -> None:
        """Initialize with an empty registry."""
        self._chains: dict[str, ChainInfo] = {}
        self._assets: dict[str, AssetList] = {}
        self._paths: dict[str, IBCPath] = {}
        self._path_errors: dict[str, Exception] = {}
        self._listed_paths: Optional[list[str]] = None
        self._listing_error: Optional[Exception] = None
        self.calls: list[tuple] = []

    async def list_chains(self) -> list[str]:
        """List seeded chain names."""
        self.calls.append(("list_chains",))
        if self._listing_error is not None:
            raise self._listing_error
        return list(self._chains)

    async def list_paths(self) -> list[str]:
        """List seeded path names, or the names set with list_paths_as()."""
        self.calls.append(("list_paths",))
        if self._listing_error is not None:
            raise self._listing_error
        if self._listed_paths is not None:
            return list(self._listed_paths)
        return list(self._paths)

    async def get_chain(self, name: str) -> Optional[ChainInfo]:
        """Get a seeded chain."""
        self.calls.append(("get_chain", name))
        return self._chains.get(name)

    async def get_assets(self, name: str) -> Optional[AssetList]:
        """Get a seeded asset list."""
        self.calls.append(("get_assets", name))
        return self._assets.get(name)

    async def get_path(self, chain_a: str, chain_b: str) -> Optional[IBCPath]:
        """Get a seeded path, raising if fail_path() was called for it."""
        self.calls.append(("get_path", chain_a, chain_b))
        key = path_name(chain_a, chain_b)
        if key in self._path_errors:
            raise self._path_errors[key]
        return self._paths.get(key)

    # Test helpers

    def seed_chain(self, *chains: ChainInfo) -> None:
        """Add chain documents, keyed by chain_name."""
        for chain in chains:
            self._chains[chain.chain_name] = chain

    def seed_assets(self, *asset_lists: AssetList) -> None:
        """Add asset lists, keyed by chain_name."""
        for asset_list in asset_lists:
            self._assets[asset_list.chain_name] = asset_list

    def seed_path(self, *paths: IBCPath) -> None:
        """Add path documents, keyed by the file name the registry stores them under."""
        for path in paths:
            key = path_name(path.chain_1.chain_name, path.chain_2.chain_name)
            self._paths[key] = path

    def fail_path(self, chain_a: str, chain_b: str, error: Exception) -> None:
        """Make get_path() raise ``error`` for this pair."""
        self._path_errors[path_name(chain_a, chain_b)] = error

    def fail_listing(self, error: Exception) -> None:
        """Make both listings raise ``error``."""
        self._listing_error = error

    def list_paths_as(self, names: list[str]) -> None:
        """Override what list_paths() returns, e.g. to list a path with no document."""
        self._listed_paths = list(names)

    def path_fetches(self) -> int:
        """Number of get_path() calls made so far."""
        return sum(1 for call in self.calls if call[0] == "get_path")
