"""Registry client: one HTTP round trip per operation against a pinned registry revision."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from chain_registry.core.config import settings
from chain_registry.core.constants import JSON_SUFFIX
from chain_registry.core.exceptions import (
    RegistryDecodeError,
    RegistryHTTPError,
    RegistryTransportError,
)
from chain_registry.core.logging import ContextualLogger
from chain_registry.core.logging import logger as base_logger
from chain_registry.domains.registry import locator
from chain_registry.domains.registry.protocols import RegistryClientProtocol
from chain_registry.domains.registry.types import RepoConfig
from chain_registry.schemas import AssetList, ChainInfo, DirectoryEntry, DirectoryEntryType, IBCPath

registry_logger = base_logger.with_prefix("RegistryClient: ").with_context(
    component="registry_client"
)

ModelT = TypeVar("ModelT", bound=BaseModel)

_directory_listing = TypeAdapter(List[DirectoryEntry])

# Top-level directories that are not chains
_NON_CHAIN_DIRECTORIES = frozenset({".github"})


def _parse_retry_after(response: httpx.Response) -> Optional[float]:
    """Seconds from a numeric Retry-After header, or None."""
    value = response.headers.get("Retry-After")
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class RegistryClient(RegistryClientProtocol):
    """Client for the chain registry GitHub repository.

    No caching and no retries: every call is exactly one request. A file that
    does not exist at the configured ref (HTTP 404 from the raw host) is
    returned as None; transport failures, other error statuses and bodies that
    do not match the schema raise.

    The HTTP connection pool is shared across calls when an ``httpx.AsyncClient``
    is injected or when the client is used as an async context manager:

        async with RegistryClient() as registry:
            chains = await registry.list_chains()
            osmosis = await registry.get_chain("osmosis")

    Otherwise each call opens and closes its own connection.
    """

    def __init__(
        self,
        config: Optional[RepoConfig] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        logger: Optional[ContextualLogger] = None,
    ):
        """Initialize the client.

        Args:
            config: Registry revision and hosts; defaults to the configured settings.
            http_client: Shared HTTP client. Not closed by this object.
            timeout: Per-request timeout in seconds; defaults to settings.HTTP_TIMEOUT.
            user_agent: User-Agent header value; defaults to settings.USER_AGENT.
            logger: Contextual logger to use instead of the module default.
        """
        self.config = config or RepoConfig.from_settings()
        self._http_client = http_client
        self._owns_http_client = False
        self._timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self._user_agent = user_agent or settings.USER_AGENT
        self.logger = logger or registry_logger.with_context(ref=self.config.resolved_ref)

    @property
    def has_shared_http_client(self) -> bool:
        """Whether calls reuse one connection pool."""
        return self._http_client is not None

    async def __aenter__(self) -> "RegistryClient":
        """Open a pooled HTTP client for the lifetime of the context."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(headers=self._headers(), timeout=self._timeout)
            self._owns_http_client = True
        return self

    async def __aexit__(self, *exc_info) -> None:
        """Close the pooled HTTP client if this object opened it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self._user_agent}

    @asynccontextmanager
    async def http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get an HTTP client: the shared one if present, else a short-lived one."""
        if self._http_client is not None:
            yield self._http_client
        else:
            async with httpx.AsyncClient(headers=self._headers(), timeout=self._timeout) as client:
                yield client

    async def _get(self, url: str) -> httpx.Response:
        """Send one GET request, translating transport errors."""
        self.logger.debug(f"GET {url}")
        async with self.http_client() as client:
            try:
                return await client.get(url, headers=self._headers(), timeout=self._timeout)
            except (httpx.RequestError, httpx.InvalidURL) as e:
                raise RegistryTransportError(url, f"{type(e).__name__}: {e}") from e

    @staticmethod
    def _raise_for_status(response: httpx.Response, url: str) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RegistryHTTPError(
                url, response.status_code, retry_after=_parse_retry_after(response)
            ) from e

    async def _list_directory(self, url: str) -> List[DirectoryEntry]:
        response = await self._get(url)
        self._raise_for_status(response, url)
        try:
            return _directory_listing.validate_json(response.content)
        except ValidationError as e:
            raise RegistryDecodeError(url, str(e)) from e

    async def _get_file(self, url: str, model: Type[ModelT]) -> Optional[ModelT]:
        response = await self._get(url)
        if response.status_code == httpx.codes.NOT_FOUND:
            self.logger.debug(f"{url} not found")
            return None
        self._raise_for_status(response, url)
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise RegistryDecodeError(url, str(e)) from e

    async def list_chains(self) -> List[str]:
        """Get the names of all chains in the registry.

        Returns:
            Directory names at the registry root, excluding ``_``-prefixed
            directories and ``.github``, in the order GitHub listed them.

        Raises:
            RegistryTransportError: If the request could not be sent.
            RegistryHTTPError: If the listing returned a non-2xx status, including 404.
            RegistryDecodeError: If the listing body is not a directory listing.
        """
        entries = await self._list_directory(locator.chain_listing_url(self.config))
        return [
            entry.name
            for entry in entries
            if entry.type == DirectoryEntryType.DIR
            and not entry.name.startswith("_")
            and entry.name not in _NON_CHAIN_DIRECTORIES
        ]

    async def list_paths(self) -> List[str]:
        """Get the names of all IBC paths in the form ``<chain_a>-<chain_b>``.

        Returns:
            JSON file names in the ``_IBC`` directory with the ``.json`` suffix
            removed, excluding ``_``-prefixed files.

        Raises:
            RegistryTransportError: If the request could not be sent.
            RegistryHTTPError: If the listing returned a non-2xx status, including 404.
            RegistryDecodeError: If the listing body is not a directory listing.
        """
        entries = await self._list_directory(locator.path_listing_url(self.config))
        return [
            entry.name[: -len(JSON_SUFFIX)]
            for entry in entries
            if entry.type == DirectoryEntryType.FILE
            and not entry.name.startswith("_")
            and entry.name.endswith(JSON_SUFFIX)
        ]

    async def get_chain(self, name: str) -> Optional[ChainInfo]:
        """Get the deserialized `chain.json` of a chain.

        Args:
            name: The chain name. Must match the chain's directory in the registry root.

        Returns:
            The chain info, or None if the chain has no `chain.json` at this ref.
        """
        return await self._get_file(locator.chain_url(self.config, name), ChainInfo)

    async def get_assets(self, name: str) -> Optional[AssetList]:
        """Get the deserialized `assetlist.json` of a chain.

        Args:
            name: The chain name. Must match the chain's directory in the registry root.

        Returns:
            The asset list, or None if the chain has no `assetlist.json` at this ref.
        """
        return await self._get_file(locator.asset_list_url(self.config, name), AssetList)

    async def get_path(self, chain_a: str, chain_b: str) -> Optional[IBCPath]:
        """Get the deserialized IBC path between two chains.

        The chains may be given in either order.

        Returns:
            The path, or None if the registry has no path between the chains at this ref.
        """
        return await self._get_file(locator.path_url(self.config, chain_a, chain_b), IBCPath)
