"""In-memory cache of every IBC path in the registry.

Building the cache sends one request per path, so it is slow; every query
afterwards is a dict read with no I/O. The cache is immutable and never
refreshes. Build a new one to pick up registry changes.
"""

import asyncio
from contextlib import AsyncExitStack
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple

from tenacity import AsyncRetrying, stop_after_attempt

from chain_registry.core.config import CacheFailurePolicy, settings
from chain_registry.core.logging import ContextualLogger
from chain_registry.core.logging import logger as base_logger
from chain_registry.core.retry_helpers import (
    log_retry_attempt,
    retry_if_rate_limit_or_timeout,
    wait_rate_limit_with_backoff,
)
from chain_registry.domains.paths.exceptions import PathCacheBuildError
from chain_registry.domains.paths.types import CachedPath, ChannelMatch, Tag
from chain_registry.domains.registry.client import RegistryClient
from chain_registry.domains.registry.locator import canonical_pair, split_path_name
from chain_registry.domains.registry.protocols import RegistryClientProtocol
from chain_registry.schemas import IBCPath

cache_logger = base_logger.with_prefix("PathCache: ").with_context(component="path_cache")

# (path name, descriptor or None, error or None)
_FetchResult = Tuple[str, Optional[IBCPath], Optional[Exception]]


class PathCache:
    """IBC paths keyed by their sorted chain pair, filterable by channel tag.

    Usage:
        cache = await PathCache.build()
        hub_osmo = cache.get("osmosis", "cosmoshub")
        osmosis_dex = cache.filter(Dex("osmosis"))
    """

    def __init__(
        self,
        entries: Iterable[CachedPath] = (),
        *,
        failures: Optional[Mapping[str, Exception]] = None,
        missing: Iterable[str] = (),
    ):
        """Initialize the cache from already fetched paths.

        Most callers want ``PathCache.build()`` instead.

        Args:
            entries: Cached paths, in the order queries should return them.
                A later entry for an existing key is ignored.
            failures: Path names that could not be fetched, with the error.
            missing: Path names that were listed but had no document.
        """
        self._paths: dict[Tuple[str, str], IBCPath] = {}
        for entry in entries:
            key = canonical_pair(*entry.key)
            self._paths.setdefault(key, entry.descriptor)
        self._failures = MappingProxyType(dict(failures or {}))
        self._missing = tuple(missing)

    @classmethod
    async def build(
        cls,
        client: Optional[RegistryClientProtocol] = None,
        *,
        concurrency: Optional[int] = None,
        failure_policy: Optional[CacheFailurePolicy] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        logger: Optional[ContextualLogger] = None,
    ) -> "PathCache":
        """Fetch every path in the registry and build a cache from them.

        Args:
            client: Registry to read from; defaults to a RegistryClient built from settings.
                A RegistryClient without a shared HTTP client gets one for the build.
            concurrency: Maximum fetches in flight; defaults to settings.PATH_CACHE_CONCURRENCY.
            failure_policy: SKIP leaves failed paths out of the cache and records them
                in ``failures``; ABORT raises on the first failure. Defaults to
                settings.PATH_CACHE_FAILURE_POLICY.
            timeout: Deadline in seconds for fetching all paths. None waits indefinitely.
            max_attempts: Attempts per path when rate limited or timed out; defaults to
                settings.PATH_CACHE_MAX_ATTEMPTS. Other errors are never retried.
            logger: Contextual logger to use instead of the module default.

        Returns:
            The built cache.

        Raises:
            ChainRegistryException: If listing the paths fails.
            PathCacheBuildError: If the policy is ABORT and a path fails, or the
                deadline passes.
            ValueError: If concurrency or max_attempts is below 1.
        """
        concurrency = concurrency if concurrency is not None else settings.PATH_CACHE_CONCURRENCY
        failure_policy = failure_policy or settings.PATH_CACHE_FAILURE_POLICY
        max_attempts = max_attempts if max_attempts is not None else settings.PATH_CACHE_MAX_ATTEMPTS
        logger = logger or cache_logger
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        async with AsyncExitStack() as stack:
            if client is None:
                client = RegistryClient()
            if isinstance(client, RegistryClient) and not client.has_shared_http_client:
                await stack.enter_async_context(client)

            names = await client.list_paths()
            logger.info(f"Fetching {len(names)} paths with concurrency {concurrency}")

            results = await cls._fetch_all(
                client,
                names,
                concurrency=concurrency,
                failure_policy=CacheFailurePolicy(failure_policy),
                timeout=timeout,
                max_attempts=max_attempts,
                logger=logger,
            )

        return cls._from_results(results, logger)

    @classmethod
    async def _fetch_all(
        cls,
        client: RegistryClientProtocol,
        names: List[str],
        *,
        concurrency: int,
        failure_policy: CacheFailurePolicy,
        timeout: Optional[float],
        max_attempts: int,
        logger: ContextualLogger,
    ) -> List[_FetchResult]:
        """Fetch all paths under a semaphore; results come back in listing order."""
        semaphore = asyncio.Semaphore(concurrency)

        async def _fetch(name: str) -> _FetchResult:
            async with semaphore:
                try:
                    chain_a, chain_b = split_path_name(name)
                    path = await cls._fetch_path(client, chain_a, chain_b, max_attempts, logger)
                    return name, path, None
                except Exception as e:
                    if failure_policy == CacheFailurePolicy.ABORT:
                        raise PathCacheBuildError(f"could not fetch path {name}: {e}") from e
                    return name, None, e

        tasks = [asyncio.ensure_future(_fetch(name)) for name in names]
        try:
            return await asyncio.wait_for(asyncio.gather(*tasks), timeout)
        except asyncio.TimeoutError as e:
            fetched = sum(1 for t in tasks if t.done() and not t.cancelled())
            raise PathCacheBuildError(
                f"timed out after {timeout}s with {fetched} of {len(tasks)} paths fetched"
            ) from e
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

    @staticmethod
    async def _fetch_path(
        client: RegistryClientProtocol,
        chain_a: str,
        chain_b: str,
        max_attempts: int,
        logger: ContextualLogger,
    ) -> Optional[IBCPath]:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max_attempts),
            retry=retry_if_rate_limit_or_timeout,
            wait=wait_rate_limit_with_backoff,
            before_sleep=log_retry_attempt(logger, f"Path {chain_a}-{chain_b}", max_attempts),
            reraise=True,
        ):
            with attempt:
                return await client.get_path(chain_a, chain_b)
        return None  # pragma: no cover

    @classmethod
    def _from_results(cls, results: List[_FetchResult], logger: ContextualLogger) -> "PathCache":
        entries: List[CachedPath] = []
        failures: dict[str, Exception] = {}
        missing: List[str] = []

        for name, path, error in results:
            if error is not None:
                logger.warning(f"Skipping path {name}: {error}")
                failures[name] = error
            elif path is None:
                logger.debug(f"Path {name} was listed but has no document")
                missing.append(name)
            else:
                entries.append(CachedPath(key=cls._cache_key(name, path), descriptor=path))

        cache = cls(entries, failures=failures, missing=missing)
        logger.info(
            f"Cached {len(cache)} paths ({len(failures)} failed, {len(missing)} missing)"
        )
        return cache

    @staticmethod
    def _cache_key(name: str, path: IBCPath) -> Tuple[str, str]:
        # "a-b-c" names the file for both ("a-b", "c") and ("a", "b-c"); the document decides
        chain_1, chain_2 = path.chain_1.chain_name, path.chain_2.chain_name
        if chain_1 and chain_2:
            return canonical_pair(chain_1, chain_2)
        return canonical_pair(*split_path_name(name))

    def get(self, chain_a: str, chain_b: str) -> Optional[IBCPath]:
        """Get the path between two chains, in either order."""
        return self._paths.get(canonical_pair(chain_a, chain_b))

    def filter(self, tag: Tag, *, match: ChannelMatch = ChannelMatch.ANY) -> List[IBCPath]:
        """Get every path whose channels match a tag.

        Args:
            tag: The tag filter, e.g. ``Dex("osmosis")``.
            match: ANY (default) keeps a path if at least one channel matches;
                ALL requires every channel to match. A path without channels
                never matches.

        Returns:
            Matching paths in cache order.
        """
        quantifier = all if ChannelMatch(match) == ChannelMatch.ALL else any
        return [
            path
            for path in self._paths.values()
            if path.channels and quantifier(tag.matches(channel.tags) for channel in path.channels)
        ]

    def keys(self) -> List[Tuple[str, str]]:
        """Sorted chain pairs of all cached paths, in cache order."""
        return list(self._paths)

    def paths(self) -> List[IBCPath]:
        """All cached paths, in cache order."""
        return list(self._paths.values())

    @property
    def failures(self) -> Mapping[str, Exception]:
        """Path names that could not be fetched during the build, with their errors."""
        return self._failures

    @property
    def missing(self) -> Tuple[str, ...]:
        """Path names that were listed but returned no document."""
        return self._missing

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return canonical_pair(*pair) in self._paths

    def __iter__(self) -> Iterator[CachedPath]:
        for key, path in self._paths.items():
            yield CachedPath(key=key, descriptor=path)
