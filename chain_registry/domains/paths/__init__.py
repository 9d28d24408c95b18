"""Paths domain: bulk-loaded, tag-filterable cache of IBC paths."""

from chain_registry.domains.paths.cache import PathCache
from chain_registry.domains.paths.exceptions import PathCacheBuildError
from chain_registry.domains.paths.types import (
    CachedPath,
    ChannelMatch,
    Dex,
    Preferred,
    Properties,
    Status,
    Tag,
)

__all__ = [
    "CachedPath",
    "ChannelMatch",
    "Dex",
    "PathCache",
    "PathCacheBuildError",
    "Preferred",
    "Properties",
    "Status",
    "Tag",
]
