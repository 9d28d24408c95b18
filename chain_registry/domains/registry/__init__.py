"""Registry domain: revision selection, URL construction and the HTTP client."""

from chain_registry.domains.registry.client import RegistryClient
from chain_registry.domains.registry.protocols import RegistryClientProtocol
from chain_registry.domains.registry.types import RepoConfig, RepoRef

__all__ = [
    "RegistryClient",
    "RegistryClientProtocol",
    "RepoConfig",
    "RepoRef",
]
