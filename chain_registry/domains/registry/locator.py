"""Resource locator: maps logical registry resources to URLs.

Pure string construction with no I/O. Path files are named after the two chain
names sorted lexicographically, so every function taking a chain pair returns
the same value for (a, b) and (b, a).
"""

from chain_registry.core.constants import IBC_DIRECTORY, JSON_SUFFIX, PATH_NAME_SEPARATOR
from chain_registry.domains.registry.types import RepoConfig

CHAIN_FILE = "chain.json"
ASSET_LIST_FILE = "assetlist.json"


def canonical_pair(chain_a: str, chain_b: str) -> tuple[str, str]:
    """Order a chain pair lexicographically."""
    return min(chain_a, chain_b), max(chain_a, chain_b)


def path_name(chain_a: str, chain_b: str) -> str:
    """Registry name of the path between two chains, e.g. ``cosmoshub-osmosis``."""
    lo, hi = canonical_pair(chain_a, chain_b)
    return f"{lo}{PATH_NAME_SEPARATOR}{hi}"


def split_path_name(name: str) -> tuple[str, str]:
    """Split a path name back into its two chain names.

    Splits on the first separator.

    Raises:
        ValueError: If the name does not contain two non-empty chain names.
    """
    chain_a, sep, chain_b = name.partition(PATH_NAME_SEPARATOR)
    if not sep or not chain_a or not chain_b:
        raise ValueError(f"Path name {name!r} is not of the form <chain_a>-<chain_b>")
    return chain_a, chain_b


def chain_listing_url(config: RepoConfig) -> str:
    """Contents API URL listing the registry root."""
    return f"{config.listing_base_url}?ref={config.resolved_ref}"


def path_listing_url(config: RepoConfig) -> str:
    """Contents API URL listing the IBC path directory."""
    return f"{config.listing_base_url}/{IBC_DIRECTORY}?ref={config.resolved_ref}"


def chain_file_path(chain_name: str) -> str:
    """Repository path of a chain's `chain.json`."""
    return f"{chain_name}/{CHAIN_FILE}"


def asset_list_file_path(chain_name: str) -> str:
    """Repository path of a chain's `assetlist.json`."""
    return f"{chain_name}/{ASSET_LIST_FILE}"


def path_file_path(chain_a: str, chain_b: str) -> str:
    """Repository path of the IBC path file between two chains."""
    return f"{IBC_DIRECTORY}/{path_name(chain_a, chain_b)}{JSON_SUFFIX}"


def raw_file_url(config: RepoConfig, file_path: str) -> str:
    """Raw host URL of a repository file at the configured ref."""
    return f"{config.raw_file_base_url}/{config.resolved_ref}/{file_path}"


def chain_url(config: RepoConfig, chain_name: str) -> str:
    return raw_file_url(config, chain_file_path(chain_name))


def asset_list_url(config: RepoConfig, chain_name: str) -> str:
    return raw_file_url(config, asset_list_file_path(chain_name))


def path_url(config: RepoConfig, chain_a: str, chain_b: str) -> str:
    return raw_file_url(config, path_file_path(chain_a, chain_b))
