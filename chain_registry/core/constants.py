"""Constants shared across the registry client."""

VERSION = "0.1.0"

# Git ref the registry is pinned to unless configured otherwise
DEFAULT_GIT_REF = "1ec726b7308a71ce0cb02916b1929979c6f2e39d"

# Mutable branch name that RepoRef.latest() resolves to
LATEST_BRANCH = "master"

DEFAULT_LISTING_BASE_URL = "https://api.github.com/repos/cosmos/chain-registry/contents"
DEFAULT_RAW_FILE_BASE_URL = "https://raw.githubusercontent.com/cosmos/chain-registry"

DEFAULT_USER_AGENT = f"chain-registry/{VERSION}"

# Directory holding the IBC path descriptors
IBC_DIRECTORY = "_IBC"
PATH_NAME_SEPARATOR = "-"
JSON_SUFFIX = ".json"
