"""Path cache exceptions."""

from chain_registry.core.exceptions import ChainRegistryException


class PathCacheBuildError(ChainRegistryException):
    """Raised when a path cache build is aborted or exceeds its deadline.

    The underlying failure, if any, is chained as ``__cause__``.
    """

    def __init__(self, reason: str):
        self.reason = reason
        self.message = f"Path cache build failed: {reason}"
        super().__init__(self.message)
