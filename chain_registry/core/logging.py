"""Logging for chain_registry.

Wraps the standard library logger in a ``LoggerAdapter`` that carries
structured context dimensions and an optional message prefix.

Usage:
    from chain_registry.core.logging import logger

    cache_logger = logger.with_prefix("PathCache: ").with_context(component="path_cache")
    cache_logger.info("Built cache")
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

from chain_registry.core.config import settings

LOGGER_NAME = "chain_registry"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that attaches context dimensions to every record.

    Context is exposed on the record as ``record.context`` and rendered as
    ``key=value`` pairs after the message. Both ``with_context`` and
    ``with_prefix`` return new adapters and never mutate the receiver.
    """

    def __init__(
        self,
        logger: logging.Logger,
        prefix: str = "",
        dimensions: Optional[dict[str, Any]] = None,
    ):
        """Initialize the adapter."""
        super().__init__(logger, dict(dimensions or {}))
        self.prefix = prefix
        self.dimensions: dict[str, Any] = dict(dimensions or {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, Any]:
        """Apply prefix and context to a log call."""
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("context", dict(self.dimensions))
        kwargs["extra"] = extra
        if self.dimensions:
            rendered = " ".join(f"{key}={value}" for key, value in self.dimensions.items())
            return f"{self.prefix}{msg} [{rendered}]", kwargs
        return f"{self.prefix}{msg}", kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a logger with additional context dimensions."""
        merged = {**self.dimensions, **dimensions}
        return ContextualLogger(self.logger, prefix=self.prefix, dimensions=merged)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a logger whose messages start with ``prefix``."""
        return ContextualLogger(
            self.logger, prefix=f"{self.prefix}{prefix}", dimensions=self.dimensions
        )


def _configure_base_logger() -> logging.Logger:
    base = logging.getLogger(LOGGER_NAME)
    base.setLevel(settings.LOG_LEVEL.upper())
    if not base.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        base.addHandler(handler)
    return base


logger = ContextualLogger(_configure_base_logger())
