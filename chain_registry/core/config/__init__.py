"""Configuration module for chain_registry.

Provides centralized configuration management loaded from the environment.

Usage:
    from chain_registry.core.config import settings, CacheFailurePolicy

    if settings.PATH_CACHE_FAILURE_POLICY == CacheFailurePolicy.ABORT:
        ...
"""

from chain_registry.core.config.enums import CacheFailurePolicy
from chain_registry.core.config.settings import Settings

__all__ = [
    "Settings",
    "CacheFailurePolicy",
    "settings",
]

# Singleton settings instance
settings = Settings()
