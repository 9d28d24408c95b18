"""Settings for chain_registry.

All defaults are defined here. Uses Pydantic Settings for automatic env var loading:

    CHAIN_REGISTRY_REF=latest
    CHAIN_REGISTRY_PATH_CACHE_CONCURRENCY=16
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chain_registry.core.config.enums import CacheFailurePolicy
from chain_registry.core.constants import (
    DEFAULT_GIT_REF,
    DEFAULT_LISTING_BASE_URL,
    DEFAULT_RAW_FILE_BASE_URL,
    DEFAULT_USER_AGENT,
)


class Settings(BaseSettings):
    """Registry client settings.

    Attributes:
        REF: Git sha to pin the registry to, or ``latest`` for the default branch.
        LISTING_BASE_URL: GitHub contents API URL of the registry repository.
        RAW_FILE_BASE_URL: Raw file host URL of the registry repository.
        HTTP_TIMEOUT: Per-request timeout in seconds.
        USER_AGENT: Value of the User-Agent header sent with every request.
        PATH_CACHE_CONCURRENCY: Maximum path fetches in flight while building a cache.
        PATH_CACHE_FAILURE_POLICY: Whether a failed path is skipped or aborts the build.
        PATH_CACHE_MAX_ATTEMPTS: Attempts per path when a fetch is rate limited or times out.
        LOG_LEVEL: Level of the ``chain_registry`` logger.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAIN_REGISTRY_",
        extra="ignore",
    )

    REF: str = DEFAULT_GIT_REF
    LISTING_BASE_URL: str = DEFAULT_LISTING_BASE_URL
    RAW_FILE_BASE_URL: str = DEFAULT_RAW_FILE_BASE_URL

    HTTP_TIMEOUT: float = Field(30.0, gt=0)
    USER_AGENT: str = DEFAULT_USER_AGENT

    PATH_CACHE_CONCURRENCY: int = Field(8, ge=1)
    PATH_CACHE_FAILURE_POLICY: CacheFailurePolicy = CacheFailurePolicy.SKIP
    PATH_CACHE_MAX_ATTEMPTS: int = Field(1, ge=1)

    LOG_LEVEL: str = "INFO"

    @field_validator("REF")
    @classmethod
    def validate_ref(cls, v: str) -> str:
        """Reject an empty ref."""
        v = v.strip()
        if not v:
            raise ValueError("REF must be a git sha or 'latest'")
        return v

    @field_validator("LISTING_BASE_URL", "RAW_FILE_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Base URLs are joined with '/', so drop any trailing one."""
        return v.rstrip("/")
