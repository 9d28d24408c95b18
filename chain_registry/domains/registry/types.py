"""Value objects identifying which registry revision to read and where it lives."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from chain_registry.core.config import Settings, settings
from chain_registry.core.constants import (
    DEFAULT_GIT_REF,
    DEFAULT_LISTING_BASE_URL,
    DEFAULT_RAW_FILE_BASE_URL,
    LATEST_BRANCH,
)

LATEST_ALIAS = "latest"


class RepoRef(BaseModel):
    """Git ref of the registry: the latest commit on the default branch, or a pinned sha.

    Usage:
        RepoRef.latest().resolve()     # "master"
        RepoRef.pinned("1ec726b").resolve()  # "1ec726b"
    """

    model_config = ConfigDict(frozen=True)

    sha: Optional[str] = None

    @field_validator("sha")
    @classmethod
    def validate_sha(cls, v: Optional[str]) -> Optional[str]:
        """A pinned ref needs a non-empty revision."""
        if v is not None and not v.strip():
            raise ValueError("pinned ref requires a non-empty revision")
        return v.strip() if v is not None else None

    @classmethod
    def latest(cls) -> "RepoRef":
        """Ref tracking the mutable default branch."""
        return cls()

    @classmethod
    def pinned(cls, sha: str) -> "RepoRef":
        """Ref fixed to one revision."""
        return cls(sha=sha)

    @classmethod
    def parse(cls, value: str) -> "RepoRef":
        """Build a ref from a configuration string; ``latest`` selects the default branch."""
        if value.strip().lower() == LATEST_ALIAS:
            return cls.latest()
        return cls.pinned(value)

    @property
    def is_latest(self) -> bool:
        """Whether this ref follows the default branch."""
        return self.sha is None

    def resolve(self) -> str:
        """The string used in URLs for this ref."""
        return LATEST_BRANCH if self.sha is None else self.sha

    def __str__(self) -> str:
        """Same as resolve()."""
        return self.resolve()


class RepoConfig(BaseModel):
    """Which registry revision to read and the two hosts it is read from.

    ``listing_base_url`` is the GitHub contents API of the repository and
    ``raw_file_base_url`` the raw file host. Both are stored without a trailing slash.
    """

    model_config = ConfigDict(frozen=True)

    ref: RepoRef = Field(default_factory=lambda: RepoRef.pinned(DEFAULT_GIT_REF))
    listing_base_url: str = DEFAULT_LISTING_BASE_URL
    raw_file_base_url: str = DEFAULT_RAW_FILE_BASE_URL

    @model_validator(mode="before")
    @classmethod
    def coerce_ref(cls, data: Any) -> Any:
        """Accept a plain string for ``ref``."""
        if isinstance(data, dict) and isinstance(data.get("ref"), str):
            data = {**data, "ref": RepoRef.parse(data["ref"])}
        return data

    @field_validator("listing_base_url", "raw_file_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Base URLs are joined with '/'."""
        return v.rstrip("/")

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "RepoConfig":
        """Build a config from application settings."""
        source = source or settings
        return cls(
            ref=RepoRef.parse(source.REF),
            listing_base_url=source.LISTING_BASE_URL,
            raw_file_base_url=source.RAW_FILE_BASE_URL,
        )

    @property
    def resolved_ref(self) -> str:
        """Resolved ref string."""
        return self.ref.resolve()
