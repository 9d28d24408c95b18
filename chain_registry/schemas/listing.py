"""Schemas for GitHub directory listings."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DirectoryEntryType(str, Enum):
    """Kind of a directory listing entry."""

    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"
    SUBMODULE = "submodule"


class DirectoryEntry(BaseModel):
    """One entry of a contents API response. Fields other than name and type are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    type: DirectoryEntryType
