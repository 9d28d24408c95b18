"""Configuration enums."""

from enum import Enum


class CacheFailurePolicy(str, Enum):
    """What a path cache build does when a single path cannot be fetched."""

    SKIP = "skip"  # log, record and leave the path out of the cache
    ABORT = "abort"  # cancel the build and raise
