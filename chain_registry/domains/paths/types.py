"""Types for querying cached IBC paths."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from chain_registry.schemas import IBCPath, Tags


@dataclass(frozen=True)
class Tag:
    """A channel tag filter: matches channels whose tag ``field`` equals ``value``.

    Use one of the concrete variants, e.g. ``Dex("osmosis")`` or ``Preferred(True)``.
    """

    field: ClassVar[str]
    value: Any

    def __post_init__(self) -> None:
        if not hasattr(type(self), "field"):
            raise TypeError(
                f"{type(self).__name__} is not a tag variant; "
                "use Dex, Preferred, Properties or Status"
            )

    def matches(self, tags: Tags) -> bool:
        """Whether a channel's tags satisfy this filter."""
        return getattr(tags, self.field) == self.value


@dataclass(frozen=True)
class Dex(Tag):
    """Channel is associated with the named DEX."""

    field: ClassVar[str] = "dex"
    value: str


@dataclass(frozen=True)
class Preferred(Tag):
    """Channel is (or is not) the preferred channel between its chains."""

    field: ClassVar[str] = "preferred"
    value: bool


@dataclass(frozen=True)
class Properties(Tag):
    """Channel carries the given free-form properties string."""

    field: ClassVar[str] = "properties"
    value: str


@dataclass(frozen=True)
class Status(Tag):
    """Channel has the given lifecycle status, e.g. ``live``."""

    field: ClassVar[str] = "status"
    value: str


class ChannelMatch(str, Enum):
    """How many of a path's channels must match a tag for the path to match."""

    ANY = "any"
    ALL = "all"


@dataclass(frozen=True)
class CachedPath:
    """A path held by the cache under its lexicographically sorted chain pair."""

    key: tuple[str, str]
    descriptor: IBCPath
