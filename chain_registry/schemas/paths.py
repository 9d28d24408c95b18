"""Models for the IBC path files in the `_IBC/` directory of the registry."""

from typing import List

from pydantic import Field

from chain_registry.schemas._base import RegistryModel


class PathChain(RegistryModel):
    """One side of a path: the chain and the light client / connection it uses."""

    chain_name: str = ""
    client_id: str = ""
    connection_id: str = ""


class ChannelEnd(RegistryModel):
    """One side of a channel."""

    channel_id: str = ""
    port_id: str = ""


class Tags(RegistryModel):
    """Classification tags of a channel."""

    dex: str = ""
    preferred: bool = False
    properties: str = ""
    status: str = ""


class Channel(RegistryModel):
    """A channel opened over the path's connection."""

    chain_1: ChannelEnd = Field(default_factory=ChannelEnd)
    chain_2: ChannelEnd = Field(default_factory=ChannelEnd)
    ordering: str = ""
    version: str = ""
    tags: Tags = Field(default_factory=Tags)


class IBCPath(RegistryModel):
    """Deserialized `_IBC/<chain_1>-<chain_2>.json`.

    ``chain_1`` is always the lexicographically smaller chain name.
    """

    schema_: str = Field("", alias="$schema")
    chain_1: PathChain = Field(default_factory=PathChain)
    chain_2: PathChain = Field(default_factory=PathChain)
    channels: List[Channel] = Field(default_factory=list)
