"""Models for the `assetlist.json` file in each chain's directory of the registry."""

from typing import List, Optional

from pydantic import Field

from chain_registry.schemas._base import RegistryModel


class DenomUnit(RegistryModel):
    """A unit of an asset and its exponent relative to the base denom."""

    denom: str = ""
    exponent: int = 0
    aliases: List[str] = Field(default_factory=list)


class LogoURIs(RegistryModel):
    """Logo images of an asset."""

    png: str = ""
    svg: str = ""
    jpeg: str = ""


class IbcOrigin(RegistryModel):
    """Where an IBC-transferred asset came from."""

    source_channel: str = ""
    dst_channel: str = ""
    source_denom: str = ""


class TraceCounterparty(RegistryModel):
    """The originating side of a trace."""

    chain_name: str = ""
    base_denom: str = ""
    channel_id: str = ""
    contract: str = ""
    port: str = ""


class TraceChain(RegistryModel):
    """The local side of a trace."""

    channel_id: str = ""
    path: str = ""
    contract: str = ""
    port: str = ""


class Trace(RegistryModel):
    """One hop in the history of how an asset arrived on this chain."""

    type: str = ""
    counterparty: TraceCounterparty = Field(default_factory=TraceCounterparty)
    chain: TraceChain = Field(default_factory=TraceChain)
    provider: str = ""


class Asset(RegistryModel):
    """A fungible asset recognized on a chain."""

    description: str = ""
    type_asset: str = ""
    address: str = ""
    denom_units: List[DenomUnit] = Field(default_factory=list)
    base: str = ""
    name: str = ""
    display: str = ""
    symbol: str = ""
    logo_uris: LogoURIs = Field(default_factory=LogoURIs, alias="logo_URIs")
    coingecko_id: str = ""
    keywords: List[str] = Field(default_factory=list)
    ibc: Optional[IbcOrigin] = None
    traces: List[Trace] = Field(default_factory=list)


class AssetList(RegistryModel):
    """Deserialized `assetlist.json` of a single chain."""

    schema_: str = Field("", alias="$schema")
    chain_name: str = ""
    assets: List[Asset] = Field(default_factory=list)
