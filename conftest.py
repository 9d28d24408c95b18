"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and chain_registry/domains/),
making its fixtures available to centralized tests AND colocated domain tests.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables, set before any chain_registry module import
# Uses setdefault so real env vars are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("CHAIN_REGISTRY_LOG_LEVEL", "DEBUG")
os.environ.setdefault("CHAIN_REGISTRY_HTTP_TIMEOUT", "5")


# ---------------------------------------------------------------------------
# Shared document builders
# ---------------------------------------------------------------------------


def make_channel_payload(
    *,
    dex: str = "",
    preferred: bool = False,
    properties: str = "",
    status: str = "live",
    channel_1: str = "channel-0",
    channel_2: str = "channel-141",
) -> dict:
    """Build a channel entry as it appears in an `_IBC/*.json` file."""
    return {
        "chain_1": {"channel_id": channel_1, "port_id": "transfer"},
        "chain_2": {"channel_id": channel_2, "port_id": "transfer"},
        "ordering": "unordered",
        "version": "ics20-1",
        "tags": {
            "dex": dex,
            "preferred": preferred,
            "properties": properties,
            "status": status,
        },
    }


def make_path_payload(chain_1: str, chain_2: str, channels: list[dict] | None = None) -> dict:
    """Build an `_IBC/<chain_1>-<chain_2>.json` document."""
    return {
        "$schema": "../ibc_data.schema.json",
        "chain_1": {
            "chain_name": chain_1,
            "client_id": "07-tendermint-259",
            "connection_id": "connection-257",
        },
        "chain_2": {
            "chain_name": chain_2,
            "client_id": "07-tendermint-1",
            "connection_id": "connection-1",
        },
        "channels": channels if channels is not None else [make_channel_payload()],
    }


def make_chain_payload(chain_name: str = "cosmoshub") -> dict:
    """Build a `chain.json` document with every section populated."""
    return {
        "$schema": "../chain.schema.json",
        "chain_name": chain_name,
        "status": "live",
        "network_type": "mainnet",
        "pretty_name": "Cosmos Hub",
        "chain_id": "cosmoshub-4",
        "bech32_prefix": "cosmos",
        "daemon_name": "gaiad",
        "node_home": "$HOME/.gaia",
        "slip44": 118,
        "genesis": {
            "genesis_url": "https://github.com/cosmos/mainnet/raw/master/genesis.cosmoshub-4.json.gz"
        },
        "codebase": {
            "git_repo": "https://github.com/cosmos/gaia",
            "recommended_version": "v7.0.2",
            "compatible_versions": ["v7.0.0", "v7.0.1", "v7.0.2"],
            "binaries": {
                "linux/amd64": "https://github.com/cosmos/gaia/releases/download/v7.0.2/gaiad-v7.0.2-linux-amd64",
                "darwin/amd64": "https://github.com/cosmos/gaia/releases/download/v7.0.2/gaiad-v7.0.2-darwin-amd64",
            },
            "cosmos_sdk_version": "0.45",
            "tendermint_version": "0.34",
            "cosmwasm_enabled": False,
        },
        "peers": {
            "seeds": [
                {
                    "id": "bf8328b66dceb4987e5cd94430af66045e59899f",
                    "address": "public-seed.cosmos.vitwit.com:26656",
                    "provider": "vitwit",
                }
            ],
            "persistent_peers": [
                {"id": "ee27245d88c632a556cf72cc7f3587380c09b469", "address": "45.79.249.253:26656"}
            ],
        },
        "apis": {
            "rpc": [{"address": "https://rpc-cosmoshub.keplr.app", "provider": "chainapsis"}],
            "rest": [{"address": "https://lcd-cosmoshub.keplr.app"}],
            "grpc": [{"address": "grpc-cosmoshub-ia.notional.ventures:443", "provider": "notional"}],
        },
        "fees": {
            "fee_tokens": [
                {
                    "denom": "uatom",
                    "fixed_min_gas_price": 0,
                    "low_gas_price": 0.01,
                    "average_gas_price": 0.025,
                    "high_gas_price": 0.03,
                }
            ]
        },
        "staking": {"staking_tokens": [{"denom": "uatom"}]},
        "website": "https://cosmos.network",
        "key_algos": ["secp256k1"],
        "explorers": [
            {
                "kind": "mintscan",
                "url": "https://www.mintscan.io/cosmos",
                "tx_page": "https://www.mintscan.io/cosmos/txs/${txHash}",
            }
        ],
    }


def make_asset_list_payload(chain_name: str = "osmosis") -> dict:
    """Build an `assetlist.json` document."""
    return {
        "$schema": "../assetlist.schema.json",
        "chain_name": chain_name,
        "assets": [
            {
                "description": "The native token of Osmosis",
                "denom_units": [
                    {"denom": "uosmo", "exponent": 0, "aliases": []},
                    {"denom": "osmo", "exponent": 6},
                ],
                "base": "uosmo",
                "name": "Osmosis",
                "display": "osmo",
                "symbol": "OSMO",
                "logo_URIs": {
                    "png": "https://raw.githubusercontent.com/cosmos/chain-registry/master/osmosis/images/osmo.png",
                    "svg": "https://raw.githubusercontent.com/cosmos/chain-registry/master/osmosis/images/osmo.svg",
                },
                "coingecko_id": "osmosis",
                "keywords": ["dex", "staking"],
            },
            {
                "description": "IBC Atom from the Cosmos Hub",
                "denom_units": [
                    {"denom": "ibc/27394FB0", "exponent": 0, "aliases": ["uatom"]},
                    {"denom": "atom", "exponent": 6},
                ],
                "base": "ibc/27394FB0",
                "name": "Cosmos Hub Atom",
                "display": "atom",
                "symbol": "ATOM",
                "ibc": {
                    "source_channel": "channel-141",
                    "dst_channel": "channel-0",
                    "source_denom": "uatom",
                },
            },
        ],
    }


@pytest.fixture
def path_payload_factory():
    """Builder for `_IBC` documents: factory(chain_1, chain_2, channels=None)."""
    return make_path_payload


@pytest.fixture
def channel_payload_factory():
    """Builder for channel entries of `_IBC` documents."""
    return make_channel_payload


@pytest.fixture
def chain_payload():
    """A populated cosmoshub `chain.json` document."""
    return make_chain_payload()


@pytest.fixture
def asset_list_payload():
    """A populated osmosis `assetlist.json` document."""
    return make_asset_list_payload()


@pytest.fixture
def path_payload():
    """The cosmoshub-osmosis `_IBC` document."""
    return make_path_payload(
        "cosmoshub",
        "osmosis",
        [make_channel_payload(dex="osmosis", preferred=True)],
    )
