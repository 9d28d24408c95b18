"""Unit tests for the resource locator."""

import pytest

from chain_registry.domains.registry import locator
from chain_registry.domains.registry.tests.conftest import LISTING_BASE, RAW_BASE, TEST_REF
from chain_registry.domains.registry.types import RepoConfig, RepoRef


def test_chain_listing_url(repo_config):
    assert locator.chain_listing_url(repo_config) == f"{LISTING_BASE}?ref={TEST_REF}"


def test_path_listing_url(repo_config):
    assert locator.path_listing_url(repo_config) == f"{LISTING_BASE}/_IBC?ref={TEST_REF}"


def test_chain_and_asset_urls(repo_config):
    assert locator.chain_url(repo_config, "osmosis") == f"{RAW_BASE}/{TEST_REF}/osmosis/chain.json"
    assert (
        locator.asset_list_url(repo_config, "osmosis")
        == f"{RAW_BASE}/{TEST_REF}/osmosis/assetlist.json"
    )


def test_path_url_orders_chains(repo_config):
    expected = f"{RAW_BASE}/{TEST_REF}/_IBC/cosmoshub-osmosis.json"
    assert locator.path_url(repo_config, "cosmoshub", "osmosis") == expected
    assert locator.path_url(repo_config, "osmosis", "cosmoshub") == expected


@pytest.mark.parametrize(
    "chain_a, chain_b",
    [
        ("osmosis", "cosmoshub"),
        ("juno", "juno"),
        ("terra2", "terra"),
        ("Osmosis", "osmosis"),
        ("a", ""),
    ],
)
def test_pair_functions_are_order_independent(repo_config, chain_a, chain_b):
    assert locator.canonical_pair(chain_a, chain_b) == locator.canonical_pair(chain_b, chain_a)
    assert locator.path_name(chain_a, chain_b) == locator.path_name(chain_b, chain_a)
    assert locator.path_url(repo_config, chain_a, chain_b) == locator.path_url(
        repo_config, chain_b, chain_a
    )


def test_canonical_pair_is_sorted():
    assert locator.canonical_pair("terra2", "terra") == ("terra", "terra2")
    assert locator.path_name("terra2", "terra") == "terra-terra2"


def test_latest_ref_uses_default_branch():
    config = RepoConfig(
        ref=RepoRef.latest(), listing_base_url=LISTING_BASE, raw_file_base_url=RAW_BASE
    )
    assert locator.chain_listing_url(config) == f"{LISTING_BASE}?ref=master"
    assert locator.chain_url(config, "juno") == f"{RAW_BASE}/master/juno/chain.json"


def test_split_path_name():
    assert locator.split_path_name("cosmoshub-osmosis") == ("cosmoshub", "osmosis")
    # Splits on the first separator only
    assert locator.split_path_name("axelar-cosmos-testnet") == ("axelar", "cosmos-testnet")


@pytest.mark.parametrize("name", ["cosmoshub", "-osmosis", "cosmoshub-", ""])
def test_split_path_name_rejects_malformed(name):
    with pytest.raises(ValueError):
        locator.split_path_name(name)


def test_split_inverts_path_name():
    assert locator.split_path_name(locator.path_name("osmosis", "juno")) == ("juno", "osmosis")
