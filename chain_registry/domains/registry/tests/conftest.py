"""Registry domain test fixtures.

Provides an in-memory stand-in for httpx.AsyncClient that serves canned
responses by URL, and a RegistryClient wired to it.
"""

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from chain_registry.domains.registry.client import RegistryClient
from chain_registry.domains.registry.types import RepoConfig, RepoRef

LISTING_BASE = "https://api.example.test/repos/cosmos/chain-registry/contents"
RAW_BASE = "https://raw.example.test/cosmos/chain-registry"
TEST_REF = "8d84b83cbead0c61de666b709a036cc829426eef"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _response(status_code: int, body=None, *, url: str = RAW_BASE, headers=None) -> httpx.Response:
    """Build an httpx.Response with request set so raise_for_status() works.

    ``body`` may be raw bytes/str (sent as-is) or any JSON-serializable value.
    """
    if isinstance(body, (bytes, str)):
        content = body.encode() if isinstance(body, str) else body
    else:
        content = json.dumps(body if body is not None else {}).encode()
    return httpx.Response(
        status_code=status_code,
        content=content,
        headers=headers,
        request=httpx.Request("GET", url),
    )


def _listing_entry(name: str, entry_type: str) -> dict:
    """A contents API entry, including fields the client ignores."""
    return {
        "name": name,
        "path": name,
        "sha": "0" * 40,
        "size": 0,
        "type": entry_type,
        "url": f"{LISTING_BASE}/{name}",
    }


def _make_mock_client(routes: dict):
    """Build a mock httpx.AsyncClient serving ``routes`` (url -> response or exception).

    Unrouted URLs get a 404.
    """

    async def get(url, *args, **kwargs):
        resp = routes.get(url)
        if resp is None:
            return _response(404, "404: Not Found", url=url)
        if isinstance(resp, Exception):
            raise resp
        return resp

    client = AsyncMock(spec=httpx.AsyncClient)
    client.get = AsyncMock(side_effect=get)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


def _raw_url(file_path: str, ref: str = TEST_REF) -> str:
    return f"{RAW_BASE}/{ref}/{file_path}"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def repo_config() -> RepoConfig:
    """Config pinned to TEST_REF on the test hosts."""
    return RepoConfig(
        ref=RepoRef.pinned(TEST_REF),
        listing_base_url=LISTING_BASE,
        raw_file_base_url=RAW_BASE,
    )


@pytest.fixture
def routes() -> dict:
    """Mutable URL -> response table served by the mock HTTP client."""
    return {}


@pytest.fixture
def mock_http_client(routes):
    """Mock httpx.AsyncClient backed by the ``routes`` fixture."""
    return _make_mock_client(routes)


@pytest.fixture
def registry(repo_config, mock_http_client) -> RegistryClient:
    """RegistryClient using the mock HTTP client."""
    return RegistryClient(repo_config, http_client=mock_http_client, user_agent="chain-registry/test")
