"""Common test fixtures for LicenseChain Solana tests.

This module provides fixtures and helpers that can be reused across different
test modules. HTTP traffic is served by ``httpx.MockTransport`` handlers.
"""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from licensechain_solana.config import SolanaConfig

API_KEY = "test-api-key"
BASE_URL = "https://api.test.licensechain.com"
RPC_URL = "https://rpc.test.solana.com"

OWNER = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
RECIPIENT = "4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7D4xWLs4gDB4T"
MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
POOL = "58oQChx4yWmvKdwLLZzBi4ChoCc2fqCUWBkwMihLYQo2"
SIGNATURE = "5VERv8NMvzbJMEkV8xnrLkEaWRtSz9CosKDYjCJjBRnbJLgp8uirBgmQpjKhoR4tjF3ZpRzrFmBV6UjKdiSZkQUW"

ENV_VARS = (
    "LICENSECHAIN_API_KEY",
    "LICENSECHAIN_BASE_URL",
    "SOLANA_RPC_URL",
    "LICENSECHAIN_TIMEOUT",
    "LICENSECHAIN_RETRIES",
    "SOLANA_COMMITMENT",
)


class RequestRecorder:
    """MockTransport handler that records every request it serves."""

    def __init__(self, handler: Callable[[httpx.Request], Any]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def make_transport(handler: Callable[[httpx.Request], Any]):
    """Wrap a handler in a recording MockTransport.

    Returns:
        Tuple of (transport, recorder)
    """
    recorder = RequestRecorder(handler)
    return httpx.MockTransport(recorder), recorder


def rpc_result(result: Any) -> httpx.Response:
    return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": result})


def rpc_value(value: Any, slot: int = 100) -> httpx.Response:
    """Context-wrapped JSON-RPC result."""
    return rpc_result({"context": {"slot": slot}, "value": value})


def rest_data(data: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json={"success": True, "data": data})


@pytest.fixture
def config():
    """SDK configuration pointing at mock endpoints."""
    return SolanaConfig(
        api_key=API_KEY,
        base_url=BASE_URL,
        rpc_url=RPC_URL,
        timeout=1000,
        retries=3,
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SDK variables from the environment for the test's duration.

    Each variable is set then deleted so monkeypatch restores the original
    state even when a test loads values from a .env file.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def license_data():
    """License payload as returned by the backend."""
    return {
        "id": "L1",
        "userId": "u1",
        "productId": "p1",
        "licenseKey": "K1",
        "status": "active",
        "createdAt": "2024-01-01T00:00:00Z",
        "expiresAt": "2025-01-01T00:00:00Z",
        "metadata": {"platform": "solana", "createdVia": "sdk"},
    }


@pytest.fixture
def nft_data():
    """NFT payload as returned by the backend."""
    return {
        "mint": MINT,
        "owner": OWNER,
        "metadata": {
            "name": "License Pass",
            "symbol": "LPASS",
            "description": "Access pass",
            "image": "https://example.com/pass.png",
            "attributes": [{"trait_type": "tier", "value": "gold"}],
        },
        "isMutable": True,
        "primarySaleHappened": False,
        "sellerFeeBasisPoints": 500,
        "creators": [{"address": OWNER, "verified": True, "share": 100}],
    }
