"""Tests for the cluster client."""

import pytest

from licensechain_solana.clients.cluster_client import DEFAULT_EXPLORER_URL, ClusterClient
from licensechain_solana.config import SolanaConfig
from licensechain_solana.utils.errors import ErrorCode, RPCError, SolanaError
from tests.fixtures.common import API_KEY, BASE_URL, MINT, OWNER, POOL, RECIPIENT, make_transport, rpc_result


def make_client(config, handler):
    transport, recorder = make_transport(handler)
    return ClusterClient(config, transport), recorder


def vote_account(node, vote, epoch_credits):
    return {
        "nodePubkey": node,
        "votePubkey": vote,
        "commission": 5,
        "lastVote": 250000000,
        "rootSlot": 249999968,
        "epochCredits": epoch_credits,
        "activatedStake": 42000000000000,
        "epochVoteAccount": True,
    }


@pytest.mark.asyncio
async def test_get_cluster_info_for_custom_endpoint(config):
    client, recorder = make_client(config, lambda request: rpc_result([{"pubkey": OWNER}, {"pubkey": MINT}]))

    info = await client.get_cluster_info()

    assert info.name == "Custom"
    assert info.rpc_url == "https://rpc.test.solana.com"
    assert info.ws_url == "wss://rpc.test.solana.com"
    assert info.explorer_url == DEFAULT_EXPLORER_URL
    assert info.node_count == 2
    assert recorder.last_json["method"] == "getClusterNodes"


@pytest.mark.asyncio
async def test_get_cluster_info_for_public_cluster():
    config = SolanaConfig(api_key=API_KEY, base_url=BASE_URL, rpc_url="https://api.devnet.solana.com")
    client, _ = make_client(config, lambda request: rpc_result([]))

    info = await client.get_cluster_info()

    assert info.name == "Devnet"
    assert info.explorer_url == "https://explorer.solana.com/?cluster=devnet"
    assert info.node_count == 0


@pytest.mark.asyncio
async def test_get_cluster_info_plain_http_endpoint():
    config = SolanaConfig(api_key=API_KEY, base_url=BASE_URL, rpc_url="http://localhost:8899")
    client, _ = make_client(config, lambda request: rpc_result([]))

    info = await client.get_cluster_info()

    assert info.ws_url == "ws://localhost:8899"


@pytest.mark.asyncio
async def test_get_cluster_info_requires_node_list(config):
    client, _ = make_client(config, lambda request: rpc_result({"nodes": []}))

    with pytest.raises(RPCError):
        await client.get_cluster_info()


@pytest.mark.asyncio
async def test_get_validators(config):
    client, recorder = make_client(config, lambda request: rpc_result({
        "current": [vote_account(OWNER, RECIPIENT, [[600, 1000, 900], [601, 1500, 1000]])],
        "delinquent": [vote_account(MINT, POOL, [])],
    }))

    current, delinquent = await client.get_validators()

    assert current.identity == OWNER
    assert current.vote_account == RECIPIENT
    assert current.credits == 1500
    assert current.activated_stake == 42000000000000
    assert current.version is None
    assert not current.delinquent
    assert delinquent.delinquent
    assert delinquent.credits == 0
    assert recorder.last_json["method"] == "getVoteAccounts"


@pytest.mark.asyncio
async def test_get_validators_wraps_unexpected_failures(config):
    client, _ = make_client(config, lambda request: rpc_result({"current": [None], "delinquent": []}))

    with pytest.raises(SolanaError) as exc_info:
        await client.get_validators()

    assert exc_info.value.code == ErrorCode.VALIDATORS_ERROR
    assert isinstance(exc_info.value.__cause__, AttributeError)
