"""Tests for the DeFi manager."""

import pytest

from licensechain_solana.clients.defi_client import DeFiManager
from licensechain_solana.utils.errors import DeFiError, ErrorCode, ValidationError
from tests.fixtures.common import MINT, OWNER, POOL, RECIPIENT, SIGNATURE, make_transport, rest_data

SIGNED = {"transactionSignature": SIGNATURE}


def make_manager(config, handler):
    transport, recorder = make_transport(handler)
    return DeFiManager(config, transport), recorder


@pytest.mark.asyncio
async def test_get_positions(config):
    manager, recorder = make_manager(config, lambda request: rest_data([
        {"protocol": "raydium", "positionType": "liquidity", "amount": "100", "value": "250.5", "apy": 12.0},
        {"protocol": "marinade", "positionType": "staking", "amount": "5", "value": "600"},
    ]))

    positions = await manager.get_positions(OWNER)

    assert [position.position_type for position in positions] == ["liquidity", "staking"]
    assert positions[1].apy is None
    assert recorder.requests[0].url.path == f"/defi/positions/{OWNER}"


@pytest.mark.asyncio
async def test_get_positions_rejects_unknown_type(config):
    manager, _ = make_manager(config, lambda request: rest_data([
        {"protocol": "x", "positionType": "options", "amount": "1", "value": "1"},
    ]))

    with pytest.raises(ValidationError):
        await manager.get_positions(OWNER)


@pytest.mark.asyncio
async def test_pool_listings(config):
    payloads = {
        "/defi/liquidity-pools": [{
            "address": POOL, "tokenA": MINT, "tokenB": RECIPIENT, "reserveA": "1000", "reserveB": "2000",
            "totalSupply": "1414", "fee": 0.25, "apy": 18.2, "volume24h": "50000", "tvl": "3000",
        }],
        "/defi/lending-pools": [{
            "address": POOL, "token": MINT, "totalSupply": "10000", "totalBorrowed": "6000",
            "utilizationRate": 60.0, "supplyRate": 3.1, "borrowRate": 5.4, "apy": 3.2, "collateralFactor": 0.75,
        }],
        "/defi/staking-pools": [{
            "address": POOL, "token": MINT, "totalStaked": "900", "rewardRate": "0.01", "apy": 7.0,
            "lockPeriod": 86400, "minStake": "1", "totalRewards": "55",
        }],
        "/defi/yield-farms": [{
            "address": POOL, "token": MINT, "rewardToken": RECIPIENT, "totalStaked": "900",
            "rewardRate": "0.02", "apy": 25.0, "lockPeriod": 0, "minStake": "1", "totalRewards": "12",
        }],
    }
    manager, _ = make_manager(config, lambda request: rest_data(payloads[request.url.path]))

    liquidity = await manager.get_liquidity_pools()
    lending = await manager.get_lending_pools()
    staking = await manager.get_staking_pools()
    farms = await manager.get_yield_farms()

    assert liquidity[0].token_b == RECIPIENT
    assert liquidity[0].volume24h == "50000"
    assert lending[0].collateral_factor == 0.75
    assert staking[0].lock_period == 86400
    assert farms[0].reward_token == RECIPIENT


@pytest.mark.asyncio
async def test_add_liquidity(config):
    manager, recorder = make_manager(config, lambda request: rest_data(SIGNED))

    signature = await manager.add_liquidity(POOL, "1000", 2000, OWNER)

    assert signature == SIGNATURE
    assert recorder.requests[0].url.path == f"/defi/liquidity-pools/{POOL}/add"
    assert recorder.last_json == {"owner": OWNER, "amountA": "1000", "amountB": "2000", "platform": "solana"}


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", ["-5", "0", "0.0", "abc", "1e9", 1.5, -3])
async def test_add_liquidity_rejects_bad_amounts(config, amount):
    manager, recorder = make_manager(config, lambda request: rest_data(SIGNED))

    with pytest.raises(ValidationError):
        await manager.add_liquidity(POOL, amount, "10", OWNER)

    assert recorder.requests == []


@pytest.mark.asyncio
async def test_remove_liquidity(config):
    manager, recorder = make_manager(config, lambda request: rest_data(SIGNED))

    await manager.remove_liquidity(POOL, "12.5", OWNER)

    assert recorder.requests[0].url.path == f"/defi/liquidity-pools/{POOL}/remove"
    assert recorder.last_json["lpTokens"] == "12.5"


@pytest.mark.asyncio
async def test_swap_tokens(config):
    manager, recorder = make_manager(config, lambda request: rest_data(SIGNED))

    await manager.swap_tokens(MINT, RECIPIENT, "100", "95", OWNER)

    assert recorder.requests[0].url.path == "/defi/swap"
    assert recorder.last_json == {
        "inputMint": MINT,
        "outputMint": RECIPIENT,
        "owner": OWNER,
        "amountIn": "100",
        "minAmountOut": "95",
        "platform": "solana",
    }


@pytest.mark.asyncio
async def test_swap_tokens_rejects_bad_mint(config):
    manager, recorder = make_manager(config, lambda request: rest_data(SIGNED))

    with pytest.raises(ValidationError):
        await manager.swap_tokens("bad-mint", RECIPIENT, "100", "95", OWNER)

    assert recorder.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("method,action", [
    ("supply_liquidity", "supply"),
    ("borrow_liquidity", "borrow"),
    ("repay_liquidity", "repay"),
])
async def test_lending_actions(config, method, action):
    manager, recorder = make_manager(config, lambda request: rest_data(SIGNED))

    assert await getattr(manager, method)(POOL, "50", OWNER) == SIGNATURE
    assert recorder.requests[0].url.path == f"/defi/lending-pools/{POOL}/{action}"
    assert recorder.last_json == {"owner": OWNER, "amount": "50", "platform": "solana"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method,action", [
    ("stake_tokens", "stake"),
    ("unstake_tokens", "unstake"),
])
async def test_staking_actions(config, method, action):
    manager, recorder = make_manager(config, lambda request: rest_data(SIGNED))

    await getattr(manager, method)(POOL, "5", OWNER)

    assert recorder.requests[0].url.path == f"/defi/staking-pools/{POOL}/{action}"


@pytest.mark.asyncio
async def test_claim_and_harvest(config):
    manager, recorder = make_manager(config, lambda request: rest_data(SIGNED))

    await manager.claim_rewards(POOL, OWNER)
    await manager.farm_yield(POOL, "3", OWNER)
    await manager.harvest_yield(POOL, OWNER)

    assert [request.url.path for request in recorder.requests] == [
        f"/defi/staking-pools/{POOL}/claim",
        f"/defi/yield-farms/{POOL}/farm",
        f"/defi/yield-farms/{POOL}/harvest",
    ]
    assert recorder.last_json == {"owner": OWNER, "platform": "solana"}


@pytest.mark.asyncio
async def test_get_defi_stats(config):
    manager, _ = make_manager(config, lambda request: rest_data({
        "totalValueLocked": "1000000", "totalVolume24h": "25000", "totalFees24h": "75",
        "activeUsers": 420, "totalPools": 12, "averageAPY": 9.5,
    }))

    stats = await manager.get_defi_stats()

    assert stats.total_value_locked == "1000000"
    assert stats.total_volume24h == "25000"
    assert stats.total_fees24h == "75"
    assert stats.average_apy == 9.5


@pytest.mark.asyncio
async def test_missing_signature_in_response(config):
    manager, _ = make_manager(config, lambda request: rest_data({"success": True}))

    with pytest.raises(ValidationError):
        await manager.stake_tokens(POOL, "5", OWNER)


@pytest.mark.asyncio
async def test_unexpected_failure_uses_operation_code(config, monkeypatch):
    manager, _ = make_manager(config, lambda request: rest_data(SIGNED))

    async def broken(*args, **kwargs):
        raise RuntimeError("socket closed")

    monkeypatch.setattr(manager, "_make_request", broken)

    with pytest.raises(DeFiError) as exc_info:
        await manager.unstake_tokens(POOL, "5", OWNER)

    assert exc_info.value.code == ErrorCode.UNSTAKE_TOKENS_ERROR
