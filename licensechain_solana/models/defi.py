"""
DeFi data models.

Read-only projections of pools and positions tracked by the LicenseChain
backend. Token amounts are decimal strings to avoid float rounding; rates and
APYs are plain numbers in percent.
"""

from typing import Literal, Optional

from pydantic import Field

from licensechain_solana.models.base import SolanaModel


class DeFiPosition(SolanaModel):
    protocol: str
    position_type: Literal["liquidity", "lending", "staking", "farming"]
    amount: str
    value: str
    apy: Optional[float] = None
    rewards: Optional[str] = None
    pool_address: Optional[str] = None
    token_mint: Optional[str] = None


class LiquidityPool(SolanaModel):
    address: str
    token_a: str
    token_b: str
    reserve_a: str
    reserve_b: str
    total_supply: str
    fee: float
    apy: float
    volume24h: str = Field(..., alias="volume24h")
    tvl: str


class LendingPool(SolanaModel):
    address: str
    token: str
    total_supply: str
    total_borrowed: str
    utilization_rate: float
    supply_rate: float
    borrow_rate: float
    apy: float
    collateral_factor: float


class StakingPool(SolanaModel):
    address: str
    token: str
    total_staked: str
    reward_rate: str
    apy: float
    lock_period: int
    min_stake: str
    total_rewards: str


class YieldFarm(SolanaModel):
    address: str
    token: str
    reward_token: str
    total_staked: str
    reward_rate: str
    apy: float
    lock_period: int
    min_stake: str
    total_rewards: str


class DeFiStats(SolanaModel):
    total_value_locked: str
    total_volume24h: str = Field(..., alias="totalVolume24h")
    total_fees24h: str = Field(..., alias="totalFees24h")
    active_users: int
    total_pools: int
    average_apy: float = Field(..., alias="averageAPY")
