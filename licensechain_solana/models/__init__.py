"""Typed models for RPC and REST payloads."""

from licensechain_solana.models.base import SignatureResult, SolanaModel, SuccessResult, ValidityResult
from licensechain_solana.models.account import Account, Program, StakeAccount, TokenAccount, ValidatorInfo
from licensechain_solana.models.transaction import Block, BlockReward, Commitment, Transaction
from licensechain_solana.models.cluster import ClusterInfo
from licensechain_solana.models.license import (
    LICENSE_TRANSITIONS,
    License,
    LicenseStats,
    LicenseStatus,
    can_transition,
)
from licensechain_solana.models.nft import (
    NFT,
    MarketplaceListing,
    NFTAttribute,
    NFTCollection,
    NFTCreator,
    NFTMetadata,
    NFTProperties,
    NFTStats,
)
from licensechain_solana.models.defi import (
    DeFiPosition,
    DeFiStats,
    LendingPool,
    LiquidityPool,
    StakingPool,
    YieldFarm,
)

__all__ = [
    "SolanaModel",
    "SuccessResult",
    "ValidityResult",
    "SignatureResult",
    "Account",
    "TokenAccount",
    "Program",
    "StakeAccount",
    "ValidatorInfo",
    "Commitment",
    "Transaction",
    "Block",
    "BlockReward",
    "ClusterInfo",
    "License",
    "LicenseStatus",
    "LicenseStats",
    "LICENSE_TRANSITIONS",
    "can_transition",
    "NFT",
    "NFTAttribute",
    "NFTCollection",
    "NFTCreator",
    "NFTMetadata",
    "NFTProperties",
    "MarketplaceListing",
    "NFTStats",
    "DeFiPosition",
    "DeFiStats",
    "LendingPool",
    "LiquidityPool",
    "StakingPool",
    "YieldFarm",
]
