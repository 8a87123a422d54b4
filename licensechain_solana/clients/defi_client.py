"""DeFi management against the LicenseChain REST backend.

Covers liquidity pools, swaps, lending, staking and yield farming. Pool and
position data are read-only projections; every mutating call returns the
signature of the transaction the backend submitted.
"""

import re
from typing import Any, Dict, List, Union

from licensechain_solana.clients.base_client import BaseRestClient
from licensechain_solana.logging_config import get_logger, log_with_context
from licensechain_solana.models.base import SignatureResult
from licensechain_solana.models.defi import (
    DeFiPosition,
    DeFiStats,
    LendingPool,
    LiquidityPool,
    StakingPool,
    YieldFarm,
)
from licensechain_solana.utils.error_handling import handle_async_exceptions
from licensechain_solana.utils.errors import DeFiError, ErrorCode, ValidationError
from licensechain_solana.utils.validation import require_addresses, require_fields

# Get logger
logger = get_logger(__name__)

# Token amounts in base units or decimal notation, never negative
AMOUNT_PATTERN = re.compile(r"^\d+(\.\d+)?$")

Amount = Union[str, int]


def _amounts(**amounts: Amount) -> Dict[str, str]:
    """Normalize token amounts to positive decimal strings.

    Raises:
        ValidationError: If an amount is not a positive decimal number
    """
    normalized = {}
    for name, value in amounts.items():
        text = str(value) if isinstance(value, int) and not isinstance(value, bool) else value
        if not isinstance(text, str) or not AMOUNT_PATTERN.fullmatch(text) or not text.strip("0."):
            raise ValidationError(f"Invalid amount for {name}", details={name: value})
        normalized[name] = text
    return normalized


class DeFiManager(BaseRestClient):
    """Manager for the ``/defi`` resource family."""

    async def _submit(self, endpoint: str, **fields: Any) -> str:
        data = await self._make_request("POST", endpoint, json=self._body(**fields))
        signature = self._decode(SignatureResult, data).transaction_signature
        log_with_context(logger, "debug", "DeFi transaction submitted", endpoint=endpoint, signature=signature)
        return signature

    # Positions

    @handle_async_exceptions(DeFiError, "Failed to get DeFi positions", code=ErrorCode.DEFI_POSITIONS_ERROR)
    async def get_positions(self, owner: str) -> List[DeFiPosition]:
        """Get all DeFi positions held by a wallet.

        Args:
            owner: Wallet address

        Returns:
            Liquidity, lending, staking and farming positions
        """
        require_fields("Owner address is required", owner=owner)
        require_addresses("Invalid owner address", owner=owner)

        data = await self._make_request("GET", f"/defi/positions/{owner}")
        return self._decode_list(DeFiPosition, data)

    # Liquidity pools

    @handle_async_exceptions(DeFiError, "Failed to get liquidity pools", code=ErrorCode.LIQUIDITY_POOLS_ERROR)
    async def get_liquidity_pools(self) -> List[LiquidityPool]:
        data = await self._make_request("GET", "/defi/liquidity-pools")
        return self._decode_list(LiquidityPool, data)

    @handle_async_exceptions(DeFiError, "Failed to add liquidity", code=ErrorCode.ADD_LIQUIDITY_ERROR)
    async def add_liquidity(self, pool_address: str, amount_a: Amount, amount_b: Amount, owner: str) -> str:
        """Deposit both tokens of a pair into a liquidity pool.

        Args:
            pool_address: Pool address
            amount_a: Amount of the pool's first token
            amount_b: Amount of the pool's second token
            owner: Depositing wallet

        Returns:
            Transaction signature
        """
        require_fields(
            "Pool address, amounts, and owner are required",
            pool_address=pool_address, amount_a=amount_a, amount_b=amount_b, owner=owner
        )
        require_addresses(pool_address=pool_address, owner=owner)
        amounts = _amounts(amountA=amount_a, amountB=amount_b)

        return await self._submit(f"/defi/liquidity-pools/{pool_address}/add", owner=owner, **amounts)

    @handle_async_exceptions(DeFiError, "Failed to remove liquidity", code=ErrorCode.REMOVE_LIQUIDITY_ERROR)
    async def remove_liquidity(self, pool_address: str, lp_tokens: Amount, owner: str) -> str:
        require_fields(
            "Pool address, LP tokens, and owner are required",
            pool_address=pool_address, lp_tokens=lp_tokens, owner=owner
        )
        require_addresses(pool_address=pool_address, owner=owner)
        amounts = _amounts(lpTokens=lp_tokens)

        return await self._submit(f"/defi/liquidity-pools/{pool_address}/remove", owner=owner, **amounts)

    @handle_async_exceptions(DeFiError, "Failed to swap tokens", code=ErrorCode.SWAP_ERROR)
    async def swap_tokens(
        self,
        input_mint: str,
        output_mint: str,
        amount_in: Amount,
        min_amount_out: Amount,
        owner: str
    ) -> str:
        """Swap one token for another.

        Args:
            input_mint: Mint of the token sold
            output_mint: Mint of the token bought
            amount_in: Amount sold
            min_amount_out: Least acceptable amount bought
            owner: Swapping wallet

        Returns:
            Transaction signature
        """
        require_fields(
            "All swap parameters are required",
            input_mint=input_mint, output_mint=output_mint,
            amount_in=amount_in, min_amount_out=min_amount_out, owner=owner
        )
        require_addresses(input_mint=input_mint, output_mint=output_mint, owner=owner)
        amounts = _amounts(amountIn=amount_in, minAmountOut=min_amount_out)

        return await self._submit(
            "/defi/swap",
            inputMint=input_mint,
            outputMint=output_mint,
            owner=owner,
            **amounts
        )

    # Lending

    @handle_async_exceptions(DeFiError, "Failed to get lending pools", code=ErrorCode.LENDING_POOLS_ERROR)
    async def get_lending_pools(self) -> List[LendingPool]:
        data = await self._make_request("GET", "/defi/lending-pools")
        return self._decode_list(LendingPool, data)

    async def _lending_action(self, action: str, pool_address: str, amount: Amount, owner: str) -> str:
        require_fields(
            "Pool address, amount, and owner are required",
            pool_address=pool_address, amount=amount, owner=owner
        )
        require_addresses(pool_address=pool_address, owner=owner)
        amounts = _amounts(amount=amount)

        return await self._submit(f"/defi/lending-pools/{pool_address}/{action}", owner=owner, **amounts)

    @handle_async_exceptions(DeFiError, "Failed to supply liquidity", code=ErrorCode.SUPPLY_LIQUIDITY_ERROR)
    async def supply_liquidity(self, pool_address: str, amount: Amount, owner: str) -> str:
        return await self._lending_action("supply", pool_address, amount, owner)

    @handle_async_exceptions(DeFiError, "Failed to borrow liquidity", code=ErrorCode.BORROW_LIQUIDITY_ERROR)
    async def borrow_liquidity(self, pool_address: str, amount: Amount, owner: str) -> str:
        return await self._lending_action("borrow", pool_address, amount, owner)

    @handle_async_exceptions(DeFiError, "Failed to repay liquidity", code=ErrorCode.REPAY_LIQUIDITY_ERROR)
    async def repay_liquidity(self, pool_address: str, amount: Amount, owner: str) -> str:
        return await self._lending_action("repay", pool_address, amount, owner)

    # Staking

    @handle_async_exceptions(DeFiError, "Failed to get staking pools", code=ErrorCode.STAKING_POOLS_ERROR)
    async def get_staking_pools(self) -> List[StakingPool]:
        data = await self._make_request("GET", "/defi/staking-pools")
        return self._decode_list(StakingPool, data)

    async def _staking_action(self, action: str, pool_address: str, amount: Amount, owner: str) -> str:
        require_fields(
            "Pool address, amount, and owner are required",
            pool_address=pool_address, amount=amount, owner=owner
        )
        require_addresses(pool_address=pool_address, owner=owner)
        amounts = _amounts(amount=amount)

        return await self._submit(f"/defi/staking-pools/{pool_address}/{action}", owner=owner, **amounts)

    @handle_async_exceptions(DeFiError, "Failed to stake tokens", code=ErrorCode.STAKE_TOKENS_ERROR)
    async def stake_tokens(self, pool_address: str, amount: Amount, owner: str) -> str:
        return await self._staking_action("stake", pool_address, amount, owner)

    @handle_async_exceptions(DeFiError, "Failed to unstake tokens", code=ErrorCode.UNSTAKE_TOKENS_ERROR)
    async def unstake_tokens(self, pool_address: str, amount: Amount, owner: str) -> str:
        return await self._staking_action("unstake", pool_address, amount, owner)

    @handle_async_exceptions(DeFiError, "Failed to claim rewards", code=ErrorCode.CLAIM_REWARDS_ERROR)
    async def claim_rewards(self, pool_address: str, owner: str) -> str:
        require_fields("Pool address and owner are required", pool_address=pool_address, owner=owner)
        require_addresses(pool_address=pool_address, owner=owner)

        return await self._submit(f"/defi/staking-pools/{pool_address}/claim", owner=owner)

    # Yield farming

    @handle_async_exceptions(DeFiError, "Failed to get yield farms", code=ErrorCode.YIELD_FARMS_ERROR)
    async def get_yield_farms(self) -> List[YieldFarm]:
        data = await self._make_request("GET", "/defi/yield-farms")
        return self._decode_list(YieldFarm, data)

    @handle_async_exceptions(DeFiError, "Failed to farm yield", code=ErrorCode.FARM_YIELD_ERROR)
    async def farm_yield(self, farm_address: str, amount: Amount, owner: str) -> str:
        require_fields(
            "Farm address, amount, and owner are required",
            farm_address=farm_address, amount=amount, owner=owner
        )
        require_addresses(farm_address=farm_address, owner=owner)
        amounts = _amounts(amount=amount)

        return await self._submit(f"/defi/yield-farms/{farm_address}/farm", owner=owner, **amounts)

    @handle_async_exceptions(DeFiError, "Failed to harvest yield", code=ErrorCode.HARVEST_YIELD_ERROR)
    async def harvest_yield(self, farm_address: str, owner: str) -> str:
        require_fields("Farm address and owner are required", farm_address=farm_address, owner=owner)
        require_addresses(farm_address=farm_address, owner=owner)

        return await self._submit(f"/defi/yield-farms/{farm_address}/harvest", owner=owner)

    # Statistics

    @handle_async_exceptions(DeFiError, "Failed to get DeFi stats", code=ErrorCode.DEFI_STATS_ERROR)
    async def get_defi_stats(self) -> DeFiStats:
        data = await self._make_request("GET", "/defi/stats")
        return self._decode(DeFiStats, data)
