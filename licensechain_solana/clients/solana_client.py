"""Facade client for the LicenseChain Solana SDK.

This module provides a unified client interface composing the Solana RPC
clients and the LicenseChain license, NFT and DeFi managers.
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeVar, Union

import httpx

from licensechain_solana.clients.account_client import AccountClient
from licensechain_solana.clients.cluster_client import ClusterClient
from licensechain_solana.clients.defi_client import Amount, DeFiManager
from licensechain_solana.clients.license_client import LicenseManager
from licensechain_solana.clients.nft_client import MetadataInput, NFTManager
from licensechain_solana.clients.transaction_client import TransactionClient
from licensechain_solana.config import SolanaConfig
from licensechain_solana.logging_config import get_logger
from licensechain_solana.models.account import Account, Program, StakeAccount, TokenAccount, ValidatorInfo
from licensechain_solana.models.cluster import ClusterInfo
from licensechain_solana.models.defi import DeFiPosition
from licensechain_solana.models.license import License
from licensechain_solana.models.nft import NFT
from licensechain_solana.models.transaction import Block, Commitment, Transaction
from licensechain_solana.utils.errors import ensure_sufficient_funds
from licensechain_solana.utils.retry import retry

T = TypeVar("T")

# Get logger
logger = get_logger(__name__)


class LicenseChainSolana:
    """Unified client for Solana RPC queries and LicenseChain resources.

    The specialized clients share one immutable configuration; the managers
    are also reachable directly as ``licenses``, ``nfts`` and ``defi``.

    Example:
        >>> config = SolanaConfig(api_key="...")
        >>> async with LicenseChainSolana(config) as client:
        ...     balance = await client.get_balance(wallet)
    """

    def __init__(self, config: SolanaConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the client.

        Args:
            config: SDK configuration
            transport: Optional httpx transport shared by every sub-client
        """
        self.config = config

        # Create specialized clients
        self.account = AccountClient(config, transport)
        self.transaction = TransactionClient(config, transport)
        self.cluster = ClusterClient(config, transport)
        self.licenses = LicenseManager(config, transport)
        self.nfts = NFTManager(config, transport)
        self.defi = DeFiManager(config, transport)

        logger.debug(f"LicenseChainSolana initialized for {config.rpc_url}")

    # Account management

    async def get_account(self, public_key: str) -> Account:
        return await self.account.get_account(public_key)

    async def get_balance(self, public_key: str) -> int:
        return await self.account.get_balance(public_key)

    async def get_token_accounts(self, owner: str, mint: Optional[str] = None) -> List[TokenAccount]:
        return await self.account.get_token_accounts(owner, mint)

    async def get_program(self, program_id: str) -> Program:
        return await self.account.get_program(program_id)

    async def get_stake_accounts(self, owner: str) -> List[StakeAccount]:
        return await self.account.get_stake_accounts(owner)

    async def check_balance(self, public_key: str, required: int) -> int:
        """Fetch a balance and make sure it covers ``required`` lamports.

        Returns:
            The balance in lamports

        Raises:
            InsufficientFundsError: If the balance is lower than required
        """
        balance = await self.get_balance(public_key)
        ensure_sufficient_funds(required, balance)
        return balance

    # Transaction management

    async def send_transaction(self, transaction: Union[str, bytes], skip_preflight: bool = False) -> Transaction:
        return await self.transaction.send_transaction(transaction, skip_preflight)

    async def confirm_transaction(self, signature: str, commitment: Commitment = "confirmed") -> Transaction:
        return await self.transaction.confirm_transaction(signature, commitment)

    async def get_transaction(self, signature: str) -> Transaction:
        return await self.transaction.get_transaction(signature)

    async def get_block(self, slot: int) -> Block:
        return await self.transaction.get_block(slot)

    async def get_latest_blockhash(self) -> str:
        return await self.transaction.get_latest_blockhash()

    # Cluster information

    async def get_cluster_info(self) -> ClusterInfo:
        return await self.cluster.get_cluster_info()

    async def get_validators(self) -> List[ValidatorInfo]:
        return await self.cluster.get_validators()

    # License management (delegated to the license manager)

    async def create_license(
        self,
        user_id: str,
        product_id: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> License:
        return await self.licenses.create_license(user_id, product_id, metadata)

    async def validate_license(self, license_key: str) -> bool:
        return await self.licenses.validate_license(license_key)

    async def get_license(self, license_id: str) -> License:
        return await self.licenses.get_license(license_id)

    async def update_license(self, license_id: str, updates: Dict[str, Any]) -> License:
        return await self.licenses.update_license(license_id, updates)

    async def revoke_license(self, license_id: str) -> bool:
        return await self.licenses.revoke_license(license_id)

    # NFT management (delegated to the NFT manager)

    async def create_nft(self, metadata: MetadataInput, owner: str) -> NFT:
        return await self.nfts.create_nft(metadata, owner)

    async def get_nft(self, mint: str) -> NFT:
        return await self.nfts.get_nft(mint)

    async def transfer_nft(self, mint: str, from_owner: str, to_owner: str) -> str:
        return await self.nfts.transfer_nft(mint, from_owner, to_owner)

    async def get_owner_nfts(self, owner: str) -> List[NFT]:
        return await self.nfts.get_owner_nfts(owner)

    # DeFi management (delegated to the DeFi manager)

    async def get_defi_positions(self, owner: str) -> List[DeFiPosition]:
        return await self.defi.get_positions(owner)

    async def add_liquidity(self, pool_address: str, amount_a: Amount, amount_b: Amount, owner: str) -> str:
        return await self.defi.add_liquidity(pool_address, amount_a, amount_b, owner)

    async def remove_liquidity(self, pool_address: str, lp_tokens: Amount, owner: str) -> str:
        return await self.defi.remove_liquidity(pool_address, lp_tokens, owner)

    # Utilities

    async def with_retry(self, operation: Callable[[], Awaitable[T]], base_delay: float = 1000) -> T:
        """Run an operation with the configured number of attempts.

        Args:
            operation: Zero-argument callable returning an awaitable
            base_delay: Delay unit in milliseconds

        Example:
            >>> await client.with_retry(lambda: client.get_latest_blockhash())
        """
        return await retry(operation, max_attempts=self.config.retries, base_delay=base_delay)

    async def close(self):
        """Close the client and all specialized clients."""
        for client in (self.account, self.transaction, self.cluster, self.licenses, self.nfts, self.defi):
            await client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
