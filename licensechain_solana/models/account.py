"""
Account data models.

This module defines the typed projections of account-shaped RPC results:
plain accounts, SPL token accounts, program accounts, stake accounts and
vote accounts.
"""

from typing import List, Literal, Optional

from pydantic import Field

from licensechain_solana.models.base import SolanaModel
from licensechain_solana.utils.units import format_lamports


class Account(SolanaModel):
    """
    Snapshot of one account as returned by getAccountInfo.

    ``balance`` and ``lamports`` carry the same value; ``balance`` is kept
    for callers that think in balances rather than raw lamports.
    """
    public_key: str
    balance: int
    is_executable: bool
    owner: str
    lamports: int

    @property
    def sol_balance(self) -> str:
        """Balance formatted as a SOL amount string."""
        return format_lamports(self.lamports)


class TokenAccount(SolanaModel):
    """SPL token account owned by a wallet."""
    address: str
    mint: str
    owner: str
    amount: str = Field(..., description="Raw token amount as a decimal string")
    decimals: int
    state: Literal["initialized", "frozen"]


class Program(SolanaModel):
    """Program account."""
    program_id: str
    data: bytes
    owner: str
    executable: bool
    rent_epoch: Optional[int] = None


class StakeAccount(SolanaModel):
    """Stake account and its delegation, when delegated."""
    address: str
    stake: int
    activation_epoch: Optional[int] = None
    deactivation_epoch: Optional[int] = None
    voter: Optional[str] = None
    withdrawer: str
    staker: str
    rent_exempt_reserve: int

    @property
    def is_delegated(self) -> bool:
        """Whether the stake is delegated to a vote account."""
        return self.voter is not None


class ValidatorInfo(SolanaModel):
    """Vote account summary from getVoteAccounts."""
    identity: str
    vote_account: str
    commission: int
    last_vote: int
    root_slot: Optional[int] = None
    credits: int = 0
    epoch_credits: List[List[int]] = Field(default_factory=list)
    activated_stake: int
    version: Optional[str] = None
    delinquent: bool = False
