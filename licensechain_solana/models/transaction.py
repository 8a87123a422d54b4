"""
Transaction and block data models.
"""

from typing import Any, List, Literal, Optional

from pydantic import Field

from licensechain_solana.models.base import SolanaModel

Commitment = Literal["processed", "confirmed", "finalized"]


class Transaction(SolanaModel):
    """
    Point-in-time view of a transaction.

    Produced by send, confirm and get calls and never updated afterwards;
    query again for a newer status.
    """
    signature: str
    slot: int = 0
    block_time: Optional[int] = None
    confirmation_status: Commitment = "processed"
    err: Optional[Any] = None
    memo: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """Whether the cluster reported no execution error."""
        return self.err is None


class BlockReward(SolanaModel):
    """Reward credited while producing a block."""
    pubkey: str
    lamports: int
    post_balance: int
    reward_type: Optional[str] = None
    commission: Optional[int] = None


class Block(SolanaModel):
    """Confirmed block with its transaction signatures."""
    slot: int
    blockhash: str
    previous_blockhash: str
    parent_slot: int
    signatures: List[str] = Field(default_factory=list)
    rewards: List[BlockReward] = Field(default_factory=list)
    block_time: Optional[int] = None
    block_height: Optional[int] = None

    @property
    def transaction_count(self) -> int:
        return len(self.signatures)
