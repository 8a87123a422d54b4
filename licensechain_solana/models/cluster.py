"""Cluster data model."""

from typing import Optional

from licensechain_solana.models.base import SolanaModel
from licensechain_solana.models.transaction import Commitment


class ClusterInfo(SolanaModel):
    """Endpoints and defaults of a Solana cluster."""
    name: str
    rpc_url: str
    ws_url: str
    explorer_url: str
    commitment: Commitment = "confirmed"
    node_count: Optional[int] = None
