"""Cluster and validator RPC client operations."""

from typing import Any, List

from licensechain_solana.clients.base_client import BaseSolanaClient
from licensechain_solana.config import find_cluster
from licensechain_solana.logging_config import get_logger
from licensechain_solana.models.account import ValidatorInfo
from licensechain_solana.models.cluster import ClusterInfo
from licensechain_solana.utils.error_handling import handle_async_exceptions
from licensechain_solana.utils.errors import ErrorCode, RPCError, SolanaError

# Get logger
logger = get_logger(__name__)

DEFAULT_EXPLORER_URL = "https://explorer.solana.com"


class ClusterClient(BaseSolanaClient):
    """Client for cluster-wide queries."""

    def _configured_cluster(self) -> ClusterInfo:
        """Describe the cluster behind the configured RPC URL."""
        preset = find_cluster(self.config.rpc_url)
        if preset is not None:
            return preset

        rpc_url = self.config.rpc_url
        if rpc_url.startswith("https://"):
            ws_url = "wss://" + rpc_url[len("https://"):]
        else:
            ws_url = "ws://" + rpc_url[len("http://"):]
        return ClusterInfo(
            name="Custom",
            rpc_url=rpc_url,
            ws_url=ws_url,
            explorer_url=DEFAULT_EXPLORER_URL,
            commitment=self.config.commitment,
        )

    @handle_async_exceptions(SolanaError, "Failed to get cluster info", code=ErrorCode.CLUSTER_ERROR)
    async def get_cluster_info(self) -> ClusterInfo:
        """Describe the configured cluster and count its nodes.

        Returns:
            ClusterInfo with ``node_count`` taken from getClusterNodes
        """
        nodes = await self._make_request("getClusterNodes")
        if not isinstance(nodes, list):
            raise RPCError("getClusterNodes returned a non-list result")

        return self._configured_cluster().model_copy(update={"node_count": len(nodes)})

    @handle_async_exceptions(SolanaError, "Failed to get validators", code=ErrorCode.VALIDATORS_ERROR)
    async def get_validators(self) -> List[ValidatorInfo]:
        """List current and delinquent vote accounts.

        Returns:
            Current validators followed by delinquent ones
        """
        result = await self._make_request("getVoteAccounts", [self._options()])

        validators = [
            self._validator(entry, delinquent=False)
            for entry in self._get_path(result, "current")
        ]
        validators.extend(
            self._validator(entry, delinquent=True)
            for entry in self._get_path(result, "delinquent")
        )
        logger.debug(f"Fetched {len(validators)} vote accounts")
        return validators

    def _validator(self, entry: Any, delinquent: bool) -> ValidatorInfo:
        epoch_credits = entry.get("epochCredits") or []
        # Each entry is [epoch, credits, previous_credits]
        credits = epoch_credits[-1][1] if epoch_credits else 0

        return self._decode(ValidatorInfo, {
            "identity": self._get_path(entry, "nodePubkey"),
            "vote_account": self._get_path(entry, "votePubkey"),
            "commission": self._get_path(entry, "commission"),
            "last_vote": self._get_path(entry, "lastVote"),
            "root_slot": entry.get("rootSlot"),
            "credits": credits,
            "epoch_credits": epoch_credits,
            "activated_stake": self._get_path(entry, "activatedStake"),
            "delinquent": delinquent,
        })
