"""Transaction and block RPC client operations.

This module provides specialized client functionality for sending and
confirming transactions and for reading transactions, blocks and blockhashes.
"""

import base64
from typing import Any, Dict, List, Optional, Union

from licensechain_solana.clients.base_client import BaseSolanaClient
from licensechain_solana.logging_config import get_logger
from licensechain_solana.models.transaction import Block, Commitment, Transaction
from licensechain_solana.utils.error_handling import handle_async_exceptions
from licensechain_solana.utils.errors import (
    ErrorCode,
    RPCError,
    SolanaError,
    TransactionError,
    ValidationError,
)
from licensechain_solana.utils.validation import validate_transaction_signature

# Get logger
logger = get_logger(__name__)

LOG_MEMO_PREFIX = "Program log: "


def extract_memo(log_messages: Optional[List[str]]) -> Optional[str]:
    """Return the first program log line without its prefix.

    Args:
        log_messages: Log messages from the transaction meta

    Returns:
        The memo text, or None when no program logged anything
    """
    for message in log_messages or []:
        if isinstance(message, str) and message.startswith(LOG_MEMO_PREFIX):
            return message[len(LOG_MEMO_PREFIX):]
    return None


def _require_signature(signature: str) -> str:
    if not validate_transaction_signature(signature):
        raise ValidationError("Invalid transaction signature", details={"signature": signature})
    return signature


class TransactionClient(BaseSolanaClient):
    """Client for transaction-related operations."""

    def _history_commitment(self) -> str:
        # getTransaction and getBlock reject "processed"
        return "confirmed" if self.config.commitment == "processed" else self.config.commitment

    @handle_async_exceptions(TransactionError, "Failed to send transaction")
    async def send_transaction(
        self,
        transaction: Union[str, bytes],
        skip_preflight: bool = False
    ) -> Transaction:
        """Submit a signed, serialized transaction.

        Args:
            transaction: Signed transaction as raw bytes or a base64 string
            skip_preflight: Skip the node's preflight simulation

        Returns:
            Transaction in the ``processed`` state; confirm it to follow progress
        """
        if isinstance(transaction, (bytes, bytearray)):
            transaction = base64.b64encode(transaction).decode("ascii")
        if not transaction or not isinstance(transaction, str):
            raise ValidationError("Serialized transaction is required")

        result = await self._make_request(
            "sendTransaction",
            [
                transaction,
                {
                    "encoding": "base64",
                    "skipPreflight": skip_preflight,
                    "preflightCommitment": self.config.commitment,
                }
            ]
        )
        if not isinstance(result, str):
            raise RPCError("sendTransaction returned no signature", details={"result": result})

        logger.debug(f"Submitted transaction {result}")
        return Transaction(signature=result, confirmation_status="processed")

    @handle_async_exceptions(
        TransactionError,
        "Failed to confirm transaction",
        context={"signature": "signature"}
    )
    async def confirm_transaction(
        self,
        signature: str,
        commitment: Commitment = "confirmed"
    ) -> Transaction:
        """Look up the current status of a transaction.

        The returned status is the one reported by the cluster; ``commitment``
        is used only when the cluster omits it.

        Args:
            signature: Transaction signature
            commitment: Fallback confirmation status

        Returns:
            Transaction snapshot

        Raises:
            TransactionError: If the cluster does not know the signature
        """
        signature = _require_signature(signature)

        result = await self._make_request(
            "getSignatureStatuses",
            [[signature], {"searchTransactionHistory": True}]
        )
        statuses = self._value(result, "getSignatureStatuses")
        if statuses is None:
            raise TransactionError("Transaction not found", signature=signature)
        status = self._get_path(statuses, 0)
        if status is None:
            raise TransactionError("Transaction not found", signature=signature)

        return self._decode(Transaction, {
            "signature": signature,
            "slot": status.get("slot") or 0,
            "confirmation_status": status.get("confirmationStatus") or commitment,
            "err": status.get("err"),
        })

    @handle_async_exceptions(
        TransactionError,
        "Failed to get transaction",
        context={"signature": "signature"}
    )
    async def get_transaction(self, signature: str) -> Transaction:
        """Get a confirmed transaction.

        Args:
            signature: Transaction signature

        Returns:
            Transaction snapshot with the first program log line as memo

        Raises:
            TransactionError: If the transaction is not found
        """
        signature = _require_signature(signature)

        result = await self._make_request(
            "getTransaction",
            [
                signature,
                {
                    "encoding": "json",
                    "maxSupportedTransactionVersion": 0,
                    "commitment": self._history_commitment(),
                }
            ]
        )
        if result is None:
            raise TransactionError("Transaction not found", signature=signature)

        meta: Dict[str, Any] = result.get("meta") or {}
        return self._decode(Transaction, {
            "signature": signature,
            "slot": self._get_path(result, "slot"),
            "block_time": result.get("blockTime"),
            "confirmation_status": self._history_commitment(),
            "err": meta.get("err"),
            "memo": extract_memo(meta.get("logMessages")),
        })

    @handle_async_exceptions(SolanaError, "Failed to get block", code=ErrorCode.BLOCK_ERROR)
    async def get_block(self, slot: int) -> Block:
        """Get a confirmed block with its transaction signatures.

        Args:
            slot: Slot number

        Returns:
            Block

        Raises:
            SolanaError: With code BLOCK_NOT_FOUND if the slot has no block
        """
        if not isinstance(slot, int) or isinstance(slot, bool) or slot < 0:
            raise ValidationError("Slot must be a non-negative integer", details={"slot": slot})

        result = await self._make_request(
            "getBlock",
            [
                slot,
                {
                    "encoding": "json",
                    "transactionDetails": "signatures",
                    "rewards": True,
                    "maxSupportedTransactionVersion": 0,
                    "commitment": self._history_commitment(),
                }
            ]
        )
        if result is None:
            raise SolanaError("Block not found", code=ErrorCode.BLOCK_NOT_FOUND, details={"slot": slot})
        if not isinstance(result, dict):
            raise RPCError("getBlock returned a malformed block", details={"slot": slot})

        return self._decode(Block, {
            **result,
            "slot": slot,
            "signatures": result.get("signatures") or [],
            "rewards": result.get("rewards") or [],
        })

    @handle_async_exceptions(SolanaError, "Failed to get latest blockhash", code=ErrorCode.BLOCKHASH_ERROR)
    async def get_latest_blockhash(self) -> str:
        """Get the latest blockhash.

        Returns:
            The blockhash as a base58 string
        """
        result = await self._make_request("getLatestBlockhash", [self._options()])
        value = self._value(result, "getLatestBlockhash")
        if value is None:
            raise SolanaError("Latest blockhash not available", code=ErrorCode.BLOCKHASH_ERROR)
        blockhash = self._get_path(value, "blockhash")
        if not isinstance(blockhash, str):
            raise RPCError("getLatestBlockhash returned a malformed blockhash")
        return blockhash
